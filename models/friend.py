"""
친구 관계 모델
"""
from enum import Enum

from tortoise import fields, models


class FriendStatus(str, Enum):
    """친구 요청 상태"""
    PENDING = "pending"      # 수락 대기
    ACCEPTED = "accepted"    # 친구
    REJECTED = "rejected"    # 거절됨


class Friend(models.Model):
    """
    친구 관계 (요청자 → 수신자)

    하나의 친구 관계는 방향과 무관하게 한 행으로 표현됩니다.
    수익 계산 시에는 양방향 모두 조회하여 무방향으로 취급합니다.
    """

    id = fields.IntField(pk=True)
    user = fields.ForeignKeyField(
        "models.User",
        related_name="sent_friend_requests",
        on_delete=fields.CASCADE
    )
    friend = fields.ForeignKeyField(
        "models.User",
        related_name="received_friend_requests",
        on_delete=fields.CASCADE
    )
    status = fields.CharEnumField(FriendStatus, default=FriendStatus.PENDING)

    created_at = fields.DatetimeField(auto_now_add=True)
    updated_at = fields.DatetimeField(auto_now=True)

    class Meta:
        table = "friends"
        unique_together = [("user", "friend")]
