"""
Friend Repository

친구 관계 데이터 접근 레이어입니다.
"""
from typing import List, Optional

from tortoise.backends.base.client import BaseDBAsyncClient
from tortoise.expressions import Q

from models import Friend, FriendStatus


async def find_edge_between(
    user_id: int,
    other_id: int,
    using_db: Optional[BaseDBAsyncClient] = None
) -> Optional[Friend]:
    """방향과 무관하게 두 계정 사이의 관계 행 조회"""
    return await Friend.filter(
        Q(user_id=user_id, friend_id=other_id) | Q(user_id=other_id, friend_id=user_id)
    ).using_db(using_db).order_by("id").first()


async def get_accepted_friend_ids(
    user_id: int,
    using_db: Optional[BaseDBAsyncClient] = None
) -> List[int]:
    """
    수락된 친구 계정 ID 목록 (중복 제거)

    한쪽 방향으로만 저장된 행과 예전 방식의 양방향 행을 모두 한 명으로 셉니다.
    """
    rows = await Friend.filter(
        Q(user_id=user_id) | Q(friend_id=user_id),
        status=FriendStatus.ACCEPTED
    ).using_db(using_db).values_list("user_id", "friend_id")

    friend_ids = {sender if receiver == user_id else receiver for sender, receiver in rows}
    friend_ids.discard(user_id)
    return sorted(friend_ids)


async def count_accepted_friends(
    user_id: int,
    using_db: Optional[BaseDBAsyncClient] = None
) -> int:
    return len(await get_accepted_friend_ids(user_id, using_db=using_db))


async def get_pending_requests_for(user_id: int) -> List[Friend]:
    """user_id가 수신자인 대기 중 요청"""
    return await Friend.filter(
        friend_id=user_id,
        status=FriendStatus.PENDING
    ).order_by("-created_at").prefetch_related("user")
