"""
태스크 및 보상 지급 기록 모델
"""
from enum import Enum

from tortoise import fields, models


class TaskRecurrence(str, Enum):
    """보상 반복 주기"""
    ONCE = "once"      # 계정당 1회
    DAILY = "daily"    # 하루 1회 (서버 로컬 날짜 기준)


class TaskStatus(str, Enum):
    ACTIVE = "active"
    INACTIVE = "inactive"


class UserTaskStatus(str, Enum):
    """계정별 태스크 진행 상태"""
    PENDING = "pending"        # 할당됨
    COMPLETED = "completed"    # 보상 지급 완료
    REJECTED = "rejected"      # 거절 (종료 상태)


class Task(models.Model):
    """보상 태스크 정의"""

    id = fields.IntField(pk=True)
    code = fields.CharField(max_length=64, unique=True)
    title = fields.CharField(max_length=255)
    description = fields.CharField(max_length=255, null=True)
    reward = fields.DecimalField(max_digits=12, decimal_places=2)
    recurrence = fields.CharEnumField(TaskRecurrence, default=TaskRecurrence.ONCE)
    status = fields.CharEnumField(TaskStatus, default=TaskStatus.ACTIVE)

    created_at = fields.DatetimeField(auto_now_add=True)
    updated_at = fields.DatetimeField(auto_now=True)

    class Meta:
        table = "tasks"

    @property
    def is_active(self) -> bool:
        return self.status == TaskStatus.ACTIVE

    @property
    def is_daily(self) -> bool:
        return self.recurrence == TaskRecurrence.DAILY


class UserTask(models.Model):
    """
    보상 지급 기록 (중복 지급 방지용 유일한 근거)

    (user, task) 당 한 행. 일일 태스크는 같은 행을 재사용하며
    completed_at이 오늘 범위에 있으면 이미 받은 것으로 봅니다.
    """

    id = fields.IntField(pk=True)
    user = fields.ForeignKeyField(
        "models.User",
        related_name="user_tasks",
        on_delete=fields.CASCADE
    )
    task = fields.ForeignKeyField(
        "models.Task",
        related_name="user_tasks",
        on_delete=fields.CASCADE
    )
    status = fields.CharEnumField(UserTaskStatus, default=UserTaskStatus.PENDING)
    completed_at = fields.DatetimeField(null=True)

    class Meta:
        table = "user_tasks"
        unique_together = [("user", "task")]
