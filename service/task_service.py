"""
TaskService

태스크 보상 지급(일회성 / 일일 보너스 / 채널 구독)을 담당합니다.

보상 지급 기록(UserTask)이 중복 지급을 막는 유일한 근거입니다.
잔액 증가와 기록 갱신은 같은 계정 잠금 트랜잭션 안에서 함께 커밋됩니다.

상태 전이 (계정 × 태스크):
    없음/pending → completed   (유일하게 사용하는 전이)
    completed                  일회성 태스크는 종료, 일일 태스크는 다음 날 다시 열림
    rejected                   종료 (지급 불가)
"""
import logging
from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Awaitable, Callable, List, Optional

from tortoise.exceptions import IntegrityError

from config import TASK_CODES
from decorator.retry import retry_on_conflict
from exceptions import (
    AlreadyClaimedError,
    SubscriptionNotVerifiedError,
    TaskAlreadyAssignedError,
    TaskNotFoundError,
    TaskRejectedError,
    TransactionConflictError,
    UpstreamUnavailableError,
)
from models import Task, UserTask, UserTaskStatus
from models.repos import task_repo
from service.account_service import AccountService
from service.economy.ledger import locked_account
from service.economy.money import to_money
from utils.clock import Clock, SYSTEM_CLOCK

logger = logging.getLogger(__name__)

# telegram_id를 받아 구독 여부를 돌려주는 외부 검증기
SubscriptionCheck = Callable[[str], Awaitable[bool]]


@dataclass
class RewardResult:
    """보상 지급 결과"""
    new_balance: Decimal
    reward: Decimal
    task_id: int
    completed_at: datetime


def is_already_claimed(record: Optional[UserTask], task: Task, now: datetime, clock: Clock) -> bool:
    """
    지급 여부 판정

    - 일회성: completed 기록이 있으면 지급됨
    - 일일: completed_at이 오늘(서버 로컬 날짜) 범위 안이면 지급됨
    """
    if record is None or record.status != UserTaskStatus.COMPLETED:
        return False
    if not task.is_daily:
        return True
    if record.completed_at is None:
        return False
    return clock.is_same_day(record.completed_at, now)


class TaskService:
    """태스크 보상 비즈니스 로직"""

    clock: Clock = SYSTEM_CLOCK

    @staticmethod
    async def list_active_tasks() -> List[Task]:
        return await task_repo.find_active_tasks()

    @staticmethod
    async def list_user_tasks(user_id: int) -> List[UserTask]:
        await AccountService.get_account(user_id)
        return await task_repo.get_user_tasks(user_id)

    @staticmethod
    async def assign_task(user_id: int, task_id: int) -> UserTask:
        """
        태스크 할당 (pending 기록 생성)

        Raises:
            AccountNotFoundError: 사용자 없음
            TaskNotFoundError: 태스크 없음 / 비활성
            TaskAlreadyAssignedError: 이미 기록이 있음
        """
        user = await AccountService.get_account(user_id)
        task = await task_repo.find_task_by_id(task_id)
        if not task or not task.is_active:
            raise TaskNotFoundError(task_id)

        if await task_repo.get_grant_record(user.id, task.id):
            raise TaskAlreadyAssignedError(task_id)

        try:
            record = await UserTask.create(user=user, task=task, status=UserTaskStatus.PENDING)
        except IntegrityError:
            raise TaskAlreadyAssignedError(task_id)

        logger.info(f"Assigned task {task_id} to user {user_id}")
        return record

    @staticmethod
    async def credit_task(user_id: int, task_id: int) -> RewardResult:
        """
        태스크 보상 지급 (일회성은 1회, 일일 태스크는 하루 1회)

        Raises:
            TaskNotFoundError: 태스크 없음 / 비활성
            AccountNotFoundError: 사용자 없음
            AlreadyClaimedError: 이미 지급됨
            TaskRejectedError: 거절된 태스크
        """
        task = await task_repo.find_task_by_id(task_id)
        if not task or not task.is_active:
            raise TaskNotFoundError(task_id)
        return await TaskService._grant(user_id, task)

    @staticmethod
    async def claim_daily_bonus(user_id: int) -> RewardResult:
        """
        일일 보너스 지급

        Raises:
            TaskNotFoundError: 일일 보너스 태스크 없음
            AlreadyClaimedError: 오늘 이미 받음
        """
        task = await task_repo.find_task_by_code(TASK_CODES.DAILY_BONUS)
        if not task or not task.is_active:
            raise TaskNotFoundError(TASK_CODES.DAILY_BONUS)
        return await TaskService._grant(user_id, task)

    @staticmethod
    async def claim_channel_subscription(
        user_id: int,
        telegram_id: str,
        check_subscription: SubscriptionCheck
    ) -> RewardResult:
        """
        채널 구독 보상 지급

        구독 확인은 외부 검증기에 맡깁니다. 검증기 장애(UpstreamUnavailableError)는
        오류가 아니라 "아직 조건 미충족"으로 취급하며 지급 기록을 건드리지 않습니다.

        Raises:
            SubscriptionNotVerifiedError: 구독 미확인 또는 검증기 장애
            TaskNotFoundError: 구독 태스크 없음
            AlreadyClaimedError: 이미 받음
        """
        task = await task_repo.find_task_by_code(TASK_CODES.CHANNEL_SUBSCRIPTION)
        if not task or not task.is_active:
            raise TaskNotFoundError(TASK_CODES.CHANNEL_SUBSCRIPTION)

        try:
            subscribed = await check_subscription(str(telegram_id))
        except UpstreamUnavailableError as e:
            logger.warning(f"Subscription check unavailable for user {user_id}: {e.reason or e.message}")
            raise SubscriptionNotVerifiedError(upstream_failed=True) from e

        if not subscribed:
            raise SubscriptionNotVerifiedError()

        return await TaskService._grant(user_id, task)

    @staticmethod
    @retry_on_conflict()
    async def _grant(user_id: int, task: Task) -> RewardResult:
        """계정 잠금 안에서 지급 여부 확인 → 잔액 증가 → 기록 갱신"""
        clock = TaskService.clock
        now = clock.now()
        reward = to_money(task.reward)

        try:
            async with locked_account(user_id) as (conn, user):
                record = await task_repo.get_grant_record(user.id, task.id, using_db=conn)

                if record and record.status == UserTaskStatus.REJECTED:
                    raise TaskRejectedError(task.id)
                if is_already_claimed(record, task, now, clock):
                    raise AlreadyClaimedError(task.id, daily=task.is_daily)

                user.balance = to_money(user.balance_value + reward)
                await user.save(using_db=conn, update_fields=["balance", "updated_at"])

                if record:
                    record.status = UserTaskStatus.COMPLETED
                    record.completed_at = now
                    await record.save(using_db=conn, update_fields=["status", "completed_at"])
                else:
                    await UserTask.create(
                        user_id=user.id,
                        task_id=task.id,
                        status=UserTaskStatus.COMPLETED,
                        completed_at=now,
                        using_db=conn
                    )
        except IntegrityError as e:
            # 같은 (user, task) 기록이 동시에 생성됨 → 재시도하면 선행 조건에서 걸러짐
            raise TransactionConflictError(str(e)) from e

        logger.info(
            f"Credited task {task.id} ({task.code}) to user {user_id}: "
            f"+{reward} -> {user.balance}"
        )
        return RewardResult(
            new_balance=user.balance,
            reward=reward,
            task_id=task.id,
            completed_at=now,
        )
