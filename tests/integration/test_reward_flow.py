"""
태스크 보상 / 일일 보너스 / 채널 구독 보상 통합 테스트
"""
from decimal import Decimal
from unittest.mock import AsyncMock

import pytest

from config import TASK_CODES
from exceptions import (
    AccountNotFoundError,
    AlreadyClaimedError,
    SubscriptionNotVerifiedError,
    TaskAlreadyAssignedError,
    TaskNotFoundError,
    TaskRejectedError,
    UpstreamUnavailableError,
)
from models import TaskRecurrence, TaskStatus, User, UserTask, UserTaskStatus
from service.task_service import TaskService

pytestmark = pytest.mark.integration


class TestCreditTask:
    @pytest.mark.asyncio
    async def test_credits_once(self, account_factory, task_factory, fixed_clock):
        user = await account_factory(balance="100.00")
        task = await task_factory(reward="25.50")

        result = await TaskService.credit_task(user.id, task.id)

        assert result.reward == Decimal("25.50")
        assert result.new_balance == Decimal("125.50")
        assert result.completed_at == fixed_clock.now()

        with pytest.raises(AlreadyClaimedError):
            await TaskService.credit_task(user.id, task.id)

        assert (await User.get(id=user.id)).balance == Decimal("125.50")
        assert await UserTask.filter(user_id=user.id, task_id=task.id).count() == 1

    @pytest.mark.asyncio
    async def test_one_time_task_stays_claimed_next_day(self, account_factory, task_factory, fixed_clock):
        user = await account_factory()
        task = await task_factory()

        await TaskService.credit_task(user.id, task.id)
        fixed_clock.advance(days=3)

        with pytest.raises(AlreadyClaimedError):
            await TaskService.credit_task(user.id, task.id)

    @pytest.mark.asyncio
    async def test_pending_record_is_completed(self, account_factory, task_factory, fixed_clock):
        user = await account_factory()
        task = await task_factory(reward="10")

        await TaskService.assign_task(user.id, task.id)
        await TaskService.credit_task(user.id, task.id)

        record = await UserTask.get(user_id=user.id, task_id=task.id)
        assert record.status == UserTaskStatus.COMPLETED
        assert record.completed_at is not None

    @pytest.mark.asyncio
    async def test_rejected_record_is_terminal(self, account_factory, task_factory, fixed_clock):
        user = await account_factory(balance="100.00")
        task = await task_factory()
        await UserTask.create(user=user, task=task, status=UserTaskStatus.REJECTED)

        with pytest.raises(TaskRejectedError):
            await TaskService.credit_task(user.id, task.id)

        assert (await User.get(id=user.id)).balance == Decimal("100.00")

    @pytest.mark.asyncio
    async def test_inactive_task(self, account_factory, task_factory, fixed_clock):
        user = await account_factory()
        task = await task_factory(status=TaskStatus.INACTIVE)

        with pytest.raises(TaskNotFoundError):
            await TaskService.credit_task(user.id, task.id)

    @pytest.mark.asyncio
    async def test_unknown_account_writes_nothing(self, task_factory, fixed_clock):
        task = await task_factory()

        with pytest.raises(AccountNotFoundError):
            await TaskService.credit_task(9999, task.id)

        assert await UserTask.all().count() == 0


class TestDailyBonus:
    @pytest.mark.asyncio
    async def test_once_per_calendar_day(self, account_factory, task_factory, fixed_clock):
        user = await account_factory(balance="100.00")
        await task_factory(code=TASK_CODES.DAILY_BONUS, reward="10", recurrence=TaskRecurrence.DAILY)

        await TaskService.claim_daily_bonus(user.id)

        fixed_clock.advance(hours=11, minutes=59)  # 23:59 같은 날
        with pytest.raises(AlreadyClaimedError) as exc_info:
            await TaskService.claim_daily_bonus(user.id)
        assert exc_info.value.daily is True

        fixed_clock.advance(minutes=1)  # 다음날 00:00
        result = await TaskService.claim_daily_bonus(user.id)

        assert result.new_balance == Decimal("120.00")
        assert await UserTask.filter(user_id=user.id).count() == 1

    @pytest.mark.asyncio
    async def test_missing_daily_task(self, account_factory, fixed_clock):
        user = await account_factory()
        with pytest.raises(TaskNotFoundError):
            await TaskService.claim_daily_bonus(user.id)


class TestChannelSubscription:
    @pytest.mark.asyncio
    async def test_subscribed_user_is_credited(self, account_factory, task_factory, fixed_clock):
        user = await account_factory(telegram_id="555", balance="100.00")
        await task_factory(code=TASK_CODES.CHANNEL_SUBSCRIPTION, reward="50")
        checker = AsyncMock(return_value=True)

        result = await TaskService.claim_channel_subscription(user.id, "555", checker)

        assert result.new_balance == Decimal("150.00")
        checker.assert_awaited_once_with("555")

    @pytest.mark.asyncio
    async def test_not_subscribed(self, account_factory, task_factory, fixed_clock):
        user = await account_factory(balance="100.00")
        await task_factory(code=TASK_CODES.CHANNEL_SUBSCRIPTION, reward="50")

        with pytest.raises(SubscriptionNotVerifiedError) as exc_info:
            await TaskService.claim_channel_subscription(user.id, user.telegram_id, AsyncMock(return_value=False))

        assert exc_info.value.upstream_failed is False
        assert await UserTask.all().count() == 0

    @pytest.mark.asyncio
    async def test_upstream_failure_is_not_earned_yet(self, account_factory, task_factory, fixed_clock):
        user = await account_factory(balance="100.00")
        await task_factory(code=TASK_CODES.CHANNEL_SUBSCRIPTION, reward="50")
        checker = AsyncMock(side_effect=UpstreamUnavailableError("telegram", "timeout"))

        with pytest.raises(SubscriptionNotVerifiedError) as exc_info:
            await TaskService.claim_channel_subscription(user.id, user.telegram_id, checker)

        assert exc_info.value.upstream_failed is True
        assert await UserTask.all().count() == 0
        assert (await User.get(id=user.id)).balance == Decimal("100.00")

        # 나중에 검증이 성공하면 정상 지급
        result = await TaskService.claim_channel_subscription(
            user.id, user.telegram_id, AsyncMock(return_value=True)
        )
        assert result.new_balance == Decimal("150.00")


class TestAssignAndList:
    @pytest.mark.asyncio
    async def test_assign_twice(self, account_factory, task_factory):
        user = await account_factory()
        task = await task_factory()

        record = await TaskService.assign_task(user.id, task.id)
        assert record.status == UserTaskStatus.PENDING

        with pytest.raises(TaskAlreadyAssignedError):
            await TaskService.assign_task(user.id, task.id)

    @pytest.mark.asyncio
    async def test_lists(self, account_factory, task_factory):
        user = await account_factory()
        active = await task_factory()
        await task_factory(status=TaskStatus.INACTIVE)
        await TaskService.assign_task(user.id, active.id)

        assert [t.id for t in await TaskService.list_active_tasks()] == [active.id]
        user_tasks = await TaskService.list_user_tasks(user.id)
        assert [ut.task.id for ut in user_tasks] == [active.id]
