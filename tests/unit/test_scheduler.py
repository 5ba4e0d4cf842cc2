"""
수익 분배 스케줄러 테스트 (가짜 sleep 주입)
"""
import asyncio
from unittest.mock import AsyncMock

import pytest

from service.economy.income_scheduler import IncomeScheduler


class FakeSleep:
    """호출된 대기 시간을 기록하고, 정해진 횟수 뒤에는 영원히 멈춤"""

    def __init__(self, limit: int):
        self.calls = []
        self.limit = limit
        self.exhausted = asyncio.Event()

    async def __call__(self, delay):
        self.calls.append(delay)
        if len(self.calls) > self.limit:
            self.exhausted.set()
            await asyncio.Event().wait()


class TestRunOnce:
    @pytest.mark.asyncio
    async def test_success_schedules_interval(self):
        job = AsyncMock(return_value="ok")
        scheduler = IncomeScheduler(job, first_delay=1, interval=3600, retry_delay=300)

        assert await scheduler.run_once() == 3600
        assert scheduler.last_result == "ok"
        job.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_failure_schedules_retry(self):
        job = AsyncMock(side_effect=RuntimeError("storage unavailable"))
        scheduler = IncomeScheduler(job, first_delay=1, interval=3600, retry_delay=300)

        assert await scheduler.run_once() == 300


class TestLoop:
    @pytest.mark.asyncio
    async def test_delays_follow_outcomes(self):
        job = AsyncMock(side_effect=[RuntimeError("down"), "ok", "ok"])
        sleep = FakeSleep(limit=3)
        scheduler = IncomeScheduler(job, first_delay=60, interval=3600, retry_delay=300, sleep=sleep)

        scheduler.start()
        await asyncio.wait_for(sleep.exhausted.wait(), timeout=1)
        await scheduler.stop()

        assert sleep.calls == [60, 300, 3600, 3600]
        assert job.await_count == 3
        assert not scheduler.running

    @pytest.mark.asyncio
    async def test_start_twice_keeps_single_task(self):
        sleep = FakeSleep(limit=0)
        scheduler = IncomeScheduler(AsyncMock(), sleep=sleep)

        scheduler.start()
        first = scheduler._task
        scheduler.start()

        assert scheduler._task is first
        await scheduler.stop()

    @pytest.mark.asyncio
    async def test_stop_without_start(self):
        scheduler = IncomeScheduler(AsyncMock())
        await scheduler.stop()
        assert not scheduler.running


class TestTriggerNow:
    @pytest.mark.asyncio
    async def test_returns_job_result(self):
        scheduler = IncomeScheduler(AsyncMock(return_value=42))
        assert await scheduler.trigger_now() == 42

    @pytest.mark.asyncio
    async def test_manual_trigger_does_not_overlap_running_job(self):
        active = 0
        max_active = 0

        async def job():
            nonlocal active, max_active
            active += 1
            max_active = max(max_active, active)
            await asyncio.sleep(0.01)
            active -= 1

        scheduler = IncomeScheduler(job)
        await asyncio.gather(scheduler.run_once(), scheduler.trigger_now(), scheduler.trigger_now())

        assert max_active == 1

    @pytest.mark.asyncio
    async def test_trigger_now_propagates_errors(self):
        scheduler = IncomeScheduler(AsyncMock(side_effect=RuntimeError("boom")))
        with pytest.raises(RuntimeError):
            await scheduler.trigger_now()
