"""
수익 분배 스케줄러

하나의 asyncio.Task가 "대기 → 실행 → 다음 대기 시간 결정"을 반복합니다.
정상 완료 후에는 INTERVAL, 실행 전체가 실패하면 RETRY_DELAY 뒤에 다시 실행합니다.
"""
import asyncio
import logging
from typing import Any, Awaitable, Callable, Optional

from config import INCOME_SCHEDULE

logger = logging.getLogger(__name__)

Job = Callable[[], Awaitable[Any]]
Sleep = Callable[[float], Awaitable[Any]]


class IncomeScheduler:
    """주기 작업 스케줄러 (타이머 핸들 1개 소유)"""

    def __init__(
        self,
        job: Job,
        first_delay: float = INCOME_SCHEDULE.FIRST_RUN_DELAY,
        interval: float = INCOME_SCHEDULE.INTERVAL,
        retry_delay: float = INCOME_SCHEDULE.RETRY_DELAY,
        sleep: Sleep = asyncio.sleep
    ):
        self.job = job
        self.first_delay = first_delay
        self.interval = interval
        self.retry_delay = retry_delay
        self._sleep = sleep
        self._task: Optional[asyncio.Task] = None
        self._run_lock = asyncio.Lock()
        self.last_result: Any = None

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    def start(self) -> None:
        """백그라운드 루프 시작 (이미 실행 중이면 무시)"""
        if self.running:
            return
        self._task = asyncio.create_task(self._loop(), name="income-scheduler")
        logger.info(f"Income scheduler started (first run in {self.first_delay}s)")

    async def stop(self) -> None:
        """루프 취소 후 종료 대기"""
        if self._task is None:
            return
        task, self._task = self._task, None
        task.cancel()
        try:
            await task
        except asyncio.CancelledError:
            pass
        logger.info("Income scheduler stopped")

    async def trigger_now(self) -> Any:
        """
        예약과 무관하게 즉시 1회 실행 (수동 실행/테스트용)

        실행 중인 예약 작업이 있으면 끝날 때까지 기다린 뒤 실행합니다.
        """
        async with self._run_lock:
            return await self._execute()

    async def run_once(self) -> float:
        """
        1회 실행 후 다음 대기 시간 반환

        Returns:
            성공 시 interval, 실패 시 retry_delay
        """
        async with self._run_lock:
            try:
                await self._execute()
            except Exception:
                logger.exception(f"Income distribution run failed, retrying in {self.retry_delay}s")
                return self.retry_delay
        return self.interval

    async def _execute(self) -> Any:
        self.last_result = await self.job()
        return self.last_result

    async def _loop(self) -> None:
        delay = self.first_delay
        while True:
            await self._sleep(delay)
            delay = await self.run_once()
            logger.info(f"Next income distribution in {delay}s")
