import asyncio
import functools
import logging

from config import TRANSACTION
from exceptions import TransactionConflictError

logger = logging.getLogger(__name__)


def retry_on_conflict(
    attempts: int = TRANSACTION.MAX_ATTEMPTS,
    base_delay: float = TRANSACTION.BASE_BACKOFF_SECONDS,
):
    """
    TransactionConflictError 발생 시 작업 전체를 다시 실행

    작업 단위 전체를 재실행하므로 선행 조건(잔액, 지급 여부 등)도 매번 다시 검사됩니다.
    마지막 시도까지 실패하면 예외를 그대로 올립니다.
    """

    def decorator(func):
        @functools.wraps(func)
        async def wrapper(*args, **kwargs):
            attempt = 1
            while True:
                try:
                    return await func(*args, **kwargs)
                except TransactionConflictError:
                    if attempt >= attempts:
                        logger.error(f"{func.__qualname__} failed after {attempts} attempts")
                        raise
                    delay = base_delay * (2 ** (attempt - 1))
                    logger.warning(
                        f"{func.__qualname__} conflict (attempt {attempt}/{attempts}), "
                        f"retrying in {delay:.2f}s"
                    )
                    await asyncio.sleep(delay)
                    attempt += 1

        return wrapper

    return decorator
