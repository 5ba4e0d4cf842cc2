"""
계정 잠금 트랜잭션

잔액을 바꾸는 모든 작업(구매, 보상 지급, 수익 분배, 관리자 조정)은
locked_account() 안에서 실행합니다. 계정 행을 SELECT ... FOR UPDATE로
잠근 채 읽고, 블록을 빠져나갈 때 커밋하며, 예외가 나면 전부 롤백합니다.
"""
import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Tuple

from tortoise.backends.base.client import BaseDBAsyncClient
from tortoise.exceptions import OperationalError, TransactionManagementError
from tortoise.transactions import in_transaction

from exceptions import AccountNotFoundError, TransactionConflictError
from models import User

logger = logging.getLogger(__name__)

# 드라이버별 잠금 충돌 메시지 (MySQL / PostgreSQL / SQLite)
_LOCK_CONFLICT_MARKERS = (
    "lock wait timeout",
    "deadlock",
    "could not obtain lock",
    "could not serialize",
    "database is locked",
)


def is_lock_conflict(error: Exception) -> bool:
    """잠금 대기 초과 / 데드락 여부"""
    message = str(error).lower()
    return any(marker in message for marker in _LOCK_CONFLICT_MARKERS)


@asynccontextmanager
async def locked_account(user_id: int) -> AsyncIterator[Tuple[BaseDBAsyncClient, User]]:
    """
    계정 행을 배타적으로 잠그고 (conn, user) 반환

    Args:
        user_id: 계정 ID

    Raises:
        AccountNotFoundError: 계정 없음
        TransactionConflictError: 잠금 대기 시간 초과 / 데드락
    """
    try:
        async with in_transaction() as conn:
            user = await User.filter(id=user_id).using_db(conn).select_for_update().first()
            if user is None:
                raise AccountNotFoundError(user_id)
            yield conn, user
    except (OperationalError, TransactionManagementError) as e:
        if is_lock_conflict(e):
            logger.warning(f"Lock conflict on user {user_id}: {e}")
            raise TransactionConflictError(str(e)) from e
        raise
