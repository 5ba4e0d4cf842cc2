from typing import List, Optional

from tortoise.backends.base.client import BaseDBAsyncClient

from models import User


async def find_account_by_id(user_id: int, using_db: Optional[BaseDBAsyncClient] = None) -> Optional[User]:
    return await User.filter(id=user_id).using_db(using_db).first()


async def find_account_by_telegram_id(telegram_id: str, using_db: Optional[BaseDBAsyncClient] = None) -> Optional[User]:
    return await User.filter(telegram_id=str(telegram_id)).using_db(using_db).first()


async def list_account_ids() -> List[int]:
    """수익 분배 대상 계정 ID 전체 (ID 순)"""
    return await User.all().order_by("id").values_list("id", flat=True)
