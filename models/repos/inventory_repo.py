"""
UserInventory Repository

사용자 인벤토리 데이터 접근 레이어입니다.
"""
from typing import List, Optional

from tortoise.backends.base.client import BaseDBAsyncClient

from models import UserInventory


async def get_user_inventory(user_id: int, using_db: Optional[BaseDBAsyncClient] = None) -> List[UserInventory]:
    """
    사용자 인벤토리 전체 조회

    Args:
        user_id: 대상 사용자 ID
        using_db: 트랜잭션 커넥션 (없으면 기본 커넥션)

    Returns:
        UserInventory 목록 (item prefetch)
    """
    return await (
        UserInventory.filter(user_id=user_id)
        .using_db(using_db)
        .order_by("id")
        .prefetch_related("item")
    )


async def get_inventory_item(
    user_id: int,
    item_id: int,
    using_db: Optional[BaseDBAsyncClient] = None
) -> Optional[UserInventory]:
    """
    특정 아이템 보유 행 조회

    Returns:
        UserInventory 객체 또는 None
    """
    return await UserInventory.filter(user_id=user_id, item_id=item_id).using_db(using_db).first()


async def upsert_quantity(
    user_id: int,
    item_id: int,
    quantity: int,
    using_db: Optional[BaseDBAsyncClient] = None
) -> UserInventory:
    """
    보유 행이 있으면 quantity 증가, 없으면 생성

    호출자가 계정 행 잠금을 잡고 있어야 같은 (user, item) 동시 생성이 생기지 않습니다.
    """
    inv = await get_inventory_item(user_id, item_id, using_db=using_db)
    if inv:
        inv.quantity += quantity
        await inv.save(using_db=using_db, update_fields=["quantity", "updated_at"])
        return inv

    return await UserInventory.create(
        user_id=user_id,
        item_id=item_id,
        quantity=quantity,
        using_db=using_db
    )
