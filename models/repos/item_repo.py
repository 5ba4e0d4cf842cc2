from typing import List, Optional

from tortoise.backends.base.client import BaseDBAsyncClient

from models import Item, ItemStatus


async def find_item_by_id(item_id: int, using_db: Optional[BaseDBAsyncClient] = None) -> Optional[Item]:
    return await Item.filter(id=item_id).using_db(using_db).first()


async def find_active_items() -> List[Item]:
    return await Item.filter(status=ItemStatus.ACTIVE).order_by("price", "id")
