"""
InventoryService

인벤토리 관리 (관리자 지급/조회/수익 합계)를 담당합니다.
"""
import logging
from decimal import Decimal
from typing import Iterable, List

from decorator.retry import retry_on_conflict
from exceptions import InvalidQuantityError, ItemNotFoundError
from models import UserInventory
from models.repos.inventory_repo import get_user_inventory, upsert_quantity
from models.repos.item_repo import find_item_by_id
from service.economy.ledger import locked_account

logger = logging.getLogger(__name__)


class InventoryService:
    """인벤토리 비즈니스 로직"""

    @staticmethod
    @retry_on_conflict()
    async def add_item(
        user_id: int,
        item_id: int,
        quantity: int = 1
    ) -> UserInventory:
        """
        아이템 지급 (관리자/시드 스크립트용, 잔액 차감 없음)

        구매와 같은 계정 잠금 안에서 수량을 올리므로
        동시에 진행되는 구매/수익 분배와 섞이지 않습니다.

        Args:
            user_id: 대상 사용자 ID
            item_id: 아이템 ID
            quantity: 지급 수량 (1 이상)

        Returns:
            UserInventory 객체

        Raises:
            InvalidQuantityError: 수량이 1 미만
            AccountNotFoundError: 사용자 없음
            ItemNotFoundError: 아이템을 찾을 수 없음
        """
        if isinstance(quantity, bool) or not isinstance(quantity, int) or quantity < 1:
            raise InvalidQuantityError(quantity)

        async with locked_account(user_id) as (conn, user):
            item = await find_item_by_id(item_id, using_db=conn)
            if not item:
                raise ItemNotFoundError(item_id)

            inv_item = await upsert_quantity(user.id, item.id, quantity, using_db=conn)

        logger.info(f"Granted item {item_id} x{quantity} to user {user_id} (now {inv_item.quantity})")
        return inv_item

    @staticmethod
    async def get_inventory(user_id: int) -> List[UserInventory]:
        """보유 아이템 목록 (item prefetch)"""
        return await get_user_inventory(user_id)

    @staticmethod
    def get_items_income(entries: Iterable[UserInventory]) -> Decimal:
        """
        보유 아이템의 시간당 수익 합계

        Args:
            entries: item이 로드된 UserInventory 목록

        Returns:
            Σ income_per_hour × quantity
        """
        total = Decimal("0")
        for entry in entries:
            item = entry.item
            if item is None or not item.income_per_hour:
                continue
            total += Decimal(item.income_per_hour) * entry.quantity
        return total
