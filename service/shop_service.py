"""
ShopService

상점 카탈로그 조회와 아이템 구매를 담당합니다.
구매는 잔액 차감과 인벤토리 지급을 하나의 트랜잭션으로 처리합니다.
"""
import logging
from dataclasses import dataclass
from decimal import Decimal
from typing import List, Optional

from decorator.retry import retry_on_conflict
from exceptions import (
    InsufficientFundsError,
    ItemNotFoundError,
    PriceChangedError,
)
from models import Item, UserInventory
from models.repos.inventory_repo import get_user_inventory, upsert_quantity
from models.repos.item_repo import find_active_items, find_item_by_id
from service.economy.ledger import locked_account
from service.economy.money import Number, parse_amount, to_money

logger = logging.getLogger(__name__)


@dataclass
class PurchaseResult:
    """구매 결과"""
    new_balance: Decimal
    item_id: int
    item_name: str
    price: Decimal
    quantity: int
    inventory: List[UserInventory]


class ShopService:
    """상점 서비스"""

    @staticmethod
    async def list_catalog() -> List[Item]:
        """판매 중인 아이템 (가격 오름차순)"""
        return await find_active_items()

    @staticmethod
    @retry_on_conflict()
    async def purchase_item(
        user_id: int,
        item_id: int,
        expected_price: Optional[Number] = None
    ) -> PurchaseResult:
        """
        아이템 구매

        1. 계정 행 잠금
        2. 아이템 조회 (비활성 아이템은 없는 것으로 취급)
        3. expected_price가 현재가와 다르면 PriceChangedError
        4. 잔액 < 가격이면 InsufficientFundsError
        5. 잔액 차감 (소수점 2자리, ROUND_HALF_UP)
        6. 인벤토리 수량 +1 또는 신규 생성
        7. 커밋 (중간 실패 시 전체 롤백)

        Args:
            user_id: 구매자 ID
            item_id: 아이템 ID
            expected_price: 클라이언트가 알고 있는 가격 (선택)

        Returns:
            구매 결과

        Raises:
            AccountNotFoundError: 사용자 없음
            ItemNotFoundError: 아이템 없음
            PriceChangedError: 가격 변경됨 (actual_price 포함)
            InsufficientFundsError: 잔액 부족
            InvalidAmountError: expected_price가 숫자가 아님
            TransactionConflictError: 재시도 후에도 잠금 충돌
        """
        expected = parse_amount(expected_price) if expected_price is not None else None

        async with locked_account(user_id) as (conn, user):
            item = await find_item_by_id(item_id, using_db=conn)
            if not item or not item.is_active:
                raise ItemNotFoundError(item_id)

            price = to_money(item.price)
            if expected is not None and expected != price:
                raise PriceChangedError(item.id, expected, price)

            current = user.balance_value
            if current < price:
                raise InsufficientFundsError(price, current)

            user.balance = to_money(current - price)
            await user.save(using_db=conn, update_fields=["balance", "updated_at"])

            inv_item = await upsert_quantity(user.id, item.id, 1, using_db=conn)

        logger.info(
            f"User {user_id} purchased item {item.id} for {price} "
            f"(qty {inv_item.quantity}, balance {user.balance})"
        )

        return PurchaseResult(
            new_balance=user.balance,
            item_id=item.id,
            item_name=item.name,
            price=price,
            quantity=inv_item.quantity,
            inventory=await get_user_inventory(user_id),
        )
