"""
IncomeService

시간당 패시브 수익 계산 및 전체 계정 분배를 담당합니다.

수익 = Σ(아이템 시간당 수익 × 수량) + 친구 수 × 2.00 + (레벨 - 1) × 1.00
위 합계가 정확히 0이면 기본 수익 5.00만 지급합니다 (가산 아님).
"""
import logging
from dataclasses import dataclass
from decimal import Decimal
from typing import Optional

from tortoise.backends.base.client import BaseDBAsyncClient

from config import ECONOMY
from decorator.retry import retry_on_conflict
from models import User
from models.repos import friend_repo
from models.repos.inventory_repo import get_user_inventory
from models.repos.users_repo import list_account_ids
from service.economy.ledger import locked_account
from service.economy.money import to_money
from service.inventory_service import InventoryService

logger = logging.getLogger(__name__)


@dataclass
class IncomeBreakdown:
    """계정 하나의 시간당 수익 내역"""
    items: Decimal
    friends: Decimal
    level: Decimal
    base: Decimal
    total: Decimal


@dataclass
class DistributionResult:
    """분배 1회 실행 결과"""
    accounts_updated: int = 0
    accounts_failed: int = 0
    total_credited: Decimal = Decimal("0.00")


def compose_income(items_income: Decimal, friend_count: int, level: int) -> IncomeBreakdown:
    """
    수익원별 금액을 합산

    Args:
        items_income: 보유 아이템 시간당 수익 합계
        friend_count: 수락된 친구 수 (중복 제거)
        level: 계정 레벨

    Returns:
        IncomeBreakdown (total은 소수점 2자리)
    """
    items = to_money(items_income)
    friends = to_money(ECONOMY.INCOME_PER_FRIEND * friend_count)
    level_bonus = to_money(ECONOMY.INCOME_PER_LEVEL * (level - 1)) if level > 1 else Decimal("0.00")

    subtotal = items + friends + level_bonus
    base = ECONOMY.BASE_INCOME if subtotal == 0 else Decimal("0.00")

    return IncomeBreakdown(
        items=items,
        friends=friends,
        level=level_bonus,
        base=base,
        total=to_money(subtotal + base),
    )


class IncomeService:
    """패시브 수익 비즈니스 로직"""

    @staticmethod
    async def calculate_hourly_income(
        user: User,
        using_db: Optional[BaseDBAsyncClient] = None
    ) -> IncomeBreakdown:
        """
        계정의 시간당 수익 계산 (읽기 전용)

        Args:
            user: 대상 계정
            using_db: 트랜잭션 커넥션 (분배 중에는 잠금 트랜잭션)
        """
        entries = await get_user_inventory(user.id, using_db=using_db)
        items_income = InventoryService.get_items_income(entries)
        friend_count = await friend_repo.count_accepted_friends(user.id, using_db=using_db)
        return compose_income(items_income, friend_count, user.level or 1)

    @staticmethod
    @retry_on_conflict()
    async def credit_hourly_income(user_id: int) -> Decimal:
        """
        계정 하나에 시간당 수익 지급 (계정 잠금 단위)

        Returns:
            지급한 금액 (0이면 쓰기 생략)
        """
        async with locked_account(user_id) as (conn, user):
            breakdown = await IncomeService.calculate_hourly_income(user, using_db=conn)
            if breakdown.total <= 0:
                return Decimal("0.00")

            user.balance = to_money(user.balance_value + breakdown.total)
            await user.save(using_db=conn, update_fields=["balance", "updated_at"])

        logger.debug(f"Hourly income for user {user_id}: +{breakdown.total} -> {user.balance}")
        return breakdown.total

    @staticmethod
    async def distribute_passive_income() -> DistributionResult:
        """
        전체 계정에 시간당 수익 분배

        계정마다 별도 트랜잭션으로 처리하며, 한 계정의 실패는 기록만 하고
        나머지 계정 처리를 계속합니다. 계정 목록 조회 자체가 실패하면
        예외를 올려 스케줄러가 재시도하게 합니다.
        """
        result = DistributionResult()
        account_ids = await list_account_ids()
        logger.info(f"Passive income distribution started ({len(account_ids)} accounts)")

        for user_id in account_ids:
            try:
                credited = await IncomeService.credit_hourly_income(user_id)
            except Exception:
                result.accounts_failed += 1
                logger.exception(f"Passive income failed for user {user_id}")
                continue

            if credited > 0:
                result.accounts_updated += 1
                result.total_credited += credited

        logger.info(
            f"Passive income distribution finished: updated={result.accounts_updated}, "
            f"failed={result.accounts_failed}, total={result.total_credited}"
        )
        return result
