"""
시간당 수익 계산 테스트 (DB 없이)
"""
from decimal import Decimal
from types import SimpleNamespace
from unittest.mock import AsyncMock

import pytest

from service.economy.income_service import IncomeService, compose_income
from service.inventory_service import InventoryService


class TestComposeIncome:
    """수익원 합산 규칙"""

    def test_documented_example(self):
        breakdown = compose_income(Decimal("5.00"), friend_count=3, level=4)

        assert breakdown.items == Decimal("5.00")
        assert breakdown.friends == Decimal("6.00")
        assert breakdown.level == Decimal("3.00")
        assert breakdown.base == Decimal("0.00")
        assert breakdown.total == Decimal("14.00")

    def test_fallback_only_when_everything_is_zero(self):
        breakdown = compose_income(Decimal("0"), friend_count=0, level=1)
        assert breakdown.base == Decimal("5.00")
        assert breakdown.total == Decimal("5.00")

    def test_fallback_is_not_additive(self):
        assert compose_income(Decimal("0"), friend_count=1, level=1).total == Decimal("2.00")
        assert compose_income(Decimal("0"), friend_count=0, level=2).total == Decimal("1.00")
        assert compose_income(Decimal("0.01"), friend_count=0, level=1).total == Decimal("0.01")

    def test_level_one_adds_nothing(self):
        assert compose_income(Decimal("1"), friend_count=0, level=1).level == Decimal("0.00")


class TestItemsIncome:
    def test_sum_of_income_times_quantity(self):
        entries = [
            SimpleNamespace(item=SimpleNamespace(income_per_hour=Decimal("2.50")), quantity=2),
            SimpleNamespace(item=SimpleNamespace(income_per_hour=Decimal("0.50")), quantity=3),
            SimpleNamespace(item=SimpleNamespace(income_per_hour=Decimal("0")), quantity=10),
        ]
        assert InventoryService.get_items_income(entries) == Decimal("6.50")

    def test_empty_inventory(self):
        assert InventoryService.get_items_income([]) == Decimal("0")

    def test_zero_quantity_row_earns_nothing(self):
        entries = [SimpleNamespace(item=SimpleNamespace(income_per_hour=Decimal("10.00")), quantity=0)]
        assert InventoryService.get_items_income(entries) == Decimal("0")


class TestCalculateHourlyIncome:
    @pytest.mark.asyncio
    async def test_uses_inventory_and_friend_count(self, monkeypatch):
        entries = [SimpleNamespace(item=SimpleNamespace(income_per_hour=Decimal("2.5")), quantity=2)]
        monkeypatch.setattr(
            "service.economy.income_service.get_user_inventory",
            AsyncMock(return_value=entries),
        )
        mock_count = AsyncMock(return_value=3)
        monkeypatch.setattr(
            "service.economy.income_service.friend_repo.count_accepted_friends",
            mock_count,
        )

        user = SimpleNamespace(id=7, level=4)
        breakdown = await IncomeService.calculate_hourly_income(user)

        assert breakdown.total == Decimal("14.00")
        mock_count.assert_awaited_once_with(7, using_db=None)
