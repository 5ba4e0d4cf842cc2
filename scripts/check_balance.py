"""
사용자 잔액 / 보유 아이템 / 예상 시간당 수익 조회 스크립트

실행: python scripts/check_balance.py <telegram_id>
"""
import asyncio
import os
import sys

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from dotenv import load_dotenv
load_dotenv()

from tortoise import Tortoise

from config.database import TORTOISE_MODULES, build_db_url
from exceptions import VLTokenError
from service.account_service import AccountService
from service.economy.income_service import IncomeService
from service.economy.money import format_money
from service.inventory_service import InventoryService


async def check_balance(telegram_id: str) -> int:
    await Tortoise.init(db_url=build_db_url(), modules=TORTOISE_MODULES)
    try:
        user = await AccountService.get_by_telegram_id(telegram_id)
        inventory = await InventoryService.get_inventory(user.id)
        income = await IncomeService.calculate_hourly_income(user)
    except VLTokenError as e:
        print(f"❌ {e.message}")
        return 1
    finally:
        await Tortoise.close_connections()

    print(f"\n사용자 {telegram_id} 정보:")
    print(f"ID: {user.id}")
    print(f"이름: {user.get_name()}")
    print(f"잔액: {format_money(user.balance_value)}")
    print(f"레벨: {user.level} (경험치 {user.experience})")

    if inventory:
        print("\n보유 아이템:")
        for entry in inventory:
            item_income = entry.item.income_per_hour * entry.quantity
            print(f"- {entry.item.name} (ID: {entry.item.id}): {entry.quantity}개 - {format_money(item_income)}/시간")
    else:
        print("\n보유 아이템이 없습니다.")

    print(
        f"\n예상 시간당 수익: {format_money(income.total)} "
        f"(아이템 {income.items}, 친구 {income.friends}, 레벨 {income.level}, 기본 {income.base})"
    )
    print(f"하루 예상 수익: {format_money(income.total * 24)}")
    return 0


if __name__ == "__main__":
    if len(sys.argv) != 2:
        print("사용법: python scripts/check_balance.py <telegram_id>")
        sys.exit(1)

    sys.exit(asyncio.run(check_balance(sys.argv[1])))
