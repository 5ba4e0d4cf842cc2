"""
사용자 잔액 덮어쓰기 스크립트

실행: python scripts/fix_balance.py <telegram_id> <new_balance>
예시: python scripts/fix_balance.py 7121428208 100
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
from service.economy.money import format_money


async def fix_balance(telegram_id: str, new_balance: str) -> int:
    await Tortoise.init(db_url=build_db_url(), modules=TORTOISE_MODULES)
    try:
        user = await AccountService.get_by_telegram_id(telegram_id)
        old_balance = user.balance_value
        balance = await AccountService.set_balance(user.id, new_balance)
    except VLTokenError as e:
        print(f"❌ {e.message}")
        return 1
    finally:
        await Tortoise.close_connections()

    print(f"✅ {telegram_id} 잔액 수정: {format_money(old_balance)} -> {format_money(balance)}")
    return 0


if __name__ == "__main__":
    if len(sys.argv) != 3:
        print("사용법: python scripts/fix_balance.py <telegram_id> <new_balance>")
        sys.exit(1)

    sys.exit(asyncio.run(fix_balance(sys.argv[1], sys.argv[2])))
