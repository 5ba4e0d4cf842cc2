# app.py
import asyncio
import logging

from dotenv import load_dotenv
from tortoise import Tortoise

from config.database import TORTOISE_MODULES, build_db_url
from service.catalog_service import CatalogService
from service.economy.income_scheduler import IncomeScheduler
from service.economy.income_service import IncomeService

# 로그 기본 설정
logging.basicConfig(
    level=logging.INFO,  # DEBUG, INFO, WARNING, ERROR, CRITICAL
    format="%(asctime)s [%(levelname)s] %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S"
)

load_dotenv()

logger = logging.getLogger(__name__)


async def init_db() -> None:
    await Tortoise.init(
        db_url=build_db_url(),
        modules=TORTOISE_MODULES
    )
    await Tortoise.generate_schemas()


async def main() -> None:
    logger.info("데이터 베이스 연결 시작")
    await init_db()
    logger.info("데이터 베이스 연결")

    await CatalogService.seed_catalog()

    scheduler = IncomeScheduler(IncomeService.distribute_passive_income)
    scheduler.start()

    try:
        # 수익 분배 스케줄러만 돌리는 프로세스, 종료 신호까지 대기
        await asyncio.Event().wait()
    finally:
        await scheduler.stop()
        await Tortoise.close_connections()
        logger.info("데이터 베이스 연결 종료")


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        logger.info("종료")
