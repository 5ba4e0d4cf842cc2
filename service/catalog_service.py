"""
CatalogService

초기 태스크/아이템 카탈로그를 데이터베이스에 채웁니다.
"""
import logging
from dataclasses import dataclass

from config import SEED_ITEMS, SEED_TASKS
from models import Item, ItemType, Task, TaskRecurrence

logger = logging.getLogger(__name__)


@dataclass
class SeedResult:
    tasks_created: int = 0
    items_created: int = 0


class CatalogService:

    @staticmethod
    async def seed_tasks() -> int:
        """
        코드 기준으로 없는 태스크만 생성

        이미 있는 태스크의 보상/설명은 건드리지 않습니다.
        """
        created = 0
        for seed in SEED_TASKS:
            _, is_new = await Task.get_or_create(
                code=seed.code,
                defaults={
                    "title": seed.title,
                    "description": seed.description,
                    "reward": seed.reward,
                    "recurrence": TaskRecurrence(seed.recurrence),
                }
            )
            if is_new:
                created += 1
        return created

    @staticmethod
    async def seed_items(force: bool = False) -> int:
        """
        아이템 테이블이 비어 있을 때만 시드 아이템 생성

        Args:
            force: True면 비어 있지 않아도 이름이 없는 아이템을 추가
        """
        if not force and await Item.exists():
            return 0

        created = 0
        for seed in SEED_ITEMS:
            if await Item.exists(name=seed.name):
                continue
            await Item.create(
                name=seed.name,
                description=seed.description,
                price=seed.price,
                income_per_hour=seed.income_per_hour,
                image_url=seed.image_url,
                type=ItemType(seed.type),
            )
            created += 1
        return created

    @staticmethod
    async def seed_catalog(force: bool = False) -> SeedResult:
        result = SeedResult(
            tasks_created=await CatalogService.seed_tasks(),
            items_created=await CatalogService.seed_items(force=force),
        )
        if result.tasks_created or result.items_created:
            logger.info(f"Catalog seeded: {result.tasks_created} tasks, {result.items_created} items")
        return result
