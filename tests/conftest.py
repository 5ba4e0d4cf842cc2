"""
pytest 설정 및 공통 픽스처 정의
"""
import itertools
import sys
from decimal import Decimal
from pathlib import Path
from typing import AsyncGenerator

import pytest

# 프로젝트 루트를 Python 경로에 추가
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))


# =============================================================================
# pytest 설정
# =============================================================================


def pytest_configure(config):
    """pytest 설정"""
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )
    config.addinivalue_line(
        "markers", "integration: marks tests as integration tests"
    )


# =============================================================================
# 데이터베이스 픽스처
# =============================================================================


@pytest.fixture(scope="function")
async def test_db() -> AsyncGenerator[None, None]:
    """
    테스트용 인메모리 SQLite 데이터베이스
    각 테스트 함수마다 새로운 DB 생성
    """
    from tortoise import Tortoise

    await Tortoise.init(
        db_url="sqlite://:memory:",
        modules={"models": ["models"]}
    )
    await Tortoise.generate_schemas()

    yield

    await Tortoise.close_connections()


# =============================================================================
# 엔티티 팩토리 픽스처 (DB 저장)
# =============================================================================


_telegram_ids = itertools.count(700000001)


@pytest.fixture
def account_factory(test_db):
    """테스트용 User 생성 팩토리"""
    from models import User

    async def _create_account(
        telegram_id: str | None = None,
        balance: str = "100.00",
        level: int = 1,
        **fields,
    ) -> User:
        return await User.create(
            telegram_id=telegram_id or str(next(_telegram_ids)),
            balance=Decimal(balance),
            level=level,
            **fields,
        )

    return _create_account


@pytest.fixture
def item_factory(test_db):
    """테스트용 Item 생성 팩토리"""
    from models import Item, ItemStatus

    async def _create_item(
        name: str = "테스트 아이템",
        price: str = "50.00",
        income_per_hour: str = "0.50",
        status: ItemStatus = ItemStatus.ACTIVE,
    ) -> Item:
        return await Item.create(
            name=name,
            price=Decimal(price),
            income_per_hour=Decimal(income_per_hour),
            status=status,
        )

    return _create_item


@pytest.fixture
def task_factory(test_db):
    """테스트용 Task 생성 팩토리"""
    from models import Task, TaskRecurrence, TaskStatus

    codes = itertools.count(1)

    async def _create_task(
        code: str | None = None,
        reward: str = "100.00",
        recurrence: TaskRecurrence = TaskRecurrence.ONCE,
        status: TaskStatus = TaskStatus.ACTIVE,
    ) -> Task:
        return await Task.create(
            code=code or f"test_task_{next(codes)}",
            title="테스트 태스크",
            reward=Decimal(reward),
            recurrence=recurrence,
            status=status,
        )

    return _create_task


@pytest.fixture
def friendship_factory(test_db):
    """두 계정 사이 친구 관계 행 생성"""
    from models import Friend, FriendStatus

    async def _create_friendship(user, friend, status: FriendStatus = FriendStatus.ACCEPTED) -> Friend:
        return await Friend.create(user=user, friend=friend, status=status)

    return _create_friendship


# =============================================================================
# 시계 픽스처
# =============================================================================


@pytest.fixture
def fixed_clock(monkeypatch):
    """TaskService가 사용하는 시계를 UTC 기준 고정 시각으로 교체"""
    from datetime import datetime, timezone

    from service.task_service import TaskService
    from utils.clock import FixedClock

    clock = FixedClock(datetime(2026, 3, 14, 12, 0, tzinfo=timezone.utc), tz=timezone.utc)
    monkeypatch.setattr(TaskService, "clock", clock)
    return clock
