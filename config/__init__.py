"""
VLToken 게임 설정 상수

모든 매직 넘버와 경제 밸런스 관련 상수를 여기서 관리합니다.
각 도메인별 설정은 config/ 하위 모듈에 정의되어 있습니다.
"""
from config.economy import EconomyConfig, ECONOMY, TransactionConfig, TRANSACTION
from config.scheduler import IncomeScheduleConfig, INCOME_SCHEDULE
from config.catalog import (
    TaskCodeConfig, TASK_CODES,
    TaskSeed, ItemSeed, SEED_TASKS, SEED_ITEMS,
)

__all__ = [
    # economy
    "EconomyConfig", "ECONOMY",
    "TransactionConfig", "TRANSACTION",
    # scheduler
    "IncomeScheduleConfig", "INCOME_SCHEDULE",
    # catalog
    "TaskCodeConfig", "TASK_CODES",
    "TaskSeed", "ItemSeed", "SEED_TASKS", "SEED_ITEMS",
]
