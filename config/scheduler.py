"""
수익 분배 스케줄러 설정
"""
from dataclasses import dataclass


@dataclass(frozen=True)
class IncomeScheduleConfig:
    """시간당 수익 분배 타이밍 (초)"""

    FIRST_RUN_DELAY: float = 60
    """프로세스 시작 후 첫 실행까지 대기"""

    INTERVAL: float = 60 * 60
    """정상 완료 후 다음 실행까지 대기"""

    RETRY_DELAY: float = 5 * 60
    """분배 전체 실패 시 재시도까지 대기"""


# 싱글톤 설정 객체
INCOME_SCHEDULE = IncomeScheduleConfig()
