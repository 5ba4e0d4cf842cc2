"""경제(잔액/수익) 관련 설정"""
from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class EconomyConfig:
    """잔액 및 시간당 수익 설정"""

    INITIAL_BALANCE: Decimal = Decimal("100.00")
    """신규 계정 시작 잔액"""

    MONEY_QUANT: Decimal = Decimal("0.01")
    """금액 저장 단위 (소수점 2자리)"""

    BALANCE_MAX_DIGITS: int = 12
    """잔액 컬럼 전체 자릿수"""

    # 시간당 수익 구성
    INCOME_PER_FRIEND: Decimal = Decimal("2.00")
    """수락된 친구 1명당 시간당 수익"""

    INCOME_PER_LEVEL: Decimal = Decimal("1.00")
    """1레벨 초과분 레벨당 시간당 수익"""

    BASE_INCOME: Decimal = Decimal("5.00")
    """다른 수익원이 전혀 없을 때만 지급되는 기본 수익 (가산 아님)"""

    CURRENCY: str = "VL"
    """화폐 단위 표기"""


ECONOMY = EconomyConfig()


@dataclass(frozen=True)
class TransactionConfig:
    """트랜잭션 재시도 설정"""

    MAX_ATTEMPTS: int = 3
    """잠금 충돌 시 최대 시도 횟수"""

    BASE_BACKOFF_SECONDS: float = 0.05
    """첫 재시도 대기 시간 (이후 2배씩 증가)"""


TRANSACTION = TransactionConfig()
