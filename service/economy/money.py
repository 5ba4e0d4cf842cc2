"""
금액 변환 유틸리티

모든 잔액/가격은 소수점 2자리 Decimal로 다룹니다.
반올림은 ROUND_HALF_UP (0에서 먼 쪽으로 반올림)으로 통일합니다.
"""
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
from typing import Union

from config import ECONOMY
from exceptions import InvalidAmountError

Number = Union[int, float, str, Decimal]


def parse_amount(value: Number) -> Decimal:
    """
    반올림 없이 Decimal로만 변환 (가격 비교용)

    float는 이진 오차를 피하기 위해 str을 거쳐 변환합니다.

    Raises:
        InvalidAmountError: 숫자가 아니거나 유한하지 않은 값
    """
    if isinstance(value, bool) or value is None:
        raise InvalidAmountError(value)
    try:
        amount = value if isinstance(value, Decimal) else Decimal(str(value).strip())
    except (InvalidOperation, ValueError):
        raise InvalidAmountError(value)
    if not amount.is_finite():
        raise InvalidAmountError(value)
    return amount


def to_money(value: Number) -> Decimal:
    """금액을 소수점 2자리 Decimal로 변환"""
    return parse_amount(value).quantize(ECONOMY.MONEY_QUANT, rounding=ROUND_HALF_UP)


def format_money(value: Decimal) -> str:
    """표시용 문자열 (예: '105.50 VL')"""
    return f"{to_money(value):.2f} {ECONOMY.CURRENCY}"
