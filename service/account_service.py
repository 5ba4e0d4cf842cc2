"""
AccountService

계정 생성/갱신(프로비저닝)과 관리자 잔액 조정을 담당합니다.
"""
import logging
from decimal import Decimal

from tortoise.exceptions import IntegrityError

from config import ECONOMY
from decorator.retry import retry_on_conflict
from exceptions import (
    AccountNotFoundError,
    InsufficientFundsError,
    InvalidAmountError,
    ValidationError,
)
from models import User
from models.repos.users_repo import find_account_by_id, find_account_by_telegram_id
from service.economy.ledger import locked_account
from service.economy.money import Number, to_money

logger = logging.getLogger(__name__)

# 프로비저닝으로 갱신 가능한 필드
PROFILE_FIELDS = ("username", "first_name", "last_name", "name")
STAT_FIELDS = ("level", "experience")


def _to_int(value, minimum: int, label: str) -> int:
    """정수 필드 변환 및 하한 검증"""
    try:
        number = int(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{label}는 정수여야 합니다: {value!r}")
    if number < minimum:
        raise ValidationError(f"{label}는 {minimum} 이상이어야 합니다")
    return number


def _clean_fields(fields: dict) -> dict:
    """None(미지정) 값 제거 및 허용 필드 검증"""
    allowed = set(PROFILE_FIELDS) | set(STAT_FIELDS) | {"balance"}
    unknown = set(fields) - allowed
    if unknown:
        raise ValidationError(f"알 수 없는 필드입니다: {', '.join(sorted(unknown))}")

    cleaned = {key: value for key, value in fields.items() if value is not None}

    if "balance" in cleaned:
        cleaned["balance"] = to_money(cleaned["balance"])
        if cleaned["balance"] < 0:
            raise InvalidAmountError(cleaned["balance"], "잔액은 0 이상이어야 합니다")
    if "level" in cleaned:
        cleaned["level"] = _to_int(cleaned["level"], 1, "레벨")
    if "experience" in cleaned:
        cleaned["experience"] = _to_int(cleaned["experience"], 0, "경험치")
    return cleaned


class AccountService:
    """계정 비즈니스 로직"""

    @staticmethod
    async def provision_account(telegram_id: str, **fields) -> User:
        """
        계정 조회 후 없으면 생성 (find-or-create)

        - 기존 계정: 명시적으로 전달된 필드만 갱신 (부분 업데이트)
        - balance는 전달된 경우에만 덮어씀 (암묵적으로 초기화하지 않음)
        - 신규 계정: 시작 잔액 ECONOMY.INITIAL_BALANCE

        Args:
            telegram_id: 외부 식별자 (WebApp 인증 / 봇 레이어에서 전달)
            **fields: username, first_name, last_name, name, balance, level, experience

        Returns:
            저장된 User

        Raises:
            ValidationError: 알 수 없는 필드 또는 잘못된 값
        """
        telegram_id = str(telegram_id)
        cleaned = _clean_fields(fields)

        user = await find_account_by_telegram_id(telegram_id)
        if user is None:
            try:
                user = await User.create(
                    telegram_id=telegram_id,
                    balance=cleaned.pop("balance", ECONOMY.INITIAL_BALANCE),
                    **cleaned
                )
                logger.info(f"Created account {user.id} for telegram {telegram_id}")
                return user
            except IntegrityError:
                # 동시에 같은 telegram_id로 생성된 경우 먼저 생성된 행을 갱신
                user = await find_account_by_telegram_id(telegram_id)
                if user is None:
                    raise

        if not cleaned:
            return user

        if "balance" in cleaned:
            return await AccountService._update_with_balance(user.id, cleaned)

        for key, value in cleaned.items():
            setattr(user, key, value)
        await user.save(update_fields=list(cleaned.keys()) + ["updated_at"])
        logger.info(f"Updated account {user.id}: {sorted(cleaned.keys())}")
        return user

    @staticmethod
    @retry_on_conflict()
    async def _update_with_balance(user_id: int, cleaned: dict) -> User:
        """잔액 덮어쓰기가 포함된 갱신은 계정 잠금 안에서 처리"""
        async with locked_account(user_id) as (conn, user):
            old_balance = user.balance
            for key, value in cleaned.items():
                setattr(user, key, value)
            await user.save(using_db=conn)

        logger.info(f"Updated account {user.id} (balance {old_balance} -> {user.balance})")
        return user

    @staticmethod
    async def get_account(user_id: int) -> User:
        """
        계정 조회

        Raises:
            AccountNotFoundError: 계정 없음
        """
        user = await find_account_by_id(user_id)
        if user is None:
            raise AccountNotFoundError(user_id)
        return user

    @staticmethod
    async def get_by_telegram_id(telegram_id: str) -> User:
        user = await find_account_by_telegram_id(telegram_id)
        if user is None:
            raise AccountNotFoundError(telegram_id)
        return user

    @staticmethod
    @retry_on_conflict()
    async def add_balance(user_id: int, amount: Number) -> Decimal:
        """
        관리자 잔액 가감 (음수면 차감)

        Returns:
            변경 후 잔액

        Raises:
            InvalidAmountError: 잘못된 금액
            InsufficientFundsError: 차감 결과가 음수
        """
        delta = to_money(amount)

        async with locked_account(user_id) as (conn, user):
            new_balance = to_money(user.balance_value + delta)
            if new_balance < 0:
                raise InsufficientFundsError(-delta, user.balance_value)
            user.balance = new_balance
            await user.save(using_db=conn, update_fields=["balance", "updated_at"])

        logger.info(f"Admin balance change for user {user_id}: {delta:+} -> {new_balance}")
        return new_balance

    @staticmethod
    @retry_on_conflict()
    async def set_balance(user_id: int, amount: Number) -> Decimal:
        """
        관리자 잔액 덮어쓰기

        Raises:
            InvalidAmountError: 잘못되었거나 음수인 금액
        """
        new_balance = to_money(amount)
        if new_balance < 0:
            raise InvalidAmountError(amount, "잔액은 0 이상이어야 합니다")

        async with locked_account(user_id) as (conn, user):
            old_balance = user.balance
            user.balance = new_balance
            await user.save(using_db=conn, update_fields=["balance", "updated_at"])

        logger.info(f"Admin balance set for user {user_id}: {old_balance} -> {new_balance}")
        return new_balance

