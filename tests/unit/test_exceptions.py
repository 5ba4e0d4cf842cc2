"""
exceptions.py 유닛 테스트
"""
from decimal import Decimal

from exceptions import (
    VLTokenError,
    NotFoundError,
    ConflictError,
    AccountNotFoundError,
    ItemNotFoundError,
    TaskNotFoundError,
    FriendRequestNotFoundError,
    AlreadyClaimedError,
    PriceChangedError,
    AlreadyFriendsError,
    SubscriptionNotVerifiedError,
    InsufficientFundsError,
    TransactionConflictError,
    UpstreamUnavailableError,
    ValidationError,
    InvalidAmountError,
    InvalidQuantityError,
)


class TestVLTokenError:
    """기본 예외 클래스 테스트"""

    def test_default_message(self):
        """기본 메시지 테스트"""
        error = VLTokenError()
        assert error.message == "알 수 없는 오류가 발생했습니다"
        assert str(error) == "알 수 없는 오류가 발생했습니다"

    def test_custom_message(self):
        error = VLTokenError("커스텀 에러 메시지")
        assert str(error) == "커스텀 에러 메시지"

    def test_to_dict_has_kind_and_message(self):
        assert VLTokenError("x").to_dict() == {"kind": "internal", "message": "x"}


class TestNotFoundErrors:
    """조회 실패 예외 테스트"""

    def test_account_not_found(self):
        error = AccountNotFoundError(42)
        assert error.user_id == 42
        assert "42" in str(error)
        assert isinstance(error, NotFoundError)
        assert error.to_dict()["kind"] == "not_found"
        assert error.to_dict()["user_id"] == 42

    def test_item_and_task_not_found(self):
        assert ItemNotFoundError(3).item_id == 3
        assert TaskNotFoundError("daily_bonus").task_id == "daily_bonus"
        assert isinstance(TaskNotFoundError(1), VLTokenError)

    def test_friend_request_not_found(self):
        error = FriendRequestNotFoundError(1, 2)
        assert error.details() == {"from_user_id": 1, "to_user_id": 2}


class TestConflictErrors:
    """충돌 예외 테스트"""

    def test_already_claimed_daily_message(self):
        assert "오늘" in str(AlreadyClaimedError(1, daily=True))
        assert "오늘" not in str(AlreadyClaimedError(1))

    def test_price_changed_reports_actual_price(self):
        error = PriceChangedError(5, Decimal("10.00"), Decimal("12.50"))
        payload = error.to_dict()
        assert payload["kind"] == "conflict"
        assert payload["actual_price"] == "12.50"
        assert payload["item_id"] == 5

    def test_conflict_family(self):
        assert isinstance(AlreadyFriendsError(), ConflictError)
        assert SubscriptionNotVerifiedError(upstream_failed=True).to_dict()["upstream_failed"] is True


class TestResourceErrors:
    """잔액/트랜잭션/외부 연동 예외 테스트"""

    def test_insufficient_funds(self):
        error = InsufficientFundsError(Decimal("50.00"), Decimal("20.00"))
        assert error.to_dict() == {
            "kind": "insufficient_funds",
            "message": error.message,
            "required": "50.00",
            "current": "20.00",
        }

    def test_transaction_conflict_keeps_reason(self):
        error = TransactionConflictError("Lock wait timeout exceeded")
        assert error.reason == "Lock wait timeout exceeded"
        assert error.kind == "transaction_conflict"

    def test_upstream_unavailable(self):
        error = UpstreamUnavailableError("telegram", "timeout")
        assert error.to_dict()["service"] == "telegram"
        assert error.reason == "timeout"


class TestValidationErrors:
    def test_invalid_amount(self):
        error = InvalidAmountError("abc")
        assert isinstance(error, ValidationError)
        assert "'abc'" in str(error)
        assert error.kind == "validation_error"

    def test_invalid_quantity(self):
        assert InvalidQuantityError(0).quantity == 0
