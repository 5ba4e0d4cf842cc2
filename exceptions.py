"""
VLToken 커스텀 예외 클래스 정의

모든 예외는 VLTokenError를 상속받아 일관된 에러 처리를 제공합니다.
각 예외는 kind(에러 종류)와 사람이 읽을 수 있는 message를 가지며,
to_dict()로 호출자에게 구조화된 결과를 넘길 수 있습니다.
"""
from decimal import Decimal


class VLTokenError(Exception):
    """VLToken 기본 예외 클래스"""

    kind: str = "internal"

    def __init__(self, message: str = "알 수 없는 오류가 발생했습니다"):
        self.message = message
        super().__init__(self.message)

    def details(self) -> dict:
        """예외별 추가 정보 (하위 클래스에서 확장)"""
        return {}

    def to_dict(self) -> dict:
        """구조화된 에러 응답"""
        payload = {"kind": self.kind, "message": self.message}
        for key, value in self.details().items():
            payload[key] = str(value) if isinstance(value, Decimal) else value
        return payload


# =============================================================================
# 조회 실패 (NotFound)
# =============================================================================


class NotFoundError(VLTokenError):
    """대상을 찾을 수 없음"""

    kind = "not_found"


class AccountNotFoundError(NotFoundError):
    """계정을 찾을 수 없음"""

    def __init__(self, user_id):
        self.user_id = user_id
        super().__init__(f"사용자를 찾을 수 없습니다: {user_id}")

    def details(self) -> dict:
        return {"user_id": self.user_id}


class ItemNotFoundError(NotFoundError):
    """아이템을 찾을 수 없음"""

    def __init__(self, item_id):
        self.item_id = item_id
        super().__init__(f"아이템을 찾을 수 없습니다: {item_id}")

    def details(self) -> dict:
        return {"item_id": self.item_id}


class TaskNotFoundError(NotFoundError):
    """태스크를 찾을 수 없거나 비활성 상태"""

    def __init__(self, task_id):
        self.task_id = task_id
        super().__init__(f"태스크를 찾을 수 없습니다: {task_id}")

    def details(self) -> dict:
        return {"task_id": self.task_id}


class FriendRequestNotFoundError(NotFoundError):
    """대기 중인 친구 요청 없음"""

    def __init__(self, from_user_id, to_user_id):
        self.from_user_id = from_user_id
        self.to_user_id = to_user_id
        super().__init__("친구 요청을 찾을 수 없거나 이미 처리되었습니다.")

    def details(self) -> dict:
        return {"from_user_id": self.from_user_id, "to_user_id": self.to_user_id}


# =============================================================================
# 충돌 (Conflict)
# =============================================================================


class ConflictError(VLTokenError):
    """멱등성 위반 또는 오래된 상태 기반 요청"""

    kind = "conflict"


class AlreadyClaimedError(ConflictError):
    """이미 지급된 보상"""

    def __init__(self, task_id, daily: bool = False):
        self.task_id = task_id
        self.daily = daily
        if daily:
            super().__init__("오늘은 이미 보너스를 받았습니다.")
        else:
            super().__init__("이미 보상을 받은 태스크입니다.")

    def details(self) -> dict:
        return {"task_id": self.task_id, "daily": self.daily}


class PriceChangedError(ConflictError):
    """아이템 가격 변경됨"""

    def __init__(self, item_id, expected_price: Decimal, actual_price: Decimal):
        self.item_id = item_id
        self.expected_price = expected_price
        self.actual_price = actual_price
        super().__init__(
            f"아이템 가격이 변경되었습니다. (예상: {expected_price}, 현재: {actual_price})"
        )

    def details(self) -> dict:
        return {"item_id": self.item_id, "actual_price": self.actual_price}


class AlreadyFriendsError(ConflictError):
    """이미 친구 관계"""

    def __init__(self):
        super().__init__("이미 친구입니다.")


class FriendRequestExistsError(ConflictError):
    """이미 대기 중인 친구 요청이 있음"""

    def __init__(self):
        super().__init__("이미 친구 요청이 존재합니다.")


class TaskAlreadyAssignedError(ConflictError):
    """이미 할당된 태스크"""

    def __init__(self, task_id):
        self.task_id = task_id
        super().__init__(f"이미 할당된 태스크입니다: {task_id}")


class TaskRejectedError(ConflictError):
    """거절 처리된 태스크 (종료 상태)"""

    def __init__(self, task_id):
        self.task_id = task_id
        super().__init__(f"거절된 태스크는 보상을 받을 수 없습니다: {task_id}")


class SubscriptionNotVerifiedError(ConflictError):
    """채널 구독이 확인되지 않음 (아직 보상 조건 미충족)"""

    def __init__(self, upstream_failed: bool = False):
        self.upstream_failed = upstream_failed
        super().__init__("채널 구독이 확인되지 않았습니다.")

    def details(self) -> dict:
        return {"upstream_failed": self.upstream_failed}


# =============================================================================
# 자원 관련 예외
# =============================================================================


class InsufficientFundsError(VLTokenError):
    """잔액 부족"""

    kind = "insufficient_funds"

    def __init__(self, required: Decimal, current: Decimal):
        self.required = required
        self.current = current
        super().__init__(f"잔액이 부족합니다. (필요: {required}, 보유: {current})")

    def details(self) -> dict:
        return {"required": self.required, "current": self.current}


# =============================================================================
# 트랜잭션 / 외부 연동
# =============================================================================


class TransactionConflictError(VLTokenError):
    """행 잠금 대기 시간 초과 또는 데드락 (재시도 가능)"""

    kind = "transaction_conflict"

    def __init__(self, reason: str = ""):
        self.reason = reason
        super().__init__("동시 요청이 충돌했습니다. 잠시 후 다시 시도해주세요.")


class UpstreamUnavailableError(VLTokenError):
    """외부 검증 서비스 응답 실패"""

    kind = "upstream_unavailable"

    def __init__(self, service: str, reason: str = ""):
        self.service = service
        self.reason = reason
        super().__init__(f"{service} 서비스에 연결할 수 없습니다.")

    def details(self) -> dict:
        return {"service": self.service}


# =============================================================================
# 입력 검증
# =============================================================================


class ValidationError(VLTokenError):
    """잘못된 입력"""

    kind = "validation_error"


class InvalidAmountError(ValidationError):
    """잘못된 금액"""

    def __init__(self, value, reason: str = "유효한 금액이 아닙니다"):
        self.value = value
        super().__init__(f"{reason}: {value!r}")


class InvalidQuantityError(ValidationError):
    """잘못된 수량"""

    def __init__(self, quantity):
        self.quantity = quantity
        super().__init__(f"수량은 1 이상이어야 합니다: {quantity!r}")
