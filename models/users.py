from decimal import Decimal

from tortoise import models, fields

from config import ECONOMY


class User(models.Model):
    """
    유저 계정 (게임 상태 레코드)

    - telegram_id로 식별 (최초 접촉 시 생성, 생성 도중에는 null 허용)
    - balance는 저장소가 아닌 서비스 계층에서 차감 전 음수 여부를 검사
    - 삭제되지 않음
    """

    id = fields.IntField(pk=True)
    telegram_id = fields.CharField(max_length=64, unique=True, null=True)
    username = fields.CharField(max_length=255, unique=True, null=True)
    first_name = fields.CharField(max_length=255, null=True)
    last_name = fields.CharField(max_length=255, null=True)
    name = fields.CharField(max_length=255, default="사용자")

    balance = fields.DecimalField(
        max_digits=ECONOMY.BALANCE_MAX_DIGITS,
        decimal_places=2,
        default=ECONOMY.INITIAL_BALANCE,
    )
    level = fields.IntField(default=1)
    experience = fields.IntField(default=0)

    created_at = fields.DatetimeField(auto_now_add=True)
    updated_at = fields.DatetimeField(auto_now=True)

    def get_name(self) -> str:
        return self.username or self.first_name or self.name

    @property
    def balance_value(self) -> Decimal:
        """None 방어가 들어간 잔액"""
        return self.balance if self.balance is not None else Decimal("0.00")

    class Meta:
        table = "users"

    def __str__(self):
        return f"User({self.id}, tg={self.telegram_id})"
