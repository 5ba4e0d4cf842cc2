"""
UserInventory 모델 정의

사용자가 보유한 수익 아이템과 수량을 관리합니다.
"""
from tortoise import models, fields


class UserInventory(models.Model):
    """
    사용자 인벤토리 모델

    - (user, item) 당 하나의 행, 구매할 때마다 quantity 증가
    - 계정 삭제 시에만 함께 삭제 (CASCADE)
    """

    id = fields.BigIntField(pk=True)
    user = fields.ForeignKeyField(
        "models.User",
        related_name="inventory",
        on_delete=fields.CASCADE
    )
    item = fields.ForeignKeyField(
        "models.Item",
        related_name="owned_by",
        on_delete=fields.CASCADE
    )
    quantity = fields.IntField(default=1)

    purchased_at = fields.DatetimeField(auto_now_add=True)
    updated_at = fields.DatetimeField(auto_now=True)

    class Meta:
        table = "user_items"
        unique_together = [("user", "item")]
