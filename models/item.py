from enum import Enum

from tortoise import Model, fields


class ItemType(str, Enum):
    """아이템 분류 (표시용)"""
    PASSIVE = "passive"
    ARTIFACT = "artifact"
    CONSUMABLE = "consumable"
    LEGENDARY = "legendary"


class ItemStatus(str, Enum):
    """판매 상태"""
    ACTIVE = "active"
    INACTIVE = "inactive"


# 상점 카탈로그 아이템 (런타임에는 읽기 전용)
class Item(Model):
    id = fields.IntField(pk=True)
    name = fields.CharField(max_length=255)
    description = fields.TextField(null=True)
    price = fields.DecimalField(max_digits=12, decimal_places=2, default=0)
    income_per_hour = fields.DecimalField(max_digits=12, decimal_places=2, default=0)
    image_url = fields.CharField(max_length=255, null=True)
    type = fields.CharEnumField(ItemType, default=ItemType.PASSIVE)
    status = fields.CharEnumField(ItemStatus, default=ItemStatus.ACTIVE)

    created_at = fields.DatetimeField(auto_now_add=True)
    updated_at = fields.DatetimeField(auto_now=True)

    class Meta:
        table = "items"

    @property
    def is_active(self) -> bool:
        return self.status == ItemStatus.ACTIVE

    def __str__(self):
        return self.name or str(self.id)
