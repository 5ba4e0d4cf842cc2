from models.users import User
from models.item import Item, ItemType, ItemStatus
from models.user_inventory import UserInventory
from models.friend import Friend, FriendStatus
from models.task import Task, TaskRecurrence, TaskStatus, UserTask, UserTaskStatus

__all__ = [
    "User",
    "Item", "ItemType", "ItemStatus",
    "UserInventory",
    "Friend", "FriendStatus",
    "Task", "TaskRecurrence", "TaskStatus", "UserTask", "UserTaskStatus",
]
