from models.repos.users_repo import (
    find_account_by_id,
    find_account_by_telegram_id,
    list_account_ids,
)
from models.repos.item_repo import find_item_by_id, find_active_items
