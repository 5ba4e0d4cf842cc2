"""
Task / UserTask Repository
"""
from typing import List, Optional

from tortoise.backends.base.client import BaseDBAsyncClient

from models import Task, TaskStatus, UserTask


async def find_task_by_id(task_id: int, using_db: Optional[BaseDBAsyncClient] = None) -> Optional[Task]:
    return await Task.filter(id=task_id).using_db(using_db).first()


async def find_task_by_code(code: str, using_db: Optional[BaseDBAsyncClient] = None) -> Optional[Task]:
    return await Task.filter(code=code).using_db(using_db).first()


async def find_active_tasks() -> List[Task]:
    return await Task.filter(status=TaskStatus.ACTIVE).order_by("id")


async def get_grant_record(
    user_id: int,
    task_id: int,
    using_db: Optional[BaseDBAsyncClient] = None
) -> Optional[UserTask]:
    """보상 지급 기록 조회 (트랜잭션 안에서는 행 잠금)"""
    query = UserTask.filter(user_id=user_id, task_id=task_id).using_db(using_db)
    if using_db is not None:
        query = query.select_for_update()
    return await query.first()


async def get_user_tasks(user_id: int) -> List[UserTask]:
    return await UserTask.filter(user_id=user_id).order_by("id").prefetch_related("task")
