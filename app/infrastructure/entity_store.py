"""Entity Store — SQLAlchemy implementations of the user/task repository protocols.

Invariants:
    - Stores never commit: the owning service commits once per unit of work
    - add() flushes so the returned object carries its store-assigned id
    - Paged scans order by id ascending; list_by_user uses store scan order

Design Decisions:
    - Thin classes bound to one AsyncSession per request (no module-level state)
    - offset/limit pushed down to SQL, no in-memory slicing
"""

from datetime import date
from typing import Sequence

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.domain_types import TaskId, UserId
from app.models.task import Task
from app.models.user import User


class SqlUserStore:
    """UserRepository backed by the `users` table."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def get(self, user_id: UserId) -> User | None:
        return await self.db.get(User, user_id)

    async def list_paged(self, offset: int, limit: int) -> Sequence[User]:
        result = await self.db.execute(
            select(User).order_by(User.id).offset(offset).limit(limit),
        )
        return result.scalars().all()

    async def add(self, name: str) -> User:
        user = User(name=name)
        self.db.add(user)
        await self.db.flush()
        return user


class SqlTaskStore:
    """TaskRepository backed by the `tasks` table."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def get(self, task_id: TaskId) -> Task | None:
        return await self.db.get(Task, task_id)

    async def list_paged(self, offset: int, limit: int) -> Sequence[Task]:
        result = await self.db.execute(
            select(Task).order_by(Task.id).offset(offset).limit(limit),
        )
        return result.scalars().all()

    async def list_by_user(self, user_id: UserId) -> Sequence[Task]:
        result = await self.db.execute(
            select(Task).where(Task.user_id == user_id),
        )
        return result.scalars().all()

    async def add(
        self,
        title: str,
        description: str,
        creation_date: date,
        status: str,
        user_id: UserId | None,
    ) -> Task:
        task = Task(
            title=title,
            description=description,
            creation_date=creation_date,
            status=status,
            user_id=user_id,
        )
        self.db.add(task)
        await self.db.flush()
        return task

    async def delete(self, task: Task) -> None:
        await self.db.delete(task)
        await self.db.flush()
