"""User Lifecycle — create, read, list users and list a user's tasks."""

import logging
from typing import Sequence

from sqlalchemy.ext.asyncio import AsyncSession

from app.core.domain_types import UserId
from app.core.repository_protocols import TaskLike, UserLike
from app.infrastructure.entity_store import SqlTaskStore, SqlUserStore
from app.services.integrity import ensure_user_exists

logger = logging.getLogger(__name__)


class UserService:
    """Thin orchestration over the user store."""

    def __init__(self, db: AsyncSession):
        self.db = db
        self.users = SqlUserStore(db)
        self.tasks = SqlTaskStore(db)

    async def create(self, name: str) -> UserLike:
        user = await self.users.add(name)
        await self.db.commit()
        logger.info(f"User {user.id} created", extra={"user_id": user.id})
        return user

    async def get(self, user_id: UserId) -> UserLike:
        return await ensure_user_exists(self.users, user_id)

    async def list(self, page: int, size: int) -> Sequence[UserLike]:
        return await self.users.list_paged(offset=page * size, limit=size)

    async def list_tasks(self, user_id: UserId) -> Sequence[TaskLike]:
        """All tasks owned by the user, in store scan order. Raises UserNotFoundError."""
        await ensure_user_exists(self.users, user_id)
        return await self.tasks.list_by_user(user_id)
