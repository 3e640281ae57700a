"""Task Lifecycle — create, read, list, full/partial update, delete, assign.

Invariants:
    - Each writing operation commits exactly once, at the end (all-or-nothing)
    - Reconciliation (pure) runs before the user-existence check (IO), so
      InvalidTaskData / InvalidStatus are reported before UserNotFound
    - creation_date and initial status are set here, never by the caller
    - create checks the referenced user before the presence of title/description
    - No state held between requests: one TaskService per AsyncSession

Design Decisions:
    - Handler class bound to (db) like the other shell services
    - assign is a plain sequential read-verify-write, no extra locking:
      concurrent writers to the same task are last-writer-wins
"""

import logging
from datetime import date
from typing import Sequence

from sqlalchemy.ext.asyncio import AsyncSession

from app.core.domain_types import TaskId, TaskStatus, UserId
from app.core.errors import InvalidTaskDataError, TaskNotFoundError
from app.core.reconcile_task import TaskState, reconcile_full, reconcile_partial
from app.core.repository_protocols import TaskLike, TaskPayload
from app.infrastructure.entity_store import SqlTaskStore, SqlUserStore
from app.services.integrity import ensure_user_exists

logger = logging.getLogger(__name__)


def _apply_state(task: TaskLike, state: TaskState) -> None:
    task.title = state.title
    task.description = state.description
    task.status = state.status.value
    task.user_id = state.user_id


class TaskService:
    """Orchestrates task operations around the pure reconciliation core."""

    def __init__(self, db: AsyncSession):
        self.db = db
        self.tasks = SqlTaskStore(db)
        self.users = SqlUserStore(db)

    async def _get_or_raise(self, task_id: TaskId) -> TaskLike:
        task = await self.tasks.get(task_id)
        if task is None:
            raise TaskNotFoundError(task_id)
        return task

    async def create(
        self,
        title: str | None,
        description: str | None,
        user_id: UserId | None = None,
    ) -> TaskLike:
        """Insert a NEW task dated today.

        The user is checked first: an unknown user_id is reported as
        UserNotFoundError even when title or description is missing.
        """
        if user_id is not None:
            await ensure_user_exists(self.users, user_id)
        if title is None:
            raise InvalidTaskDataError("title")
        if description is None:
            raise InvalidTaskDataError("description")
        task = await self.tasks.add(
            title=title,
            description=description,
            creation_date=date.today(),
            status=TaskStatus.NEW.value,
            user_id=user_id,
        )
        await self.db.commit()
        logger.info(
            f"Task {task.id} created",
            extra={"task_id": task.id, "user_id": user_id},
        )
        return task

    async def get(self, task_id: TaskId) -> TaskLike:
        return await self._get_or_raise(task_id)

    async def list(self, page: int, size: int) -> Sequence[TaskLike]:
        return await self.tasks.list_paged(offset=page * size, limit=size)

    async def update_full(self, task_id: TaskId, update: TaskPayload) -> TaskLike:
        """PUT semantics — every governed field replaced."""
        task = await self._get_or_raise(task_id)
        state = reconcile_full(TaskState.of(task), update)
        if update.user_id is not None:
            await ensure_user_exists(self.users, UserId(update.user_id))
        return await self._persist(task, state)

    async def update_partial(
        self, task_id: TaskId, update: TaskPayload,
    ) -> TaskLike:
        """PATCH semantics — only supplied, non-blank fields merged."""
        task = await self._get_or_raise(task_id)
        state = reconcile_partial(TaskState.of(task), update)
        if update.user_id is not None:
            await ensure_user_exists(self.users, UserId(update.user_id))
        return await self._persist(task, state)

    async def _persist(self, task: TaskLike, state: TaskState) -> TaskLike:
        _apply_state(task, state)
        await self.db.commit()
        logger.info(
            f"Task {task.id} updated (status={task.status})",
            extra={"task_id": task.id, "user_id": task.user_id},
        )
        return task

    async def delete(self, task_id: TaskId) -> None:
        task = await self._get_or_raise(task_id)
        await self.tasks.delete(task)
        await self.db.commit()
        logger.info(f"Task {task_id} deleted", extra={"task_id": task_id})

    async def assign(self, task_id: TaskId, user_id: UserId) -> TaskLike:
        """Point the task at the user. User is looked up first, then the task."""
        user = await ensure_user_exists(self.users, user_id)
        task = await self._get_or_raise(task_id)
        task.user_id = user.id
        await self.db.commit()
        logger.info(
            f"Task {task_id} assigned to user {user.id}",
            extra={"task_id": task_id, "user_id": user.id},
        )
        return task
