"""Boundary Protocols — contracts between core and shell.

Invariants:
    - Core NEVER imports from shell — dependency arrows point inward only
    - All IO operations accessed through Protocol types
    - Implementations provided by shell (infrastructure/entity_store.py)

Design Decisions:
    - Protocol over ABC: structural subtyping, no inheritance hierarchy
    - Async in Protocol: boundary methods are async because implementations do IO,
      but core pure functions that USE these shapes are never async themselves —
      the shell orchestrates the async calls around the pure logic
    - Store methods return ORM-shaped objects typed by the *Like protocols, so
      services never import the ORM models directly
"""

from datetime import date
from typing import Protocol, Sequence

from app.core.domain_types import TaskId, UserId


class UserLike(Protocol):
    """Structural contract for persisted users."""
    id: int
    name: str


class TaskLike(Protocol):
    """Structural contract for persisted tasks."""
    id: int
    title: str
    description: str
    creation_date: date
    status: str
    user_id: int | None


class TaskPayload(Protocol):
    """Update payload accepted by the reconciliation functions.

    Every field is optional; None means "not supplied".
    """
    title: str | None
    description: str | None
    status: str | None
    user_id: int | None


class UserRepository(Protocol):
    """Contract for user persistence — implemented by shell."""
    async def get(self, user_id: UserId) -> UserLike | None: ...
    async def list_paged(self, offset: int, limit: int) -> Sequence[UserLike]: ...
    async def add(self, name: str) -> UserLike: ...


class TaskRepository(Protocol):
    """Contract for task persistence — implemented by shell."""
    async def get(self, task_id: TaskId) -> TaskLike | None: ...
    async def list_paged(self, offset: int, limit: int) -> Sequence[TaskLike]: ...
    async def list_by_user(self, user_id: UserId) -> Sequence[TaskLike]: ...
    async def add(
        self,
        title: str,
        description: str,
        creation_date: date,
        status: str,
        user_id: UserId | None,
    ) -> TaskLike: ...
    async def delete(self, task: TaskLike) -> None: ...
