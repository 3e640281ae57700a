"""Referential Integrity — confirms a referenced user exists before a task points at it.

Invariants:
    - Exactly one point lookup per call, no caching across calls
    - Raises UserNotFoundError when the user is absent; never returns None

Design Decisions:
    - Shared by create, full update, partial update and assign so the
      not-found message and error code stay identical across operations
"""

from app.core.domain_types import UserId
from app.core.errors import UserNotFoundError
from app.core.repository_protocols import UserLike, UserRepository


async def ensure_user_exists(users: UserRepository, user_id: UserId) -> UserLike:
    """Return the user or raise UserNotFoundError."""
    user = await users.get(user_id)
    if user is None:
        raise UserNotFoundError(user_id)
    return user
