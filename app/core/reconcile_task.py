"""Task Reconciliation — merges an update payload into the current task state.

Invariants:
    - reconcile_full / reconcile_partial are PURE: return a new TaskState, never mutate
    - parse_status is the single source of truth for status parsing (both paths)
    - Full update: title, description, status required and non-blank; user_id replaced
      wholesale (None clears the assignment)
    - Partial update: None or blank leaves the field unchanged; None user_id never
      clears the assignment; a present status must still parse
    - reconcile_partial(state, <empty payload>) == state

Design Decisions:
    - User existence is NOT checked here: it is IO, so the shell runs the integrity
      check after reconciliation succeeds (validation errors surface first)
    - Blank = empty or whitespace-only, matching the API contract
"""

from dataclasses import dataclass, replace

from app.core.domain_types import TaskStatus, UserId
from app.core.errors import InvalidStatusError, InvalidTaskDataError
from app.core.repository_protocols import TaskLike, TaskPayload


@dataclass(frozen=True)
class TaskState:
    """Mutable fields of a task, as an immutable snapshot."""
    title: str
    description: str
    status: TaskStatus
    user_id: UserId | None = None

    @classmethod
    def of(cls, task: TaskLike) -> "TaskState":
        return cls(
            title=task.title,
            description=task.description,
            status=TaskStatus(task.status),
            user_id=UserId(task.user_id) if task.user_id is not None else None,
        )


def _is_blank(value: str | None) -> bool:
    return value is None or not value.strip()


def parse_status(raw: str) -> TaskStatus | None:
    """Case-insensitive lookup by member name. None when nothing matches."""
    try:
        return TaskStatus[raw.upper()]
    except KeyError:
        return None


def _require_status(raw: str) -> TaskStatus:
    status = parse_status(raw)
    if status is None:
        raise InvalidStatusError(raw)
    return status


def reconcile_full(existing: TaskState, update: TaskPayload) -> TaskState:
    """Replace every governed field. Raises InvalidTaskDataError / InvalidStatusError."""
    for name in ("title", "description", "status"):
        if _is_blank(getattr(update, name)):
            raise InvalidTaskDataError(name)

    status = _require_status(update.status)
    return replace(
        existing,
        title=update.title,
        description=update.description,
        status=status,
        user_id=update.user_id,
    )


def reconcile_partial(existing: TaskState, update: TaskPayload) -> TaskState:
    """Apply only the supplied, non-blank fields. Raises InvalidStatusError."""
    changes: dict = {}
    if not _is_blank(update.title):
        changes["title"] = update.title
    if not _is_blank(update.description):
        changes["description"] = update.description
    if not _is_blank(update.status):
        changes["status"] = _require_status(update.status)
    if update.user_id is not None:
        changes["user_id"] = update.user_id
    return replace(existing, **changes)
