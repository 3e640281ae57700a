"""Task Schemas — request/response shapes for /tasks.

Invariants:
    - TaskCreate: title and description must be present (checked in the service),
      userId optional
    - TaskUpdate leaves every field optional: required-ness and blankness are
      decided by the reconciliation core (full vs partial), not by Pydantic,
      so PUT and PATCH report INVALID_TASK_DATA / INVALID_STATUS uniformly
    - TaskUpdate.status is a raw string; parsing happens in core.reconcile_task

Design Decisions:
    - TaskSummaryResponse omits description and userId (list view)
"""

from datetime import date

from pydantic import Field

from app.core.domain_types import TaskStatus
from app.schemas import MAX_ID, ApiModel


class TaskCreate(ApiModel):
    """Creation payload. Missing title/description is reported by the task
    service after the user check, so an unknown userId always wins."""
    title: str | None = Field(None, max_length=10_000)
    description: str | None = Field(None, max_length=10_000)
    user_id: int | None = Field(None, ge=1, le=MAX_ID)


class TaskUpdate(ApiModel):
    """Payload for both PUT (full) and PATCH (partial)."""
    title: str | None = Field(None, max_length=10_000)
    description: str | None = Field(None, max_length=10_000)
    status: str | None = None
    user_id: int | None = Field(None, ge=1, le=MAX_ID)


class TaskResponse(ApiModel):
    id: int
    title: str
    description: str
    creation_date: date
    status: TaskStatus
    user_id: int | None = None


class TaskSummaryResponse(ApiModel):
    id: int
    title: str
    creation_date: date
    status: TaskStatus
