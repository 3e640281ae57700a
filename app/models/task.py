"""Task ORM — persists a unit of work and its optional assignee.

Invariants:
    - id is an autoincrement integer primary key
    - creation_date set once by the task service, never updated
    - status holds a TaskStatus value (NEW, IN_PROGRESS, COMPLETED, CANCELLED)
    - user_id is nullable; NULL means unassigned

Design Decisions:
    - status as String(20) over a DB enum: adding a state needs no ALTER TYPE
    - user_id indexed: GET /users/{id}/tasks scans by it
"""

from datetime import date

from sqlalchemy import Integer, String, Text, Date, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column

from app.core.domain_types import TaskStatus
from app.db.base import Base


class Task(Base):
    """Task entity — title, description, status, optional owner."""
    __tablename__ = "tasks"

    id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True,
    )
    title: Mapped[str] = mapped_column(Text, nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    creation_date: Mapped[date] = mapped_column(Date, nullable=False)
    status: Mapped[str] = mapped_column(
        String(20), nullable=False, default=TaskStatus.NEW.value,
    )
    user_id: Mapped[int | None] = mapped_column(
        Integer, ForeignKey("users.id"), nullable=True, index=True,
    )
