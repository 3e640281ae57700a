"""User ORM — persists the owners tasks can be assigned to.

Invariants:
    - id is an autoincrement integer primary key, stable for the user's lifetime
    - name is non-nullable free text
    - Users are never updated or deleted

Design Decisions:
    - No relationship() to Task: tasks-by-user is a single scan in the entity store,
      and a lazy collection would be an implicit IO in async context
"""

from sqlalchemy import Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from app.db.base import Base


class User(Base):
    """User entity — referenced by zero or more tasks."""
    __tablename__ = "users"

    id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True,
    )
    name: Mapped[str] = mapped_column(Text, nullable=False)
