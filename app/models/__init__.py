"""ORM Models — SQLAlchemy declarative models for all domain entities.

Invariants:
    - All models inherit from Base (db/base.py)
    - Tasks reference users by user_id FK

Design Decisions:
    - One file per entity for locality
    - All models imported here so Base.metadata is complete before
      create_all / alembic autogenerate run
"""

from app.models.user import User  # noqa: F401
from app.models.task import Task  # noqa: F401
