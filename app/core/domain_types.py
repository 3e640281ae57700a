"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - UserId, TaskId wrap the integer primary keys — never use bare int in domain logic
    - TaskStatus values are the uppercase names exposed on the wire
    - All valid states encoded as Enums — no raw string matching

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enum: serializes to JSON without custom encoders and stores as plain VARCHAR
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

UserId = NewType("UserId", int)
TaskId = NewType("TaskId", int)


# ─── Enums ───────────────────────────────────────────────────────

class TaskStatus(str, Enum):
    """Task lifecycle states — maps to DB `status` column. Any-to-any transitions."""
    NEW = "NEW"
    IN_PROGRESS = "IN_PROGRESS"
    COMPLETED = "COMPLETED"
    CANCELLED = "CANCELLED"
