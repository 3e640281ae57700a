"""Shared Path Parameters — bounded integer ids for every /{id} route.

Invariants:
    - Ids outside 1..MAX_ID are rejected as 400 VALIDATION_ERROR before any
      store call, so the driver never sees an integer it cannot bind
"""

from typing import Annotated

from fastapi import Path

from app.schemas import MAX_ID

TaskIdPath = Annotated[int, Path(ge=1, le=MAX_ID)]
UserIdPath = Annotated[int, Path(ge=1, le=MAX_ID)]
