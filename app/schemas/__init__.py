"""Pydantic Schemas — request/response validation for API endpoints.

Invariants:
    - Schemas validate at system boundary (user input, API responses)
    - Wire format is camelCase (userId, creationDate); snake_case accepted on input

Design Decisions:
    - Separate from models: schemas are API contracts, models are persistence
    - Responses built with from_attributes: plain structural mapping from ORM rows,
      no dedicated mapper layer
"""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

# Largest value a BIGINT primary key can hold; ids above it never exist
MAX_ID = 2**63 - 1


class ApiModel(BaseModel):
    """Base for every API schema — camelCase aliases, ORM attribute loading."""
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )
