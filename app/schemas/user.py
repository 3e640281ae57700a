"""User Schemas — request/response shapes for /users."""

from pydantic import Field

from app.schemas import ApiModel


class UserCreate(ApiModel):
    name: str = Field(min_length=1, max_length=255)


class UserResponse(ApiModel):
    id: int
    name: str
