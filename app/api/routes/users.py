"""User Routes — /users create, list, get, and the user's tasks.

Invariants:
    - Routes never contain business logic (delegate to UserService)
    - Not-found surfaces as UserNotFoundError → 404 via the global handler
"""

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.params import UserIdPath
from app.core.domain_types import UserId
from app.infrastructure.database import get_db
from app.schemas.task import TaskResponse
from app.schemas.user import UserCreate, UserResponse
from app.services.user_service import UserService

router = APIRouter(prefix="/users", tags=["users"])


@router.post(
    "", response_model=UserResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Creates a new user",
)
async def create_user(body: UserCreate, db: AsyncSession = Depends(get_db)):
    return await UserService(db).create(body.name)


@router.get(
    "", response_model=list[UserResponse], summary="Fetches all users",
)
async def list_users(
    page: int = Query(0, ge=0),
    size: int = Query(10, ge=0),
    db: AsyncSession = Depends(get_db),
):
    return await UserService(db).list(page, size)


@router.get(
    "/{user_id}", response_model=UserResponse,
    summary="Fetches user details by ID",
)
async def get_user(user_id: UserIdPath, db: AsyncSession = Depends(get_db)):
    return await UserService(db).get(UserId(user_id))


@router.get(
    "/{user_id}/tasks", response_model=list[TaskResponse],
    summary="Fetches user tasks by ID",
)
async def list_user_tasks(
    user_id: UserIdPath, db: AsyncSession = Depends(get_db),
):
    return await UserService(db).list_tasks(UserId(user_id))
