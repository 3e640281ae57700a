"""Task Routes — /tasks CRUD, partial update, and assignment.

Invariants:
    - Routes never contain business logic (delegate to TaskService)
    - PUT and PATCH share the TaskUpdate body; semantics differ in the service
    - Domain errors propagate to the global handler (404 / 400)

Design Decisions:
    - DELETE returns 204 with an empty body: deletion is synchronous
"""

from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.params import TaskIdPath, UserIdPath
from app.core.domain_types import TaskId, UserId
from app.infrastructure.database import get_db
from app.schemas.task import (
    TaskCreate, TaskResponse, TaskSummaryResponse, TaskUpdate,
)
from app.services.task_service import TaskService

router = APIRouter(prefix="/tasks", tags=["tasks"])


@router.post(
    "", response_model=TaskResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Creates a new task",
)
async def create_task(body: TaskCreate, db: AsyncSession = Depends(get_db)):
    user_id = UserId(body.user_id) if body.user_id is not None else None
    return await TaskService(db).create(body.title, body.description, user_id)


@router.get(
    "", response_model=list[TaskSummaryResponse], summary="Fetches all tasks",
)
async def list_tasks(
    page: int = Query(0, ge=0),
    size: int = Query(10, ge=0),
    db: AsyncSession = Depends(get_db),
):
    return await TaskService(db).list(page, size)


@router.get(
    "/{task_id}", response_model=TaskResponse,
    summary="Fetches task details by ID",
)
async def get_task(task_id: TaskIdPath, db: AsyncSession = Depends(get_db)):
    return await TaskService(db).get(TaskId(task_id))


@router.put(
    "/{task_id}", response_model=TaskResponse,
    summary="Updates task details",
)
async def update_task(
    task_id: TaskIdPath, body: TaskUpdate, db: AsyncSession = Depends(get_db),
):
    return await TaskService(db).update_full(TaskId(task_id), body)


@router.patch(
    "/{task_id}", response_model=TaskResponse,
    summary="Partially updates task details",
)
async def partial_update_task(
    task_id: TaskIdPath, body: TaskUpdate, db: AsyncSession = Depends(get_db),
):
    return await TaskService(db).update_partial(TaskId(task_id), body)


@router.delete(
    "/{task_id}", status_code=status.HTTP_204_NO_CONTENT,
    summary="Deletes task by ID",
)
async def delete_task(task_id: TaskIdPath, db: AsyncSession = Depends(get_db)):
    await TaskService(db).delete(TaskId(task_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.put(
    "/{task_id}/assign/{user_id}", response_model=TaskResponse,
    summary="Assigns a task to a user",
)
async def assign_task(
    task_id: TaskIdPath, user_id: UserIdPath,
    db: AsyncSession = Depends(get_db),
):
    return await TaskService(db).assign(TaskId(task_id), UserId(user_id))
