"""Routes exposing the ToDo task operations."""

from __future__ import annotations

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Query, Response, status

from ...deps import TaskServiceDependency
from ...domain import TaskFilter
from ...schemas import (
    CompletionPercentageUpdate,
    ErrorResponse,
    TaskCreate,
    TaskCreatedResponse,
    TaskRead,
    TaskUpdate,
)

router = APIRouter(prefix="/todo-tasks", tags=["todo-tasks"])

_BAD_REQUEST = {status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse}}
_NOT_FOUND = {status.HTTP_404_NOT_FOUND: {"model": ErrorResponse}}

FilterQuery = Annotated[
    TaskFilter,
    Query(
        description=(
            "Restrict results by expiry: `today` and `next_day` exclude the day "
            "boundaries, `current_week` and `next_week` (seven days from Sunday at the "
            "current time of day) include them."
        ),
    ),
]


@router.post(
    "",
    response_model=TaskCreatedResponse,
    status_code=status.HTTP_201_CREATED,
    responses=_BAD_REQUEST,
    summary="Create a new ToDo task",
)
async def create_task(payload: TaskCreate, service: TaskServiceDependency) -> TaskCreatedResponse:
    """Create a task with a title (up to 100 characters), optional description and expiry."""
    return await service.create_task(
        expiry_at=payload.expiry_at,
        title=payload.title,
        description=payload.description,
    )


@router.get("", response_model=list[TaskRead], summary="List ToDo tasks")
async def list_tasks(
    service: TaskServiceDependency,
    filter_by: FilterQuery = TaskFilter.ALL,
) -> list[TaskRead]:
    return await service.list_tasks(filter_by)


@router.get(
    "/{task_id}",
    response_model=TaskRead,
    responses=_NOT_FOUND,
    summary="Retrieve a ToDo task by id",
)
async def get_task(task_id: UUID, service: TaskServiceDependency) -> TaskRead:
    return await service.get_task(task_id)


@router.put(
    "/{task_id}",
    response_model=TaskRead,
    responses={**_BAD_REQUEST, **_NOT_FOUND},
    summary="Replace the fields of a ToDo task",
)
async def update_task(
    task_id: UUID,
    payload: TaskUpdate,
    service: TaskServiceDependency,
) -> TaskRead:
    return await service.update_task(
        task_id,
        expiry_at=payload.expiry_at,
        title=payload.title,
        description=payload.description,
        completion_percentage=payload.completion_percentage,
    )


@router.patch(
    "/{task_id}/done",
    response_model=TaskRead,
    responses=_NOT_FOUND,
    summary="Mark a ToDo task as done",
)
async def mark_task_as_done(task_id: UUID, service: TaskServiceDependency) -> TaskRead:
    """Set the completion percentage to 100."""
    return await service.mark_task_as_done(task_id)


@router.patch(
    "/{task_id}/completion-percentage",
    response_model=TaskRead,
    responses={**_BAD_REQUEST, **_NOT_FOUND},
    summary="Update the completion percentage of a ToDo task",
)
async def update_completion_percentage(
    task_id: UUID,
    payload: CompletionPercentageUpdate,
    service: TaskServiceDependency,
) -> TaskRead:
    return await service.update_completion_percentage(task_id, payload.completion_percentage)


@router.delete(
    "/{task_id}",
    status_code=status.HTTP_202_ACCEPTED,
    response_class=Response,
    responses=_NOT_FOUND,
    summary="Delete a ToDo task",
)
async def delete_task(task_id: UUID, service: TaskServiceDependency) -> Response:
    await service.delete_task(task_id)
    return Response(status_code=status.HTTP_202_ACCEPTED)
