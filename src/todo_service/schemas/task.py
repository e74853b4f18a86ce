"""Task-related Pydantic schemas."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import TYPE_CHECKING
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..models import DESCRIPTION_MAX_LENGTH, TITLE_MAX_LENGTH

if TYPE_CHECKING:  # pragma: no cover - imported for typing only
    from ..domain import TodoTask

TASK_READ_EXAMPLE = {
    "id": "3f0c9a4e-8d63-4f7b-9c1e-2b7d0c5a9e11",
    "expiry_at": "2026-10-20T17:00:00Z",
    "title": "Buy milk",
    "description": "Two litres, semi-skimmed.",
    "created_at": "2026-10-19T08:30:00Z",
    "updated_at": "2026-10-19T09:15:00Z",
    "completion_percentage": 40,
    "is_done": False,
}


class TaskCreate(BaseModel):
    """Payload for creating a new task. Naive timestamps are read as UTC."""

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "expiry_at": "2026-10-20T17:00:00Z",
                "title": "Buy milk",
                "description": "Two litres, semi-skimmed.",
            }
        }
    )

    expiry_at: datetime
    title: str = Field(min_length=1, max_length=TITLE_MAX_LENGTH)
    description: str | None = Field(default=None, max_length=DESCRIPTION_MAX_LENGTH)

    @field_validator("expiry_at")
    @classmethod
    def _normalise_expiry(cls, value: datetime) -> datetime:
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc)


class TaskUpdate(TaskCreate):
    """Payload replacing every mutable field of an existing task."""

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "expiry_at": "2026-10-21T17:00:00Z",
                "title": "Buy oat milk",
                "description": None,
                "completion_percentage": 50,
            }
        }
    )

    completion_percentage: int = Field(ge=0, le=100)


class CompletionPercentageUpdate(BaseModel):
    """Payload for changing only the completion percentage."""

    model_config = ConfigDict(json_schema_extra={"example": {"completion_percentage": 75}})

    completion_percentage: int = Field(ge=0, le=100)


class TaskCreatedResponse(BaseModel):
    """Projection returned right after a task is created."""

    id: UUID
    expiry_at: datetime
    title: str
    description: str | None = None
    created_at: datetime
    completion_percentage: int
    is_done: bool

    @classmethod
    def from_entity(cls, task: TodoTask) -> "TaskCreatedResponse":
        return cls(
            id=task.id,
            expiry_at=task.expiry_at,
            title=task.title,
            description=task.description,
            created_at=task.created_at,
            completion_percentage=task.completion_percentage,
            is_done=task.is_done(),
        )


class TaskRead(BaseModel):
    """Public representation of a stored task."""

    model_config = ConfigDict(json_schema_extra={"example": TASK_READ_EXAMPLE})

    id: UUID
    expiry_at: datetime
    title: str
    description: str | None = None
    created_at: datetime
    updated_at: datetime | None = None
    completion_percentage: int
    is_done: bool

    @classmethod
    def from_entity(cls, task: TodoTask) -> "TaskRead":
        return cls(
            id=task.id,
            expiry_at=task.expiry_at,
            title=task.title,
            description=task.description,
            created_at=task.created_at,
            updated_at=task.updated_at,
            completion_percentage=task.completion_percentage,
            is_done=task.is_done(),
        )


__all__ = [
    "CompletionPercentageUpdate",
    "TaskCreate",
    "TaskCreatedResponse",
    "TaskRead",
    "TaskUpdate",
]
