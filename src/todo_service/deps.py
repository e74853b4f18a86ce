"""Reusable FastAPI dependencies."""

from __future__ import annotations

from collections.abc import AsyncIterator
from typing import Annotated

from fastapi import Depends
from sqlmodel.ext.asyncio.session import AsyncSession

from .core.config import Settings, get_settings
from .db.session import get_session
from .repositories import TaskRepository
from .services import TaskService

SettingsDependency = Annotated[Settings, Depends(get_settings)]


async def get_db_session() -> AsyncIterator[AsyncSession]:
    """FastAPI dependency that yields a request-scoped database session."""

    async for session in get_session():
        yield session


DatabaseSessionDependency = Annotated[AsyncSession, Depends(get_db_session)]


def get_task_service(session: DatabaseSessionDependency, settings: SettingsDependency) -> TaskService:
    """Build the task operations over a repository bound to the request session."""

    return TaskService(TaskRepository(session, zone=settings.zone))


TaskServiceDependency = Annotated[TaskService, Depends(get_task_service)]


__all__ = [
    "DatabaseSessionDependency",
    "SettingsDependency",
    "TaskServiceDependency",
    "get_db_session",
    "get_task_service",
]
