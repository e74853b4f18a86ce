"""Repository abstractions shared by the persistence layer."""

from __future__ import annotations

from typing import Generic, Protocol, TypeVar, runtime_checkable
from uuid import UUID

from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

from ..domain import TaskFilter, TodoTask

ModelType = TypeVar("ModelType", bound=SQLModel)


@runtime_checkable
class TaskStore(Protocol):
    """Persistence collaborator used by the task operations.

    Implementations stamp ``created_at``/``updated_at`` through the task's
    storage hooks, and return filtered listings newest-created first.
    """

    async def create(self, task: TodoTask) -> None: ...

    async def update(self, task: TodoTask) -> None: ...

    async def delete(self, task: TodoTask) -> None: ...

    async def get_one(self, task_id: UUID) -> TodoTask | None:
        """Load a task that the caller intends to modify."""
        ...

    async def get_one_readonly(self, task_id: UUID) -> TodoTask | None:
        """Load a task for display only; changes to it are never saved."""
        ...

    async def get_many_filtered(self, filter_by: TaskFilter = TaskFilter.ALL) -> list[TodoTask]: ...


class BaseRepository(Generic[ModelType]):
    """Provide shared persistence helpers for repositories."""

    def __init__(self, session: AsyncSession, model_type: type[ModelType]) -> None:
        self._session = session
        self._model_type = model_type

    @property
    def session(self) -> AsyncSession:
        """Return the session associated with the repository."""
        return self._session

    async def _get(self, entity_id: UUID) -> ModelType | None:
        return await self._session.get(self._model_type, entity_id)

    async def _add(self, instance: ModelType) -> ModelType:
        self._session.add(instance)
        await self._session.flush()
        return instance

    async def _delete(self, instance: ModelType) -> None:
        await self._session.delete(instance)
        await self._session.flush()

    async def _commit(self) -> None:
        await self._session.commit()


__all__ = ["BaseRepository", "ModelType", "TaskStore"]
