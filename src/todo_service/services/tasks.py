"""Service layer encapsulating the ToDo task operations."""

from __future__ import annotations

from datetime import datetime
from uuid import UUID

from ..domain import TaskFilter, TodoTask
from ..errors import TaskNotFoundError
from ..repositories import TaskStore
from ..schemas import TaskCreatedResponse, TaskRead


class TaskService:
    """Command and query handling for ``TodoTask`` entities.

    Each operation loads at most one task, applies entity mutators and issues
    at most one write to the store. Errors from the entity or the store are
    not caught here.
    """

    def __init__(self, store: TaskStore) -> None:
        self._store = store

    async def _load(self, task_id: UUID) -> TodoTask:
        task = await self._store.get_one(task_id)
        if task is None:
            raise TaskNotFoundError(task_id)
        return task

    async def create_task(
        self,
        *,
        expiry_at: datetime,
        title: str,
        description: str | None = None,
    ) -> TaskCreatedResponse:
        """Create and persist a new task with zero completion."""
        task = TodoTask(expiry_at, title, description)
        await self._store.create(task)
        return TaskCreatedResponse.from_entity(task)

    async def update_task(
        self,
        task_id: UUID,
        *,
        expiry_at: datetime,
        title: str,
        description: str | None,
        completion_percentage: int,
    ) -> TaskRead:
        """Replace all mutable fields, writing only when something differs."""
        task = await self._load(task_id)
        has_changed = False

        if title != task.title:
            task.update_title(title)
            has_changed = True
        if description != task.description:
            task.update_description(description)
            has_changed = True
        if completion_percentage != task.completion_percentage:
            task.update_completion_percentage(completion_percentage)
            has_changed = True
        if expiry_at != task.expiry_at:
            task.update_expiry_at(expiry_at)
            has_changed = True

        if has_changed:
            await self._store.update(task)
        return TaskRead.from_entity(task)

    async def mark_task_as_done(self, task_id: UUID) -> TaskRead:
        """Set completion to 100% and persist, even if it already was."""
        task = await self._load(task_id)
        task.mark_as_done()
        await self._store.update(task)
        return TaskRead.from_entity(task)

    async def update_completion_percentage(
        self,
        task_id: UUID,
        completion_percentage: int,
    ) -> TaskRead:
        task = await self._load(task_id)
        if completion_percentage != task.completion_percentage:
            task.update_completion_percentage(completion_percentage)
            await self._store.update(task)
        return TaskRead.from_entity(task)

    async def delete_task(self, task_id: UUID) -> None:
        task = await self._load(task_id)
        await self._store.delete(task)

    async def get_task(self, task_id: UUID) -> TaskRead:
        task = await self._store.get_one_readonly(task_id)
        if task is None:
            raise TaskNotFoundError(task_id)
        return TaskRead.from_entity(task)

    async def list_tasks(self, filter_by: TaskFilter = TaskFilter.ALL) -> list[TaskRead]:
        """Return tasks in the selected expiry window, newest-created first."""
        tasks = await self._store.get_many_filtered(filter_by)
        return [TaskRead.from_entity(task) for task in tasks]
