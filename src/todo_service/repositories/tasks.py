"""SQLModel-backed implementation of the task store."""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import datetime, timezone, tzinfo
from uuid import UUID

from sqlalchemy import ColumnElement, and_
from sqlmodel import col, select
from sqlmodel.ext.asyncio.session import AsyncSession

from ..domain import EntityAudit, TaskFilter, TimeWindow, TodoTask, resolve_window
from ..errors import TaskNotFoundError
from ..models import TodoTaskRecord, as_utc, utcnow
from .base import BaseRepository

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]


def _to_entity(record: TodoTaskRecord) -> TodoTask:
    return TodoTask.restore(
        audit=EntityAudit(
            id=record.id,
            created_at=as_utc(record.created_at),
            updated_at=as_utc(record.updated_at) if record.updated_at is not None else None,
        ),
        expiry_at=as_utc(record.expiry_at),
        title=record.title,
        description=record.description,
        completion_percentage=record.completion_percentage,
    )


def _copy_state(task: TodoTask, record: TodoTaskRecord) -> None:
    record.title = task.title
    record.description = task.description
    record.expiry_at = as_utc(task.expiry_at)
    record.completion_percentage = task.completion_percentage
    record.updated_at = task.updated_at


def _window_clause(window: TimeWindow) -> ColumnElement[bool]:
    expiry = col(TodoTaskRecord.expiry_at)
    utc_window = window.astimezone(timezone.utc)
    if window.inclusive:
        return and_(expiry >= utc_window.start, expiry <= utc_window.end)
    return and_(expiry > utc_window.start, expiry < utc_window.end)


class TaskRepository(BaseRepository[TodoTaskRecord]):
    """Persist ``TodoTask`` entities; every write commits the session."""

    def __init__(
        self,
        session: AsyncSession,
        *,
        clock: Clock = utcnow,
        zone: tzinfo = timezone.utc,
    ) -> None:
        super().__init__(session, TodoTaskRecord)
        self._clock = clock
        self._zone = zone

    async def create(self, task: TodoTask) -> None:
        created_at = as_utc(self._clock())
        task.record_creation(created_at)
        record = TodoTaskRecord(
            id=task.id,
            title=task.title,
            description=task.description,
            expiry_at=as_utc(task.expiry_at),
            completion_percentage=task.completion_percentage,
            created_at=created_at,
            updated_at=None,
        )
        await self._add(record)
        await self._commit()
        logger.debug("Created ToDo task", extra={"task_id": str(task.id)})

    async def update(self, task: TodoTask) -> None:
        record = await self._get(task.id)
        if record is None:
            raise TaskNotFoundError(task.id)
        task.record_update(as_utc(self._clock()))
        _copy_state(task, record)
        self.session.add(record)
        await self._commit()
        logger.debug("Updated ToDo task", extra={"task_id": str(task.id)})

    async def delete(self, task: TodoTask) -> None:
        record = await self._get(task.id)
        if record is None:
            raise TaskNotFoundError(task.id)
        await self._delete(record)
        await self._commit()
        logger.debug("Deleted ToDo task", extra={"task_id": str(task.id)})

    async def get_one(self, task_id: UUID) -> TodoTask | None:
        record = await self._get(task_id)
        return _to_entity(record) if record is not None else None

    async def get_one_readonly(self, task_id: UUID) -> TodoTask | None:
        result = await self.session.exec(select(TodoTaskRecord).where(TodoTaskRecord.id == task_id))
        record = result.one_or_none()
        if record is None:
            return None
        task = _to_entity(record)
        self.session.expunge(record)
        return task

    async def get_many_filtered(self, filter_by: TaskFilter = TaskFilter.ALL) -> list[TodoTask]:
        statement = select(TodoTaskRecord)
        window = resolve_window(filter_by, self._clock(), self._zone)
        if window is not None:
            statement = statement.where(_window_clause(window))
        statement = statement.order_by(col(TodoTaskRecord.created_at).desc())
        result = await self.session.exec(statement)
        records = list(result.all())
        tasks = [_to_entity(record) for record in records]
        for record in records:
            self.session.expunge(record)
        return tasks


__all__ = ["Clock", "TaskRepository"]
