"""The ToDo task entity and the audit value it embeds."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from uuid import UUID, uuid4

from ..errors import InvalidTaskStateError

MIN_COMPLETION_PERCENTAGE = 0
MAX_COMPLETION_PERCENTAGE = 100


@dataclass(slots=True)
class EntityAudit:
    """Identity and persistence timestamps shared by stored entities.

    Only the storage layer moves the timestamps, through the owning entity's
    ``record_creation`` and ``record_update`` hooks.
    """

    id: UUID = field(default_factory=uuid4)
    created_at: datetime | None = None
    updated_at: datetime | None = None


class TodoTask:
    """A task with a title, optional description, expiry and completion percentage.

    State is private and changes only through the named mutators, which guard
    the entity invariants:

    * the title is never empty;
    * ``0 <= completion_percentage <= 100``.
    """

    __slots__ = ("_audit", "_expiry_at", "_title", "_description", "_completion_percentage")

    def __init__(self, expiry_at: datetime, title: str, description: str | None = None) -> None:
        self._audit = EntityAudit()
        self._expiry_at = expiry_at
        self._title = title
        self._description = description
        self._completion_percentage = MIN_COMPLETION_PERCENTAGE

    @classmethod
    def restore(
        cls,
        *,
        audit: EntityAudit,
        expiry_at: datetime,
        title: str,
        description: str | None,
        completion_percentage: int,
    ) -> "TodoTask":
        """Rebuild a task from persisted state without generating a new identity."""

        task = cls.__new__(cls)
        task._audit = audit
        task._expiry_at = expiry_at
        task._title = title
        task._description = description
        task._completion_percentage = completion_percentage
        return task

    @property
    def id(self) -> UUID:
        return self._audit.id

    @property
    def expiry_at(self) -> datetime:
        return self._expiry_at

    @property
    def title(self) -> str:
        return self._title

    @property
    def description(self) -> str | None:
        return self._description

    @property
    def completion_percentage(self) -> int:
        return self._completion_percentage

    @property
    def created_at(self) -> datetime | None:
        return self._audit.created_at

    @property
    def updated_at(self) -> datetime | None:
        return self._audit.updated_at

    def is_done(self) -> bool:
        return self._completion_percentage == MAX_COMPLETION_PERCENTAGE

    def mark_as_done(self) -> None:
        self._completion_percentage = MAX_COMPLETION_PERCENTAGE

    def update_title(self, title: str | None) -> None:
        if not title:
            raise InvalidTaskStateError(
                f"For the ToDo task with id: {self.id} the title is null or empty",
                task_id=self.id,
            )
        self._title = title

    def update_description(self, description: str | None) -> None:
        self._description = description

    def update_completion_percentage(self, completion_percentage: int) -> None:
        if not MIN_COMPLETION_PERCENTAGE <= completion_percentage <= MAX_COMPLETION_PERCENTAGE:
            raise InvalidTaskStateError(
                f"For the ToDo task with id: {self.id} the completion percentage "
                f"must be between {MIN_COMPLETION_PERCENTAGE} - {MAX_COMPLETION_PERCENTAGE}",
                task_id=self.id,
            )
        self._completion_percentage = completion_percentage

    def update_expiry_at(self, expiry_at: datetime) -> None:
        self._expiry_at = expiry_at

    # Storage hooks. Business operations never call these.

    def record_creation(self, timestamp: datetime) -> None:
        if self._audit.created_at is not None:
            raise InvalidTaskStateError(
                f"ToDo task with id: {self.id} has already been persisted",
                task_id=self.id,
            )
        self._audit.created_at = timestamp

    def record_update(self, timestamp: datetime) -> None:
        self._audit.updated_at = timestamp

    def __repr__(self) -> str:
        return (
            f"TodoTask(id={self.id!s}, title={self._title!r}, "
            f"completion_percentage={self._completion_percentage})"
        )


__all__ = [
    "MAX_COMPLETION_PERCENTAGE",
    "MIN_COMPLETION_PERCENTAGE",
    "EntityAudit",
    "TodoTask",
]
