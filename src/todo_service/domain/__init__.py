"""Domain entities and rules for ToDo tasks."""

from __future__ import annotations

from .task import MAX_COMPLETION_PERCENTAGE, MIN_COMPLETION_PERCENTAGE, EntityAudit, TodoTask
from .windows import TaskFilter, TimeWindow, resolve_window

__all__ = [
    "MAX_COMPLETION_PERCENTAGE",
    "MIN_COMPLETION_PERCENTAGE",
    "EntityAudit",
    "TaskFilter",
    "TimeWindow",
    "TodoTask",
    "resolve_window",
]
