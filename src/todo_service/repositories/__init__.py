"""Database repositories for encapsulating persistence logic."""

from __future__ import annotations

from .base import BaseRepository, TaskStore
from .tasks import Clock, TaskRepository

__all__ = ["BaseRepository", "Clock", "TaskRepository", "TaskStore"]
