"""Persistence models exposed for the ToDo service."""

from __future__ import annotations

from .common import as_utc, utcnow
from .task import DESCRIPTION_MAX_LENGTH, TITLE_MAX_LENGTH, TodoTaskRecord

__all__ = [
    "DESCRIPTION_MAX_LENGTH",
    "TITLE_MAX_LENGTH",
    "TodoTaskRecord",
    "as_utc",
    "utcnow",
]
