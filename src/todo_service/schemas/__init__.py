"""Pydantic schemas for public interfaces."""

from __future__ import annotations

from .system import ErrorResponse, HealthCheckResponse, RootResponse
from .task import (
    CompletionPercentageUpdate,
    TaskCreate,
    TaskCreatedResponse,
    TaskRead,
    TaskUpdate,
)

__all__ = [
    "CompletionPercentageUpdate",
    "ErrorResponse",
    "HealthCheckResponse",
    "RootResponse",
    "TaskCreate",
    "TaskCreatedResponse",
    "TaskRead",
    "TaskUpdate",
]
