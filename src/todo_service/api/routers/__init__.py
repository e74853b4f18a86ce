"""Router registrations for the ToDo service."""

from __future__ import annotations

from fastapi import APIRouter

from .system import health_router, metadata_router
from .tasks import router as tasks_router

api_router = APIRouter()
api_router.include_router(metadata_router)
api_router.include_router(tasks_router)

__all__ = ["api_router", "health_router", "tasks_router"]
