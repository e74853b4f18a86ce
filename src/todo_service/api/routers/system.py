"""Service health and metadata endpoints."""

from __future__ import annotations

from fastapi import APIRouter, status

from ...deps import SettingsDependency
from ...schemas import HealthCheckResponse, RootResponse

health_router = APIRouter(tags=["system"])
metadata_router = APIRouter(tags=["system"])


@health_router.get(
    "/healthz",
    response_model=HealthCheckResponse,
    status_code=status.HTTP_200_OK,
    summary="Health check",
)
async def read_health() -> HealthCheckResponse:
    return HealthCheckResponse(status="ok")


@metadata_router.get("/metadata", response_model=RootResponse, summary="Service metadata")
async def read_metadata(settings: SettingsDependency) -> RootResponse:
    """Expose minimal service metadata for API clients."""
    return RootResponse(
        name=settings.project_name,
        environment=settings.environment,
        version=settings.version,
        api_prefix=settings.api_prefix,
    )
