from __future__ import annotations

import logging
from http import HTTPStatus

import pytest
from fastapi import FastAPI, status
from httpx import ASGITransport, AsyncClient
from pydantic import BaseModel
from sqlalchemy.exc import IntegrityError

from todo_service.core.config import Settings
from todo_service.core.logging import RequestContextFilter
from todo_service.errors import ApplicationError, InvalidTaskStateError
from todo_service.main import create_app


@pytest.fixture()
def bare_app() -> FastAPI:
    return create_app(Settings(environment="test"))


def _client(app: FastAPI) -> AsyncClient:
    transport = ASGITransport(app=app, raise_app_exceptions=False)
    return AsyncClient(transport=transport, base_url="http://test")


async def test_application_error_response_schema(bare_app: FastAPI) -> None:
    @bare_app.get("/error/application")
    async def trigger_application_error() -> None:  # pragma: no cover - defined in test
        raise ApplicationError(
            "Example failure",
            code="example_error",
            status_code=status.HTTP_418_IM_A_TEAPOT,
            details={"foo": "bar"},
        )

    async with _client(bare_app) as client:
        response = await client.get("/error/application")

    assert response.status_code == status.HTTP_418_IM_A_TEAPOT
    request_id = response.headers["X-Request-ID"]
    assert response.json() == {
        "code": "example_error",
        "message": "Example failure",
        "details": {"foo": "bar", "request_id": request_id},
    }


async def test_invalid_state_maps_to_bad_request(bare_app: FastAPI) -> None:
    @bare_app.get("/error/invalid-state")
    async def trigger_invalid_state() -> None:  # pragma: no cover - defined in test
        raise InvalidTaskStateError("title is null or empty")

    async with _client(bare_app) as client:
        response = await client.get("/error/invalid-state")

    assert response.status_code == status.HTTP_400_BAD_REQUEST
    payload = response.json()
    assert payload["code"] == "invalid_state"
    assert payload["message"] == "title is null or empty"


async def test_validation_error_response_schema(bare_app: FastAPI) -> None:
    class ExamplePayload(BaseModel):
        name: str

    @bare_app.post("/error/validation")
    async def create_item(_: ExamplePayload) -> None:  # pragma: no cover - defined in test
        return None

    async with _client(bare_app) as client:
        response = await client.post("/error/validation", json={})

    assert response.status_code == HTTPStatus.UNPROCESSABLE_ENTITY
    payload = response.json()
    assert payload["code"] == "validation_error"
    assert payload["message"] == "Request validation failed."
    assert payload["details"]["errors"]
    assert payload["details"]["request_id"] == response.headers["X-Request-ID"]


async def test_unknown_route_uses_error_envelope(bare_app: FastAPI) -> None:
    async with _client(bare_app) as client:
        response = await client.get("/error/not-found")

    assert response.status_code == status.HTTP_404_NOT_FOUND
    payload = response.json()
    assert payload["code"] == "not_found"
    assert payload["message"]
    assert payload["details"]["request_id"] == response.headers["X-Request-ID"]


async def test_integrity_error_response_schema(bare_app: FastAPI) -> None:
    @bare_app.get("/error/database")
    async def trigger_integrity_error() -> None:  # pragma: no cover - defined in test
        raise IntegrityError("statement", {}, Exception("constraint"))

    async with _client(bare_app) as client:
        response = await client.get("/error/database")

    assert response.status_code == status.HTTP_409_CONFLICT
    payload = response.json()
    assert payload["code"] == "db_integrity_error"
    assert payload["message"] == "Database integrity violation."


async def test_unhandled_error_hides_internal_details(bare_app: FastAPI) -> None:
    @bare_app.get("/error/unhandled")
    async def trigger_unhandled_error() -> None:  # pragma: no cover - defined in test
        raise RuntimeError("Sensitive detail")

    async with _client(bare_app) as client:
        response = await client.get("/error/unhandled")

    assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
    payload = response.json()
    assert payload["code"] == "server_error"
    assert payload["message"] == "Internal server error."
    assert "Sensitive" not in response.text


async def test_incoming_request_id_is_echoed(bare_app: FastAPI) -> None:
    async with _client(bare_app) as client:
        response = await client.get("/healthz", headers={"X-Request-ID": "req-123"})

    assert response.headers["X-Request-ID"] == "req-123"


class _InMemoryHandler(logging.Handler):
    def __init__(self) -> None:
        super().__init__(level=logging.INFO)
        self.records: list[logging.LogRecord] = []

    def emit(self, record: logging.LogRecord) -> None:
        self.records.append(record)


async def test_request_id_attached_to_logs(bare_app: FastAPI) -> None:
    logger = logging.getLogger("tests.error_handling")
    handler = _InMemoryHandler()
    handler.addFilter(RequestContextFilter())
    logger.addHandler(handler)
    original_level = logger.level
    logger.setLevel(logging.INFO)

    @bare_app.get("/log")
    async def emit_log() -> dict[str, str]:  # pragma: no cover - defined in test
        logger.info("Log entry")
        return {"status": "ok"}

    try:
        async with _client(bare_app) as client:
            response = await client.get("/log")
    finally:
        logger.removeHandler(handler)
        logger.setLevel(original_level)
        handler.close()

    request_id = response.headers["X-Request-ID"]
    matching = [record for record in handler.records if record.getMessage() == "Log entry"]
    assert matching
    assert getattr(matching[0], "request_id", None) == request_id
