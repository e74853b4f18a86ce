"""Request-scoped correlation context."""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar, Token

REQUEST_ID_HEADER = "X-Request-ID"
NO_REQUEST_ID = "-"

_request_id_ctx_var: ContextVar[str] = ContextVar("todo_request_id", default=NO_REQUEST_ID)


def get_request_id() -> str:
    """Return the request identifier bound to the running task, or ``"-"``."""

    return _request_id_ctx_var.get()


def bind_request_id(request_id: str) -> Token[str]:
    return _request_id_ctx_var.set(request_id)


def reset_request_id(token: Token[str]) -> None:
    _request_id_ctx_var.reset(token)


@contextmanager
def request_id_scope(request_id: str | None) -> Iterator[str]:
    """Bind ``request_id`` for the duration of the block.

    A missing identifier leaves the current binding untouched, which lets
    exception handlers reuse the id stored on ``request.state`` when present.
    """

    if not request_id:
        yield get_request_id()
        return
    token = bind_request_id(request_id)
    try:
        yield request_id
    finally:
        reset_request_id(token)


__all__ = [
    "NO_REQUEST_ID",
    "REQUEST_ID_HEADER",
    "bind_request_id",
    "get_request_id",
    "request_id_scope",
    "reset_request_id",
]
