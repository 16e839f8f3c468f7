"""Per-request values shared with log records and error responses.

Two values are tracked: the correlation id of the HTTP request being served
and the username of the caller once their bearer token has been accepted.
Both default to ``"-"`` outside of a request.
"""

from __future__ import annotations

from contextvars import ContextVar, Token

REQUEST_ID_HEADER = "X-Request-ID"
UNSET = "-"

_request_id: ContextVar[str] = ContextVar("task_manager_request_id", default=UNSET)
_subject: ContextVar[str] = ContextVar("task_manager_subject", default=UNSET)


def get_request_id() -> str:
    return _request_id.get()


def get_subject() -> str:
    """Username of the authenticated caller, or ``"-"`` for anonymous requests."""
    return _subject.get()


def bind_request_id(request_id: str) -> Token[str]:
    return _request_id.set(request_id)


def reset_request_id(token: Token[str]) -> None:
    _request_id.reset(token)


def bind_subject(username: str) -> Token[str]:
    return _subject.set(username)


def reset_subject(token: Token[str]) -> None:
    _subject.reset(token)


__all__ = [
    "REQUEST_ID_HEADER",
    "UNSET",
    "bind_request_id",
    "bind_subject",
    "get_request_id",
    "get_subject",
    "reset_request_id",
    "reset_subject",
]
