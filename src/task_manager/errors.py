"""Error types raised by the use cases and their HTTP rendering.

Every failure reaches the client as ``{"code", "message", "details"}`` with
the request id copied into ``details`` and the ``X-Request-ID`` header.
"""

from __future__ import annotations

import logging
from http import HTTPStatus
from typing import Any

from fastapi import FastAPI, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.requests import Request

from .core.context import REQUEST_ID_HEADER, bind_request_id, reset_request_id
from .schemas.system import ErrorResponse

logger = logging.getLogger(__name__)


class ApplicationError(Exception):
    """Base class for errors that map onto an HTTP response."""

    message: str = "Application error."
    code: str = "application_error"
    status_code: int = status.HTTP_400_BAD_REQUEST
    headers: dict[str, str] | None = None

    def __init__(
        self,
        message: str | None = None,
        *,
        code: str | None = None,
        status_code: int | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message or self.message)
        # Instance attributes shadow the class defaults only when given.
        if message:
            self.message = message
        if code:
            self.code = code
        if status_code:
            self.status_code = status_code
        self.details = details


class NotFoundError(ApplicationError):
    message = "Resource not found."
    code = "not_found"
    status_code = status.HTTP_404_NOT_FOUND


class AuthenticationError(ApplicationError):
    """Login credentials or a bearer token were rejected."""

    message = "Invalid username or password."
    code = "authentication_error"
    status_code = status.HTTP_401_UNAUTHORIZED
    headers = {"WWW-Authenticate": "Bearer"}


class AuthorizationError(ApplicationError):
    """The caller's role does not allow the operation."""

    message = "Not enough permissions."
    code = "forbidden"
    status_code = status.HTTP_403_FORBIDDEN


class RepositoryError(ApplicationError):
    message = "Database operation failed."
    code = "repository_error"
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR


class DuplicateRecordError(RepositoryError):
    """A unique index rejected the write, e.g. a taken username."""

    message = "Record already exists."
    code = "duplicate_record"
    status_code = status.HTTP_409_CONFLICT


class HashingError(ApplicationError):
    message = "Failed to hash password."
    code = "hashing_error"
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR


class TokenError(ApplicationError):
    """A JWT could not be signed, or a client token failed verification (401)."""

    message = "Failed to process access token."
    code = "token_error"
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR


# Routing errors Starlette raises on its own; everything else is ours.
_ROUTING_ERROR_CODES = {
    status.HTTP_404_NOT_FOUND: "not_found",
    status.HTTP_405_METHOD_NOT_ALLOWED: "method_not_allowed",
}


def _render(
    request: Request,
    status_code: int,
    code: str,
    message: str,
    details: dict[str, Any] | None = None,
    headers: dict[str, str] | None = None,
) -> JSONResponse:
    request_id = getattr(request.state, "request_id", None)
    if request_id:
        details = {**(details or {}), "request_id": request_id}
    body = ErrorResponse(code=code, message=message, details=details)
    response = JSONResponse(status_code=status_code, content=jsonable_encoder(body), headers=headers)
    if request_id:
        response.headers[REQUEST_ID_HEADER] = request_id
    return response


def register_exception_handlers(app: FastAPI) -> None:
    """Install the envelope renderers on ``app``."""

    @app.exception_handler(ApplicationError)
    async def _application_error(request: Request, exc: ApplicationError) -> JSONResponse:
        level = logging.ERROR if exc.status_code >= 500 else logging.WARNING
        logger.log(
            level,
            exc.message,
            extra={"code": exc.code, "status_code": exc.status_code, "path": request.url.path},
        )
        return _render(request, exc.status_code, exc.code, exc.message, exc.details, exc.headers)

    @app.exception_handler(RequestValidationError)
    async def _request_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
        errors = jsonable_encoder(exc.errors())
        logger.warning(
            "Request validation failed",
            extra={"code": "validation_error", "path": request.url.path, "errors": errors},
        )
        return _render(
            request,
            HTTPStatus.UNPROCESSABLE_ENTITY,
            "validation_error",
            "Request validation failed.",
            {"errors": errors},
        )

    @app.exception_handler(StarletteHTTPException)
    async def _routing_error(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        code = _ROUTING_ERROR_CODES.get(exc.status_code, "http_error")
        return _render(request, exc.status_code, code, str(exc.detail), headers=exc.headers)

    @app.exception_handler(Exception)
    async def _unhandled_error(request: Request, exc: Exception) -> JSONResponse:
        # Runs outside the middleware, so the request id has to be rebound for the log line.
        token = bind_request_id(getattr(request.state, "request_id", "-"))
        try:
            logger.exception("Unhandled error", extra={"path": request.url.path})
        finally:
            reset_request_id(token)
        return _render(request, status.HTTP_500_INTERNAL_SERVER_ERROR, "server_error", "Internal server error.")


__all__ = [
    "ApplicationError",
    "AuthenticationError",
    "AuthorizationError",
    "DuplicateRecordError",
    "HashingError",
    "NotFoundError",
    "RepositoryError",
    "TokenError",
    "register_exception_handlers",
]
