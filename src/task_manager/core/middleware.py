"""Request middleware: correlation ids and one access log line per request."""

from __future__ import annotations

import logging
import time
import uuid

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from .context import REQUEST_ID_HEADER, UNSET, bind_request_id, reset_request_id

access_logger = logging.getLogger("task_manager.access")


class RequestContextMiddleware(BaseHTTPMiddleware):
    """Bind ``X-Request-ID`` for the request and log its outcome.

    The caller's username is read back from ``request.state.subject``, which
    the bearer-token dependency fills in for authenticated routes.
    """

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        request_id = request.headers.get(REQUEST_ID_HEADER) or uuid.uuid4().hex
        request.state.request_id = request_id
        token = bind_request_id(request_id)
        started = time.perf_counter()
        try:
            response = await call_next(request)
            response.headers.setdefault(REQUEST_ID_HEADER, request_id)
            access_logger.info(
                "%s %s -> %s",
                request.method,
                request.url.path,
                response.status_code,
                extra={
                    "method": request.method,
                    "path": request.url.path,
                    "status_code": response.status_code,
                    "duration_ms": round((time.perf_counter() - started) * 1000, 2),
                    "subject": getattr(request.state, "subject", UNSET),
                },
            )
            return response
        finally:
            reset_request_id(token)


__all__ = ["RequestContextMiddleware"]
