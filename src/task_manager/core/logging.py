"""JSON logging for the task manager service.

Every record becomes one JSON object. The envelope always carries
``timestamp``, ``level``, ``logger``, ``message``, ``service``,
``environment``, ``request_id`` and ``subject``. Fields the service logs about
users, tasks and requests (see ``DOMAIN_FIELDS``) are promoted to top-level
keys; any other ``extra`` values are nested under ``"extra"``.
"""

from __future__ import annotations

import json
import logging
import logging.config
from datetime import datetime, timezone
from typing import Any

from .config import Settings
from .context import UNSET, get_request_id, get_subject

DOMAIN_FIELDS = (
    "username",
    "role",
    "reason",
    "task_id",
    "count",
    "code",
    "status_code",
    "method",
    "path",
    "duration_ms",
    "database",
)

_CONTEXT_FIELDS = ("request_id", "subject")

# Attributes every LogRecord carries, so anything else came from ``extra``.
_RECORD_ATTRIBUTES = frozenset(vars(logging.LogRecord("", 0, "", 0, "", None, None))) | {
    "message",
    "asctime",
    "taskName",
}

_THIRD_PARTY_LEVELS = {
    "uvicorn": None,
    "uvicorn.error": None,
    # Replaced by the ``task_manager.access`` line from the middleware.
    "uvicorn.access": logging.WARNING,
    "pymongo": logging.WARNING,
    "passlib": logging.ERROR,
}


def _jsonable(value: Any) -> Any:
    try:
        json.dumps(value)
    except (TypeError, ValueError):
        return str(value)
    return value


class JsonLogFormatter(logging.Formatter):
    """Render log records as single-line JSON objects."""

    def __init__(self, *, service: str = "task-manager", environment: str = "development") -> None:
        super().__init__()
        self._service = service
        self._environment = environment

    def format(self, record: logging.LogRecord) -> str:  # type: ignore[override]
        payload: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "service": self._service,
            "environment": self._environment,
        }
        for name in _CONTEXT_FIELDS:
            payload[name] = getattr(record, name, UNSET)

        extra: dict[str, Any] = {}
        for key, value in vars(record).items():
            if key in _RECORD_ATTRIBUTES or key in _CONTEXT_FIELDS:
                continue
            if key in DOMAIN_FIELDS:
                payload[key] = _jsonable(value)
            else:
                extra[key] = _jsonable(value)
        if extra:
            payload["extra"] = extra

        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False)


class RequestContextFilter(logging.Filter):
    """Stamp records with the current request id and authenticated username."""

    def filter(self, record: logging.LogRecord) -> bool:  # type: ignore[override]
        record.request_id = get_request_id()
        if not hasattr(record, "subject"):
            record.subject = get_subject()
        return True


def configure_logging(settings: Settings) -> None:
    """Route the service and server loggers to a JSON stdout handler."""

    level = getattr(logging, settings.log_level, logging.INFO)
    logging.captureWarnings(True)

    loggers: dict[str, dict[str, Any]] = {"": {"handlers": ["stdout"], "level": level}}
    for name, override in _THIRD_PARTY_LEVELS.items():
        loggers[name] = {"handlers": ["stdout"], "level": override or level, "propagate": False}

    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "json": {
                    "()": JsonLogFormatter,
                    "service": settings.project_name,
                    "environment": settings.environment,
                }
            },
            "filters": {"request_context": {"()": RequestContextFilter}},
            "handlers": {
                "stdout": {
                    "class": "logging.StreamHandler",
                    "stream": "ext://sys.stdout",
                    "formatter": "json",
                    "filters": ["request_context"],
                }
            },
            "loggers": loggers,
        }
    )


__all__ = ["DOMAIN_FIELDS", "JsonLogFormatter", "RequestContextFilter", "configure_logging"]
