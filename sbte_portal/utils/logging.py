"""Logging configuration for the application.

Every record emitted while a request is being handled is stamped with the
request's ``method`` and ``path`` by ``RequestContextFilter``; the values are
set by ``RequestContextMiddleware``. Production output is ``key="value"``
pairs, elsewhere a plain human readable line.
"""

import logging
import sys
from contextvars import ContextVar
from typing import Any, Callable, Dict, Optional

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from sbte_portal.config import get_settings

_request_context: ContextVar[Optional[Dict[str, str]]] = ContextVar(
    "request_context", default=None
)

# Attributes every LogRecord carries; anything else came from extra= or a filter
_RECORD_ATTRS = frozenset(
    vars(logging.LogRecord("", logging.INFO, "", 0, "", (), None))
) | {"message", "asctime"}

PLAIN_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def current_request_context() -> Dict[str, str]:
    """Return method/path of the request being handled, empty outside one."""
    return dict(_request_context.get() or {})


class RequestContextMiddleware(BaseHTTPMiddleware):
    """Expose the current request's method and path to log records."""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        token = _request_context.set(
            {"method": request.method, "path": request.url.path}
        )
        try:
            return await call_next(request)
        finally:
            _request_context.reset(token)


class RequestContextFilter(logging.Filter):
    """Copy the current request context onto each record."""

    def filter(self, record: logging.LogRecord) -> bool:
        for key, value in current_request_context().items():
            if not hasattr(record, key):
                setattr(record, key, value)
        return True


def _quote(value: Any) -> str:
    return str(value).replace('"', '\\"')


class StructuredFormatter(logging.Formatter):
    """Formatter emitting ``key="value"`` pairs, including extra fields.

    Double quotes inside values are backslash escaped.
    """

    def format(self, record: logging.LogRecord) -> str:
        fields: Dict[str, Any] = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        fields.update(
            (key, value)
            for key, value in vars(record).items()
            if key not in _RECORD_ATTRS and not key.startswith("_")
        )
        if record.exc_info:
            fields["exception"] = self.formatException(record.exc_info)

        return " ".join(f'{key}="{_quote(value)}"' for key, value in fields.items())


def setup_logging() -> None:
    """Install a single stdout handler on the root logger from settings."""
    settings = get_settings()

    handler = logging.StreamHandler(sys.stdout)
    handler.addFilter(RequestContextFilter())
    if settings.is_production:
        handler.setFormatter(StructuredFormatter(datefmt=DATE_FORMAT))
    else:
        handler.setFormatter(logging.Formatter(PLAIN_FORMAT, datefmt=DATE_FORMAT))

    root_logger = logging.getLogger()
    root_logger.handlers[:] = [handler]
    root_logger.setLevel(settings.LOG_LEVEL)

    # Third-party loggers are noisy at INFO
    for name in ("uvicorn", "uvicorn.access", "sqlalchemy.engine"):
        logging.getLogger(name).setLevel(logging.WARNING)

    root_logger.info(
        "Logging configured",
        extra={"log_level": settings.LOG_LEVEL, "environment": settings.ENVIRONMENT},
    )
