"""Centralized exception handlers for FastAPI application."""

import logging
from dataclasses import dataclass
from typing import Any, Callable

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from sbte_portal.exceptions import (
    DatabaseConnectionError,
    DuplicateRecordError,
    InvalidFilterError,
    PermissionDeniedError,
    RecordNotFoundError,
    ValidationError,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ExceptionConfig:
    """Configuration for exception handler behavior."""

    status_code: int
    error_name: str
    log_level: str = "warning"
    include_detail: bool = True


# Exception type to configuration mapping
EXCEPTION_CONFIGS: dict[type[Exception], ExceptionConfig] = {
    ValidationError: ExceptionConfig(
        status_code=status.HTTP_400_BAD_REQUEST,
        error_name="Bad Request",
    ),
    PermissionDeniedError: ExceptionConfig(
        status_code=status.HTTP_403_FORBIDDEN,
        error_name="Forbidden",
    ),
    RecordNotFoundError: ExceptionConfig(
        status_code=status.HTTP_404_NOT_FOUND,
        error_name="Not Found",
    ),
    DuplicateRecordError: ExceptionConfig(
        status_code=status.HTTP_409_CONFLICT,
        error_name="Conflict",
    ),
    InvalidFilterError: ExceptionConfig(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        error_name="Internal Server Error",
        log_level="error",
        include_detail=False,
    ),
    DatabaseConnectionError: ExceptionConfig(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        error_name="Internal Server Error",
        log_level="error",
        include_detail=False,
    ),
}

GENERIC_ERROR_MESSAGE = "Internal Server Error"


def _log_exception(exc: Exception, config: ExceptionConfig) -> None:
    """Log exception with appropriate level."""
    log_func: Callable[..., None] = getattr(logger, config.log_level)
    log_func(f"{type(exc).__name__}: {exc}")


def _build_response_content(exc: Exception, config: ExceptionConfig) -> dict[str, Any]:
    """Build response content based on exception type."""
    content: dict[str, Any] = {"error": config.error_name}
    content["message"] = str(exc) if config.include_detail else GENERIC_ERROR_MESSAGE

    if isinstance(exc, RecordNotFoundError):
        content["model"] = exc.model_name
        content["recordId"] = exc.record_id

    return content


def _create_handler(
    config: ExceptionConfig,
) -> Callable[[Request, Exception], Any]:
    """Create exception handler function for given config."""

    async def handler(request: Request, exc: Exception) -> JSONResponse:
        _log_exception(exc, config)
        content = _build_response_content(exc, config)
        return JSONResponse(status_code=config.status_code, content=content)

    return handler


def _describe_missing_fields(errors: list[dict[str, Any]]) -> str:
    missing = [
        str(error["loc"][-1])
        for error in errors
        if error.get("type") == "missing" and error.get("loc")
    ]
    if missing:
        return f"Missing required fields: {', '.join(missing)}"
    return "Invalid request data"


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Handle request validation errors as 400 Bad Request."""
    errors = list(exc.errors())
    logger.warning(f"Validation error: {errors}")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={
            "error": "Bad Request",
            "message": _describe_missing_fields(errors),
            "details": jsonable_encoder(errors),
        },
    )


async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle all unhandled exceptions."""
    logger.exception(f"Unhandled exception: {exc}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "error": "Internal Server Error",
            "message": GENERIC_ERROR_MESSAGE,
        },
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers on the FastAPI application.

    Args:
        app: FastAPI application instance.
    """
    for exc_type, config in EXCEPTION_CONFIGS.items():
        app.add_exception_handler(exc_type, _create_handler(config))

    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, generic_exception_handler)
