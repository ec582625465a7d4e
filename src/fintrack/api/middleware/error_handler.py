"""Global error handling.

This module provides consistent error responses across all API endpoints.
All exceptions are caught and converted to a standardized JSON format with
appropriate HTTP status codes.
"""

import logging

from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import IntegrityError

from fintrack.config import settings
from fintrack.core.errors import get_error
from fintrack.core.exceptions import LedgerError

logger = logging.getLogger(__name__)


def error_body(error_code: str, kind: str, message: str | None = None) -> dict:
    """Build the standard error payload for a catalog code."""
    error_info = get_error(error_code)
    return {
        "error_code": error_code,
        "kind": kind,
        "message": message or error_info["message"],
        "user_message": error_info["user_message"],
        "suggestion": error_info["suggestion"],
        "retry_allowed": error_info["retry_allowed"],
    }


async def handle_ledger_error(request: Request, exc: LedgerError) -> JSONResponse:
    """Handle domain exceptions raised by services.

    Args:
        request: The incoming request
        exc: The domain exception

    Returns:
        JSONResponse with error details from catalog
    """
    extra = {"error_code": exc.error_code, "path": request.url.path, "method": request.method}
    if settings.debug:
        extra["details"] = exc.details

    if exc.http_status >= 500:
        logger.error(f"{exc.kind}: {exc.error_code}", extra=extra)
    else:
        logger.info(f"{exc.kind}: {exc.error_code}", extra=extra)

    return JSONResponse(
        status_code=exc.http_status,
        content=error_body(exc.error_code, exc.kind),
    )


async def handle_validation_error(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Handle Pydantic validation errors.

    Args:
        request: The incoming request
        exc: The validation error

    Returns:
        JSONResponse with field-level messages joined into ``message``
    """
    errors = exc.errors()
    error_messages = []

    for error in errors:
        field = ".".join(str(x) for x in error.get("loc", []))
        msg = error.get("msg", "Invalid value")
        error_messages.append(f"{field}: {msg}")

    extra = {"path": request.url.path, "method": request.method}
    if settings.debug:
        extra["errors"] = errors
    logger.warning(f"Validation error on {request.url.path}", extra=extra)

    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=error_body("VAL_001", "ValidationError", " | ".join(error_messages)),
    )


async def handle_integrity_error(
    request: Request, exc: IntegrityError
) -> JSONResponse:
    """Handle database integrity errors that escaped the service layer."""
    # Do not log str(exc): it can include SQL + bound parameters.
    logger.error(
        f"Database integrity error on {request.url.path}",
        extra={"path": request.url.path, "method": request.method},
    )

    error_msg = str(exc.orig).lower() if exc.orig is not None else ""
    if "unique" in error_msg or "duplicate" in error_msg:
        return JSONResponse(
            status_code=status.HTTP_409_CONFLICT,
            content=error_body("CONFLICT_002", "ConflictError"),
        )

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=error_body("DB_001", "StorageError"),
    )


async def handle_generic_error(request: Request, exc: Exception) -> JSONResponse:
    """Handle unexpected exceptions without exposing internal details."""
    extra = {
        "error_type": type(exc).__name__,
        "path": request.url.path,
        "method": request.method,
    }
    # In non-debug: do not log str(exc) or traceback (may include financial data).
    if settings.debug:
        logger.exception(f"Unexpected error on {request.url.path}", extra=extra)
    else:
        logger.error(f"Unexpected error on {request.url.path}", extra=extra)

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=error_body("SYS_001", "InternalError"),
    )
