"""Request logging middleware with sensitive-data filtering.

This module provides structured logging for all API requests with:
- Unique request IDs for tracing
- Request duration tracking
- Filtering of emails, bearer tokens and card-like numbers
"""

import json
import logging
import re
import sys
import time
import uuid
from typing import Callable

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

logger = logging.getLogger(__name__)


SENSITIVE_PATTERNS = [
    # Bearer tokens / JWTs
    (re.compile(r"\bBearer\s+[A-Za-z0-9._~+/=-]+", re.I), "Bearer [TOKEN]"),
    (re.compile(r"\beyJ[A-Za-z0-9_-]+\.[A-Za-z0-9_-]+\.[A-Za-z0-9_-]+\b"), "[TOKEN]"),
    # Card/account numbers (13-19 digits, with or without spaces/dashes)
    (re.compile(r"\b\d{4}[\s-]?\d{4}[\s-]?\d{4}[\s-]?\d{1,7}\b"), "[NUMBER]"),
    # Email addresses
    (re.compile(r"\b[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}\b"), "[EMAIL]"),
]

# LogRecord attributes copied into the JSON document when present.
EXTRA_FIELDS = (
    "request_id",
    "user_id",
    "method",
    "path",
    "status_code",
    "duration_ms",
    "error_code",
    "error_type",
    "client_ip",
    "operation",
    "account_id",
    "transaction_id",
    "balance_delta",
)


def filter_sensitive(text: str) -> str:
    """Replace sensitive values in text with placeholders."""
    if not text:
        return text

    filtered = text
    for pattern, replacement in SENSITIVE_PATTERNS:
        filtered = pattern.sub(replacement, filtered)

    return filtered


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Middleware to log all HTTP requests."""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        request_id = str(uuid.uuid4())
        request.state.request_id = request_id
        start_time = time.time()
        path = filter_sensitive(str(request.url.path))

        logger.info(
            "Request started",
            extra={
                "request_id": request_id,
                "method": request.method,
                "path": path,
                "client_ip": request.client.host if request.client else None,
            },
        )

        try:
            response = await call_next(request)
        except Exception as exc:
            duration_ms = int((time.time() - start_time) * 1000)
            logger.error(
                "Request failed",
                extra={
                    "request_id": request_id,
                    "method": request.method,
                    "path": path,
                    "duration_ms": duration_ms,
                    "error_type": type(exc).__name__,
                },
            )
            raise

        duration_ms = int((time.time() - start_time) * 1000)
        response.headers["X-Request-ID"] = request_id

        logger.info(
            "Request completed",
            extra={
                "request_id": request_id,
                "method": request.method,
                "path": path,
                "status_code": response.status_code,
                "duration_ms": duration_ms,
            },
        )

        return response


class JSONLogFormatter(logging.Formatter):
    """Format log records as JSON for structured logging."""

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            "timestamp": self.formatTime(record),
            "level": record.levelname,
            "logger": record.name,
            "message": filter_sensitive(record.getMessage()),
        }

        for field in EXTRA_FIELDS:
            value = getattr(record, field, None)
            if value is not None:
                log_data[field] = value

        if record.exc_info:
            log_data["exception"] = filter_sensitive(self.formatException(record.exc_info))

        return json.dumps(log_data, default=str)


def configure_logging(level: str = "INFO") -> None:
    """Route the root logger through a single JSON stdout handler."""
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(JSONLogFormatter())

    root_logger = logging.getLogger()
    root_logger.handlers = [handler]
    root_logger.setLevel(getattr(logging, level.upper(), logging.INFO))
