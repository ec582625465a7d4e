"""Custom exception classes for ledger operations.

Every exception carries an error_code that maps to the catalog in
errors.py and the HTTP status it is rendered with.
"""

from typing import Any


class LedgerError(Exception):
    """Base exception for all domain errors.

    Attributes:
        error_code: Code from the error catalog (e.g., "NF_001")
        details: Additional context about the error (for logging)
        http_status: HTTP status code to return (default: 500)
    """

    default_status = 500

    def __init__(
        self,
        error_code: str,
        details: dict[str, Any] | None = None,
        http_status: int | None = None,
    ):
        self.error_code = error_code
        self.details = details or {}
        self.http_status = http_status or self.default_status
        super().__init__(error_code)

    @property
    def kind(self) -> str:
        return type(self).__name__


class ValidationError(LedgerError):
    """Raised when a required field is missing or malformed."""

    default_status = 400


class NotFoundError(LedgerError):
    """Raised when a referenced entity is absent or owned by another user.

    The two cases are deliberately indistinguishable to the caller.
    """

    default_status = 404


class ConflictError(LedgerError):
    """Raised on a duplicate unique key (e.g. an email already registered)."""

    default_status = 409


class StorageError(LedgerError):
    """Raised when the underlying persistence layer fails.

    Write operations are rolled back and never retried automatically.
    """

    default_status = 500


class AuthenticationError(LedgerError):
    """Raised when credentials or tokens are rejected."""

    default_status = 401
