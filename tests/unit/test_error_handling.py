"""Unit tests for error handling middleware and sensitive-data filtering."""

import json
import logging
from unittest.mock import Mock

import pytest
from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import IntegrityError

from fintrack.api.middleware.error_handler import (
    handle_generic_error,
    handle_integrity_error,
    handle_ledger_error,
    handle_validation_error,
)
from fintrack.api.middleware.logging import JSONLogFormatter, filter_sensitive
from fintrack.core.errors import get_error, is_retryable
from fintrack.core.exceptions import (
    AuthenticationError,
    ConflictError,
    NotFoundError,
    StorageError,
    ValidationError,
)


def _request(path: str = "/test", method: str = "GET") -> Mock:
    request = Mock(spec=Request)
    request.url.path = path
    request.method = method
    return request


class TestLedgerErrorHandler:
    """Test domain exception handling."""

    @pytest.mark.asyncio
    async def test_not_found(self):
        exc = NotFoundError("NF_001", details={"account_id": "abc"})

        response = await handle_ledger_error(_request("/api/v1/accounts/abc"), exc)

        assert isinstance(response, JSONResponse)
        assert response.status_code == 404
        content = json.loads(response.body.decode())
        assert content["error_code"] == "NF_001"
        assert content["kind"] == "NotFoundError"

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "exc, status",
        [
            (ValidationError("VAL_002"), 400),
            (NotFoundError("NF_002"), 404),
            (ConflictError("CONFLICT_001"), 409),
            (StorageError("DB_001"), 500),
            (AuthenticationError("AUTH_001"), 401),
            (AuthenticationError("AUTH_003", http_status=403), 403),
        ],
    )
    async def test_status_per_kind(self, exc, status):
        response = await handle_ledger_error(_request(), exc)
        assert response.status_code == status

    @pytest.mark.asyncio
    async def test_error_includes_all_fields(self):
        response = await handle_ledger_error(_request(), NotFoundError("NF_003"))
        content = json.loads(response.body.decode())

        for field in ["error_code", "kind", "message", "user_message", "suggestion", "retry_allowed"]:
            assert field in content, f"Missing required field: {field}"

    @pytest.mark.asyncio
    async def test_details_not_in_response(self):
        exc = NotFoundError("NF_002", details={"transaction_id": "secret-id"})
        response = await handle_ledger_error(_request(), exc)
        assert "secret-id" not in response.body.decode()


class TestValidationErrorHandler:
    """Test validation error handling."""

    @pytest.mark.asyncio
    async def test_handle_validation_error(self):
        exc = RequestValidationError(
            errors=[
                {
                    "loc": ("body", "amount"),
                    "msg": "Decimal input should have no more than 2 decimal places",
                    "type": "decimal_max_places",
                }
            ]
        )

        response = await handle_validation_error(_request("/api/v1/transactions", "POST"), exc)

        assert response.status_code == 400
        content = json.loads(response.body.decode())
        assert content["error_code"] == "VAL_001"
        assert "amount" in content["message"]

    @pytest.mark.asyncio
    async def test_validation_error_multiple_fields(self):
        exc = RequestValidationError(
            errors=[
                {"loc": ("body", "email"), "msg": "invalid email", "type": "value_error"},
                {"loc": ("body", "password"), "msg": "too short", "type": "value_error"},
            ]
        )

        response = await handle_validation_error(_request(method="POST"), exc)
        content = json.loads(response.body.decode())

        assert "email" in content["message"]
        assert "password" in content["message"]


class TestIntegrityErrorHandler:
    """Test database integrity error handling."""

    @pytest.mark.asyncio
    async def test_handle_duplicate_key_error(self):
        exc = IntegrityError("statement", "params", "UNIQUE constraint failed")

        response = await handle_integrity_error(_request(method="POST"), exc)

        assert response.status_code == 409
        assert json.loads(response.body.decode())["error_code"] == "CONFLICT_002"

    @pytest.mark.asyncio
    async def test_handle_generic_db_error(self):
        exc = IntegrityError("statement", "params", "Foreign key constraint failed")

        response = await handle_integrity_error(_request(method="POST"), exc)

        assert response.status_code == 500
        assert json.loads(response.body.decode())["error_code"] == "DB_001"


class TestGenericErrorHandler:
    """Test generic exception handling."""

    @pytest.mark.asyncio
    async def test_handle_generic_error(self):
        exc = Exception("Something went wrong")

        response = await handle_generic_error(_request("/api/v1/test"), exc)

        assert response.status_code == 500
        content = json.loads(response.body.decode())
        assert content["error_code"] == "SYS_001"
        assert "Something went wrong" not in response.body.decode()

    @pytest.mark.asyncio
    async def test_5xx_errors_dont_expose_internals(self):
        exc = Exception("Database connection failed: host=localhost port=5432")
        response = await handle_generic_error(_request(), exc)

        body = response.body.decode()
        assert "Database connection failed" not in body
        assert "localhost" not in body


class TestCatalog:
    def test_unknown_code_falls_back(self):
        assert get_error("NOPE_999")["code"] == "UNKNOWN"

    def test_storage_errors_not_retryable(self):
        assert is_retryable("DB_001") is False

    def test_every_entry_has_suggestion(self):
        from fintrack.core.errors import ERROR_CATALOG

        for code, entry in ERROR_CATALOG.items():
            assert entry["code"] == code
            assert entry["suggestion"]


class TestSensitiveFiltering:
    """Test log scrubbing."""

    def test_filter_card_number(self):
        filtered = filter_sensitive("Card number 4532015112830366 was used")
        assert "4532015112830366" not in filtered
        assert "[NUMBER]" in filtered

    def test_filter_email(self):
        filtered = filter_sensitive("Contact john.doe@example.com for help")
        assert "john.doe@example.com" not in filtered
        assert "[EMAIL]" in filtered

    def test_filter_bearer_token(self):
        filtered = filter_sensitive("Authorization: Bearer abc.def.ghi")
        assert "abc.def.ghi" not in filtered
        assert "[TOKEN]" in filtered

    def test_filter_preserves_amounts(self):
        text = "Transaction for $50.00 at Starbucks"
        assert filter_sensitive(text) == text

    def test_filter_empty_and_none(self):
        assert filter_sensitive("") == ""
        assert filter_sensitive(None) is None


class TestJSONLogFormatter:
    def test_formats_extra_fields_and_scrubs(self):
        record = logging.LogRecord(
            name="fintrack.test",
            level=logging.INFO,
            pathname=__file__,
            lineno=1,
            msg="login by %s",
            args=("jane@example.com",),
            exc_info=None,
        )
        record.request_id = "req-1"
        record.balance_delta = "-50.00"

        data = json.loads(JSONLogFormatter().format(record))

        assert data["level"] == "INFO"
        assert data["request_id"] == "req-1"
        assert data["balance_delta"] == "-50.00"
        assert "jane@example.com" not in data["message"]


class TestLoggingBehavior:
    """Test logging behavior of error handlers."""

    @pytest.mark.asyncio
    async def test_storage_errors_logged_as_error(self, caplog):
        with caplog.at_level(logging.ERROR):
            await handle_ledger_error(_request(method="POST"), StorageError("DB_001"))

        assert "DB_001" in caplog.text

    @pytest.mark.asyncio
    async def test_validation_errors_logged_as_warning(self, caplog):
        exc = RequestValidationError(
            errors=[{"loc": ("body", "email"), "msg": "invalid", "type": "value_error"}]
        )

        with caplog.at_level(logging.WARNING):
            await handle_validation_error(_request(method="POST"), exc)

        assert len(caplog.records) > 0
