"""Async HTTP client for the finance tracker API."""

import logging
from datetime import date
from decimal import Decimal
from typing import Any
from uuid import UUID

import httpx

from fintrack.client.state import AuthState, CachedNotification, StateStore, UserData

logger = logging.getLogger(__name__)

API_PREFIX = "/api/v1"


class ApiError(Exception):
    """Non-2xx response from the API.

    ``error_code`` is taken from the standard error body when present.
    """

    def __init__(self, status_code: int, error_code: str | None = None, message: str = ""):
        self.status_code = status_code
        self.error_code = error_code
        super().__init__(f"{status_code} {error_code or ''} {message}".strip())


class NotConnectedError(RuntimeError):
    pass


def _jsonable(fields: dict[str, Any]) -> dict[str, Any]:
    out = {}
    for key, value in fields.items():
        if value is None:
            continue
        out[key] = str(value) if isinstance(value, (Decimal, UUID, date)) else value
    return out


class FinanceClient:
    """API client combining a persisted ``StateStore`` with a live connection.

    Usage::

        async with FinanceClient("http://localhost:8000", StateStore(path)) as client:
            await client.login("me@example.com", "secret123")
            await client.refresh_notifications()
    """

    def __init__(
        self,
        base_url: str,
        store: StateStore,
        transport: httpx.AsyncBaseTransport | None = None,
        timeout: float = 10.0,
    ):
        self.base_url = base_url
        self.store = store
        self._transport = transport
        self._timeout = timeout
        self._http: httpx.AsyncClient | None = None

    @property
    def is_connected(self) -> bool:
        return self._http is not None

    async def connect(self) -> None:
        if self._http is None:
            self._http = httpx.AsyncClient(
                base_url=self.base_url, transport=self._transport, timeout=self._timeout
            )

    async def disconnect(self) -> None:
        if self._http is not None:
            await self._http.aclose()
            self._http = None

    async def __aenter__(self) -> "FinanceClient":
        await self.connect()
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.disconnect()

    async def _request(self, method: str, path: str, **kwargs: Any) -> Any:
        if self._http is None:
            raise NotConnectedError("call connect() first")

        headers = kwargs.pop("headers", {})
        if self.store.token:
            headers["Authorization"] = f"Bearer {self.store.token}"

        response = await self._http.request(method, API_PREFIX + path, headers=headers, **kwargs)
        if response.status_code >= 400:
            try:
                body = response.json()
            except ValueError:
                body = {}
            if not isinstance(body, dict):
                body = {}
            if response.status_code == 401:
                self.store.logout()
            raise ApiError(response.status_code, body.get("error_code"), body.get("message", ""))

        if response.status_code == 204:
            return None
        return response.json()

    # Auth

    async def register(self, email: str, password: str, name: str = "") -> dict:
        return await self._request(
            "POST", "/auth/register", json={"email": email, "password": password, "name": name}
        )

    async def login(self, email: str, password: str) -> UserData:
        """Log in and persist the token and profile."""
        body = await self._request(
            "POST", "/auth/login", json={"email": email, "password": password}
        )
        user = UserData(
            id=str(body["user"]["id"]), email=body["user"]["email"], name=body["user"]["name"]
        )
        self.store.set_auth_state(
            AuthState(jwt_token=body["access_token"], user_data=user, is_authenticated=True)
        )
        logger.info("Logged in", extra={"user_id": user.id})
        return user

    def logout(self) -> None:
        self.store.logout()

    async def update_name(self, name: str) -> dict:
        body = await self._request("PATCH", "/users/me", json={"name": name})
        self.store.update_auth_state(
            user_data={**self.store.state.auth_state.user_data.model_dump(), "name": body["name"]}
        )
        return body

    # Notifications

    async def refresh_notifications(self, unread_only: bool = False) -> list[CachedNotification]:
        """Fetch notifications from the server and replace the cached list."""
        body = await self._request(
            "GET", "/notifications", params={"unread_only": str(unread_only).lower()}
        )
        notifications = [CachedNotification.model_validate(item) for item in body]
        self.store.set_notifications(notifications)
        return notifications

    async def mark_read(self, notification_id: str) -> None:
        await self._request("PATCH", f"/notifications/{notification_id}", json={"is_read": True})
        self.store.mark_notification_as_read(notification_id)

    # Ledger

    async def list_accounts(self) -> list[dict]:
        body = await self._request("GET", "/accounts")
        return body["accounts"]

    async def create_account(
        self,
        account_name: str,
        account_type: str,
        initial_balance: Decimal | str,
        currency: str | None = None,
    ) -> dict:
        return await self._request(
            "POST",
            "/accounts",
            json=_jsonable(
                {
                    "account_name": account_name,
                    "account_type": account_type,
                    "initial_balance": initial_balance,
                    "currency": currency,
                }
            ),
        )

    async def list_transactions(self, **filters: Any) -> list[dict]:
        body = await self._request("GET", "/transactions", params=_jsonable(filters))
        return body["transactions"]

    async def create_transaction(self, **fields: Any) -> dict:
        return await self._request("POST", "/transactions", json=_jsonable(fields))

    async def update_transaction(self, transaction_id: str, **fields: Any) -> dict:
        return await self._request(
            "PATCH", f"/transactions/{transaction_id}", json=_jsonable(fields)
        )

    async def delete_transaction(self, transaction_id: str) -> None:
        await self._request("DELETE", f"/transactions/{transaction_id}")
