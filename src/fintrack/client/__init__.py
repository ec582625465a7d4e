"""Python client for the finance tracker API."""

from fintrack.client.api import ApiError, FinanceClient, NotConnectedError
from fintrack.client.state import (
    AuthState,
    CachedNotification,
    PersistedState,
    StateStore,
    UserData,
)

__all__ = [
    "ApiError",
    "AuthState",
    "CachedNotification",
    "FinanceClient",
    "NotConnectedError",
    "PersistedState",
    "StateStore",
    "UserData",
]
