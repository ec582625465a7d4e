"""Client-side state for API consumers.

State is split in two tiers. ``PersistedState`` (session token, cached
notifications, UI flags) is written to a JSON file after every action and
reloaded on start. Live connection handles are never part of it; they are
owned by ``FinanceClient`` and recreated on each start.
"""

import logging
from datetime import datetime
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field
from pydantic import ValidationError as PydanticValidationError

logger = logging.getLogger(__name__)


class UserData(BaseModel):
    id: str = ""
    email: str = ""
    name: str = ""


class AuthState(BaseModel):
    jwt_token: str = ""
    user_data: UserData = Field(default_factory=UserData)
    is_authenticated: bool = False


class CachedNotification(BaseModel):
    id: str
    notification_type: str
    message: str
    is_read: bool = False
    created_at: datetime | None = None


class GlobalUIState(BaseModel):
    is_notification_center_open: bool = False


class PersistedState(BaseModel):
    """Everything that survives a restart."""

    auth_state: AuthState = Field(default_factory=AuthState)
    notification_state: list[CachedNotification] = Field(default_factory=list)
    global_ui_state: GlobalUIState = Field(default_factory=GlobalUIState)


class StateStore:
    """File-backed holder of ``PersistedState``.

    Args:
        path: JSON file location. Missing parent directories are created on
            first save.
    """

    def __init__(self, path: Path | str):
        self.path = Path(path)
        self.state = self._load()

    def _load(self) -> PersistedState:
        if not self.path.exists():
            return PersistedState()
        try:
            return PersistedState.model_validate_json(self.path.read_text(encoding="utf-8"))
        except PydanticValidationError:
            logger.warning("Discarding unreadable client state", extra={"path": str(self.path)})
            return PersistedState()

    def save(self) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(self.state.model_dump_json(indent=2), encoding="utf-8")

    # Auth

    @property
    def token(self) -> str:
        return self.state.auth_state.jwt_token

    def set_auth_state(self, auth: AuthState) -> None:
        self.state.auth_state = auth
        self.save()

    def update_auth_state(self, **updates: Any) -> None:
        """Merge the given fields into the current auth state."""
        merged = self.state.auth_state.model_dump()
        merged.update(updates)
        self.state.auth_state = AuthState.model_validate(merged)
        self.save()

    def logout(self) -> None:
        self.state.auth_state = AuthState()
        self.save()

    # Notifications

    def set_notifications(self, notifications: list[CachedNotification]) -> None:
        self.state.notification_state = list(notifications)
        self.save()

    def add_notification(self, notification: CachedNotification) -> None:
        self.state.notification_state.append(notification)
        self.save()

    def mark_notification_as_read(self, notification_id: str) -> None:
        for notification in self.state.notification_state:
            if notification.id == notification_id:
                notification.is_read = True
        self.save()

    @property
    def unread_count(self) -> int:
        return sum(1 for n in self.state.notification_state if not n.is_read)

    # UI

    def set_notification_center_open(self, is_open: bool) -> None:
        self.state.global_ui_state.is_notification_center_open = is_open
        self.save()
