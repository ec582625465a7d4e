"""Per-user preferences, stored as free-form JSON documents."""
from typing import Any
from uuid import UUID

from sqlalchemy import JSON, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column

from fintrack.models.base import BaseModel


class UserSettings(BaseModel):
    __tablename__ = "user_settings"

    user_id: Mapped[UUID] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"), nullable=False, unique=True
    )
    notification_preferences: Mapped[dict[str, Any]] = mapped_column(JSON, nullable=False, default=dict)
    other_preferences: Mapped[dict[str, Any]] = mapped_column(JSON, nullable=False, default=dict)

    def __repr__(self) -> str:
        return f"<UserSettings(id={self.id}, user_id={self.user_id})>"
