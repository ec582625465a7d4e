"""Notification and user settings schemas."""

from datetime import datetime
from typing import Any
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class NotificationResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    notification_type: str
    message: str
    is_read: bool
    created_at: datetime


class NotificationUpdate(BaseModel):
    is_read: bool


class UserSettingsResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    user_id: UUID
    notification_preferences: dict[str, Any]
    other_preferences: dict[str, Any]
    created_at: datetime
    updated_at: datetime


class UserSettingsUpdate(BaseModel):
    notification_preferences: dict[str, Any] = Field(default_factory=dict)
    other_preferences: dict[str, Any] = Field(default_factory=dict)
