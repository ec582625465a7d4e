"""User settings repository. Each user has at most one settings row."""
from typing import Any
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from fintrack.models.user_settings import UserSettings
from fintrack.repositories.base import BaseRepository


class UserSettingsRepository(BaseRepository[UserSettings]):
    def __init__(self, db: AsyncSession):
        super().__init__(db, UserSettings)

    async def get_for_user(self, user_id: UUID) -> UserSettings | None:
        result = await self.db.execute(select(UserSettings).where(UserSettings.user_id == user_id))
        return result.scalar_one_or_none()

    async def get_or_create(self, user_id: UUID) -> UserSettings:
        """Return the user's settings, creating empty preferences on first access."""
        existing = await self.get_for_user(user_id)
        if existing is not None:
            return existing
        return await self.create(
            UserSettings(user_id=user_id, notification_preferences={}, other_preferences={})
        )

    async def replace(
        self,
        user_id: UUID,
        notification_preferences: dict[str, Any],
        other_preferences: dict[str, Any],
    ) -> UserSettings:
        """Overwrite both preference documents (upsert)."""
        current = await self.get_for_user(user_id)
        if current is None:
            return await self.create(
                UserSettings(
                    user_id=user_id,
                    notification_preferences=notification_preferences,
                    other_preferences=other_preferences,
                )
            )
        current.notification_preferences = notification_preferences
        current.other_preferences = other_preferences
        await self.db.commit()
        await self.db.refresh(current)
        return current
