"""Notification repository."""
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from fintrack.models.notification import Notification
from fintrack.repositories.base import UserOwnedRepository


class NotificationRepository(UserOwnedRepository[Notification]):
    def __init__(self, db: AsyncSession):
        super().__init__(db, Notification)

    async def list_for_user(self, user_id: UUID, unread_only: bool = False) -> list[Notification]:
        """Newest first."""
        query = select(Notification).where(Notification.user_id == user_id)
        if unread_only:
            query = query.where(Notification.is_read.is_(False))
        result = await self.db.execute(
            query.order_by(Notification.created_at.desc(), Notification.id)
        )
        return list(result.scalars().all())
