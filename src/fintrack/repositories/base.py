"""Base repository with generic CRUD operations."""
from typing import Any, Generic, Type, TypeVar
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from fintrack.models.base import BaseModel

T = TypeVar("T", bound=BaseModel)


class BaseRepository(Generic[T]):
    """Generic repository providing CRUD operations for any model."""

    def __init__(self, db: AsyncSession, model: Type[T]):
        self.db = db
        self.model = model

    async def get_by_id(self, id: UUID) -> T | None:
        """Get a single record by ID."""
        result = await self.db.execute(select(self.model).where(self.model.id == id))
        return result.scalar_one_or_none()

    async def create(self, obj: T) -> T:
        """Create a new record."""
        self.db.add(obj)
        await self.db.commit()
        await self.db.refresh(obj)
        return obj

    async def update(self, obj: T, data: dict[str, Any]) -> T:
        """Apply a partial update; ``None`` values keep the stored value."""
        for key, value in data.items():
            if value is not None and hasattr(obj, key):
                setattr(obj, key, value)

        await self.db.commit()
        await self.db.refresh(obj)
        return obj

    async def delete(self, obj: T) -> None:
        """Delete a record."""
        await self.db.delete(obj)
        await self.db.commit()


class UserOwnedRepository(BaseRepository[T]):
    """Repository for models carrying a ``user_id`` owner column."""

    async def get_by_user(self, user_id: UUID, id: UUID) -> T | None:
        """Get a record only if it belongs to the specified user."""
        result = await self.db.execute(
            select(self.model).where(self.model.id == id, self.model.user_id == user_id)
        )
        return result.scalar_one_or_none()

    async def get_all_by_user(self, user_id: UUID) -> list[T]:
        """Get all records for a user, oldest first."""
        result = await self.db.execute(
            select(self.model)
            .where(self.model.user_id == user_id)
            .order_by(self.model.created_at, self.model.id)
        )
        return list(result.scalars().all())
