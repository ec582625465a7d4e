"""Category repository. Users see the global defaults plus their own."""
from uuid import UUID

from sqlalchemy import or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from fintrack.models.category import Category
from fintrack.repositories.base import BaseRepository


class CategoryRepository(BaseRepository[Category]):
    def __init__(self, db: AsyncSession):
        super().__init__(db, Category)

    @staticmethod
    def _visible_to(user_id: UUID):
        return or_(Category.user_id.is_(None), Category.user_id == user_id)

    async def get_visible(self, user_id: UUID, category_id: UUID) -> Category | None:
        """Get a category if it is a global default or owned by the user."""
        result = await self.db.execute(
            select(Category).where(Category.id == category_id, self._visible_to(user_id))
        )
        return result.scalar_one_or_none()

    async def get_all_visible(self, user_id: UUID) -> list[Category]:
        """Defaults first, then the user's own categories, each by name."""
        result = await self.db.execute(
            select(Category)
            .where(self._visible_to(user_id))
            .order_by(Category.user_id.is_not(None), Category.name, Category.id)
        )
        return list(result.scalars().all())
