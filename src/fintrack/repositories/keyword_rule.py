"""Keyword rule repository. Rules are global and evaluated by position."""
from uuid import UUID

from sqlalchemy import func, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from fintrack.models.category import Category
from fintrack.models.keyword_rule import KeywordRule
from fintrack.repositories.base import BaseRepository


class KeywordRuleRepository(BaseRepository[KeywordRule]):
    def __init__(self, db: AsyncSession):
        super().__init__(db, KeywordRule)

    async def get_ordered_visible(self, user_id: UUID) -> list[KeywordRule]:
        """Rules in evaluation order whose category the user can see.

        Rules pointing at another user's private category are skipped.
        """
        result = await self.db.execute(
            select(KeywordRule)
            .join(Category, KeywordRule.category_id == Category.id)
            .where(or_(Category.user_id.is_(None), Category.user_id == user_id))
            .order_by(KeywordRule.position)
        )
        return list(result.scalars().all())

    async def next_position(self) -> int:
        result = await self.db.execute(select(func.max(KeywordRule.position)))
        current = result.scalar_one_or_none()
        return 1 if current is None else current + 1

    async def append(self, rule: KeywordRule) -> KeywordRule:
        """Insert a rule at the end of the evaluation order."""
        rule.position = await self.next_position()
        return await self.create(rule)
