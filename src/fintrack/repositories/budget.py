"""Budget repository."""
from sqlalchemy.ext.asyncio import AsyncSession

from fintrack.models.budget import Budget
from fintrack.repositories.base import UserOwnedRepository


class BudgetRepository(UserOwnedRepository[Budget]):
    def __init__(self, db: AsyncSession):
        super().__init__(db, Budget)
