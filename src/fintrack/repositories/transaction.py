"""Transaction repository with user-scoped filtering queries."""
from datetime import date
from decimal import Decimal
from uuid import UUID

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from fintrack.models.transaction import Transaction
from fintrack.repositories.base import UserOwnedRepository

CENT = Decimal("0.01")


class TransactionRepository(UserOwnedRepository[Transaction]):
    """Repository for Transaction model with filtering and aggregate queries."""

    def __init__(self, db: AsyncSession):
        super().__init__(db, Transaction)

    async def list_filtered(
        self,
        user_id: UUID,
        account_id: UUID | None = None,
        category_id: UUID | None = None,
        start_date: date | None = None,
        end_date: date | None = None,
        transaction_type: str | None = None,
    ) -> list[Transaction]:
        """List a user's transactions; every filter is optional and ANDed.

        Ordered newest first by date, then creation time, then id.
        """
        query = select(Transaction).where(Transaction.user_id == user_id)

        if account_id is not None:
            query = query.where(Transaction.account_id == account_id)
        if category_id is not None:
            query = query.where(Transaction.category_id == category_id)
        if start_date is not None:
            query = query.where(Transaction.date >= start_date)
        if end_date is not None:
            query = query.where(Transaction.date <= end_date)
        if transaction_type is not None:
            query = query.where(Transaction.transaction_type == transaction_type)

        query = query.order_by(
            Transaction.date.desc(), Transaction.created_at.desc(), Transaction.id
        )
        result = await self.db.execute(query)
        return list(result.scalars().all())

    async def sum_for_account(self, account_id: UUID) -> Decimal:
        """Signed sum of all transaction amounts on an account."""
        result = await self.db.execute(
            select(func.coalesce(func.sum(Transaction.amount), 0)).where(
                Transaction.account_id == account_id
            )
        )
        return Decimal(str(result.scalar_one())).quantize(CENT)

    async def total_expenses(
        self,
        user_id: UUID,
        start_date: date,
        end_date: date,
        category_id: UUID | None = None,
    ) -> Decimal:
        """Total spent (as a positive number) over a date window."""
        query = select(func.coalesce(func.sum(Transaction.amount), 0)).where(
            Transaction.user_id == user_id,
            Transaction.amount < 0,
            Transaction.date >= start_date,
            Transaction.date <= end_date,
        )
        if category_id is not None:
            query = query.where(Transaction.category_id == category_id)
        result = await self.db.execute(query)
        return abs(Decimal(str(result.scalar_one()))).quantize(CENT)
