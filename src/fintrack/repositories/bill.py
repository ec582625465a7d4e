"""Bill repository with reminder queries."""
from datetime import date
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from fintrack.models.bill import Bill
from fintrack.repositories.base import UserOwnedRepository


class BillRepository(UserOwnedRepository[Bill]):
    def __init__(self, db: AsyncSession):
        super().__init__(db, Bill)

    async def get_upcoming(self, user_id: UUID, as_of: date) -> list[Bill]:
        """Pending bills whose reminder date has been reached, by due date.

        The reminder window is per-row, so the date arithmetic is done here
        rather than in SQL to stay portable across backends.
        """
        result = await self.db.execute(
            select(Bill)
            .where(Bill.user_id == user_id, Bill.status == "pending")
            .order_by(Bill.due_date, Bill.id)
        )
        return [bill for bill in result.scalars().all() if bill.reminder_date <= as_of]
