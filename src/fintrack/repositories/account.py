"""Account repository with user-scoped queries and balance locking."""
from decimal import Decimal
from uuid import UUID

from sqlalchemy import delete, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from fintrack.models.account import Account
from fintrack.models.transaction import Transaction
from fintrack.repositories.base import UserOwnedRepository


class AccountRepository(UserOwnedRepository[Account]):
    """Repository for Account model with user-scoped security."""

    def __init__(self, db: AsyncSession):
        super().__init__(db, Account)

    async def get_for_update(self, user_id: UUID, account_id: UUID) -> Account | None:
        """Load an owned account and take a row lock on it.

        ``populate_existing`` refreshes an instance already present in the
        session so the balance read under the lock is the committed one.
        Must be called inside the unit of work that writes the balance.
        """
        result = await self.db.execute(
            select(Account)
            .where(Account.id == account_id, Account.user_id == user_id)
            .with_for_update()
            .execution_options(populate_existing=True)
        )
        return result.scalar_one_or_none()

    async def apply_balance_delta(self, account: Account, delta: Decimal) -> None:
        """Add ``delta`` to the stored balance in a single UPDATE.

        The addition happens in the database, so concurrent writers never
        overwrite each other even where row locks are unavailable. The
        in-session instance is refreshed afterwards.
        """
        await self.db.execute(
            update(Account)
            .where(Account.id == account.id, Account.user_id == account.user_id)
            .values(current_balance=Account.current_balance + delta)
            .execution_options(synchronize_session=False)
        )
        await self.db.refresh(account, attribute_names=["current_balance"])

    async def delete_with_transactions(self, account: Account) -> None:
        """Delete an account together with every transaction it owns."""
        await self.db.execute(delete(Transaction).where(Transaction.account_id == account.id))
        await self.db.delete(account)
        await self.db.commit()
