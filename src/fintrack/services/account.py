"""Account service for business logic operations."""
import logging
from decimal import Decimal
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from fintrack.config import settings
from fintrack.core.exceptions import NotFoundError, ValidationError
from fintrack.models.account import Account
from fintrack.repositories.account import AccountRepository
from fintrack.schemas.account import AccountCreate, AccountUpdate

logger = logging.getLogger(__name__)


class AccountService:
    """Service layer for account-related operations.

    Balances are never written here after creation; only the ledger service
    moves ``current_balance``.
    """

    def __init__(self, db: AsyncSession):
        """Initialize account service with database session.

        Args:
            db: Database session
        """
        self.db = db
        self.account_repo = AccountRepository(db)

    async def list_accounts(self, user_id: UUID) -> list[Account]:
        return await self.account_repo.get_all_by_user(user_id)

    async def get_account(self, user_id: UUID, account_id: UUID) -> Account:
        """Get a specific account for a user.

        Raises:
            NotFoundError: If the account is absent or belongs to someone else
        """
        account = await self.account_repo.get_by_user(user_id, account_id)
        if account is None:
            raise NotFoundError("NF_001", details={"account_id": str(account_id)})
        return account

    async def create_account(self, user_id: UUID, data: AccountCreate) -> Account:
        """Open an account; the current balance starts at the initial balance."""
        initial = Decimal(data.initial_balance)
        account = await self.account_repo.create(
            Account(
                user_id=user_id,
                account_name=data.account_name,
                account_type=data.account_type,
                initial_balance=initial,
                current_balance=initial,
                currency=(data.currency or settings.default_currency).upper(),
            )
        )
        logger.info("Account created", extra={"account_id": str(account.id)})
        return account

    async def update_account(
        self, user_id: UUID, account_id: UUID, data: AccountUpdate
    ) -> Account:
        """Rename or re-type an account.

        Raises:
            ValidationError: If the request tries to change a balance
            NotFoundError: If the account is absent or not owned
        """
        if data.touches_balance():
            raise ValidationError("VAL_002", details={"account_id": str(account_id)})

        account = await self.get_account(user_id, account_id)
        return await self.account_repo.update(
            account,
            {
                "account_name": data.account_name,
                "account_type": data.account_type,
                "currency": data.currency.upper() if data.currency else None,
            },
        )

    async def delete_account(self, user_id: UUID, account_id: UUID) -> None:
        """Delete an account and all of its transactions."""
        account = await self.get_account(user_id, account_id)
        await self.account_repo.delete_with_transactions(account)
        logger.info("Account deleted", extra={"account_id": str(account_id)})
