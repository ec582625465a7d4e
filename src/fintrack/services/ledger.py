"""Ledger service: transaction lifecycle with account balance maintenance.

Every write keeps the account invariant

    current_balance == initial_balance + sum(transaction.amount)

by applying the transaction row change and the balance change(s) in a single
database transaction. Balance changes are applied as

    UPDATE accounts SET current_balance = current_balance + :delta

so concurrent writers against one account never lose an update. Account rows
are also locked (SELECT ... FOR UPDATE) where the backend supports it; when
two accounts are involved they are locked in id order.
"""

import datetime
import logging
from contextlib import asynccontextmanager
from dataclasses import dataclass
from decimal import Decimal
from typing import AsyncIterator
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from fintrack.categorization.rules import categorize
from fintrack.core.exceptions import NotFoundError, StorageError, ValidationError
from fintrack.models.account import Account
from fintrack.models.transaction import Transaction
from fintrack.repositories.account import AccountRepository
from fintrack.repositories.category import CategoryRepository
from fintrack.repositories.keyword_rule import KeywordRuleRepository
from fintrack.repositories.transaction import TransactionRepository

logger = logging.getLogger(__name__)


def _to_decimal(value: Decimal | int | float | str) -> Decimal:
    if isinstance(value, Decimal):
        return value
    # str() first so floats keep their shortest repr instead of binary noise.
    return Decimal(str(value))


@dataclass(frozen=True)
class Reconciliation:
    """Result of checking one account against the ledger invariant."""

    account_id: UUID
    initial_balance: Decimal
    transactions_total: Decimal
    expected_balance: Decimal
    current_balance: Decimal

    @property
    def is_consistent(self) -> bool:
        return self.expected_balance == self.current_balance


class LedgerService:
    """Transaction CRUD keyed by (id, caller user id)."""

    def __init__(self, db: AsyncSession):
        self.db = db
        self.account_repo = AccountRepository(db)
        self.transaction_repo = TransactionRepository(db)
        self.category_repo = CategoryRepository(db)
        self.rule_repo = KeywordRuleRepository(db)

    @asynccontextmanager
    async def _unit_of_work(self, operation: str) -> AsyncIterator[None]:
        """Commit on success; roll back everything on any failure."""
        try:
            yield
            await self.db.commit()
        except SQLAlchemyError as e:
            await self.db.rollback()
            logger.error(
                "Ledger write failed",
                extra={"operation": operation, "error_type": type(e).__name__},
            )
            raise StorageError("DB_001", details={"operation": operation}) from e
        except Exception:
            await self.db.rollback()
            raise

    async def _lock_account(self, user_id: UUID, account_id: UUID) -> Account:
        account = await self.account_repo.get_for_update(user_id, account_id)
        if account is None:
            raise NotFoundError("NF_001", details={"account_id": str(account_id)})
        return account

    async def _lock_accounts(
        self, user_id: UUID, *account_ids: UUID
    ) -> dict[UUID, Account]:
        locked = {}
        for account_id in sorted(set(account_ids), key=str):
            locked[account_id] = await self._lock_account(user_id, account_id)
        return locked

    async def _lock_transaction(self, user_id: UUID, transaction_id: UUID) -> Transaction:
        result = await self.db.execute(
            select(Transaction)
            .where(Transaction.id == transaction_id, Transaction.user_id == user_id)
            .with_for_update()
            .execution_options(populate_existing=True)
        )
        txn = result.scalar_one_or_none()
        if txn is None:
            raise NotFoundError("NF_002", details={"transaction_id": str(transaction_id)})
        return txn

    async def _require_category(self, user_id: UUID, category_id: UUID) -> None:
        if await self.category_repo.get_visible(user_id, category_id) is None:
            raise NotFoundError("NF_003", details={"category_id": str(category_id)})

    async def resolve_category(
        self, user_id: UUID, category_id: UUID | None, description: str | None
    ) -> UUID | None:
        """Pick the category for a new transaction.

        An explicit category always wins and skips keyword matching. Otherwise
        every keyword rule is read and the first match is used.
        """
        if category_id is not None:
            await self._require_category(user_id, category_id)
            return category_id
        if not description:
            return None
        rules = await self.rule_repo.get_ordered_visible(user_id)
        return categorize(description, rules)

    async def create_transaction(
        self,
        user_id: UUID,
        *,
        account_id: UUID | None,
        date: datetime.date | None,
        amount: Decimal | int | float | str | None,
        transaction_type: str | None,
        description: str | None = None,
        category_id: UUID | None = None,
        recurrence: str | None = None,
    ) -> Transaction:
        """Insert a transaction and add its amount to the account balance.

        Raises:
            ValidationError: account_id, date, amount or transaction_type missing
            NotFoundError: account or explicit category not visible to the caller
            StorageError: the database rejected the write
        """
        required = {
            "account_id": account_id,
            "date": date,
            "amount": amount,
            "transaction_type": transaction_type,
        }
        missing = [name for name, value in required.items() if value is None or value == ""]
        if missing:
            raise ValidationError("VAL_003", details={"missing": missing})

        amount = _to_decimal(amount)

        async with self._unit_of_work("create_transaction"):
            account = await self._lock_account(user_id, account_id)
            resolved_category = await self.resolve_category(user_id, category_id, description)

            txn = Transaction(
                user_id=user_id,
                account_id=account.id,
                date=date,
                amount=amount,
                transaction_type=transaction_type,
                description=description or "",
                category_id=resolved_category,
                recurrence=recurrence or "none",
            )
            self.db.add(txn)
            await self.account_repo.apply_balance_delta(account, amount)

        logger.info(
            "Transaction created",
            extra={
                "transaction_id": str(txn.id),
                "account_id": str(account.id),
                "balance_delta": str(amount),
                "auto_categorized": category_id is None and resolved_category is not None,
            },
        )
        return txn

    async def update_transaction(
        self,
        user_id: UUID,
        transaction_id: UUID,
        *,
        account_id: UUID | None = None,
        date: datetime.date | None = None,
        amount: Decimal | int | float | str | None = None,
        transaction_type: str | None = None,
        description: str | None = None,
        category_id: UUID | None = None,
        recurrence: str | None = None,
    ) -> Transaction:
        """Partially update a transaction and reconcile balances.

        Arguments left as None keep the stored value. Moving a transaction
        reverses the old amount on the old account and applies the new amount
        on the new one; otherwise the account moves by the amount difference.
        """
        async with self._unit_of_work("update_transaction"):
            txn = await self._lock_transaction(user_id, transaction_id)
            old_account_id, old_amount = txn.account_id, txn.amount
            new_account_id = account_id if account_id is not None else old_account_id
            new_amount = _to_decimal(amount) if amount is not None else old_amount

            if category_id is not None:
                await self._require_category(user_id, category_id)

            if new_account_id != old_account_id:
                accounts = await self._lock_accounts(user_id, old_account_id, new_account_id)
                await self.account_repo.apply_balance_delta(accounts[old_account_id], -old_amount)
                await self.account_repo.apply_balance_delta(accounts[new_account_id], new_amount)
            else:
                account = await self._lock_account(user_id, old_account_id)
                await self.account_repo.apply_balance_delta(account, new_amount - old_amount)

            txn.account_id = new_account_id
            txn.amount = new_amount
            for field, value in (
                ("date", date),
                ("transaction_type", transaction_type),
                ("description", description),
                ("category_id", category_id),
                ("recurrence", recurrence),
            ):
                if value is not None:
                    setattr(txn, field, value)

        logger.info(
            "Transaction updated",
            extra={
                "transaction_id": str(transaction_id),
                "moved": new_account_id != old_account_id,
                "balance_delta": str(new_amount - old_amount),
            },
        )
        return txn

    async def delete_transaction(self, user_id: UUID, transaction_id: UUID) -> None:
        """Delete a transaction and reverse its amount on the owning account."""
        async with self._unit_of_work("delete_transaction"):
            txn = await self._lock_transaction(user_id, transaction_id)
            account = await self._lock_account(user_id, txn.account_id)
            await self.account_repo.apply_balance_delta(account, -txn.amount)
            await self.db.delete(txn)

        logger.info(
            "Transaction deleted",
            extra={"transaction_id": str(transaction_id), "account_id": str(account.id)},
        )

    async def get_transaction(self, user_id: UUID, transaction_id: UUID) -> Transaction:
        txn = await self.transaction_repo.get_by_user(user_id, transaction_id)
        if txn is None:
            raise NotFoundError("NF_002", details={"transaction_id": str(transaction_id)})
        return txn

    async def list_transactions(
        self,
        user_id: UUID,
        account_id: UUID | None = None,
        category_id: UUID | None = None,
        start_date: datetime.date | None = None,
        end_date: datetime.date | None = None,
        transaction_type: str | None = None,
    ) -> list[Transaction]:
        """List the caller's transactions, newest first, with ANDed filters."""
        return await self.transaction_repo.list_filtered(
            user_id,
            account_id=account_id,
            category_id=category_id,
            start_date=start_date,
            end_date=end_date,
            transaction_type=transaction_type,
        )

    async def reconcile(self, user_id: UUID, account_id: UUID) -> Reconciliation:
        """Recompute an account's balance from its transactions."""
        account = await self.account_repo.get_by_user(user_id, account_id)
        if account is None:
            raise NotFoundError("NF_001", details={"account_id": str(account_id)})
        await self.db.refresh(account)
        total = await self.transaction_repo.sum_for_account(account.id)
        return Reconciliation(
            account_id=account.id,
            initial_balance=account.initial_balance,
            transactions_total=total,
            expected_balance=account.initial_balance + total,
            current_balance=account.current_balance,
        )
