"""Account model: a balance-carrying container for transactions."""
from decimal import Decimal
from uuid import UUID

from sqlalchemy import ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from fintrack.models.base import BaseModel, Money


class Account(BaseModel):
    """A user's checking/savings/credit account.

    ``current_balance`` is derived state: it always equals ``initial_balance``
    plus the sum of the account's transaction amounts, and is only written by
    the ledger service.
    """

    __tablename__ = "accounts"

    user_id: Mapped[UUID] = mapped_column(ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    account_name: Mapped[str] = mapped_column(String(255), nullable=False)
    account_type: Mapped[str] = mapped_column(String(50), nullable=False)
    initial_balance: Mapped[Decimal] = mapped_column(Money, nullable=False)
    current_balance: Mapped[Decimal] = mapped_column(Money, nullable=False)
    currency: Mapped[str] = mapped_column(String(3), nullable=False)

    user: Mapped["User"] = relationship("User", back_populates="accounts")
    transactions: Mapped[list["Transaction"]] = relationship(
        "Transaction", back_populates="account", passive_deletes="all"
    )

    def __repr__(self) -> str:
        return f"<Account(id={self.id}, name={self.account_name}, balance={self.current_balance})>"
