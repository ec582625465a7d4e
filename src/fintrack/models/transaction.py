"""Transaction model representing a single signed ledger entry."""
import datetime
from decimal import Decimal
from uuid import UUID

from sqlalchemy import Date, ForeignKey, Index, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from fintrack.models.base import BaseModel, Money


class Transaction(BaseModel):
    """A transaction against exactly one account.

    Positive amounts are income, negative amounts are expenses. ``recurrence``
    is a descriptive label only.
    """

    __tablename__ = "transactions"

    user_id: Mapped[UUID] = mapped_column(ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    account_id: Mapped[UUID] = mapped_column(
        ForeignKey("accounts.id", ondelete="CASCADE"), nullable=False, index=True
    )
    date: Mapped[datetime.date] = mapped_column(Date, nullable=False, index=True)
    amount: Mapped[Decimal] = mapped_column(Money, nullable=False)
    transaction_type: Mapped[str] = mapped_column(String(50), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False, default="")
    category_id: Mapped[UUID | None] = mapped_column(
        ForeignKey("categories.id", ondelete="SET NULL"), nullable=True, index=True
    )
    recurrence: Mapped[str] = mapped_column(String(50), nullable=False, default="none")

    __table_args__ = (
        Index("ix_transactions_user_id_date", "user_id", "date"),
    )

    account: Mapped["Account"] = relationship("Account", back_populates="transactions")

    def __repr__(self) -> str:
        return f"<Transaction(id={self.id}, account_id={self.account_id}, amount={self.amount})>"
