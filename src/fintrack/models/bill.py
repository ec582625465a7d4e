"""Bill reminder model."""
from datetime import date, timedelta
from decimal import Decimal
from uuid import UUID

from sqlalchemy import Date, ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from fintrack.models.base import BaseModel, Money


class Bill(BaseModel):
    __tablename__ = "bills"

    user_id: Mapped[UUID] = mapped_column(ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    bill_name: Mapped[str] = mapped_column(String(255), nullable=False)
    amount: Mapped[Decimal] = mapped_column(Money, nullable=False)
    due_date: Mapped[date] = mapped_column(Date, nullable=False, index=True)
    recurrence: Mapped[str] = mapped_column(String(50), nullable=False, default="none")
    # Days before due_date at which the user wants to be reminded.
    reminder_offset: Mapped[int] = mapped_column(Integer, nullable=False)
    status: Mapped[str] = mapped_column(String(20), nullable=False, default="pending")

    @property
    def reminder_date(self) -> date:
        return self.due_date - timedelta(days=self.reminder_offset)

    def __repr__(self) -> str:
        return f"<Bill(id={self.id}, name={self.bill_name}, due={self.due_date}, status={self.status})>"
