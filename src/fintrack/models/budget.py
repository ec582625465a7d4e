"""Budget model: a spending limit over a date window."""
from datetime import date
from decimal import Decimal
from uuid import UUID

from sqlalchemy import Date, ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column

from fintrack.models.base import BaseModel, Money


class Budget(BaseModel):
    __tablename__ = "budgets"

    user_id: Mapped[UUID] = mapped_column(ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    budget_amount: Mapped[Decimal] = mapped_column(Money, nullable=False)
    period: Mapped[str] = mapped_column(String(50), nullable=False)
    start_date: Mapped[date] = mapped_column(Date, nullable=False)
    end_date: Mapped[date] = mapped_column(Date, nullable=False)
    category_id: Mapped[UUID | None] = mapped_column(
        ForeignKey("categories.id", ondelete="SET NULL"), nullable=True
    )

    def __repr__(self) -> str:
        return f"<Budget(id={self.id}, amount={self.budget_amount}, period={self.period})>"
