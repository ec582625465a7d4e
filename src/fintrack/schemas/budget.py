"""Budget and bill schemas."""

from datetime import date, datetime
from decimal import Decimal
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, model_validator

from fintrack.schemas.common import Amount


class BudgetCreate(BaseModel):
    budget_amount: Amount
    period: str = Field(..., min_length=1, max_length=50, description="e.g. 'monthly'")
    start_date: date
    end_date: date
    category_id: UUID | None = None

    @model_validator(mode="after")
    def check_window(self) -> "BudgetCreate":
        if self.end_date < self.start_date:
            raise ValueError("end_date must not be before start_date")
        return self


class BudgetUpdate(BaseModel):
    budget_amount: Amount | None = None
    period: str | None = Field(None, min_length=1, max_length=50)
    start_date: date | None = None
    end_date: date | None = None
    category_id: UUID | None = None


class BudgetResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    user_id: UUID
    budget_amount: Amount
    period: str
    start_date: date
    end_date: date
    category_id: UUID | None
    created_at: datetime
    updated_at: datetime


class BudgetProgress(BaseModel):
    budget_id: UUID
    budget_amount: Amount
    spent: Amount
    remaining: Amount
    percent_used: Decimal = Field(description="spent / budget_amount * 100, two decimals")


class BillCreate(BaseModel):
    bill_name: str = Field(..., min_length=1, max_length=255)
    amount: Amount
    due_date: date
    recurrence: str | None = Field(None, max_length=50)
    reminder_offset: int = Field(..., ge=0, description="Days before due date to remind")


class BillUpdate(BaseModel):
    bill_name: str | None = Field(None, min_length=1, max_length=255)
    amount: Amount | None = None
    due_date: date | None = None
    recurrence: str | None = Field(None, max_length=50)
    reminder_offset: int | None = Field(None, ge=0)
    status: str | None = Field(None, min_length=1, max_length=20)


class BillResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    user_id: UUID
    bill_name: str
    amount: Amount
    due_date: date
    recurrence: str
    reminder_offset: int
    reminder_date: date
    status: str
    created_at: datetime
    updated_at: datetime
