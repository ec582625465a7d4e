"""Transaction request/response schemas."""

import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from fintrack.schemas.common import Amount


class TransactionCreate(BaseModel):
    """Request to record a transaction.

    ``amount`` is signed: positive for income, negative for expenses. When
    ``category_id`` is omitted the description is matched against keyword
    rules.
    """

    account_id: UUID
    date: datetime.date
    amount: Amount
    transaction_type: str = Field(..., min_length=1, max_length=50)
    description: str | None = None
    category_id: UUID | None = None
    recurrence: str | None = Field(None, max_length=50, description="Label only, e.g. 'monthly'")


class TransactionUpdate(BaseModel):
    """Partial update. Omitted or null fields keep their stored value."""

    account_id: UUID | None = None
    date: datetime.date | None = None
    amount: Amount | None = None
    transaction_type: str | None = Field(None, min_length=1, max_length=50)
    description: str | None = None
    category_id: UUID | None = None
    recurrence: str | None = Field(None, max_length=50)


class TransactionResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    user_id: UUID
    account_id: UUID
    date: datetime.date
    amount: Amount
    transaction_type: str
    description: str
    category_id: UUID | None
    recurrence: str
    created_at: datetime.datetime
    updated_at: datetime.datetime


class TransactionListResult(BaseModel):
    transactions: list[TransactionResponse]
    total: int = Field(description="Number of matching transactions")
