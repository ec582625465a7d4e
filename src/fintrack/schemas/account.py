"""Pydantic schemas for account endpoints."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from fintrack.schemas.common import Amount


class AccountCreate(BaseModel):
    account_name: str = Field(..., min_length=1, max_length=255)
    account_type: str = Field(..., min_length=1, max_length=50, description="checking, savings, credit, ...")
    initial_balance: Amount = Field(..., description="Opening balance; fixed after creation")
    currency: str | None = Field(None, min_length=3, max_length=3, description="ISO 4217 code; defaults to DEFAULT_CURRENCY")


class AccountUpdate(BaseModel):
    """Editable account fields. Balances are not editable."""

    model_config = ConfigDict(extra="forbid")

    account_name: str | None = Field(None, min_length=1, max_length=255)
    account_type: str | None = Field(None, min_length=1, max_length=50)
    currency: str | None = Field(None, min_length=3, max_length=3)

    # Accepted only so they can be rejected with a specific error code.
    initial_balance: Amount | None = None
    current_balance: Amount | None = None

    def touches_balance(self) -> bool:
        return self.initial_balance is not None or self.current_balance is not None


class AccountResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    user_id: UUID
    account_name: str
    account_type: str
    initial_balance: Amount
    current_balance: Amount
    currency: str
    created_at: datetime
    updated_at: datetime


class AccountListResult(BaseModel):
    accounts: list[AccountResponse]
    total: int


class ReconciliationResponse(BaseModel):
    """Stored balance compared with initial balance plus transaction total."""

    model_config = ConfigDict(from_attributes=True)

    account_id: UUID
    initial_balance: Amount
    transactions_total: Amount
    expected_balance: Amount
    current_balance: Amount
    is_consistent: bool
