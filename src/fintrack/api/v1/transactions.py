"""Transaction endpoints. Every write adjusts account balances atomically."""

import datetime
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status

from fintrack.api.deps import get_current_user, get_ledger_service
from fintrack.models.user import User
from fintrack.schemas.transaction import (
    TransactionCreate,
    TransactionListResult,
    TransactionResponse,
    TransactionUpdate,
)
from fintrack.services.ledger import LedgerService

router = APIRouter(prefix="/transactions", tags=["transactions"])


@router.get(
    "",
    response_model=TransactionListResult,
    summary="List transactions",
    description="""
    List the authenticated user's transactions, newest first.

    All filters are optional and combined with AND:
    - account_id / category_id
    - start_date / end_date (inclusive)
    - transaction_type
    """,
)
async def list_transactions(
    account_id: UUID | None = Query(None, description="Only this account"),
    category_id: UUID | None = Query(None, description="Only this category"),
    start_date: datetime.date | None = Query(None, description="On or after (YYYY-MM-DD)"),
    end_date: datetime.date | None = Query(None, description="On or before (YYYY-MM-DD)"),
    transaction_type: str | None = Query(None, description="Exact type, e.g. 'expense'"),
    current_user: User = Depends(get_current_user),
    ledger: LedgerService = Depends(get_ledger_service),
) -> TransactionListResult:
    transactions = await ledger.list_transactions(
        current_user.id,
        account_id=account_id,
        category_id=category_id,
        start_date=start_date,
        end_date=end_date,
        transaction_type=transaction_type,
    )
    return TransactionListResult(
        transactions=[TransactionResponse.model_validate(t) for t in transactions],
        total=len(transactions),
    )


@router.post(
    "",
    response_model=TransactionResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Record a transaction",
    description="""
    Record a signed amount against one of the user's accounts. Without a
    `category_id`, the description is matched against keyword rules and the
    first matching rule's category is used.
    """,
    responses={404: {"description": "Account or category not found"}},
)
async def create_transaction(
    data: TransactionCreate,
    current_user: User = Depends(get_current_user),
    ledger: LedgerService = Depends(get_ledger_service),
) -> TransactionResponse:
    txn = await ledger.create_transaction(current_user.id, **data.model_dump())
    return TransactionResponse.model_validate(txn)


@router.get(
    "/{transaction_id}",
    response_model=TransactionResponse,
    summary="Get transaction",
    responses={404: {"description": "Transaction not found"}},
)
async def get_transaction(
    transaction_id: UUID,
    current_user: User = Depends(get_current_user),
    ledger: LedgerService = Depends(get_ledger_service),
) -> TransactionResponse:
    txn = await ledger.get_transaction(current_user.id, transaction_id)
    return TransactionResponse.model_validate(txn)


@router.api_route(
    "/{transaction_id}",
    methods=["PUT", "PATCH"],
    response_model=TransactionResponse,
    summary="Update transaction",
    description="""
    Partial update; omitted fields keep their stored value. Changing
    `account_id` moves the amount between accounts.
    """,
    responses={404: {"description": "Transaction, account or category not found"}},
)
async def update_transaction(
    transaction_id: UUID,
    data: TransactionUpdate,
    current_user: User = Depends(get_current_user),
    ledger: LedgerService = Depends(get_ledger_service),
) -> TransactionResponse:
    txn = await ledger.update_transaction(
        current_user.id, transaction_id, **data.model_dump(exclude_none=True)
    )
    return TransactionResponse.model_validate(txn)


@router.delete(
    "/{transaction_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete transaction",
    description="Delete a transaction and reverse its amount on the account.",
    responses={404: {"description": "Transaction not found"}},
)
async def delete_transaction(
    transaction_id: UUID,
    current_user: User = Depends(get_current_user),
    ledger: LedgerService = Depends(get_ledger_service),
) -> None:
    await ledger.delete_transaction(current_user.id, transaction_id)
