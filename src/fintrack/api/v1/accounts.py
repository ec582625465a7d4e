"""Account management endpoints."""

from uuid import UUID

from fastapi import APIRouter, Depends, status

from fintrack.api.deps import get_account_service, get_current_user, get_ledger_service
from fintrack.models.user import User
from fintrack.schemas.account import (
    AccountCreate,
    AccountListResult,
    AccountResponse,
    AccountUpdate,
    ReconciliationResponse,
)
from fintrack.services.account import AccountService
from fintrack.services.ledger import LedgerService

router = APIRouter(prefix="/accounts", tags=["accounts"])


@router.get(
    "",
    response_model=AccountListResult,
    summary="List user's accounts",
    description="Get all accounts for the authenticated user, oldest first.",
)
async def list_accounts(
    current_user: User = Depends(get_current_user),
    service: AccountService = Depends(get_account_service),
) -> AccountListResult:
    accounts = await service.list_accounts(current_user.id)
    return AccountListResult(
        accounts=[AccountResponse.model_validate(a) for a in accounts],
        total=len(accounts),
    )


@router.post(
    "",
    response_model=AccountResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Open an account",
    description="""
    Create an account. The current balance starts equal to `initial_balance`
    and afterwards changes only through transactions.
    """,
)
async def create_account(
    data: AccountCreate,
    current_user: User = Depends(get_current_user),
    service: AccountService = Depends(get_account_service),
) -> AccountResponse:
    account = await service.create_account(current_user.id, data)
    return AccountResponse.model_validate(account)


@router.get(
    "/{account_id}",
    response_model=AccountResponse,
    summary="Get account",
    responses={404: {"description": "Account not found"}},
)
async def get_account(
    account_id: UUID,
    current_user: User = Depends(get_current_user),
    service: AccountService = Depends(get_account_service),
) -> AccountResponse:
    account = await service.get_account(current_user.id, account_id)
    return AccountResponse.model_validate(account)


@router.api_route(
    "/{account_id}",
    methods=["PUT", "PATCH"],
    response_model=AccountResponse,
    summary="Update account",
    description="""
    Update name, type or currency. Requests that include `initial_balance`
    or `current_balance` are rejected with `VAL_002`.
    """,
    responses={
        400: {"description": "Balance edit attempted or invalid data"},
        404: {"description": "Account not found"},
    },
)
async def update_account(
    account_id: UUID,
    data: AccountUpdate,
    current_user: User = Depends(get_current_user),
    service: AccountService = Depends(get_account_service),
) -> AccountResponse:
    account = await service.update_account(current_user.id, account_id, data)
    return AccountResponse.model_validate(account)


@router.delete(
    "/{account_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete account",
    description="Delete an account and every transaction recorded against it.",
    responses={404: {"description": "Account not found"}},
)
async def delete_account(
    account_id: UUID,
    current_user: User = Depends(get_current_user),
    service: AccountService = Depends(get_account_service),
) -> None:
    await service.delete_account(current_user.id, account_id)


@router.get(
    "/{account_id}/reconciliation",
    response_model=ReconciliationResponse,
    summary="Check account balance",
    description="Recompute the balance from the ledger and compare it with the stored balance.",
    responses={404: {"description": "Account not found"}},
)
async def reconcile_account(
    account_id: UUID,
    current_user: User = Depends(get_current_user),
    ledger: LedgerService = Depends(get_ledger_service),
) -> ReconciliationResponse:
    return ReconciliationResponse.model_validate(
        await ledger.reconcile(current_user.id, account_id)
    )
