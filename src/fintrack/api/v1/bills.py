"""Bill endpoints, including the upcoming-reminders view."""

from datetime import date
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from fintrack.api.deps import get_current_user, get_db
from fintrack.core.exceptions import NotFoundError
from fintrack.models.bill import Bill
from fintrack.models.user import User
from fintrack.repositories.bill import BillRepository
from fintrack.schemas.budget import BillCreate, BillResponse, BillUpdate

router = APIRouter(prefix="/bills", tags=["bills"])


async def _get_owned(repo: BillRepository, user_id: UUID, bill_id: UUID) -> Bill:
    bill = await repo.get_by_user(user_id, bill_id)
    if bill is None:
        raise NotFoundError("NF_005", details={"bill_id": str(bill_id)})
    return bill


@router.get("", response_model=list[BillResponse], summary="List bills")
async def list_bills(
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
) -> list[BillResponse]:
    bills = await BillRepository(db).get_all_by_user(current_user.id)
    return [BillResponse.model_validate(b) for b in bills]


@router.get(
    "/upcoming",
    response_model=list[BillResponse],
    summary="Bills due for a reminder",
    description="""
    Pending bills whose reminder date (due date minus `reminder_offset` days)
    is on or before `as_of`. Overdue pending bills are included. Ordered by
    due date.
    """,
)
async def upcoming_bills(
    as_of: date | None = Query(None, description="Reference date (default: today)"),
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
) -> list[BillResponse]:
    bills = await BillRepository(db).get_upcoming(current_user.id, as_of or date.today())
    return [BillResponse.model_validate(b) for b in bills]


@router.post(
    "",
    response_model=BillResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create bill",
    description="New bills start in the `pending` status.",
)
async def create_bill(
    data: BillCreate,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
) -> BillResponse:
    bill = await BillRepository(db).create(
        Bill(
            user_id=current_user.id,
            bill_name=data.bill_name,
            amount=data.amount,
            due_date=data.due_date,
            recurrence=data.recurrence or "none",
            reminder_offset=data.reminder_offset,
            status="pending",
        )
    )
    return BillResponse.model_validate(bill)


@router.get(
    "/{bill_id}",
    response_model=BillResponse,
    summary="Get bill",
    responses={404: {"description": "Bill not found"}},
)
async def get_bill(
    bill_id: UUID,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
) -> BillResponse:
    return BillResponse.model_validate(await _get_owned(BillRepository(db), current_user.id, bill_id))


@router.api_route(
    "/{bill_id}",
    methods=["PUT", "PATCH"],
    response_model=BillResponse,
    summary="Update bill",
    description="Partial update, e.g. `{\"status\": \"paid\"}`.",
    responses={404: {"description": "Bill not found"}},
)
async def update_bill(
    bill_id: UUID,
    data: BillUpdate,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
) -> BillResponse:
    repo = BillRepository(db)
    bill = await _get_owned(repo, current_user.id, bill_id)
    bill = await repo.update(bill, data.model_dump())
    return BillResponse.model_validate(bill)


@router.delete(
    "/{bill_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete bill",
    responses={404: {"description": "Bill not found"}},
)
async def delete_bill(
    bill_id: UUID,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
) -> None:
    repo = BillRepository(db)
    await repo.delete(await _get_owned(repo, current_user.id, bill_id))
