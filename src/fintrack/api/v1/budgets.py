"""Budget endpoints."""

from uuid import UUID

from fastapi import APIRouter, Depends, status

from fintrack.api.deps import get_budget_service, get_current_user
from fintrack.core.exceptions import ValidationError
from fintrack.models.budget import Budget
from fintrack.models.user import User
from fintrack.schemas.budget import BudgetCreate, BudgetProgress, BudgetResponse, BudgetUpdate
from fintrack.services.budget import BudgetService

router = APIRouter(prefix="/budgets", tags=["budgets"])


@router.get("", response_model=list[BudgetResponse], summary="List budgets")
async def list_budgets(
    current_user: User = Depends(get_current_user),
    service: BudgetService = Depends(get_budget_service),
) -> list[BudgetResponse]:
    budgets = await service.budget_repo.get_all_by_user(current_user.id)
    return [BudgetResponse.model_validate(b) for b in budgets]


@router.post(
    "",
    response_model=BudgetResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create budget",
)
async def create_budget(
    data: BudgetCreate,
    current_user: User = Depends(get_current_user),
    service: BudgetService = Depends(get_budget_service),
) -> BudgetResponse:
    await service.require_category(current_user.id, data.category_id)
    budget = await service.budget_repo.create(Budget(user_id=current_user.id, **data.model_dump()))
    return BudgetResponse.model_validate(budget)


@router.get(
    "/{budget_id}",
    response_model=BudgetResponse,
    summary="Get budget",
    responses={404: {"description": "Budget not found"}},
)
async def get_budget(
    budget_id: UUID,
    current_user: User = Depends(get_current_user),
    service: BudgetService = Depends(get_budget_service),
) -> BudgetResponse:
    return BudgetResponse.model_validate(await service.get_budget(current_user.id, budget_id))


@router.api_route(
    "/{budget_id}",
    methods=["PUT", "PATCH"],
    response_model=BudgetResponse,
    summary="Update budget",
    description="Partial update; omitted fields keep their stored value.",
    responses={404: {"description": "Budget not found"}},
)
async def update_budget(
    budget_id: UUID,
    data: BudgetUpdate,
    current_user: User = Depends(get_current_user),
    service: BudgetService = Depends(get_budget_service),
) -> BudgetResponse:
    budget = await service.get_budget(current_user.id, budget_id)
    await service.require_category(current_user.id, data.category_id)
    start = data.start_date or budget.start_date
    end = data.end_date or budget.end_date
    if end < start:
        raise ValidationError("VAL_001", details={"start_date": str(start), "end_date": str(end)})

    budget = await service.budget_repo.update(budget, data.model_dump())
    return BudgetResponse.model_validate(budget)


@router.delete(
    "/{budget_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete budget",
    responses={404: {"description": "Budget not found"}},
)
async def delete_budget(
    budget_id: UUID,
    current_user: User = Depends(get_current_user),
    service: BudgetService = Depends(get_budget_service),
) -> None:
    budget = await service.get_budget(current_user.id, budget_id)
    await service.budget_repo.delete(budget)


@router.get(
    "/{budget_id}/progress",
    response_model=BudgetProgress,
    summary="Budget progress",
    description="""
    Spending inside the budget window compared with the budgeted amount.
    Only negative transaction amounts count as spending.
    """,
    responses={404: {"description": "Budget not found"}},
)
async def budget_progress(
    budget_id: UUID,
    current_user: User = Depends(get_current_user),
    service: BudgetService = Depends(get_budget_service),
) -> BudgetProgress:
    return await service.progress(current_user.id, budget_id)
