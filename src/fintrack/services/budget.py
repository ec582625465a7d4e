"""Budget service: spending progress against a budget window."""
from decimal import ROUND_HALF_UP, Decimal
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from fintrack.core.exceptions import NotFoundError
from fintrack.models.budget import Budget
from fintrack.repositories.budget import BudgetRepository
from fintrack.repositories.category import CategoryRepository
from fintrack.repositories.transaction import TransactionRepository
from fintrack.schemas.budget import BudgetProgress


class BudgetService:
    def __init__(self, db: AsyncSession):
        self.db = db
        self.budget_repo = BudgetRepository(db)
        self.transaction_repo = TransactionRepository(db)
        self.category_repo = CategoryRepository(db)

    async def get_budget(self, user_id: UUID, budget_id: UUID) -> Budget:
        budget = await self.budget_repo.get_by_user(user_id, budget_id)
        if budget is None:
            raise NotFoundError("NF_004", details={"budget_id": str(budget_id)})
        return budget

    async def require_category(self, user_id: UUID, category_id: UUID | None) -> None:
        if category_id is not None and await self.category_repo.get_visible(user_id, category_id) is None:
            raise NotFoundError("NF_003", details={"category_id": str(category_id)})

    async def progress(self, user_id: UUID, budget_id: UUID) -> BudgetProgress:
        """Compare expenses inside the budget window with the budgeted amount.

        Only negative amounts count as spending. A budget bound to a category
        counts only transactions in that category.
        """
        budget = await self.get_budget(user_id, budget_id)
        spent = await self.transaction_repo.total_expenses(
            user_id,
            start_date=budget.start_date,
            end_date=budget.end_date,
            category_id=budget.category_id,
        )
        if budget.budget_amount > 0:
            percent = (spent / budget.budget_amount * 100).quantize(
                Decimal("0.01"), rounding=ROUND_HALF_UP
            )
        else:
            percent = Decimal("0.00")

        return BudgetProgress(
            budget_id=budget.id,
            budget_amount=budget.budget_amount,
            spent=spent,
            remaining=budget.budget_amount - spent,
            percent_used=percent,
        )
