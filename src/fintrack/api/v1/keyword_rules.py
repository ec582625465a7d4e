"""Keyword rule endpoints.

Rules are shared by every user and evaluated in ascending ``position``;
new rules go to the end of the order. A rule may only target a category the
caller can see, and a rule on a private category only applies to its owner.
"""

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from fintrack.api.deps import get_current_user, get_db
from fintrack.core.exceptions import NotFoundError
from fintrack.models.keyword_rule import KeywordRule
from fintrack.models.user import User
from fintrack.repositories.category import CategoryRepository
from fintrack.repositories.keyword_rule import KeywordRuleRepository
from fintrack.schemas.category import KeywordRuleCreate, KeywordRuleResponse

router = APIRouter(prefix="/keyword-rules", tags=["keyword rules"])


@router.get(
    "",
    response_model=list[KeywordRuleResponse],
    summary="List keyword rules",
    description="Rules in evaluation order, limited to categories the caller can see.",
)
async def list_rules(
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
) -> list[KeywordRuleResponse]:
    rules = await KeywordRuleRepository(db).get_ordered_visible(current_user.id)
    return [KeywordRuleResponse.model_validate(r) for r in rules]


@router.post(
    "",
    response_model=KeywordRuleResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create keyword rule",
    description="Append a rule mapping a keyword to a category.",
    responses={404: {"description": "Category not found"}},
)
async def create_rule(
    data: KeywordRuleCreate,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
) -> KeywordRuleResponse:
    if await CategoryRepository(db).get_visible(current_user.id, data.category_id) is None:
        raise NotFoundError("NF_003", details={"category_id": str(data.category_id)})

    rule = await KeywordRuleRepository(db).append(
        KeywordRule(keyword=data.keyword, category_id=data.category_id)
    )
    return KeywordRuleResponse.model_validate(rule)
