"""Category endpoints."""

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from fintrack.api.deps import get_current_user, get_db
from fintrack.models.category import Category
from fintrack.models.user import User
from fintrack.repositories.category import CategoryRepository
from fintrack.schemas.category import CategoryCreate, CategoryResponse

router = APIRouter(prefix="/categories", tags=["categories"])


@router.get(
    "",
    response_model=list[CategoryResponse],
    summary="List categories",
    description="Default categories first, then the user's own, each sorted by name.",
)
async def list_categories(
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
) -> list[CategoryResponse]:
    categories = await CategoryRepository(db).get_all_visible(current_user.id)
    return [CategoryResponse.model_validate(c) for c in categories]


@router.post(
    "",
    response_model=CategoryResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create category",
)
async def create_category(
    data: CategoryCreate,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
) -> CategoryResponse:
    category = await CategoryRepository(db).create(
        Category(user_id=current_user.id, name=data.name, description=data.description)
    )
    return CategoryResponse.model_validate(category)
