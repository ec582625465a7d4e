"""User settings endpoints."""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from fintrack.api.deps import get_current_user, get_db
from fintrack.models.user import User
from fintrack.repositories.user_settings import UserSettingsRepository
from fintrack.schemas.notification import UserSettingsResponse, UserSettingsUpdate

router = APIRouter(prefix="/user-settings", tags=["settings"])


@router.get(
    "",
    response_model=UserSettingsResponse,
    summary="Get settings",
    description="Created with empty preferences on first access.",
)
async def get_settings(
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
) -> UserSettingsResponse:
    return UserSettingsResponse.model_validate(
        await UserSettingsRepository(db).get_or_create(current_user.id)
    )


@router.put(
    "",
    response_model=UserSettingsResponse,
    summary="Replace settings",
    description="Overwrites both preference documents.",
)
async def put_settings(
    data: UserSettingsUpdate,
    current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
) -> UserSettingsResponse:
    stored = await UserSettingsRepository(db).replace(
        current_user.id,
        notification_preferences=data.notification_preferences,
        other_preferences=data.other_preferences,
    )
    return UserSettingsResponse.model_validate(stored)
