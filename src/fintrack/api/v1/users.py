"""Profile endpoints for the authenticated user."""

from fastapi import APIRouter, Depends

from fintrack.api.deps import get_auth_service, get_current_user
from fintrack.models.user import User
from fintrack.schemas.auth import UserResponse, UserUpdate
from fintrack.services.auth import AuthService

router = APIRouter(prefix="/users", tags=["users"])


@router.get("/me", response_model=UserResponse, summary="Get my profile")
async def get_profile(current_user: User = Depends(get_current_user)) -> UserResponse:
    return UserResponse.model_validate(current_user)


@router.patch(
    "/me",
    response_model=UserResponse,
    summary="Update my profile",
    description="Only the display name can be changed.",
)
async def update_profile(
    data: UserUpdate,
    current_user: User = Depends(get_current_user),
    auth_service: AuthService = Depends(get_auth_service),
) -> UserResponse:
    user = await auth_service.update_profile(current_user.id, data.name)
    return UserResponse.model_validate(user)
