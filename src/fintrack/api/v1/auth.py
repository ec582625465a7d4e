"""Authentication endpoints for user registration, login, and token management."""

from fastapi import APIRouter, Depends, status

from fintrack.api.deps import get_auth_service, get_current_user
from fintrack.models.user import User
from fintrack.schemas.auth import (
    LoginRequest,
    LoginResponse,
    RefreshRequest,
    TokenPair,
    UserRegister,
    UserResponse,
)
from fintrack.services.auth import AuthService

router = APIRouter(prefix="/auth", tags=["authentication"])


@router.post(
    "/register",
    response_model=UserResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Register new user",
    description="Create a new user account with email and password.",
    responses={409: {"description": "Email already registered"}},
)
async def register(
    data: UserRegister,
    auth_service: AuthService = Depends(get_auth_service),
) -> UserResponse:
    """
    Register a new user account.

    Args:
        data: Registration data (email, password, name)
        auth_service: Authentication service

    Returns:
        Created user data (without password)

    Raises:
        409: Email already registered
        400: Validation error
    """
    user = await auth_service.register(
        email=data.email,
        password=data.password,
        name=data.name,
    )
    return UserResponse.model_validate(user)


@router.post(
    "/login",
    response_model=LoginResponse,
    summary="User login",
    description="Authenticate with email and password to receive JWT tokens and the user profile.",
    responses={401: {"description": "Invalid credentials"}, 403: {"description": "Account deactivated"}},
)
async def login(
    data: LoginRequest,
    auth_service: AuthService = Depends(get_auth_service),
) -> LoginResponse:
    """
    Authenticate user and return JWT tokens.

    Returns:
        Access token (30 min), refresh token (7 days) and user profile
    """
    user, tokens = await auth_service.login(email=data.email, password=data.password)
    return LoginResponse(**tokens.model_dump(), user=UserResponse.model_validate(user))


@router.post(
    "/refresh",
    response_model=TokenPair,
    summary="Refresh access token",
    description="Exchange a valid refresh token for a new token pair.",
)
async def refresh(
    data: RefreshRequest,
    auth_service: AuthService = Depends(get_auth_service),
) -> TokenPair:
    return await auth_service.refresh_tokens(data.refresh_token)


@router.get(
    "/me",
    response_model=UserResponse,
    summary="Get current user",
    description="Get information about the currently authenticated user.",
)
async def get_me(
    current_user: User = Depends(get_current_user),
) -> UserResponse:
    return UserResponse.model_validate(current_user)
