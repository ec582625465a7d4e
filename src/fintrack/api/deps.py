"""FastAPI dependency injection for authentication, database and services."""

from typing import Annotated

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import JWTError
from sqlalchemy.ext.asyncio import AsyncSession

from fintrack.core.security import get_user_id_from_token
from fintrack.db.session import get_db
from fintrack.models.user import User
from fintrack.repositories.user import UserRepository
from fintrack.services.account import AccountService
from fintrack.services.auth import AuthService
from fintrack.services.budget import BudgetService
from fintrack.services.ledger import LedgerService

# OAuth2 bearer token scheme
security = HTTPBearer()

__all__ = [
    "get_db",
    "get_user_repository",
    "get_auth_service",
    "get_current_user",
    "get_ledger_service",
    "get_account_service",
    "get_budget_service",
]


async def get_user_repository(
    db: AsyncSession = Depends(get_db),
) -> UserRepository:
    return UserRepository(db)


async def get_auth_service(
    user_repo: UserRepository = Depends(get_user_repository),
) -> AuthService:
    return AuthService(user_repo)


async def get_ledger_service(db: AsyncSession = Depends(get_db)) -> LedgerService:
    return LedgerService(db)


async def get_account_service(db: AsyncSession = Depends(get_db)) -> AccountService:
    return AccountService(db)


async def get_budget_service(db: AsyncSession = Depends(get_db)) -> BudgetService:
    return BudgetService(db)


async def get_current_user(
    credentials: Annotated[HTTPAuthorizationCredentials, Depends(security)],
    user_repo: UserRepository = Depends(get_user_repository),
) -> User:
    """
    Extract and validate user from JWT token.

    Args:
        credentials: HTTP bearer token credentials
        user_repo: User repository for database queries

    Returns:
        Authenticated user object

    Raises:
        HTTPException: If token is invalid, expired, or user not found
    """
    credentials_exception = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Could not validate credentials",
        headers={"WWW-Authenticate": "Bearer"},
    )

    try:
        user_id = get_user_id_from_token(credentials.credentials)
    except (JWTError, ValueError):
        raise credentials_exception

    user = await user_repo.get_by_id(user_id)
    if user is None:
        raise credentials_exception

    if not user.is_active:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="User account is deactivated",
        )

    return user
