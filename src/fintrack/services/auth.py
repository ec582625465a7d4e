"""Authentication service with business logic."""

import logging
from uuid import UUID

from jose import JWTError

from fintrack.core.exceptions import AuthenticationError, ConflictError, NotFoundError
from fintrack.core.security import (
    create_access_token,
    create_refresh_token,
    get_user_id_from_token,
    hash_password,
    verify_password,
)
from fintrack.models.user import User
from fintrack.repositories.user import UserRepository
from fintrack.schemas.auth import TokenPair

logger = logging.getLogger(__name__)


class AuthService:
    """Service for authentication operations."""

    def __init__(self, user_repo: UserRepository):
        """
        Initialize authentication service.

        Args:
            user_repo: User repository for database operations
        """
        self.user_repo = user_repo

    async def register(self, email: str, password: str, name: str = "") -> User:
        """
        Register a new user.

        Args:
            email: User email address
            password: Plain text password
            name: Display name

        Returns:
            Created user object

        Raises:
            ConflictError: If email already exists
        """
        if await self.user_repo.email_exists(email):
            raise ConflictError("CONFLICT_001")

        user = User(email=email, password_hash=hash_password(password), name=name)
        created_user = await self.user_repo.create(user)
        logger.info("User registered", extra={"user_id": str(created_user.id)})
        return created_user

    async def login(self, email: str, password: str) -> tuple[User, TokenPair]:
        """
        Authenticate user and return JWT tokens.

        Raises:
            AuthenticationError: If credentials are invalid or the user is inactive
        """
        user = await self.user_repo.get_by_email(email)
        if user is None or not verify_password(password, user.password_hash):
            raise AuthenticationError("AUTH_001")

        if not user.is_active:
            raise AuthenticationError("AUTH_003", http_status=403)

        return user, self._issue(user.id)

    async def refresh_tokens(self, refresh_token: str) -> TokenPair:
        """
        Generate new token pair using refresh token.

        Raises:
            AuthenticationError: If refresh token is invalid or the user is gone
        """
        try:
            user_id = get_user_id_from_token(refresh_token, expected_type="refresh")
        except (JWTError, ValueError):
            raise AuthenticationError("AUTH_002")

        user = await self.get_active_user(user_id)
        return self._issue(user.id)

    async def get_active_user(self, user_id: UUID) -> User:
        """
        Get user by ID for authenticated requests.

        Raises:
            AuthenticationError: If user not found or inactive
        """
        user = await self.user_repo.get_by_id(user_id)
        if user is None:
            raise AuthenticationError("AUTH_002")
        if not user.is_active:
            raise AuthenticationError("AUTH_003", http_status=403)
        return user

    async def update_profile(self, user_id: UUID, name: str) -> User:
        user = await self.user_repo.get_by_id(user_id)
        if user is None:
            raise NotFoundError("NF_007")
        return await self.user_repo.update(user, {"name": name})

    @staticmethod
    def _issue(user_id: UUID) -> TokenPair:
        return TokenPair(
            access_token=create_access_token(user_id),
            refresh_token=create_refresh_token(user_id),
        )
