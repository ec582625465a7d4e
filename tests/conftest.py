import os
from decimal import Decimal
from pathlib import Path

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

ENV_TEST_PATH = Path(__file__).parents[1] / ".env.test"


def _load_env_file(path: Path) -> None:
    if not path.exists():
        return
    for line in path.read_text().splitlines():
        line = line.strip()
        if not line or line.startswith("#") or "=" not in line:
            continue
        key, value = line.split("=", 1)
        os.environ.setdefault(key, value)


_load_env_file(ENV_TEST_PATH)

TEST_DATABASE_URL = os.getenv("TEST_DATABASE_URL", "sqlite+aiosqlite:///./test_fintrack.db")

# Settings are read once at import; point the app at the test database first.
os.environ.setdefault("DATABASE_URL", TEST_DATABASE_URL)
os.environ.setdefault("JWT_SECRET", "test-secret-key")

from fintrack.db.session import get_db  # noqa: E402
from fintrack.main import app  # noqa: E402

test_engine = create_async_engine(TEST_DATABASE_URL, echo=False)
TestSessionLocal = async_sessionmaker(test_engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture(scope="function")
async def setup_database():
    """Create tables for tests that need the database, and drop them after.

    Not autouse, so pure unit tests (categorizer, security, client state)
    run without touching a database.
    """
    from fintrack.models import Base

    async with test_engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield

    async with test_engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    # Dispose of all connections in the pool to prevent connection reuse issues
    await test_engine.dispose()


@pytest.fixture
def session_factory(setup_database):
    """Session factory for tests that need several independent sessions."""
    return TestSessionLocal


@pytest.fixture
async def db_session(setup_database):
    """Provide test database session with fresh connection per test."""
    async with TestSessionLocal() as session:
        yield session
        await session.rollback()


@pytest.fixture
async def test_user(db_session: AsyncSession):
    """Create a test user for authentication tests."""
    from fintrack.core.security import hash_password
    from fintrack.models.user import User
    from fintrack.repositories.user import UserRepository

    repo = UserRepository(db_session)
    user = User(
        email="testuser@example.com",
        password_hash=hash_password("password123"),
        name="Test User",
    )
    return await repo.create(user)


@pytest.fixture
async def other_user(db_session: AsyncSession):
    """A second user, for ownership checks."""
    from fintrack.core.security import hash_password
    from fintrack.models.user import User
    from fintrack.repositories.user import UserRepository

    repo = UserRepository(db_session)
    return await repo.create(
        User(
            email="someoneelse@example.com",
            password_hash=hash_password("password123"),
            name="Other User",
        )
    )


@pytest.fixture
async def auth_headers(test_user):
    """Provide authentication headers with valid JWT token."""
    from fintrack.core.security import create_access_token

    token = create_access_token(user_id=test_user.id)
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
async def test_account(db_session: AsyncSession, test_user):
    """A checking account opened with 1200.00."""
    from fintrack.models.account import Account
    from fintrack.repositories.account import AccountRepository

    return await AccountRepository(db_session).create(
        Account(
            user_id=test_user.id,
            account_name="Checking",
            account_type="checking",
            initial_balance=Decimal("1200.00"),
            current_balance=Decimal("1200.00"),
            currency="USD",
        )
    )


@pytest.fixture
async def second_account(db_session: AsyncSession, test_user):
    """A savings account opened with 500.00."""
    from fintrack.models.account import Account
    from fintrack.repositories.account import AccountRepository

    return await AccountRepository(db_session).create(
        Account(
            user_id=test_user.id,
            account_name="Savings",
            account_type="savings",
            initial_balance=Decimal("500.00"),
            current_balance=Decimal("500.00"),
            currency="USD",
        )
    )


@pytest.fixture
async def client(db_session: AsyncSession):
    """Provide test client with database override."""

    async def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()
