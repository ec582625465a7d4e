from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from fintrack.config import settings

# Do not log SQL statement parameters by default (amounts and descriptions
# are personal financial data).
#
# Even if someone accidentally sets DB_ECHO=true in non-dev, keep it off to avoid
# logging queries/params in shared environments.
async_engine = create_async_engine(
    settings.database_url,
    echo=(settings.db_echo if settings.app_env.lower() == "development" else False),
    future=True,
)

AsyncSessionLocal = async_sessionmaker(
    async_engine, class_=AsyncSession, expire_on_commit=False
)


async def get_db() -> AsyncSession:
    async with AsyncSessionLocal() as session:
        yield session


async def create_schema() -> None:
    """Create all tables that do not exist yet."""
    from fintrack.models import Base

    async with async_engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
