"""Database session configuration."""

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from beacon.models import Base


def create_engine(database_url: str, **kwargs) -> AsyncEngine:
    """Create the async engine for ``database_url``."""
    return create_async_engine(database_url, pool_pre_ping=True, **kwargs)


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Session factory bound to ``engine``."""
    return async_sessionmaker(autocommit=False, autoflush=False, bind=engine)


async def init_db(engine: AsyncEngine) -> None:
    """Create missing tables. Idempotent."""
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
