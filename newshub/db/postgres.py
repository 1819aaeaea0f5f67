"""PostgreSQL engine and the per-request article session."""

import logging
from collections.abc import AsyncGenerator

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlmodel import SQLModel

from newshub.config import get_settings

logger = logging.getLogger(__name__)

settings = get_settings()

# The hosted database drops idle connections; check them before reuse
engine = create_async_engine(
    settings.database_url,
    echo=settings.debug,
    pool_pre_ping=True,
)

async_session = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
)


async def init_db() -> None:
    """Create the ``articles`` table if it doesn't exist yet."""
    import newshub.models  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)


async def get_session() -> AsyncGenerator[AsyncSession, None]:
    """
    Request-scoped session.

    Services commit their own writes; anything left pending when the request
    fails is rolled back so a rejected edit leaves no trace.
    """
    async with async_session() as session:
        try:
            yield session
        except Exception:
            logger.debug("Rolling back session after failed request")
            await session.rollback()
            raise
