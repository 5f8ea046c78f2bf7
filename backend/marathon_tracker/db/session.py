"""
Database engines and sessions.

Markers are the only persisted data. The sync engine creates tables at
startup; request handlers get an AsyncSession from `get_async_db`.
"""

import logging
from typing import AsyncGenerator

from sqlalchemy import create_engine
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from marathon_tracker.config import settings

logger = logging.getLogger(__name__)

# Sync URL prefix -> async driver prefix
ASYNC_DRIVERS = {
    "sqlite:///": "sqlite+aiosqlite:///",
    "postgresql://": "postgresql+asyncpg://",
}

POSTGRES_POOL_OPTIONS = {
    "pool_size": 5,
    "max_overflow": 10,
    "pool_timeout": 30,
    "pool_recycle": 1800,  # 30 minutes
}


def to_async_url(url: str) -> str:
    """Swap the driver of a sync database URL for its async counterpart."""
    for sync_prefix, async_prefix in ASYNC_DRIVERS.items():
        if url.startswith(sync_prefix):
            return async_prefix + url[len(sync_prefix):]
    return url


def engine_options(url: str) -> dict:
    """Engine keyword arguments for a database URL (sync or async)."""
    if url.startswith("sqlite"):
        # The SQLite file is shared by the server's worker threads
        return {"connect_args": {"check_same_thread": False}}
    if url.startswith("postgresql"):
        return dict(POSTGRES_POOL_OPTIONS)
    return {}


# =============================================================================
# Engines
# =============================================================================

engine = create_engine(settings.database_url, **engine_options(settings.database_url))

_async_url = to_async_url(settings.database_url)
async_engine = create_async_engine(_async_url, **engine_options(_async_url))

AsyncSessionLocal = async_sessionmaker(
    async_engine,
    class_=AsyncSession,
    expire_on_commit=False
)


async def get_async_db() -> AsyncGenerator[AsyncSession, None]:
    """
    Request-scoped session dependency.

    Routes commit explicitly. Whatever is left uncommitted when the
    request ends (a rejected race marker, a failed import) is rolled
    back when the session closes.
    """
    async with AsyncSessionLocal() as session:
        yield session


# =============================================================================
# Initialization
# =============================================================================

def init_db() -> None:
    """Create missing tables."""
    # Importing Marker registers it with Base.metadata
    from marathon_tracker.models import Base, Marker  # noqa

    Base.metadata.create_all(bind=engine)
    logger.info(f"Tables ready: {', '.join(Base.metadata.tables)}")
