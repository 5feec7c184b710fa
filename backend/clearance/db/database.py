"""Database Configuration.

Async SQLAlchemy setup. MySQL (aiomysql) in production; any async dialect
SQLAlchemy supports can be configured through DATABASE_URL.
"""

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import declarative_base
from sqlalchemy.pool import StaticPool

from ..core.config import Settings
from ..core.constants import DatabaseLimits

Base = declarative_base()


def build_engine(config: Settings) -> AsyncEngine:
    """Create the async engine for a store.

    SQLite gets a StaticPool so every session shares the one connection
    (required for in-memory databases). Other dialects use a pre-pinged pool.

    Args:
        config: Settings holding the database URL

    Returns:
        AsyncEngine bound to the configured database
    """
    url = config.database_url

    if url.get_backend_name() == 'sqlite':
        return create_async_engine(
            url,
            echo=config.DB_ECHO,
            poolclass=StaticPool,
            connect_args={'check_same_thread': False}
        )

    return create_async_engine(
        url,
        echo=config.DB_ECHO,
        pool_pre_ping=True,
        pool_size=DatabaseLimits.POOL_SIZE,
        max_overflow=DatabaseLimits.MAX_OVERFLOW
    )


def build_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Create the session factory used by a store."""
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False
    )
