"""Async engine and session factory for the Jerga PostgreSQL database."""

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from jerga.config import Settings

APPLICATION_NAME = "jerga-backend"


def create_engine(settings: Settings) -> AsyncEngine:
    """Create the asyncpg-backed engine.

    Connections identify themselves as ``jerga-backend`` in
    ``pg_stat_activity`` and carry a server-side statement timeout.

    Args:
        settings: Application settings with database URL and pool sizes

    Returns:
        Configured async engine
    """
    database = settings.database
    return create_async_engine(
        settings.database_url,
        echo=settings.debug,
        pool_pre_ping=True,
        pool_size=database.pool_size,
        max_overflow=database.max_overflow,
        pool_recycle=database.pool_recycle_seconds,
        connect_args={
            "server_settings": {
                "application_name": APPLICATION_NAME,
                "statement_timeout": str(database.statement_timeout_ms),
            }
        },
    )


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Session factory; rows stay readable after commit."""
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )
