"""Async database engine and sessions for PostgreSQL."""

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from meh.config import Settings

# Shows up in pg_stat_activity
APPLICATION_NAME = "meh"


def create_engine(settings: Settings) -> AsyncEngine:
    """Create the async engine for the configured database.

    Statements are echoed in debug mode. Pooled connections are checked
    before use, a restarted database must not fail the next request.
    """
    database = settings.database
    return create_async_engine(
        database.url,
        echo=settings.debug,
        pool_pre_ping=True,
        pool_size=database.pool_size,
        max_overflow=database.max_overflow,
        connect_args={"server_settings": {"application_name": APPLICATION_NAME}},
    )


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Create the factory for request-scoped sessions.

    Objects stay readable after commit, the request still renders them.
    Repositories flush explicitly after each write.
    """
    return async_sessionmaker(engine, expire_on_commit=False, autoflush=False)
