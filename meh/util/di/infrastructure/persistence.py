"""Persistence infrastructure providers."""

from collections.abc import AsyncIterator

import logfire
from dishka import Scope, provide
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from meh.config import Settings
from meh.domain.repository import CommentRepository, Transaction
from meh.persistence.database import create_engine, create_session_factory
from meh.persistence.repository import PostgresCommentRepository, SessionTransaction
from meh.util.di.base import ProviderBase
from meh.util.observability import instrument_sqlalchemy


class PersistenceProvider(ProviderBase):
    """Persistence component base."""

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """PostgreSQL persistence: one engine per process, one transaction per request."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    async def provide_engine(self, settings: Settings) -> AsyncIterator[AsyncEngine]:
        engine = create_engine(settings)
        instrument_sqlalchemy(engine)
        yield engine
        await engine.dispose()

    @provide(scope=Scope.APP)
    def provide_session_factory(
        self, engine: AsyncEngine
    ) -> async_sessionmaker[AsyncSession]:
        return create_session_factory(engine)

    @provide(scope=Scope.REQUEST)
    async def provide_session(
        self, session_factory: async_sessionmaker[AsyncSession]
    ) -> AsyncIterator[AsyncSession]:
        """Open the request transaction.

        It commits when the request scope closes, also after a domain error
        the error handlers turned into a response. A use case may commit
        earlier through the Transaction, the rest then runs in a new one.
        Only an unhandled exception rolls it back. Either way the advisory
        locks taken by the comment repository are released.
        """
        async with session_factory() as session:
            try:
                yield session
            except Exception as e:
                logfire.warn(
                    "Rolling back request transaction",
                    error=str(e),
                    error_type=type(e).__name__,
                )
                await session.rollback()
                raise
            await session.commit()

    @provide(scope=Scope.REQUEST)
    def provide_comment_repository(self, session: AsyncSession) -> CommentRepository:
        return PostgresCommentRepository(session)

    @provide(scope=Scope.REQUEST)
    def provide_transaction(self, session: AsyncSession) -> Transaction:
        return SessionTransaction(session)
