"""Mock persistence providers for testing."""

from dishka import Scope, provide

from meh.domain.repository import CommentRepository, Transaction
from meh.persistence.repository.inmemory import (
    InMemoryCommentRepository,
    InMemoryTransaction,
)
from meh.util.di.infrastructure.persistence import PersistenceProvider


class MockPersistenceProvider(PersistenceProvider):
    """Mock persistence provider using in-memory repositories.

    APP scope keeps the data across the requests of one end-to-end test.
    Every test builds its own container, so tests stay isolated.
    """

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_comment_repository(self) -> CommentRepository:
        """Provide in-memory comment repository."""
        return InMemoryCommentRepository()

    @provide(scope=Scope.APP)
    def get_transaction(self) -> Transaction:
        """Provide commit-counting transaction."""
        return InMemoryTransaction()
