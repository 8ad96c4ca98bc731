"""In-memory repository implementations for testing."""

from .comment import InMemoryCommentRepository
from .transaction import InMemoryTransaction

__all__ = ["InMemoryCommentRepository", "InMemoryTransaction"]
