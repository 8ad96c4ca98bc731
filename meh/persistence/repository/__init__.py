"""PostgreSQL repository implementations."""

from meh.persistence.repository.comment import PostgresCommentRepository
from meh.persistence.repository.transaction import SessionTransaction

__all__ = ["PostgresCommentRepository", "SessionTransaction"]
