"""Repository interfaces for the comment domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from meh.domain.repository.comment import CommentRepository, HistoryKey
from meh.domain.repository.transaction import Transaction

__all__ = [
    "CommentRepository",
    "HistoryKey",
    "Transaction",
]
