"""Domain value objects for the comment service."""

from meh.domain.value.identifiers import CommentId, PostPath, SubjectId
from meh.domain.value.types import CommentStatus, IdentityToken, Scope

__all__ = [
    # Identifiers
    "CommentId",
    "PostPath",
    "SubjectId",
    # Types
    "CommentStatus",
    "IdentityToken",
    "Scope",
]
