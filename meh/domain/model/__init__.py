"""Domain model entities for the comment service."""

from meh.domain.model.comment import Comment, NewComment

__all__ = [
    "Comment",
    "NewComment",
]
