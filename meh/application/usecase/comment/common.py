"""Outward projection of a comment."""

from datetime import datetime, timezone

from pydantic import BaseModel

from meh.domain.model import Comment
from meh.domain.service import AvatarService


class CommentItem(BaseModel):
    """Comment as returned to API consumers.

    The token subject (user) is never part of this shape.
    """

    id: int
    post: str
    author: str
    email: str
    website: str
    text: str
    html: str
    ip: str
    status: str
    parent: int | None
    created_at: str  # ISO-8601 with +00:00 offset
    avatar_url: str


def format_timestamp(value: datetime) -> str:
    """Render a timestamp in UTC with an explicit offset.

    Naive values are taken to be UTC already.
    """
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc).isoformat()


def to_item(comment: Comment, avatar_service: AvatarService) -> CommentItem:
    """Project a stored comment to its outward shape."""
    return CommentItem(
        id=comment.id,
        post=comment.post,
        author=comment.author,
        email=comment.email,
        website=comment.website,
        text=comment.text,
        html=comment.html,
        ip=comment.ip,
        status=comment.status.value,
        parent=comment.parent,
        created_at=format_timestamp(comment.created_at),
        avatar_url=avatar_service.avatar_url(comment.author, comment.email),
    )
