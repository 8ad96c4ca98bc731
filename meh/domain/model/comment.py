"""Comment entity.

Comments are attached to an opaque post path and go through moderation
before they are shown to visitors. Replies reference a parent comment on the
same post.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from meh.domain.model.common import DomainModel
from meh.domain.value import CommentId, CommentStatus, PostPath, SubjectId


class NewComment(DomainModel):
    """A comment that has passed moderation but has not been stored yet.

    The store assigns id and created_at on insert.
    """

    post: PostPath
    author: str = Field(min_length=1)
    email: str = ""
    website: str = ""
    text: str = Field(min_length=1)
    html: str
    ip: str = ""
    status: CommentStatus = CommentStatus.PENDING
    user: Optional[SubjectId] = None  # Token subject, only used for rate limiting
    parent: Optional[CommentId] = None


class Comment(NewComment):
    """Stored comment entity."""

    id: CommentId
    created_at: datetime
