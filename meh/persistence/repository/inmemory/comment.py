"""In-memory comment repository for testing."""

import asyncio
from datetime import datetime, timezone
from typing import Collection, Optional

from meh.domain.error import PendingCommentConflict
from meh.domain.model.comment import Comment, NewComment
from meh.domain.repository.comment import CommentRepository, HistoryKey
from meh.domain.value import CommentId, CommentStatus, PostPath


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository for testing."""

    def __init__(self) -> None:
        self._comments: dict[CommentId, Comment] = {}
        self._next_id = 1
        self._lock = asyncio.Lock()

    def _matches(self, comment: Comment, key: HistoryKey, value: str) -> bool:
        return getattr(comment, key) == value

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        return self._comments.get(comment_id)

    async def find_by_post(
        self,
        post: PostPath,
        statuses: Collection[CommentStatus],
    ) -> list[Comment]:
        """Find the comments of a post, oldest first."""
        comments = [
            c
            for c in self._comments.values()
            if c.post == post and c.status in statuses
        ]
        comments.sort(key=lambda c: (c.created_at, c.id))
        return comments

    async def count_by_post(
        self,
        post: PostPath,
        statuses: Collection[CommentStatus],
    ) -> int:
        """Count the comments of a post having one of the given statuses."""
        return len(await self.find_by_post(post, statuses))

    async def find_latest_status(
        self, key: HistoryKey, value: str
    ) -> Optional[CommentStatus]:
        """Get the status of the newest non-deleted comment by a submitter."""
        comments = [
            c
            for c in self._comments.values()
            if self._matches(c, key, value) and c.status != CommentStatus.DELETED
        ]
        if not comments:
            return None
        return max(comments, key=lambda c: (c.created_at, c.id)).status

    async def has_pending(self, key: HistoryKey, value: str) -> bool:
        """Check whether a submitter has a comment awaiting moderation."""
        return any(
            self._matches(c, key, value) and c.status == CommentStatus.PENDING
            for c in self._comments.values()
        )

    async def insert(self, comment: NewComment) -> Comment:
        """Store a new comment unconditionally."""
        saved = Comment(
            **comment.model_dump(),
            id=CommentId(self._next_id),
            created_at=datetime.now(timezone.utc),
        )
        self._comments[saved.id] = saved
        self._next_id += 1
        return saved

    async def insert_unless_pending(self, comment: NewComment) -> Comment:
        """Store a new comment unless its submitter already has a pending one."""
        async with self._lock:
            if comment.user and await self.has_pending("user", comment.user):
                raise PendingCommentConflict("user")
            if comment.ip and await self.has_pending("ip", comment.ip):
                raise PendingCommentConflict("ip")
            return await self.insert(comment)

    async def update(self, comment: Comment) -> Optional[Comment]:
        """Write the editable fields of a comment."""
        existing = self._comments.get(comment.id)
        if existing is None:
            return None

        updated = existing.model_copy(
            update={
                "author": comment.author,
                "email": comment.email,
                "website": comment.website,
                "text": comment.text,
                "html": comment.html,
            }
        )
        self._comments[comment.id] = updated
        return updated

    async def update_status(self, comment_id: CommentId, status: CommentStatus) -> int:
        """Overwrite the status of a comment."""
        existing = self._comments.get(comment_id)
        if existing is None:
            return 0
        self._comments[comment_id] = existing.model_copy(update={"status": status})
        return 1

    async def delete(self, comment_id: CommentId) -> int:
        """Delete a comment."""
        return 1 if self._comments.pop(comment_id, None) else 0
