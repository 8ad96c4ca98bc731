"""Comment repository interface."""

from abc import ABC, abstractmethod
from typing import Collection, List, Literal, Optional

from meh.domain.model.comment import Comment, NewComment
from meh.domain.value import CommentId, CommentStatus, PostPath

# Columns a submitter's history can be looked up by
HistoryKey = Literal["user", "ip"]


class CommentRepository(ABC):
    """Repository for Comment entity.

    Defines the contract for comment persistence operations.
    Implementations live in the persistence layer.
    """

    @abstractmethod
    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID.

        Args:
            comment_id: The comment's unique identifier

        Returns:
            The comment if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_post(
        self,
        post: PostPath,
        statuses: Collection[CommentStatus],
    ) -> List[Comment]:
        """Find the comments of a post having one of the given statuses.

        Comments are returned oldest first so they read as a conversation.

        Args:
            post: The post path
            statuses: Statuses to include

        Returns:
            List of comments ordered by created_at ascending
        """
        pass

    @abstractmethod
    async def count_by_post(
        self,
        post: PostPath,
        statuses: Collection[CommentStatus],
    ) -> int:
        """Count the comments of a post having one of the given statuses."""
        pass

    @abstractmethod
    async def find_latest_status(
        self, key: HistoryKey, value: str
    ) -> Optional[CommentStatus]:
        """Get the status of the most recent non-deleted comment by a submitter.

        Args:
            key: Column to match, the token subject or the IP address
            value: Value to match

        Returns:
            Status of the newest matching comment, None if there is none
        """
        pass

    @abstractmethod
    async def has_pending(self, key: HistoryKey, value: str) -> bool:
        """Check whether a submitter has a comment awaiting moderation."""
        pass

    @abstractmethod
    async def insert(self, comment: NewComment) -> Comment:
        """Store a new comment unconditionally.

        Args:
            comment: The comment to store

        Returns:
            The stored comment with id and created_at assigned
        """
        pass

    @abstractmethod
    async def insert_unless_pending(self, comment: NewComment) -> Comment:
        """Store a new comment unless its submitter already has a pending one.

        The check and the insert are atomic: concurrent submissions by the
        same subject or IP cannot both pass. The subject is only checked when
        comment.user is set, the IP only when comment.ip is not empty.

        Args:
            comment: The comment to store

        Returns:
            The stored comment with id and created_at assigned

        Raises:
            PendingCommentConflict: If a pending comment exists for the
                comment's user or ip
        """
        pass

    @abstractmethod
    async def update(self, comment: Comment) -> Optional[Comment]:
        """Write the editable fields (author, email, website, text, html).

        Args:
            comment: Comment carrying the new field values

        Returns:
            The stored comment, None if no comment has this id
        """
        pass

    @abstractmethod
    async def update_status(self, comment_id: CommentId, status: CommentStatus) -> int:
        """Overwrite the status of a comment.

        Returns:
            Number of rows matched (0 or 1)
        """
        pass

    @abstractmethod
    async def delete(self, comment_id: CommentId) -> int:
        """Delete a comment (hard delete).

        Returns:
            Number of rows removed (0 or 1)
        """
        pass
