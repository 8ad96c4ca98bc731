"""Comment domain service."""

import logfire

from meh.domain.error import (
    NotFoundError,
    PendingCommentConflict,
    RateLimitError,
    ValidationError,
)
from meh.domain.model import Comment, NewComment
from meh.domain.repository import CommentRepository
from meh.domain.value import (
    CommentId,
    CommentStatus,
    IdentityToken,
    PostPath,
    SubjectId,
)

from .base import Service
from .moderation_service import ModerationService

# Fields an admin may change through an edit
EDITABLE_FIELDS = ("author", "email", "website", "text")

# What visitors and admins get to see in a post's comment list
PUBLIC_STATUSES = (CommentStatus.APPROVED,)
ADMIN_STATUSES = (CommentStatus.PENDING, CommentStatus.APPROVED, CommentStatus.SPAM)


class Renderer:
    """Generic markup renderer interface."""

    def render(self, text: str) -> str:
        """Convert submitted markup into safe HTML.

        Args:
            text: Raw markup as submitted

        Returns:
            Sanitized HTML
        """
        raise NotImplementedError


def require_fields(**fields: str | None) -> None:
    """Check that every given field has a non-blank value.

    Raises:
        ValidationError: Naming the first missing field
    """
    for name, value in fields.items():
        if value is None or not str(value).strip():
            raise ValidationError(f"field '{name}' is required")


class CommentService(Service):
    """Domain service for comment operations."""

    def __init__(
        self,
        comment_repository: CommentRepository,
        moderation_service: ModerationService,
        renderer: Renderer,
    ) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
            moderation_service: Moderation policy
            renderer: Markup renderer producing the stored HTML
        """
        self.comment_repository = comment_repository
        self.moderation_service = moderation_service
        self.renderer = renderer

    async def create_comment(
        self,
        token: IdentityToken | None,
        post: str | None,
        author: str | None,
        text: str | None,
        ip: str = "",
        email: str | None = None,
        website: str | None = None,
        parent: int | None = None,
        now: float | None = None,
    ) -> Comment:
        """Validate, moderate and store a new comment.

        Steps:
        1. Required fields and parent reference are validated
        2. Non-admins pass the anti-abuse gates
        3. The initial status is decided from the submitter's history
        4. The text is rendered and the comment stored

        Args:
            token: Submitter's identity token
            post: Post path
            author: Display name
            text: Raw markup
            ip: Submitter's network address
            email: E-mail address (optional)
            website: Website URL (optional)
            parent: ID of the comment being replied to (optional)
            now: Current time in seconds, defaults to the wall clock

        Returns:
            Stored comment

        Raises:
            ValidationError: If a required field is missing
            NotFoundError: If the parent is not a comment on the same post
            RateLimitError: If an anti-abuse gate rejects the submission
        """
        with logfire.span(
            "comment_service.create_comment",
            post=post,
            ip=ip,
            parent=parent,
        ):
            require_fields(post=post, author=author, text=text)
            post = PostPath(post)

            if parent:
                parent_comment = await self.comment_repository.find_by_id(
                    CommentId(parent)
                )
                if parent_comment is None or parent_comment.post != post:
                    logfire.warn(
                        "Parent comment not found",
                        parent=parent,
                        post=post,
                    )
                    raise NotFoundError("parent comment not found")

            is_admin = token is not None and token.is_admin
            if not is_admin:
                await self.moderation_service.check_rate_limits(token, ip, now)

            status = await self.moderation_service.initial_status(token, ip)

            comment = NewComment(
                post=post,
                author=author,
                email=email or "",
                website=website or "",
                text=text,
                html=self.renderer.render(text),
                ip=ip,
                status=status,
                user=SubjectId(token.sub) if token and token.sub else None,
                parent=CommentId(parent) if parent else None,
            )

            if is_admin:
                saved = await self.comment_repository.insert(comment)
            else:
                try:
                    saved = await self.comment_repository.insert_unless_pending(
                        comment
                    )
                except PendingCommentConflict as e:
                    logfire.warn("Concurrent pending comment", key=e.key, ip=ip)
                    raise RateLimitError(
                        RateLimitError.PENDING,
                        "You already have a comment awaiting moderation.",
                    )

            logfire.info(
                "Comment created",
                comment_id=saved.id,
                post=saved.post,
                status=saved.status.value,
            )
            return saved

    async def get_comment(self, comment_id: CommentId) -> Comment:
        """Get a comment by ID.

        Args:
            comment_id: Comment ID

        Returns:
            The comment

        Raises:
            NotFoundError: If no comment has this ID
        """
        with logfire.span("comment_service.get_comment", comment_id=comment_id):
            comment = await self.comment_repository.find_by_id(comment_id)
            if comment is None:
                logfire.warn("Comment not found", comment_id=comment_id)
                raise NotFoundError("comment not found")
            return comment

    async def edit_comment(
        self, comment_id: CommentId, changes: dict[str, str | None]
    ) -> Comment:
        """Change the editable fields of a comment.

        Only author, email, website and text are taken from changes, any
        other key is ignored. A new text is rendered to HTML again.

        Args:
            comment_id: Comment ID
            changes: New field values, None means unchanged

        Returns:
            Updated comment

        Raises:
            NotFoundError: If no comment has this ID
            ValidationError: If author or text would become empty
        """
        with logfire.span("comment_service.edit_comment", comment_id=comment_id):
            comment = await self.get_comment(comment_id)

            update = {
                field: changes[field]
                for field in EDITABLE_FIELDS
                if changes.get(field) is not None
            }
            for field in ("author", "text"):
                if field in update:
                    require_fields(**{field: update[field]})
            if "text" in update:
                update["html"] = self.renderer.render(update["text"])

            updated = await self.comment_repository.update(
                comment.model_copy(update=update)
            )
            if updated is None:
                # Removed between the read and the write
                raise NotFoundError("comment not found")

            logfire.info(
                "Comment edited",
                comment_id=comment_id,
                fields=sorted(update),
            )
            return updated

    async def set_status(self, comment_id: CommentId, status: str | None) -> Comment:
        """Overwrite the moderation status of a comment.

        Any status can be set from any other, admins are trusted to move
        comments freely.

        Args:
            comment_id: Comment ID
            status: New status value

        Returns:
            Updated comment

        Raises:
            ValidationError: If status is not a valid status
            NotFoundError: If no comment has this ID
        """
        with logfire.span(
            "comment_service.set_status", comment_id=comment_id, status=status
        ):
            if status not in CommentStatus.values():
                raise ValidationError(
                    "Invalid status. Must be one of: "
                    + ", ".join(CommentStatus.values())
                )

            rows = await self.comment_repository.update_status(
                comment_id, CommentStatus(status)
            )
            if not rows:
                logfire.warn("Status change for unknown comment", comment_id=comment_id)
                raise NotFoundError("comment not found")

            logfire.info("Comment status changed", comment_id=comment_id, status=status)
            return await self.get_comment(comment_id)

    async def delete_comment(self, comment_id: CommentId) -> int:
        """Remove a comment from the store.

        Args:
            comment_id: Comment ID

        Returns:
            Number of removed comments (1)

        Raises:
            NotFoundError: If no comment has this ID
        """
        with logfire.span("comment_service.delete_comment", comment_id=comment_id):
            rows = await self.comment_repository.delete(comment_id)
            if not rows:
                logfire.warn("Delete of unknown comment", comment_id=comment_id)
                raise NotFoundError("comment not found")
            logfire.info("Comment deleted", comment_id=comment_id)
            return rows

    async def get_comments_for_post(
        self, post: str | None, is_admin: bool = False
    ) -> list[Comment]:
        """Get the visible comments of a post, oldest first.

        Visitors only see approved comments. Admins see everything that is
        not marked deleted.

        Args:
            post: Post path
            is_admin: Whether the caller holds the admin scope

        Returns:
            List of comments

        Raises:
            ValidationError: If post is missing
        """
        require_fields(post=post)
        statuses = ADMIN_STATUSES if is_admin else PUBLIC_STATUSES
        with logfire.span(
            "comment_service.get_comments_for_post", post=post, is_admin=is_admin
        ):
            comments = await self.comment_repository.find_by_post(
                PostPath(post), statuses
            )
            logfire.info("Comments retrieved for post", post=post, count=len(comments))
            return comments

    async def count_comments_for_post(self, post: str | None) -> int:
        """Count the approved comments of a post.

        Raises:
            ValidationError: If post is missing
        """
        require_fields(post=post)
        return await self.comment_repository.count_by_post(
            PostPath(post), PUBLIC_STATUSES
        )
