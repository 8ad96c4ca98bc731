"""Create comment use case."""

from pydantic import BaseModel

from meh.application.usecase.base import BaseUseCase
from meh.domain.repository import Transaction
from meh.domain.service import (
    AvatarService,
    CommentService,
    NotificationService,
    TokenService,
)
from meh.domain.value import Scope

from .common import CommentItem, to_item


class CreateCommentRequest(BaseModel):
    """Create comment request.

    Fields are optional here so that missing ones are reported by the
    comment service with the field name, not by the request parser.
    """

    auth_token: str | None = None  # JWT token, user scope required
    ip: str = ""  # Submitter address, resolved by the interface layer
    post: str | None = None
    author: str | None = None
    text: str | None = None
    email: str | None = None
    website: str | None = None
    parent: int | None = None  # Comment being replied to


class CreateCommentResponse(BaseModel):
    """Create comment response."""

    comment: CommentItem


class CreateCommentUseCase(
    BaseUseCase[CreateCommentRequest, CreateCommentResponse]
):
    """Use case for submitting a new comment or reply."""

    def __init__(
        self,
        comment_service: CommentService,
        token_service: TokenService,
        notification_service: NotificationService,
        avatar_service: AvatarService,
        transaction: Transaction,
    ) -> None:
        """Initialize create comment use case.

        Args:
            comment_service: Comment domain service
            token_service: Token service for checking the submitter's scope
            notification_service: Notifies the blog owner
            avatar_service: Avatar URL resolver for the response
            transaction: Request transaction, committed before notifying
        """
        self.comment_service = comment_service
        self.token_service = token_service
        self.notification_service = notification_service
        self.avatar_service = avatar_service
        self.transaction = transaction

    async def execute(self, request: CreateCommentRequest) -> CreateCommentResponse:
        """Execute create comment flow.

        Steps:
        1. Check the token carries the user scope
        2. Validate, moderate and store via comment service
        3. Commit, so the pending-comment locks are released before mail I/O
        4. Notify the blog owner (failures are only logged)

        Args:
            request: Create comment request

        Returns:
            Create comment response with the stored comment

        Raises:
            AuthenticationError: If no valid token was given
            AuthorizationError: If the token lacks the user scope
            ValidationError: If a required field is missing
            NotFoundError: If the parent comment does not exist on this post
            RateLimitError: If an anti-abuse gate rejects the submission
        """
        identity = self.token_service.authorize(request.auth_token, Scope.USER)

        comment = await self.comment_service.create_comment(
            token=identity,
            post=request.post,
            author=request.author,
            text=request.text,
            ip=request.ip,
            email=request.email,
            website=request.website,
            parent=request.parent,
        )

        # Never announce a comment that could still be rolled back
        await self.transaction.commit()
        await self.notification_service.notify_new_comment(comment)

        return CreateCommentResponse(comment=to_item(comment, self.avatar_service))
