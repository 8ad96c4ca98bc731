"""Edit comment use case."""

from pydantic import BaseModel

from meh.application.usecase.base import BaseUseCase
from meh.domain.service import AvatarService, CommentService, TokenService
from meh.domain.value import CommentId, Scope

from .common import CommentItem, to_item


class EditCommentRequest(BaseModel):
    """Edit comment request.

    Only the fields below can be changed. Unknown keys in the request body
    are dropped by the request model before they reach the service.
    """

    comment_id: int
    auth_token: str | None = None  # JWT token, admin scope required
    author: str | None = None
    email: str | None = None
    website: str | None = None
    text: str | None = None


class EditCommentResponse(BaseModel):
    """Edit comment response."""

    comment: CommentItem


class EditCommentUseCase(BaseUseCase[EditCommentRequest, EditCommentResponse]):
    """Use case for correcting a comment's author details or text."""

    def __init__(
        self,
        comment_service: CommentService,
        token_service: TokenService,
        avatar_service: AvatarService,
    ) -> None:
        """Initialize edit comment use case.

        Args:
            comment_service: Comment domain service
            token_service: Token service for checking the admin scope
            avatar_service: Avatar URL resolver for the response
        """
        self.comment_service = comment_service
        self.token_service = token_service
        self.avatar_service = avatar_service

    async def execute(self, request: EditCommentRequest) -> EditCommentResponse:
        """Execute edit comment flow.

        Args:
            request: Edit comment request

        Returns:
            Updated comment

        Raises:
            AuthenticationError: If no valid token was given
            AuthorizationError: If the token lacks the admin scope
            NotFoundError: If the comment does not exist
            ValidationError: If author or text would become empty
        """
        self.token_service.authorize(request.auth_token, Scope.ADMIN)

        comment = await self.comment_service.edit_comment(
            CommentId(request.comment_id),
            request.model_dump(include={"author", "email", "website", "text"}),
        )
        return EditCommentResponse(comment=to_item(comment, self.avatar_service))
