"""Get comment use case."""

from pydantic import BaseModel

from meh.application.usecase.base import BaseUseCase
from meh.domain.service import AvatarService, CommentService, TokenService
from meh.domain.value import CommentId, Scope

from .common import CommentItem, to_item


class GetCommentRequest(BaseModel):
    """Get comment request."""

    comment_id: int
    auth_token: str | None = None  # JWT token, admin scope required


class GetCommentResponse(BaseModel):
    """Get comment response."""

    comment: CommentItem


class GetCommentUseCase(BaseUseCase[GetCommentRequest, GetCommentResponse]):
    """Use case for fetching a single comment of any status."""

    def __init__(
        self,
        comment_service: CommentService,
        token_service: TokenService,
        avatar_service: AvatarService,
    ) -> None:
        self.comment_service = comment_service
        self.token_service = token_service
        self.avatar_service = avatar_service

    async def execute(self, request: GetCommentRequest) -> GetCommentResponse:
        """Execute get comment flow.

        Raises:
            AuthenticationError: If no valid token was given
            AuthorizationError: If the token lacks the admin scope
            NotFoundError: If the comment does not exist
        """
        self.token_service.authorize(request.auth_token, Scope.ADMIN)
        comment = await self.comment_service.get_comment(CommentId(request.comment_id))
        return GetCommentResponse(comment=to_item(comment, self.avatar_service))
