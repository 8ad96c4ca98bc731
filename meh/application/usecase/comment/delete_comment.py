"""Delete comment use case."""

from pydantic import BaseModel

from meh.application.usecase.base import BaseUseCase
from meh.domain.service import CommentService, TokenService
from meh.domain.value import CommentId, Scope


class DeleteCommentRequest(BaseModel):
    """Delete comment request."""

    comment_id: int
    auth_token: str | None = None  # JWT token, admin scope required


class DeleteCommentResponse(BaseModel):
    """Delete comment response."""

    deleted: int  # Number of removed comments


class DeleteCommentUseCase(
    BaseUseCase[DeleteCommentRequest, DeleteCommentResponse]
):
    """Use case for removing a comment for good.

    Setting the deleted status hides a comment but keeps the row, this
    removes the row itself.
    """

    def __init__(
        self,
        comment_service: CommentService,
        token_service: TokenService,
    ) -> None:
        self.comment_service = comment_service
        self.token_service = token_service

    async def execute(self, request: DeleteCommentRequest) -> DeleteCommentResponse:
        """Execute delete comment flow.

        Raises:
            AuthenticationError: If no valid token was given
            AuthorizationError: If the token lacks the admin scope
            NotFoundError: If the comment does not exist
        """
        self.token_service.authorize(request.auth_token, Scope.ADMIN)
        rows = await self.comment_service.delete_comment(CommentId(request.comment_id))
        return DeleteCommentResponse(deleted=rows)
