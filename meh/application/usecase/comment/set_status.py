"""Set comment status use case."""

from pydantic import BaseModel

from meh.application.usecase.base import BaseUseCase
from meh.domain.service import AvatarService, CommentService, TokenService
from meh.domain.value import CommentId, Scope

from .common import CommentItem, to_item


class SetStatusRequest(BaseModel):
    """Set status request."""

    comment_id: int
    status: str  # Checked by the comment service
    auth_token: str | None = None  # JWT token, admin scope required


class SetStatusResponse(BaseModel):
    """Set status response."""

    comment: CommentItem


class SetStatusUseCase(BaseUseCase[SetStatusRequest, SetStatusResponse]):
    """Use case for moderating a comment (approve, mark as spam, hide)."""

    def __init__(
        self,
        comment_service: CommentService,
        token_service: TokenService,
        avatar_service: AvatarService,
    ) -> None:
        self.comment_service = comment_service
        self.token_service = token_service
        self.avatar_service = avatar_service

    async def execute(self, request: SetStatusRequest) -> SetStatusResponse:
        """Execute set status flow.

        Raises:
            AuthenticationError: If no valid token was given
            AuthorizationError: If the token lacks the admin scope
            ValidationError: If the status is not one of the known values
            NotFoundError: If the comment does not exist
        """
        self.token_service.authorize(request.auth_token, Scope.ADMIN)
        comment = await self.comment_service.set_status(
            CommentId(request.comment_id), request.status
        )
        return SetStatusResponse(comment=to_item(comment, self.avatar_service))
