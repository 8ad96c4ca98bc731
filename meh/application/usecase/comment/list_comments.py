"""List comments use case."""

from pydantic import BaseModel

from meh.application.usecase.base import BaseUseCase
from meh.domain.service import AvatarService, CommentService, TokenService

from .common import CommentItem, to_item


class ListCommentsRequest(BaseModel):
    """List comments request."""

    post: str | None = None
    auth_token: str | None = None  # JWT token for authentication (optional)


class ListCommentsResponse(BaseModel):
    """List comments response."""

    comments: list[CommentItem]


class ListCommentsUseCase(
    BaseUseCase[ListCommentsRequest, ListCommentsResponse]
):
    """Use case for getting the comments of a post in conversation order."""

    def __init__(
        self,
        comment_service: CommentService,
        token_service: TokenService,
        avatar_service: AvatarService,
    ) -> None:
        """Initialize list comments use case.

        Args:
            comment_service: Comment domain service
            token_service: Token service for decoding the optional token
            avatar_service: Avatar URL resolver for the response
        """
        self.comment_service = comment_service
        self.token_service = token_service
        self.avatar_service = avatar_service

    async def execute(self, request: ListCommentsRequest) -> ListCommentsResponse:
        """Execute list comments flow.

        A missing or invalid token is not an error, the caller just gets
        the visitor view with approved comments only.

        Args:
            request: List comments request

        Returns:
            Comments of the post, oldest first

        Raises:
            ValidationError: If post is missing
        """
        identity = self.token_service.decode_optional(request.auth_token)
        is_admin = identity is not None and identity.is_admin

        comments = await self.comment_service.get_comments_for_post(
            request.post, is_admin=is_admin
        )
        return ListCommentsResponse(
            comments=[to_item(c, self.avatar_service) for c in comments]
        )
