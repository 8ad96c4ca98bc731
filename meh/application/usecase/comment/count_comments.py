"""Count comments use case."""

from pydantic import BaseModel

from meh.application.usecase.base import BaseUseCase
from meh.domain.service import CommentService


class CountCommentsRequest(BaseModel):
    """Count comments request."""

    post: str | None = None


class CountCommentsResponse(BaseModel):
    """Count comments response."""

    count: int


class CountCommentsUseCase(
    BaseUseCase[CountCommentsRequest, CountCommentsResponse]
):
    """Use case for counting the approved comments of a post."""

    def __init__(self, comment_service: CommentService) -> None:
        self.comment_service = comment_service

    async def execute(self, request: CountCommentsRequest) -> CountCommentsResponse:
        count = await self.comment_service.count_comments_for_post(request.post)
        return CountCommentsResponse(count=count)
