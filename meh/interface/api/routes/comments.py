"""Comment routes."""

from typing import Annotated

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends, Path, status
from pydantic import BaseModel, Field

from meh.application.usecase.comment import (
    CommentItem,
    CountCommentsRequest,
    CountCommentsUseCase,
    CreateCommentRequest,
    CreateCommentUseCase,
    DeleteCommentRequest,
    DeleteCommentUseCase,
    EditCommentRequest,
    EditCommentUseCase,
    GetCommentRequest,
    GetCommentUseCase,
    ListCommentsRequest,
    ListCommentsUseCase,
    SetStatusRequest,
    SetStatusUseCase,
)
from meh.interface.api.dependencies import bearer_token, client_ip
from meh.interface.api.routes.common import Envelope

router = APIRouter(tags=["comments"], route_class=DishkaRoute)

# Ids are stored in a 32-bit integer column
MAX_COMMENT_ID = 2**31 - 1

CommentIdPath = Annotated[int, Path(ge=1, le=MAX_COMMENT_ID)]


class CreateCommentAPIRequest(BaseModel):
    """API request for creating a comment.

    Required fields are checked by the comment service so the error can
    name the missing field.
    """

    post: str | None = None
    author: str | None = None
    text: str | None = None
    email: str | None = None
    website: str | None = None
    parent: int | None = Field(default=None, ge=1, le=MAX_COMMENT_ID)


class EditCommentAPIRequest(BaseModel):
    """API request for editing a comment. Other keys are ignored."""

    author: str | None = None
    email: str | None = None
    website: str | None = None
    text: str | None = None


@router.get("/comments", response_model=Envelope[list[CommentItem]])
async def list_comments(
    list_comments_use_case: FromDishka[ListCommentsUseCase],
    post: str | None = None,
    auth_token: str | None = Depends(bearer_token),
) -> Envelope[list[CommentItem]]:
    """List the comments of a post, oldest first.

    Visitors get approved comments only, admins everything but deleted.
    """
    result = await list_comments_use_case.execute(
        ListCommentsRequest(post=post, auth_token=auth_token)
    )
    return Envelope(response=result.comments)


@router.get("/comments/count", response_model=Envelope[int])
async def count_comments(
    count_comments_use_case: FromDishka[CountCommentsUseCase],
    post: str | None = None,
) -> Envelope[int]:
    """Count the approved comments of a post."""
    result = await count_comments_use_case.execute(CountCommentsRequest(post=post))
    return Envelope(response=result.count)


@router.post(
    "/comment",
    response_model=Envelope[CommentItem],
    status_code=status.HTTP_201_CREATED,
)
async def create_comment(
    create_comment_use_case: FromDishka[CreateCommentUseCase],
    request: CreateCommentAPIRequest | None = None,
    ip: str = Depends(client_ip),
    auth_token: str | None = Depends(bearer_token),
) -> Envelope[CommentItem]:
    """Submit a comment or a reply.

    Requires a token with the user scope. The comment is moderated before
    it is stored and its initial status depends on the submitter's history.

    Args:
        request: Comment data
        create_comment_use_case: Create comment use case from DI
        ip: Submitter address
        auth_token: JWT token from the Authorization header

    Returns:
        Created comment
    """
    result = await create_comment_use_case.execute(
        CreateCommentRequest(
            auth_token=auth_token,
            ip=ip,
            **(request or CreateCommentAPIRequest()).model_dump(),
        )
    )
    return Envelope(response=result.comment)


@router.get("/comment/{comment_id}", response_model=Envelope[CommentItem])
async def get_comment(
    comment_id: CommentIdPath,
    get_comment_use_case: FromDishka[GetCommentUseCase],
    auth_token: str | None = Depends(bearer_token),
) -> Envelope[CommentItem]:
    """Get a single comment of any status. Requires the admin scope."""
    result = await get_comment_use_case.execute(
        GetCommentRequest(comment_id=comment_id, auth_token=auth_token)
    )
    return Envelope(response=result.comment)


@router.patch("/comment/{comment_id}", response_model=Envelope[CommentItem])
async def edit_comment(
    comment_id: CommentIdPath,
    request: EditCommentAPIRequest,
    edit_comment_use_case: FromDishka[EditCommentUseCase],
    auth_token: str | None = Depends(bearer_token),
) -> Envelope[CommentItem]:
    """Change author details or text of a comment. Requires the admin scope."""
    result = await edit_comment_use_case.execute(
        EditCommentRequest(
            comment_id=comment_id,
            auth_token=auth_token,
            **request.model_dump(),
        )
    )
    return Envelope(response=result.comment)


@router.put("/comment/{comment_id}/{new_status}", response_model=Envelope[CommentItem])
async def set_status(
    comment_id: CommentIdPath,
    new_status: str,
    set_status_use_case: FromDishka[SetStatusUseCase],
    auth_token: str | None = Depends(bearer_token),
) -> Envelope[CommentItem]:
    """Moderate a comment. Requires the admin scope."""
    result = await set_status_use_case.execute(
        SetStatusRequest(
            comment_id=comment_id, status=new_status, auth_token=auth_token
        )
    )
    return Envelope(response=result.comment)


@router.delete("/comment/{comment_id}", response_model=Envelope[int])
async def delete_comment(
    comment_id: CommentIdPath,
    delete_comment_use_case: FromDishka[DeleteCommentUseCase],
    auth_token: str | None = Depends(bearer_token),
) -> Envelope[int]:
    """Remove a comment for good. Requires the admin scope."""
    result = await delete_comment_use_case.execute(
        DeleteCommentRequest(comment_id=comment_id, auth_token=auth_token)
    )
    return Envelope(response=result.deleted)
