"""Comment use cases."""

from .common import CommentItem
from .count_comments import (
    CountCommentsRequest,
    CountCommentsResponse,
    CountCommentsUseCase,
)
from .create_comment import (
    CreateCommentRequest,
    CreateCommentResponse,
    CreateCommentUseCase,
)
from .delete_comment import (
    DeleteCommentRequest,
    DeleteCommentResponse,
    DeleteCommentUseCase,
)
from .edit_comment import EditCommentRequest, EditCommentResponse, EditCommentUseCase
from .get_comment import GetCommentRequest, GetCommentResponse, GetCommentUseCase
from .list_comments import (
    ListCommentsRequest,
    ListCommentsResponse,
    ListCommentsUseCase,
)
from .set_status import SetStatusRequest, SetStatusResponse, SetStatusUseCase

__all__ = [
    "CommentItem",
    "CountCommentsRequest",
    "CountCommentsResponse",
    "CountCommentsUseCase",
    "CreateCommentRequest",
    "CreateCommentResponse",
    "CreateCommentUseCase",
    "DeleteCommentRequest",
    "DeleteCommentResponse",
    "DeleteCommentUseCase",
    "EditCommentRequest",
    "EditCommentResponse",
    "EditCommentUseCase",
    "GetCommentRequest",
    "GetCommentResponse",
    "GetCommentUseCase",
    "ListCommentsRequest",
    "ListCommentsResponse",
    "ListCommentsUseCase",
    "SetStatusRequest",
    "SetStatusResponse",
    "SetStatusUseCase",
]
