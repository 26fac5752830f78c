"""Comment use cases."""

from .common import CommentView
from .create_comment import CreateCommentRequest, CreateCommentUseCase
from .delete_comment import (
    DeleteCommentRequest,
    DeleteCommentResponse,
    DeleteCommentUseCase,
)
from .list_comments import (
    ListCommentsRequest,
    ListCommentsResponse,
    ListCommentsUseCase,
)
from .update_comment import UpdateCommentRequest, UpdateCommentUseCase

__all__ = [
    "CommentView",
    "CreateCommentRequest",
    "CreateCommentUseCase",
    "DeleteCommentRequest",
    "DeleteCommentResponse",
    "DeleteCommentUseCase",
    "ListCommentsRequest",
    "ListCommentsResponse",
    "ListCommentsUseCase",
    "UpdateCommentRequest",
    "UpdateCommentUseCase",
]
