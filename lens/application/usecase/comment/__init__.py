"""Comment use cases."""

from .add_comment import (
    AddCommentRequest,
    AddCommentResponse,
    AddCommentUseCase,
    CommentInfo,
)
from .delete_comment import (
    DeleteCommentRequest,
    DeleteCommentResponse,
    DeleteCommentUseCase,
)

__all__ = [
    "AddCommentRequest",
    "AddCommentResponse",
    "AddCommentUseCase",
    "CommentInfo",
    "DeleteCommentRequest",
    "DeleteCommentResponse",
    "DeleteCommentUseCase",
]
