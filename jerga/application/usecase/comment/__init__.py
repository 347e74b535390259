"""Comment use cases."""

from .list_comments import ListCommentsRequest, ListCommentsResponse, ListCommentsUseCase
from .post_comment import PostCommentRequest, PostCommentUseCase

__all__ = [
    "ListCommentsRequest",
    "ListCommentsResponse",
    "ListCommentsUseCase",
    "PostCommentRequest",
    "PostCommentUseCase",
]
