"""Comment use cases."""

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
from .get_comments import GetCommentsRequest, GetCommentsResponse, GetCommentsUseCase
from .list_all_comments import ListAllCommentsResponse, ListAllCommentsUseCase
from .views import CommentAuthorItem, CommentItem, CommentTreeItem

__all__ = [
    "CommentAuthorItem",
    "CommentItem",
    "CommentTreeItem",
    "CreateCommentRequest",
    "CreateCommentResponse",
    "CreateCommentUseCase",
    "DeleteCommentRequest",
    "DeleteCommentResponse",
    "DeleteCommentUseCase",
    "GetCommentsRequest",
    "GetCommentsResponse",
    "GetCommentsUseCase",
    "ListAllCommentsResponse",
    "ListAllCommentsUseCase",
]
