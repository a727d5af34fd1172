"""Comment use cases."""

from .bulk_action import (
    BulkCommentActionRequest,
    BulkCommentActionResponse,
    BulkCommentActionUseCase,
)
from .get_comment import (
    CommentView,
    GetCommentRequest,
    GetCommentResponse,
    GetCommentUseCase,
)
from .list_comments import (
    CommentAnalyticsResponse,
    CommentAnalyticsUseCase,
    ListCommentsResponse,
    ListCommentsUseCase,
    ModerationQueueRequest,
    ModerationQueueResponse,
    ModerationQueueUseCase,
)

__all__ = [
    "BulkCommentActionRequest",
    "BulkCommentActionResponse",
    "BulkCommentActionUseCase",
    "CommentAnalyticsResponse",
    "CommentAnalyticsUseCase",
    "CommentView",
    "GetCommentRequest",
    "GetCommentResponse",
    "GetCommentUseCase",
    "ListCommentsResponse",
    "ListCommentsUseCase",
    "ModerationQueueRequest",
    "ModerationQueueResponse",
    "ModerationQueueUseCase",
]
