"""Bulk comment moderation use case."""

from uuid import UUID

from pydantic import BaseModel, Field

from estate.domain.service import CommentService
from estate.domain.value import BulkCommentAction, CommentId, UserId


class BulkCommentActionRequest(BaseModel):
    """Bulk action request."""

    comment_ids: list[UUID] = Field(min_length=1)
    action: BulkCommentAction
    user_id: str  # Acting admin from the auth cookie


class BulkCommentActionResponse(BaseModel):
    """Bulk action response."""

    count: int
    message: str


class BulkCommentActionUseCase:
    """Use case for approving, rejecting, spamming or deleting many comments."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize bulk action use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(
        self, request: BulkCommentActionRequest
    ) -> BulkCommentActionResponse:
        """Execute the bulk action.

        Raises:
            NotFoundError: If any comment ID is unknown (nothing is changed)
        """
        count = await self.comment_service.bulk_action(
            [CommentId(i) for i in request.comment_ids],
            request.action,
            UserId(UUID(request.user_id)),
        )
        return BulkCommentActionResponse(
            count=count,
            message=f"{count} comments {request.action.past_tense} successfully.",
        )
