"""Comment moderation routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends, Request, Response, status
from pydantic import BaseModel, Field

from estate.application.usecase.comment import (
    BulkCommentActionRequest,
    BulkCommentActionResponse,
    BulkCommentActionUseCase,
    CommentAnalyticsResponse,
    CommentAnalyticsUseCase,
    GetCommentRequest,
    GetCommentResponse,
    GetCommentUseCase,
    ListCommentsResponse,
    ListCommentsUseCase,
    ModerationQueueRequest,
    ModerationQueueResponse,
    ModerationQueueUseCase,
)
from estate.domain.model import Comment
from estate.domain.service import CommentService
from estate.domain.value import BulkCommentAction, CommentId, PostId, UserId
from estate.interface.api.deps import AdminId, CurrentUserId, Listing, admin_user_id

router = APIRouter(
    prefix="/comments",
    tags=["comments"],
    route_class=DishkaRoute,
    dependencies=[Depends(admin_user_id)],
)

# Comment submission is open to guests
public_router = APIRouter(
    prefix="/comments", tags=["comments"], route_class=DishkaRoute
)


class BulkActionAPIRequest(BaseModel):
    """API request for a bulk moderation action."""

    comment_ids: list[UUID] = Field(min_length=1)
    action: BulkCommentAction


class MessageResponse(BaseModel):
    message: str


class SubmitCommentAPIRequest(BaseModel):
    """API request for submitting a comment.

    Guests fill in the author fields; signed-in users don't need to.
    """

    post_id: UUID
    content: str = Field(min_length=3, max_length=5000)
    parent_id: UUID | None = None
    author_name: str | None = Field(default=None, max_length=255)
    author_email: str | None = Field(default=None, max_length=255)
    author_website: str | None = Field(default=None, max_length=255)


class SubmitCommentResponse(BaseModel):
    message: str
    comment: Comment


@public_router.post(
    "", response_model=SubmitCommentResponse, status_code=status.HTTP_201_CREATED
)
async def submit_comment(
    request: SubmitCommentAPIRequest,
    http_request: Request,
    user_id: CurrentUserId,
    comment_service: FromDishka[CommentService],
) -> SubmitCommentResponse:
    """Submit a comment on a published post. It waits for moderation."""
    comment = await comment_service.create(
        post_id=PostId(request.post_id),
        content=request.content,
        user_id=UserId(UUID(user_id)) if user_id else None,
        author_name=request.author_name,
        author_email=request.author_email,
        author_website=request.author_website,
        parent_id=CommentId(request.parent_id) if request.parent_id else None,
        ip_address=http_request.client.host if http_request.client else None,
        user_agent=http_request.headers.get("user-agent"),
    )
    return SubmitCommentResponse(
        message="Comment submitted successfully and is pending approval.",
        comment=comment,
    )


@router.get("", response_model=ListCommentsResponse)
async def list_comments(
    query: Listing, list_comments_use_case: FromDishka[ListCommentsUseCase]
) -> ListCommentsResponse:
    """List comments with counts by status.

    Filters: ``status``, ``post_id``, ``user_type`` (registered or guest).
    """
    return await list_comments_use_case.execute(query)


# Fixed paths are registered before /{comment_id}
@router.get("/moderate", response_model=ModerationQueueResponse)
async def moderation_queue(
    moderation_queue_use_case: FromDishka[ModerationQueueUseCase],
    page: int = 1,
) -> ModerationQueueResponse:
    """Pending comments, newest first, and the latest moderation decisions."""
    return await moderation_queue_use_case.execute(
        ModerationQueueRequest(page=max(page, 1))
    )


@router.get("/analytics", response_model=CommentAnalyticsResponse)
async def comment_analytics(
    analytics_use_case: FromDishka[CommentAnalyticsUseCase],
) -> CommentAnalyticsResponse:
    return await analytics_use_case.execute()


@router.post("/bulk", response_model=BulkCommentActionResponse)
async def bulk_action(
    request: BulkActionAPIRequest,
    user_id: AdminId,
    bulk_action_use_case: FromDishka[BulkCommentActionUseCase],
) -> BulkCommentActionResponse:
    """Approve, reject, mark as spam or delete several comments.

    Unknown IDs fail the whole request with 404 before anything changes.
    """
    return await bulk_action_use_case.execute(
        BulkCommentActionRequest(
            comment_ids=request.comment_ids, action=request.action, user_id=user_id
        )
    )


@router.get("/{comment_id}", response_model=GetCommentResponse)
async def get_comment(
    comment_id: UUID, get_comment_use_case: FromDishka[GetCommentUseCase]
) -> GetCommentResponse:
    """A comment with its direct replies and nesting depth."""
    return await get_comment_use_case.execute(GetCommentRequest(comment_id=comment_id))


@router.delete("/{comment_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_comment(
    comment_id: UUID, comment_service: FromDishka[CommentService]
) -> Response:
    """Delete a comment and its replies."""
    await comment_service.delete(CommentId(comment_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post("/{comment_id}/approve", response_model=MessageResponse)
async def approve_comment(
    comment_id: UUID, user_id: AdminId, comment_service: FromDishka[CommentService]
) -> MessageResponse:
    await comment_service.approve(CommentId(comment_id), UserId(UUID(user_id)))
    return MessageResponse(message="Comment approved successfully.")


@router.post("/{comment_id}/reject", response_model=MessageResponse)
async def reject_comment(
    comment_id: UUID, comment_service: FromDishka[CommentService]
) -> MessageResponse:
    await comment_service.reject(CommentId(comment_id))
    return MessageResponse(message="Comment rejected successfully.")


@router.post("/{comment_id}/spam", response_model=MessageResponse)
async def mark_comment_as_spam(
    comment_id: UUID, comment_service: FromDishka[CommentService]
) -> MessageResponse:
    await comment_service.mark_as_spam(CommentId(comment_id))
    return MessageResponse(message="Comment marked as spam successfully.")


@router.post("/{comment_id}/toggle-featured", response_model=MessageResponse)
async def toggle_comment_featured(
    comment_id: UUID, comment_service: FromDishka[CommentService]
) -> MessageResponse:
    comment = await comment_service.toggle_featured(CommentId(comment_id))
    state = "featured" if comment.is_featured else "unfeatured"
    return MessageResponse(message=f"Comment {state} successfully.")


@router.post("/{comment_id}/like", response_model=MessageResponse)
async def like_comment(
    comment_id: UUID, comment_service: FromDishka[CommentService]
) -> MessageResponse:
    comment = await comment_service.like(CommentId(comment_id))
    return MessageResponse(message=f"Comment has {comment.likes_count} likes.")


@router.post("/{comment_id}/unlike", response_model=MessageResponse)
async def unlike_comment(
    comment_id: UUID, comment_service: FromDishka[CommentService]
) -> MessageResponse:
    comment = await comment_service.unlike(CommentId(comment_id))
    return MessageResponse(message=f"Comment has {comment.likes_count} likes.")
