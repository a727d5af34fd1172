"""Show comment use case."""

from uuid import UUID

from pydantic import BaseModel

from estate.domain.model import Comment
from estate.domain.service import CommentService, UserService
from estate.domain.value import CommentId


class CommentView(BaseModel):
    """A comment with its resolved author name."""

    comment: Comment
    author_display_name: str


class GetCommentRequest(BaseModel):
    comment_id: UUID


class GetCommentResponse(BaseModel):
    """A comment, its nesting depth and its direct replies."""

    comment: CommentView
    depth: int
    replies: list[CommentView]


class GetCommentUseCase:
    """Use case for the comment detail screen."""

    def __init__(
        self, comment_service: CommentService, user_service: UserService
    ) -> None:
        self.comment_service = comment_service
        self.user_service = user_service

    async def execute(self, request: GetCommentRequest) -> GetCommentResponse:
        comment = await self.comment_service.get(CommentId(request.comment_id))
        replies = await self.comment_service.get_replies(comment.id)
        views = await comment_views(self.user_service, [comment, *replies])
        return GetCommentResponse(
            comment=views[0],
            depth=await self.comment_service.depth(comment),
            replies=views[1:],
        )


async def comment_views(
    user_service: UserService, comments: list[Comment]
) -> list[CommentView]:
    """Attach author display names, loading all users in one lookup."""
    user_ids = list({c.user_id for c in comments if c.user_id is not None})
    users = await user_service.get_many(user_ids)
    return [
        CommentView(
            comment=c,
            author_display_name=c.display_name(
                users[c.user_id].name if c.user_id in users else None
            ),
        )
        for c in comments
    ]
