"""Comment list, moderation queue and analytics use cases."""

from pydantic import BaseModel, Field

from estate.domain.service import (
    CommentService,
    CommentStats,
    PostService,
    UserService,
)
from estate.domain.value import ListQuery, Page

from .get_comment import CommentView, comment_views


class ListCommentsResponse(BaseModel):
    """A page of comments plus counts by status."""

    comments: Page[CommentView]
    stats: CommentStats


class ListCommentsUseCase:
    """Use case for the comment list screen."""

    def __init__(
        self, comment_service: CommentService, user_service: UserService
    ) -> None:
        self.comment_service = comment_service
        self.user_service = user_service

    async def execute(self, request: ListQuery) -> ListCommentsResponse:
        page = await self.comment_service.list_page(request)
        views = await comment_views(self.user_service, page.items)
        return ListCommentsResponse(
            comments=Page[CommentView](
                items=views,
                total=page.total,
                current_page=page.current_page,
                per_page=page.per_page,
            ),
            stats=await self.comment_service.stats(),
        )


class ModerationQueueRequest(BaseModel):
    page: int = Field(default=1, ge=1)


class ModerationQueueResponse(BaseModel):
    pending: Page[CommentView]
    recently_moderated: list[CommentView]


class ModerationQueueUseCase:
    """Use case for the moderation screen: pending first, then recent decisions."""

    def __init__(
        self, comment_service: CommentService, user_service: UserService
    ) -> None:
        self.comment_service = comment_service
        self.user_service = user_service

    async def execute(self, request: ModerationQueueRequest) -> ModerationQueueResponse:
        pending, recent = await self.comment_service.moderation_queue(request.page)
        views = await comment_views(self.user_service, [*pending.items, *recent])
        return ModerationQueueResponse(
            pending=Page[CommentView](
                items=views[: len(pending.items)],
                total=pending.total,
                current_page=pending.current_page,
                per_page=pending.per_page,
            ),
            recently_moderated=views[len(pending.items) :],
        )


class RankedPost(BaseModel):
    post_id: str
    title: str | None
    comments: int


class RankedCommenter(BaseModel):
    user_id: str
    name: str | None
    comments: int


class CommentAnalyticsResponse(BaseModel):
    stats: CommentStats
    guests: int
    registered: int
    featured: int
    per_day: dict[str, int]
    top_posts: list[RankedPost]
    top_commenters: list[RankedCommenter]


class CommentAnalyticsUseCase:
    """Use case for the comment analytics screen."""

    def __init__(
        self,
        comment_service: CommentService,
        post_service: PostService,
        user_service: UserService,
    ) -> None:
        self.comment_service = comment_service
        self.post_service = post_service
        self.user_service = user_service

    async def execute(self) -> CommentAnalyticsResponse:
        analytics = await self.comment_service.analytics()

        posts = {
            p.id: p
            for p in await self.post_service.post_repository.find_by_ids(
                [post_id for post_id, _ in analytics.top_posts]
            )
        }
        users = await self.user_service.get_many(
            [user_id for user_id, _ in analytics.top_commenters]
        )

        return CommentAnalyticsResponse(
            stats=analytics.stats,
            guests=analytics.guests,
            registered=analytics.registered,
            featured=analytics.featured,
            per_day=analytics.per_day,
            top_posts=[
                RankedPost(
                    post_id=str(post_id),
                    title=posts[post_id].title if post_id in posts else None,
                    comments=count,
                )
                for post_id, count in analytics.top_posts
            ],
            top_commenters=[
                RankedCommenter(
                    user_id=str(user_id),
                    name=users[user_id].name if user_id in users else None,
                    comments=count,
                )
                for user_id, count in analytics.top_commenters
            ],
        )
