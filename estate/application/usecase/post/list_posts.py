"""Post list use case."""

from pydantic import BaseModel

from estate.domain.model import Post
from estate.domain.service import PostService, PostStats
from estate.domain.value import ListQuery, Page


class ListPostsResponse(BaseModel):
    """A page of posts plus counts by status."""

    posts: Page[Post]
    stats: PostStats


class ListPostsUseCase:
    """Use case for the post list screen."""

    def __init__(self, post_service: PostService) -> None:
        self.post_service = post_service

    async def execute(self, request: ListQuery) -> ListPostsResponse:
        return ListPostsResponse(
            posts=await self.post_service.list_page(request),
            stats=await self.post_service.stats(),
        )
