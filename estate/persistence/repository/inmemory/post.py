"""In-memory post, tag and category repositories for testing."""

from estate.domain.model import Category, Post, Tag
from estate.domain.repository import (
    CategoryRepository,
    PostRepository,
    TagRepository,
)
from estate.domain.value import CategoryId, PostId, PostStatus, TagId
from estate.persistence.repository.inmemory.base import InMemorySluggedRepository
from estate.persistence.repository.listing import CATEGORY_LIST, POST_LIST, TAG_LIST


class InMemoryPostRepository(InMemorySluggedRepository[Post, PostId], PostRepository):
    """In-memory implementation of PostRepository for testing."""

    list_spec = POST_LIST

    async def find_by_ids(self, post_ids: list[PostId]) -> list[Post]:
        return [self._items[i] for i in post_ids if i in self._items]

    async def count_by_status(self, status: PostStatus) -> int:
        return sum(1 for p in self._items.values() if p.status == status)

    async def count_featured(self) -> int:
        return sum(1 for p in self._items.values() if p.is_featured)

    async def adjust_comments_count(self, post_id: PostId, delta: int) -> None:
        post = self._items.get(post_id)
        if post is None:
            return
        self._items[post_id] = post.model_copy(
            update={"comments_count": max(post.comments_count + delta, 0)}
        )


class InMemoryTagRepository(InMemorySluggedRepository[Tag, TagId], TagRepository):
    list_spec = TAG_LIST

    async def find_by_ids(self, tag_ids: list[TagId]) -> list[Tag]:
        return [self._items[i] for i in tag_ids if i in self._items]


class InMemoryCategoryRepository(
    InMemorySluggedRepository[Category, CategoryId], CategoryRepository
):
    list_spec = CATEGORY_LIST
