"""Post, tag and category repository interfaces."""

from abc import abstractmethod

from estate.domain.model import Category, Post, Tag
from estate.domain.repository.base import SluggedRepository
from estate.domain.value import CategoryId, PostId, PostStatus, TagId


class PostRepository(SluggedRepository[Post, PostId]):
    """Repository for Post entity."""

    @abstractmethod
    async def find_by_ids(self, post_ids: list[PostId]) -> list[Post]:
        """Find several posts, skipping unknown IDs."""
        pass

    @abstractmethod
    async def count_by_status(self, status: PostStatus) -> int:
        """Count posts in a status."""
        pass

    @abstractmethod
    async def count_featured(self) -> int:
        """Count featured posts."""
        pass

    @abstractmethod
    async def adjust_comments_count(self, post_id: PostId, delta: int) -> None:
        """Atomically add ``delta`` to the post's comments_count.

        The counter never goes below zero.

        Args:
            post_id: Post to update
            delta: Signed change, usually +1 or -1
        """
        pass


class TagRepository(SluggedRepository[Tag, TagId]):
    """Repository for Tag entity."""

    @abstractmethod
    async def find_by_ids(self, tag_ids: list[TagId]) -> list[Tag]:
        """Find several tags, skipping unknown IDs."""
        pass


class CategoryRepository(SluggedRepository[Category, CategoryId]):
    """Repository for Category entity."""
