"""Post, tag and category domain services."""

from datetime import datetime
from typing import Any
from uuid import uuid4

import logfire
from pydantic import BaseModel

from estate.domain.error import ValidationError
from estate.domain.model import Category, Post, Tag
from estate.domain.model.post import make_excerpt
from estate.domain.repository import CategoryRepository, PostRepository, TagRepository
from estate.domain.value import (
    CategoryId,
    MediaId,
    PostId,
    PostStatus,
    TagId,
    UserId,
)

from .base import revise
from .slug_service import SlugService, SluggedCrudService

COPY_SUFFIX = " (Copy)"


class PostStats(BaseModel):
    """Post counts shown above the post list."""

    total: int
    published: int
    draft: int
    featured: int


class PostService(SluggedCrudService[Post, PostId]):
    """Domain service for posts.

    The excerpt is generated from the content when left empty, and
    ``published_at`` is stamped the first time a post is published.
    """

    model = Post
    resource = "post"
    slug_source = "title"
    slug_fallback = "post"

    def __init__(
        self,
        post_repository: PostRepository,
        tag_repository: TagRepository,
        slug_service: SlugService,
    ) -> None:
        super().__init__(post_repository, slug_service)
        self.post_repository = post_repository
        self.tag_repository = tag_repository

    async def _prepare(
        self, fields: dict[str, Any], current: Post | None
    ) -> dict[str, Any]:
        fields = await super()._prepare(fields, current)

        content = fields.get("content", current.content if current else None)
        excerpt = fields.get("excerpt", current.excerpt if current else None)
        if not excerpt:
            fields["excerpt"] = make_excerpt(content)

        status = fields.get("status", current.status if current else PostStatus.DRAFT)
        published_at = fields.get(
            "published_at", current.published_at if current else None
        )
        if status == PostStatus.PUBLISHED and published_at is None:
            fields["published_at"] = datetime.now()

        if "tag_ids" in fields:
            fields["tag_ids"] = await self._existing_tags(fields["tag_ids"] or [])
        return fields

    async def _existing_tags(self, tag_ids: list[TagId]) -> list[TagId]:
        unique = list(dict.fromkeys(tag_ids))
        found = {t.id for t in await self.tag_repository.find_by_ids(unique)}
        unknown = [str(t) for t in unique if t not in found]
        if unknown:
            raise ValidationError(f"Unknown tags: {', '.join(unknown)}")
        return unique

    async def create_for_author(self, fields: dict[str, Any], author_id: UserId) -> Post:
        """Create a post written by the current admin."""
        return await self.create({**fields, "author_id": author_id})

    async def stats(self) -> PostStats:
        return PostStats(
            total=await self.post_repository.count(),
            published=await self.post_repository.count_by_status(PostStatus.PUBLISHED),
            draft=await self.post_repository.count_by_status(PostStatus.DRAFT),
            featured=await self.post_repository.count_featured(),
        )

    async def publish(self, post_id: PostId) -> Post:
        """Publish a post, keeping an earlier publish date."""
        with logfire.span("post_service.publish", post_id=str(post_id)):
            post = await self.get(post_id)
            published = revise(
                post,
                {
                    "status": PostStatus.PUBLISHED,
                    "published_at": post.published_at or datetime.now(),
                },
            )
            saved = await self.post_repository.save(published)
            logfire.info("Post published", post_id=str(post_id))
            return saved

    async def unpublish(self, post_id: PostId) -> Post:
        """Send a post back to draft."""
        with logfire.span("post_service.unpublish", post_id=str(post_id)):
            post = await self.get(post_id)
            saved = await self.post_repository.save(
                revise(post, {"status": PostStatus.DRAFT})
            )
            logfire.info("Post unpublished", post_id=str(post_id))
            return saved

    async def toggle_featured(self, post_id: PostId) -> Post:
        post = await self.get(post_id)
        return await self.post_repository.save(
            revise(post, {"is_featured": not post.is_featured})
        )

    async def duplicate(self, post_id: PostId) -> Post:
        """Copy a post as a new draft with its tags and fresh counters."""
        with logfire.span("post_service.duplicate", post_id=str(post_id)):
            original = await self.get(post_id)
            title = (original.title + COPY_SUFFIX)[:255]
            now = datetime.now()
            copy = original.model_copy(
                update={
                    "id": PostId(uuid4()),
                    "title": title,
                    "slug": await self.slug_service.unique_slug(
                        self.post_repository, title, self.slug_fallback
                    ),
                    "status": PostStatus.DRAFT,
                    "published_at": None,
                    "is_featured": False,
                    "views_count": 0,
                    "comments_count": 0,
                    "tag_ids": list(original.tag_ids),
                    "created_at": now,
                    "updated_at": now,
                }
            )
            saved = await self.post_repository.save(copy)
            logfire.info(
                "Post duplicated", post_id=str(post_id), copy_id=str(saved.id)
            )
            return saved

    async def set_featured_image(self, post_id: PostId, media_id: MediaId) -> Post:
        post = await self.get(post_id)
        return await self.post_repository.save(
            revise(post, {"featured_image_id": media_id})
        )


class TagService(SluggedCrudService[Tag, TagId]):
    """Domain service for tags."""

    model = Tag
    resource = "tag"
    slug_fallback = "tag"


class CategoryService(SluggedCrudService[Category, CategoryId]):
    """Domain service for categories."""

    model = Category
    resource = "category"
    slug_fallback = "category"

    def __init__(
        self, category_repository: CategoryRepository, slug_service: SlugService
    ) -> None:
        super().__init__(category_repository, slug_service)
