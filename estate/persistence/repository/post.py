"""PostgreSQL implementations of the post, tag and category repositories."""

from collections import defaultdict
from typing import Any
from uuid import UUID

import logfire
from sqlalchemy import delete, func, insert, select, update

from estate.domain.model import Category, Post, Tag
from estate.domain.repository import (
    CategoryRepository,
    PostRepository,
    TagRepository,
)
from estate.domain.value import CategoryId, PostId, PostStatus, TagId
from estate.persistence.mappers import (
    category_to_dict,
    post_to_dict,
    row_to_category,
    row_to_post,
    row_to_tag,
    tag_to_dict,
)
from estate.persistence.repository.base import PostgresSluggedRepository
from estate.persistence.repository.listing import CATEGORY_LIST, POST_LIST, TAG_LIST
from estate.persistence.tables import (
    categories_table,
    post_tags_table,
    posts_table,
    tags_table,
)


class PostgresPostRepository(PostgresSluggedRepository[Post, PostId], PostRepository):
    """PostgreSQL implementation of PostRepository."""

    table = posts_table
    resource = "post"
    list_spec = POST_LIST

    def _to_dict(self, entity: Post) -> dict[str, Any]:
        return post_to_dict(entity)

    async def _fetch_tags_for_posts(
        self, post_ids: list[UUID]
    ) -> dict[UUID, list[UUID]]:
        """Fetch tag IDs for multiple posts in a single query.

        Args:
            post_ids: List of post IDs

        Returns:
            Dict mapping post_id -> list of tag IDs
        """
        if not post_ids:
            return {}

        stmt = select(post_tags_table.c.post_id, post_tags_table.c.tag_id).where(
            post_tags_table.c.post_id.in_(post_ids)
        )
        result = await self.session.execute(stmt)

        post_tag_map: dict[UUID, list[UUID]] = defaultdict(list)
        for row in result.fetchall():
            post_tag_map[row.post_id].append(row.tag_id)
        return post_tag_map

    def _to_model(self, row: dict[str, Any]) -> Post:
        return row_to_post(row, row.get("tag_ids"))

    async def _load(self, rows: list[dict[str, Any]]) -> list[Post]:
        post_tag_map = await self._fetch_tags_for_posts([row["id"] for row in rows])
        return [
            self._to_model({**row, "tag_ids": post_tag_map.get(row["id"], [])})
            for row in rows
        ]

    async def _after_save(self, entity: Post) -> None:
        # Sync tags: delete existing post_tags, then insert the current set
        await self.session.execute(
            delete(post_tags_table).where(post_tags_table.c.post_id == entity.id)
        )
        for tag_id in dict.fromkeys(entity.tag_ids):
            await self.session.execute(
                insert(post_tags_table).values(post_id=entity.id, tag_id=tag_id)
            )

    async def find_by_ids(self, post_ids: list[PostId]) -> list[Post]:
        """Find several posts, skipping unknown IDs."""
        if not post_ids:
            return []
        return await self._fetch(posts_table.c.id.in_(post_ids))

    async def count_by_status(self, status: PostStatus) -> int:
        """Count posts in a status."""
        return await self._count_where(posts_table.c.status == status.value)

    async def count_featured(self) -> int:
        """Count featured posts."""
        return await self._count_where(posts_table.c.is_featured.is_(True))

    async def adjust_comments_count(self, post_id: PostId, delta: int) -> None:
        """Atomically add delta to comments_count (never below zero)."""
        with logfire.span(
            "post_repository.adjust_comments_count", post_id=str(post_id), delta=delta
        ):
            stmt = (
                update(posts_table)
                .where(posts_table.c.id == post_id)
                .values(
                    comments_count=func.greatest(
                        posts_table.c.comments_count + delta, 0
                    )
                )
            )
            await self.session.execute(stmt)
            await self.session.flush()


class PostgresTagRepository(PostgresSluggedRepository[Tag, TagId], TagRepository):
    """PostgreSQL implementation of TagRepository."""

    table = tags_table
    resource = "tag"
    list_spec = TAG_LIST

    def _to_model(self, row: dict[str, Any]) -> Tag:
        return row_to_tag(row)

    def _to_dict(self, entity: Tag) -> dict[str, Any]:
        return tag_to_dict(entity)

    async def find_by_ids(self, tag_ids: list[TagId]) -> list[Tag]:
        """Find several tags, skipping unknown IDs."""
        if not tag_ids:
            return []
        return await self._fetch(tags_table.c.id.in_(tag_ids))


class PostgresCategoryRepository(
    PostgresSluggedRepository[Category, CategoryId], CategoryRepository
):
    """PostgreSQL implementation of CategoryRepository."""

    table = categories_table
    resource = "category"
    list_spec = CATEGORY_LIST

    def _to_model(self, row: dict[str, Any]) -> Category:
        return row_to_category(row)

    def _to_dict(self, entity: Category) -> dict[str, Any]:
        return category_to_dict(entity)
