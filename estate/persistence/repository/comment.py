"""PostgreSQL implementation of Comment repository."""

from datetime import date, datetime
from typing import Any, Optional

import logfire
from sqlalchemy import desc, func, select, update
from sqlalchemy.sql import ColumnElement

from estate.domain.model import Comment
from estate.domain.repository import CommentRepository
from estate.domain.value import (
    CommentAuthorType,
    CommentId,
    CommentStatus,
    PostId,
    UserId,
)
from estate.persistence.mappers import comment_to_dict, row_to_comment
from estate.persistence.repository.base import PostgresCrudRepository
from estate.persistence.repository.listing import COMMENT_LIST
from estate.persistence.tables import comments_table

MODERATED_STATUSES = (
    CommentStatus.APPROVED.value,
    CommentStatus.REJECTED.value,
    CommentStatus.SPAM.value,
)


class PostgresCommentRepository(
    PostgresCrudRepository[Comment, CommentId], CommentRepository
):
    """PostgreSQL implementation of CommentRepository.

    Reply removal relies on the ``ON DELETE CASCADE`` foreign key on
    ``parent_id``.
    """

    table = comments_table
    resource = "comment"
    list_spec = COMMENT_LIST

    def _to_model(self, row: dict[str, Any]) -> Comment:
        return row_to_comment(row)

    def _to_dict(self, entity: Comment) -> dict[str, Any]:
        return comment_to_dict(entity)

    def _custom_filter(self, name: str, value: Any) -> Optional[ColumnElement[bool]]:
        if name == "user_type":
            if value == CommentAuthorType.GUEST.value:
                return comments_table.c.user_id.is_(None)
            return comments_table.c.user_id.is_not(None)
        return None

    async def find_many(self, comment_ids: list[CommentId]) -> list[Comment]:
        """Find several comments, skipping unknown IDs."""
        if not comment_ids:
            return []
        return await self._fetch(comments_table.c.id.in_(comment_ids))

    async def find_replies(self, parent_id: CommentId) -> list[Comment]:
        """Direct replies of a comment, oldest first."""
        stmt = (
            select(comments_table)
            .where(comments_table.c.parent_id == parent_id)
            .order_by(comments_table.c.created_at, comments_table.c.id)
        )
        result = await self.session.execute(stmt)
        return [row_to_comment(row._asdict()) for row in result.fetchall()]

    async def delete_many(self, comment_ids: list[CommentId]) -> int:
        """Raw multi-row delete; replies go with their parents."""
        with logfire.span("comment_repository.delete_many", count=len(comment_ids)):
            if not comment_ids:
                return 0
            stmt = comments_table.delete().where(comments_table.c.id.in_(comment_ids))
            result = await self.session.execute(stmt)
            await self.session.flush()
            logfire.info("Comments deleted", count=result.rowcount)
            return result.rowcount

    async def _adjust(self, comment_id: CommentId, column: str, delta: int) -> None:
        stmt = (
            update(comments_table)
            .where(comments_table.c.id == comment_id)
            .values({column: func.greatest(comments_table.c[column] + delta, 0)})
        )
        await self.session.execute(stmt)
        await self.session.flush()

    async def adjust_replies_count(self, comment_id: CommentId, delta: int) -> None:
        """Atomically add delta to replies_count (never below zero)."""
        with logfire.span(
            "comment_repository.adjust_replies_count",
            comment_id=str(comment_id),
            delta=delta,
        ):
            await self._adjust(comment_id, "replies_count", delta)

    async def adjust_likes_count(self, comment_id: CommentId, delta: int) -> None:
        """Atomically add delta to likes_count (never below zero)."""
        await self._adjust(comment_id, "likes_count", delta)

    async def count_by_status(self, status: CommentStatus) -> int:
        """Count comments in a status."""
        return await self._count_where(comments_table.c.status == status.value)

    async def count_guests(self) -> int:
        """Count comments without a registered author."""
        return await self._count_where(comments_table.c.user_id.is_(None))

    async def count_featured(self) -> int:
        """Count featured comments."""
        return await self._count_where(comments_table.c.is_featured.is_(True))

    async def find_recently_moderated(self, limit: int = 10) -> list[Comment]:
        """Most recently updated comments that left the pending status."""
        stmt = (
            select(comments_table)
            .where(comments_table.c.status.in_(MODERATED_STATUSES))
            .order_by(desc(comments_table.c.updated_at))
            .limit(limit)
        )
        result = await self.session.execute(stmt)
        return [row_to_comment(row._asdict()) for row in result.fetchall()]

    async def count_by_day(self, since: datetime) -> dict[date, int]:
        """Number of comments created per day since a moment."""
        day = func.date(comments_table.c.created_at)
        stmt = (
            select(day.label("day"), func.count().label("count"))
            .where(comments_table.c.created_at >= since)
            .group_by(day)
            .order_by(day)
        )
        result = await self.session.execute(stmt)
        return {row.day: row.count for row in result.fetchall()}

    async def most_commented_posts(self, limit: int = 5) -> list[tuple[PostId, int]]:
        """Posts with the most comments, most first."""
        total = func.count().label("total")
        stmt = (
            select(comments_table.c.post_id, total)
            .group_by(comments_table.c.post_id)
            .order_by(desc(total), comments_table.c.post_id)
            .limit(limit)
        )
        result = await self.session.execute(stmt)
        return [(PostId(row.post_id), row.total) for row in result.fetchall()]

    async def top_commenters(self, limit: int = 5) -> list[tuple[UserId, int]]:
        """Registered users with the most comments, most first."""
        total = func.count().label("total")
        stmt = (
            select(comments_table.c.user_id, total)
            .where(comments_table.c.user_id.is_not(None))
            .group_by(comments_table.c.user_id)
            .order_by(desc(total), comments_table.c.user_id)
            .limit(limit)
        )
        result = await self.session.execute(stmt)
        return [(UserId(row.user_id), row.total) for row in result.fetchall()]
