"""In-memory comment repository for testing."""

from collections import Counter
from datetime import date, datetime
from typing import Any

from estate.domain.model import Comment
from estate.domain.repository import CommentRepository
from estate.domain.value import (
    CommentAuthorType,
    CommentId,
    CommentStatus,
    PostId,
    UserId,
)
from estate.persistence.repository.inmemory.base import InMemoryCrudRepository
from estate.persistence.repository.listing import COMMENT_LIST


class InMemoryCommentRepository(
    InMemoryCrudRepository[Comment, CommentId], CommentRepository
):
    """In-memory implementation of CommentRepository for testing.

    Deletes cascade to replies the way the parent_id foreign key does.
    """

    list_spec = COMMENT_LIST

    def _custom_filter(self, entity: Comment, name: str, value: Any) -> bool:
        if name == "user_type":
            if value == CommentAuthorType.GUEST.value:
                return entity.user_id is None
            return entity.user_id is not None
        return True

    def _with_descendants(self, comment_ids: list[CommentId]) -> set[CommentId]:
        doomed: set[CommentId] = set()
        frontier = [i for i in comment_ids if i in self._items]
        while frontier:
            current = frontier.pop()
            if current in doomed:
                continue
            doomed.add(current)
            frontier.extend(c.id for c in self._items.values() if c.parent_id == current)
        return doomed

    async def delete(self, entity_id: CommentId) -> None:
        for comment_id in self._with_descendants([entity_id]):
            del self._items[comment_id]

    async def delete_many(self, comment_ids: list[CommentId]) -> int:
        existing = {i for i in comment_ids if i in self._items}
        for comment_id in self._with_descendants(list(existing)):
            del self._items[comment_id]
        return len(existing)

    async def find_many(self, comment_ids: list[CommentId]) -> list[Comment]:
        return [self._items[i] for i in comment_ids if i in self._items]

    async def find_replies(self, parent_id: CommentId) -> list[Comment]:
        replies = [c for c in self._items.values() if c.parent_id == parent_id]
        return sorted(replies, key=lambda c: (c.created_at, str(c.id)))

    def _adjust(self, comment_id: CommentId, field: str, delta: int) -> None:
        comment = self._items.get(comment_id)
        if comment is None:
            return
        value = max(getattr(comment, field) + delta, 0)
        self._items[comment_id] = comment.model_copy(update={field: value})

    async def adjust_replies_count(self, comment_id: CommentId, delta: int) -> None:
        self._adjust(comment_id, "replies_count", delta)

    async def adjust_likes_count(self, comment_id: CommentId, delta: int) -> None:
        self._adjust(comment_id, "likes_count", delta)

    async def count_by_status(self, status: CommentStatus) -> int:
        return sum(1 for c in self._items.values() if c.status == status)

    async def count_guests(self) -> int:
        return sum(1 for c in self._items.values() if c.user_id is None)

    async def count_featured(self) -> int:
        return sum(1 for c in self._items.values() if c.is_featured)

    async def find_recently_moderated(self, limit: int = 10) -> list[Comment]:
        moderated = [
            c for c in self._items.values() if c.status != CommentStatus.PENDING
        ]
        moderated.sort(key=lambda c: c.updated_at, reverse=True)
        return moderated[:limit]

    async def count_by_day(self, since: datetime) -> dict[date, int]:
        counts = Counter(
            c.created_at.date() for c in self._items.values() if c.created_at >= since
        )
        return dict(sorted(counts.items()))

    async def most_commented_posts(self, limit: int = 5) -> list[tuple[PostId, int]]:
        counts = Counter(c.post_id for c in self._items.values())
        ranked = sorted(counts.items(), key=lambda item: (-item[1], str(item[0])))
        return ranked[:limit]

    async def top_commenters(self, limit: int = 5) -> list[tuple[UserId, int]]:
        counts = Counter(
            c.user_id for c in self._items.values() if c.user_id is not None
        )
        ranked = sorted(counts.items(), key=lambda item: (-item[1], str(item[0])))
        return ranked[:limit]
