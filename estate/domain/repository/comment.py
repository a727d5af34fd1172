"""Comment repository interface."""

from abc import abstractmethod
from datetime import date, datetime

from estate.domain.model import Comment
from estate.domain.repository.base import CrudRepository
from estate.domain.value import CommentId, CommentStatus, PostId, UserId


class CommentRepository(CrudRepository[Comment, CommentId]):
    """Repository for Comment entity.

    ``delete`` and ``delete_many`` remove the given comments together with
    every descendant reply, like the ``ON DELETE CASCADE`` foreign key on
    ``parent_id``. Neither touches any counter.
    """

    @abstractmethod
    async def find_many(self, comment_ids: list[CommentId]) -> list[Comment]:
        """Find several comments, skipping unknown IDs."""
        pass

    @abstractmethod
    async def find_replies(self, parent_id: CommentId) -> list[Comment]:
        """Direct replies of a comment, oldest first."""
        pass

    @abstractmethod
    async def delete_many(self, comment_ids: list[CommentId]) -> int:
        """Raw multi-row delete.

        Args:
            comment_ids: Comments to delete

        Returns:
            Number of listed comments that existed
        """
        pass

    @abstractmethod
    async def adjust_replies_count(self, comment_id: CommentId, delta: int) -> None:
        """Atomically add ``delta`` to replies_count (never below zero)."""
        pass

    @abstractmethod
    async def adjust_likes_count(self, comment_id: CommentId, delta: int) -> None:
        """Atomically add ``delta`` to likes_count (never below zero)."""
        pass

    @abstractmethod
    async def count_by_status(self, status: CommentStatus) -> int:
        """Count comments in a status."""
        pass

    @abstractmethod
    async def count_guests(self) -> int:
        """Count comments without a registered author."""
        pass

    @abstractmethod
    async def count_featured(self) -> int:
        """Count featured comments."""
        pass

    @abstractmethod
    async def find_recently_moderated(self, limit: int = 10) -> list[Comment]:
        """Most recently updated comments that left the pending status."""
        pass

    @abstractmethod
    async def count_by_day(self, since: datetime) -> dict[date, int]:
        """Number of comments created per day since a moment."""
        pass

    @abstractmethod
    async def most_commented_posts(self, limit: int = 5) -> list[tuple[PostId, int]]:
        """Posts with the most comments, most first."""
        pass

    @abstractmethod
    async def top_commenters(self, limit: int = 5) -> list[tuple[UserId, int]]:
        """Registered users with the most comments, most first."""
        pass
