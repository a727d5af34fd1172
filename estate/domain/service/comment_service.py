"""Comment moderation domain service."""

from datetime import datetime, timedelta
from uuid import uuid4

import logfire
from pydantic import BaseModel

from estate.domain.error import NotFoundError, ValidationError
from estate.domain.model import Comment
from estate.domain.repository import CommentRepository, PostRepository
from estate.domain.value import (
    BulkCommentAction,
    CommentId,
    CommentStatus,
    ListQuery,
    Page,
    PostId,
    PostStatus,
    UserId,
)

from .base import Service, revise
from .moderation import removal_delta, transition_delta

MODERATION_PAGE_SIZE = 10
RECENTLY_MODERATED_LIMIT = 10
ANALYTICS_DAYS = 30
ANALYTICS_TOP = 5


class CommentStats(BaseModel):
    """Comment counts by status."""

    total: int
    pending: int
    approved: int
    rejected: int
    spam: int


class CommentAnalytics(BaseModel):
    """Aggregates for the comment analytics screen."""

    stats: CommentStats
    guests: int
    registered: int
    featured: int
    per_day: dict[str, int]
    top_posts: list[tuple[PostId, int]]
    top_commenters: list[tuple[UserId, int]]


class CommentService(Service):
    """Domain service for comment moderation.

    Status changes go through ``transition_delta`` so the post and parent
    counters always move together with the status write. The caller's
    request-scoped session commits them as one transaction.
    """

    def __init__(
        self,
        comment_repository: CommentRepository,
        post_repository: PostRepository,
    ) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
            post_repository: Post repository (owns comments_count)
        """
        self.comment_repository = comment_repository
        self.post_repository = post_repository

    async def get(self, comment_id: CommentId) -> Comment:
        """Fetch a comment or raise NotFoundError."""
        comment = await self.comment_repository.find_by_id(comment_id)
        if comment is None:
            logfire.warn("Comment not found", comment_id=str(comment_id))
            raise NotFoundError("Comment", str(comment_id))
        return comment

    async def list_page(self, query: ListQuery) -> Page[Comment]:
        return await self.comment_repository.find_page(query)

    async def stats(self) -> CommentStats:
        """Comment counts by status."""
        counts = {
            status.value: await self.comment_repository.count_by_status(status)
            for status in CommentStatus
        }
        return CommentStats(total=await self.comment_repository.count(), **counts)

    async def get_replies(self, comment_id: CommentId) -> list[Comment]:
        return await self.comment_repository.find_replies(comment_id)

    async def depth(self, comment: Comment) -> int:
        """Nesting level, 0 for top-level comments.

        Computed by walking the parent chain; a cycle stops the walk.
        """
        depth = 0
        seen = {comment.id}
        parent_id = comment.parent_id
        while parent_id is not None and parent_id not in seen:
            parent = await self.comment_repository.find_by_id(parent_id)
            if parent is None:
                break
            depth += 1
            seen.add(parent.id)
            parent_id = parent.parent_id
        return depth

    async def create(
        self,
        post_id: PostId,
        content: str,
        user_id: UserId | None = None,
        author_name: str | None = None,
        author_email: str | None = None,
        author_website: str | None = None,
        parent_id: CommentId | None = None,
        ip_address: str | None = None,
        user_agent: str | None = None,
    ) -> Comment:
        """Submit a comment on a published post, pending moderation.

        Registered users are identified by ``user_id`` and their guest fields
        are dropped. Guests must give a name and an email.

        Raises:
            NotFoundError: If the post is not published, or the parent is
                missing or not approved
            ValidationError: If the parent belongs to another post, or guest
                details are missing
        """
        with logfire.span(
            "comment_service.create",
            post_id=str(post_id),
            parent_id=str(parent_id) if parent_id else None,
        ):
            post = await self.post_repository.find_by_id(post_id)
            if post is None or post.status != PostStatus.PUBLISHED:
                logfire.warn("Comment on unpublished post", post_id=str(post_id))
                raise NotFoundError("Post", str(post_id))

            if parent_id is not None:
                parent = await self.comment_repository.find_by_id(parent_id)
                if parent is None or parent.status != CommentStatus.APPROVED:
                    logfire.warn(
                        "Reply to unapproved comment", parent_id=str(parent_id)
                    )
                    raise NotFoundError("Comment", str(parent_id))
                if parent.post_id != post_id:
                    logfire.warn(
                        "Parent comment belongs to another post",
                        parent_id=str(parent_id),
                        parent_post_id=str(parent.post_id),
                    )
                    raise ValidationError("Invalid parent comment.")

            if user_id is not None:
                author_name = author_email = author_website = None
            elif not author_name or not author_email:
                raise ValidationError("Your name and email are required.")

            comment = Comment(
                id=CommentId(uuid4()),
                post_id=post_id,
                user_id=user_id,
                author_name=author_name,
                author_email=author_email,
                author_website=author_website,
                content=content,
                status=CommentStatus.PENDING,
                parent_id=parent_id,
                ip_address=ip_address,
                user_agent=user_agent,
            )
            saved = await self.comment_repository.save(comment)
            logfire.info(
                "Comment submitted",
                comment_id=str(saved.id),
                guest=saved.is_guest,
            )
            return saved

    async def _apply_counter_delta(self, comment: Comment, delta: int) -> None:
        if delta == 0:
            return
        await self.post_repository.adjust_comments_count(comment.post_id, delta)
        if comment.parent_id is not None:
            await self.comment_repository.adjust_replies_count(
                comment.parent_id, delta
            )

    async def _transition(
        self,
        comment: Comment,
        target: CommentStatus,
        approver_id: UserId | None = None,
    ) -> Comment:
        delta = transition_delta(comment.status, target)
        changes: dict = {"status": target}
        if target == CommentStatus.APPROVED:
            changes.update(approved_at=datetime.now(), approved_by=approver_id)
        else:
            changes.update(approved_at=None, approved_by=None)

        updated = await self.comment_repository.save(revise(comment, changes))
        await self._apply_counter_delta(comment, delta)
        logfire.info(
            "Comment status changed",
            comment_id=str(comment.id),
            previous=comment.status.value,
            status=target.value,
            delta=delta,
        )
        return updated

    async def approve(self, comment_id: CommentId, approver_id: UserId) -> Comment:
        """Approve a comment and stamp the approver."""
        with logfire.span("comment_service.approve", comment_id=str(comment_id)):
            comment = await self.get(comment_id)
            return await self._transition(comment, CommentStatus.APPROVED, approver_id)

    async def reject(self, comment_id: CommentId) -> Comment:
        """Reject a comment, uncounting it if it was approved."""
        with logfire.span("comment_service.reject", comment_id=str(comment_id)):
            comment = await self.get(comment_id)
            return await self._transition(comment, CommentStatus.REJECTED)

    async def mark_as_spam(self, comment_id: CommentId) -> Comment:
        """Mark a comment as spam, uncounting it if it was approved."""
        with logfire.span("comment_service.mark_as_spam", comment_id=str(comment_id)):
            comment = await self.get(comment_id)
            return await self._transition(comment, CommentStatus.SPAM)

    async def toggle_featured(self, comment_id: CommentId) -> Comment:
        with logfire.span(
            "comment_service.toggle_featured", comment_id=str(comment_id)
        ):
            comment = await self.get(comment_id)
            updated = revise(comment, {"is_featured": not comment.is_featured})
            return await self.comment_repository.save(updated)

    async def _get_approved(self, comment_id: CommentId) -> Comment:
        comment = await self.get(comment_id)
        if comment.status != CommentStatus.APPROVED:
            logfire.warn("Comment not approved", comment_id=str(comment_id))
            raise NotFoundError("Comment", str(comment_id))
        return comment

    async def like(self, comment_id: CommentId) -> Comment:
        """Count a like. Only approved comments can be liked."""
        await self._get_approved(comment_id)
        await self.comment_repository.adjust_likes_count(comment_id, 1)
        return await self.get(comment_id)

    async def unlike(self, comment_id: CommentId) -> Comment:
        await self._get_approved(comment_id)
        await self.comment_repository.adjust_likes_count(comment_id, -1)
        return await self.get(comment_id)

    async def delete(self, comment_id: CommentId) -> None:
        """Delete a comment and all of its replies.

        Only the deleted comment's own approved state is uncounted; removed
        replies leave no counter trace.
        """
        with logfire.span("comment_service.delete", comment_id=str(comment_id)):
            comment = await self.get(comment_id)
            delta = removal_delta(comment.status)
            await self._apply_counter_delta(comment, delta)
            await self.comment_repository.delete(comment_id)
            logfire.info("Comment deleted", comment_id=str(comment_id), delta=delta)

    async def bulk_action(
        self,
        comment_ids: list[CommentId],
        action: BulkCommentAction,
        actor_id: UserId,
    ) -> int:
        """Apply one moderation action to many comments.

        Every ID must exist before anything changes. Approve, reject and spam
        run the single-comment transition per ID. Delete is a raw multi-row
        delete that leaves all counters untouched.

        Returns:
            Number of comments processed

        Raises:
            NotFoundError: If any ID is unknown
        """
        with logfire.span(
            "comment_service.bulk_action", action=action.value, count=len(comment_ids)
        ):
            unique_ids = list(dict.fromkeys(comment_ids))
            found = {c.id for c in await self.comment_repository.find_many(unique_ids)}
            missing = [str(i) for i in unique_ids if i not in found]
            if missing:
                logfire.warn("Bulk action on unknown comments", missing=missing)
                raise NotFoundError("Comment", ", ".join(missing))

            if action == BulkCommentAction.DELETE:
                count = await self.comment_repository.delete_many(unique_ids)
            else:
                target = {
                    BulkCommentAction.APPROVE: CommentStatus.APPROVED,
                    BulkCommentAction.REJECT: CommentStatus.REJECTED,
                    BulkCommentAction.SPAM: CommentStatus.SPAM,
                }[action]
                for comment_id in unique_ids:
                    # Re-read: earlier items may have moved this row's counters
                    comment = await self.get(comment_id)
                    await self._transition(comment, target, actor_id)
                count = len(unique_ids)

            logfire.info("Bulk comment action", action=action.value, count=count)
            return count

    async def moderation_queue(
        self, page: int = 1
    ) -> tuple[Page[Comment], list[Comment]]:
        """Pending comments (newest first) and the recently moderated ones."""
        pending = await self.comment_repository.find_page(
            ListQuery(
                filters={"status": CommentStatus.PENDING.value},
                page=page,
                per_page=MODERATION_PAGE_SIZE,
            )
        )
        recent = await self.comment_repository.find_recently_moderated(
            RECENTLY_MODERATED_LIMIT
        )
        return pending, recent

    async def analytics(self, now: datetime | None = None) -> CommentAnalytics:
        """Totals, daily counts for the last 30 days and top posts/commenters."""
        with logfire.span("comment_service.analytics"):
            now = now or datetime.now()
            stats = await self.stats()
            guests = await self.comment_repository.count_guests()
            per_day = await self.comment_repository.count_by_day(
                now - timedelta(days=ANALYTICS_DAYS)
            )
            return CommentAnalytics(
                stats=stats,
                guests=guests,
                registered=stats.total - guests,
                featured=await self.comment_repository.count_featured(),
                per_day={day.isoformat(): count for day, count in per_day.items()},
                top_posts=await self.comment_repository.most_commented_posts(
                    ANALYTICS_TOP
                ),
                top_commenters=await self.comment_repository.top_commenters(
                    ANALYTICS_TOP
                ),
            )
