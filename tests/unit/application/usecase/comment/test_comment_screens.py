"""Unit tests for the comment moderation use cases."""

from uuid import uuid4

import pytest

from estate.application.usecase.comment import (
    BulkCommentActionRequest,
    BulkCommentActionUseCase,
    CommentAnalyticsUseCase,
    GetCommentRequest,
    GetCommentUseCase,
    ListCommentsUseCase,
    ModerationQueueRequest,
    ModerationQueueUseCase,
)
from estate.domain.repository import (
    CommentRepository,
    PostRepository,
    UserRepository,
)
from estate.domain.value import BulkCommentAction, CommentStatus, ListQuery
from tests.conftest import make_comment, make_post, make_user
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestBulkCommentActionUseCase:
    """Tests for BulkCommentActionUseCase."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "action, wording",
        [
            (BulkCommentAction.APPROVE, "approved"),
            (BulkCommentAction.REJECT, "rejected"),
            (BulkCommentAction.SPAM, "marked as spam"),
            (BulkCommentAction.DELETE, "deleted"),
        ],
    )
    async def test_message_names_action(self, unit_env, action, wording):
        # Arrange
        use_case = await unit_env.get(BulkCommentActionUseCase)
        post = await (await unit_env.get(PostRepository)).save(make_post())
        comment_repo = await unit_env.get(CommentRepository)
        first = await comment_repo.save(make_comment(post.id))
        second = await comment_repo.save(make_comment(post.id))

        # Act
        response = await use_case.execute(
            BulkCommentActionRequest(
                comment_ids=[first.id, second.id],
                action=action,
                user_id=str(uuid4()),
            )
        )

        # Assert
        assert response.count == 2
        assert response.message == f"2 comments {wording} successfully."


class TestGetCommentUseCase:
    """Tests for GetCommentUseCase."""

    @pytest.mark.asyncio
    async def test_comment_with_replies_and_author_names(self, unit_env):
        """Registered authors show their user name, guests their own name."""
        # Arrange
        use_case = await unit_env.get(GetCommentUseCase)
        post = await (await unit_env.get(PostRepository)).save(make_post())
        user = await (await unit_env.get(UserRepository)).save(make_user("Nadia Rahman"))
        comment_repo = await unit_env.get(CommentRepository)
        parent = await comment_repo.save(
            make_comment(post.id, user_id=user.id, author_name=None)
        )
        await comment_repo.save(
            make_comment(post.id, parent_id=parent.id, author_name="Visitor")
        )
        await comment_repo.save(
            make_comment(post.id, parent_id=parent.id, author_name=None)
        )

        # Act
        response = await use_case.execute(GetCommentRequest(comment_id=parent.id))

        # Assert
        assert response.depth == 0
        assert response.comment.author_display_name == "Nadia Rahman"
        assert sorted(r.author_display_name for r in response.replies) == [
            "Anonymous",
            "Visitor",
        ]


class TestListCommentsUseCase:
    @pytest.mark.asyncio
    async def test_filters_and_stats(self, unit_env):
        # Arrange
        use_case = await unit_env.get(ListCommentsUseCase)
        post = await (await unit_env.get(PostRepository)).save(make_post())
        comment_repo = await unit_env.get(CommentRepository)
        await comment_repo.save(make_comment(post.id))
        await comment_repo.save(make_comment(post.id, status=CommentStatus.APPROVED))

        # Act
        response = await use_case.execute(ListQuery(filters={"status": "approved"}))

        # Assert
        assert response.comments.total == 1
        assert response.comments.items[0].comment.status == CommentStatus.APPROVED
        assert response.stats.total == 2
        assert response.stats.pending == 1

    @pytest.mark.asyncio
    async def test_guest_filter(self, unit_env):
        # Arrange
        use_case = await unit_env.get(ListCommentsUseCase)
        post = await (await unit_env.get(PostRepository)).save(make_post())
        user = await (await unit_env.get(UserRepository)).save(make_user())
        comment_repo = await unit_env.get(CommentRepository)
        await comment_repo.save(make_comment(post.id))
        await comment_repo.save(make_comment(post.id, user_id=user.id))

        # Act
        guests = await use_case.execute(ListQuery(filters={"user_type": "guest"}))
        registered = await use_case.execute(
            ListQuery(filters={"user_type": "registered"})
        )

        # Assert
        assert guests.comments.total == 1
        assert guests.comments.items[0].comment.user_id is None
        assert registered.comments.items[0].author_display_name == user.name

    @pytest.mark.asyncio
    async def test_pagination_past_the_end_is_empty(self, unit_env):
        # Arrange
        use_case = await unit_env.get(ListCommentsUseCase)
        post = await (await unit_env.get(PostRepository)).save(make_post())
        comment_repo = await unit_env.get(CommentRepository)
        for _ in range(3):
            await comment_repo.save(make_comment(post.id))

        # Act
        first = await use_case.execute(ListQuery(per_page=2))
        beyond = await use_case.execute(ListQuery(per_page=2, page=5))

        # Assert
        assert len(first.comments.items) == 2
        assert first.comments.last_page == 2
        assert beyond.comments.items == []
        assert beyond.comments.total == 3


class TestModerationQueueUseCase:
    @pytest.mark.asyncio
    async def test_pending_and_recent_are_separate(self, unit_env):
        # Arrange
        use_case = await unit_env.get(ModerationQueueUseCase)
        post = await (await unit_env.get(PostRepository)).save(make_post())
        comment_repo = await unit_env.get(CommentRepository)
        pending = await comment_repo.save(make_comment(post.id))
        spam = await comment_repo.save(make_comment(post.id, status=CommentStatus.SPAM))

        # Act
        response = await use_case.execute(ModerationQueueRequest())

        # Assert
        assert [v.comment.id for v in response.pending.items] == [pending.id]
        assert [v.comment.id for v in response.recently_moderated] == [spam.id]


class TestCommentAnalyticsUseCase:
    @pytest.mark.asyncio
    async def test_ranks_posts_and_commenters(self, unit_env):
        # Arrange
        use_case = await unit_env.get(CommentAnalyticsUseCase)
        post_repo = await unit_env.get(PostRepository)
        busy = await post_repo.save(make_post("Busy post"))
        quiet = await post_repo.save(make_post("Quiet post"))
        user = await (await unit_env.get(UserRepository)).save(make_user("Nadia"))
        comment_repo = await unit_env.get(CommentRepository)
        await comment_repo.save(make_comment(busy.id, user_id=user.id))
        await comment_repo.save(
            make_comment(busy.id, user_id=user.id, is_featured=True)
        )
        await comment_repo.save(make_comment(quiet.id))

        # Act
        response = await use_case.execute()

        # Assert
        assert response.stats.total == 3
        assert response.guests == 1
        assert response.registered == 2
        assert response.featured == 1
        assert sum(response.per_day.values()) == 3
        assert [(p.title, p.comments) for p in response.top_posts] == [
            ("Busy post", 2),
            ("Quiet post", 1),
        ]
        assert [(c.name, c.comments) for c in response.top_commenters] == [
            ("Nadia", 2)
        ]
