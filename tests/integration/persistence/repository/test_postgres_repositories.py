"""Integration tests for the PostgreSQL repositories.

Run against a migrated database:

    ESTATE_INTEGRATION=1 DATABASE__URL=postgresql+asyncpg://... pytest -m integration
"""

import os
from uuid import uuid4

import pytest

from estate.domain.repository import CommentRepository, PostRepository, UserRepository
from estate.domain.service import CommentService, PostService
from estate.domain.value import CommentStatus, ListQuery, UserId
from tests.conftest import make_comment, make_post, make_user
from tests.harness import create_env_fixture

pytestmark = [
    pytest.mark.integration,
    pytest.mark.skipif(
        os.environ.get("ESTATE_INTEGRATION") != "1",
        reason="needs PostgreSQL (set ESTATE_INTEGRATION=1)",
    ),
]

# Integration test fixture - real PostgreSQL
integration_env = create_env_fixture(unmock={"persistence"})


class TestPostgresRepositories:
    """Round trips through the SQL repositories."""

    @pytest.mark.asyncio
    async def test_post_slug_lookup(self, integration_env):
        # Arrange
        user_repo = await integration_env.get(UserRepository)
        post_repo = await integration_env.get(PostRepository)
        author = await user_repo.save(make_user(email=f"{uuid4().hex}@example.com"))
        slug = f"post-{uuid4().hex[:12]}"
        post = await post_repo.save(make_post(slug=slug, author_id=author.id))

        # Act
        found = await post_repo.find_by_slug(slug)

        # Assert
        assert found is not None
        assert found.id == post.id
        assert await post_repo.slug_exists(slug)
        assert not await post_repo.slug_exists(slug, exclude_id=post.id)

    @pytest.mark.asyncio
    async def test_search_escapes_wildcards(self, integration_env):
        """A literal '%' in the search term matches only itself."""
        # Arrange
        user_repo = await integration_env.get(UserRepository)
        post_service = await integration_env.get(PostService)
        author = await user_repo.save(make_user(email=f"{uuid4().hex}@example.com"))
        marker = uuid4().hex[:8]
        await post_service.create(
            {"title": f"100% financing {marker}", "author_id": author.id}
        )
        await post_service.create(
            {"title": f"100 financing {marker}", "author_id": author.id}
        )

        # Act
        page = await post_service.list_page(ListQuery(search=f"100% financing {marker}"))

        # Assert
        assert page.total == 1

    @pytest.mark.asyncio
    async def test_approve_updates_counter_in_same_session(self, integration_env):
        # Arrange
        user_repo = await integration_env.get(UserRepository)
        post_repo = await integration_env.get(PostRepository)
        comment_repo = await integration_env.get(CommentRepository)
        service = await integration_env.get(CommentService)
        author = await user_repo.save(make_user(email=f"{uuid4().hex}@example.com"))
        post = await post_repo.save(
            make_post(slug=f"post-{uuid4().hex[:12]}", author_id=author.id)
        )
        comment = await comment_repo.save(make_comment(post.id))

        # Act
        approved = await service.approve(comment.id, UserId(author.id))

        # Assert
        assert approved.status == CommentStatus.APPROVED
        refreshed = await post_repo.find_by_id(post.id)
        assert refreshed.comments_count == 1
