"""Unit tests for PostService and SlugService."""

from datetime import datetime
from uuid import uuid4

import pytest

from estate.domain.error import ConflictError, ValidationError
from estate.domain.repository import PostRepository, TagRepository
from estate.domain.service import PostService, SlugService, TagService
from estate.domain.service.slug_service import slugify
from estate.domain.value import PostStatus, TagId, UserId
from tests.conftest import make_post
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked, no docker needed
unit_env = create_env_fixture()


class TestSlugify:
    def test_collapses_punctuation_and_spaces(self):
        assert slugify("  Sea View -- Apartment! ", "post") == "sea-view-apartment"

    def test_empty_title_uses_fallback(self):
        assert slugify("!!!", "post") == "post"


class TestSlugAssignment:
    """Tests for slug derivation on create and update."""

    @pytest.mark.asyncio
    async def test_same_title_gets_numbered_slug(self, unit_env):
        """A second post with the same title should get base-1."""
        # Arrange
        service = await unit_env.get(PostService)
        author_id = UserId(uuid4())

        # Act
        first = await service.create({"title": "Sea View", "author_id": author_id})
        second = await service.create({"title": "Sea View", "author_id": author_id})

        # Assert
        assert first.slug == "sea-view"
        assert second.slug == "sea-view-1"

    @pytest.mark.asyncio
    async def test_explicit_slug_taken_raises_conflict(self, unit_env):
        # Arrange
        service = await unit_env.get(PostService)
        author_id = UserId(uuid4())
        await service.create({"title": "Sea View", "author_id": author_id})

        # Act & Assert
        with pytest.raises(ConflictError) as exc_info:
            await service.create(
                {"title": "Another", "slug": "sea-view", "author_id": author_id}
            )

        assert exc_info.value.field == "slug"

    @pytest.mark.asyncio
    async def test_update_keeps_slug_when_title_unchanged(self, unit_env):
        # Arrange
        service = await unit_env.get(PostService)
        post = await service.create(
            {"title": "Sea View", "author_id": UserId(uuid4())}
        )

        # Act
        updated = await service.update(post.id, {"content": "<p>Now with a pool</p>"})

        # Assert
        assert updated.slug == "sea-view"

    @pytest.mark.asyncio
    async def test_update_renames_slug_with_title(self, unit_env):
        # Arrange
        service = await unit_env.get(PostService)
        post = await service.create(
            {"title": "Sea View", "author_id": UserId(uuid4())}
        )

        # Act
        updated = await service.update(post.id, {"title": "Harbour View"})

        # Assert
        assert updated.slug == "harbour-view"

    @pytest.mark.asyncio
    async def test_unique_slug_ignores_own_row(self, unit_env):
        # Arrange
        slug_service = await unit_env.get(SlugService)
        post_repo = await unit_env.get(PostRepository)
        post = await post_repo.save(make_post("Sea View"))

        # Act
        slug = await slug_service.unique_slug(
            post_repo, "Sea View", "post", exclude_id=post.id
        )

        # Assert
        assert slug == "sea-view"


class TestCreatePost:
    """Tests for excerpt, publish date and tags on create."""

    @pytest.mark.asyncio
    async def test_excerpt_generated_from_content(self, unit_env):
        # Arrange
        service = await unit_env.get(PostService)
        content = "<p>" + "word " * 60 + "</p>"

        # Act
        post = await service.create(
            {"title": "Long read", "content": content, "author_id": UserId(uuid4())}
        )

        # Assert
        assert post.excerpt.endswith("...")
        assert "<p>" not in post.excerpt

    @pytest.mark.asyncio
    async def test_published_post_is_stamped(self, unit_env):
        # Arrange
        service = await unit_env.get(PostService)

        # Act
        post = await service.create(
            {
                "title": "Launch",
                "status": PostStatus.PUBLISHED,
                "author_id": UserId(uuid4()),
            }
        )

        # Assert
        assert post.published_at is not None

    @pytest.mark.asyncio
    async def test_unknown_tag_rejected(self, unit_env):
        # Arrange
        service = await unit_env.get(PostService)
        tag_service = await unit_env.get(TagService)
        tag = await tag_service.create({"name": "Buying"})

        # Act & Assert
        with pytest.raises(ValidationError, match="Unknown tags"):
            await service.create(
                {
                    "title": "Tagged",
                    "tag_ids": [tag.id, TagId(uuid4())],
                    "author_id": UserId(uuid4()),
                }
            )

    @pytest.mark.asyncio
    async def test_duplicate_tags_collapse(self, unit_env):
        # Arrange
        service = await unit_env.get(PostService)
        tag_repo = await unit_env.get(TagRepository)
        tag_service = await unit_env.get(TagService)
        tag = await tag_service.create({"name": "Selling"})

        # Act
        post = await service.create(
            {
                "title": "Tagged",
                "tag_ids": [tag.id, tag.id],
                "author_id": UserId(uuid4()),
            }
        )

        # Assert
        assert post.tag_ids == [tag.id]
        assert await tag_repo.find_by_id(tag.id) is not None


class TestPublishing:
    @pytest.mark.asyncio
    async def test_publish_keeps_earlier_date(self, unit_env):
        # Arrange
        service = await unit_env.get(PostService)
        post_repo = await unit_env.get(PostRepository)
        first_published = datetime(2024, 3, 1, 9, 0)
        post = await post_repo.save(make_post(published_at=first_published))

        # Act
        result = await service.publish(post.id)

        # Assert
        assert result.status == PostStatus.PUBLISHED
        assert result.published_at == first_published

    @pytest.mark.asyncio
    async def test_unpublish_returns_to_draft(self, unit_env):
        # Arrange
        service = await unit_env.get(PostService)
        post_repo = await unit_env.get(PostRepository)
        post = await post_repo.save(make_post(status=PostStatus.PUBLISHED))

        # Act
        result = await service.unpublish(post.id)

        # Assert
        assert result.status == PostStatus.DRAFT


class TestDuplicate:
    @pytest.mark.asyncio
    async def test_duplicate_is_fresh_draft(self, unit_env):
        """A copy keeps content and tags but resets status and counters."""
        # Arrange
        service = await unit_env.get(PostService)
        post_repo = await unit_env.get(PostRepository)
        tag_id = TagId(uuid4())
        original = await post_repo.save(
            make_post(
                "Sea View",
                content="Body",
                status=PostStatus.PUBLISHED,
                published_at=datetime.now(),
                is_featured=True,
                views_count=40,
                comments_count=3,
                tag_ids=[tag_id],
            )
        )

        # Act
        copy = await service.duplicate(original.id)

        # Assert
        assert copy.id != original.id
        assert copy.title == "Sea View (Copy)"
        assert copy.slug == "sea-view-copy"
        assert copy.status == PostStatus.DRAFT
        assert copy.published_at is None
        assert copy.is_featured is False
        assert copy.views_count == 0
        assert copy.comments_count == 0
        assert copy.content == "Body"
        assert copy.tag_ids == [tag_id]

    @pytest.mark.asyncio
    async def test_stats_count_status_and_featured(self, unit_env):
        # Arrange
        service = await unit_env.get(PostService)
        post_repo = await unit_env.get(PostRepository)
        await post_repo.save(make_post("One"))
        await post_repo.save(make_post("Two", status=PostStatus.PUBLISHED))
        await post_repo.save(make_post("Three", is_featured=True))

        # Act
        stats = await service.stats()

        # Assert
        assert stats.total == 3
        assert stats.published == 1
        assert stats.draft == 2
        assert stats.featured == 1
