"""Unit tests for the post use cases."""

from uuid import uuid4

import pytest

from estate.application.usecase.post import (
    ListPostsUseCase,
    PostSeoMetaRequest,
    PostSeoMetaUseCase,
    UploadFeaturedImageRequest,
    UploadFeaturedImageUseCase,
)
from estate.domain.error import NotFoundError, ValidationError
from estate.domain.repository import MediaRepository, PostRepository
from estate.domain.service import SeoSettingService
from estate.domain.value import ListQuery, PostStatus
from tests.conftest import make_post
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


def _upload_request(post_id, **fields) -> UploadFeaturedImageRequest:
    return UploadFeaturedImageRequest(
        post_id=post_id,
        user_id=str(uuid4()),
        filename=fields.pop("filename", "cover.jpg"),
        mime_type=fields.pop("mime_type", "image/jpeg"),
        content=fields.pop("content", b"not really a jpeg"),
        **fields,
    )


class TestUploadFeaturedImageUseCase:
    """Tests for UploadFeaturedImageUseCase."""

    @pytest.mark.asyncio
    async def test_image_becomes_featured_media(self, unit_env):
        # Arrange
        use_case = await unit_env.get(UploadFeaturedImageUseCase)
        post = await (await unit_env.get(PostRepository)).save(make_post("Sea View"))

        # Act
        response = await use_case.execute(_upload_request(post.id))

        # Assert
        assert response.post.featured_image_id == response.media.id
        assert response.media.name == "Sea View"
        assert response.media.alt_text == "Sea View"
        media_repo = await unit_env.get(MediaRepository)
        assert await media_repo.find_by_id(response.media.id) is not None

    @pytest.mark.asyncio
    async def test_alt_text_is_kept(self, unit_env):
        # Arrange
        use_case = await unit_env.get(UploadFeaturedImageUseCase)
        post = await (await unit_env.get(PostRepository)).save(make_post())

        # Act
        response = await use_case.execute(
            _upload_request(post.id, alt_text="Balcony at dusk")
        )

        # Assert
        assert response.media.alt_text == "Balcony at dusk"

    @pytest.mark.asyncio
    async def test_non_image_rejected(self, unit_env):
        # Arrange
        use_case = await unit_env.get(UploadFeaturedImageUseCase)
        post = await (await unit_env.get(PostRepository)).save(make_post())

        # Act & Assert
        with pytest.raises(ValidationError, match="must be an image"):
            await use_case.execute(
                _upload_request(post.id, filename="a.pdf", mime_type="application/pdf")
            )

    @pytest.mark.asyncio
    async def test_unknown_post(self, unit_env):
        # Arrange
        use_case = await unit_env.get(UploadFeaturedImageUseCase)

        # Act & Assert
        with pytest.raises(NotFoundError):
            await use_case.execute(_upload_request(uuid4()))


class TestPostSeoMetaUseCase:
    @pytest.mark.asyncio
    async def test_featured_image_is_public_path(self, unit_env):
        # Arrange
        upload = await unit_env.get(UploadFeaturedImageUseCase)
        use_case = await unit_env.get(PostSeoMetaUseCase)
        seo = await unit_env.get(SeoSettingService)
        await seo.set("site_title", "Homes BD")
        post = await (await unit_env.get(PostRepository)).save(
            make_post("Sea View", meta_title="Sea View Flats")
        )
        uploaded = await upload.execute(_upload_request(post.id))

        # Act
        meta = await use_case.execute(PostSeoMetaRequest(post_id=post.id))

        # Assert
        assert meta.title == "Sea View Flats | Homes BD"
        assert meta.og_image == "/storage/" + uploaded.media.path


class TestListPostsUseCase:
    @pytest.mark.asyncio
    async def test_search_and_stats(self, unit_env):
        # Arrange
        use_case = await unit_env.get(ListPostsUseCase)
        post_repo = await unit_env.get(PostRepository)
        await post_repo.save(make_post("Sea View", status=PostStatus.PUBLISHED))
        await post_repo.save(make_post("Hill Top"))

        # Act
        found = await use_case.execute(ListQuery(search="sea"))
        blank = await use_case.execute(ListQuery(search="   "))

        # Assert
        assert [p.title for p in found.posts.items] == ["Sea View"]
        assert blank.posts.total == 2
        assert found.stats.published == 1
        assert found.stats.draft == 1

    @pytest.mark.asyncio
    async def test_sort_by_title(self, unit_env):
        # Arrange
        use_case = await unit_env.get(ListPostsUseCase)
        post_repo = await unit_env.get(PostRepository)
        await post_repo.save(make_post("Beta"))
        await post_repo.save(make_post("Alpha"))

        # Act
        ascending = await use_case.execute(ListQuery(sort="title"))
        descending = await use_case.execute(ListQuery(sort="title", direction="desc"))

        # Assert
        assert [p.title for p in ascending.posts.items] == ["Alpha", "Beta"]
        assert [p.title for p in descending.posts.items] == ["Beta", "Alpha"]
