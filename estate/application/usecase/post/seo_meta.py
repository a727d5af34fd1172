"""Post SEO meta use case."""

from uuid import UUID

from pydantic import BaseModel

from estate.domain.service import (
    CategoryService,
    MediaService,
    PostMeta,
    PostService,
    SeoSettingService,
)
from estate.domain.value import PostId

PUBLIC_STORAGE_PREFIX = "/storage/"


class PostSeoMetaRequest(BaseModel):
    post_id: UUID


class PostSeoMetaUseCase:
    """Use case for previewing the meta tags a post will render with."""

    def __init__(
        self,
        post_service: PostService,
        category_service: CategoryService,
        media_service: MediaService,
        seo_setting_service: SeoSettingService,
    ) -> None:
        self.post_service = post_service
        self.category_service = category_service
        self.media_service = media_service
        self.seo_setting_service = seo_setting_service

    async def execute(self, request: PostSeoMetaRequest) -> PostMeta:
        post = await self.post_service.get(PostId(request.post_id))
        tags = await self.post_service.tag_repository.find_by_ids(post.tag_ids)

        category = None
        if post.category_id is not None:
            category = await self.category_service.repository.find_by_id(
                post.category_id
            )

        image_path = None
        if post.featured_image_id is not None:
            media = await self.media_service.repository.find_by_id(
                post.featured_image_id
            )
            if media is not None:
                image_path = PUBLIC_STORAGE_PREFIX + media.path

        return await self.seo_setting_service.post_meta(
            post, tags, category=category, featured_image_path=image_path
        )
