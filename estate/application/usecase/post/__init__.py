"""Post use cases."""

from .featured_image import (
    UploadFeaturedImageRequest,
    UploadFeaturedImageResponse,
    UploadFeaturedImageUseCase,
)
from .list_posts import ListPostsResponse, ListPostsUseCase
from .seo_meta import PostSeoMetaRequest, PostSeoMetaUseCase

__all__ = [
    "ListPostsResponse",
    "ListPostsUseCase",
    "PostSeoMetaRequest",
    "PostSeoMetaUseCase",
    "UploadFeaturedImageRequest",
    "UploadFeaturedImageResponse",
    "UploadFeaturedImageUseCase",
]
