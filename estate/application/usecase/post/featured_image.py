"""Post featured image upload use case."""

from uuid import UUID

from pydantic import BaseModel

from estate.domain.error import ValidationError
from estate.domain.model import Media, Post
from estate.domain.service import MediaService, PostService
from estate.domain.value import MediaType, PostId, UserId


class UploadFeaturedImageRequest(BaseModel):
    """Featured image upload request."""

    post_id: UUID
    user_id: str  # Uploading admin from the auth cookie
    filename: str
    mime_type: str
    content: bytes
    alt_text: str | None = None


class UploadFeaturedImageResponse(BaseModel):
    post: Post
    media: Media


class UploadFeaturedImageUseCase:
    """Use case for uploading an image and making it a post's featured image.

    The upload becomes a regular media library entry.
    """

    def __init__(self, post_service: PostService, media_service: MediaService) -> None:
        """Initialize featured image use case.

        Args:
            post_service: Post domain service
            media_service: Media domain service
        """
        self.post_service = post_service
        self.media_service = media_service

    async def execute(
        self, request: UploadFeaturedImageRequest
    ) -> UploadFeaturedImageResponse:
        """Execute the upload.

        Raises:
            NotFoundError: If the post doesn't exist
            ValidationError: If the upload is empty, too large or not an image
        """
        post_id = PostId(request.post_id)
        post = await self.post_service.get(post_id)
        if MediaType.from_mime_type(request.mime_type) != MediaType.IMAGE:
            raise ValidationError("The featured image must be an image.")

        media = await self.media_service.upload(
            filename=request.filename,
            mime_type=request.mime_type,
            content=request.content,
            uploaded_by=UserId(UUID(request.user_id)),
            name=post.title,
            alt_text=request.alt_text or post.title,
        )
        post = await self.post_service.set_featured_image(post_id, media.id)
        return UploadFeaturedImageResponse(post=post, media=media)
