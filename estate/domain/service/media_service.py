"""Media library domain service."""

from pathlib import PurePath
from uuid import uuid4

import logfire
from pydantic import BaseModel

from estate.domain.error import ValidationError
from estate.domain.model import Media
from estate.domain.repository import MediaRepository
from estate.domain.value import MediaId, MediaType, UserId
from estate.util.image import image_dimensions

from .base import CrudService
from .file_storage import FileStorage, stored_filename

MEDIA_DIRECTORY = "media"


class MediaStats(BaseModel):
    """Media counts shown above the media library."""

    total: int
    images: int
    documents: int
    videos: int
    audio: int
    total_size: int


class MediaService(CrudService[Media, MediaId]):
    """Domain service for uploaded media.

    Deleting a media row also deletes its file.
    """

    model = Media
    resource = "media"

    def __init__(
        self,
        media_repository: MediaRepository,
        file_storage: FileStorage,
        max_upload_bytes: int,
    ) -> None:
        super().__init__(media_repository)
        self.media_repository = media_repository
        self.file_storage = file_storage
        self.max_upload_bytes = max_upload_bytes

    async def upload(
        self,
        filename: str,
        mime_type: str,
        content: bytes,
        uploaded_by: UserId,
        name: str | None = None,
        alt_text: str | None = None,
        description: str | None = None,
        is_active: bool = True,
    ) -> Media:
        """Store a file and record its metadata.

        Raises:
            ValidationError: If the file is empty or too large
        """
        with logfire.span(
            "media_service.upload", filename=filename, mime_type=mime_type
        ):
            if not content:
                raise ValidationError("No file was uploaded.")
            if len(content) > self.max_upload_bytes:
                raise ValidationError(
                    f"The file may not be larger than {self.max_upload_bytes} bytes."
                )

            media_type = MediaType.from_mime_type(mime_type)
            width = height = None
            if media_type == MediaType.IMAGE:
                dimensions = image_dimensions(content)
                if dimensions is not None:
                    width, height = dimensions

            file_name = stored_filename(filename)
            path = await self.file_storage.save(MEDIA_DIRECTORY, file_name, content)
            media = Media(
                id=MediaId(uuid4()),
                name=name or PurePath(filename).stem or file_name,
                file_name=file_name,
                original_name=filename,
                path=path,
                mime_type=mime_type,
                type=media_type,
                size=len(content),
                width=width,
                height=height,
                alt_text=alt_text,
                description=description,
                is_active=is_active,
                uploaded_by=uploaded_by,
            )
            saved = await self.media_repository.save(media)
            logfire.info(
                "Media uploaded",
                media_id=str(saved.id),
                type=media_type.value,
                size=saved.size,
            )
            return saved

    async def delete(self, entity_id: MediaId) -> None:
        """Delete a media row and its file."""
        media = await self.get(entity_id)
        await super().delete(entity_id)
        await self.file_storage.delete(media.path)

    async def stats(self) -> MediaStats:
        return MediaStats(
            total=await self.media_repository.count(),
            images=await self.media_repository.count_by_type(MediaType.IMAGE),
            documents=await self.media_repository.count_by_type(MediaType.DOCUMENT),
            videos=await self.media_repository.count_by_type(MediaType.VIDEO),
            audio=await self.media_repository.count_by_type(MediaType.AUDIO),
            total_size=await self.media_repository.total_size(),
        )
