"""Media library list use case."""

from pydantic import BaseModel

from estate.domain.model import Media
from estate.domain.service import MediaService, MediaStats
from estate.domain.value import ListQuery, Page


class ListMediaResponse(BaseModel):
    """A page of media plus counts by type and total size."""

    media: Page[Media]
    stats: MediaStats


class ListMediaUseCase:
    """Use case for the media library screen."""

    def __init__(self, media_service: MediaService) -> None:
        self.media_service = media_service

    async def execute(self, request: ListQuery) -> ListMediaResponse:
        return ListMediaResponse(
            media=await self.media_service.list_page(request),
            stats=await self.media_service.stats(),
        )
