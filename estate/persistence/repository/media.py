"""PostgreSQL implementation of Media repository."""

from typing import Any

from sqlalchemy import func, select

from estate.domain.model import Media
from estate.domain.repository import MediaRepository
from estate.domain.value import MediaId, MediaType
from estate.persistence.mappers import media_to_dict, row_to_media
from estate.persistence.repository.base import PostgresCrudRepository
from estate.persistence.repository.listing import MEDIA_LIST
from estate.persistence.tables import media_table


class PostgresMediaRepository(PostgresCrudRepository[Media, MediaId], MediaRepository):
    """PostgreSQL implementation of MediaRepository."""

    table = media_table
    resource = "media"
    list_spec = MEDIA_LIST

    def _to_model(self, row: dict[str, Any]) -> Media:
        return row_to_media(row)

    def _to_dict(self, entity: Media) -> dict[str, Any]:
        return media_to_dict(entity)

    async def count_by_type(self, media_type: MediaType) -> int:
        """Count media of a type."""
        return await self._count_where(media_table.c.type == media_type.value)

    async def total_size(self) -> int:
        """Sum of all file sizes in bytes."""
        stmt = select(func.coalesce(func.sum(media_table.c.size), 0))
        result = await self.session.execute(stmt)
        return int(result.scalar() or 0)
