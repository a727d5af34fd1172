"""In-memory media repository for testing."""

from estate.domain.model import Media
from estate.domain.repository import MediaRepository
from estate.domain.value import MediaId, MediaType
from estate.persistence.repository.inmemory.base import InMemoryCrudRepository
from estate.persistence.repository.listing import MEDIA_LIST


class InMemoryMediaRepository(InMemoryCrudRepository[Media, MediaId], MediaRepository):
    list_spec = MEDIA_LIST

    async def count_by_type(self, media_type: MediaType) -> int:
        return sum(1 for m in self._items.values() if m.type == media_type)

    async def total_size(self) -> int:
        return sum(m.size for m in self._items.values())
