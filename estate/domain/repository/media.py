"""Media repository interface."""

from abc import abstractmethod

from estate.domain.model import Media
from estate.domain.repository.base import CrudRepository
from estate.domain.value import MediaId, MediaType


class MediaRepository(CrudRepository[Media, MediaId]):
    """Repository for Media entity."""

    @abstractmethod
    async def count_by_type(self, media_type: MediaType) -> int:
        """Count media of a type."""
        pass

    @abstractmethod
    async def total_size(self) -> int:
        """Sum of all file sizes in bytes."""
        pass
