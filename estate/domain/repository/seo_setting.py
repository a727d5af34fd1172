"""SEO setting repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from estate.domain.model import SeoSetting


class SeoSettingRepository(ABC):
    """Repository for SeoSetting entity."""

    @abstractmethod
    async def find_by_key(self, key: str) -> Optional[SeoSetting]:
        """Find a setting by key, active or not."""
        pass

    @abstractmethod
    async def find_all(self, group: str | None = None) -> list[SeoSetting]:
        """All settings ordered by group, sort order and key.

        Args:
            group: Restrict to one group when given
        """
        pass

    @abstractmethod
    async def save(self, setting: SeoSetting) -> SeoSetting:
        """Create or update a setting, matching on key."""
        pass
