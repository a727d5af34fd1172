"""In-memory SEO setting repository for testing."""

from typing import Optional

from estate.domain.model import SeoSetting
from estate.domain.repository import SeoSettingRepository


class InMemorySeoSettingRepository(SeoSettingRepository):
    """In-memory implementation of SeoSettingRepository for testing."""

    def __init__(self) -> None:
        self._settings: dict[str, SeoSetting] = {}

    async def find_by_key(self, key: str) -> Optional[SeoSetting]:
        return self._settings.get(key)

    async def find_all(self, group: str | None = None) -> list[SeoSetting]:
        settings = [
            s for s in self._settings.values() if group is None or s.group == group
        ]
        return sorted(settings, key=lambda s: (s.group, s.sort_order, s.key))

    async def save(self, setting: SeoSetting) -> SeoSetting:
        existing = self._settings.get(setting.key)
        if existing is not None:
            setting = setting.model_copy(
                update={"id": existing.id, "created_at": existing.created_at}
            )
        self._settings[setting.key] = setting
        return setting
