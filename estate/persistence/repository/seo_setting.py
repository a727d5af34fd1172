"""PostgreSQL implementation of SeoSetting repository."""

from typing import Optional

import logfire
from sqlalchemy import select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from estate.domain.model import SeoSetting
from estate.domain.repository import SeoSettingRepository
from estate.persistence.mappers import row_to_seo_setting, seo_setting_to_dict
from estate.persistence.tables import seo_settings_table


class PostgresSeoSettingRepository(SeoSettingRepository):
    """PostgreSQL implementation of SeoSettingRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_key(self, key: str) -> Optional[SeoSetting]:
        """Find a setting by key, active or not."""
        stmt = select(seo_settings_table).where(seo_settings_table.c.key == key)
        result = await self.session.execute(stmt)
        row = result.first()
        if row is None:
            return None
        return row_to_seo_setting(row._asdict())

    async def find_all(self, group: str | None = None) -> list[SeoSetting]:
        """All settings ordered by group, sort order and key."""
        stmt = select(seo_settings_table).order_by(
            seo_settings_table.c.group,
            seo_settings_table.c.sort_order,
            seo_settings_table.c.key,
        )
        if group is not None:
            stmt = stmt.where(seo_settings_table.c.group == group)
        result = await self.session.execute(stmt)
        return [row_to_seo_setting(row._asdict()) for row in result.fetchall()]

    async def save(self, setting: SeoSetting) -> SeoSetting:
        """Create or update a setting, matching on key.

        An existing row keeps its ID; the returned model reflects the row.
        """
        with logfire.span("seo_setting_repository.save", key=setting.key):
            values = seo_setting_to_dict(setting)
            updates = {
                k: v for k, v in values.items() if k not in ("id", "key", "created_at")
            }
            stmt = (
                insert(seo_settings_table)
                .values(**values)
                .on_conflict_do_update(
                    index_elements=[seo_settings_table.c.key], set_=updates
                )
                .returning(seo_settings_table)
            )
            result = await self.session.execute(stmt)
            await self.session.flush()
            return row_to_seo_setting(result.one()._asdict())
