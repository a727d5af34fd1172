"""PostgreSQL implementation of Property repository."""

from collections import defaultdict
from datetime import datetime, timezone
from typing import Any
from uuid import UUID

import logfire
from sqlalchemy import delete, func, insert, select, update
from sqlalchemy.sql import ColumnElement

from estate.domain.model import Property
from estate.domain.repository import PropertyRepository
from estate.domain.value import (
    AgentId,
    AmenityId,
    LocationId,
    PropertyId,
    PropertyTypeId,
)
from estate.persistence.mappers import property_to_dict, row_to_property
from estate.persistence.repository.base import PostgresSluggedRepository
from estate.persistence.repository.listing import PROPERTY_LIST
from estate.persistence.tables import properties_table, property_amenities_table


class PostgresPropertyRepository(
    PostgresSluggedRepository[Property, PropertyId], PropertyRepository
):
    """PostgreSQL implementation of PropertyRepository."""

    table = properties_table
    resource = "property"
    list_spec = PROPERTY_LIST

    def _to_dict(self, entity: Property) -> dict[str, Any]:
        return property_to_dict(entity)

    def _visible(self) -> list[ColumnElement[bool]]:
        return [properties_table.c.deleted_at.is_(None)]

    async def _fetch_amenities(
        self, property_ids: list[UUID]
    ) -> dict[UUID, list[UUID]]:
        """Fetch amenity IDs for several properties in a single query."""
        if not property_ids:
            return {}
        stmt = select(
            property_amenities_table.c.property_id,
            property_amenities_table.c.amenity_id,
        ).where(property_amenities_table.c.property_id.in_(property_ids))
        result = await self.session.execute(stmt)

        amenity_map: dict[UUID, list[UUID]] = defaultdict(list)
        for row in result.fetchall():
            amenity_map[row.property_id].append(row.amenity_id)
        return amenity_map

    def _to_model(self, row: dict[str, Any]) -> Property:
        return row_to_property(row, row.get("amenity_ids"))

    async def _load(self, rows: list[dict[str, Any]]) -> list[Property]:
        amenity_map = await self._fetch_amenities([row["id"] for row in rows])
        return [
            self._to_model({**row, "amenity_ids": amenity_map.get(row["id"], [])})
            for row in rows
        ]

    async def _after_save(self, entity: Property) -> None:
        # Sync amenities: replace the whole set
        await self.session.execute(
            delete(property_amenities_table).where(
                property_amenities_table.c.property_id == entity.id
            )
        )
        for amenity_id in dict.fromkeys(entity.amenity_ids):
            await self.session.execute(
                insert(property_amenities_table).values(
                    property_id=entity.id, amenity_id=amenity_id
                )
            )

    async def count_by_agent(self, agent_id: AgentId) -> int:
        """Count live properties listed by an agent."""
        return await self._count_where(properties_table.c.agent_id == agent_id)

    async def count_by_location(self, location_id: LocationId) -> int:
        """Count live properties in a location."""
        return await self._count_where(properties_table.c.location_id == location_id)

    async def count_by_property_type(self, property_type_id: PropertyTypeId) -> int:
        """Count live properties of a property type."""
        return await self._count_where(
            properties_table.c.property_type_id == property_type_id
        )

    async def count_by_amenity(self, amenity_id: AmenityId) -> int:
        """Count live properties offering an amenity."""
        stmt = (
            select(func.count())
            .select_from(properties_table)
            .join(
                property_amenities_table,
                properties_table.c.id == property_amenities_table.c.property_id,
            )
            .where(
                property_amenities_table.c.amenity_id == amenity_id,
                properties_table.c.deleted_at.is_(None),
            )
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def soft_delete_many(self, property_ids: list[PropertyId]) -> int:
        """Soft delete several properties at once."""
        with logfire.span(
            "property_repository.soft_delete_many", count=len(property_ids)
        ):
            if not property_ids:
                return 0
            now = datetime.now(timezone.utc)
            stmt = (
                update(properties_table)
                .where(
                    properties_table.c.id.in_(property_ids),
                    properties_table.c.deleted_at.is_(None),
                )
                .values(deleted_at=now, updated_at=now)
            )
            result = await self.session.execute(stmt)
            await self.session.flush()
            logfire.info("Properties soft deleted", count=result.rowcount)
            return result.rowcount

    async def delete(self, entity_id: PropertyId) -> None:
        """Soft delete a property."""
        await self.soft_delete_many([entity_id])
