"""PostgreSQL implementations of the amenity, location and property type repositories."""

from typing import Any

from estate.domain.model import Amenity, Location, PropertyType
from estate.domain.repository import (
    AmenityRepository,
    LocationRepository,
    PropertyTypeRepository,
)
from estate.domain.value import AmenityId, LocationId, PropertyTypeId
from estate.persistence.mappers import (
    amenity_to_dict,
    location_to_dict,
    property_type_to_dict,
    row_to_amenity,
    row_to_location,
    row_to_property_type,
)
from estate.persistence.repository.base import PostgresSluggedRepository
from estate.persistence.repository.listing import (
    AMENITY_LIST,
    LOCATION_LIST,
    PROPERTY_TYPE_LIST,
)
from estate.persistence.tables import (
    amenities_table,
    locations_table,
    property_types_table,
)


class PostgresAmenityRepository(
    PostgresSluggedRepository[Amenity, AmenityId], AmenityRepository
):
    """PostgreSQL implementation of AmenityRepository."""

    table = amenities_table
    resource = "amenity"
    list_spec = AMENITY_LIST

    def _to_model(self, row: dict[str, Any]) -> Amenity:
        return row_to_amenity(row)

    def _to_dict(self, entity: Amenity) -> dict[str, Any]:
        return amenity_to_dict(entity)


class PostgresLocationRepository(
    PostgresSluggedRepository[Location, LocationId], LocationRepository
):
    """PostgreSQL implementation of LocationRepository."""

    table = locations_table
    resource = "location"
    list_spec = LOCATION_LIST

    def _to_model(self, row: dict[str, Any]) -> Location:
        return row_to_location(row)

    def _to_dict(self, entity: Location) -> dict[str, Any]:
        return location_to_dict(entity)


class PostgresPropertyTypeRepository(
    PostgresSluggedRepository[PropertyType, PropertyTypeId], PropertyTypeRepository
):
    """PostgreSQL implementation of PropertyTypeRepository."""

    table = property_types_table
    resource = "property_type"
    list_spec = PROPERTY_TYPE_LIST

    def _to_model(self, row: dict[str, Any]) -> PropertyType:
        return row_to_property_type(row)

    def _to_dict(self, entity: PropertyType) -> dict[str, Any]:
        return property_type_to_dict(entity)
