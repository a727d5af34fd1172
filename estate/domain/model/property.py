"""Property listing entity."""

from datetime import datetime
from decimal import Decimal
from typing import Optional

from pydantic import Field

from estate.domain.model.common import DomainModel
from estate.domain.value import (
    AgentId,
    AmenityId,
    ListingType,
    LocationId,
    PropertyId,
    PropertyStatus,
    PropertyTypeId,
)


class Property(DomainModel):
    """A property listed for sale or rent.

    Properties are soft deleted: ``deleted_at`` is set and the row stays,
    but lists and lookups skip it.
    """

    id: PropertyId
    title: str = Field(min_length=1, max_length=255)
    slug: str
    description: str = ""
    listing_type: ListingType = ListingType.SALE
    status: PropertyStatus = PropertyStatus.AVAILABLE
    price: Decimal = Field(ge=0)
    currency: str = Field(default="BDT", min_length=3, max_length=3)
    bedrooms: Optional[int] = Field(default=None, ge=0)
    bathrooms: Optional[int] = Field(default=None, ge=0)
    area_sqft: Optional[Decimal] = Field(default=None, ge=0)
    address: str = Field(min_length=1, max_length=255)
    latitude: Optional[float] = Field(default=None, ge=-90, le=90)
    longitude: Optional[float] = Field(default=None, ge=-180, le=180)
    is_featured: bool = False
    meta_title: Optional[str] = Field(default=None, max_length=255)
    meta_description: Optional[str] = None
    property_type_id: PropertyTypeId
    location_id: LocationId
    agent_id: AgentId
    amenity_ids: list[AmenityId] = Field(default_factory=list)
    views_count: int = Field(default=0, ge=0)
    favorites_count: int = Field(default=0, ge=0)
    inquiries_count: int = Field(default=0, ge=0)
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)
    deleted_at: Optional[datetime] = None
