"""Property routes."""

from decimal import Decimal
from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends, Response, status
from pydantic import BaseModel, Field

from estate.domain.model import Property
from estate.domain.service import PropertyService
from estate.domain.value import ListingType, Page, PropertyId, PropertyStatus
from estate.interface.api.deps import Listing, admin_user_id

router = APIRouter(
    prefix="/properties",
    tags=["properties"],
    route_class=DishkaRoute,
    dependencies=[Depends(admin_user_id)],
)


class CreatePropertyAPIRequest(BaseModel):
    """API request for creating a property listing."""

    title: str = Field(min_length=1, max_length=255)
    slug: str | None = Field(default=None, max_length=255)
    description: str = ""
    listing_type: ListingType = ListingType.SALE
    status: PropertyStatus = PropertyStatus.AVAILABLE
    price: Decimal = Field(ge=0)
    currency: str = Field(default="BDT", min_length=3, max_length=3)
    bedrooms: int | None = Field(default=None, ge=0)
    bathrooms: int | None = Field(default=None, ge=0)
    area_sqft: Decimal | None = Field(default=None, ge=0)
    address: str = Field(min_length=1, max_length=255)
    latitude: float | None = Field(default=None, ge=-90, le=90)
    longitude: float | None = Field(default=None, ge=-180, le=180)
    is_featured: bool = False
    meta_title: str | None = Field(default=None, max_length=255)
    meta_description: str | None = None
    property_type_id: UUID
    location_id: UUID
    agent_id: UUID
    amenity_ids: list[UUID] = Field(default_factory=list)


class UpdatePropertyAPIRequest(BaseModel):
    """API request for updating a property; omitted fields are left unchanged."""

    title: str | None = Field(default=None, min_length=1, max_length=255)
    slug: str | None = Field(default=None, max_length=255)
    description: str | None = None
    listing_type: ListingType | None = None
    status: PropertyStatus | None = None
    price: Decimal | None = Field(default=None, ge=0)
    currency: str | None = Field(default=None, min_length=3, max_length=3)
    bedrooms: int | None = Field(default=None, ge=0)
    bathrooms: int | None = Field(default=None, ge=0)
    area_sqft: Decimal | None = Field(default=None, ge=0)
    address: str | None = Field(default=None, min_length=1, max_length=255)
    latitude: float | None = Field(default=None, ge=-90, le=90)
    longitude: float | None = Field(default=None, ge=-180, le=180)
    is_featured: bool | None = None
    meta_title: str | None = Field(default=None, max_length=255)
    meta_description: str | None = None
    property_type_id: UUID | None = None
    location_id: UUID | None = None
    agent_id: UUID | None = None
    amenity_ids: list[UUID] | None = None


class BulkDeleteAPIRequest(BaseModel):
    ids: list[UUID] = Field(min_length=1)


class MessageResponse(BaseModel):
    message: str


@router.get("", response_model=Page[Property])
async def list_properties(
    query: Listing, property_service: FromDishka[PropertyService]
) -> Page[Property]:
    """List properties that are not deleted.

    Filters: ``status``, ``listing_type``, ``property_type_id``.
    """
    return await property_service.list_page(query)


@router.post("", response_model=Property, status_code=status.HTTP_201_CREATED)
async def create_property(
    request: CreatePropertyAPIRequest, property_service: FromDishka[PropertyService]
) -> Property:
    return await property_service.create(request.model_dump(exclude_unset=True))


@router.post("/bulk-delete", response_model=MessageResponse)
async def bulk_delete_properties(
    request: BulkDeleteAPIRequest, property_service: FromDishka[PropertyService]
) -> MessageResponse:
    """Soft delete several properties at once."""
    count = await property_service.bulk_delete([PropertyId(i) for i in request.ids])
    return MessageResponse(message=f"{count} properties deleted successfully.")


@router.get("/{property_id}", response_model=Property)
async def get_property(
    property_id: UUID, property_service: FromDishka[PropertyService]
) -> Property:
    return await property_service.get(PropertyId(property_id))


@router.patch("/{property_id}", response_model=Property)
async def update_property(
    property_id: UUID,
    request: UpdatePropertyAPIRequest,
    property_service: FromDishka[PropertyService],
) -> Property:
    return await property_service.update(
        PropertyId(property_id), request.model_dump(exclude_unset=True)
    )


@router.delete("/{property_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_property(
    property_id: UUID, property_service: FromDishka[PropertyService]
) -> Response:
    await property_service.delete(PropertyId(property_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
