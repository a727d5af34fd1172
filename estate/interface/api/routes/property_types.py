"""Property type routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends, Response, status
from pydantic import BaseModel, Field

from estate.domain.model import PropertyType
from estate.domain.service import PropertyTypeService
from estate.domain.value import Page, PropertyTypeId
from estate.interface.api.deps import Listing, admin_user_id

router = APIRouter(
    prefix="/property-types",
    tags=["property-types"],
    route_class=DishkaRoute,
    dependencies=[Depends(admin_user_id)],
)


class CreatePropertyTypeAPIRequest(BaseModel):
    name: str = Field(min_length=1, max_length=255)
    slug: str | None = Field(default=None, max_length=255)
    description: str | None = None
    icon: str | None = Field(default=None, max_length=100)
    is_active: bool = True
    sort_order: int = Field(default=0, ge=0)


class UpdatePropertyTypeAPIRequest(BaseModel):
    name: str | None = Field(default=None, min_length=1, max_length=255)
    slug: str | None = Field(default=None, max_length=255)
    description: str | None = None
    icon: str | None = Field(default=None, max_length=100)
    is_active: bool | None = None
    sort_order: int | None = Field(default=None, ge=0)


@router.get("", response_model=Page[PropertyType])
async def list_property_types(
    query: Listing, property_type_service: FromDishka[PropertyTypeService]
) -> Page[PropertyType]:
    return await property_type_service.list_page(query)


@router.post("", response_model=PropertyType, status_code=status.HTTP_201_CREATED)
async def create_property_type(
    request: CreatePropertyTypeAPIRequest,
    property_type_service: FromDishka[PropertyTypeService],
) -> PropertyType:
    return await property_type_service.create(request.model_dump(exclude_unset=True))


@router.get("/{property_type_id}", response_model=PropertyType)
async def get_property_type(
    property_type_id: UUID, property_type_service: FromDishka[PropertyTypeService]
) -> PropertyType:
    return await property_type_service.get(PropertyTypeId(property_type_id))


@router.patch("/{property_type_id}", response_model=PropertyType)
async def update_property_type(
    property_type_id: UUID,
    request: UpdatePropertyTypeAPIRequest,
    property_type_service: FromDishka[PropertyTypeService],
) -> PropertyType:
    return await property_type_service.update(
        PropertyTypeId(property_type_id), request.model_dump(exclude_unset=True)
    )


@router.delete("/{property_type_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_property_type(
    property_type_id: UUID, property_type_service: FromDishka[PropertyTypeService]
) -> Response:
    await property_type_service.delete(PropertyTypeId(property_type_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
