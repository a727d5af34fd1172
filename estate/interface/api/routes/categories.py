"""Category routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends, Response, status
from pydantic import BaseModel, Field

from estate.domain.model import Category
from estate.domain.service import CategoryService
from estate.domain.value import CategoryId, Page
from estate.interface.api.deps import Listing, admin_user_id

router = APIRouter(
    prefix="/categories",
    tags=["categories"],
    route_class=DishkaRoute,
    dependencies=[Depends(admin_user_id)],
)


class CreateCategoryAPIRequest(BaseModel):
    name: str = Field(min_length=1, max_length=255)
    slug: str | None = Field(default=None, max_length=255)
    description: str | None = Field(default=None, max_length=1000)
    image: str | None = Field(default=None, max_length=255)
    seo_title: str | None = Field(default=None, max_length=255)
    seo_description: str | None = Field(default=None, max_length=160)
    seo_keywords: str | None = Field(default=None, max_length=255)
    is_active: bool = True
    sort_order: int = Field(default=0, ge=0)


class UpdateCategoryAPIRequest(BaseModel):
    name: str | None = Field(default=None, min_length=1, max_length=255)
    slug: str | None = Field(default=None, max_length=255)
    description: str | None = Field(default=None, max_length=1000)
    image: str | None = Field(default=None, max_length=255)
    seo_title: str | None = Field(default=None, max_length=255)
    seo_description: str | None = Field(default=None, max_length=160)
    seo_keywords: str | None = Field(default=None, max_length=255)
    is_active: bool | None = None
    sort_order: int | None = Field(default=None, ge=0)


@router.get("", response_model=Page[Category])
async def list_categories(
    query: Listing, category_service: FromDishka[CategoryService]
) -> Page[Category]:
    return await category_service.list_page(query)


@router.post("", response_model=Category, status_code=status.HTTP_201_CREATED)
async def create_category(
    request: CreateCategoryAPIRequest, category_service: FromDishka[CategoryService]
) -> Category:
    return await category_service.create(request.model_dump(exclude_unset=True))


@router.get("/{category_id}", response_model=Category)
async def get_category(
    category_id: UUID, category_service: FromDishka[CategoryService]
) -> Category:
    return await category_service.get(CategoryId(category_id))


@router.patch("/{category_id}", response_model=Category)
async def update_category(
    category_id: UUID,
    request: UpdateCategoryAPIRequest,
    category_service: FromDishka[CategoryService],
) -> Category:
    return await category_service.update(
        CategoryId(category_id), request.model_dump(exclude_unset=True)
    )


@router.delete("/{category_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_category(
    category_id: UUID, category_service: FromDishka[CategoryService]
) -> Response:
    await category_service.delete(CategoryId(category_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
