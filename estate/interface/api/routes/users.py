"""User routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends, Response, status
from pydantic import BaseModel, Field

from estate.domain.model import User
from estate.domain.service import UserService
from estate.domain.value import Page, UserId
from estate.interface.api.deps import AdminId, Listing, admin_user_id

router = APIRouter(
    prefix="/users",
    tags=["users"],
    route_class=DishkaRoute,
    dependencies=[Depends(admin_user_id)],
)


class CreateUserAPIRequest(BaseModel):
    name: str = Field(min_length=1, max_length=255)
    email: str = Field(min_length=3, max_length=255)
    roles: list[str] = Field(default_factory=list)


class UpdateUserAPIRequest(BaseModel):
    name: str | None = Field(default=None, min_length=1, max_length=255)
    email: str | None = Field(default=None, min_length=3, max_length=255)
    roles: list[str] | None = None


@router.get("", response_model=Page[User])
async def list_users(query: Listing, user_service: FromDishka[UserService]) -> Page[User]:
    """List users; filter by ``role``."""
    return await user_service.list_page(query)


@router.post("", response_model=User, status_code=status.HTTP_201_CREATED)
async def create_user(
    request: CreateUserAPIRequest, user_service: FromDishka[UserService]
) -> User:
    fields = request.model_dump()
    fields["roles"] = list(dict.fromkeys(fields["roles"]))
    return await user_service.create(fields)


@router.get("/{user_id}", response_model=User)
async def get_user(user_id: UUID, user_service: FromDishka[UserService]) -> User:
    return await user_service.get(UserId(user_id))


@router.patch("/{user_id}", response_model=User)
async def update_user(
    user_id: UUID,
    request: UpdateUserAPIRequest,
    user_service: FromDishka[UserService],
) -> User:
    fields = request.model_dump(exclude_unset=True)
    if fields.get("roles") is not None:
        fields["roles"] = list(dict.fromkeys(fields["roles"]))
    return await user_service.update(UserId(user_id), fields)


@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_user(
    user_id: UUID, admin_id: AdminId, user_service: FromDishka[UserService]
) -> Response:
    """Delete a user; admins cannot delete their own account."""
    await user_service.delete_as(UserId(user_id), UserId(UUID(admin_id)))
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post("/{user_id}/roles/{role}", response_model=User)
async def assign_role(
    user_id: UUID, role: str, user_service: FromDishka[UserService]
) -> User:
    return await user_service.assign_role(UserId(user_id), role)


@router.delete("/{user_id}/roles/{role}", response_model=User)
async def remove_role(
    user_id: UUID, role: str, user_service: FromDishka[UserService]
) -> User:
    return await user_service.remove_role(UserId(user_id), role)
