"""Team routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends, Response, status
from pydantic import BaseModel, Field

from estate.domain.model import Team
from estate.domain.service import TeamService
from estate.domain.value import Page, TeamId, TeamRole, UserId
from estate.interface.api.deps import AdminId, Listing, admin_user_id

router = APIRouter(
    prefix="/teams",
    tags=["teams"],
    route_class=DishkaRoute,
    dependencies=[Depends(admin_user_id)],
)


class CreateTeamAPIRequest(BaseModel):
    name: str = Field(min_length=1, max_length=255)
    owner_id: UUID | None = None  # Defaults to the signed-in admin


class UpdateTeamAPIRequest(BaseModel):
    name: str | None = Field(default=None, min_length=1, max_length=255)
    owner_id: UUID | None = None


class AddMemberAPIRequest(BaseModel):
    user_id: UUID
    role: TeamRole = TeamRole.MEMBER


class UpdateMemberAPIRequest(BaseModel):
    role: TeamRole


@router.get("", response_model=Page[Team])
async def list_teams(query: Listing, team_service: FromDishka[TeamService]) -> Page[Team]:
    return await team_service.list_page(query)


@router.post("", response_model=Team, status_code=status.HTTP_201_CREATED)
async def create_team(
    request: CreateTeamAPIRequest,
    user_id: AdminId,
    team_service: FromDishka[TeamService],
) -> Team:
    return await team_service.create(
        {"name": request.name, "owner_id": request.owner_id or UUID(user_id)}
    )


@router.get("/{team_id}", response_model=Team)
async def get_team(team_id: UUID, team_service: FromDishka[TeamService]) -> Team:
    return await team_service.get(TeamId(team_id))


@router.patch("/{team_id}", response_model=Team)
async def update_team(
    team_id: UUID,
    request: UpdateTeamAPIRequest,
    team_service: FromDishka[TeamService],
) -> Team:
    return await team_service.update(
        TeamId(team_id), request.model_dump(exclude_unset=True, exclude_none=True)
    )


@router.delete("/{team_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_team(team_id: UUID, team_service: FromDishka[TeamService]) -> Response:
    await team_service.delete(TeamId(team_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post("/{team_id}/members", response_model=Team)
async def add_member(
    team_id: UUID,
    request: AddMemberAPIRequest,
    team_service: FromDishka[TeamService],
) -> Team:
    """Add a user to the team; refused for the owner and existing members."""
    return await team_service.add_member(
        TeamId(team_id), UserId(request.user_id), request.role
    )


@router.patch("/{team_id}/members/{user_id}", response_model=Team)
async def update_member_role(
    team_id: UUID,
    user_id: UUID,
    request: UpdateMemberAPIRequest,
    team_service: FromDishka[TeamService],
) -> Team:
    return await team_service.update_member_role(
        TeamId(team_id), UserId(user_id), request.role
    )


@router.delete("/{team_id}/members/{user_id}", response_model=Team)
async def remove_member(
    team_id: UUID, user_id: UUID, team_service: FromDishka[TeamService]
) -> Team:
    return await team_service.remove_member(TeamId(team_id), UserId(user_id))
