"""Agent routes."""

from decimal import Decimal
from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends, File, Response, UploadFile, status
from pydantic import BaseModel, Field

from estate.domain.model import Agent
from estate.domain.service import AgentService
from estate.domain.value import AgentId, Page
from estate.interface.api.deps import Listing, admin_user_id

router = APIRouter(
    prefix="/agents",
    tags=["agents"],
    route_class=DishkaRoute,
    dependencies=[Depends(admin_user_id)],
)


class CreateAgentAPIRequest(BaseModel):
    """API request for creating an agent."""

    name: str = Field(min_length=1, max_length=255)
    email: str = Field(min_length=3, max_length=255)
    phone: str | None = Field(default=None, max_length=50)
    license_number: str | None = Field(default=None, max_length=100)
    bio: str | None = None
    office_address: str | None = Field(default=None, max_length=255)
    specializations: list[str] = Field(default_factory=list)
    is_active: bool = True
    commission_rate: Decimal = Field(default=Decimal("5.00"), ge=0, le=100)
    experience_years: int = Field(default=0, ge=0)


class UpdateAgentAPIRequest(BaseModel):
    """API request for updating an agent; omitted fields are left unchanged."""

    name: str | None = Field(default=None, min_length=1, max_length=255)
    email: str | None = Field(default=None, min_length=3, max_length=255)
    phone: str | None = Field(default=None, max_length=50)
    license_number: str | None = Field(default=None, max_length=100)
    bio: str | None = None
    office_address: str | None = Field(default=None, max_length=255)
    specializations: list[str] | None = None
    is_active: bool | None = None
    commission_rate: Decimal | None = Field(default=None, ge=0, le=100)
    experience_years: int | None = Field(default=None, ge=0)


@router.get("", response_model=Page[Agent])
async def list_agents(
    query: Listing, agent_service: FromDishka[AgentService]
) -> Page[Agent]:
    """List agents; filter by ``status`` (active or inactive)."""
    return await agent_service.list_page(query)


@router.post("", response_model=Agent, status_code=status.HTTP_201_CREATED)
async def create_agent(
    request: CreateAgentAPIRequest, agent_service: FromDishka[AgentService]
) -> Agent:
    return await agent_service.create(request.model_dump())


@router.get("/{agent_id}", response_model=Agent)
async def get_agent(agent_id: UUID, agent_service: FromDishka[AgentService]) -> Agent:
    return await agent_service.get(AgentId(agent_id))


@router.patch("/{agent_id}", response_model=Agent)
async def update_agent(
    agent_id: UUID,
    request: UpdateAgentAPIRequest,
    agent_service: FromDishka[AgentService],
) -> Agent:
    return await agent_service.update(
        AgentId(agent_id), request.model_dump(exclude_unset=True)
    )


@router.delete("/{agent_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_agent(
    agent_id: UUID, agent_service: FromDishka[AgentService]
) -> Response:
    """Delete an agent.

    Refused with 409 while any property still references the agent.
    """
    await agent_service.delete(AgentId(agent_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post("/{agent_id}/photo", response_model=Agent)
async def upload_agent_photo(
    agent_id: UUID,
    agent_service: FromDishka[AgentService],
    photo: UploadFile = File(...),
) -> Agent:
    """Replace an agent's photo; the previous file is deleted."""
    content = await photo.read()
    return await agent_service.replace_photo(
        AgentId(agent_id),
        photo.filename or "photo",
        photo.content_type or "application/octet-stream",
        content,
    )
