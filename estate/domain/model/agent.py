"""Agent entity.

Agents are the people listing properties. An agent cannot be removed
while any property still points at them.
"""

from datetime import datetime
from decimal import Decimal
from typing import Optional

from pydantic import Field

from estate.domain.model.common import DomainModel
from estate.domain.value import AgentId


class Agent(DomainModel):
    """Listing agent."""

    id: AgentId
    name: str = Field(min_length=1, max_length=255)
    email: str = Field(min_length=3, max_length=255)
    phone: Optional[str] = Field(default=None, max_length=50)
    license_number: Optional[str] = Field(default=None, max_length=100)
    bio: Optional[str] = None
    photo_path: Optional[str] = None
    office_address: Optional[str] = Field(default=None, max_length=255)
    specializations: list[str] = Field(default_factory=list)
    is_active: bool = True
    commission_rate: Decimal = Field(default=Decimal("5.00"), ge=0, le=100)
    experience_years: int = Field(default=0, ge=0)
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)
