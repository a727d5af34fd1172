"""Media entity for uploaded files."""

from datetime import datetime
from typing import Any, Optional

from pydantic import Field, computed_field

from estate.domain.model.common import DomainModel
from estate.domain.value import MediaId, MediaType, UserId

_SIZE_UNITS = ("B", "KB", "MB", "GB", "TB")


class Media(DomainModel):
    """An uploaded file and the metadata derived from it."""

    id: MediaId
    name: str = Field(min_length=1, max_length=255)
    file_name: str
    original_name: str
    path: str
    mime_type: str
    type: MediaType
    size: int = Field(ge=0)
    width: Optional[int] = None
    height: Optional[int] = None
    alt_text: Optional[str] = Field(default=None, max_length=500)
    description: Optional[str] = Field(default=None, max_length=1000)
    metadata: dict[str, Any] = Field(default_factory=dict)
    is_active: bool = True
    uploaded_by: UserId
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)

    @computed_field
    @property
    def is_image(self) -> bool:
        return self.type == MediaType.IMAGE

    @computed_field
    @property
    def size_for_humans(self) -> str:
        return human_size(self.size)


def human_size(size: int) -> str:
    """Format a byte count, e.g. 1536 -> '1.5 KB'."""
    value = float(size)
    unit = 0
    while value >= 1024 and unit < len(_SIZE_UNITS) - 1:
        value /= 1024
        unit += 1
    return f"{round(value, 2):g} {_SIZE_UNITS[unit]}"
