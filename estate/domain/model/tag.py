"""Tag and category entities used to organise posts."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from estate.domain.model.common import DomainModel
from estate.domain.value import CategoryId, TagId


class Tag(DomainModel):
    """Post tag."""

    id: TagId
    name: str = Field(min_length=1, max_length=255)
    slug: str
    description: Optional[str] = Field(default=None, max_length=1000)
    color: Optional[str] = Field(default=None, max_length=7)
    seo_title: Optional[str] = Field(default=None, max_length=255)
    seo_description: Optional[str] = Field(default=None, max_length=160)
    seo_keywords: Optional[str] = Field(default=None, max_length=255)
    is_active: bool = True
    sort_order: int = Field(default=0, ge=0)
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)


class Category(DomainModel):
    """Post category."""

    id: CategoryId
    name: str = Field(min_length=1, max_length=255)
    slug: str
    description: Optional[str] = Field(default=None, max_length=1000)
    image: Optional[str] = Field(default=None, max_length=255)
    seo_title: Optional[str] = Field(default=None, max_length=255)
    seo_description: Optional[str] = Field(default=None, max_length=160)
    seo_keywords: Optional[str] = Field(default=None, max_length=255)
    is_active: bool = True
    sort_order: int = Field(default=0, ge=0)
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)
