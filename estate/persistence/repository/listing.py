"""Declarative list configuration shared by the SQL and in-memory repositories.

Each entity declares which fields are searched, which filters exist, which
columns may be sorted on and how many rows a page holds. Both repository
implementations read the same ListSpec, so they agree on what a query means.
"""

from enum import Enum
from typing import Any, Callable, Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict

from estate.domain.value import (
    CommentAuthorType,
    CommentStatus,
    ListingType,
    ListQuery,
    LocationType,
    MediaType,
    PostStatus,
    PropertyStatus,
    SortDirection,
)


def enum_value(enum_cls: type[Enum]) -> Callable[[Any], Optional[str]]:
    """Parser accepting only members of an enum, returning the raw value."""

    def parse(value: Any) -> Optional[str]:
        try:
            return enum_cls(value).value
        except ValueError:
            return None

    return parse


def uuid_value(value: Any) -> Optional[UUID]:
    if isinstance(value, UUID):
        return value
    try:
        return UUID(str(value))
    except ValueError:
        return None


def text_value(value: Any) -> Optional[str]:
    text = str(value).strip()
    return text or None


def active_flag(value: Any) -> Optional[bool]:
    return {"active": True, "inactive": False}.get(str(value))


class FilterSpec(BaseModel):
    """One categorical filter.

    ``field`` is the column compared for equality. Filters without a field
    are handled by the repository itself.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    field: Optional[str] = None
    parse: Callable[[Any], Any] = text_value


class ListSpec(BaseModel):
    """Search, filter, sort and page size for one entity list."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    search: tuple[str, ...] = ()
    filters: dict[str, FilterSpec] = {}
    sortable: tuple[str, ...] = ("created_at",)
    default_order: tuple[tuple[str, SortDirection], ...] = (("created_at", "desc"),)
    per_page: int = 15

    def page_size(self, query: ListQuery) -> int:
        return query.per_page or self.per_page

    def resolve_filters(self, query: ListQuery) -> list[tuple[str, FilterSpec, Any]]:
        """Known filters with a parseable value as (name, spec, parsed value).

        Unknown filter names and values that do not parse are dropped,
        which means "no filter".
        """
        resolved = []
        for name, raw in query.active_filters().items():
            spec = self.filters.get(name)
            if spec is None:
                continue
            parsed = spec.parse(raw)
            if parsed is None:
                continue
            resolved.append((name, spec, parsed))
        return resolved

    def resolve_order(self, query: ListQuery) -> list[tuple[str, SortDirection]]:
        """Sort keys, most significant first.

        A sortable column from the query wins (ascending unless told
        otherwise). Without one, the default order is used and a requested
        direction applies to its first column.
        """
        if query.sort in self.sortable:
            return [(query.sort, query.direction or "asc")]
        order = list(self.default_order)
        if query.direction and order:
            order[0] = (order[0][0], query.direction)
        return order


AGENT_LIST = ListSpec(
    search=("name", "email", "phone", "license_number"),
    filters={"status": FilterSpec(field="is_active", parse=active_flag)},
    sortable=("name", "email", "created_at", "experience_years"),
    default_order=(("name", "asc"),),
    per_page=15,
)

AMENITY_LIST = ListSpec(
    search=("name", "description"),
    filters={"category": FilterSpec(field="category")},
    sortable=("name", "category", "sort_order", "created_at"),
    default_order=(("name", "asc"),),
    per_page=15,
)

LOCATION_LIST = ListSpec(
    search=("name", "slug", "description"),
    filters={"type": FilterSpec(field="type", parse=enum_value(LocationType))},
    sortable=("name", "type", "sort_order", "created_at"),
    default_order=(("name", "asc"),),
    per_page=15,
)

PROPERTY_TYPE_LIST = ListSpec(
    search=("name", "description"),
    sortable=("name", "sort_order", "created_at"),
    default_order=(("sort_order", "asc"), ("name", "asc")),
    per_page=10,
)

PROPERTY_LIST = ListSpec(
    search=("title", "address"),
    filters={
        "status": FilterSpec(field="status", parse=enum_value(PropertyStatus)),
        "listing_type": FilterSpec(field="listing_type", parse=enum_value(ListingType)),
        "property_type_id": FilterSpec(field="property_type_id", parse=uuid_value),
        "location_id": FilterSpec(field="location_id", parse=uuid_value),
        "agent_id": FilterSpec(field="agent_id", parse=uuid_value),
    },
    sortable=("title", "price", "created_at", "views_count"),
    default_order=(("created_at", "desc"),),
    per_page=10,
)

POST_LIST = ListSpec(
    search=("title", "excerpt", "content"),
    filters={
        "status": FilterSpec(field="status", parse=enum_value(PostStatus)),
        "category_id": FilterSpec(field="category_id", parse=uuid_value),
        "author_id": FilterSpec(field="author_id", parse=uuid_value),
    },
    sortable=("title", "published_at", "created_at", "views_count"),
    default_order=(("created_at", "desc"),),
    per_page=15,
)

TAG_LIST = ListSpec(
    search=("name", "description", "slug"),
    sortable=("name", "sort_order", "created_at"),
    default_order=(("sort_order", "asc"), ("name", "asc")),
    per_page=10,
)

CATEGORY_LIST = ListSpec(
    search=("name", "description"),
    sortable=("name", "sort_order", "created_at"),
    default_order=(("sort_order", "asc"), ("name", "asc")),
    per_page=10,
)

MEDIA_LIST = ListSpec(
    search=("name", "original_name", "description", "alt_text"),
    filters={"type": FilterSpec(field="type", parse=enum_value(MediaType))},
    sortable=("name", "size", "created_at"),
    default_order=(("created_at", "desc"),),
    per_page=12,
)

COMMENT_LIST = ListSpec(
    search=("content", "author_name", "author_email"),
    filters={
        "status": FilterSpec(field="status", parse=enum_value(CommentStatus)),
        "post_id": FilterSpec(field="post_id", parse=uuid_value),
        "user_type": FilterSpec(parse=enum_value(CommentAuthorType)),
    },
    sortable=("created_at", "likes_count", "status"),
    default_order=(("created_at", "desc"),),
    per_page=15,
)

USER_LIST = ListSpec(
    search=("name", "email"),
    filters={"role": FilterSpec()},
    sortable=("name", "email", "created_at"),
    default_order=(("created_at", "desc"),),
    per_page=15,
)

TEAM_LIST = ListSpec(
    search=("name",),
    filters={"owner_id": FilterSpec(field="owner_id", parse=uuid_value)},
    sortable=("name", "created_at"),
    default_order=(("created_at", "desc"),),
    per_page=15,
)
