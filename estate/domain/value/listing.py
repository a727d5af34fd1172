"""List query and pagination values shared by every admin list."""

from math import ceil
from typing import Any, Generic, Literal, TypeVar

from pydantic import BaseModel, ConfigDict, Field, computed_field

from estate.domain.value.common import ValueObject

T = TypeVar("T")

SortDirection = Literal["asc", "desc"]


class ListQuery(ValueObject):
    """Search, filter, sort and page parameters for a list screen.

    Empty strings and None in ``filters`` mean "no filter". Unknown sort
    columns fall back to the repository default ordering.
    """

    search: str | None = None
    filters: dict[str, Any] = Field(default_factory=dict)
    sort: str | None = None
    direction: SortDirection | None = None
    page: int = Field(default=1, ge=1)
    per_page: int | None = Field(default=None, ge=1, le=100)

    @property
    def search_term(self) -> str | None:
        """Search text with surrounding whitespace removed, None if blank."""
        if self.search is None:
            return None
        term = self.search.strip()
        return term or None

    def active_filters(self) -> dict[str, Any]:
        """Filters that carry a value."""
        return {k: v for k, v in self.filters.items() if v not in (None, "")}

    def offset(self, per_page: int) -> int:
        return (self.page - 1) * per_page


class Page(BaseModel, Generic[T]):
    """One page of results plus pagination metadata."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    items: list[T]
    total: int
    current_page: int
    per_page: int

    @computed_field
    @property
    def last_page(self) -> int:
        """Last page number, at least 1 even when there are no rows."""
        return max(1, ceil(self.total / self.per_page))
