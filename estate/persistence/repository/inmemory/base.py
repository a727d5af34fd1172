"""Shared in-memory repository machinery for testing."""

from enum import Enum
from typing import Any, ClassVar, Generic, Optional, TypeVar
from uuid import UUID

from estate.domain.value import ListQuery, Page
from estate.persistence.repository.listing import ListSpec

ModelT = TypeVar("ModelT")
IdT = TypeVar("IdT", bound=UUID)


def _comparable(value: Any) -> Any:
    if isinstance(value, Enum):
        return value.value
    return value


def _sort_key(name: str):
    def key(entity: Any) -> tuple:
        value = _comparable(getattr(entity, name))
        # None sorts after everything, like NULLS LAST
        return (value is None, value if value is not None else 0)

    return key


class InMemoryCrudRepository(Generic[ModelT, IdT]):
    """Dict-backed repository honouring the same ListSpec as PostgreSQL."""

    list_spec: ClassVar[ListSpec]

    def __init__(self) -> None:
        self._items: dict[IdT, ModelT] = {}

    def _visible(self, entity: ModelT) -> bool:
        return True

    def _custom_filter(self, entity: ModelT, name: str, value: Any) -> bool:
        return True

    def _all(self) -> list[ModelT]:
        return [e for e in self._items.values() if self._visible(e)]

    def _matches(self, entity: ModelT, query: ListQuery) -> bool:
        term = query.search_term
        if term and self.list_spec.search:
            needle = term.lower()
            haystack = [getattr(entity, name) for name in self.list_spec.search]
            if not any(v is not None and needle in str(v).lower() for v in haystack):
                return False

        for name, spec, value in self.list_spec.resolve_filters(query):
            if spec.field is not None:
                if _comparable(getattr(entity, spec.field)) != value:
                    return False
            elif not self._custom_filter(entity, name, value):
                return False
        return True

    async def find_by_id(self, entity_id: IdT) -> Optional[ModelT]:
        entity = self._items.get(entity_id)
        if entity is None or not self._visible(entity):
            return None
        return entity

    async def find_page(self, query: ListQuery) -> Page[ModelT]:
        per_page = self.list_spec.page_size(query)
        items = [e for e in self._all() if self._matches(e, query)]

        # Stable sorts, least significant key first
        items.sort(key=lambda e: str(e.id))  # type: ignore[attr-defined]
        for name, direction in reversed(self.list_spec.resolve_order(query)):
            items.sort(key=_sort_key(name), reverse=direction == "desc")

        offset = query.offset(per_page)
        return Page(
            items=items[offset : offset + per_page],
            total=len(items),
            current_page=query.page,
            per_page=per_page,
        )

    async def count(self) -> int:
        return len(self._all())

    async def save(self, entity: ModelT) -> ModelT:
        self._items[entity.id] = entity  # type: ignore[attr-defined]
        return entity

    async def delete(self, entity_id: IdT) -> None:
        self._items.pop(entity_id, None)


class InMemorySluggedRepository(InMemoryCrudRepository[ModelT, IdT]):
    """Adds slug lookups."""

    async def find_by_slug(self, slug: str) -> Optional[ModelT]:
        return next(
            (e for e in self._all() if e.slug == slug),  # type: ignore[attr-defined]
            None,
        )

    async def slug_exists(self, slug: str, exclude_id: IdT | None = None) -> bool:
        return any(
            e.slug == slug and e.id != exclude_id  # type: ignore[attr-defined]
            for e in self._items.values()
        )
