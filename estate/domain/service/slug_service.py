"""Slug generation with per-table uniqueness."""

import re
from typing import Any
from uuid import UUID

import logfire

from estate.domain.error import ConflictError
from estate.domain.repository import SluggedRepository
from estate.domain.value import Slug

from .base import CrudService, IdT, ModelT, Service

MAX_SLUG_LENGTH = 255


def slugify(text: str, fallback: str) -> str:
    """Lowercase, hyphen-separated, URL-safe form of a title.

    Runs of anything other than ``a-z0-9`` become one hyphen. An empty
    result becomes ``fallback``.
    """
    slug = re.sub(r"[^a-z0-9]+", "-", text.lower()).strip("-")
    slug = slug[:MAX_SLUG_LENGTH].rstrip("-")
    return slug or fallback


class SlugService(Service):
    """Derives unique slugs for slugged tables."""

    async def unique_slug(
        self,
        repository: SluggedRepository[Any, Any],
        title: str,
        fallback: str,
        exclude_id: UUID | None = None,
    ) -> str:
        """First free candidate of ``base``, ``base-1``, ``base-2``, ...

        Args:
            repository: Table the slug must be unique in
            title: Text the slug is derived from
            fallback: Slug used when the title has no usable characters
            exclude_id: Row being updated, which may keep its own slug
        """
        with logfire.span("slug_service.unique_slug", title=title):
            base = slugify(title, fallback)
            candidate = base
            counter = 1
            while await repository.slug_exists(candidate, exclude_id):
                suffix = f"-{counter}"
                candidate = base[: MAX_SLUG_LENGTH - len(suffix)].rstrip("-") + suffix
                counter += 1
            logfire.debug("Slug chosen", slug=candidate, attempts=counter)
            return candidate

    async def resolve(
        self,
        repository: SluggedRepository[Any, Any],
        resource: str,
        title: str,
        requested: str | None,
        fallback: str,
        current: Any = None,
        current_title: str | None = None,
    ) -> str:
        """Slug to store on create or update.

        An explicit slug is kept as given and must not belong to another row.
        Otherwise a new slug is derived on create, and on update only when the
        title changed.

        Raises:
            ConflictError: If an explicit slug is taken
        """
        exclude_id = current.id if current is not None else None
        if requested:
            slug = Slug(requested).root
            if current is not None and slug == current.slug:
                return slug
            if await repository.slug_exists(slug, exclude_id):
                raise ConflictError(resource, "slug", slug)
            return slug
        if current is not None and title == current_title:
            return current.slug
        return await self.unique_slug(repository, title, fallback, exclude_id)


class SluggedCrudService(CrudService[ModelT, IdT]):
    """CrudService for tables whose slug is derived from a title field."""

    slug_source: str = "name"
    slug_fallback: str

    def __init__(
        self, repository: SluggedRepository[ModelT, IdT], slug_service: SlugService
    ) -> None:
        super().__init__(repository)
        self.slug_service = slug_service

    async def _prepare(
        self, fields: dict[str, Any], current: ModelT | None
    ) -> dict[str, Any]:
        title = fields.get(self.slug_source)
        if title is None and current is not None:
            title = getattr(current, self.slug_source)
        fields["slug"] = await self.slug_service.resolve(
            self.repository,
            self.resource,
            title or "",
            fields.get("slug"),
            self.slug_fallback,
            current=current,
            current_title=getattr(current, self.slug_source, None),
        )
        return fields
