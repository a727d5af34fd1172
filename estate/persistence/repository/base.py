"""Shared PostgreSQL repository machinery for admin list entities."""

from abc import ABC, abstractmethod
from typing import Any, ClassVar, Generic, Optional, TypeVar
from uuid import UUID

import logfire
from sqlalchemy import Table, asc, desc, func, or_, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.sql import ColumnElement, Select

from estate.domain.value import ListQuery, Page
from estate.persistence.repository.listing import ListSpec

ModelT = TypeVar("ModelT")
IdT = TypeVar("IdT", bound=UUID)


class PostgresCrudRepository(ABC, Generic[ModelT, IdT]):
    """Find, page, count, save and delete over a single table.

    Subclasses set ``table``, ``resource`` and ``list_spec`` and provide the
    row mapping. Entities with join-table columns override ``_load`` and
    ``_after_save``.
    """

    table: ClassVar[Table]
    resource: ClassVar[str]
    list_spec: ClassVar[ListSpec]

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    # ------------------------------------------------------------------
    # Hooks
    # ------------------------------------------------------------------

    @abstractmethod
    def _to_model(self, row: dict[str, Any]) -> ModelT:
        pass

    @abstractmethod
    def _to_dict(self, entity: ModelT) -> dict[str, Any]:
        pass

    def _visible(self) -> list[ColumnElement[bool]]:
        """Clauses every read applies (e.g. hide soft-deleted rows)."""
        return []

    def _custom_filter(self, name: str, value: Any) -> Optional[ColumnElement[bool]]:
        """Clause for a filter without a plain column, None to skip it."""
        return None

    async def _load(self, rows: list[dict[str, Any]]) -> list[ModelT]:
        return [self._to_model(row) for row in rows]

    async def _after_save(self, entity: ModelT) -> None:
        pass

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def _where(self, query: ListQuery) -> list[ColumnElement[bool]]:
        clauses = self._visible()

        term = query.search_term
        if term and self.list_spec.search:
            clauses.append(
                or_(
                    *(
                        self.table.c[name].icontains(term, autoescape=True)
                        for name in self.list_spec.search
                    )
                )
            )

        for name, spec, value in self.list_spec.resolve_filters(query):
            if spec.field is not None:
                clauses.append(self.table.c[spec.field] == value)
            else:
                clause = self._custom_filter(name, value)
                if clause is not None:
                    clauses.append(clause)
        return clauses

    def _ordered(self, stmt: Select, query: ListQuery) -> Select:
        for name, direction in self.list_spec.resolve_order(query):
            column = self.table.c[name]
            stmt = stmt.order_by(desc(column) if direction == "desc" else asc(column))
        return stmt.order_by(self.table.c.id)

    async def _fetch(self, *clauses: ColumnElement[bool]) -> list[ModelT]:
        stmt = select(self.table).where(*self._visible(), *clauses)
        result = await self.session.execute(stmt)
        return await self._load([row._asdict() for row in result.fetchall()])

    async def find_by_id(self, entity_id: IdT) -> Optional[ModelT]:
        """Find an entity by ID."""
        with logfire.span(f"{self.resource}_repository.find_by_id", id=str(entity_id)):
            found = await self._fetch(self.table.c.id == entity_id)
            if not found:
                logfire.debug(f"{self.resource} not found", id=str(entity_id))
                return None
            return found[0]

    async def find_page(self, query: ListQuery) -> Page[ModelT]:
        """Search, filter, sort and paginate."""
        per_page = self.list_spec.page_size(query)
        with logfire.span(
            f"{self.resource}_repository.find_page",
            search=query.search_term,
            filters=query.active_filters(),
            sort=query.sort,
            page=query.page,
            per_page=per_page,
        ):
            where = self._where(query)

            count_stmt = select(func.count()).select_from(self.table).where(*where)
            total = (await self.session.execute(count_stmt)).scalar() or 0

            stmt = self._ordered(select(self.table).where(*where), query)
            stmt = stmt.limit(per_page).offset(query.offset(per_page))
            result = await self.session.execute(stmt)
            items = await self._load([row._asdict() for row in result.fetchall()])

            logfire.info(
                f"{self.resource} page loaded", total=total, returned=len(items)
            )
            return Page(
                items=items, total=total, current_page=query.page, per_page=per_page
            )

    async def count(self) -> int:
        """Count all visible entities."""
        stmt = select(func.count()).select_from(self.table).where(*self._visible())
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def _count_where(self, *clauses: ColumnElement[bool]) -> int:
        stmt = (
            select(func.count())
            .select_from(self.table)
            .where(*self._visible(), *clauses)
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def save(self, entity: ModelT) -> ModelT:
        """Save an entity (create or update)."""
        entity_id = entity.id  # type: ignore[attr-defined]
        with logfire.span(f"{self.resource}_repository.save", id=str(entity_id)):
            values = self._to_dict(entity)
            exists_stmt = select(self.table.c.id).where(self.table.c.id == entity_id)
            existing = (await self.session.execute(exists_stmt)).first()

            if existing:
                stmt = (
                    self.table.update()
                    .where(self.table.c.id == entity_id)
                    .values(**values)
                )
            else:
                stmt = self.table.insert().values(**values)
            await self.session.execute(stmt)
            await self._after_save(entity)
            await self.session.flush()

            logfire.info(
                f"{self.resource} saved",
                id=str(entity_id),
                created=existing is None,
            )
            return entity

    async def delete(self, entity_id: IdT) -> None:
        """Delete an entity (hard delete)."""
        with logfire.span(f"{self.resource}_repository.delete", id=str(entity_id)):
            stmt = self.table.delete().where(self.table.c.id == entity_id)
            await self.session.execute(stmt)
            await self.session.flush()


class PostgresSluggedRepository(PostgresCrudRepository[ModelT, IdT]):
    """Adds slug lookups for tables with a unique ``slug`` column."""

    async def find_by_slug(self, slug: str) -> Optional[ModelT]:
        """Find an entity by slug."""
        found = await self._fetch(self.table.c.slug == slug)
        return found[0] if found else None

    async def slug_exists(self, slug: str, exclude_id: IdT | None = None) -> bool:
        """Check if a slug is used by another row, hidden rows included."""
        stmt = select(func.count()).select_from(self.table).where(
            self.table.c.slug == slug
        )
        if exclude_id is not None:
            stmt = stmt.where(self.table.c.id != exclude_id)
        result = await self.session.execute(stmt)
        exists = (result.scalar() or 0) > 0
        logfire.debug("Slug existence check", slug=slug, exists=exists)
        return exists
