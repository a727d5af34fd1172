"""Base classes for domain services."""

from datetime import datetime
from typing import Any, ClassVar, Generic, TypeVar
from uuid import UUID, uuid4

import logfire
from pydantic import BaseModel

from estate.domain.error import NotFoundError
from estate.domain.repository import CrudRepository
from estate.domain.value import ListQuery, Page

ModelT = TypeVar("ModelT", bound=BaseModel)
IdT = TypeVar("IdT", bound=UUID)


class Service:
    """Base class for all domain services.

    Domain services contain business logic that doesn't naturally belong
    to a single entity or spans multiple entities/aggregates.
    """

    pass


def revise(entity: ModelT, changes: dict[str, Any]) -> ModelT:
    """Validated copy of an entity with changes applied and updated_at bumped."""
    data = entity.model_dump()
    data.update(changes)
    data["updated_at"] = datetime.now()
    return type(entity).model_validate(data)


class CrudService(Service, Generic[ModelT, IdT]):
    """List, show, create, update and delete for one entity.

    Subclasses set ``model`` and ``resource`` and may override the hooks:
    ``_prepare`` adjusts incoming fields, ``_check_save`` enforces rules on
    the entity about to be written, ``_check_delete`` refuses deletion.
    """

    model: ClassVar[type[BaseModel]]
    resource: ClassVar[str]

    def __init__(self, repository: CrudRepository[ModelT, IdT]) -> None:
        self.repository = repository

    @property
    def label(self) -> str:
        return self.model.__name__

    async def _prepare(
        self, fields: dict[str, Any], current: ModelT | None
    ) -> dict[str, Any]:
        return fields

    async def _check_save(self, entity: ModelT, current: ModelT | None) -> None:
        pass

    async def _check_delete(self, entity: ModelT) -> None:
        pass

    async def list_page(self, query: ListQuery) -> Page[ModelT]:
        """One page of entities matching the query."""
        return await self.repository.find_page(query)

    async def get(self, entity_id: IdT) -> ModelT:
        """Fetch an entity or raise NotFoundError."""
        entity = await self.repository.find_by_id(entity_id)
        if entity is None:
            logfire.warn(f"{self.label} not found", id=str(entity_id))
            raise NotFoundError(self.label, str(entity_id))
        return entity

    async def create(self, fields: dict[str, Any]) -> ModelT:
        """Validate and store a new entity."""
        with logfire.span(f"{self.resource}_service.create"):
            fields = await self._prepare(dict(fields), None)
            entity = self.model.model_validate({"id": uuid4(), **fields})
            await self._check_save(entity, None)
            saved = await self.repository.save(entity)
            logfire.info(f"{self.label} created", id=str(saved.id))
            return saved

    async def update(self, entity_id: IdT, fields: dict[str, Any]) -> ModelT:
        """Apply a partial update to an existing entity."""
        with logfire.span(f"{self.resource}_service.update", id=str(entity_id)):
            current = await self.get(entity_id)
            fields = await self._prepare(dict(fields), current)
            entity = revise(current, fields)
            await self._check_save(entity, current)
            saved = await self.repository.save(entity)
            logfire.info(
                f"{self.label} updated", id=str(entity_id), fields=sorted(fields)
            )
            return saved

    async def delete(self, entity_id: IdT) -> None:
        """Delete an entity unless a rule refuses it."""
        with logfire.span(f"{self.resource}_service.delete", id=str(entity_id)):
            entity = await self.get(entity_id)
            await self._check_delete(entity)
            await self.repository.delete(entity_id)
            logfire.info(f"{self.label} deleted", id=str(entity_id))
