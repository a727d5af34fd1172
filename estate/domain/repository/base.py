"""Generic repository contracts shared by every admin entity."""

from abc import ABC, abstractmethod
from typing import Generic, Optional, TypeVar
from uuid import UUID

from estate.domain.value import ListQuery, Page

ModelT = TypeVar("ModelT")
IdT = TypeVar("IdT", bound=UUID)


class CrudRepository(ABC, Generic[ModelT, IdT]):
    """Repository contract for an entity with an admin list screen.

    Implementations live in the persistence layer.
    """

    @abstractmethod
    async def find_by_id(self, entity_id: IdT) -> Optional[ModelT]:
        """Find an entity by ID.

        Args:
            entity_id: The entity's unique identifier

        Returns:
            The entity if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_page(self, query: ListQuery) -> Page[ModelT]:
        """Search, filter, sort and paginate.

        Args:
            query: Search text, filters, sort column and direction, page

        Returns:
            One page of entities with pagination metadata. A search that
            matches nothing returns an empty page with total=0.
        """
        pass

    @abstractmethod
    async def count(self) -> int:
        """Count all entities visible to the admin."""
        pass

    @abstractmethod
    async def save(self, entity: ModelT) -> ModelT:
        """Save an entity (create or update).

        Args:
            entity: The entity to save

        Returns:
            The saved entity
        """
        pass

    @abstractmethod
    async def delete(self, entity_id: IdT) -> None:
        """Delete an entity.

        Args:
            entity_id: The entity's unique identifier
        """
        pass


class SluggedRepository(CrudRepository[ModelT, IdT]):
    """Repository for entities addressed by a unique slug."""

    @abstractmethod
    async def find_by_slug(self, slug: str) -> Optional[ModelT]:
        """Find an entity by slug."""
        pass

    @abstractmethod
    async def slug_exists(self, slug: str, exclude_id: IdT | None = None) -> bool:
        """Check whether a slug is taken.

        Args:
            slug: Slug to check
            exclude_id: Entity to ignore (the one being updated)

        Returns:
            True if another entity already uses the slug
        """
        pass
