"""Unit tests for agent, catalog and property services."""

from decimal import Decimal
from uuid import uuid4

import pytest

from estate.domain.error import (
    BusinessRuleViolationError,
    ConflictError,
    ValidationError,
)
from estate.domain.repository import PropertyRepository
from estate.domain.service import (
    AgentService,
    AmenityService,
    FileStorage,
    LocationService,
    PropertyService,
    PropertyTypeService,
)
from estate.domain.value import AgentId, ListQuery, PropertyStatus
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked, no docker needed
unit_env = create_env_fixture()


async def _seed_references(unit_env):
    """Create a property type, location, agent and amenity."""
    property_type = await (await unit_env.get(PropertyTypeService)).create(
        {"name": "Apartment"}
    )
    location = await (await unit_env.get(LocationService)).create(
        {"name": "Gulshan"}
    )
    agent = await (await unit_env.get(AgentService)).create(
        {"name": "Rahim Uddin", "email": "rahim@example.com"}
    )
    amenity = await (await unit_env.get(AmenityService)).create(
        {"name": "Pool", "category": "outdoor"}
    )
    return property_type, location, agent, amenity


async def _create_property(unit_env, title: str = "Lake View Flat", **fields):
    property_type, location, agent, amenity = await _seed_references(unit_env)
    service = await unit_env.get(PropertyService)
    return await service.create(
        {
            "title": title,
            "price": Decimal("12500000"),
            "address": "Road 12, Gulshan 2",
            "property_type_id": property_type.id,
            "location_id": location.id,
            "agent_id": agent.id,
            "amenity_ids": [amenity.id],
            **fields,
        }
    )


class TestAgentService:
    """Tests for agent uniqueness, deletion and photos."""

    @pytest.mark.asyncio
    async def test_duplicate_email_conflicts(self, unit_env):
        # Arrange
        service = await unit_env.get(AgentService)
        await service.create({"name": "Rahim", "email": "rahim@example.com"})

        # Act & Assert
        with pytest.raises(ConflictError) as exc_info:
            await service.create({"name": "Karim", "email": "rahim@example.com"})

        assert exc_info.value.field == "email"

    @pytest.mark.asyncio
    async def test_duplicate_license_conflicts(self, unit_env):
        # Arrange
        service = await unit_env.get(AgentService)
        await service.create(
            {"name": "Rahim", "email": "rahim@example.com", "license_number": "L-1"}
        )

        # Act & Assert
        with pytest.raises(ConflictError) as exc_info:
            await service.create(
                {"name": "Karim", "email": "karim@example.com", "license_number": "L-1"}
            )

        assert exc_info.value.field == "license_number"

    @pytest.mark.asyncio
    async def test_update_may_keep_own_email(self, unit_env):
        # Arrange
        service = await unit_env.get(AgentService)
        agent = await service.create({"name": "Rahim", "email": "rahim@example.com"})

        # Act
        updated = await service.update(agent.id, {"phone": "+8801700000000"})

        # Assert
        assert updated.email == "rahim@example.com"
        assert updated.phone == "+8801700000000"

    @pytest.mark.asyncio
    async def test_delete_refused_while_agent_has_properties(self, unit_env):
        """An agent referenced by a property cannot be deleted."""
        # Arrange
        prop = await _create_property(unit_env)
        service = await unit_env.get(AgentService)

        # Act & Assert
        with pytest.raises(BusinessRuleViolationError, match="associated properties"):
            await service.delete(prop.agent_id)

        assert await service.get(prop.agent_id) is not None

    @pytest.mark.asyncio
    async def test_replace_photo_removes_previous_file(self, unit_env):
        # Arrange
        service = await unit_env.get(AgentService)
        storage = await unit_env.get(FileStorage)
        agent = await service.create({"name": "Rahim Uddin", "email": "r@example.com"})
        first = await service.replace_photo(agent.id, "me.jpg", "image/jpeg", b"one")

        # Act
        second = await service.replace_photo(agent.id, "me.png", "image/png", b"two")

        # Assert
        assert second.photo_path.startswith("agents/rahim-uddin-")
        assert second.photo_path.endswith(".png")
        assert not await storage.exists(first.photo_path)
        assert await storage.exists(second.photo_path)

    @pytest.mark.asyncio
    async def test_replace_photo_rejects_gif(self, unit_env):
        # Arrange
        service = await unit_env.get(AgentService)
        agent = await service.create({"name": "Rahim", "email": "r@example.com"})

        # Act & Assert
        with pytest.raises(ValidationError):
            await service.replace_photo(agent.id, "me.gif", "image/gif", b"gif")

    @pytest.mark.asyncio
    async def test_list_filters_by_status_and_searches(self, unit_env):
        # Arrange
        service = await unit_env.get(AgentService)
        await service.create({"name": "Rahim", "email": "rahim@example.com"})
        await service.create(
            {"name": "Karim", "email": "karim@example.com", "is_active": False}
        )

        # Act
        active = await service.list_page(ListQuery(filters={"status": "active"}))
        searched = await service.list_page(ListQuery(search="  KARIM "))
        unfiltered = await service.list_page(ListQuery(filters={"status": "bogus"}))

        # Assert
        assert [a.name for a in active.items] == ["Rahim"]
        assert [a.name for a in searched.items] == ["Karim"]
        assert unfiltered.total == 2


class TestCatalogRefusals:
    """Lookups used by a property cannot be deleted."""

    @pytest.mark.asyncio
    async def test_amenity_in_use_refused(self, unit_env):
        # Arrange
        prop = await _create_property(unit_env)
        service = await unit_env.get(AmenityService)

        # Act & Assert
        with pytest.raises(BusinessRuleViolationError, match="being used"):
            await service.delete(prop.amenity_ids[0])

    @pytest.mark.asyncio
    async def test_location_in_use_refused(self, unit_env):
        # Arrange
        prop = await _create_property(unit_env)
        service = await unit_env.get(LocationService)

        # Act & Assert
        with pytest.raises(BusinessRuleViolationError):
            await service.delete(prop.location_id)

    @pytest.mark.asyncio
    async def test_property_type_freed_after_property_deleted(self, unit_env):
        """Soft-deleted properties no longer hold their property type."""
        # Arrange
        prop = await _create_property(unit_env)
        property_service = await unit_env.get(PropertyService)
        type_service = await unit_env.get(PropertyTypeService)
        await property_service.delete(prop.id)

        # Act
        await type_service.delete(prop.property_type_id)

        # Assert
        page = await type_service.list_page(ListQuery())
        assert page.total == 0


class TestPropertyService:
    """Tests for references, slugs and soft deletes."""

    @pytest.mark.asyncio
    async def test_create_derives_slug(self, unit_env):
        # Act
        prop = await _create_property(unit_env, title="Lake View Flat")

        # Assert
        assert prop.slug == "lake-view-flat"
        assert prop.status == PropertyStatus.AVAILABLE

    @pytest.mark.asyncio
    async def test_unknown_agent_is_invalid(self, unit_env):
        # Arrange
        prop = await _create_property(unit_env)
        service = await unit_env.get(PropertyService)

        # Act & Assert
        with pytest.raises(ValidationError, match="agent_id"):
            await service.update(prop.id, {"agent_id": AgentId(uuid4())})

    @pytest.mark.asyncio
    async def test_bulk_delete_is_soft_and_skips_unknown(self, unit_env):
        # Arrange
        prop = await _create_property(unit_env)
        service = await unit_env.get(PropertyService)
        property_repo = await unit_env.get(PropertyRepository)

        # Act
        deleted = await service.bulk_delete([prop.id, uuid4()])

        # Assert
        assert deleted == 1
        assert await property_repo.find_by_id(prop.id) is None
        assert (await service.list_page(ListQuery())).total == 0
