"""End-to-end tests for the admin CRUD endpoints."""

import asyncio
from uuid import uuid4

import pytest
from fastapi.testclient import TestClient

from estate.domain.repository import UserRepository
from estate.interface.api.app import create_app
from tests.conftest import make_user
from tests.di import build_test_container


@pytest.fixture
def container():
    return build_test_container()


@pytest.fixture
def client(container, auth_cookies):
    """Test client signed in as an admin."""
    return TestClient(create_app(container), cookies=auth_cookies)


@pytest.fixture
def anonymous_client(container):
    return TestClient(create_app(container))


def _create_property_references(client) -> dict[str, str]:
    property_type = client.post("/property-types", json={"name": "Apartment"}).json()
    location = client.post("/locations", json={"name": "Banani"}).json()
    agent = client.post(
        "/agents", json={"name": "Rahim Uddin", "email": "rahim@example.com"}
    ).json()
    return {
        "property_type_id": property_type["id"],
        "location_id": location["id"],
        "agent_id": agent["id"],
    }


class TestAuthentication:
    def test_health_needs_no_session(self, anonymous_client):
        # Act
        response = anonymous_client.get("/health")

        # Assert
        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    def test_admin_routes_need_session(self, anonymous_client):
        # Act
        response = anonymous_client.get("/agents")

        # Assert
        assert response.status_code == 401
        assert response.json()["detail"] == "Authentication required"

    def test_invalid_token_rejected(self, container):
        # Arrange
        client = TestClient(create_app(container), cookies={"auth_token": "garbage"})

        # Act
        response = client.get("/posts")

        # Assert
        assert response.status_code == 401


class TestAgentEndpoints:
    """CRUD round trip over /agents."""

    def test_create_update_delete(self, client):
        # Act
        created = client.post(
            "/agents", json={"name": "Rahim Uddin", "email": "rahim@example.com"}
        )
        agent_id = created.json()["id"]
        updated = client.patch(f"/agents/{agent_id}", json={"phone": "+8801711111111"})
        deleted = client.delete(f"/agents/{agent_id}")
        missing = client.get(f"/agents/{agent_id}")

        # Assert
        assert created.status_code == 201
        assert updated.json()["phone"] == "+8801711111111"
        assert updated.json()["email"] == "rahim@example.com"
        assert deleted.status_code == 204
        assert missing.status_code == 404

    def test_duplicate_email_is_field_error(self, client):
        # Arrange
        client.post("/agents", json={"name": "Rahim", "email": "rahim@example.com"})

        # Act
        response = client.post(
            "/agents", json={"name": "Karim", "email": "rahim@example.com"}
        )

        # Assert
        assert response.status_code == 422
        assert response.json()["errors"] == {
            "email": ["The email has already been taken."]
        }

    def test_delete_with_properties_is_refused(self, client):
        # Arrange
        references = _create_property_references(client)
        client.post(
            "/properties",
            json={
                "title": "Lake View Flat",
                "price": "9500000",
                "address": "Road 11, Banani",
                **references,
            },
        )

        # Act
        response = client.delete(f"/agents/{references['agent_id']}")

        # Assert
        assert response.status_code == 409
        assert response.json()["detail"] == (
            "Cannot delete agent with associated properties."
        )


class TestPropertyEndpoints:
    def test_list_paginates_and_bulk_deletes(self, client):
        # Arrange
        references = _create_property_references(client)
        ids = [
            client.post(
                "/properties",
                json={
                    "title": f"Flat {n}",
                    "price": "1000000",
                    "address": "Road 1",
                    **references,
                },
            ).json()["id"]
            for n in range(3)
        ]

        # Act
        first_page = client.get("/properties", params={"per_page": 2})
        bulk = client.post("/properties/bulk-delete", json={"ids": ids[:2]})
        remaining = client.get("/properties")

        # Assert
        assert first_page.json()["total"] == 3
        assert first_page.json()["last_page"] == 2
        assert len(first_page.json()["items"]) == 2
        assert bulk.json()["message"] == "2 properties deleted successfully."
        assert [p["id"] for p in remaining.json()["items"]] == [ids[2]]

    def test_unknown_reference_is_invalid(self, client):
        # Arrange
        references = _create_property_references(client)

        # Act
        response = client.post(
            "/properties",
            json={
                "title": "Lost Flat",
                "price": "1000000",
                "address": "Road 1",
                **references,
                "location_id": str(uuid4()),
            },
        )

        # Assert
        assert response.status_code == 422
        assert response.json()["detail"] == "The selected location_id is invalid."


class TestPostEndpoints:
    def test_publish_duplicate_and_slug(self, client, admin_id):
        # Arrange
        created = client.post("/posts", json={"title": "Buying in Dhaka"}).json()

        # Act
        published = client.post(f"/posts/{created['id']}/publish")
        copy = client.post(f"/posts/{created['id']}/duplicate")
        listing = client.get("/posts", params={"status": "published"})

        # Assert
        assert created["slug"] == "buying-in-dhaka"
        assert created["author_id"] == str(admin_id)
        assert published.json()["message"] == "Post published successfully."
        assert copy.status_code == 201
        assert copy.json()["slug"] == "buying-in-dhaka-copy"
        assert copy.json()["status"] == "draft"
        assert listing.json()["posts"]["total"] == 1
        assert listing.json()["stats"]["total"] == 2

    def test_toggle_featured_message(self, client):
        # Arrange
        post_id = client.post("/posts", json={"title": "Featured"}).json()["id"]

        # Act
        first = client.post(f"/posts/{post_id}/toggle-featured")
        second = client.post(f"/posts/{post_id}/toggle-featured")

        # Assert
        assert first.json()["message"] == "Post featured successfully."
        assert second.json()["message"] == "Post unfeatured successfully."


class TestUserEndpoints:
    def test_admin_cannot_delete_self(self, client, container, admin_id):
        # Arrange
        async def seed():
            users = await container.get(UserRepository)
            await users.save(make_user("Dana Admin").model_copy(update={"id": admin_id}))

        asyncio.run(seed())

        # Act
        response = client.delete(f"/users/{admin_id}")

        # Assert
        assert response.status_code == 409
        assert response.json()["detail"] == "You cannot delete your own account."


class TestSeoSettingEndpoints:
    def test_reset_then_read_group(self, client):
        # Act
        reset = client.post("/seo-settings/reset")
        general = client.get("/seo-settings/group/general")

        # Assert
        assert reset.json()["message"] == "SEO settings reset to defaults."
        assert general.json()["site_title"] == "Estate"

    def test_bulk_update_message(self, client):
        # Act
        response = client.put(
            "/seo-settings",
            json={
                "settings": [
                    {"key": "site_title", "value": "Homes BD"},
                    {"key": "twitter_handle", "value": "homesbd"},
                ]
            },
        )

        # Assert
        assert response.json()["message"] == "2 SEO settings updated successfully."
        assert client.get("/seo-settings/group/general").json()["site_title"] == (
            "Homes BD"
        )

    def test_analyze(self, client):
        # Act
        response = client.post(
            "/seo-settings/analyze", json={"title": "Short", "description": "Tiny"}
        )

        # Assert
        assert response.status_code == 200
        assert response.json()["has_og_image"] is False
        assert len(response.json()["recommendations"]) == 3
