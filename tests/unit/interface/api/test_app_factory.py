"""Unit tests for the FastAPI app factory."""

from estate.interface.api.app import create_app
from tests.di import build_test_container


class TestCreateApp:
    def test_registers_admin_and_public_routes(self):
        # Act
        app = create_app(build_test_container())

        # Assert
        routes = {
            (method, route.path)
            for route in app.routes
            for method in getattr(route, "methods", None) or ()
        }
        assert ("GET", "/health") in routes
        assert ("GET", "/comments") in routes
        assert ("POST", "/comments") in routes
        assert ("POST", "/comments/bulk") in routes
        assert ("POST", "/posts/{post_id}/duplicate") in routes
        assert ("GET", "/seo-settings/group/{group}") in routes
