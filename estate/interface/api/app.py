"""FastAPI application."""

from dishka import AsyncContainer
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from estate.config import Settings
from estate.interface.api.errors import register_exception_handlers
from estate.interface.api.routes import (
    agents,
    amenities,
    categories,
    comments,
    health,
    locations,
    media,
    posts,
    properties,
    property_types,
    seo_settings,
    tags,
    teams,
    users,
)
from estate.util.di.container import create_container, setup_di
from estate.util.observability import instrument_fastapi


def create_app(container: AsyncContainer | None = None) -> FastAPI:
    """Create FastAPI application.

    Note: Logfire should be configured before calling this function.
    In production, start_app.py handles this.

    Args:
        container: DI container to use; the production container when omitted
    """
    settings = Settings()

    app_instance = FastAPI(
        title="Estate Admin API",
        description="Admin API for property listings, blog content and comment moderation",
        version="0.1.0",
    )

    instrument_fastapi(app_instance)

    # The admin front end sends the auth cookie, so credentials are allowed
    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=settings.api.allowed_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"],
        allow_headers=["Authorization", "Content-Type", "Accept", "Origin"],
        max_age=600,
    )

    setup_di(app_instance, container or create_container())
    register_exception_handlers(app_instance)

    app_instance.include_router(health.router)
    app_instance.include_router(agents.router)
    app_instance.include_router(amenities.router)
    app_instance.include_router(locations.router)
    app_instance.include_router(property_types.router)
    app_instance.include_router(properties.router)
    app_instance.include_router(posts.router)
    app_instance.include_router(tags.router)
    app_instance.include_router(categories.router)
    app_instance.include_router(media.router)
    app_instance.include_router(comments.public_router)
    app_instance.include_router(comments.router)
    app_instance.include_router(users.router)
    app_instance.include_router(teams.router)
    app_instance.include_router(seo_settings.router)

    return app_instance
