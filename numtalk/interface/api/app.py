"""FastAPI application."""

from dishka import AsyncContainer
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from numtalk.config import Settings
from numtalk.interface.api.routes import comments, health, nodes, posts
from numtalk.util.di.container import create_container, setup_di
from numtalk.util.observability import instrument_fastapi


def create_app(
    settings: Settings | None = None, container: AsyncContainer | None = None
) -> FastAPI:
    """Create FastAPI application.

    Note: Logfire should be configured before calling this function.
    In production, start_app.py handles this.
    In tests, conftest.py does.

    Args:
        settings: Application settings (loaded from environment if omitted)
        container: DI container (production container if omitted)
    """
    settings = settings or Settings()

    app_instance = FastAPI(
        title="Number Talk API",
        description="Backend API for Number Talk - a discussion board for text posts and numeric chains",
        version="0.1.0",
    )

    # Instrument FastAPI for automatic tracing of HTTP requests
    instrument_fastapi(app_instance)

    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=settings.api.cors_origins,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["Authorization", "Content-Type", "Accept", "Origin"],
        max_age=600,  # Cache preflight requests for 10 minutes
    )

    # Setup dependency injection
    setup_di(app_instance, container or create_container())

    # Register routes
    app_instance.include_router(health.router)
    app_instance.include_router(posts.router)
    app_instance.include_router(comments.router)
    app_instance.include_router(nodes.router)

    return app_instance
