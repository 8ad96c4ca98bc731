"""FastAPI application."""

from contextlib import asynccontextmanager

import logfire
from dishka import AsyncContainer
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from meh.config import Settings
from meh.interface.api.routes import comments, health, tokens
from meh.interface.error import error_response, register_error_handlers
from meh.util.di.container import create_container, setup_di
from meh.util.observability import instrument_fastapi

SAFE_METHODS = ("GET", "HEAD", "OPTIONS")


def create_app(
    settings: Settings | None = None, container: AsyncContainer | None = None
) -> FastAPI:
    """Create FastAPI application.

    Note: Logfire should be configured before calling this function.
    In production, start_app.py handles this.

    Args:
        settings: Settings for the HTTP layer, loaded from environment when None
        container: DI container, the production container when None
    """
    settings = settings or Settings()
    container = container or create_container()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        yield
        # Disposes the database engine
        await container.close()

    app_instance = FastAPI(
        title="meh",
        description="Comment service for static blogs",
        version="0.1.0",
        lifespan=lifespan,
    )

    instrument_fastapi(app_instance)

    # The widget is embedded in the blog, requests come from its origin.
    # Mutations from other origins are refused by the check below.
    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["GET", "POST", "PUT", "PATCH", "DELETE"],
        allow_headers=["Authorization", "Content-Type"],
        max_age=86400,
    )

    @app_instance.middleware("http")
    async def check_origin(request: Request, call_next):
        """Refuse mutating requests that do not come from the blog."""
        if settings.is_dev or request.method in SAFE_METHODS:
            return await call_next(request)

        origin = request.headers.get("origin", "")
        if origin != settings.site_url.rstrip("/"):
            logfire.warn("Invalid origin", origin=origin, path=request.url.path)
            return error_response(f"Invalid origin {origin}", 403)
        return await call_next(request)

    register_error_handlers(app_instance)

    setup_di(app_instance, container)

    app_instance.include_router(health.router)
    app_instance.include_router(comments.router)
    app_instance.include_router(tokens.router)

    return app_instance
