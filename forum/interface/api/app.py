"""FastAPI application for the forum."""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from forum.config import Settings
from forum.interface.api.error_handlers import register_error_handlers
from forum.interface.api.routes import (
    auth,
    comments,
    health,
    posts,
    reactions,
    users,
)
from forum.util.di.container import create_container, setup_di
from forum.util.observability import instrument_fastapi, instrument_httpx

# Local frontends (CRA and Vite) on top of the configured one
DEV_ORIGINS = ["http://localhost:3000", "http://localhost:5173"]


def create_app() -> FastAPI:
    """Create the forum API.

    Logfire must already be configured: ``scripts/start_app.py`` does it in
    production, ``tests/conftest.py`` in tests.
    """
    settings = Settings()

    instrument_httpx()

    app_instance = FastAPI(
        title="Forum API",
        description="Posts, comments, likes and dislikes, with reputation points",
        version=settings.version,
    )
    instrument_fastapi(app_instance)

    # Credentials are allowed because the session may live in a cookie
    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=[settings.api.frontend_url, *DEV_ORIGINS],
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"],
        allow_headers=["Authorization", "Content-Type", "Accept", "Origin"],
        max_age=600,
    )

    setup_di(app_instance, create_container())

    for router_module in (health, auth, users, posts, comments, reactions):
        app_instance.include_router(router_module.router)

    register_error_handlers(app_instance)

    return app_instance


# Imported by uvicorn; Logfire is configured before this import
app = create_app()
