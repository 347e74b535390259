"""FastAPI application."""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from jerga.config import Settings
from jerga.interface.api.routes import (
    comments,
    dichos,
    discovery,
    flags,
    health,
    notifications,
    terms,
    users,
    votes,
)
from jerga.interface.error import register_error_handlers
from jerga.util.di.container import create_container, setup_di
from jerga.util.logging import setup_logging
from jerga.util.observability import instrument_fastapi


@asynccontextmanager
async def lifespan(app: FastAPI):
    yield
    await app.state.dishka_container.close()


def create_app() -> FastAPI:
    """Create FastAPI application.

    Note: Logfire should be configured before calling this function.
    In production, start_app.py handles this.
    """
    settings = Settings()
    setup_logging(settings)

    app_instance = FastAPI(
        title="Jerga API",
        description="Backend API for Jerga - a community dictionary of Spanish slang",
        version="0.1.0",
        lifespan=lifespan,
    )

    instrument_fastapi(app_instance)

    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=[
            settings.api.frontend_url,
            "http://localhost:3000",  # Local development
            "http://localhost:5173",  # Vite default
        ],
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS", "PATCH"],
        allow_headers=[
            "Authorization",
            "Content-Type",
            "Accept",
            "Origin",
            "User-Agent",
            "Cache-Control",
            "X-Requested-With",
            "X-Webhook-Secret",
        ],
        expose_headers=["Content-Length", "Content-Type", "Retry-After"],
        max_age=600,
    )

    container = create_container()
    setup_di(app_instance, container)

    register_error_handlers(app_instance)

    app_instance.include_router(health.router)
    app_instance.include_router(votes.router)
    app_instance.include_router(terms.router)
    app_instance.include_router(comments.router)
    app_instance.include_router(dichos.router)
    app_instance.include_router(discovery.router)
    app_instance.include_router(users.router)
    app_instance.include_router(notifications.router)
    app_instance.include_router(flags.router)

    return app_instance


# Create app instance for uvicorn
# Note: Logfire must be configured before this module is imported
app = create_app()
