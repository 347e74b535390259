"""Dependency injection container."""

from dishka import AsyncContainer, make_async_container
from dishka.integrations.fastapi import FastapiProvider, setup_dishka
from fastapi import FastAPI

from jerga.util.di import PROVIDERS, get_provider


def create_container() -> AsyncContainer:
    """Build the production container from every provider's prod implementation.

    Nothing is constructed here; the engine and settings are created on
    first use.
    """
    provider_instances = [get_provider(base, use_mock=False)() for base in PROVIDERS]
    # FastapiProvider exposes the Request to REQUEST-scoped providers
    return make_async_container(*provider_instances, FastapiProvider())


def setup_di(app: FastAPI, container: AsyncContainer) -> None:
    """Attach the container to the app.

    The app's lifespan closes whichever container is attached last, which
    disposes the database engine's connection pool.

    Args:
        app: FastAPI application
        container: DI container
    """
    setup_dishka(container, app)
