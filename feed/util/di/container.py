"""Dependency injection container."""

from dishka import AsyncContainer, make_async_container
from dishka.integrations.fastapi import FastapiProvider, setup_dishka
from fastapi import FastAPI

from feed.util.di import PROVIDERS, get_provider


def create_container() -> AsyncContainer:
    """Build the production container.

    Persistence is PostgreSQL and media goes to the local filesystem.
    Settings are loaded from environment variables automatically.
    """
    provider_instances = [get_provider(base, use_mock=False)() for base in PROVIDERS]
    return make_async_container(*provider_instances, FastapiProvider())


def setup_di(app: FastAPI, container: AsyncContainer) -> None:
    """Attach the container to the app.

    The container is stored on ``app.state.dishka_container``; the app
    lifespan closes it, releasing APP-scoped resources such as the engine.

    Args:
        app: FastAPI application
        container: DI container
    """
    setup_dishka(container, app)
