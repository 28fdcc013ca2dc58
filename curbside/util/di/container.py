"""Dependency injection container."""

from dishka import AsyncContainer, make_async_container
from dishka.integrations.fastapi import FastapiProvider, setup_dishka
from fastapi import FastAPI

from curbside.config import Settings
from curbside.util.di import PROVIDERS, Component, get_provider


def create_container(settings: Settings | None = None) -> AsyncContainer:
    """Build the production container.

    The persistence component is chosen by `database.backend`:
    "postgres" uses the SQLAlchemy repositories, "memory" the in-memory
    store. Every other component uses its production implementation.

    Args:
        settings: Settings used to pick components (loaded from env if omitted)

    Returns:
        Configured DI container
    """
    settings = settings or Settings()
    in_memory: set[Component] = (
        {"persistence"} if settings.database.backend == "memory" else set()
    )

    provider_instances = [
        get_provider(
            base, use_mock=getattr(base, "__mock_component__", None) in in_memory
        )()
        for base in PROVIDERS
    ]
    # Include FastapiProvider for proper integration with FastAPI
    return make_async_container(*provider_instances, FastapiProvider())


def setup_di(app: FastAPI, container: AsyncContainer) -> None:
    """Setup dependency injection for FastAPI.

    Args:
        app: FastAPI application
        container: DI container
    """
    setup_dishka(container, app)
