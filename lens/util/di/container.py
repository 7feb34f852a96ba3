"""Dependency injection container."""

from dishka import AsyncContainer, Provider, make_async_container
from dishka.integrations.fastapi import FastapiProvider, setup_dishka
from fastapi import FastAPI

from lens.util.di import PROVIDERS, get_provider


def create_container(*overrides: Provider) -> AsyncContainer:
    """Build the production container.

    Settings are loaded from environment variables automatically.

    Args:
        *overrides: Extra providers registered after the production ones,
            e.g. a config provider with fixed Settings for a script

    Returns:
        DI container wired with every production provider
    """
    providers = [get_provider(base, use_mock=False)() for base in PROVIDERS]
    # FastapiProvider exposes the current Request to request-scoped factories
    return make_async_container(*providers, FastapiProvider(), *overrides)


def setup_di(app: FastAPI, container: AsyncContainer) -> None:
    """Attach a container to the application.

    Routes declared with ``DishkaRoute`` resolve ``FromDishka[...]``
    parameters from this container, one request scope per HTTP request.

    Args:
        app: FastAPI application
        container: DI container
    """
    setup_dishka(container, app)
