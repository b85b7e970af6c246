"""Dependency injection container."""

from dishka import AsyncContainer, Provider, make_async_container
from dishka.integrations.fastapi import FastapiProvider, setup_dishka
from fastapi import FastAPI

from quill.util.di import PROVIDERS, get_provider


def make_container(providers: list[Provider]) -> AsyncContainer:
    """Assemble a container from provider instances.

    ``FastapiProvider`` is always added: the request gate reads the
    current ``Request`` from it.

    Args:
        providers: Instantiated providers

    Returns:
        Configured DI container
    """
    return make_async_container(*providers, FastapiProvider())


def create_container() -> AsyncContainer:
    """Build production container (all prod implementations).

    Settings are loaded from environment variables automatically.
    """
    return make_container([get_provider(base, use_mock=False)() for base in PROVIDERS])


def setup_di(app: FastAPI, container: AsyncContainer) -> None:
    """Attach the container to a FastAPI app.

    The container is stored on ``app.state.dishka_container`` and closed by
    the app's lifespan.
    """
    setup_dishka(container, app)
