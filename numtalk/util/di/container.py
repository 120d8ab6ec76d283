"""Production container and its FastAPI hookup."""

from dishka import AsyncContainer, make_async_container
from dishka.integrations.fastapi import FastapiProvider, setup_dishka
from fastapi import FastAPI

from numtalk.util.di import PROVIDERS, get_provider


def create_container() -> AsyncContainer:
    """Build the container used by the running service.

    Settings come from the environment when first requested.
    """
    providers = [get_provider(base)() for base in PROVIDERS]
    return make_async_container(*providers, FastapiProvider())


def setup_di(app: FastAPI, container: AsyncContainer) -> None:
    """Attach ``container`` to ``app`` so routes can use ``FromDishka``."""
    setup_dishka(container, app)
