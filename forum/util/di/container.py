"""Container assembly for the running API."""

from dishka import AsyncContainer, make_async_container
from dishka.integrations.fastapi import FastapiProvider, setup_dishka
from fastapi import FastAPI

from forum.util.di import PROVIDERS, get_provider


def create_container() -> AsyncContainer:
    """Build the production container: PostgreSQL and Cloudinary."""
    providers = [get_provider(base)() for base in PROVIDERS]
    return make_async_container(*providers, FastapiProvider())


def setup_di(app: FastAPI, container: AsyncContainer) -> None:
    """Attach a container to the app so routes can use ``FromDishka``.

    Tests call this again with an in-memory container, which replaces the
    production one.
    """
    setup_dishka(container, app)
