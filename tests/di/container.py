"""Test container builder with selective unmocking."""

from dishka import AsyncContainer, make_async_container
from dishka.integrations.fastapi import FastapiProvider

from forum.util.di import PROVIDERS, Component, get_provider


def build_test_container(unmock: set[Component] | None = None) -> AsyncContainer:
    """Build a container for tests.

    Settings, domain and application providers are always the production
    ones. Persistence and media use their in-memory implementations unless
    named in ``unmock``.

    Args:
        unmock: Components to run against real infrastructure

    Returns:
        Container usable directly or attached to an app with ``setup_di``

    Raises:
        ValueError: If an unknown component is named

    Examples:
        # Unit and HTTP tests - in-memory repositories and media store
        container = build_test_container()

        # Integration tests - real PostgreSQL, in-memory media store
        container = build_test_container(unmock={"persistence"})
    """
    unmock = unmock or set()
    _validate_unmock(unmock)

    providers = []
    for base in PROVIDERS:
        component = base.__mock_component__
        use_mock = component is not None and component not in unmock
        providers.append(get_provider(base, use_mock=use_mock)())

    # Same request context the API container declares
    return make_async_container(*providers, FastapiProvider())


def _validate_unmock(unmock: set[Component]) -> None:
    """Reject component names no provider declares.

    Raises:
        ValueError: If unknown components are named
    """
    known = {p.__mock_component__ for p in PROVIDERS if p.__mock_component__}

    unknown = unmock - known
    if unknown:
        raise ValueError(f"Unknown components: {unknown}")
