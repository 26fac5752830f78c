"""dishka providers for the forum API.

Every provider base is listed once in ``PROVIDERS``. A base without
subclasses is used as-is; a base with subclasses is a swappable component
(persistence, media) whose implementation is picked by ``__is_mock__``.
"""

from typing import Type

from forum.util.di.application import ProdApplicationProvider
from forum.util.di.base import Component, ProviderBase
from forum.util.di.core import ProdConfigProvider
from forum.util.di.domain import ProdDomainProvider
from forum.util.di.infrastructure import (
    MediaProvider,
    PersistenceProvider,
    ProdMediaProvider,
    ProdPersistenceProvider,
)

PROVIDERS: list[Type[ProviderBase]] = [
    ProdConfigProvider,
    ProdDomainProvider,
    ProdApplicationProvider,
    # Swappable in tests
    PersistenceProvider,
    MediaProvider,
]


def get_provider(
    base: Type[ProviderBase], use_mock: bool = False
) -> Type[ProviderBase]:
    """Resolve a provider base to the class that should be instantiated.

    Args:
        base: Entry from ``PROVIDERS``
        use_mock: Pick the in-memory implementation of a component

    Returns:
        Provider class (not instantiated)

    Raises:
        ValueError: If the component has no implementation of that kind
    """
    implementations = base.__subclasses__()
    if not implementations:
        return base

    for impl in implementations:
        if impl.__is_mock__ == use_mock:
            return impl

    kind = "mock" if use_mock else "production"
    raise ValueError(f"No {kind} implementation for {base.__mock_component__}")


__all__ = [
    "Component",
    "ProviderBase",
    "PROVIDERS",
    "get_provider",
    "ProdConfigProvider",
    "ProdDomainProvider",
    "ProdApplicationProvider",
    "MediaProvider",
    "PersistenceProvider",
    "ProdMediaProvider",
    "ProdPersistenceProvider",
]
