"""Mock providers for testing."""

from .media import MockMediaProvider
from .persistence import MockPersistenceProvider
from .container import build_test_container

__all__ = [
    "MockMediaProvider",
    "MockPersistenceProvider",
    "build_test_container",
]
