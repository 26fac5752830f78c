"""Mock media store provider for testing."""

from dishka import Scope, provide

from forum.adapter.cloudinary import InMemoryMediaStore
from forum.domain.service import MediaStore
from forum.util.di.infrastructure.media import MediaProvider


class MockMediaProvider(MediaProvider):
    """Mock media provider keeping uploads in memory."""

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_media_store(self) -> MediaStore:
        """Provide in-memory media store."""
        return InMemoryMediaStore()
