"""Media store infrastructure providers."""

from dishka import Scope, provide

from forum.adapter.cloudinary import CloudinaryMediaStore
from forum.config import MediaSettings
from forum.domain.service import MediaStore
from forum.util.di.base import ProviderBase
from forum.util.error import ConfigurationError


class MediaProvider(ProviderBase):
    """Media store component base."""

    __mock_component__ = "media"


class ProdMediaProvider(MediaProvider):
    """Production media provider backed by Cloudinary."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_media_store(self, media_settings: MediaSettings) -> MediaStore:
        """Provide Cloudinary media store.

        Returns:
            Media store

        Raises:
            ConfigurationError: If Cloudinary credentials are not configured
        """
        if not media_settings.cloud_name:
            raise ConfigurationError("Cloudinary cloud name must be configured")
        if not media_settings.api_key or not media_settings.api_secret:
            raise ConfigurationError("Cloudinary API key and secret must be configured")

        return CloudinaryMediaStore(
            cloud_name=media_settings.cloud_name,
            api_key=media_settings.api_key,
            api_secret=media_settings.api_secret,
            folder=media_settings.folder,
            timeout=media_settings.upload_timeout_seconds,
        )
