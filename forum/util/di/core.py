"""Settings providers."""

from dishka import Scope, provide

from forum.config import AuthSettings, MediaSettings, PaginationSettings, Settings
from forum.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Reads ``Settings`` once per container and hands out its sections."""

    scope = Scope.APP

    @provide
    def provide_settings(self) -> Settings:
        return Settings()

    @provide
    def provide_auth_settings(self, settings: Settings) -> AuthSettings:
        return settings.auth

    @provide
    def provide_media_settings(self, settings: Settings) -> MediaSettings:
        return settings.media

    @provide
    def provide_pagination_settings(self, settings: Settings) -> PaginationSettings:
        return settings.pagination
