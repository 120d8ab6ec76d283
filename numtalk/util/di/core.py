"""Configuration providers."""

from dishka import Scope, provide

from numtalk.config import AuthSettings, Settings
from numtalk.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Settings read once from the environment and ``.env``."""

    scope = Scope.APP

    @provide
    def provide_settings(self) -> Settings:
        return Settings()

    @provide
    def provide_auth_settings(self, settings: Settings) -> AuthSettings:
        """Token signing settings for ``JWTService``."""
        return settings.auth
