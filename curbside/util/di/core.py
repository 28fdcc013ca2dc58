"""Core DI providers (non-mockable)."""

from dishka import Scope, provide

from curbside.config import AuthSettings, Settings, VisibilitySettings
from curbside.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Production config provider - concrete, no mocks needed.

    Settings are loaded from environment variables and .env file automatically.
    """

    @provide(scope=Scope.APP)
    def provide_settings(self) -> Settings:
        """Provide application settings from environment."""
        return Settings()

    @provide(scope=Scope.APP)
    def provide_auth_settings(self, settings: Settings) -> AuthSettings:
        """Provide auth settings."""
        return settings.auth

    @provide(scope=Scope.APP)
    def provide_visibility_settings(self, settings: Settings) -> VisibilitySettings:
        """Provide participation gate and listing settings."""
        return settings.visibility
