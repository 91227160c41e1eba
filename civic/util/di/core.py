"""Core DI providers (non-mockable)."""

from dishka import Scope, provide

from civic.config import (
    AuthSettings,
    GeoFenceSettings,
    GeolocationSettings,
    Settings,
)
from civic.util.di.base import ProviderBase


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
    def provide_geofence_settings(self, settings: Settings) -> GeoFenceSettings:
        """Provide geo-fence settings."""
        return settings.geofence

    @provide(scope=Scope.APP)
    def provide_geolocation_settings(self, settings: Settings) -> GeolocationSettings:
        """Provide IP geolocation settings."""
        return settings.geolocation
