"""IP geolocation infrastructure providers."""

from dishka import Scope, provide

from civic.adapter.geolocation.client import IpApiGeolocationClient
from civic.config import GeolocationSettings
from civic.domain.service import GeolocationClient
from civic.util.di.base import ProviderBase


class GeolocationProvider(ProviderBase):
    """Geolocation component base."""

    __mock_component__ = "geolocation"


class ProdGeolocationProvider(GeolocationProvider):
    """Production geolocation provider backed by ip-api.com."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_geolocation_client(
        self, settings: GeolocationSettings
    ) -> GeolocationClient:
        """Provide IP geolocation client."""
        return IpApiGeolocationClient(
            lookup_url=settings.ip_lookup_url,
            timeout=settings.timeout_seconds,
        )
