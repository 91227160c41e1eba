"""IP geolocation adapter."""

from .client import IpApiGeolocationClient, MockGeolocationClient

__all__ = ["IpApiGeolocationClient", "MockGeolocationClient"]
