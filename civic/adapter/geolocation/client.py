"""IP geolocation client implementation.

Looks up an approximate position for a client IP through the ip-api.com
JSON API.
"""

import ipaddress

import httpx
import logfire

from civic.domain.error import LocationUnavailableError
from civic.domain.service.geofence_service import GeolocationClient
from civic.domain.value import Coordinates


class IpApiGeolocationClient(GeolocationClient):
    """ip-api.com geolocation client.

    One request per lookup, no caching and no retry.
    """

    def __init__(self, lookup_url: str, timeout: float = 5.0) -> None:
        """Initialize client.

        Args:
            lookup_url: Base JSON endpoint (the IP is appended as a path segment)
            timeout: Request timeout in seconds
        """
        self.lookup_url = lookup_url.rstrip("/")
        self.timeout = timeout

    async def locate(self, ip: str) -> Coordinates:
        """Resolve an IP address to approximate coordinates.

        Args:
            ip: Client IP address

        Returns:
            Approximate coordinates

        Raises:
            LocationUnavailableError: If the lookup fails for any reason
        """
        try:
            address = ipaddress.ip_address(ip)
        except ValueError:
            logfire.warn("IP geolocation skipped: not an IP address")
            raise LocationUnavailableError("Client address is not an IP address")

        try:
            async with httpx.AsyncClient() as client:
                response = await client.get(
                    f"{self.lookup_url}/{address}",
                    params={"fields": "status,message,lat,lon"},
                    timeout=self.timeout,
                )

                if response.status_code != 200:
                    logfire.error(
                        "IP geolocation request failed",
                        status_code=response.status_code,
                    )
                    raise LocationUnavailableError(
                        f"Geolocation lookup failed: {response.status_code}"
                    )

                result = response.json()

        except httpx.HTTPError as e:
            logfire.error("IP geolocation HTTP error", error=str(e))
            raise LocationUnavailableError(f"HTTP error during geolocation: {e}")
        except ValueError as e:
            logfire.error("IP geolocation returned invalid JSON", error=str(e))
            raise LocationUnavailableError("Geolocation response was not JSON")

        if not isinstance(result, dict):
            logfire.error("IP geolocation returned unexpected payload")
            raise LocationUnavailableError("Geolocation response was not an object")

        if result.get("status") != "success":
            logfire.warn(
                "IP geolocation unresolved",
                message=result.get("message"),
            )
            raise LocationUnavailableError(
                f"Geolocation lookup failed: {result.get('message', 'unknown')}"
            )

        try:
            return Coordinates(latitude=result["lat"], longitude=result["lon"])
        except (KeyError, ValueError) as e:
            logfire.error("IP geolocation payload incomplete", error=str(e))
            raise LocationUnavailableError("Geolocation response missing coordinates")


class MockGeolocationClient(GeolocationClient):
    """Mock geolocation client for testing.

    Returns fixed coordinates without making real requests, or fails when
    constructed without any.
    """

    def __init__(self, coordinates: Coordinates | None = None) -> None:
        """Initialize mock client.

        Args:
            coordinates: Position to return (None to simulate failure)
        """
        self.coordinates = coordinates
        self.lookups: list[str] = []

    async def locate(self, ip: str) -> Coordinates:
        """Return the configured coordinates.

        Raises:
            LocationUnavailableError: If no coordinates are configured
        """
        self.lookups.append(ip)
        if self.coordinates is None:
            raise LocationUnavailableError("Mock geolocation unavailable")
        return self.coordinates
