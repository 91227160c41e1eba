"""Geo-fence domain service."""

import math

import logfire
from pydantic import BaseModel

from civic.config import GeoFenceSettings
from civic.domain.error import LocationUnavailableError
from civic.domain.value import Coordinates, GeoFenceStatus

from .base import Service

EARTH_RADIUS_KM = 6371.0

LOCATION_ERROR_MESSAGE = (
    "Por favor, permita o acesso à sua localização para usar o app."
)


class GeolocationClient:
    """Interface for one-shot position lookups by client IP."""

    async def locate(self, ip: str) -> Coordinates:
        """Resolve an IP address to approximate coordinates.

        Args:
            ip: Client IP address

        Returns:
            Approximate coordinates

        Raises:
            LocationUnavailableError: If no position can be obtained
        """
        raise NotImplementedError


class GeoFenceResult(BaseModel):
    """Outcome of a geo-fence check."""

    status: GeoFenceStatus
    city_name: str
    radius_km: float
    distance_km: float | None = None
    message: str


def haversine_distance_km(a: Coordinates, b: Coordinates) -> float:
    """Great-circle distance between two points on a spherical Earth.

    Args:
        a: First point
        b: Second point

    Returns:
        Distance in kilometres
    """
    lat1 = math.radians(a.latitude)
    lat2 = math.radians(b.latitude)
    d_lat = lat2 - lat1
    d_lon = math.radians(b.longitude - a.longitude)

    h = (
        math.sin(d_lat / 2) ** 2
        + math.cos(lat1) * math.cos(lat2) * math.sin(d_lon / 2) ** 2
    )
    # Clamp rounding noise before asin
    return 2 * EARTH_RADIUS_KM * math.asin(min(1.0, math.sqrt(h)))


class GeoFenceService(Service):
    """Classifies positions against a fixed radius around a reference city."""

    def __init__(
        self,
        settings: GeoFenceSettings,
        geolocation_client: GeolocationClient,
    ) -> None:
        """Initialize geo-fence service.

        Args:
            settings: Reference point, radius and city name
            geolocation_client: Fallback IP geolocation client
        """
        self.settings = settings
        self.geolocation_client = geolocation_client
        self.center = Coordinates(
            latitude=settings.center_latitude,
            longitude=settings.center_longitude,
        )

    def distance_from_center_km(self, coordinates: Coordinates) -> float:
        """Distance from the reference point."""
        return haversine_distance_km(coordinates, self.center)

    def classify(self, coordinates: Coordinates) -> GeoFenceResult:
        """Classify a position; the boundary counts as inside.

        Args:
            coordinates: Position to classify

        Returns:
            INSIDE or OUTSIDE result with the distance
        """
        distance = self.distance_from_center_km(coordinates)
        city = self.settings.city_name

        if distance <= self.settings.radius_km:
            status = GeoFenceStatus.INSIDE
            message = f"Você está em {city}!"
        else:
            status = GeoFenceStatus.OUTSIDE
            message = f"Você precisa estar em {city} para votar"

        return GeoFenceResult(
            status=status,
            city_name=city,
            radius_km=self.settings.radius_km,
            distance_km=round(distance, 3),
            message=message,
        )

    def unresolved(self, reason: str) -> GeoFenceResult:
        """Result for when no position is available."""
        logfire.warn("Location unresolved", reason=reason)
        return GeoFenceResult(
            status=GeoFenceStatus.UNRESOLVED,
            city_name=self.settings.city_name,
            radius_km=self.settings.radius_km,
            message=LOCATION_ERROR_MESSAGE,
        )

    async def check_location(
        self,
        coordinates: Coordinates | None = None,
        client_ip: str | None = None,
        reported_error: str | None = None,
    ) -> GeoFenceResult:
        """Run a one-shot geo-fence check.

        A device error reported by the caller wins; otherwise explicit
        coordinates are classified; otherwise the client IP is looked up.
        Failures yield an UNRESOLVED result rather than an exception.

        Args:
            coordinates: Device coordinates, if the caller has them
            client_ip: Caller's IP address, for the fallback lookup
            reported_error: Device geolocation error reported by the caller

        Returns:
            Geo-fence result
        """
        with logfire.span(
            "geofence_service.check_location",
            has_coordinates=coordinates is not None,
            reported_error=reported_error,
        ):
            if reported_error:
                return self.unresolved(reported_error)

            if coordinates is None:
                if not client_ip:
                    return self.unresolved("no coordinates and no client IP")
                try:
                    coordinates = await self.geolocation_client.locate(client_ip)
                except LocationUnavailableError as e:
                    return self.unresolved(str(e))

            result = self.classify(coordinates)
            logfire.info(
                "Location classified",
                status=result.status.value,
                distance_km=result.distance_km,
            )
            return result
