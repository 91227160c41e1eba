"""Check location use case."""

from pydantic import BaseModel, Field, model_validator

from civic.domain.service import GeoFenceService
from civic.domain.service.geofence_service import GeoFenceResult
from civic.domain.value import Coordinates


class CheckLocationRequest(BaseModel):
    """Check location request.

    Latitude and longitude come as a pair; ``error`` carries a device
    geolocation failure reported by the client (e.g. permission denied).
    """

    latitude: float | None = Field(default=None, ge=-90, le=90)
    longitude: float | None = Field(default=None, ge=-180, le=180)
    error: str | None = Field(default=None, max_length=200)
    client_ip: str | None = None

    @model_validator(mode="after")
    def validate_coordinate_pair(self) -> "CheckLocationRequest":
        """Require both coordinates or neither."""
        if (self.latitude is None) != (self.longitude is None):
            raise ValueError("latitude and longitude must be provided together")
        return self


class CheckLocationUseCase:
    """Use case for the one-shot geo-fence check."""

    def __init__(self, geofence_service: GeoFenceService) -> None:
        """Initialize check location use case.

        Args:
            geofence_service: Geo-fence domain service
        """
        self.geofence_service = geofence_service

    async def execute(self, request: CheckLocationRequest) -> GeoFenceResult:
        """Execute check location flow.

        Never raises for missing or unobtainable positions; those yield an
        UNRESOLVED result.
        """
        coordinates = None
        if request.latitude is not None and request.longitude is not None:
            coordinates = Coordinates(
                latitude=request.latitude, longitude=request.longitude
            )

        return await self.geofence_service.check_location(
            coordinates=coordinates,
            client_ip=request.client_ip,
            reported_error=request.error,
        )
