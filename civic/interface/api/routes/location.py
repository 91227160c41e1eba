"""Geo-fence routes."""

import ipaddress

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Request
from pydantic import BaseModel, Field, model_validator

from civic.application.usecase.location import (
    CheckLocationRequest,
    CheckLocationUseCase,
)
from civic.config import Settings
from civic.domain.service import GeoFenceResult

router = APIRouter(prefix="/location", tags=["location"], route_class=DishkaRoute)


class CheckLocationAPIRequest(BaseModel):
    """API request for a geo-fence check.

    Send device coordinates when available; send ``error`` when the device
    refused or failed to provide them; send neither to fall back to an IP
    lookup.
    """

    latitude: float | None = Field(default=None, ge=-90, le=90)
    longitude: float | None = Field(default=None, ge=-180, le=180)
    error: str | None = Field(default=None, max_length=200)

    @model_validator(mode="after")
    def validate_coordinate_pair(self) -> "CheckLocationAPIRequest":
        """Require both coordinates or neither."""
        if (self.latitude is None) != (self.longitude is None):
            raise ValueError("latitude and longitude must be provided together")
        return self


def _client_ip(request: Request, trust_forwarded_for: bool) -> str | None:
    """Caller's IP address, or None if it is not a valid address.

    The first X-Forwarded-For hop is used only behind a trusted proxy.
    """
    candidate = request.client.host if request.client else None
    if trust_forwarded_for:
        forwarded = request.headers.get("x-forwarded-for")
        if forwarded:
            candidate = forwarded.split(",")[0].strip()

    if not candidate:
        return None
    try:
        return str(ipaddress.ip_address(candidate))
    except ValueError:
        return None


@router.post("/check", response_model=GeoFenceResult)
async def check_location(
    body: CheckLocationAPIRequest,
    request: Request,
    check_location_use_case: FromDishka[CheckLocationUseCase],
    settings: FromDishka[Settings],
) -> GeoFenceResult:
    """Classify the caller as inside or outside the geo-fence.

    An unobtainable position yields ``unresolved`` rather than an error.
    """
    return await check_location_use_case.execute(
        CheckLocationRequest(
            latitude=body.latitude,
            longitude=body.longitude,
            error=body.error,
            client_ip=_client_ip(request, settings.trust_forwarded_for),
        )
    )
