"""Unit tests for GeoFenceService."""

import math

import pytest

from civic.adapter.geolocation import MockGeolocationClient
from civic.config import GeoFenceSettings
from civic.domain.service import GeoFenceService, haversine_distance_km
from civic.domain.value import Coordinates, GeoFenceStatus
from tests.harness import create_env_fixture

unit_env = create_env_fixture()

SOROCABA = Coordinates(latitude=-23.4961, longitude=-47.4561)
VOTORANTIM = Coordinates(latitude=-23.5467, longitude=-47.4378)
SAO_PAULO = Coordinates(latitude=-23.5505, longitude=-46.6333)


def _service(
    client: MockGeolocationClient | None = None, **settings
) -> GeoFenceService:
    return GeoFenceService(
        GeoFenceSettings(**settings), client or MockGeolocationClient()
    )


class TestHaversine:
    """Tests for the great-circle distance."""

    def test_same_point_is_zero(self):
        assert haversine_distance_km(SOROCABA, SOROCABA) == 0.0

    def test_symmetric(self):
        assert haversine_distance_km(SOROCABA, SAO_PAULO) == pytest.approx(
            haversine_distance_km(SAO_PAULO, SOROCABA)
        )

    def test_one_degree_of_latitude(self):
        """One degree along a meridian is R * pi / 180."""
        a = Coordinates(latitude=0, longitude=0)
        b = Coordinates(latitude=1, longitude=0)

        assert haversine_distance_km(a, b) == pytest.approx(6371.0 * math.pi / 180)

    def test_sorocaba_to_sao_paulo(self):
        assert haversine_distance_km(SOROCABA, SAO_PAULO) == pytest.approx(
            84.3, abs=1.0
        )


class TestClassify:
    """Tests for classify method."""

    def test_centre_is_inside(self):
        result = _service().classify(SOROCABA)

        assert result.status == GeoFenceStatus.INSIDE
        assert result.distance_km == 0.0
        assert result.message == "Você está em Sorocaba!"

    def test_neighbouring_town_is_inside(self):
        result = _service().classify(VOTORANTIM)

        assert result.status == GeoFenceStatus.INSIDE
        assert result.distance_km < 20.0

    def test_far_city_is_outside(self):
        result = _service().classify(SAO_PAULO)

        assert result.status == GeoFenceStatus.OUTSIDE
        assert result.message == "Você precisa estar em Sorocaba para votar"
        assert result.radius_km == 20.0

    def test_boundary_counts_as_inside(self):
        """A point exactly at the radius should be inside."""
        distance = haversine_distance_km(VOTORANTIM, SOROCABA)

        result = _service(radius_km=distance).classify(VOTORANTIM)

        assert result.status == GeoFenceStatus.INSIDE

    def test_just_past_boundary_is_outside(self):
        distance = haversine_distance_km(VOTORANTIM, SOROCABA)

        result = _service(radius_km=distance - 1e-6).classify(VOTORANTIM)

        assert result.status == GeoFenceStatus.OUTSIDE


class TestCheckLocation:
    """Tests for check_location method."""

    @pytest.mark.asyncio
    async def test_device_coordinates_are_classified(self):
        client = MockGeolocationClient(SAO_PAULO)

        result = await _service(client).check_location(
            coordinates=VOTORANTIM, client_ip="203.0.113.7"
        )

        assert result.status == GeoFenceStatus.INSIDE
        assert client.lookups == []

    @pytest.mark.asyncio
    async def test_reported_error_is_unresolved(self):
        """A device error should yield unresolved without any lookup."""
        client = MockGeolocationClient(SOROCABA)

        result = await _service(client).check_location(
            client_ip="203.0.113.7", reported_error="permission denied"
        )

        assert result.status == GeoFenceStatus.UNRESOLVED
        assert result.distance_km is None
        assert "localização" in result.message
        assert client.lookups == []

    @pytest.mark.asyncio
    async def test_falls_back_to_ip_lookup(self):
        client = MockGeolocationClient(SAO_PAULO)

        result = await _service(client).check_location(client_ip="203.0.113.7")

        assert result.status == GeoFenceStatus.OUTSIDE
        assert client.lookups == ["203.0.113.7"]

    @pytest.mark.asyncio
    async def test_lookup_failure_is_unresolved(self):
        """An unavailable lookup should not raise."""
        result = await _service(MockGeolocationClient()).check_location(
            client_ip="203.0.113.7"
        )

        assert result.status == GeoFenceStatus.UNRESOLVED

    @pytest.mark.asyncio
    async def test_nothing_to_go_on_is_unresolved(self):
        result = await _service().check_location()

        assert result.status == GeoFenceStatus.UNRESOLVED

    @pytest.mark.asyncio
    async def test_container_wires_configured_fence(self, unit_env):
        """The injected service should use the Sorocaba defaults."""
        service = await unit_env.get(GeoFenceService)

        result = await service.check_location(client_ip="198.51.100.1")

        assert result.city_name == "Sorocaba"
        assert result.status == GeoFenceStatus.INSIDE
