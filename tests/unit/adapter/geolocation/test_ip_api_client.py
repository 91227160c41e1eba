"""Unit tests for the ip-api.com geolocation client."""

from unittest.mock import patch

import httpx
import pytest

from civic.adapter.geolocation import IpApiGeolocationClient
from civic.domain.error import LocationUnavailableError

REAL_ASYNC_CLIENT = httpx.AsyncClient


def _client_factory(handler):
    """Build an AsyncClient replacement routed through a mock transport."""

    def factory(*args, **kwargs):
        return REAL_ASYNC_CLIENT(transport=httpx.MockTransport(handler))

    return factory


class TestIpApiGeolocationClient:
    """Tests for IpApiGeolocationClient.locate."""

    @pytest.mark.asyncio
    async def test_successful_lookup(self):
        """A success payload should yield its coordinates."""
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(
                200, json={"status": "success", "lat": -23.5, "lon": -47.46}
            )

        client = IpApiGeolocationClient("http://ip-api.test/json/")
        with patch(
            "civic.adapter.geolocation.client.httpx.AsyncClient",
            side_effect=_client_factory(handler),
        ):
            coordinates = await client.locate("203.0.113.7")

        assert (coordinates.latitude, coordinates.longitude) == (-23.5, -47.46)
        assert seen[0].url.path == "/json/203.0.113.7"
        assert seen[0].url.params["fields"] == "status,message,lat,lon"

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "response",
        [
            httpx.Response(500, text="oops"),
            httpx.Response(200, text="not json"),
            httpx.Response(200, json={"status": "fail", "message": "private range"}),
            httpx.Response(200, json={"status": "success"}),
            httpx.Response(200, json=[]),
            httpx.Response(200, json="oops"),
            httpx.Response(200, json=42),
        ],
    )
    async def test_failures_raise_location_unavailable(self, response):
        """Every kind of lookup failure should map to one domain error."""
        client = IpApiGeolocationClient("http://ip-api.test/json")
        with patch(
            "civic.adapter.geolocation.client.httpx.AsyncClient",
            side_effect=_client_factory(lambda request: response),
        ):
            with pytest.raises(LocationUnavailableError):
                await client.locate("10.0.0.1")

    @pytest.mark.asyncio
    async def test_transport_error_raises_location_unavailable(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectTimeout("timed out", request=request)

        client = IpApiGeolocationClient("http://ip-api.test/json")
        with patch(
            "civic.adapter.geolocation.client.httpx.AsyncClient",
            side_effect=_client_factory(handler),
        ):
            with pytest.raises(LocationUnavailableError, match="HTTP error"):
                await client.locate("203.0.113.7")

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "ip", ["../../internal/admin?x=1#", "testclient", "", "203.0.113.7/24"]
    )
    async def test_invalid_ip_is_rejected_without_request(self, ip):
        """Anything that is not an IP address should never be sent."""
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json={"status": "success", "lat": 0, "lon": 0})

        client = IpApiGeolocationClient("http://ip-api.test/json")
        with patch(
            "civic.adapter.geolocation.client.httpx.AsyncClient",
            side_effect=_client_factory(handler),
        ):
            with pytest.raises(LocationUnavailableError, match="not an IP"):
                await client.locate(ip)

        assert seen == []

    @pytest.mark.asyncio
    async def test_ipv6_address_is_normalised_in_path(self):
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(
                200, json={"status": "success", "lat": -23.5, "lon": -47.46}
            )

        client = IpApiGeolocationClient("http://ip-api.test/json")
        with patch(
            "civic.adapter.geolocation.client.httpx.AsyncClient",
            side_effect=_client_factory(handler),
        ):
            await client.locate("2001:DB8::0001")

        assert seen[0].url.path == "/json/2001:db8::1"
