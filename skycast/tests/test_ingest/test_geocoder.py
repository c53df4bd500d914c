"""Tests for the Open-Meteo geocoder with mocked httpx."""

import asyncio

import httpx
import pytest
import respx

from skycast.config.schema import GeocoderConfig
from skycast.errors import ResolutionError
from skycast.ingest.geocoder import OpenMeteoGeocoder
from skycast.models.weather import Coordinates

SEARCH_URL = "https://geo.test/v1/search"


@pytest.fixture
def geocoder() -> OpenMeteoGeocoder:
    return OpenMeteoGeocoder(base_url="https://geo.test/v1", timeout=1.0)


class TestResolve:
    @respx.mock
    def test_top_match(self, geocoder: OpenMeteoGeocoder, geocoding_payload: dict):
        route = respx.get(url__startswith=SEARCH_URL).mock(
            return_value=httpx.Response(200, json=geocoding_payload)
        )

        coords = asyncio.run(geocoder.resolve("  Berkeley "))

        assert coords == Coordinates(37.87159, -122.27275)
        params = route.calls[0].request.url.params
        assert params["name"] == "Berkeley"
        assert params["count"] == "1"

    @respx.mock
    def test_no_results(self, geocoder: OpenMeteoGeocoder):
        respx.get(url__startswith=SEARCH_URL).mock(
            return_value=httpx.Response(200, json={"generationtime_ms": 0.3})
        )

        with pytest.raises(ResolutionError) as exc_info:
            asyncio.run(geocoder.resolve("Atlantis"))
        assert exc_info.value.query == "Atlantis"

    @respx.mock
    def test_network_failure(self, geocoder: OpenMeteoGeocoder):
        respx.get(url__startswith=SEARCH_URL).mock(
            side_effect=httpx.ConnectError("refused")
        )

        with pytest.raises(ResolutionError) as exc_info:
            asyncio.run(geocoder.resolve("Berkeley"))
        assert isinstance(exc_info.value.__cause__, httpx.ConnectError)

    @respx.mock
    def test_http_error(self, geocoder: OpenMeteoGeocoder):
        respx.get(url__startswith=SEARCH_URL).mock(return_value=httpx.Response(500))

        with pytest.raises(ResolutionError):
            asyncio.run(geocoder.resolve("Berkeley"))

    @respx.mock
    def test_malformed_result(self, geocoder: OpenMeteoGeocoder):
        respx.get(url__startswith=SEARCH_URL).mock(
            return_value=httpx.Response(200, json={"results": [{"name": "X"}]})
        )

        with pytest.raises(ResolutionError):
            asyncio.run(geocoder.resolve("X"))

    def test_blank_name_makes_no_request(self, geocoder: OpenMeteoGeocoder):
        with respx.mock(assert_all_called=False) as router:
            route = router.get(url__startswith=SEARCH_URL).mock(
                return_value=httpx.Response(200, json={})
            )

            with pytest.raises(ResolutionError):
                asyncio.run(geocoder.resolve("   "))
            assert not route.called


class TestFromConfig:
    def test_from_config(self):
        g = OpenMeteoGeocoder.from_config(
            GeocoderConfig(base_url="https://geo.test/v1", timeout=3.0)
        )
        assert g.base_url == "https://geo.test/v1"
        assert g.timeout == 3.0
