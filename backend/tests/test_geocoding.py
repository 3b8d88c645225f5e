"""Tests for the Nominatim reverse geocoding client."""

import httpx
import pytest

from worldle.models.geo import Coordinate
from worldle.services.geocoding import GeocodingError, NominatimGeocoder

BERLIN = Coordinate(latitude=52.52, longitude=13.405)


def _geocoder(handler) -> NominatimGeocoder:
    return NominatimGeocoder(
        "https://geocoder.test/",
        "WorldleTests/1.0",
        transport=httpx.MockTransport(handler),
    )


class TestNominatimGeocoder:
    @pytest.mark.asyncio
    async def test_country_from_address(self):
        seen = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json={"address": {"country": "Germany", "country_code": "de"}})

        result = await _geocoder(handler).reverse_geocode(BERLIN)

        assert result.country == "Germany"
        assert result.coordinate == BERLIN
        request = seen[0]
        assert request.url.path == "/reverse"
        assert request.url.params["lat"] == "52.52"
        assert request.url.params["lon"] == "13.405"
        assert request.url.params["format"] == "jsonv2"
        assert request.url.params["accept-language"] == "en"
        assert request.headers["User-Agent"] == "WorldleTests/1.0"

    @pytest.mark.asyncio
    async def test_unable_to_geocode_means_no_country(self):
        def handler(request):
            return httpx.Response(200, json={"error": "Unable to geocode"})

        result = await _geocoder(handler).reverse_geocode(Coordinate(latitude=0.0, longitude=-140.0))
        assert result.country is None

    @pytest.mark.asyncio
    async def test_missing_address(self):
        def handler(request):
            return httpx.Response(200, json={"display_name": "somewhere"})

        result = await _geocoder(handler).reverse_geocode(BERLIN)
        assert result.country is None

    @pytest.mark.asyncio
    async def test_http_error(self):
        def handler(request):
            return httpx.Response(503, text="overloaded")

        with pytest.raises(GeocodingError):
            await _geocoder(handler).reverse_geocode(BERLIN)

    @pytest.mark.asyncio
    async def test_connection_error(self):
        def handler(request):
            raise httpx.ConnectError("connection refused", request=request)

        with pytest.raises(GeocodingError):
            await _geocoder(handler).reverse_geocode(BERLIN)

    @pytest.mark.asyncio
    async def test_invalid_json(self):
        def handler(request):
            return httpx.Response(200, content=b"<html>not json</html>")

        with pytest.raises(GeocodingError):
            await _geocoder(handler).reverse_geocode(BERLIN)

    @pytest.mark.asyncio
    async def test_unexpected_payload_shape(self):
        def handler(request):
            return httpx.Response(200, json=["not", "an", "object"])

        with pytest.raises(GeocodingError):
            await _geocoder(handler).reverse_geocode(BERLIN)
