from typing import Optional, Protocol

import httpx
from pydantic import BaseModel

from ..models.geo import Coordinate


class GeocodingError(Exception):
    """Reverse geocoding call failure."""


class ReverseGeocodeResult(BaseModel):
    """What the geocoder knows about a point."""
    country: Optional[str] = None
    coordinate: Coordinate


class ReverseGeocoder(Protocol):
    async def reverse_geocode(self, coordinate: Coordinate) -> ReverseGeocodeResult:
        ...


class NominatimGeocoder:
    """Client for the Nominatim reverse geocoding API."""

    def __init__(
        self,
        api_url: str,
        user_agent: str,
        timeout: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.api_url = api_url.rstrip('/')
        self.timeout = timeout
        self.transport = transport
        self.headers = {
            "User-Agent": user_agent,
            "Accept": "application/json"
        }

    async def reverse_geocode(self, coordinate: Coordinate) -> ReverseGeocodeResult:
        """
        Find the country containing a coordinate.

        Args:
            coordinate: Point to look up

        Returns:
            ReverseGeocodeResult; country is None when the point is outside
            any country (open ocean, Antarctica)

        Raises:
            GeocodingError: On transport errors, HTTP errors or an unreadable payload
        """
        params = {
            "lat": coordinate.latitude,
            "lon": coordinate.longitude,
            "format": "jsonv2",
            "zoom": 3,  # country level
            "accept-language": "en",
        }

        async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
            try:
                response = await client.get(
                    f"{self.api_url}/reverse",
                    headers=self.headers,
                    params=params
                )
                response.raise_for_status()
                result = response.json()
            except httpx.HTTPStatusError as e:
                raise GeocodingError(f"Geocoder returned an error: {str(e)}") from e
            except httpx.RequestError as e:
                raise GeocodingError(f"Cannot reach geocoder: {str(e)}") from e
            except ValueError as e:
                raise GeocodingError(f"Invalid geocoder response: {str(e)}") from e

        if not isinstance(result, dict):
            raise GeocodingError("Invalid geocoder response: expected an object")

        # Nominatim answers {"error": "Unable to geocode"} for points at sea
        if "error" in result:
            return ReverseGeocodeResult(country=None, coordinate=coordinate)

        address = result.get("address") or {}
        return ReverseGeocodeResult(country=address.get("country"), coordinate=coordinate)
