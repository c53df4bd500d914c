"""Place-name resolution used by ForecastClient.fetch_by_name."""

import logging
from typing import Protocol

import httpx
from pydantic import ValidationError

from skycast.config.schema import OPEN_METEO_GEOCODING_URL, GeocoderConfig
from skycast.errors import ResolutionError
from skycast.ingest.payload import GeocodingResponse
from skycast.models.weather import Coordinates

logger = logging.getLogger(__name__)


class Geocoder(Protocol):
    async def resolve(self, name: str) -> Coordinates:
        """Return coordinates for a place name or raise ResolutionError."""
        ...


class OpenMeteoGeocoder:
    """Resolves names with the Open-Meteo geocoding search endpoint.

    Takes the top-ranked match only.
    """

    def __init__(
        self,
        base_url: str = OPEN_METEO_GEOCODING_URL,
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.base_url = base_url
        self.timeout = timeout
        self._transport = transport

    @classmethod
    def from_config(cls, config: GeocoderConfig) -> "OpenMeteoGeocoder":
        return cls(base_url=config.base_url, timeout=config.timeout)

    async def resolve(self, name: str) -> Coordinates:
        query = name.strip()
        if not query:
            raise ResolutionError(name, "empty name")

        url = f"{self.base_url.rstrip('/')}/search"
        params = {"name": query, "count": 1}
        try:
            async with httpx.AsyncClient(
                timeout=self.timeout, transport=self._transport
            ) as http:
                resp = await http.get(url, params=params)
                resp.raise_for_status()
                raw = resp.json()
        except (httpx.HTTPError, ValueError) as e:
            logger.warning("Geocoding request for %r failed: %s", query, e)
            raise ResolutionError(name, str(e)) from e

        try:
            payload = GeocodingResponse.model_validate(raw)
        except ValidationError as e:
            raise ResolutionError(name, "unexpected geocoder response") from e

        if not payload.results:
            raise ResolutionError(name)
        top = payload.results[0]
        return Coordinates(top.latitude, top.longitude)
