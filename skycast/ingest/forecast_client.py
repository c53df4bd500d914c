"""Forecast API client: one GET per location, decoded into a ForecastRecord."""

import asyncio
import logging

import httpx

from skycast.config.schema import ForecastApiConfig
from skycast.errors import (
    ConfigError,
    DecodingError,
    InvalidCoordinate,
    NetworkError,
    ResolutionError,
)
from skycast.ingest.geocoder import Geocoder
from skycast.ingest.payload import decode_forecast
from skycast.models.location import Location
from skycast.models.weather import Coordinates, ForecastRecord

logger = logging.getLogger(__name__)

RETRY_STATUS_CODES = (429, 503)


class ForecastClient:
    """Async client for a Dark Sky style forecast endpoint.

    Used directly, every fetch opens and closes its own HTTP connection pool.
    Used as ``async with ForecastClient(...) as client``, fetches share one
    pool until the block exits. Retries are off unless ``max_retries`` is set.
    """

    def __init__(
        self,
        config: ForecastApiConfig,
        geocoder: Geocoder | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        if not config.api_key:
            raise ConfigError(
                "Forecast API key is not set (api.api_key or $SKYCAST_API_KEY)"
            )
        self.config = config
        self.geocoder = geocoder
        self._transport = transport
        self._http: httpx.AsyncClient | None = None

    async def __aenter__(self) -> "ForecastClient":
        self._http = self._new_http()
        return self

    async def __aexit__(self, *exc_info) -> None:
        if self._http is not None:
            await self._http.aclose()
            self._http = None

    def forecast_url(self, latitude: float, longitude: float) -> str:
        base = self.config.base_url.rstrip("/")
        return f"{base}/{self.config.api_key}/{latitude},{longitude}"

    async def fetch(self, latitude: float, longitude: float) -> ForecastRecord:
        """Fetch and decode the current forecast for a coordinate pair.

        Raises InvalidCoordinate before any request when the pair is out of
        range, NetworkError on transport or HTTP status failures, and
        DecodingError when the body lacks a required field.
        """
        if not Coordinates(latitude, longitude).is_valid():
            raise InvalidCoordinate(latitude, longitude)

        url = self.forecast_url(latitude, longitude)
        logger.debug("GET %s", self._redact(url))
        resp = await self._get(url)

        try:
            raw = resp.json()
        except ValueError as e:
            logger.warning(
                "Forecast body for %s,%s is not JSON", latitude, longitude
            )
            raise DecodingError("<body>", "not valid JSON") from e

        try:
            return decode_forecast(raw)
        except DecodingError as e:
            logger.warning(
                "Cannot decode forecast for %s,%s: %s", latitude, longitude, e
            )
            raise

    async def fetch_by_name(self, name: str) -> ForecastRecord:
        """Resolve a place name to coordinates, then fetch its forecast.

        No forecast request is made when resolution fails.
        """
        if self.geocoder is None:
            raise ResolutionError(name, "no geocoder configured")
        coords = await self.geocoder.resolve(name)
        logger.debug(
            "Resolved %r to %s,%s", name, coords.latitude, coords.longitude
        )
        return await self.fetch(coords.latitude, coords.longitude)

    async def fetch_location(self, location: Location) -> ForecastRecord:
        coords = location.coordinates
        if coords is None:
            return await self.fetch_by_name(location.name)
        return await self.fetch(coords.latitude, coords.longitude)

    def _new_http(self) -> httpx.AsyncClient:
        kwargs: dict = {"transport": self._transport}
        if self.config.timeout is not None:
            kwargs["timeout"] = self.config.timeout
        return httpx.AsyncClient(**kwargs)

    async def _get(self, url: str) -> httpx.Response:
        if self._http is not None:
            return await self._get_with_retry(self._http, url)
        async with self._new_http() as http:
            return await self._get_with_retry(http, url)

    async def _get_with_retry(
        self, http: httpx.AsyncClient, url: str
    ) -> httpx.Response:
        """GET with exponential backoff on 429/503 and transport errors.

        With max_retries == 0 this is a single attempt.
        """
        max_retries = self.config.max_retries
        for attempt in range(max_retries + 1):
            try:
                resp = await http.get(url)
                if resp.status_code in RETRY_STATUS_CODES and attempt < max_retries:
                    delay = self.config.retry_base_delay * (2**attempt)
                    logger.warning(
                        "Forecast API returned %d, retrying in %.1fs (attempt %d/%d)",
                        resp.status_code, delay, attempt + 1, max_retries,
                    )
                    await asyncio.sleep(delay)
                    continue
                resp.raise_for_status()
                return resp
            except httpx.HTTPStatusError as e:
                logger.warning(
                    "Forecast API error for %s: %d",
                    self._redact(url), e.response.status_code,
                )
                raise NetworkError(e) from e
            except httpx.RequestError as e:
                if attempt < max_retries:
                    delay = self.config.retry_base_delay * (2**attempt)
                    logger.warning(
                        "Forecast request error, retrying in %.1fs: %s", delay, e
                    )
                    await asyncio.sleep(delay)
                    continue
                logger.warning(
                    "Forecast request failed for %s: %s", self._redact(url), e
                )
                raise NetworkError(e) from e

    def _redact(self, url: str) -> str:
        return url.replace(self.config.api_key, "***")
