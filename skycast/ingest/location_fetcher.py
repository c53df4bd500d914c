"""Concurrent forecast refresh for a list of named locations."""

import asyncio
import logging
from collections.abc import Iterable

from skycast.errors import SkycastError
from skycast.ingest.forecast_client import ForecastClient
from skycast.models.location import Location, LocationForecast

logger = logging.getLogger(__name__)


class LocationFetcher:
    def __init__(self, client: ForecastClient):
        self.client = client

    async def fetch_all(self, locations: Iterable[Location]) -> list[LocationForecast]:
        """Fetch every location concurrently.

        Results keep the input order. A failed location carries its error and
        does not affect the others.
        """
        return list(
            await asyncio.gather(*(self._fetch_one(loc) for loc in locations))
        )

    async def _fetch_one(self, location: Location) -> LocationForecast:
        try:
            record = await self.client.fetch_location(location)
        except SkycastError as e:
            logger.warning("Failed to fetch forecast for %s: %s", location.name, e)
            return LocationForecast(location, error=e)
        return LocationForecast(location, record=record)
