"""Named locations and per-location fetch results."""

from dataclasses import dataclass

from pydantic import BaseModel, Field

from skycast.errors import SkycastError
from skycast.models.weather import Coordinates, ForecastRecord


class Location(BaseModel):
    """A place to show weather for.

    Coordinates are optional; a location without them is resolved by name.
    """

    model_config = {"extra": "forbid", "frozen": True}

    name: str = Field(min_length=1)
    latitude: float | None = None
    longitude: float | None = None

    @property
    def coordinates(self) -> Coordinates | None:
        if self.latitude is None or self.longitude is None:
            return None
        return Coordinates(self.latitude, self.longitude)


@dataclass(frozen=True)
class LocationForecast:
    location: Location
    record: ForecastRecord | None = None
    error: SkycastError | None = None

    def __post_init__(self) -> None:
        if (self.record is None) == (self.error is None):
            raise ValueError("LocationForecast needs exactly one of record or error")

    @property
    def ok(self) -> bool:
        return self.record is not None
