"""Wire models for the forecast and geocoding APIs.

Validation is strict: numbers must be JSON numbers and strings must be
strings. Extra fields are ignored. Validation failures are reported as
DecodingError with the dotted wire path of the first offending field.
"""

from typing import Any

from pydantic import BaseModel, Field, ValidationError

from skycast.errors import DecodingError
from skycast.models.weather import ForecastRecord


class CurrentlyPayload(BaseModel):
    model_config = {"extra": "ignore", "strict": True}

    temperature: float
    summary: str
    icon: str
    precip_intensity: float = Field(alias="precipIntensity", ge=0.0)
    wind_bearing: int = Field(alias="windBearing", ge=0, le=359)
    wind_speed: float = Field(alias="windSpeed", ge=0.0)


class DailyDataPayload(BaseModel):
    model_config = {"extra": "ignore", "strict": True}

    temperature_low: float = Field(alias="temperatureLow")
    temperature_high: float = Field(alias="temperatureHigh")


class DailyPayload(BaseModel):
    model_config = {"extra": "ignore", "strict": True}

    data: list[DailyDataPayload] = Field(min_length=1)


class ForecastPayload(BaseModel):
    model_config = {"extra": "ignore", "strict": True}

    currently: CurrentlyPayload
    daily: DailyPayload


class GeocodingResult(BaseModel):
    model_config = {"extra": "ignore"}

    name: str = ""
    latitude: float
    longitude: float


class GeocodingResponse(BaseModel):
    model_config = {"extra": "ignore"}

    # Open-Meteo omits "results" entirely when nothing matches
    results: list[GeocodingResult] = []


def decode_forecast(raw: Any) -> ForecastRecord:
    """Decode a parsed forecast response body into a ForecastRecord."""
    try:
        payload = ForecastPayload.model_validate(raw)
    except ValidationError as e:
        first = e.errors()[0]
        raise DecodingError(wire_path(first["loc"]), first["msg"]) from e

    # Only the first daily entry (today) is used
    today = payload.daily.data[0]
    current = payload.currently
    return ForecastRecord(
        temperature=current.temperature,
        summary=current.summary,
        icon=current.icon,
        precipitation_intensity=current.precip_intensity,
        wind_bearing=current.wind_bearing,
        wind_speed=current.wind_speed,
        temperature_max=today.temperature_high,
        temperature_min=today.temperature_low,
    )


def wire_path(loc: tuple[int | str, ...]) -> str:
    """Render a pydantic error location as a dotted path, e.g. 'daily.data.0'."""
    if not loc:
        return "<root>"
    return ".".join(str(part) for part in loc)
