"""Pydantic v2 configuration schema with strict validation."""

from pydantic import BaseModel, Field

from skycast.models.location import Location

DARKSKY_BASE_URL = "https://api.darksky.net/forecast"
OPEN_METEO_GEOCODING_URL = "https://geocoding-api.open-meteo.com/v1"
API_KEY_ENV = "SKYCAST_API_KEY"


class ForecastApiConfig(BaseModel):
    model_config = {"extra": "forbid", "frozen": True}

    base_url: str = DARKSKY_BASE_URL
    api_key: str = Field(default="", repr=False)
    timeout: float | None = Field(default=None, gt=0.0)  # None: httpx default
    max_retries: int = Field(default=0, ge=0)
    retry_base_delay: float = Field(default=1.0, ge=0.0)


class GeocoderConfig(BaseModel):
    model_config = {"extra": "forbid", "frozen": True}

    base_url: str = OPEN_METEO_GEOCODING_URL
    timeout: float = Field(default=10.0, gt=0.0)


class SkycastConfig(BaseModel):
    model_config = {"extra": "forbid", "frozen": True}

    api: ForecastApiConfig = ForecastApiConfig()
    geocoder: GeocoderConfig = GeocoderConfig()
    locations: list[Location] = []
