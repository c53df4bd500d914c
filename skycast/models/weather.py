"""Forecast data models and the icon/precipitation classifier."""

from dataclasses import dataclass, field
from enum import StrEnum

# Rain intensity thresholds, in the forecast API's precipitation units.
MODERATE_RAIN_THRESHOLD = 0.5
HEAVY_RAIN_THRESHOLD = 4.0


class WeatherCondition(StrEnum):
    """Forecast condition category.

    Comparison with a raw string ignores case, but hashing follows the member
    name, so do not mix members and raw strings as set members or dict keys.
    """

    CLEAR = "clear"
    CLEAR_NIGHT = "clearNight"
    CLOUDY = "cloudy"
    CLOUDY_NIGHT = "cloudyNight"
    PARTLY_CLOUDY = "partlyCloudy"
    LIGHT_RAIN = "lightRain"
    MODERATE_RAIN = "moderateRain"
    HEAVY_RAIN = "heavyRain"
    THUNDER = "thunder"
    SNOW = "snow"
    SLEET = "sleet"
    WINDY = "windy"
    FOGGY = "foggy"

    def __eq__(self, other: object) -> bool:
        # Raw strings compare case-insensitively
        if isinstance(other, str):
            return self.value.lower() == other.lower()
        return NotImplemented

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        return result if result is NotImplemented else not result

    def __hash__(self) -> int:
        return hash(self._name_)


_ICON_CONDITIONS: dict[str, WeatherCondition] = {
    "clear-day": WeatherCondition.CLEAR,
    "clear-night": WeatherCondition.CLEAR_NIGHT,
    "snow": WeatherCondition.SNOW,
    "sleet": WeatherCondition.SLEET,
    "wind": WeatherCondition.WINDY,
    "fog": WeatherCondition.FOGGY,
    "cloudy": WeatherCondition.CLOUDY,
    "partly-cloudy-day": WeatherCondition.PARTLY_CLOUDY,
    "partly-cloudy-night": WeatherCondition.CLOUDY_NIGHT,
}


def classify(icon: str, precipitation_intensity: float) -> WeatherCondition:
    """Map a forecast icon code and precipitation intensity to a condition.

    Rain is split by intensity: below 0.5 is light, below 4 is moderate,
    anything else is heavy. Unrecognized icon codes fall back to CLEAR.
    """
    if icon == "rain":
        if precipitation_intensity < MODERATE_RAIN_THRESHOLD:
            return WeatherCondition.LIGHT_RAIN
        if precipitation_intensity < HEAVY_RAIN_THRESHOLD:
            return WeatherCondition.MODERATE_RAIN
        return WeatherCondition.HEAVY_RAIN
    return _ICON_CONDITIONS.get(icon, WeatherCondition.CLEAR)


@dataclass(frozen=True)
class Coordinates:
    latitude: float
    longitude: float

    def is_valid(self) -> bool:
        # NaN fails both comparisons
        return -90.0 <= self.latitude <= 90.0 and -180.0 <= self.longitude <= 180.0


@dataclass(frozen=True)
class ForecastRecord:
    temperature: float
    summary: str
    icon: str
    precipitation_intensity: float
    wind_bearing: int  # degrees, 0-359
    wind_speed: float
    temperature_max: float  # today's high
    temperature_min: float  # today's low
    condition: WeatherCondition = field(init=False)

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "condition", classify(self.icon, self.precipitation_intensity)
        )
