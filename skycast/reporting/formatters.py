"""Output formatters for forecast records."""

import json

from skycast.models.location import LocationForecast
from skycast.models.weather import ForecastRecord

COMPASS_POINTS = ("N", "NE", "E", "SE", "S", "SW", "W", "NW")


def compass_point(bearing: int) -> str:
    """Nearest 8-wind compass point for a bearing in degrees."""
    return COMPASS_POINTS[round((bearing % 360) / 45) % 8]


def format_record_text(r: ForecastRecord, label: str = "") -> str:
    """Plain text forecast for the terminal."""
    header = f"=== {label} ===" if label else "=== Forecast ==="
    lines = [
        header,
        f"{r.summary} ({r.condition})",
        f"Temperature: {r.temperature:.1f} | "
        f"High: {r.temperature_max:.1f} | Low: {r.temperature_min:.1f}",
        f"Wind: {r.wind_speed:.1f} from {compass_point(r.wind_bearing)} "
        f"({r.wind_bearing}°)",
        f"Precipitation: {r.precipitation_intensity:.3f}",
    ]
    return "\n".join(lines)


def record_to_dict(r: ForecastRecord) -> dict:
    return {
        "temperature": r.temperature,
        "summary": r.summary,
        "icon": r.icon,
        "precipitation_intensity": r.precipitation_intensity,
        "wind_bearing": r.wind_bearing,
        "wind_speed": r.wind_speed,
        "temperature_max": r.temperature_max,
        "temperature_min": r.temperature_min,
        "condition": str(r.condition),
    }


def format_record_json(r: ForecastRecord) -> str:
    """JSON forecast for programmatic consumption."""
    return json.dumps(record_to_dict(r), indent=2)


def format_locations_text(results: list[LocationForecast]) -> str:
    blocks = []
    for result in results:
        if result.record is not None:
            blocks.append(format_record_text(result.record, result.location.name))
        else:
            blocks.append(f"=== {result.location.name} ===\nError: {result.error}")
    return "\n\n".join(blocks)


def format_locations_json(results: list[LocationForecast]) -> str:
    data = [
        {
            "location": result.location.name,
            "forecast": record_to_dict(result.record) if result.record else None,
            "error": str(result.error) if result.error else None,
        }
        for result in results
    ]
    return json.dumps(data, indent=2)
