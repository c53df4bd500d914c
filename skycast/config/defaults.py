"""Default locations shown when the config lists none."""

from skycast.models.location import Location

DEFAULT_LOCATIONS: list[Location] = [
    Location(name="Berkeley", latitude=37.8716, longitude=-122.2727),
    Location(name="New York City", latitude=40.7128, longitude=-74.0060),
    Location(name="London", latitude=51.5074, longitude=-0.1278),
    Location(name="Tokyo", latitude=35.6762, longitude=139.6503),
]
