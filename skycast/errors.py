"""Error taxonomy for forecast retrieval.

Every failure a caller can see derives from SkycastError, so a caller that
only wants "did it work" can catch the base class.
"""


class SkycastError(Exception):
    """Base class for all skycast failures."""


class ConfigError(SkycastError):
    """Raised when configuration is missing or unusable."""


class InvalidCoordinate(SkycastError):
    def __init__(self, latitude: float, longitude: float):
        super().__init__(
            f"Invalid coordinate ({latitude}, {longitude}): latitude must be "
            "in [-90, 90] and longitude in [-180, 180]"
        )
        self.latitude = latitude
        self.longitude = longitude


class NetworkError(SkycastError):
    """Raised when the forecast request fails at the transport or HTTP level."""

    def __init__(self, cause: Exception):
        super().__init__(f"Forecast request failed: {cause}")
        self.cause = cause


class DecodingError(SkycastError):
    """Raised when a response body does not have the required shape.

    ``path`` is the dotted wire path of the offending field, e.g.
    ``currently.windSpeed`` or ``daily.data``.
    """

    def __init__(self, path: str, reason: str = "missing or invalid"):
        super().__init__(f"Cannot decode forecast: {path}: {reason}")
        self.path = path
        self.reason = reason


class ResolutionError(SkycastError):
    def __init__(self, query: str, reason: str = "no match"):
        super().__init__(f"Could not resolve location {query!r}: {reason}")
        self.query = query
        self.reason = reason
