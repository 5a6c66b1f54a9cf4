"""Exceptions raised by the route weather pipeline."""

from datetime import datetime


class GpxWeatherError(Exception):
    """Base class for gpx-weather errors."""


class EmptyTrackError(GpxWeatherError, ValueError):
    """Raised when a track is built from zero points."""

    def __init__(self, message: str = "Track contains no points"):
        super().__init__(message)


class InvalidSpeedError(GpxWeatherError, ValueError):
    """Raised when the average speed is not a positive, finite number."""

    def __init__(self, speed: float):
        self.speed = speed
        super().__init__(f"Average speed must be a positive number of km/h, got {speed!r}")


class WeatherLookupError(GpxWeatherError):
    """A weather forecast could not be obtained for one point.

    Recoverable: the annotator logs it and skips the point.
    """

    def __init__(self, message: str, point=None, time: datetime | None = None):
        self.point = point
        self.time = time
        super().__init__(message)

    def __str__(self) -> str:
        message = super().__str__()
        if self.point is None:
            return message
        return f"{message} (lat={self.point.lat:.5f}, lon={self.point.lon:.5f}, time={self.time})"
