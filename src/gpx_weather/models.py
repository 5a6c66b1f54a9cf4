from dataclasses import dataclass
from datetime import datetime
from typing import Iterator

from gpx_weather.errors import EmptyTrackError


@dataclass(frozen=True)
class GeoPoint:
    lat: float  # degrees
    lon: float  # degrees

    def __post_init__(self):
        if not -90.0 <= self.lat <= 90.0:
            raise ValueError(f"Latitude out of range: {self.lat}")
        if not -180.0 <= self.lon <= 180.0:
            raise ValueError(f"Longitude out of range: {self.lon}")


@dataclass(frozen=True, kw_only=True)
class TrackPoint(GeoPoint):
    cumulative_distance: float  # meters from the first point along the path


# A sampled point has the same shape as a track point; original points are
# emitted as-is when a sampling offset lands on them.
SampledPoint = TrackPoint


@dataclass(frozen=True)
class Track:
    """Ordered, read-only track points annotated with cumulative distance."""

    points: tuple[TrackPoint, ...]

    def __post_init__(self):
        if not self.points:
            raise EmptyTrackError()

    @property
    def total_distance(self) -> float:
        return self.points[-1].cumulative_distance

    def __len__(self) -> int:
        return len(self.points)

    def __iter__(self) -> Iterator[TrackPoint]:
        return iter(self.points)

    def __getitem__(self, index):
        return self.points[index]


@dataclass(frozen=True, kw_only=True)
class TimedPoint(TrackPoint):
    time: datetime  # estimated arrival


@dataclass(frozen=True)
class WeatherSample:
    temperature: float  # °C
    wind_speed: float  # m/s
    condition_code: int  # WMO weather interpretation code


@dataclass(frozen=True, kw_only=True)
class WeatherPoint(TimedPoint):
    temperature: float  # °C
    wind_speed: float  # m/s
    condition_code: int

    @property
    def condition(self) -> str:
        """Human-readable weather condition."""
        from gpx_weather.weather import weather_code_to_text

        return weather_code_to_text(self.condition_code)
