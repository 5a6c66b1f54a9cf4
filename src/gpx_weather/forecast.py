"""Weather forecasts along a route.

The pipeline runs strictly left to right:
raw points -> Track -> sampled points -> timed points -> weather points.
"""

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Callable, Iterable, Sequence

from gpx_weather.errors import WeatherLookupError
from gpx_weather.models import (
    GeoPoint,
    SampledPoint,
    TimedPoint,
    Track,
    WeatherPoint,
    WeatherSample,
)
from gpx_weather.sampler import sample
from gpx_weather.timing import project_times, validate_speed
from gpx_weather.track import build_track

logger = logging.getLogger(__name__)

WeatherLookup = Callable[[GeoPoint, datetime], WeatherSample]


@dataclass
class RouteForecast:
    """Every stage of a forecast run, for display."""

    track: Track  # full route
    sampled: list[SampledPoint]
    timed: list[TimedPoint]
    weather: list[WeatherPoint] | None  # None when weather was not requested

    @property
    def failed(self) -> int:
        """Number of sampled points whose lookup failed."""
        if self.weather is None:
            return 0
        return len(self.timed) - len(self.weather)


def annotate(
    points: Sequence[TimedPoint],
    lookup: WeatherLookup,
    on_result: Callable[[WeatherPoint], None] | None = None,
) -> list[WeatherPoint]:
    """Attach a forecast to each timed point.

    Lookups run one at a time in input order. A point whose lookup raises
    WeatherLookupError is logged and left out; the remaining points are
    still processed.

    Args:
        points: Timed points in path order
        lookup: Callable returning a WeatherSample for (point, time)
        on_result: Optional callback invoked with each WeatherPoint as it
            is produced

    Returns:
        WeatherPoints for the successful lookups, in input order.
    """
    annotated: list[WeatherPoint] = []
    for i, pt in enumerate(points):
        try:
            weather = lookup(GeoPoint(lat=pt.lat, lon=pt.lon), pt.time)
        except WeatherLookupError as e:
            logger.warning("Weather lookup failed for point %d: %s", i, e)
            continue

        weather_point = WeatherPoint(
            lat=pt.lat,
            lon=pt.lon,
            cumulative_distance=pt.cumulative_distance,
            time=pt.time,
            temperature=weather.temperature,
            wind_speed=weather.wind_speed,
            condition_code=weather.condition_code,
        )
        annotated.append(weather_point)
        if on_result is not None:
            on_result(weather_point)

    logger.debug("Annotated %d of %d points", len(annotated), len(points))
    return annotated


def forecast_route(
    points: Iterable[GeoPoint],
    start_time: datetime,
    avg_speed_kmh: float,
    interval_km: float,
    lookup: WeatherLookup | None,
    on_result: Callable[[WeatherPoint], None] | None = None,
) -> RouteForecast:
    """Sample a route, estimate arrival times and fetch weather for each sample.

    Args:
        points: Route points in path order
        start_time: Departure time
        avg_speed_kmh: Average speed in km/h
        interval_km: Distance between weather samples in km
        lookup: Weather lookup; None skips the weather stage
        on_result: Passed through to annotate()

    Raises:
        EmptyTrackError: If there are no points.
        InvalidSpeedError: If the speed is not positive and finite. Raised
            before any sampling or lookup work.
    """
    track = build_track(points)
    validate_speed(avg_speed_kmh)

    sampled = sample(track, interval_km * 1000)
    timed = project_times(sampled, start_time, avg_speed_kmh)
    weather = annotate(timed, lookup, on_result) if lookup is not None else None

    return RouteForecast(track=track, sampled=sampled, timed=timed, weather=weather)
