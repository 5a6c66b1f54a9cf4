"""Estimate arrival times along a route from an average speed."""

import math
from datetime import datetime, timedelta
from typing import Sequence

from gpx_weather.errors import InvalidSpeedError
from gpx_weather.models import SampledPoint, TimedPoint


def validate_speed(avg_speed_kmh: float) -> None:
    """Raise InvalidSpeedError unless the speed is a positive, finite number."""
    if isinstance(avg_speed_kmh, bool) or not isinstance(avg_speed_kmh, (int, float)) or \
            not math.isfinite(avg_speed_kmh) or avg_speed_kmh <= 0:
        raise InvalidSpeedError(avg_speed_kmh)


def arrival_time(distance_m: float, start_time: datetime, avg_speed_kmh: float) -> datetime:
    """Time at which `distance_m` is reached riding at a constant average speed."""
    return start_time + timedelta(hours=distance_m / 1000 / avg_speed_kmh)


def project_times(
    points: Sequence[SampledPoint],
    start_time: datetime,
    avg_speed_kmh: float,
) -> list[TimedPoint]:
    """Assign an estimated arrival time to each point.

    Args:
        points: Points with cumulative_distance in meters
        start_time: Departure time at distance 0
        avg_speed_kmh: Average speed in km/h

    Returns:
        TimedPoints in the same order as the input.

    Raises:
        InvalidSpeedError: If avg_speed_kmh is zero, negative or not finite.
    """
    validate_speed(avg_speed_kmh)
    return [
        TimedPoint(
            lat=pt.lat,
            lon=pt.lon,
            cumulative_distance=pt.cumulative_distance,
            time=arrival_time(pt.cumulative_distance, start_time, avg_speed_kmh),
        )
        for pt in points
    ]
