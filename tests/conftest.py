import os
from datetime import datetime, timezone

import pytest

from gpx_weather.models import GeoPoint, TrackPoint, WeatherSample

SAMPLE_GPX_PATH = os.path.join(
    os.path.dirname(__file__), "functional", "data", "sample_ride.gpx"
)


@pytest.fixture
def start_time():
    return datetime(2024, 6, 15, 8, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def straight_route():
    """Points heading due north, ~1 km apart (0.009° latitude)."""
    return [GeoPoint(lat=45.0 + 0.009 * i, lon=7.0) for i in range(6)]


@pytest.fixture
def uneven_track_points():
    """Track points at cumulative distances 0, 500 and 1200 m."""
    return [
        TrackPoint(lat=45.0, lon=7.0, cumulative_distance=0.0),
        TrackPoint(lat=45.0045, lon=7.0, cumulative_distance=500.0),
        TrackPoint(lat=45.0108, lon=7.0, cumulative_distance=1200.0),
    ]


@pytest.fixture
def sunny_sample():
    return WeatherSample(temperature=21.4, wind_speed=3.2, condition_code=0)
