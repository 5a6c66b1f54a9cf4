import dataclasses
from datetime import datetime, timezone

import pytest

from gpx_weather.errors import EmptyTrackError
from gpx_weather.models import GeoPoint, TimedPoint, Track, TrackPoint, WeatherPoint, WeatherSample


class TestGeoPoint:
    def test_construction(self):
        pt = GeoPoint(lat=37.7749, lon=-122.4194)
        assert pt.lat == 37.7749
        assert pt.lon == -122.4194

    def test_bounds_are_inclusive(self):
        GeoPoint(lat=90.0, lon=180.0)
        GeoPoint(lat=-90.0, lon=-180.0)

    def test_latitude_out_of_range(self):
        with pytest.raises(ValueError):
            GeoPoint(lat=90.5, lon=0.0)

    def test_longitude_out_of_range(self):
        with pytest.raises(ValueError):
            GeoPoint(lat=0.0, lon=-180.5)

    def test_immutable(self):
        pt = GeoPoint(lat=1.0, lon=2.0)
        with pytest.raises(dataclasses.FrozenInstanceError):
            pt.lat = 3.0


class TestTrack:
    def test_rejects_empty(self):
        with pytest.raises(EmptyTrackError):
            Track(points=())

    def test_sequence_access(self, uneven_track_points):
        track = Track(points=tuple(uneven_track_points))
        assert len(track) == 3
        assert track[0] is uneven_track_points[0]
        assert list(track) == uneven_track_points
        assert track.total_distance == 1200.0

    def test_track_point_is_geo_point(self):
        pt = TrackPoint(lat=1.0, lon=2.0, cumulative_distance=10.0)
        assert isinstance(pt, GeoPoint)


class TestWeatherPoint:
    def test_condition_text(self):
        wp = WeatherPoint(
            lat=45.0, lon=7.0, cumulative_distance=0.0,
            time=datetime(2024, 6, 15, 8, tzinfo=timezone.utc),
            temperature=12.0, wind_speed=4.0, condition_code=61,
        )
        assert wp.condition == "Rain"
        assert isinstance(wp, TimedPoint)

    def test_unknown_condition(self):
        wp = WeatherPoint(
            lat=45.0, lon=7.0, cumulative_distance=0.0,
            time=datetime(2024, 6, 15, 8, tzinfo=timezone.utc),
            temperature=12.0, wind_speed=4.0, condition_code=999,
        )
        assert wp.condition == "Unknown"

    def test_weather_fields_required(self):
        with pytest.raises(TypeError):
            WeatherPoint(
                lat=45.0, lon=7.0, cumulative_distance=0.0,
                time=datetime(2024, 6, 15, 8, tzinfo=timezone.utc),
            )

    def test_timed_point_requires_time(self):
        with pytest.raises(TypeError):
            TimedPoint(lat=45.0, lon=7.0, cumulative_distance=0.0)

    def test_keyword_only(self):
        with pytest.raises(TypeError):
            TrackPoint(45.0, 7.0, 0.0)

    def test_weather_sample(self):
        sample = WeatherSample(temperature=20.0, wind_speed=2.5, condition_code=3)
        assert sample.condition_code == 3
