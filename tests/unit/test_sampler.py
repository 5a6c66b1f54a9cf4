import pytest

from gpx_weather.models import GeoPoint, TrackPoint
from gpx_weather.sampler import interpolate, sample
from gpx_weather.track import build_track


def _distances(points):
    return [pt.cumulative_distance for pt in points]


class TestInterpolate:
    def test_midpoint(self):
        a = TrackPoint(lat=45.0, lon=7.0, cumulative_distance=100.0)
        b = TrackPoint(lat=46.0, lon=8.0, cumulative_distance=300.0)
        pt = interpolate(a, b, 200.0)
        assert pt.lat == pytest.approx(45.5)
        assert pt.lon == pytest.approx(7.5)
        assert pt.cumulative_distance == 200.0


class TestSample:
    def test_concrete_scenario(self, uneven_track_points):
        sampled = sample(uneven_track_points, 1000.0)
        assert _distances(sampled) == [0.0, 1000.0, 1200.0]

        # The 1000 m sample lies between points 2 and 3
        ratio = (1000 - 500) / (1200 - 500)
        assert ratio == pytest.approx(0.714, abs=1e-3)
        p2, p3 = uneven_track_points[1], uneven_track_points[2]
        assert sampled[1].lat == pytest.approx(p2.lat + (p3.lat - p2.lat) * ratio)
        assert sampled[1].lon == pytest.approx(7.0)

    def test_first_and_last_are_verbatim(self, uneven_track_points):
        sampled = sample(uneven_track_points, 1000.0)
        assert sampled[0] is uneven_track_points[0]
        assert sampled[-1] is uneven_track_points[-1]

    def test_exact_match_emits_original_point(self):
        points = [
            TrackPoint(lat=45.0, lon=7.0, cumulative_distance=0.0),
            TrackPoint(lat=45.1, lon=7.0, cumulative_distance=500.0),
            TrackPoint(lat=45.2, lon=7.0, cumulative_distance=1000.0),
        ]
        sampled = sample(points, 500.0)
        assert sampled == points
        assert sampled[1] is points[1]

    def test_interval_larger_than_track(self, uneven_track_points):
        sampled = sample(uneven_track_points, 5000.0)
        assert sampled == [uneven_track_points[0], uneven_track_points[-1]]

    def test_even_division_does_not_duplicate_end(self):
        points = [
            TrackPoint(lat=45.0, lon=7.0, cumulative_distance=0.0),
            TrackPoint(lat=45.1, lon=7.0, cumulative_distance=1000.0),
            TrackPoint(lat=45.2, lon=7.0, cumulative_distance=2000.0),
        ]
        sampled = sample(points, 1000.0)
        assert _distances(sampled) == [0.0, 1000.0, 2000.0]

    def test_always_includes_final_distance(self, straight_route):
        track = build_track(straight_route)
        for interval in [1.0, 333.0, 1000.0, 1234.5, 4999.0, 100_000.0]:
            sampled = sample(track, interval)
            assert sampled[-1].cumulative_distance == track.total_distance

    def test_uniform_spacing(self, straight_route):
        track = build_track(straight_route)
        sampled = sample(track, 750.0)
        distances = _distances(sampled)
        assert distances[:-1] == [i * 750.0 for i in range(len(distances) - 1)]
        assert distances == sorted(distances)

    def test_accepts_track(self, straight_route):
        track = build_track(straight_route)
        assert sample(track, 2000.0) == sample(list(track.points), 2000.0)

    def test_resampling_keeps_final_point(self, straight_route):
        track = build_track(straight_route)
        once = sample(track, 1500.0)
        twice = sample(once, 1500.0)
        assert twice[-1].cumulative_distance == track.total_distance
        assert _distances(twice) == _distances(once)

    def test_single_point_track(self):
        track = build_track([GeoPoint(lat=45.0, lon=7.0)])
        sampled = sample(track, 1000.0)
        assert sampled == [track[0]]

    def test_zero_length_track(self):
        track = build_track([GeoPoint(lat=45.0, lon=7.0)] * 3)
        sampled = sample(track, 1000.0)
        assert sampled == [track[0]]

    def test_duplicate_points_tie_breaks_to_earliest(self):
        points = [
            TrackPoint(lat=45.0, lon=7.0, cumulative_distance=0.0),
            TrackPoint(lat=45.1, lon=7.0, cumulative_distance=1000.0),
            TrackPoint(lat=45.1, lon=7.1, cumulative_distance=1000.0),
            TrackPoint(lat=45.2, lon=7.1, cumulative_distance=1500.0),
        ]
        sampled = sample(points, 1000.0)
        assert sampled[1] is points[1]

    def test_non_positive_interval_returns_input(self, uneven_track_points):
        assert sample(uneven_track_points, 0) == uneven_track_points
        assert sample(uneven_track_points, -10.0) == uneven_track_points

    def test_nan_interval_returns_input(self, uneven_track_points):
        assert sample(uneven_track_points, float("nan")) == uneven_track_points

    def test_empty_input_returns_empty(self):
        assert sample([], 1000.0) == []

    def test_does_not_modify_input(self, uneven_track_points):
        original = list(uneven_track_points)
        sample(uneven_track_points, 300.0)
        assert uneven_track_points == original

    def test_returns_new_list(self, uneven_track_points):
        result = sample(uneven_track_points, 0)
        assert result is not uneven_track_points
