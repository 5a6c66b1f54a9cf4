"""Build a Track from raw points by accumulating path distance."""

import logging
from typing import Iterable

from gpx_weather.distance import distance
from gpx_weather.errors import EmptyTrackError
from gpx_weather.models import GeoPoint, Track, TrackPoint

logger = logging.getLogger(__name__)


def build_track(points: Iterable[GeoPoint]) -> Track:
    """Annotate each point with its cumulative distance from the start.

    Args:
        points: Ordered points with lat/lon attributes

    Returns:
        Track of the same length and order, starting at 0 m.

    Raises:
        EmptyTrackError: If no points are given.
    """
    track_points: list[TrackPoint] = []
    cumulative = 0.0
    prev = None

    for pt in points:
        if prev is not None:
            cumulative += distance(prev, pt)
        track_points.append(TrackPoint(lat=pt.lat, lon=pt.lon, cumulative_distance=cumulative))
        prev = pt

    if not track_points:
        raise EmptyTrackError()

    logger.debug("Built track: %d points, %.1f m", len(track_points), cumulative)
    return Track(points=tuple(track_points))
