"""Resample a track at a fixed distance interval.

Offsets 0, d, 2d, ... up to the track length are located on the path. Where
an offset falls between two track points its position is linearly
interpolated in lat/lon (planar, not geodesic; the error is negligible at
sampling-interval scale and keeps output reproducible). The track's final
point is always included.
"""

import logging
from typing import Sequence

from gpx_weather.models import SampledPoint, Track, TrackPoint

logger = logging.getLogger(__name__)


def interpolate(prev: TrackPoint, curr: TrackPoint, offset: float) -> SampledPoint:
    """Point at `offset` meters along the segment prev -> curr.

    Requires prev.cumulative_distance < offset <= curr.cumulative_distance.
    """
    ratio = (offset - prev.cumulative_distance) / (curr.cumulative_distance - prev.cumulative_distance)
    return SampledPoint(
        lat=prev.lat + (curr.lat - prev.lat) * ratio,
        lon=prev.lon + (curr.lon - prev.lon) * ratio,
        cumulative_distance=offset,
    )


def sample(track: Track | Sequence[TrackPoint], interval_m: float) -> list[SampledPoint]:
    """Sample points every `interval_m` meters along the track.

    Args:
        track: Track, or any ordered sequence of points with cumulative_distance
        interval_m: Sampling interval in meters

    Returns:
        Sampled points in path order. If interval_m is not positive or the
        input is empty, the input points are returned unchanged.
    """
    points = track.points if isinstance(track, Track) else track
    if not points or not interval_m > 0:
        return list(points)

    total = points[-1].cumulative_distance
    sampled: list[SampledPoint] = []

    # Offsets only grow, so the search cursor never moves backwards.
    cursor = 0
    k = 0
    offset = 0.0
    while offset <= total:
        while cursor < len(points) and points[cursor].cumulative_distance < offset:
            cursor += 1
        if cursor == len(points):
            break

        pt = points[cursor]
        if pt.cumulative_distance == offset or cursor == 0:
            sampled.append(pt)
        else:
            sampled.append(interpolate(points[cursor - 1], pt, offset))

        k += 1
        offset = k * interval_m

    last = points[-1]
    if not sampled or sampled[-1].cumulative_distance < last.cumulative_distance:
        sampled.append(last)

    logger.debug("Sampled %d of %d points at %.0f m interval", len(sampled), len(points), interval_m)
    return sampled
