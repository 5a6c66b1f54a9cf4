import gpxpy
import gpxpy.gpx

from gpx_weather.models import GeoPoint


def parse_gpx(filepath: str) -> list[GeoPoint]:
    """Parse a GPX file and return its track points in order."""
    with open(filepath, "r") as f:
        gpx = gpxpy.parse(f)
    return _track_points(gpx)


def parse_gpx_string(text: str) -> list[GeoPoint]:
    """Parse GPX document text, e.g. an uploaded file's contents."""
    return _track_points(gpxpy.parse(text))


def _track_points(gpx: gpxpy.gpx.GPX) -> list[GeoPoint]:
    points: list[GeoPoint] = []
    for track in gpx.tracks:
        for segment in track.segments:
            for pt in segment.points:
                points.append(GeoPoint(lat=pt.latitude, lon=pt.longitude))
    return points
