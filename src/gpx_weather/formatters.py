"""Formatting utilities for display."""

from gpx_weather.models import WeatherPoint


def format_duration(seconds: float) -> str:
    """Format seconds as Xh Ym string."""
    hours = int(seconds // 3600)
    minutes = int((seconds % 3600) // 60)
    if hours > 0:
        return f"{hours}h {minutes:02d}m"
    return f"{minutes}m"


def format_time(point) -> str:
    """Format a point's arrival time as YYYY-MM-DD HH:MM."""
    return point.time.strftime("%Y-%m-%d %H:%M")


def format_distance_km(meters: float) -> str:
    return f"{meters / 1000:.1f} km"


def format_weather_row(point: WeatherPoint) -> str:
    """Format a weather point as one table row."""
    return (
        f"{format_time(point):<17} {point.cumulative_distance / 1000:>8.1f} "
        f"{round(point.temperature):>5d}°C {point.wind_speed:>6.1f} m/s  {point.condition}"
    )


def format_timed_row(point) -> str:
    """Format a timed point (no weather) as one table row."""
    return (
        f"{format_time(point):<17} {point.cumulative_distance / 1000:>8.1f} "
        f"{point.lat:>10.5f} {point.lon:>11.5f}"
    )
