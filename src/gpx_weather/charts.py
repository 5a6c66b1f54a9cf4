"""Route map and weather timeline charts."""

import io
from pathlib import Path

import matplotlib
matplotlib.use('Agg')  # Non-interactive backend
import matplotlib.pyplot as plt

from gpx_weather.models import Track, WeatherPoint

ROUTE_COLOR = '#e64980'
TEMP_COLOR = '#e55a00'
WIND_COLOR = '#2196F3'


def temperature_to_color(temp: float) -> str:
    """Marker color for a temperature in °C."""
    if temp < 0:
        return '#4a90d9'
    elif temp < 10:
        return '#8acbef'
    elif temp < 20:
        return '#ffb399'
    elif temp < 30:
        return '#ff7f33'
    return '#cc4400'


class RouteWeatherChart:
    """Route map with temperature markers at forecast points.

    Each chart owns its figure and markers; draw the route once, then add
    markers as forecasts arrive.
    """

    def __init__(self, width: float = 8.0, height: float = 8.0):
        self.fig, self.ax = plt.subplots(figsize=(width, height), facecolor='white')
        self.route_line = None
        self.markers = []

    def draw_route(self, track: Track) -> None:
        """Draw the full route, replacing any previous one."""
        if self.route_line is not None:
            self.route_line.remove()
        lons = [pt.lon for pt in track]
        lats = [pt.lat for pt in track]
        (self.route_line,) = self.ax.plot(lons, lats, color=ROUTE_COLOR, linewidth=2.5, zorder=1)
        self.ax.set_aspect('equal', adjustable='datalim')
        self.ax.autoscale_view()

    def add_marker(self, point: WeatherPoint) -> None:
        """Label a forecast point with its rounded temperature."""
        marker = self.ax.annotate(
            f"{round(point.temperature)}°C",
            (point.lon, point.lat),
            fontsize=8, fontweight='bold', color='white', ha='center', va='center', zorder=3,
            bbox=dict(boxstyle='round,pad=0.3', facecolor=temperature_to_color(point.temperature),
                      edgecolor='#333333', linewidth=0.8),
        )
        self.markers.append(marker)

    def clear_markers(self) -> None:
        for marker in self.markers:
            marker.remove()
        self.markers.clear()

    def render(self) -> bytes:
        """Render the chart as PNG bytes."""
        self.ax.set_xlabel('Longitude', fontsize=10)
        self.ax.set_ylabel('Latitude', fontsize=10)
        self.ax.spines['top'].set_visible(False)
        self.ax.spines['right'].set_visible(False)
        self.ax.grid(alpha=0.3, linestyle='-', linewidth=0.5)

        buf = io.BytesIO()
        self.fig.savefig(buf, format='png', dpi=100, facecolor='white', edgecolor='none')
        buf.seek(0)
        return buf.getvalue()

    def save(self, path: str | Path) -> None:
        Path(path).write_bytes(self.render())

    def close(self) -> None:
        plt.close(self.fig)


def plot_weather_timeline(points: list[WeatherPoint], aspect_ratio: float = 2.5) -> bytes:
    """Generate temperature and wind along the route.

    Args:
        points: Weather points in route order
        aspect_ratio: Width/height ratio

    Returns:
        PNG image bytes
    """
    fig_height = 4
    fig_width = fig_height * aspect_ratio
    fig, ax = plt.subplots(figsize=(fig_width, fig_height), facecolor='white')

    distances_km = [pt.cumulative_distance / 1000 for pt in points]
    ax.plot(distances_km, [pt.temperature for pt in points], color=TEMP_COLOR, linewidth=1.5, marker='o')
    ax.set_xlabel('Distance (km)', fontsize=10)
    ax.set_ylabel('Temperature (°C)', fontsize=10, color=TEMP_COLOR)
    ax.tick_params(axis='y', labelcolor=TEMP_COLOR)

    ax2 = ax.twinx()
    ax2.plot(distances_km, [pt.wind_speed for pt in points], color=WIND_COLOR, linewidth=1.2, alpha=0.7)
    ax2.set_ylabel('Wind (m/s)', fontsize=10, color=WIND_COLOR)
    ax2.tick_params(axis='y', labelcolor=WIND_COLOR)
    ax2.set_ylim(bottom=0)

    ax.spines['top'].set_visible(False)
    ax2.spines['top'].set_visible(False)
    ax.grid(axis='y', alpha=0.3, linestyle='-', linewidth=0.5)

    buf = io.BytesIO()
    fig.savefig(buf, format='png', dpi=100, facecolor='white', edgecolor='none')
    plt.close(fig)
    buf.seek(0)
    return buf.getvalue()
