import argparse
import logging
import sys
from datetime import datetime

from gpx_weather import __version_date__
from gpx_weather.config import DEFAULTS, get_setting, load_config
from gpx_weather.errors import GpxWeatherError
from gpx_weather.forecast import forecast_route
from gpx_weather.formatters import (
    format_distance_km,
    format_duration,
    format_timed_row,
    format_weather_row,
)
from gpx_weather.parser import parse_gpx
from gpx_weather.weather import OpenMeteoClient


def parse_start_time(value: str) -> datetime:
    """Parse an ISO 8601 start time; naive values are local time."""
    try:
        start = datetime.fromisoformat(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid ISO 8601 time: {value!r}")
    if start.tzinfo is None:
        return start.astimezone()
    return start


def build_parser(config: dict | None = None) -> argparse.ArgumentParser:
    """Build argument parser with defaults from config file."""
    if config is None:
        config = {}

    parser = argparse.ArgumentParser(
        description="Forecast the weather along a GPX route at your estimated arrival times."
    )
    parser.add_argument("gpx_file", help="Path to GPX file")
    parser.add_argument(
        "--version",
        action="version",
        version=f"gpx-weather {__version_date__}",
    )
    parser.add_argument(
        "--start",
        type=parse_start_time,
        default=None,
        help="Start time in ISO 8601, e.g. 2024-06-15T08:00 (default: now)",
    )
    parser.add_argument(
        "--speed",
        type=float,
        default=float(get_setting(config, "avg_speed")),
        help=f"Average speed in km/h (default: {DEFAULTS['avg_speed']})",
    )
    parser.add_argument(
        "--interval",
        type=float,
        default=float(get_setting(config, "interval")),
        help=f"Distance between weather samples in km (default: {DEFAULTS['interval']})",
    )
    parser.add_argument(
        "--no-weather",
        action="store_true",
        help="Only print sample points and arrival times, without fetching forecasts",
    )
    parser.add_argument(
        "--chart",
        type=str,
        default=None,
        help="Write a route map with temperature markers to this PNG file",
    )
    parser.add_argument(
        "--timeline",
        type=str,
        default=None,
        help="Write a temperature and wind chart along the route to this PNG file",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    config = load_config()
    parser = build_parser(config)
    args = parser.parse_args(argv)
    if not args.interval > 0:
        parser.error(f"--interval must be greater than 0, got {args.interval}")

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    start_time = args.start or datetime.now().astimezone().replace(second=0, microsecond=0)

    try:
        points = parse_gpx(args.gpx_file)
    except FileNotFoundError:
        print(f"Error: File not found: {args.gpx_file}", file=sys.stderr)
        sys.exit(1)
    except Exception as e:
        print(f"Error parsing GPX file: {e}", file=sys.stderr)
        sys.exit(1)

    lookup = None if args.no_weather else OpenMeteoClient.from_config(config)
    chart = None
    if args.chart:
        from gpx_weather.charts import RouteWeatherChart

        chart = RouteWeatherChart()

    try:
        result = forecast_route(
            points, start_time, args.speed, args.interval, lookup,
            on_result=chart.add_marker if chart is not None else None,
        )
    except GpxWeatherError as e:
        if chart is not None:
            chart.close()
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    total_m = result.track.total_distance
    print("=== Route Weather Forecast ===")
    print(
        f"Config: start={start_time.isoformat()} speed={args.speed}km/h "
        f"interval={args.interval}km"
    )
    print(f"Distance:       {format_distance_km(total_m)}")
    print(f"Est. Duration:  {format_duration(total_m / 1000 / args.speed * 3600)}")
    print(f"Samples:        {len(result.timed)}")
    print("")

    if result.weather is None:
        print(f"{'Time':<17} {'km':>8} {'Lat':>10} {'Lon':>11}")
        for pt in result.timed:
            print(format_timed_row(pt))
    else:
        print(f"{'Time':<17} {'km':>8} {'Temp':>7} {'Wind':>10}  Conditions")
        for pt in result.weather:
            print(format_weather_row(pt))
        if result.failed:
            print(f"\n{result.failed} of {len(result.timed)} forecasts could not be fetched.")

    if chart is not None:
        try:
            chart.draw_route(result.track)
            chart.save(args.chart)
        finally:
            chart.close()
        print(f"\nChart saved to: {args.chart}")

    if args.timeline:
        if not result.weather:
            print("Note: no forecasts available, timeline not written.", file=sys.stderr)
        else:
            from gpx_weather.charts import plot_weather_timeline

            with open(args.timeline, "wb") as f:
                f.write(plot_weather_timeline(result.weather))
            print(f"Timeline saved to: {args.timeline}")
