"""Fetch point forecasts from the Open-Meteo API."""

import logging
import time
from datetime import datetime, timezone

import requests

from gpx_weather.cache import ForecastCache
from gpx_weather.config import DEFAULTS, OPEN_METEO_URL, get_setting
from gpx_weather.errors import WeatherLookupError
from gpx_weather.models import GeoPoint, WeatherSample

logger = logging.getLogger(__name__)

HOURLY_FIELDS = ["temperature_2m", "windspeed_10m", "weathercode"]

# Forecast grid cells are a few km wide; nearby samples share a response.
CACHE_COORD_DECIMALS = 2

# WMO weather interpretation codes
WEATHER_CODES = {
    0: "Clear",
    1: "Mostly Clear",
    2: "Partly Cloudy",
    3: "Overcast",
    45: "Fog",
    48: "Freezing Fog",
    51: "Drizzle",
    56: "Freezing Drizzle",
    61: "Rain",
    63: "Moderate Rain",
    65: "Heavy Rain",
    66: "Freezing Rain",
    71: "Snow",
    73: "Moderate Snow",
    75: "Heavy Snow",
    77: "Snow Grains",
    80: "Showers",
    85: "Snow Showers",
    95: "Thunderstorm",
    96: "Thunderstorm + Hail",
}


def weather_code_to_text(code: int) -> str:
    """Map a WMO weather code to a short description."""
    return WEATHER_CODES.get(code, "Unknown")


def to_utc(when: datetime) -> datetime:
    """Normalise to an aware UTC datetime; naive values are taken as UTC."""
    if when.tzinfo is None:
        return when.replace(tzinfo=timezone.utc)
    return when.astimezone(timezone.utc)


class OpenMeteoClient:
    """Weather lookup backed by the Open-Meteo hourly forecast.

    Instances are callables usable as the `lookup` of
    `gpx_weather.forecast.annotate`: given a point and a time they return a
    WeatherSample or raise WeatherLookupError.
    """

    def __init__(
        self,
        base_url: str = OPEN_METEO_URL,
        timeout: float = DEFAULTS["weather_timeout"],
        request_delay: float = DEFAULTS["request_delay"],
        cache: ForecastCache | None = None,
        session: requests.Session | None = None,
    ):
        self.base_url = base_url
        self.timeout = timeout
        self.request_delay = request_delay
        self.cache = cache if cache is not None else ForecastCache()
        self.session = session
        self._last_request = 0.0

    @classmethod
    def from_config(cls, config: dict) -> "OpenMeteoClient":
        return cls(
            base_url=get_setting(config, "open_meteo_url"),
            timeout=float(get_setting(config, "weather_timeout")),
            request_delay=float(get_setting(config, "request_delay")),
            cache=ForecastCache(
                max_size=int(get_setting(config, "cache_size")),
                ttl_seconds=float(get_setting(config, "cache_ttl")),
            ),
        )

    def __call__(self, point: GeoPoint, when: datetime) -> WeatherSample:
        return self.lookup(point, when)

    def lookup(self, point: GeoPoint, when: datetime) -> WeatherSample:
        """Forecast at `point` for the hour containing `when`.

        Raises:
            WeatherLookupError: If the request fails or the response lacks
                data for the requested hour.
        """
        when_utc = to_utc(when)
        try:
            hourly = self._get_hourly(point, when_utc)
            return _extract_sample(hourly, when_utc)
        except requests.RequestException as e:
            raise WeatherLookupError(f"Forecast request failed: {e}", point, when) from e
        except (AttributeError, KeyError, IndexError, TypeError, ValueError) as e:
            raise WeatherLookupError(f"Unexpected forecast response: {e!r}", point, when) from e

    def _get_hourly(self, point: GeoPoint, when_utc: datetime) -> dict:
        date_str = when_utc.date().isoformat()
        key = (
            round(point.lat, CACHE_COORD_DECIMALS),
            round(point.lon, CACHE_COORD_DECIMALS),
            date_str,
        )
        cached = self.cache.get(key)
        if cached is not None:
            logger.debug("Forecast cache hit for %s", key)
            return cached

        self._throttle()
        get = self.session.get if self.session is not None else requests.get
        response = get(
            self.base_url,
            params={
                "latitude": point.lat,
                "longitude": point.lon,
                "hourly": ",".join(HOURLY_FIELDS),
                "start_date": date_str,
                "end_date": date_str,
                "timezone": "UTC",
                "windspeed_unit": "ms",
            },
            timeout=self.timeout,
        )
        response.raise_for_status()

        hourly = response.json()["hourly"]
        self.cache.set(key, hourly)
        return hourly

    def _throttle(self) -> None:
        if self.request_delay <= 0:
            return
        wait = self._last_request + self.request_delay - time.time()
        if wait > 0:
            time.sleep(wait)
        self._last_request = time.time()


def _find_hour_index(times: list, when_utc: datetime) -> int:
    """Index of the hourly slot containing `when_utc`."""
    slot = when_utc.strftime("%Y-%m-%dT%H:00")
    if slot in times:
        return times.index(slot)
    # Single-day responses are ordered from 00:00
    return when_utc.hour


def _extract_sample(hourly: dict, when_utc: datetime) -> WeatherSample:
    index = _find_hour_index(hourly.get("time") or [], when_utc)
    temperature = hourly["temperature_2m"][index]
    wind_speed = hourly["windspeed_10m"][index]
    code = hourly["weathercode"][index]
    if temperature is None or wind_speed is None or code is None:
        raise ValueError(f"no forecast for {when_utc.isoformat()}")
    return WeatherSample(
        temperature=float(temperature),
        wind_speed=float(wind_speed),
        condition_code=int(code),
    )
