"""Configuration file loading."""

import json
from pathlib import Path

CONFIG_DIR = Path.home() / ".config" / "gpx-weather"
CONFIG_PATH = CONFIG_DIR / "gpx-weather.json"
LOCAL_CONFIG_PATH = Path("gpx-weather.json")

OPEN_METEO_URL = "https://api.open-meteo.com/v1/forecast"

# Default values, overridden by config files and then by CLI options
DEFAULTS = {
    "avg_speed": 20.0,  # km/h
    "interval": 10.0,  # km between weather samples
    "open_meteo_url": OPEN_METEO_URL,
    "weather_timeout": 30.0,  # seconds
    "request_delay": 0.0,  # seconds between forecast requests
    "cache_ttl": 3600.0,  # seconds
    "cache_size": 256,
}


def load_config() -> dict:
    """Load configuration from config files.

    Merges config from global and local files:
    1. ~/.config/gpx-weather/gpx-weather.json (global, loaded first)
    2. ./gpx-weather.json (local, overrides global)

    Returns:
        Dict with merged config values, empty dict if no files exist.
    """
    config = {}
    # Load global first, then local overrides
    for config_path in [CONFIG_PATH, LOCAL_CONFIG_PATH]:
        if config_path.exists():
            try:
                with config_path.open() as f:
                    config.update(json.load(f))
            except (json.JSONDecodeError, OSError):
                continue
    return config


def get_setting(config: dict, key: str):
    """Config value for key, falling back to DEFAULTS."""
    value = config.get(key)
    return DEFAULTS[key] if value is None else value
