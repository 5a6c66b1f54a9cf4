"""GPX Weather - weather forecasts along a route at estimated arrival times."""

__version_date__ = "2026-10-17"
