"""NASA POWER daily point data source.

Primary source for the dashboard.  Samples are keyed by ``YYYYMMDD`` and
use ``-999`` for missing values.

Public API:
  - daily: fetch_daily_parameters
  - client: API URL, parameter codes, missing-value sentinel
"""

from earthwatch.datasources.nasa_power.client import (
    DAILY_PARAMETERS,
    HUMIDITY,
    MISSING_VALUE,
    NASA_POWER_DAILY_API,
    SURFACE_RADIATION,
    TEMPERATURE,
    WIND_SPEED,
    is_missing,
)
from earthwatch.datasources.nasa_power.daily import fetch_daily_parameters

__all__ = [
    "DAILY_PARAMETERS",
    "HUMIDITY",
    "MISSING_VALUE",
    "NASA_POWER_DAILY_API",
    "SURFACE_RADIATION",
    "TEMPERATURE",
    "WIND_SPEED",
    "fetch_daily_parameters",
    "is_missing",
]
