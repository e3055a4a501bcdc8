"""Open-Meteo satellite radiation data source.

Secondary source: hourly shortwave, direct and diffuse radiation derived from
satellite imagery.  Optional - an unsuccessful response yields ``None`` and
the dashboard falls back to NASA POWER surface radiation.

Public API:
  - hourly: fetch_hourly_radiation
  - client: API URL, hourly variables
"""

from earthwatch.datasources.radiation.client import (
    DIFFUSE_RADIATION,
    HOURLY_VARS,
    REFERENCE_MAX_RADIATION,
    SATELLITE_ARCHIVE_API,
    is_available,
)
from earthwatch.datasources.radiation.hourly import fetch_hourly_radiation

__all__ = [
    "DIFFUSE_RADIATION",
    "HOURLY_VARS",
    "REFERENCE_MAX_RADIATION",
    "SATELLITE_ARCHIVE_API",
    "fetch_hourly_radiation",
    "is_available",
]
