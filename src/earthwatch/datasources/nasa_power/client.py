"""NASA POWER API constants.

API docs: https://power.larc.nasa.gov/docs/services/api/temporal/daily/
"""

from __future__ import annotations

from typing import Any

NASA_POWER_DAILY_API = "https://power.larc.nasa.gov/api/temporal/daily/point"

# Parameter codes
TEMPERATURE = "T2M"  # air temperature at 2 m, C
HUMIDITY = "RH2M"  # relative humidity at 2 m, %
WIND_SPEED = "WS10M"  # wind speed at 10 m, m/s
SURFACE_RADIATION = "ALLSKY_SFC_SW_DWN"  # all-sky surface shortwave downward irradiance

DAILY_PARAMETERS = [TEMPERATURE, HUMIDITY, WIND_SPEED, SURFACE_RADIATION]

# Renewable-energy community units
COMMUNITY = "RE"

#: Sentinel NASA POWER writes in place of a missing sample.
MISSING_VALUE = -999


def is_missing(value: Any) -> bool:
    """True for the sentinel or an absent sample."""
    return value is None or value == MISSING_VALUE
