"""Open-Meteo satellite radiation API constants.

API docs: https://open-meteo.com/en/docs/satellite-radiation-api
"""

from __future__ import annotations

from typing import Any

SATELLITE_ARCHIVE_API = "https://satellite-api.open-meteo.com/v1/archive"

SATELLITE_MODEL = "satellite_radiation_seamless"

DIFFUSE_RADIATION = "diffuse_radiation_instant"

# Hourly variables we request
HOURLY_VARS = [
    "shortwave_radiation",
    "direct_radiation",
    "direct_radiation_instant",
    DIFFUSE_RADIATION,
]

#: W/m^2 treated as 100% when expressing radiation as a percentage.
REFERENCE_MAX_RADIATION = 1000


def is_available(radiations: Any, variable: str = DIFFUSE_RADIATION) -> bool:
    """Whether a payload carries an hourly series for ``variable``.

    ``None``, error bodies (``{"error": true, ...}``) and payloads missing
    the ``hourly`` block or the variable all count as unavailable.  An empty
    series is still available; it just yields no daily value.
    """
    if not isinstance(radiations, dict) or radiations.get("error"):
        return False
    hourly = radiations.get("hourly")
    if not isinstance(hourly, dict):
        return False
    return isinstance(hourly.get(variable), list)
