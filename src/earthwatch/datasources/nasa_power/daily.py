"""Daily point parameters from the NASA POWER API."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import requests

from earthwatch.dates import date_key
from earthwatch.datasources.nasa_power.client import (
    COMMUNITY,
    DAILY_PARAMETERS,
    NASA_POWER_DAILY_API,
)
from earthwatch.errors import FetchError
from earthwatch.services.http import session

if TYPE_CHECKING:
    from datetime import date


def fetch_daily_parameters(
    lat: float,
    lon: float,
    start: date,
    end: date,
) -> dict[str, Any]:
    """
    Fetch daily temperature, humidity, wind and surface radiation.

    The body is parsed as JSON whatever the HTTP status: NASA POWER reports
    bad requests as JSON without ``properties.parameter``, which the
    normalization step rejects.

    Args:
        lat: Latitude.
        lon: Longitude.
        start: First day of the window (inclusive).
        end: Last day of the window (inclusive).

    Returns:
        Raw API response dict; samples live under ``properties.parameter``.

    Raises:
        FetchError: The request failed in transport or the body is not JSON.
    """
    params: dict[str, str | float] = {
        "parameters": ",".join(DAILY_PARAMETERS),
        "community": COMMUNITY,
        "longitude": lon,
        "latitude": lat,
        "start": date_key(start),
        "end": date_key(end),
        "format": "JSON",
    }

    try:
        resp = session.get(NASA_POWER_DAILY_API, params=params)
        result: dict[str, Any] = resp.json()
    except requests.RequestException as exc:
        # JSON decode errors from requests subclass RequestException too
        raise FetchError(f"Failed to fetch NASA POWER data: {exc}", cause=exc) from exc
    except ValueError as exc:
        raise FetchError(f"NASA POWER returned an invalid body: {exc}", cause=exc) from exc
    return result
