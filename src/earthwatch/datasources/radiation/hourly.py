"""Hourly satellite radiation from the Open-Meteo satellite archive."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

import requests

from earthwatch.dates import iso_date
from earthwatch.datasources.radiation.client import (
    HOURLY_VARS,
    SATELLITE_ARCHIVE_API,
    SATELLITE_MODEL,
)
from earthwatch.services.http import session

if TYPE_CHECKING:
    from datetime import date

logger = logging.getLogger(__name__)


def fetch_hourly_radiation(
    lat: float,
    lon: float,
    start: date,
    end: date,
) -> dict[str, Any] | None:
    """
    Fetch hourly radiation for the window.

    Failures are not errors here: a non-success status, a transport failure
    or an unparseable body all return ``None``.

    Returns:
        Raw API response dict with ``hourly`` arrays, or ``None``.
    """
    params: dict[str, Any] = {
        "latitude": lat,
        "longitude": lon,
        "hourly": ",".join(HOURLY_VARS),
        "models": SATELLITE_MODEL,
        "start_date": iso_date(start),
        "end_date": iso_date(end),
    }

    try:
        resp = session.get(SATELLITE_ARCHIVE_API, params=params)
    except requests.RequestException as exc:
        logger.warning("Satellite radiation request failed: %s", exc)
        return None

    if not resp.ok:
        logger.warning("Satellite radiation unavailable (HTTP %s)", resp.status_code)
        return None

    try:
        result: dict[str, Any] = resp.json()
    except ValueError as exc:
        logger.warning("Satellite radiation body is not JSON: %s", exc)
        return None
    return result
