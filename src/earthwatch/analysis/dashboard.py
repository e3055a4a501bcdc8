"""Normalize NASA POWER + satellite radiation payloads into a DashboardSnapshot.

Pure function of its two inputs: no I/O, no Prefect decorators.

Solar readings come from two different places.  With hourly satellite data
the value is the day's mean diffuse radiation as a percentage of a
1000 W/m^2 reference.  Without it, the NASA POWER daily surface radiation is
used as-is, in W/m^2 rather than a percentage.
"""

from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Decimal
from typing import Any

from earthwatch.dates import chart_label, key_to_iso
from earthwatch.datasources.nasa_power import (
    HUMIDITY,
    SURFACE_RADIATION,
    TEMPERATURE,
    WIND_SPEED,
    is_missing,
)
from earthwatch.datasources.radiation import (
    DIFFUSE_RADIATION,
    REFERENCE_MAX_RADIATION,
    is_available,
)
from earthwatch.errors import DataError
from earthwatch.schemas import CurrentConditions, DailyMetric, DashboardSnapshot

#: Days shown in the chart.
SERIES_DAYS = 7

_ONE_DECIMAL = Decimal("0.1")


def round_one(value: float) -> float:
    """Round to one decimal, ties away from zero."""
    if not math.isfinite(value):
        return value
    return float(Decimal(value).quantize(_ONE_DECIMAL, rounding=ROUND_HALF_UP))


def _parameter_table(parameters: Any) -> dict[str, Any]:
    """Return ``properties.parameter`` or raise DataError."""
    properties = parameters.get("properties") if isinstance(parameters, dict) else None
    table = properties.get("parameter") if isinstance(properties, dict) else None
    if not isinstance(table, dict):
        raise DataError("Invalid data format received from API")
    return table


def valid_dates(table: dict[str, Any]) -> list[str]:
    """Temperature date keys with a real sample, oldest first."""
    temps = table.get(TEMPERATURE) or {}
    return sorted(key for key, value in temps.items() if not is_missing(value))


def parameter_value(table: dict[str, Any], code: str, key: str) -> float | None:
    """A daily sample rounded to one decimal, or None when missing."""
    value = (table.get(code) or {}).get(key)
    if is_missing(value):
        return None
    try:
        return round_one(float(value))
    except (TypeError, ValueError) as exc:
        raise DataError(f"Non-numeric {code} sample for {key}: {value!r}") from exc


def _is_number(value: Any) -> bool:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return not math.isnan(value)


def daily_radiation_percent(hourly: dict[str, Any], variable: str, key: str) -> float | None:
    """
    Mean of one day's hourly values as a percentage of the reference maximum.

    Hours are matched by timestamp prefix (``YYYY-MM-DD``).  Null and NaN
    samples are ignored; None if nothing usable is left or ``key`` is not a
    ``YYYYMMDD`` key.
    """
    try:
        target = key_to_iso(key)
    except ValueError:
        return None
    samples = hourly.get(variable) or []
    values = [
        samples[i]
        for i, timestamp in enumerate(hourly.get("time") or [])
        if isinstance(timestamp, str) and timestamp.startswith(target) and i < len(samples)
    ]
    usable = [v for v in values if _is_number(v)]
    if not usable:
        return None
    average = sum(usable) / len(usable)
    return round_one(average / REFERENCE_MAX_RADIATION * 100)


def solar_value(table: dict[str, Any], radiations: Any, key: str) -> float | None:
    """Satellite diffuse-radiation percentage, or raw NASA surface radiation as fallback."""
    if not is_available(radiations, DIFFUSE_RADIATION):
        return parameter_value(table, SURFACE_RADIATION, key)
    return daily_radiation_percent(radiations["hourly"], DIFFUSE_RADIATION, key)


def build_snapshot(parameters: Any, radiations: Any = None) -> DashboardSnapshot:
    """
    Build the dashboard snapshot for one location.

    Args:
        parameters: NASA POWER response (``properties.parameter`` tables).
        radiations: Open-Meteo satellite response, an error body, or None.

    Raises:
        DataError: The NASA payload is malformed or has no valid temperature.
    """
    table = _parameter_table(parameters)

    dates = valid_dates(table)
    if not dates:
        raise DataError("No valid data available for this location")

    chart_dates = dates[-SERIES_DAYS:]
    series = [
        DailyMetric(
            date=chart_label(key),
            temperature=parameter_value(table, TEMPERATURE, key),
            humidity=parameter_value(table, HUMIDITY, key),
            wind_speed=parameter_value(table, WIND_SPEED, key),
            solar_percent=solar_value(table, radiations, key),
        )
        for key in chart_dates
    ]
    series = [metric for metric in series if metric.temperature is not None]

    return DashboardSnapshot(
        current=CurrentConditions.from_metric(series[-1] if series else None),
        series=series,
        latest_date=chart_dates[-1],
    )
