"""Location dashboard panel: metric cards, 7-day table, last-update stamp."""

from __future__ import annotations

from typing import TYPE_CHECKING

from earthwatch.dates import format_display_date
from earthwatch.renderers import render_template

if TYPE_CHECKING:
    from earthwatch.schemas import DashboardSnapshot, Location


def _fmt(value: float | None, unit: str = "") -> str:
    """One-decimal reading with unit, or ``--`` when absent."""
    if value is None:
        return "--"
    return f"{value:.1f}{unit}"


def _location_header(location: Location) -> dict[str, str]:
    return {
        "name": location.name,
        "district": location.district,
        "lat": f"{location.lat:.4f}",
        "lon": f"{location.lon:.4f}",
        "color": location.color,
    }


def build_dashboard_html(location: Location, snapshot: DashboardSnapshot) -> str:
    """Build the panel for one location's snapshot."""
    current = snapshot.current
    cards = [
        {"label": "Temperature", "value": _fmt(current.temperature, " °C"), "kind": "temp"},
        {"label": "Humidity", "value": _fmt(current.humidity, " %"), "kind": "humidity"},
        {"label": "Wind Speed", "value": _fmt(current.wind_speed, " m/s"), "kind": "wind"},
        # percent from satellite data, raw W/m^2 on fallback
        {"label": "Solar Radiation", "value": _fmt(current.solar_percent), "kind": "solar"},
    ]
    rows = [
        {
            "date": metric.date,
            "temperature": _fmt(metric.temperature),
            "humidity": _fmt(metric.humidity),
            "wind_speed": _fmt(metric.wind_speed),
            "solar": _fmt(metric.solar_percent),
        }
        for metric in snapshot.series
    ]
    return render_template(
        "dashboard.html.j2",
        location=_location_header(location),
        cards=cards,
        rows=rows,
        last_update=format_display_date(snapshot.latest_date),
    )


def build_dashboard_error_html(location: Location, message: str) -> str:
    """Build the panel shown when a location's data could not be loaded."""
    return render_template(
        "dashboard_error.html.j2",
        location=_location_header(location),
        message=message or "Failed to fetch data",
    )
