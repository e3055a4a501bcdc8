"""Date-key helpers shared by datasources, analysis and renderers.

NASA POWER keys its daily samples as ``YYYYMMDD``; Open-Meteo uses ISO
``YYYY-MM-DD``.  Display strings are ``DD/MM/YYYY`` and chart labels ``MM/DD``.
"""

from __future__ import annotations

from datetime import UTC, date, datetime, timedelta

#: NASA POWER publishes daily point data with roughly this many days of lag.
REPORTING_LAG_DAYS = 3

#: Days before the lagged end date where the fetch window starts.
WINDOW_DAYS = 7


def date_key(d: date) -> str:
    """Format a date as ``YYYYMMDD``."""
    return d.strftime("%Y%m%d")


def iso_date(d: date) -> str:
    """Format a date as ``YYYY-MM-DD``."""
    return d.isoformat()


def is_date_key(key: str) -> bool:
    """Whether ``key`` is exactly eight ASCII digits."""
    return len(key) == 8 and key.isascii() and key.isdigit()


def key_to_date(key: str) -> date:
    """Parse a ``YYYYMMDD`` key.  Raises ValueError for anything else."""
    # strptime alone accepts short keys like "2024013"
    if not is_date_key(key):
        raise ValueError(f"not a YYYYMMDD key: {key!r}")
    return datetime.strptime(key, "%Y%m%d").date()


def key_to_iso(key: str) -> str:
    """Convert ``YYYYMMDD`` to ``YYYY-MM-DD``."""
    return iso_date(key_to_date(key))


def chart_label(key: str) -> str:
    """``YYYYMMDD`` -> ``MM/DD``."""
    return f"{key[4:6]}/{key[6:8]}"


def format_display_date(key: str | None) -> str:
    """``YYYYMMDD`` -> ``DD/MM/YYYY``, or ``N/A`` for anything that isn't eight digits."""
    if not key or not is_date_key(key):
        return "N/A"
    return f"{key[6:8]}/{key[4:6]}/{key[0:4]}"


def fetch_window(today: date | None = None) -> tuple[date, date]:
    """Return ``(start, end)`` for a fetch made on ``today`` (UTC by default).

    ``end`` is ``today`` minus the reporting lag; ``start`` is a further
    seven days back, so the window spans eight calendar days.
    """
    if today is None:
        today = datetime.now(UTC).date()
    end = today - timedelta(days=REPORTING_LAG_DAYS)
    start = end - timedelta(days=WINDOW_DAYS)
    return start, end
