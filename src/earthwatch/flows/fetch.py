"""
Prefect flow for fetching one location's data.

Both upstream requests are submitted as tasks and run concurrently on the
flow's task runner.  The NASA POWER result is awaited first: its failure
raises before the radiation result is consulted (that request still runs to
completion).  No retries, no caching - every selection fetches fresh.

Run locally:
    python -m earthwatch.flows.fetch
"""

from __future__ import annotations

import logging
from datetime import date
from typing import Any

from prefect import flow, task
from prefect.cache_policies import NO_CACHE

from earthwatch.analysis import SelectionTracker, build_snapshot
from earthwatch.dates import fetch_window
from earthwatch.datasources import nasa_power, radiation
from earthwatch.errors import EarthwatchError
from earthwatch.schemas import DashboardSnapshot, Location  # noqa: TC001 - flow signatures resolve at runtime

logger = logging.getLogger(__name__)

#: Tracks interactive selections so only the newest one's result is kept.
selections: SelectionTracker[DashboardSnapshot] = SelectionTracker()


@task(name="fetch-nasa-power", cache_policy=NO_CACHE)
def fetch_parameters(lat: float, lon: float, start: date, end: date) -> dict[str, Any]:
    """Fetch daily point parameters from NASA POWER."""
    return nasa_power.fetch_daily_parameters(lat, lon, start, end)


@task(name="fetch-satellite-radiation", cache_policy=NO_CACHE)
def fetch_radiations(lat: float, lon: float, start: date, end: date) -> dict[str, Any] | None:
    """Fetch hourly satellite radiation; None when unavailable."""
    return radiation.fetch_hourly_radiation(lat, lon, start, end)


@flow(name="fetch-location", log_prints=True)
def fetch_location_data(lat: float, lon: float, today: date | None = None) -> dict[str, Any]:
    """
    Fetch both payloads for a coordinate.

    Returns:
        ``{"parameters": <NASA POWER JSON>, "radiations": <Open-Meteo JSON or None>}``.

    Raises:
        FetchError: The NASA POWER request failed.
    """
    start, end = fetch_window(today)
    print(f"Fetching ({lat}, {lon}) for {start.isoformat()} .. {end.isoformat()}...")

    parameters_future = fetch_parameters.submit(lat, lon, start, end)
    radiations_future = fetch_radiations.submit(lat, lon, start, end)

    parameters = parameters_future.result()
    radiations = radiations_future.result()

    if radiations is None:
        print("Satellite radiation unavailable; using NASA POWER surface radiation.")
    return {"parameters": parameters, "radiations": radiations}


@flow(name="load-snapshot", log_prints=True)
def load_snapshot(lat: float, lon: float, today: date | None = None) -> DashboardSnapshot:
    """Fetch and normalize one coordinate's data.

    Raises:
        FetchError: The NASA POWER request failed.
        DataError: The NASA POWER payload had no usable data.
    """
    payloads = fetch_location_data(lat, lon, today)
    snapshot = build_snapshot(payloads["parameters"], payloads["radiations"])
    print(f"Built snapshot with {len(snapshot.series)} days (latest {snapshot.latest_date})")
    return snapshot


def select_location(
    location: Location,
    tracker: SelectionTracker[DashboardSnapshot] | None = None,
    today: date | None = None,
) -> DashboardSnapshot | None:
    """
    Load a location as the new selection.

    Returns the snapshot, or None if another selection started while this one
    was loading (its result, or its error, is discarded).
    """
    tracker = tracker if tracker is not None else selections
    token = tracker.select(location.name)
    try:
        snapshot = load_snapshot(location.lat, location.lon, today)
    except EarthwatchError:
        if not tracker.is_current(token):
            logger.info("Ignoring error for superseded selection %s", location.name)
            return None
        raise
    if not tracker.complete(token, snapshot):
        return None
    return snapshot


if __name__ == "__main__":
    from earthwatch.config import get_settings
    from earthwatch.reference import find_location

    preset = find_location(get_settings().default_location)
    if preset is None:
        raise SystemExit(f"Unknown default location: {get_settings().default_location}")
    result = load_snapshot(preset.lat, preset.lon)
    print(f"Flow complete: {result.model_dump(by_alias=True)}")
