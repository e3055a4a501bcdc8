"""
Prefect flow for building the static dashboard page.

Fetches every requested preset location, renders its panel (or an error
panel when its data could not be loaded) and writes ``index.html``.

Run locally:
    python -m earthwatch.flows.build
"""

from __future__ import annotations

from datetime import UTC, datetime
from pathlib import Path
from typing import TYPE_CHECKING, Any

from prefect import flow, task

from earthwatch.config import get_settings
from earthwatch.errors import EarthwatchError
from earthwatch.flows.fetch import load_snapshot
from earthwatch.reference import LOCATIONS, SATELLITES, find_location
from earthwatch.renderers import render_template
from earthwatch.renderers.dashboard import build_dashboard_error_html, build_dashboard_html
from earthwatch.renderers.satellites import build_satellites_html

if TYPE_CHECKING:
    from earthwatch.schemas import Location

SITE_DIR = get_settings().site_dir


def build_panel(location: Location) -> tuple[str, bool]:
    """Render one location's panel.  Returns ``(html, ok)``."""
    try:
        snapshot = load_snapshot(location.lat, location.lon)
    except EarthwatchError as exc:
        print(f"{location.name}: {exc}")
        return build_dashboard_error_html(location, str(exc)), False
    return build_dashboard_html(location, snapshot), True


@task(name="build-html")
def build_html(panels: list[str], elapsed: float = 0.0) -> str:
    """Assemble the full page."""
    return render_template(
        "base.html.j2",
        updated=datetime.now(UTC).strftime("%Y-%m-%d %H:%M"),
        panels=panels,
        satellites=build_satellites_html(SATELLITES, elapsed),
    )


@task(name="write-site")
def write_site(html: str) -> Path:
    """Write HTML to site directory."""
    SITE_DIR.mkdir(parents=True, exist_ok=True)
    output_path = SITE_DIR / "index.html"
    with output_path.open("w", encoding="utf-8") as f:
        f.write(html)
    return output_path


@flow(name="build-site", log_prints=True)
def build_all(location_name: str | None = None) -> dict[str, Any]:
    """
    Build the dashboard page.

    Args:
        location_name: Render only this preset; all presets when None.
    """
    if location_name is None:
        locations = LOCATIONS
    else:
        location = find_location(location_name)
        if location is None:
            print(f"Unknown location: {location_name}")
            return {"error": f"unknown location: {location_name}"}
        locations = [location]

    panels: list[str] = []
    failed: list[str] = []
    for location in locations:
        print(f"Building panel for {location.name}...")
        html, ok = build_panel(location)
        panels.append(html)
        if not ok:
            failed.append(location.name)

    output = write_site(build_html(panels))
    print(f"Wrote {output} ({len(panels) - len(failed)}/{len(panels)} locations loaded)")
    return {"pages": 1, "panels": len(panels), "failed": failed, "output": str(output)}


if __name__ == "__main__":
    result = build_all()
    print(f"Flow complete: {result}")
