"""
Tests for the build flow module.
"""

from __future__ import annotations

from typing import TYPE_CHECKING
from unittest.mock import Mock

from earthwatch.errors import DataError, FetchError
from earthwatch.flows import build
from earthwatch.reference import LOCATIONS, find_location
from earthwatch.schemas import CurrentConditions, DailyMetric, DashboardSnapshot

if TYPE_CHECKING:
    from pathlib import Path

    import pytest

SNAPSHOT = DashboardSnapshot(
    current=CurrentConditions(temperature=21.0, humidity=65, wind_speed=4.2, solar_percent=19.5),
    series=[
        DailyMetric(date="01/17", temperature=21.0, humidity=65, wind_speed=4.2, solar_percent=19.5)
    ],
    latest_date="20240117",
)


class TestBuildPanel:
    """One location's panel."""

    def test_success(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(build, "load_snapshot", Mock(return_value=SNAPSHOT))
        tokyo = find_location("tokyo")
        assert tokyo is not None

        html, ok = build.build_panel(tokyo)

        assert ok
        assert "Tokyo, Japan" in html
        assert "21.0 °C" in html

    def test_error_panel(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(build, "load_snapshot", Mock(side_effect=FetchError("unreachable")))
        tokyo = find_location("tokyo")
        assert tokyo is not None

        html, ok = build.build_panel(tokyo)

        assert not ok
        assert "Error: unreachable" in html


class TestWriteSite:
    """Writing the page."""

    def test_write_site(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        site_dir = tmp_path / "site"
        monkeypatch.setattr(build, "SITE_DIR", site_dir)

        result = build.write_site("<html>dashboard</html>")

        assert result == site_dir / "index.html"
        assert result.read_text() == "<html>dashboard</html>"


class TestBuildHtml:
    """Page assembly."""

    def test_includes_panels_and_satellites(self) -> None:
        html = build.build_html(["<section>panel-a</section>", "<section>panel-b</section>"])
        assert "panel-a" in html
        assert "panel-b" in html
        assert "Satellites in Orbit" in html
        assert html.startswith("<!DOCTYPE html>")


class TestBuildAllFlow:
    """The main build flow."""

    def test_all_locations(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        site_dir = tmp_path / "site"
        monkeypatch.setattr(build, "SITE_DIR", site_dir)
        monkeypatch.setattr(build, "load_snapshot", Mock(return_value=SNAPSHOT))

        result = build.build_all()

        assert result["pages"] == 1
        assert result["panels"] == len(LOCATIONS)
        assert result["failed"] == []
        html = (site_dir / "index.html").read_text()
        for location in LOCATIONS:
            assert location.name in html

    def test_single_location(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        site_dir = tmp_path / "site"
        monkeypatch.setattr(build, "SITE_DIR", site_dir)
        monkeypatch.setattr(build, "load_snapshot", Mock(return_value=SNAPSHOT))

        result = build.build_all(location_name="london")

        assert result["panels"] == 1
        html = (site_dir / "index.html").read_text()
        assert "London, UK" in html
        assert "Tokyo, Japan" not in html

    def test_failed_location_still_built(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        site_dir = tmp_path / "site"
        monkeypatch.setattr(build, "SITE_DIR", site_dir)
        monkeypatch.setattr(
            build, "load_snapshot", Mock(side_effect=DataError("No valid data available"))
        )

        result = build.build_all(location_name="dubai")

        assert result["failed"] == ["Dubai, UAE"]
        assert "No valid data available" in (site_dir / "index.html").read_text()

    def test_unknown_location(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(build, "SITE_DIR", tmp_path / "site")

        result = build.build_all(location_name="Atlantis")

        assert "error" in result
        assert not (tmp_path / "site").exists()
