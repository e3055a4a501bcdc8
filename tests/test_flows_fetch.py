"""
Tests for the fetch flow module.
"""

from __future__ import annotations

from datetime import date
from typing import Any
from unittest.mock import Mock, patch

import pytest
import requests

from earthwatch.analysis.selection import SelectionTracker
from earthwatch.datasources.nasa_power import NASA_POWER_DAILY_API
from earthwatch.datasources.radiation import SATELLITE_ARCHIVE_API
from earthwatch.errors import DataError, FetchError
from earthwatch.flows import fetch
from earthwatch.reference import find_location
from earthwatch.schemas import DashboardSnapshot

TODAY = date(2024, 1, 20)

NASA_BODY = {
    "properties": {
        "parameter": {
            "T2M": {"20240116": 18.0, "20240117": 19.24},
            "RH2M": {"20240116": 70, "20240117": 72.5},
            "WS10M": {"20240116": 2.0, "20240117": 2.26},
            "ALLSKY_SFC_SW_DWN": {"20240116": 190, "20240117": 205},
        }
    }
}

RADIATION_BODY = {
    "hourly": {
        "time": ["2024-01-16T12:00", "2024-01-17T11:00", "2024-01-17T12:00"],
        "shortwave_radiation": [500, 480, 520],
        "direct_radiation": [300, 290, 310],
        "direct_radiation_instant": [310, 300, 320],
        "diffuse_radiation_instant": [150, 100, 200],
    }
}


def _response(body: Any, ok: bool = True) -> Mock:
    response = Mock(ok=ok, status_code=200 if ok else 500)
    response.json.return_value = body
    return response


def _router(nasa: Any, radiation: Any) -> Any:
    """side_effect for session.get dispatching on URL."""

    def get(url: str, **_kwargs: Any) -> Any:
        target = nasa if url == NASA_POWER_DAILY_API else radiation
        if isinstance(target, Exception):
            raise target
        return target

    return get


class TestFetchTasks:
    """Tasks delegate to the datasources."""

    @patch("earthwatch.flows.fetch.nasa_power.fetch_daily_parameters")
    def test_fetch_parameters(self, mock_fetch: Mock) -> None:
        mock_fetch.return_value = NASA_BODY
        start, end = date(2024, 1, 10), date(2024, 1, 17)

        assert fetch.fetch_parameters(1.0, 2.0, start, end) == NASA_BODY
        mock_fetch.assert_called_once_with(1.0, 2.0, start, end)

    @patch("earthwatch.flows.fetch.radiation.fetch_hourly_radiation")
    def test_fetch_radiations(self, mock_fetch: Mock) -> None:
        mock_fetch.return_value = None
        start, end = date(2024, 1, 10), date(2024, 1, 17)

        assert fetch.fetch_radiations(1.0, 2.0, start, end) is None
        mock_fetch.assert_called_once_with(1.0, 2.0, start, end)


class TestFetchLocationData:
    """Both requests in one flow run."""

    @patch("earthwatch.services.http.session.get")
    def test_both_payloads(self, mock_get: Mock) -> None:
        mock_get.side_effect = _router(_response(NASA_BODY), _response(RADIATION_BODY))

        result = fetch.fetch_location_data(-12.0464, -77.0428, today=TODAY)

        assert result == {"parameters": NASA_BODY, "radiations": RADIATION_BODY}
        urls = sorted(call.args[0] for call in mock_get.call_args_list)
        assert urls == sorted([NASA_POWER_DAILY_API, SATELLITE_ARCHIVE_API])
        nasa_call = next(c for c in mock_get.call_args_list if c.args[0] == NASA_POWER_DAILY_API)
        assert nasa_call.kwargs["params"]["start"] == "20240110"
        assert nasa_call.kwargs["params"]["end"] == "20240117"

    @patch("earthwatch.services.http.session.get")
    def test_radiation_failure_is_none(self, mock_get: Mock) -> None:
        mock_get.side_effect = _router(_response(NASA_BODY), _response(None, ok=False))

        result = fetch.fetch_location_data(0.0, 0.0, today=TODAY)

        assert result["parameters"] == NASA_BODY
        assert result["radiations"] is None

    @patch("earthwatch.services.http.session.get")
    def test_primary_failure_raises(self, mock_get: Mock) -> None:
        mock_get.side_effect = _router(
            requests.ConnectionError("unreachable"), _response(RADIATION_BODY)
        )

        with pytest.raises(FetchError):
            fetch.fetch_location_data(0.0, 0.0, today=TODAY)

    def test_both_submitted_before_waiting(self) -> None:
        events: list[str] = []

        def _task(name: str, value: Any) -> Mock:
            future = Mock()
            future.result.side_effect = lambda: events.append(f"result:{name}") or value
            task = Mock()
            task.submit.side_effect = lambda *_args: events.append(f"submit:{name}") or future
            return task

        with (
            patch.object(fetch, "fetch_parameters", _task("nasa", NASA_BODY)),
            patch.object(fetch, "fetch_radiations", _task("radiation", RADIATION_BODY)),
        ):
            result = fetch.fetch_location_data(0.0, 0.0, today=TODAY)

        assert result == {"parameters": NASA_BODY, "radiations": RADIATION_BODY}
        assert events == [
            "submit:nasa",
            "submit:radiation",
            "result:nasa",
            "result:radiation",
        ]


class TestLoadSnapshot:
    """Fetch + normalize."""

    @patch("earthwatch.services.http.session.get")
    def test_snapshot_with_radiation(self, mock_get: Mock) -> None:
        mock_get.side_effect = _router(_response(NASA_BODY), _response(RADIATION_BODY))

        snapshot = fetch.load_snapshot(0.0, 0.0, today=TODAY)

        assert isinstance(snapshot, DashboardSnapshot)
        assert [m.date for m in snapshot.series] == ["01/16", "01/17"]
        assert snapshot.series[0].solar_percent == 15.0
        assert snapshot.current.temperature == 19.2
        assert snapshot.current.humidity == 72.5
        assert snapshot.current.wind_speed == 2.3
        assert snapshot.current.solar_percent == 15.0
        assert snapshot.latest_date == "20240117"

    @patch("earthwatch.services.http.session.get")
    def test_snapshot_fallback(self, mock_get: Mock) -> None:
        mock_get.side_effect = _router(_response(NASA_BODY), _response({"error": True}))

        snapshot = fetch.load_snapshot(0.0, 0.0, today=TODAY)

        assert snapshot.current.solar_percent == 205

    @patch("earthwatch.services.http.session.get")
    def test_snapshot_invalid_payload(self, mock_get: Mock) -> None:
        mock_get.side_effect = _router(_response({"messages": ["bad"]}), _response(None, False))

        with pytest.raises(DataError):
            fetch.load_snapshot(0.0, 0.0, today=TODAY)


class TestSelectLocation:
    """Selection sequencing around load_snapshot."""

    def test_current_selection_returns_snapshot(self, monkeypatch: pytest.MonkeyPatch) -> None:
        snapshot = DashboardSnapshot(latest_date="20240117")
        monkeypatch.setattr(fetch, "load_snapshot", Mock(return_value=snapshot))
        tracker: SelectionTracker[DashboardSnapshot] = SelectionTracker()
        lima = find_location("lima")
        assert lima is not None

        assert fetch.select_location(lima, tracker) is snapshot
        assert tracker.result is snapshot

    def test_superseded_selection_discarded(self, monkeypatch: pytest.MonkeyPatch) -> None:
        tracker: SelectionTracker[DashboardSnapshot] = SelectionTracker()
        stale = DashboardSnapshot(latest_date="20240101")

        def slow_load(*_args: Any) -> DashboardSnapshot:
            # A newer selection starts while this one is loading
            tracker.select("Tokyo, Japan")
            return stale

        monkeypatch.setattr(fetch, "load_snapshot", slow_load)
        lima = find_location("lima")
        assert lima is not None

        assert fetch.select_location(lima, tracker) is None
        assert tracker.result is None

    def test_error_for_current_selection_raises(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(fetch, "load_snapshot", Mock(side_effect=DataError("no valid data")))
        lima = find_location("lima")
        assert lima is not None

        with pytest.raises(DataError):
            fetch.select_location(lima, SelectionTracker())

    def test_error_for_superseded_selection_ignored(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        tracker: SelectionTracker[DashboardSnapshot] = SelectionTracker()

        def failing_load(*_args: Any) -> DashboardSnapshot:
            tracker.select("Tokyo, Japan")
            raise FetchError("timed out")

        monkeypatch.setattr(fetch, "load_snapshot", failing_load)
        lima = find_location("lima")
        assert lima is not None

        assert fetch.select_location(lima, tracker) is None
