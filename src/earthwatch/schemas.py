"""
Domain models for the dashboard.

Pydantic models for coordinates and the normalized dashboard output.
Snapshot models serialize with camelCase aliases (``windSpeed``,
``solarPercent``, ``latestDate``) to match the panel's data contract.
"""

from __future__ import annotations

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel

# =============================================================================
# Geographic
# =============================================================================


class Coordinate(BaseModel):
    """Geographic point supplied by the caller."""

    model_config = {"frozen": True}

    latitude: float = Field(..., ge=-90, le=90)
    longitude: float = Field(..., ge=-180, le=180)


class Location(BaseModel):
    """A preset city shown as a marker on the globe."""

    model_config = {"frozen": True, "str_strip_whitespace": True}

    name: str
    district: str
    coordinate: Coordinate
    color: str = "#08d8f6"

    @property
    def lat(self) -> float:
        return self.coordinate.latitude

    @property
    def lon(self) -> float:
        return self.coordinate.longitude


# =============================================================================
# Dashboard output
# =============================================================================

_SNAPSHOT_CONFIG = {"frozen": True, "alias_generator": to_camel, "populate_by_name": True}


class DailyMetric(BaseModel):
    """One chart entry: a valid day's readings, rounded to one decimal."""

    model_config = _SNAPSHOT_CONFIG

    date: str = Field(..., description="Chart label, MM/DD")
    temperature: float | None = None
    humidity: float | None = None
    wind_speed: float | None = None
    solar_percent: float | None = None


class CurrentConditions(BaseModel):
    """Metric-card values; absent readings are shown as 0."""

    model_config = _SNAPSHOT_CONFIG

    temperature: float = 0.0
    humidity: float = 0.0
    wind_speed: float = 0.0
    solar_percent: float = 0.0

    @classmethod
    def from_metric(cls, metric: DailyMetric | None) -> CurrentConditions:
        """Take a series entry's readings, defaulting each missing one to 0."""
        if metric is None:
            return cls()
        return cls(
            temperature=metric.temperature or 0.0,
            humidity=metric.humidity or 0.0,
            wind_speed=metric.wind_speed or 0.0,
            solar_percent=metric.solar_percent or 0.0,
        )


class DashboardSnapshot(BaseModel):
    """Normalized output for one location selection."""

    model_config = _SNAPSHOT_CONFIG

    current: CurrentConditions = Field(default_factory=CurrentConditions)
    series: list[DailyMetric] = Field(default_factory=list, max_length=7)
    latest_date: str = Field(..., description="Date key of the last kept day, YYYYMMDD")
