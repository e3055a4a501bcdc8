"""Preset city locations offered on the globe."""

from __future__ import annotations

from earthwatch.schemas import Coordinate, Location


def _preset(name: str, district: str, lat: float, lon: float) -> Location:
    return Location(
        name=name, district=district, coordinate=Coordinate(latitude=lat, longitude=lon)
    )


LOCATIONS: list[Location] = [
    _preset("Lima, Peru", "Miraflores", -12.0464, -77.0428),
    _preset("New York, USA", "Manhattan", 40.7128, -74.0060),
    _preset("Tokyo, Japan", "Shibuya", 35.6762, 139.6503),
    _preset("London, UK", "Westminster", 51.5074, -0.1278),
    _preset("Sydney, Australia", "CBD", -33.8688, 151.2093),
    _preset("Dubai, UAE", "Downtown", 25.2048, 55.2708),
]


def find_location(name: str) -> Location | None:
    """
    Look up a preset by name, case-insensitively.

    Matches either the full name (``"Tokyo, Japan"``) or the city part
    before the comma (``"tokyo"``).
    """
    wanted = name.strip().casefold()
    for location in LOCATIONS:
        full = location.name.casefold()
        if wanted in (full, full.split(",")[0].strip()):
            return location
    return None
