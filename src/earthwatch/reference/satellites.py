"""Earth-observation satellites drawn in orbit around the globe.

Altitudes and periods are nominal mission values; the orbit model in
``analysis/orbits.py`` treats every orbit as circular.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Satellite:
    """Orbital parameters for one spacecraft."""

    name: str
    altitude_km: float
    period_min: float
    inclination_deg: float
    eccentricity: float
    color: str
    scene_offset: float = 0.0

    @property
    def period_hours(self) -> float:
        return self.period_min / 60


SATELLITES: list[Satellite] = [
    Satellite("AQUA", 705, 98.8, 98.2, 0.001, "#ff4d4d"),
    Satellite("AQUARIUS", 657, 96, 66, 0.002, "#ffcc00"),
    Satellite("AURA", 705, 98.8, 98.2, 0.001, "#33cc33"),
    Satellite("CALIPSO", 705, 98.8, 98.2, 0.001, "#ff66cc"),
    Satellite("CloudSat", 705, 98.8, 98.2, 0.001, "#ff9933"),
    Satellite("Global Precipitation Measurement", 407, 93, 65, 0.002, "#9933ff"),
    Satellite("Landsat 8", 705, 99, 98.2, 0.001, "#00cc99"),
    Satellite("OCO-2", 705, 98.8, 98.2, 0.001, "#ff3366"),
    Satellite("OSTM/Jason-2", 1336, 112, 66, 0.0008, "#3399ff"),
    Satellite("SMAP", 685, 98.5, 98.2, 0.001, "#cc33cc"),
]

# The station flies a little higher in the scene so it clears the satellite shell.
ISS = Satellite("International Space Station", 700, 92.68, 51.6, 0.0, "#f6e0b5", scene_offset=0.5)
