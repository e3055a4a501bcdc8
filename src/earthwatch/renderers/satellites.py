"""Satellite catalog table with scene positions at a playback time."""

from __future__ import annotations

from typing import TYPE_CHECKING

from earthwatch.analysis.orbits import orbit_position, orbit_radius
from earthwatch.renderers import render_template

if TYPE_CHECKING:
    from earthwatch.reference.satellites import Satellite


def build_satellites_html(satellites: list[Satellite], elapsed: float = 0.0) -> str:
    """Build the satellite table; positions are in globe scene units."""
    rows = []
    for sat in satellites:
        pos = orbit_position(sat, elapsed)
        rows.append(
            {
                "name": sat.name,
                "color": sat.color,
                "altitude": f"{sat.altitude_km:.0f} km",
                "period": f"{sat.period_min:.1f} min",
                "inclination": f"{sat.inclination_deg:.1f}°",
                "radius": f"{orbit_radius(sat):.3f}",
                "position": f"({pos.x:.2f}, {pos.y:.2f}, {pos.z:.2f})",
            }
        )
    return render_template("satellites.html.j2", rows=rows, elapsed=f"{elapsed:.0f}")
