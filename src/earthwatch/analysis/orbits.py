"""Scene placement for globe markers and orbiting satellites.

Scene units: the globe has radius 2.  Orbits are circular and inclined about
the x-axis; no perturbations, no eccentricity.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from earthwatch.reference.satellites import Satellite

GLOBE_RADIUS = 2.0
MARKER_RADIUS = 2.02

# km -> scene units
ALTITUDE_SCALE = 0.000314

# Orbits play back at 1% of real angular speed.
TIME_SCALE = 0.01


@dataclass(frozen=True)
class Vector3:
    x: float
    y: float
    z: float


def orbit_radius(satellite: Satellite) -> float:
    """Orbit radius in scene units."""
    return satellite.altitude_km * ALTITUDE_SCALE + GLOBE_RADIUS + satellite.scene_offset


def angular_speed(satellite: Satellite) -> float:
    """Radians per elapsed second of playback."""
    return (2 * math.pi / satellite.period_hours) * TIME_SCALE


def orbit_position(satellite: Satellite, elapsed: float, initial_angle: float = 0.0) -> Vector3:
    """Position after ``elapsed`` seconds, starting ``initial_angle`` radians along the orbit."""
    angle = elapsed * angular_speed(satellite) + initial_angle
    radius = orbit_radius(satellite)
    inclination = math.radians(satellite.inclination_deg)
    in_plane = radius * math.sin(angle)
    return Vector3(
        x=radius * math.cos(angle),
        y=in_plane * math.cos(inclination),
        z=in_plane * math.sin(inclination),
    )


def marker_position(lat: float, lon: float, radius: float = MARKER_RADIUS) -> Vector3:
    """Place a lat/lon marker just above the globe surface."""
    phi = math.radians(90 - lat)
    theta = math.radians(lon + 180)
    return Vector3(
        x=-(radius * math.sin(phi) * math.cos(theta)),
        y=radius * math.cos(phi),
        z=radius * math.sin(phi) * math.sin(theta),
    )
