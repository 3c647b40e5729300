"""
Trajectory providers for the emitting object.

Coordinates are Boyer-Lindquist-like spherical coordinates (t, r, θ, φ) in
geometrical units of the central mass.
"""

from dataclasses import dataclass
import math
from typing import Sequence, Tuple

import numpy as np

from plasmoidrt.core.logging_config import get_logger

logger = get_logger("orbit.trajectory")


@dataclass(frozen=True)
class TrajectorySample:
    """
    Phase-space state of the emitter at one coordinate time.

    Attributes
    ----------
    position : tuple of 4 floats
        (t, r, θ, φ)
    velocity : tuple of 4 floats
        Contravariant 4-velocity (u^t, u^r, u^θ, u^φ)
    """

    position: Tuple[float, float, float, float]
    velocity: Tuple[float, float, float, float]

    def __post_init__(self):
        if len(self.position) != 4 or len(self.velocity) != 4:
            raise ValueError("Position and velocity must both have 4 components")

    @property
    def time(self) -> float:
        return self.position[0]

    def as_array(self) -> np.ndarray:
        """The 8-element vector (position, velocity)."""
        return np.array(tuple(self.position) + tuple(self.velocity), dtype=float)

    @classmethod
    def from_array(cls, coord: Sequence[float]) -> "TrajectorySample":
        """Build a sample from an 8-element (position, velocity) vector."""
        if len(coord) != 8:
            raise ValueError(f"Expected 8 phase-space components, got {len(coord)}")
        values = tuple(float(c) for c in coord)
        return cls(position=values[:4], velocity=values[4:])


def cartesian_position(coord: Sequence[float]) -> np.ndarray:
    """(x, y, z) of the spatial part of a (t, r, θ, φ, ...) vector."""
    r, theta, phi = coord[1], coord[2], coord[3]
    return np.array(
        [
            r * math.sin(theta) * math.cos(phi),
            r * math.sin(theta) * math.sin(phi),
            r * math.cos(theta),
        ]
    )


class CircularOrbit:
    """
    Prograde circular orbit in the equatorial plane of a Kerr black hole.

    Parameters
    ----------
    radius : float
        Orbital radius in geometrical units
    phi0 : float
        Azimuth at t = 0 in radians
    spin : float
        Dimensionless spin of the central object, -1 < a < 1
    """

    def __init__(self, radius: float, phi0: float = 0.0, spin: float = 0.0):
        if not -1.0 < spin < 1.0:
            raise ValueError(f"Spin must lie in (-1, 1), got {spin}")
        denom = radius**1.5 - 3.0 * math.sqrt(radius) + 2.0 * spin if radius > 0 else -1.0
        if denom <= 0:
            raise ValueError(f"No timelike circular orbit at r={radius} for spin {spin}")

        self.radius = radius
        self.phi0 = phi0
        self.spin = spin
        self.angular_velocity = 1.0 / (radius**1.5 + spin)
        self._u_t = (radius**1.5 + spin) / (radius**0.75 * math.sqrt(denom))
        logger.info(
            f"Created CircularOrbit: r={radius:.3f}, a={spin:.3f}, "
            f"period={self.period:.2f} (geometrical units)"
        )

    @property
    def period(self) -> float:
        """Orbital period in coordinate time, geometrical units."""
        return 2.0 * math.pi / self.angular_velocity

    def state_at(self, time: float) -> TrajectorySample:
        phi = self.phi0 + self.angular_velocity * time
        return TrajectorySample(
            position=(time, self.radius, math.pi / 2.0, phi),
            velocity=(self._u_t, 0.0, 0.0, self.angular_velocity * self._u_t),
        )


class StaticPosition:
    """
    Emitter held at a fixed spatial position.

    The 4-velocity is that of a static observer in Schwarzschild,
    u^t = 1 / sqrt(1 - 2/r).
    """

    def __init__(self, radius: float, theta: float = math.pi / 2.0, phi: float = 0.0):
        if radius <= 2.0:
            raise ValueError(f"Static observers need r > 2, got {radius}")
        self.radius = radius
        self.theta = theta
        self.phi = phi

    def state_at(self, time: float) -> TrajectorySample:
        u_t = 1.0 / math.sqrt(1.0 - 2.0 / self.radius)
        return TrajectorySample(
            position=(time, self.radius, self.theta, self.phi),
            velocity=(u_t, 0.0, 0.0, 0.0),
        )
