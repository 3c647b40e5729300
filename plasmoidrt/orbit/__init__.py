"""
Trajectory providers for the emitting object.
"""

from plasmoidrt.orbit.trajectory import (
    CircularOrbit,
    StaticPosition,
    TrajectorySample,
    cartesian_position,
)

__all__ = [
    "CircularOrbit",
    "StaticPosition",
    "TrajectorySample",
    "cartesian_position",
]
