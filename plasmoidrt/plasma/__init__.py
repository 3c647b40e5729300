"""
Plasmoid physical state and its evolution.

This module provides:
- The physical state set at reconnection
- The post-reconnection cooling law
"""

from plasmoidrt.plasma.state import PlasmoidState
from plasmoidrt.plasma.evolution import (
    LocalPlasma,
    cooling_factor,
    cooling_time,
    evolve,
    magnetic_field,
)

__all__ = [
    "PlasmoidState",
    "LocalPlasma",
    "cooling_factor",
    "cooling_time",
    "evolve",
    "magnetic_field",
]
