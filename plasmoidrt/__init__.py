"""
plasmoidrt: synchrotron emission of reconnection plasmoids for ray tracing

A Python library evaluating the local emission and absorption of a plasmoid
orbiting a compact object, for use inside a general-relativistic ray tracer.
"""

__version__ = "0.1.0"
__author__ = "plasmoidrt contributors"

# Core imports for convenience
from plasmoidrt.core import constants
from plasmoidrt.core import units
from plasmoidrt.astrobj import Plasmoid, PlasmoidConfig
from plasmoidrt.plasma import PlasmoidState

__all__ = [
    "constants",
    "units",
    "Plasmoid",
    "PlasmoidConfig",
    "PlasmoidState",
]
