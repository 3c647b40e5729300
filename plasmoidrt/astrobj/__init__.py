"""
Astronomical objects seen by the ray tracer.
"""

from plasmoidrt.astrobj.config import PlasmoidConfig
from plasmoidrt.astrobj.plasmoid import Plasmoid

__all__ = [
    "Plasmoid",
    "PlasmoidConfig",
]
