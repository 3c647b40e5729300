"""
Core utilities.

This module provides:
- Physical constants (cgs)
- Units and unit conversion
- Configuration and logging
- Abstract base classes and protocols
"""

from plasmoidrt.core import constants
from plasmoidrt.core import units
from plasmoidrt.core import config
from plasmoidrt.core import logging_config
from plasmoidrt.core.abc import SpectrumModel, TrajectoryProvider

__all__ = [
    # Modules
    "constants",
    "units",
    "config",
    "logging_config",
    # Abstract base classes
    "SpectrumModel",
    "TrajectoryProvider",
]
