"""
Radiation and radiative transfer.

This module provides:
- Synchrotron emission/absorption coefficients (thermal, power-law)
- The exact one-step radiative transfer update

Batch integration over many rays lives in ``plasmoidrt.radiation.batch``.
"""

from plasmoidrt.radiation.synchrotron import (
    PowerLawSynchrotron,
    ThermalSynchrotron,
    cyclotron_frequency,
    planck_function,
)
from plasmoidrt.radiation.transfer import (
    euler_transfer_step,
    exact_transfer_step,
    sanitize_coefficients,
)

__all__ = [
    "ThermalSynchrotron",
    "PowerLawSynchrotron",
    "cyclotron_frequency",
    "planck_function",
    "exact_transfer_step",
    "euler_transfer_step",
    "sanitize_coefficients",
]
