"""
Input/output utilities.

This module provides:
- FITS persistence of 1-D arrays and header keys
- Tabulated synchrotron coefficients
"""

from plasmoidrt.io.fits_rw import FitsRW
from plasmoidrt.io.tables import (
    CoefficientTable,
    read_coefficient_table,
    tabulate_plasmoid,
    write_coefficient_table,
)

__all__ = [
    "FitsRW",
    "CoefficientTable",
    "read_coefficient_table",
    "tabulate_plasmoid",
    "write_coefficient_table",
]
