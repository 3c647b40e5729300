"""
Tabulated synchrotron coefficients stored in FITS files.

Layout: extensions FREQ (Hz), JNU (erg s^-1 cm^-3 sr^-1 Hz^-1) and
ANU (cm^-1); the plasmoid state and the evaluation epoch are primary-header
keys.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Union

import numpy as np

from plasmoidrt.core.logging_config import get_logger
from plasmoidrt.io.fits_rw import FitsRW
from plasmoidrt.plasma.state import PlasmoidState

logger = get_logger("io.tables")

# FITS keyword for each state field
STATE_KEYS = {
    "number_density": "NE",
    "temperature_reconnection": "TEMPREC",
    "magnetization": "MAGNETIZ",
    "time_ref": "TIMEREF",
    "pl_index": "PLINDEX",
}


@dataclass
class CoefficientTable:
    """
    Coefficients on a frequency grid for one plasmoid state and epoch.

    Attributes
    ----------
    frequencies : array
        Frequencies in Hz
    jnu : array
        Emission coefficients
    anu : array
        Absorption coefficients
    state : PlasmoidState
        State the table was computed for
    elapsed : float
        Time since reconnection, geometrical units
    """

    frequencies: np.ndarray
    jnu: np.ndarray
    anu: np.ndarray
    state: PlasmoidState
    elapsed: float = 0.0

    def __post_init__(self):
        if not (len(self.frequencies) == len(self.jnu) == len(self.anu)):
            raise ValueError("frequencies, jnu and anu must have the same length")


def write_coefficient_table(
    filename: Union[str, Path], table: CoefficientTable, overwrite: bool = False
) -> None:
    """
    Write ``table`` to a new FITS file.

    A failed write leaves no file behind.
    """
    rw = FitsRW()
    hdul = rw.fits_create(filename, overwrite=overwrite)
    try:
        rw.fits_write_hdu_data(hdul, "FREQ", table.frequencies)
        rw.fits_write_hdu_data(hdul, "JNU", table.jnu)
        rw.fits_write_hdu_data(hdul, "ANU", table.anu)
        for field, key in STATE_KEYS.items():
            rw.fits_write_key(hdul, key, getattr(table.state, field))
        rw.fits_write_key(hdul, "ELAPSED", table.elapsed)
    except Exception as e:
        logger.error(f"Failed to write coefficient table {filename}: {e}")
        try:
            rw.fits_close(hdul)
        finally:
            Path(filename).unlink(missing_ok=True)
        raise

    rw.fits_close(hdul)

    logger.info(f"Saved coefficient table ({len(table.frequencies)} frequencies) to {filename}")


def read_coefficient_table(filename: Union[str, Path]) -> CoefficientTable:
    """
    Read a table written by :func:`write_coefficient_table`.

    Raises
    ------
    FileNotFoundError
        If the file does not exist
    KeyError
        If an extension or a header key is missing
    """
    rw = FitsRW()
    hdul = rw.fits_open(filename)
    try:
        frequencies = rw.fits_read_hdu_data(hdul, "FREQ")
        jnu = rw.fits_read_hdu_data(hdul, "JNU")
        anu = rw.fits_read_hdu_data(hdul, "ANU")
        state = PlasmoidState.from_dict(
            {field: rw.fits_read_key(hdul, key) for field, key in STATE_KEYS.items()}
        )
        elapsed = rw.fits_read_key(hdul, "ELAPSED")
    finally:
        rw.fits_close(hdul)

    logger.info(f"Loaded coefficient table from {filename}")
    return CoefficientTable(frequencies=frequencies, jnu=jnu, anu=anu, state=state, elapsed=elapsed)


def tabulate_plasmoid(plasmoid, frequencies, elapsed: float = 0.0) -> CoefficientTable:
    """Coefficient table of a :class:`~plasmoidrt.astrobj.Plasmoid` at ``elapsed``."""
    frequencies = np.atleast_1d(np.asarray(frequencies, dtype=float))
    jnu, anu = plasmoid.tabulate(frequencies, elapsed)
    return CoefficientTable(
        frequencies=frequencies,
        jnu=np.asarray(jnu),
        anu=np.asarray(anu),
        state=PlasmoidState.from_dict(plasmoid.state.to_dict()),
        elapsed=elapsed,
    )
