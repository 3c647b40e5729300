"""
FITS read/write helpers for one-dimensional arrays and scalar header keys.
"""

from pathlib import Path
from typing import Union

import numpy as np
from astropy.io import fits

from plasmoidrt.core.logging_config import get_logger

logger = get_logger("io.fits_rw")

HDUSpec = Union[str, int]


class FitsRW:
    """
    Minimal FITS persistence layer.

    Files are handled as ``astropy.io.fits.HDUList`` objects opened in update
    mode. HDUs are addressed either by EXTNAME or by 1-based number
    (1 is the primary HDU). Every failure is raised to the caller:
    ``FileNotFoundError`` for missing files, ``KeyError`` for missing
    extensions or keys, ``OSError`` for anything the FITS layer reports.
    """

    def fits_create(self, filename: Union[str, Path], overwrite: bool = False) -> fits.HDUList:
        """
        Create a FITS file whose primary HDU holds a single pixel equal to 0.

        Parameters
        ----------
        filename : str or Path
            File to create
        overwrite : bool
            Replace an existing file

        Returns
        -------
        fits.HDUList
            The new file, opened in update mode

        Raises
        ------
        FileExistsError
            If the file exists and ``overwrite`` is False
        """
        filename = Path(filename)
        if filename.exists() and not overwrite:
            raise FileExistsError(f"FITS file already exists: {filename}")

        fits.PrimaryHDU(data=np.zeros(1)).writeto(filename, overwrite=overwrite)
        logger.debug(f"Created FITS file {filename}")
        return fits.open(filename, mode="update")

    def fits_open(self, filename: Union[str, Path]) -> fits.HDUList:
        """
        Open an existing FITS file in update mode.

        Raises
        ------
        FileNotFoundError
            If the file does not exist
        """
        filename = Path(filename)
        if not filename.exists():
            raise FileNotFoundError(f"FITS file not found: {filename}")
        return fits.open(filename, mode="update")

    def fits_close(self, hdul: fits.HDUList) -> None:
        """Flush pending changes and close the file."""
        hdul.close()

    def fits_write_hdu_data(self, hdul: fits.HDUList, extname: str, data) -> None:
        """
        Write a 1-D array in the image extension ``extname``.

        An existing extension with the same name is replaced.
        """
        data = np.asarray(data, dtype=np.float64)
        if data.ndim != 1:
            raise ValueError(f"Only 1-D arrays can be stored, got shape {data.shape}")

        hdu = fits.ImageHDU(data=data, name=extname)
        try:
            hdul[hdul.index_of(extname)] = hdu
        except KeyError:
            hdul.append(hdu)
        logger.debug(f"Wrote extension {extname} ({data.size} values)")

    def fits_write_key(
        self, hdul: fits.HDUList, key: str, value: float, hdu: HDUSpec = "PRIMARY"
    ) -> None:
        """Store a scalar key in the header of ``hdu`` (primary by default)."""
        self._hdu(hdul, hdu).header[key] = value

    def fits_read_hdu_data(self, hdul: fits.HDUList, hdu: HDUSpec) -> np.ndarray:
        """
        Read back the 1-D array of ``hdu``.

        Raises
        ------
        KeyError
            If the extension does not exist or holds no data
        """
        data = self._hdu(hdul, hdu).data
        if data is None:
            raise KeyError(f"HDU {hdu!r} holds no data")
        return np.array(data, dtype=np.float64).ravel()

    def fits_read_key(self, hdul: fits.HDUList, key: str, hdu: HDUSpec = 1) -> float:
        """
        Read a scalar key from ``hdu`` (primary by default).

        Raises
        ------
        KeyError
            If the extension or the key does not exist
        """
        header = self._hdu(hdul, hdu).header
        if key not in header:
            raise KeyError(f"Key {key!r} not found in HDU {hdu!r}")
        return header[key]

    @staticmethod
    def _hdu(hdul: fits.HDUList, hdu: HDUSpec):
        if isinstance(hdu, str):
            if hdu.upper() == "PRIMARY":
                return hdul[0]
            return hdul[hdul.index_of(hdu)]

        if not 1 <= hdu <= len(hdul):
            raise KeyError(f"HDU number {hdu} out of range 1..{len(hdul)}")
        return hdul[hdu - 1]
