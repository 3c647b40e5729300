"""
Tests for FITS persistence and coefficient tables.
"""

import numpy as np
import pytest

from plasmoidrt.astrobj.plasmoid import Plasmoid
from plasmoidrt.io.fits_rw import FitsRW
from plasmoidrt.io.tables import (
    CoefficientTable,
    read_coefficient_table,
    tabulate_plasmoid,
    write_coefficient_table,
)


@pytest.fixture
def rw():
    return FitsRW()


@pytest.fixture
def fits_file(rw, tmp_path):
    """A FITS file with one data extension and a few header keys."""
    path = tmp_path / "coeffs.fits"
    hdul = rw.fits_create(path)
    rw.fits_write_hdu_data(hdul, "FREQ", np.array([1e10, 1e11, 1e12]))
    rw.fits_write_key(hdul, "NE", 1e6)
    rw.fits_write_key(hdul, "NPTS", 3, hdu="FREQ")
    rw.fits_close(hdul)
    return path


def test_create_has_dummy_primary(rw, tmp_path):
    path = tmp_path / "empty.fits"
    hdul = rw.fits_create(path)
    rw.fits_close(hdul)

    hdul = rw.fits_open(path)
    try:
        assert np.array_equal(rw.fits_read_hdu_data(hdul, 1), [0.0])
        assert len(hdul) == 1
    finally:
        rw.fits_close(hdul)


def test_create_refuses_existing_file(rw, fits_file):
    with pytest.raises(FileExistsError):
        rw.fits_create(fits_file)

    hdul = rw.fits_create(fits_file, overwrite=True)
    assert len(hdul) == 1
    rw.fits_close(hdul)


def test_open_missing_file(rw, tmp_path):
    with pytest.raises(FileNotFoundError):
        rw.fits_open(tmp_path / "missing.fits")


def test_read_data_by_name_and_number(rw, fits_file):
    hdul = rw.fits_open(fits_file)
    try:
        by_name = rw.fits_read_hdu_data(hdul, "FREQ")
        by_number = rw.fits_read_hdu_data(hdul, 2)
    finally:
        rw.fits_close(hdul)

    assert np.array_equal(by_name, [1e10, 1e11, 1e12])
    assert np.array_equal(by_number, by_name)
    assert by_name.dtype == np.float64


def test_read_keys(rw, fits_file):
    hdul = rw.fits_open(fits_file)
    try:
        assert rw.fits_read_key(hdul, "NE") == 1e6
        assert rw.fits_read_key(hdul, "NE", "PRIMARY") == 1e6
        assert rw.fits_read_key(hdul, "NPTS", "FREQ") == 3
        assert rw.fits_read_key(hdul, "NPTS", 2) == 3
    finally:
        rw.fits_close(hdul)


def test_missing_extension_and_key(rw, fits_file):
    hdul = rw.fits_open(fits_file)
    try:
        with pytest.raises(KeyError):
            rw.fits_read_hdu_data(hdul, "JNU")
        with pytest.raises(KeyError):
            rw.fits_read_hdu_data(hdul, 5)
        with pytest.raises(KeyError):
            rw.fits_read_key(hdul, "TEMPREC")
        with pytest.raises(KeyError):
            rw.fits_read_key(hdul, "NE", "ANU")
    finally:
        rw.fits_close(hdul)


def test_rewrite_extension_replaces_it(rw, fits_file):
    hdul = rw.fits_open(fits_file)
    rw.fits_write_hdu_data(hdul, "FREQ", np.array([5.0, 6.0]))
    rw.fits_close(hdul)

    hdul = rw.fits_open(fits_file)
    try:
        assert len(hdul) == 2
        assert np.array_equal(rw.fits_read_hdu_data(hdul, "FREQ"), [5.0, 6.0])
    finally:
        rw.fits_close(hdul)


def test_only_1d_arrays(rw, tmp_path):
    hdul = rw.fits_create(tmp_path / "x.fits")
    try:
        with pytest.raises(ValueError, match="1-D"):
            rw.fits_write_hdu_data(hdul, "IMG", np.zeros((2, 2)))
    finally:
        rw.fits_close(hdul)


def test_coefficient_table_round_trip(plasmoid, sample_frequencies, tmp_path):
    table = tabulate_plasmoid(plasmoid, sample_frequencies, elapsed=25.0)
    path = tmp_path / "table.fits"
    write_coefficient_table(path, table)

    loaded = read_coefficient_table(path)
    assert np.allclose(loaded.frequencies, sample_frequencies)
    assert np.allclose(loaded.jnu, table.jnu, rtol=1e-12)
    assert np.allclose(loaded.anu, table.anu, rtol=1e-12)
    assert loaded.elapsed == pytest.approx(25.0)
    assert loaded.state.to_dict() == pytest.approx(plasmoid.state.to_dict())


def test_tabulate_matches_plasmoid(plasmoid, sample_frequencies):
    table = tabulate_plasmoid(plasmoid, sample_frequencies, elapsed=0.0)
    jnu, anu = plasmoid.tabulate(sample_frequencies)
    assert np.array_equal(table.jnu, jnu)
    assert np.all(table.jnu > 0)


def test_tabulate_zero_density(sample_state, sample_frequencies):
    sample_state.number_density = 0.0
    jnu, anu = Plasmoid(state=sample_state).tabulate(sample_frequencies)
    assert np.all(jnu == 0) and np.all(anu == 0)


def test_table_length_mismatch(sample_state):
    with pytest.raises(ValueError, match="same length"):
        CoefficientTable(np.ones(3), np.ones(2), np.ones(3), sample_state)


def test_failed_table_write_leaves_no_file(plasmoid, sample_frequencies, tmp_path, monkeypatch):
    """A write that fails midway removes the file, so a retry can succeed."""
    table = tabulate_plasmoid(plasmoid, sample_frequencies)
    path = tmp_path / "table.fits"
    original = FitsRW.fits_write_hdu_data

    def failing_write(self, hdul, extname, data):
        if extname == "JNU":
            raise OSError("disk full")
        original(self, hdul, extname, data)

    monkeypatch.setattr(FitsRW, "fits_write_hdu_data", failing_write)
    with pytest.raises(OSError, match="disk full"):
        write_coefficient_table(path, table)
    assert not path.exists()

    monkeypatch.setattr(FitsRW, "fits_write_hdu_data", original)
    write_coefficient_table(path, table)
    assert np.allclose(read_coefficient_table(path).jnu, table.jnu)


def test_read_incomplete_table(rw, fits_file):
    """A file without the JNU extension is reported, not patched."""
    with pytest.raises(KeyError):
        read_coefficient_table(fits_file)


def test_read_missing_table(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_coefficient_table(tmp_path / "nope.fits")


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
