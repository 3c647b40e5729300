"""
Tests for unit conversion utilities.
"""

import pytest
import numpy as np
from plasmoidrt.core import units
from plasmoidrt.core.constants import SGRA_MASS_MSUN


def test_geometric_units_sun():
    """GM/c^2 of one solar mass is about 1.477 km."""
    length_cm, time_s = units.geometric_units(1.0)
    assert length_cm == pytest.approx(1.4766e5, rel=1e-3)
    assert time_s == pytest.approx(4.9255e-6, rel=1e-3)


def test_geometric_units_scale_with_mass():
    l1, t1 = units.geometric_units(1.0)
    l2, t2 = units.geometric_units(SGRA_MASS_MSUN)
    assert l2 / l1 == pytest.approx(SGRA_MASS_MSUN)
    assert t2 / t1 == pytest.approx(SGRA_MASS_MSUN)


def test_geometric_units_invalid_mass():
    with pytest.raises(ValueError, match="positive"):
        units.geometric_units(0.0)


def test_temperature_conversion():
    """Test temperature conversions."""
    T_ev = units.convert_temperature(1e10, "K", "eV")
    assert T_ev == pytest.approx(8.617333e5, rel=1e-6)

    T_kev = units.convert_temperature(1e10, "K", "keV")
    assert T_kev == pytest.approx(861.7333, rel=1e-6)

    # Round trip
    assert units.convert_temperature(T_kev, "keV", "K") == pytest.approx(1e10)


def test_density_conversion():
    """Test density conversions."""
    assert units.convert_density(1e6, "cm^-3", "m^-3") == pytest.approx(1e12)
    assert units.convert_density(1e12, "m^-3", "cm^-3") == pytest.approx(1e6)
    assert units.convert_density(5.0, "cm-3", "cm**-3") == 5.0


def test_time_conversion():
    unit_time_s = 21.0
    assert units.convert_time(10.0, "geometrical_time", "s", unit_time_s) == pytest.approx(210.0)
    assert units.convert_time(210.0, "s", "geometrical_time", unit_time_s) == pytest.approx(10.0)
    assert units.convert_time(2.0, "h", "min") == pytest.approx(120.0)
    assert units.convert_time(3.0, "geometrical", "geometrical_time") == 3.0


def test_time_conversion_needs_scale():
    with pytest.raises(ValueError, match="unit_time_s"):
        units.convert_time(1.0, "geometrical_time", "s")


def test_length_conversion():
    unit_length_cm = 6.3e11
    assert units.convert_length(2.0, "geometrical", "cm", unit_length_cm) == pytest.approx(1.26e12)
    assert units.convert_length(1.0, "km", "m") == pytest.approx(1e3)
    assert units.convert_length(1.0, "pc", "au") == pytest.approx(206264.8, rel=1e-6)

    with pytest.raises(ValueError, match="unit_length_cm"):
        units.convert_length(1.0, "geometrical", "cm")


def test_invalid_units():
    """Test error handling for invalid units."""
    with pytest.raises(ValueError, match="Unknown source unit"):
        units.convert_temperature(100, "F", "K")

    with pytest.raises(ValueError, match="Unknown target unit"):
        units.convert_density(1e6, "cm^-3", "mol/l")

    with pytest.raises(ValueError, match="Unknown source unit"):
        units.convert_time(1.0, "fortnight", "s")


def test_array_conversion():
    """Test that conversions work with arrays."""
    n = np.array([1e5, 1e6, 1e7])
    n_m3 = units.convert_density(n, "cm^-3", "m^-3")
    assert isinstance(n_m3, np.ndarray)
    assert np.allclose(n_m3, n * 1e6)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
