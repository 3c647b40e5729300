"""
Tests for the plasmoid physical state.
"""

import math

import pytest

from plasmoidrt.plasma.state import PlasmoidState


def test_defaults_are_valid():
    assert PlasmoidState().validate() is True


def test_internal_unit_accessors(sample_state):
    assert sample_state.number_density == 1e6
    assert sample_state.temperature_reconnection == 1e10
    assert sample_state.magnetization == 1.0
    assert sample_state.time_ref == 0.0
    assert sample_state.pl_index == 3.0


def test_number_density_unit_round_trip(sample_state):
    """Setting and reading back with the same unit reproduces the value."""
    sample_state.set_number_density(3.7e11, "m^-3")
    assert sample_state.get_number_density("m^-3") == pytest.approx(3.7e11, rel=1e-12)
    assert sample_state.number_density == pytest.approx(3.7e5)
    assert sample_state.get_number_density() == pytest.approx(3.7e5)


def test_temperature_unit_round_trip(sample_state):
    sample_state.set_temperature_reconnection(250.0, "keV")
    assert sample_state.get_temperature_reconnection("keV") == pytest.approx(250.0, rel=1e-12)
    assert sample_state.temperature_reconnection == pytest.approx(2.901e9, rel=1e-3)


def test_time_ref_unit_round_trip(sample_state):
    sample_state.set_time_ref(2.5, "h", unit_time_s=20.0)
    assert sample_state.time_ref == pytest.approx(450.0)
    assert sample_state.get_time_ref("h", unit_time_s=20.0) == pytest.approx(2.5)
    assert sample_state.get_time_ref() == pytest.approx(450.0)


def test_negative_density_rejected(sample_state):
    """Invalid values raise and leave the state unchanged."""
    with pytest.raises(ValueError, match="non-negative"):
        sample_state.number_density = -1.0
    assert sample_state.number_density == 1e6

    with pytest.raises(ValueError):
        sample_state.set_number_density(-5.0, "m^-3")
    assert sample_state.number_density == 1e6


def test_zero_density_accepted(sample_state):
    sample_state.number_density = 0.0
    assert sample_state.number_density == 0.0


def test_non_positive_temperature_rejected(sample_state):
    with pytest.raises(ValueError, match="positive"):
        sample_state.temperature_reconnection = -1e9
    with pytest.raises(ValueError, match="positive"):
        sample_state.temperature_reconnection = 0.0
    assert sample_state.temperature_reconnection == 1e10


def test_constructor_rejects_negative_density():
    with pytest.raises(ValueError):
        PlasmoidState(number_density=-1.0)


def test_other_setters_accept_any_value(sample_state):
    """Magnetization and index are only checked by validate()."""
    sample_state.magnetization = -0.5
    sample_state.pl_index = 1.5
    assert sample_state.magnetization == -0.5
    with pytest.raises(ValueError, match="Magnetization"):
        sample_state.validate()


def test_validate_rejects_non_finite(sample_state):
    sample_state.time_ref = math.nan
    with pytest.raises(ValueError, match="finite"):
        sample_state.validate()


def test_dict_round_trip(sample_state):
    data = sample_state.to_dict()
    assert set(data) == {
        "number_density",
        "temperature_reconnection",
        "magnetization",
        "time_ref",
        "pl_index",
    }
    assert PlasmoidState.from_dict(data) == sample_state


def test_repr_mentions_fields(sample_state):
    text = repr(sample_state)
    assert "number_density=1000000.0" in text
    assert "magnetization=1.0" in text


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
