"""
Pytest configuration and shared fixtures for plasmoidrt tests.

This module provides:
- Plasmoid states and objects matching the reference flare scenario
- Configuration dictionaries and temporary config files
"""

import os
import math
import tempfile
from pathlib import Path

import numpy as np
import pytest

from plasmoidrt.astrobj.plasmoid import Plasmoid
from plasmoidrt.orbit.trajectory import CircularOrbit
from plasmoidrt.plasma.state import PlasmoidState


@pytest.fixture
def sample_state():
    """Reference state: n=1e6 cm^-3, T=1e10 K, sigma=1, reconnection at t=0."""
    return PlasmoidState(
        number_density=1e6,
        temperature_reconnection=1e10,
        magnetization=1.0,
        time_ref=0.0,
        pl_index=3.0,
    )


@pytest.fixture
def plasmoid(sample_state):
    """Plasmoid on a circular orbit at r=10 around Sgr A*."""
    return Plasmoid(state=sample_state, trajectory=CircularOrbit(10.0), radius=1.0)


@pytest.fixture
def photon_at():
    """Factory for photon coordinates at a given coordinate time."""

    def _create(t: float = 0.0, r: float = 10.0, phi: float = 0.0):
        return np.array([t, r, math.pi / 2, phi, 1.0, 0.0, 0.0, 0.0])

    return _create


@pytest.fixture
def sample_frequencies():
    """A few frequencies around the sub-mm band."""
    return np.array([1e10, 1e11, 2.3e11, 1e12])


@pytest.fixture
def sample_config_dict():
    """Create a sample configuration dictionary."""
    return {
        "plasmoid": {
            "number_density": 1.0e6,
            "temperature_reconnection": 1.0e10,
            "magnetization": 1.0,
            "time_ref": 0.0,
            "pl_index": 3.0,
            "radius": 1.0,
            "central_mass_msun": 4.297e6,
            "orbit": {"radius": 10.0, "phi0": 0.0, "spin": 0.0},
        }
    }


@pytest.fixture
def temp_config_file(sample_config_dict):
    """Create a temporary YAML config file."""
    import yaml

    config_fd, config_path = tempfile.mkstemp(suffix=".yaml")
    os.close(config_fd)  # Close file descriptor to prevent leaks

    with open(config_path, "w") as f:
        yaml.dump(sample_config_dict, f)

    yield config_path

    Path(config_path).unlink()
