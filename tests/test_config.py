"""
Tests for configuration management.
"""

import json
import tempfile
from pathlib import Path

import pytest
import yaml

from plasmoidrt.astrobj.config import PlasmoidConfig
from plasmoidrt.core.config import load_config, save_config, validate_plasmoid_config


def test_load_config_yaml(temp_config_file):
    config = load_config(temp_config_file)
    assert "plasmoid" in config
    assert config["plasmoid"]["temperature_reconnection"] == 1.0e10


def test_load_config_json(sample_config_dict, tmp_path):
    config_path = tmp_path / "plasmoid.json"
    config_path.write_text(json.dumps(sample_config_dict))

    config = load_config(config_path)
    assert config["plasmoid"]["orbit"]["radius"] == 10.0


def test_load_config_not_found():
    with pytest.raises(FileNotFoundError):
        load_config("nonexistent.yaml")


def test_load_config_invalid_format():
    config_fd, config_path = tempfile.mkstemp(suffix=".txt")

    try:
        with open(config_path, "w") as f:
            f.write("not yaml or json")

        with pytest.raises(ValueError, match="Unsupported config file format"):
            load_config(config_path)
    finally:
        Path(config_path).unlink()


def test_validate_plasmoid_config(sample_config_dict):
    assert validate_plasmoid_config(sample_config_dict) is True


def test_validate_missing_section():
    with pytest.raises(ValueError, match="'plasmoid' section"):
        validate_plasmoid_config({"star": {}})


@pytest.mark.parametrize("field", ["number_density", "temperature_reconnection", "magnetization"])
def test_validate_missing_required_field(sample_config_dict, field):
    del sample_config_dict["plasmoid"][field]
    with pytest.raises(ValueError, match=field):
        validate_plasmoid_config(sample_config_dict)


@pytest.mark.parametrize(
    "field, value, message",
    [
        ("number_density", -1.0, "non-negative"),
        ("temperature_reconnection", 0.0, "positive"),
        ("magnetization", -2.0, "non-negative"),
        ("central_mass_msun", 0.0, "positive"),
        ("radius", -1.0, "positive"),
        ("time_ref", "soon", "finite number"),
        ("pl_index", float("nan"), "finite number"),
    ],
)
def test_validate_rejects_bad_values(sample_config_dict, field, value, message):
    sample_config_dict["plasmoid"][field] = value
    with pytest.raises(ValueError, match=message):
        validate_plasmoid_config(sample_config_dict)


def test_validate_orbit(sample_config_dict):
    sample_config_dict["plasmoid"]["orbit"] = {"phi0": 0.0}
    with pytest.raises(ValueError, match="Orbit config missing 'radius'"):
        validate_plasmoid_config(sample_config_dict)

    sample_config_dict["plasmoid"]["orbit"] = [10.0]
    with pytest.raises(ValueError, match="mapping"):
        validate_plasmoid_config(sample_config_dict)


def test_save_config_yaml_and_json(sample_config_dict, tmp_path):
    save_config(sample_config_dict, tmp_path / "out.yaml")
    save_config(sample_config_dict, tmp_path / "out.json")

    assert yaml.safe_load((tmp_path / "out.yaml").read_text()) == sample_config_dict
    assert json.loads((tmp_path / "out.json").read_text()) == sample_config_dict


def test_save_config_unknown_suffix_writes_yaml(sample_config_dict, tmp_path):
    save_config(sample_config_dict, tmp_path / "out.cfg")
    assert (tmp_path / "out.yaml").exists()
    assert not (tmp_path / "out.cfg").exists()


def test_plasmoid_config_from_file(temp_config_file):
    config = PlasmoidConfig.from_file(temp_config_file)
    assert config.number_density == 1e6
    assert config.orbit_radius == 10.0
    assert config.validate() is True


def test_plasmoid_config_defaults():
    config = PlasmoidConfig.from_dict(
        {"plasmoid": {"number_density": 1e6, "temperature_reconnection": 1e10, "magnetization": 0.1}}
    )
    assert config.time_ref == 0.0
    assert config.orbit_radius is None
    assert config.temperature_floor > 0
    assert config.density_floor == 0.0


def test_plasmoid_config_dict_round_trip(sample_config_dict):
    config = PlasmoidConfig.from_dict(sample_config_dict)
    assert PlasmoidConfig.from_dict(config.to_dict()) == config


def test_plasmoid_config_validate_rejects():
    config = PlasmoidConfig(number_density=1e6, temperature_reconnection=1e10, magnetization=1.0)
    config.temperature_floor = 0.0
    with pytest.raises(ValueError, match="temperature_floor"):
        config.validate()

    config.temperature_floor = 1e7
    config.orbit_radius = -3.0
    with pytest.raises(ValueError, match="orbit_radius"):
        config.validate()


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
