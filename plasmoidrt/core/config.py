"""
Configuration management for plasmoidrt.

Provides utilities for loading and validating YAML/JSON configuration files
describing a plasmoid (physical state, central mass, orbit).
"""

import json
import math
from pathlib import Path
from typing import Dict, Any, Union
import logging

import yaml

logger = logging.getLogger(__name__)


def load_config(config_path: Union[str, Path]) -> Dict[str, Any]:
    """
    Load configuration from YAML or JSON file.

    Parameters
    ----------
    config_path : str or Path
        Path to configuration file (.yaml, .yml, or .json)

    Returns
    -------
    dict
        Configuration dictionary

    Raises
    ------
    FileNotFoundError
        If config file does not exist
    ValueError
        If file format is not supported
    """
    config_path = Path(config_path)

    if not config_path.exists():
        raise FileNotFoundError(f"Configuration file not found: {config_path}")

    suffix = config_path.suffix.lower()

    with open(config_path, "r") as f:
        if suffix in [".yaml", ".yml"]:
            config = yaml.safe_load(f)
        elif suffix == ".json":
            config = json.load(f)
        else:
            raise ValueError(
                f"Unsupported config file format: {suffix}. " "Use .yaml, .yml, or .json"
            )

    logger.info(f"Loaded configuration from {config_path}")
    return config


def validate_plasmoid_config(config: Dict[str, Any]) -> bool:
    """
    Validate plasmoid configuration structure.

    Parameters
    ----------
    config : dict
        Configuration dictionary

    Returns
    -------
    bool
        True if valid

    Raises
    ------
    ValueError
        If configuration is invalid
    """
    if "plasmoid" not in config:
        raise ValueError("Configuration must contain 'plasmoid' section")

    plasmoid = config["plasmoid"]

    required = ["number_density", "temperature_reconnection", "magnetization"]
    for field in required:
        if field not in plasmoid:
            raise ValueError(f"Plasmoid config missing required field: {field}")

    for field, value in plasmoid.items():
        if field == "orbit":
            continue
        if not isinstance(value, (int, float)) or not math.isfinite(value):
            raise ValueError(f"Plasmoid field '{field}' must be a finite number, got {value!r}")

    if plasmoid["number_density"] < 0:
        raise ValueError("number_density must be non-negative")
    if plasmoid["temperature_reconnection"] <= 0:
        raise ValueError("temperature_reconnection must be positive")
    if plasmoid["magnetization"] < 0:
        raise ValueError("magnetization must be non-negative")
    if plasmoid.get("central_mass_msun", 1.0) <= 0:
        raise ValueError("central_mass_msun must be positive")
    if plasmoid.get("radius", 1.0) <= 0:
        raise ValueError("radius must be positive")
    if plasmoid.get("temperature_floor", 1.0) <= 0:
        raise ValueError("temperature_floor must be positive")

    if "orbit" in plasmoid:
        orbit = plasmoid["orbit"]
        if not isinstance(orbit, dict):
            raise ValueError("'orbit' must be a mapping")
        if "radius" not in orbit:
            raise ValueError("Orbit config missing 'radius'")
        if orbit["radius"] <= 0:
            raise ValueError("Orbit radius must be positive")

    return True


def save_config(config: Dict[str, Any], config_path: Union[str, Path]) -> None:
    """
    Save configuration to YAML or JSON file.

    Parameters
    ----------
    config : dict
        Configuration dictionary
    config_path : str or Path
        Path to output file. Unknown suffixes are written as YAML with a
        '.yaml' suffix.
    """
    config_path = Path(config_path)
    suffix = config_path.suffix.lower()

    if suffix not in [".yaml", ".yml", ".json"]:
        config_path = config_path.with_suffix(".yaml")
        suffix = ".yaml"

    with open(config_path, "w") as f:
        if suffix == ".json":
            json.dump(config, f, indent=2)
        else:
            yaml.dump(config, f, default_flow_style=False, sort_keys=False)

    logger.info(f"Saved configuration to {config_path}")
