"""
Configuration record for a plasmoid.
"""

from dataclasses import asdict, dataclass
import math
from pathlib import Path
from typing import Any, Dict, Optional, Union

from plasmoidrt.core.constants import DENSITY_FLOOR_CGS, SGRA_MASS_MSUN, TEMPERATURE_FLOOR_K
from plasmoidrt.core.logging_config import get_logger

logger = get_logger("astrobj.config")


@dataclass
class PlasmoidConfig:
    """
    Settable parameters of a plasmoid, one field per parameter.

    Attributes
    ----------
    number_density : float
        Electron number density at reconnection in cm^-3
    temperature_reconnection : float
        Electron temperature after reconnection in K
    magnetization : float
        Magnetization parameter σ
    time_ref : float
        Reconnection time, geometrical units
    pl_index : float
        Power-law index of the reserved non-thermal population
    radius : float
        Plasmoid radius, geometrical units
    central_mass_msun : float
        Mass of the central object in solar masses
    orbit_radius : float, optional
        Radius of a circular equatorial orbit; None leaves the trajectory
        to the caller
    orbit_phi0 : float
        Azimuth of the orbit at t = 0
    spin : float
        Dimensionless spin of the central object
    temperature_floor : float
        Lowest evolved temperature in K
    density_floor : float
        Densities at or below this value emit nothing, cm^-3
    """

    number_density: float
    temperature_reconnection: float
    magnetization: float
    time_ref: float = 0.0
    pl_index: float = 3.0
    radius: float = 1.0
    central_mass_msun: float = SGRA_MASS_MSUN
    orbit_radius: Optional[float] = None
    orbit_phi0: float = 0.0
    spin: float = 0.0
    temperature_floor: float = TEMPERATURE_FLOOR_K
    density_floor: float = DENSITY_FLOOR_CGS

    @classmethod
    def from_dict(cls, config: Dict[str, Any]) -> "PlasmoidConfig":
        """
        Build from a configuration dictionary with a 'plasmoid' section.

        Raises
        ------
        ValueError
            If the section is missing or invalid
        """
        from plasmoidrt.core.config import validate_plasmoid_config

        validate_plasmoid_config(config)
        section = config["plasmoid"]
        orbit = section.get("orbit", {})

        return cls(
            number_density=section["number_density"],
            temperature_reconnection=section["temperature_reconnection"],
            magnetization=section["magnetization"],
            time_ref=section.get("time_ref", 0.0),
            pl_index=section.get("pl_index", 3.0),
            radius=section.get("radius", 1.0),
            central_mass_msun=section.get("central_mass_msun", SGRA_MASS_MSUN),
            orbit_radius=orbit.get("radius"),
            orbit_phi0=orbit.get("phi0", 0.0),
            spin=orbit.get("spin", 0.0),
            temperature_floor=section.get("temperature_floor", TEMPERATURE_FLOOR_K),
            density_floor=section.get("density_floor", DENSITY_FLOOR_CGS),
        )

    @classmethod
    def from_file(cls, config_path: Union[str, Path]) -> "PlasmoidConfig":
        """Load from a YAML or JSON file with a 'plasmoid' section."""
        from plasmoidrt.core.config import load_config

        return cls.from_dict(load_config(config_path))

    def to_dict(self) -> Dict[str, Any]:
        """Configuration dictionary accepted by :meth:`from_dict`."""
        section = asdict(self)
        orbit_radius = section.pop("orbit_radius")
        phi0 = section.pop("orbit_phi0")
        spin = section.pop("spin")
        if orbit_radius is not None:
            section["orbit"] = {"radius": orbit_radius, "phi0": phi0, "spin": spin}
        return {"plasmoid": section}

    def validate(self) -> bool:
        """
        Validate configuration.

        Returns
        -------
        bool
            True if valid

        Raises
        ------
        ValueError
            If configuration is invalid
        """
        for name, value in asdict(self).items():
            if value is not None and not math.isfinite(value):
                raise ValueError(f"{name} must be finite, got {value}")

        if self.number_density < 0:
            raise ValueError("number_density must be non-negative")

        if self.temperature_reconnection <= 0:
            raise ValueError("temperature_reconnection must be positive")

        if self.magnetization < 0:
            raise ValueError("magnetization must be non-negative")

        if self.radius <= 0:
            raise ValueError("radius must be positive")

        if self.central_mass_msun <= 0:
            raise ValueError("central_mass_msun must be positive")

        if self.temperature_floor <= 0:
            raise ValueError("temperature_floor must be positive")

        if self.orbit_radius is not None and self.orbit_radius <= 0:
            raise ValueError("orbit_radius must be positive")

        return True
