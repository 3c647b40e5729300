"""
Plasmoid physical state.
"""

import math
from typing import Any, Dict, Optional

from plasmoidrt.core import units
from plasmoidrt.core.logging_config import get_logger

logger = get_logger("plasma.state")


class PlasmoidState:
    """
    Scalar physical parameters of a plasmoid at reconnection.

    All values are stored in the internal unit system: cgs for the density,
    Kelvin for the temperature and geometrical units for the reconnection
    time. Unit strings are only handled by the ``get_*``/``set_*`` accessors.

    Attributes
    ----------
    number_density : float
        Electron number density in cm^-3 (>= 0)
    temperature_reconnection : float
        Electron temperature right after reconnection in K (> 0)
    magnetization : float
        Magnetic to rest-mass energy density ratio
    time_ref : float
        Coordinate time of the reconnection event, geometrical units
    pl_index : float
        Power-law index reserved for a non-thermal electron population
    """

    def __init__(
        self,
        number_density: float = 1.0,
        temperature_reconnection: float = 1e10,
        magnetization: float = 1.0,
        time_ref: float = 0.0,
        pl_index: float = 3.0,
    ):
        self._number_density = 0.0
        self._temperature_reconnection = 1.0
        self.number_density = number_density
        self.temperature_reconnection = temperature_reconnection
        self.magnetization = magnetization
        self.time_ref = time_ref
        self.pl_index = pl_index

    def __repr__(self) -> str:
        return (
            f"PlasmoidState(number_density={self._number_density!r}, "
            f"temperature_reconnection={self._temperature_reconnection!r}, "
            f"magnetization={self.magnetization!r}, time_ref={self.time_ref!r}, "
            f"pl_index={self.pl_index!r})"
        )

    def __eq__(self, other) -> bool:
        if not isinstance(other, PlasmoidState):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    # ------------------------------------------------------------------
    # Internal-unit properties
    # ------------------------------------------------------------------

    @property
    def number_density(self) -> float:
        """Electron number density in cm^-3."""
        return self._number_density

    @number_density.setter
    def number_density(self, value: float) -> None:
        value = float(value)
        if value < 0:
            raise ValueError(f"Number density must be non-negative, got {value}")
        self._number_density = value

    @property
    def temperature_reconnection(self) -> float:
        """Electron temperature after reconnection in K."""
        return self._temperature_reconnection

    @temperature_reconnection.setter
    def temperature_reconnection(self, value: float) -> None:
        value = float(value)
        if value <= 0:
            raise ValueError(f"Temperature at reconnection must be positive, got {value}")
        self._temperature_reconnection = value

    # ------------------------------------------------------------------
    # Unit-tagged accessors
    # ------------------------------------------------------------------

    def get_number_density(self, unit: str = "cm^-3") -> float:
        """Number density expressed in ``unit`` ('cm^-3' or 'm^-3')."""
        return units.convert_density(self._number_density, "cm^-3", unit)

    def set_number_density(self, value: float, unit: str = "cm^-3") -> None:
        """Set the number density from a value expressed in ``unit``."""
        self.number_density = units.convert_density(value, unit, "cm^-3")

    def get_temperature_reconnection(self, unit: str = "K") -> float:
        """Temperature at reconnection expressed in ``unit`` ('K', 'eV', 'keV')."""
        return units.convert_temperature(self._temperature_reconnection, "K", unit)

    def set_temperature_reconnection(self, value: float, unit: str = "K") -> None:
        """Set the temperature at reconnection from a value expressed in ``unit``."""
        self.temperature_reconnection = units.convert_temperature(value, unit, "K")

    def get_time_ref(self, unit: str = "geometrical_time", unit_time_s: Optional[float] = None) -> float:
        """
        Reconnection time expressed in ``unit``.

        Physical units ('s', 'min', 'h', 'd', 'yr') need ``unit_time_s``,
        the geometrical time unit GM/c^3 of the central mass in seconds.
        """
        return units.convert_time(self.time_ref, "geometrical_time", unit, unit_time_s)

    def set_time_ref(
        self, value: float, unit: str = "geometrical_time", unit_time_s: Optional[float] = None
    ) -> None:
        """Set the reconnection time from a value expressed in ``unit``."""
        self.time_ref = float(units.convert_time(value, unit, "geometrical_time", unit_time_s))

    # ------------------------------------------------------------------
    # Validation and serialization
    # ------------------------------------------------------------------

    def validate(self) -> bool:
        """
        Validate the whole state.

        Returns
        -------
        bool
            True if valid

        Raises
        ------
        ValueError
            If a parameter is outside its physical domain
        """
        for name, value in self.to_dict().items():
            if not math.isfinite(value):
                raise ValueError(f"{name} must be finite, got {value}")

        if self._number_density < 0:
            raise ValueError("Number density must be non-negative")

        if self._temperature_reconnection <= 0:
            raise ValueError("Temperature at reconnection must be positive")

        if self.magnetization < 0:
            raise ValueError("Magnetization parameter must be non-negative")

        if self.pl_index <= 2:
            logger.warning(f"Power-law index {self.pl_index} <= 2 gives a divergent energy")

        return True

    def to_dict(self) -> Dict[str, float]:
        """Internal-unit values keyed by field name."""
        return {
            "number_density": self._number_density,
            "temperature_reconnection": self._temperature_reconnection,
            "magnetization": float(self.magnetization),
            "time_ref": float(self.time_ref),
            "pl_index": float(self.pl_index),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "PlasmoidState":
        """Build a state from a mapping of internal-unit values."""
        return cls(
            number_density=data.get("number_density", 1.0),
            temperature_reconnection=data.get("temperature_reconnection", 1e10),
            magnetization=data.get("magnetization", 1.0),
            time_ref=data.get("time_ref", 0.0),
            pl_index=data.get("pl_index", 3.0),
        )
