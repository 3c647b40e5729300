"""
Abstract base classes and protocols for extensibility.

ABCs are used for core interfaces (SpectrumModel) that must be inherited.
Protocols are used for structural typing of collaborators that may implement
the interface without explicit inheritance (trajectory providers supplied by
an external orbit integrator).
"""

from abc import ABC, abstractmethod
from typing import Protocol, Tuple, TYPE_CHECKING, Union, runtime_checkable
import numpy as np

if TYPE_CHECKING:
    from plasmoidrt.orbit.trajectory import TrajectorySample


class SpectrumModel(ABC):
    """
    Abstract interface for electron-distribution synchrotron spectra.

    Implementations turn local plasma parameters into per-frequency emission
    and absorption coefficients. They must be deterministic and pure, and must
    return zero (never raise) for density, temperature or field at or below
    zero.
    """

    @abstractmethod
    def coefficients(
        self,
        density: float,
        temperature: float,
        magnetic_field: float,
        frequency: Union[float, np.ndarray],
    ) -> Tuple[np.ndarray, np.ndarray]:
        """
        Emission and absorption coefficients.

        Returns
        -------
        jnu : array
            Emission coefficient in erg s^-1 cm^-3 sr^-1 Hz^-1
        anu : array
            Absorption coefficient in cm^-1
        """
        pass

    def emission_coefficient(self, density, temperature, magnetic_field, frequency) -> np.ndarray:
        """Emission coefficient in erg s^-1 cm^-3 sr^-1 Hz^-1."""
        return self.coefficients(density, temperature, magnetic_field, frequency)[0]

    def absorption_coefficient(self, density, temperature, magnetic_field, frequency) -> np.ndarray:
        """Absorption coefficient in cm^-1."""
        return self.coefficients(density, temperature, magnetic_field, frequency)[1]


@runtime_checkable
class TrajectoryProvider(Protocol):
    """
    Protocol for orbit providers (structural typing).

    Anything exposing ``state_at`` can drive the plasmoid position.
    """

    def state_at(self, time: float) -> "TrajectorySample":
        """Phase-space state of the emitter at coordinate time ``time``."""
        ...
