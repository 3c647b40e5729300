"""
Synchrotron emission and absorption coefficients.

Fitting formulae of Pandya et al. (2016, ApJ 822, 34) for thermal
(Maxwell-Jüttner) and power-law electron distributions, averaged over the
pitch angle between the line of sight and the field with a Gauss-Legendre
quadrature in cos θ.
"""

from typing import Tuple, Union

import numpy as np
from scipy.special import gamma as gamma_fn
from scipy.special import kve, roots_legendre

from plasmoidrt.core.abc import SpectrumModel
from plasmoidrt.core.constants import (
    C_CGS,
    E_CHARGE_CGS,
    H_PLANCK_CGS,
    KB_CGS,
    ME_C2_CGS,
    M_E_CGS,
)
from plasmoidrt.core.logging_config import get_logger

logger = get_logger("radiation.synchrotron")

_LOG_TINY = np.log(np.finfo(np.float64).tiny)


def cyclotron_frequency(magnetic_field: float) -> float:
    """Electron cyclotron frequency e B / (2π m_e c) in Hz."""
    return E_CHARGE_CGS * magnetic_field / (2.0 * np.pi * M_E_CGS * C_CGS)


def planck_function(frequency: np.ndarray, temperature: float) -> np.ndarray:
    """Planck specific intensity B_nu(T) in erg s^-1 cm^-2 sr^-1 Hz^-1."""
    frequency = np.asarray(frequency, dtype=float)
    x = H_PLANCK_CGS * frequency / (KB_CGS * temperature)
    with np.errstate(over="ignore"):
        return 2.0 * H_PLANCK_CGS * frequency**3 / C_CGS**2 / np.expm1(x)


class _AngleAveraged(SpectrumModel):
    """Shared pitch-angle quadrature and input screening."""

    def __init__(self, n_angles: int = 32, angle_averaged: bool = True, angle: float = np.pi / 2):
        self.n_angles = n_angles
        self.angle_averaged = angle_averaged
        self.angle = angle
        if angle_averaged:
            mu, weights = roots_legendre(n_angles)
            self._sin_theta = np.sqrt(1.0 - mu**2)
            # Average over the sphere: (1/2) ∫ dμ
            self._weights = 0.5 * weights
        else:
            self._sin_theta = np.array([abs(np.sin(angle))])
            self._weights = np.array([1.0])

    def _average(self, values: np.ndarray) -> np.ndarray:
        return values @ self._weights

    @staticmethod
    def _screen(density, temperature, magnetic_field, frequency):
        """Frequency array and mask of frequencies the fit may be evaluated at."""
        nu = np.atleast_1d(np.asarray(frequency, dtype=float))
        if not (density > 0 and temperature > 0 and magnetic_field > 0):
            return nu, np.zeros(nu.shape, dtype=bool)
        return nu, np.isfinite(nu) & (nu > 0)


class ThermalSynchrotron(_AngleAveraged):
    """
    Synchrotron spectrum of a thermal electron population.

    The emissivity uses the Pandya et al. (2016) fit with the exact
    Maxwell-Jüttner normalization 2Θ² / K2(1/Θ) restored, so that it stays
    usable at mildly relativistic temperatures. The absorption follows from
    Kirchhoff's law, alpha = j / B_nu(T).

    Parameters
    ----------
    n_angles : int
        Number of Gauss-Legendre nodes for the pitch-angle average
    angle_averaged : bool
        Average over pitch angles; otherwise evaluate at ``angle``
    angle : float
        Angle between line of sight and field in radians
    """

    def coefficients(
        self,
        density: float,
        temperature: float,
        magnetic_field: float,
        frequency: Union[float, np.ndarray],
    ) -> Tuple[np.ndarray, np.ndarray]:
        nu, valid = self._screen(density, temperature, magnetic_field, frequency)
        jnu = np.zeros_like(nu)
        anu = np.zeros_like(nu)
        if not valid.any():
            return jnu, anu

        theta_e = KB_CGS * temperature / ME_C2_CGS
        nu_c = cyclotron_frequency(magnetic_field)
        sin_th = self._sin_theta[np.newaxis, :]
        nu_v = nu[valid][:, np.newaxis]

        nu_s = 2.0 / 9.0 * nu_c * theta_e**2 * sin_th
        x = nu_v / nu_s

        with np.errstate(over="ignore", under="ignore", divide="ignore", invalid="ignore"):
            # log K2(1/Θ), with kve(2, z) = K2(z) exp(z)
            log_k2 = np.log(kve(2, 1.0 / theta_e)) - 1.0 / theta_e
            log_j = (
                np.log(density * E_CHARGE_CGS**2 * nu_c / C_CGS)
                + np.log(np.sqrt(2.0) * np.pi / 27.0)
                + np.log(sin_th)
                + 2.0 * np.log(np.sqrt(x) + 2.0 ** (11.0 / 12.0) * x ** (1.0 / 6.0))
                - x ** (1.0 / 3.0)
                + np.log(2.0 * theta_e**2)
                - log_k2
            )
            j_theta = np.where(log_j > _LOG_TINY, np.exp(log_j), 0.0)
            j_avg = self._average(j_theta)
            bnu = planck_function(nu[valid], temperature)
            a_avg = np.where(bnu > 0, j_avg / bnu, 0.0)

        jnu[valid] = j_avg
        anu[valid] = a_avg
        return jnu, anu


class PowerLawSynchrotron(_AngleAveraged):
    """
    Synchrotron spectrum of a power-law electron population.

    dN/dγ ∝ γ^-p between ``gamma_min`` and ``gamma_max``. The temperature
    argument of ``coefficients`` is ignored.

    Parameters
    ----------
    pl_index : float
        Power-law index p
    gamma_min, gamma_max : float
        Lorentz factor range of the population
    """

    def __init__(
        self,
        pl_index: float = 3.0,
        gamma_min: float = 1.0,
        gamma_max: float = 1e6,
        n_angles: int = 32,
        angle_averaged: bool = True,
        angle: float = np.pi / 2,
    ):
        if pl_index <= 1:
            raise ValueError(f"Power-law index must be > 1, got {pl_index}")
        if not 1.0 <= gamma_min < gamma_max:
            raise ValueError("Need 1 <= gamma_min < gamma_max")
        super().__init__(n_angles=n_angles, angle_averaged=angle_averaged, angle=angle)
        self.pl_index = pl_index
        self.gamma_min = gamma_min
        self.gamma_max = gamma_max
        logger.debug(
            f"Created PowerLawSynchrotron: p={pl_index}, gamma=[{gamma_min:.1f}, {gamma_max:.2e}]"
        )

    def coefficients(
        self,
        density: float,
        temperature: float,
        magnetic_field: float,
        frequency: Union[float, np.ndarray],
    ) -> Tuple[np.ndarray, np.ndarray]:
        # The power law has no temperature; any positive value passes screening
        nu, valid = self._screen(density, 1.0, magnetic_field, frequency)
        jnu = np.zeros_like(nu)
        anu = np.zeros_like(nu)
        if not valid.any():
            return jnu, anu

        p = self.pl_index
        nu_c = cyclotron_frequency(magnetic_field)
        sin_th = self._sin_theta[np.newaxis, :]
        nu_v = nu[valid][:, np.newaxis]
        x = nu_v / (nu_c * sin_th)
        norm = self.gamma_min ** (1.0 - p) - self.gamma_max ** (1.0 - p)

        with np.errstate(divide="ignore", over="ignore", under="ignore"):
            j_theta = (
                density * E_CHARGE_CGS**2 * nu_c / C_CGS
                * 3.0 ** (p / 2.0) * (p - 1.0) * sin_th / (2.0 * (p + 1.0) * norm)
                * gamma_fn((3.0 * p - 1.0) / 12.0) * gamma_fn((3.0 * p + 19.0) / 12.0)
                * x ** (-(p - 1.0) / 2.0)
            )
            a_theta = (
                density * E_CHARGE_CGS**2 / (nu_v * M_E_CGS * C_CGS)
                * 3.0 ** ((p + 1.0) / 2.0) * (p - 1.0) / (4.0 * norm)
                * gamma_fn((3.0 * p + 2.0) / 12.0) * gamma_fn((3.0 * p + 22.0) / 12.0)
                * x ** (-(p + 2.0) / 2.0)
            )

        jnu[valid] = self._average(j_theta)
        anu[valid] = self._average(a_theta)
        return jnu, anu
