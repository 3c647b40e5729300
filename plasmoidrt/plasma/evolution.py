"""
Time evolution of the plasmoid after the reconnection event.

The electrons cool by synchrotron radiation. For a fixed field the Lorentz
factor obeys dγ/dt = -γ² / (γ0 t_cool), whose solution is
γ(t) = γ0 / (1 + t / t_cool). The temperature follows the same factor, the
density follows the relativistic adiabatic relation T ∝ n^(1/3) and the
magnetization is conserved, so B² ∝ n.
"""

from dataclasses import dataclass
import math

from plasmoidrt.core.constants import (
    C_CGS,
    KB_CGS,
    ME_C2_CGS,
    M_E_CGS,
    M_P_CGS,
    SIGMA_T_CGS,
    TEMPERATURE_FLOOR_K,
)
from plasmoidrt.plasma.state import PlasmoidState


@dataclass(frozen=True)
class LocalPlasma:
    """
    Evolved plasma parameters at one evaluation.

    Attributes
    ----------
    elapsed : float
        Time since reconnection, geometrical units
    number_density : float
        Electron number density in cm^-3
    temperature : float
        Electron temperature in K
    magnetic_field : float
        Magnetic field in G
    """

    elapsed: float
    number_density: float
    temperature: float
    magnetic_field: float

    @property
    def theta_e(self) -> float:
        """Dimensionless electron temperature kT / (m_e c^2)."""
        return dimensionless_temperature(self.temperature)


def dimensionless_temperature(temperature: float) -> float:
    """kT / (m_e c^2) for a temperature in K."""
    return KB_CGS * temperature / ME_C2_CGS


def magnetic_field(number_density: float, magnetization: float) -> float:
    """
    Field strength from the magnetization parameter.

    σ = B² / (4π n m_p c²), hence B = sqrt(4π σ n m_p c²) in G.
    """
    if number_density <= 0 or magnetization <= 0:
        return 0.0
    return math.sqrt(4.0 * math.pi * magnetization * M_P_CGS * C_CGS**2 * number_density)


def cooling_time(state: PlasmoidState, unit_time_s: float) -> float:
    """
    Synchrotron cooling time of the reconnection population.

    t_cool = 6π m_e c / (σ_T B0² γ0) with γ0 = 3Θ0 + 1.

    Parameters
    ----------
    state : PlasmoidState
        Physical state at reconnection
    unit_time_s : float
        Geometrical time unit GM/c^3 in seconds

    Returns
    -------
    float
        Cooling time in geometrical units; ``math.inf`` without a field
    """
    b0 = magnetic_field(state.number_density, state.magnetization)
    if b0 <= 0:
        return math.inf
    gamma0 = 3.0 * dimensionless_temperature(state.temperature_reconnection) + 1.0
    t_cool_s = 6.0 * math.pi * M_E_CGS * C_CGS / (SIGMA_T_CGS * b0**2 * gamma0)
    return t_cool_s / unit_time_s


def cooling_factor(elapsed: float, t_cool: float) -> float:
    """
    Fraction of the initial temperature left after ``elapsed``.

    Equals 1 before the reconnection event and decreases monotonically
    afterwards.
    """
    if elapsed <= 0 or math.isinf(t_cool):
        return 1.0
    return 1.0 / (1.0 + elapsed / t_cool)


def evolve(
    state: PlasmoidState,
    elapsed: float,
    unit_time_s: float,
    temperature_floor: float = TEMPERATURE_FLOOR_K,
) -> LocalPlasma:
    """
    Local plasma parameters ``elapsed`` after reconnection.

    Parameters
    ----------
    state : PlasmoidState
        Physical state at reconnection
    elapsed : float
        Time since reconnection, geometrical units
    unit_time_s : float
        Geometrical time unit GM/c^3 in seconds
    temperature_floor : float
        Lowest temperature the evolved plasma may reach, in K. A plasmoid
        born colder than the floor keeps its reconnection temperature.

    Returns
    -------
    LocalPlasma
        Evolved density, temperature and field
    """
    t0 = state.temperature_reconnection
    factor = cooling_factor(elapsed, cooling_time(state, unit_time_s))
    temperature = max(t0 * factor, min(temperature_floor, t0))
    density = state.number_density * factor**3
    return LocalPlasma(
        elapsed=elapsed,
        number_density=density,
        temperature=temperature,
        magnetic_field=magnetic_field(density, state.magnetization),
    )
