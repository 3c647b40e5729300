"""
Plasmoid formed by magnetic reconnection, emitting thermal synchrotron
radiation while it follows an orbit around the central object.
"""

import math
from typing import Optional, Sequence, Tuple, TYPE_CHECKING

import numpy as np

from plasmoidrt.core import units
from plasmoidrt.core.abc import SpectrumModel, TrajectoryProvider
from plasmoidrt.core.constants import DENSITY_FLOOR_CGS, SGRA_MASS_MSUN, TEMPERATURE_FLOOR_K
from plasmoidrt.core.logging_config import get_logger
from plasmoidrt.orbit.trajectory import cartesian_position
from plasmoidrt.plasma.evolution import LocalPlasma, cooling_time, evolve
from plasmoidrt.plasma.state import PlasmoidState
from plasmoidrt.radiation.synchrotron import ThermalSynchrotron
from plasmoidrt.radiation.transfer import exact_transfer_step

if TYPE_CHECKING:
    from plasmoidrt.astrobj.config import PlasmoidConfig

logger = get_logger("astrobj.plasmoid")


class Plasmoid:
    """
    Synchrotron-emitting plasmoid evaluated along ray-traced photons.

    The physical state is fixed for a rendering pass; the local density,
    temperature and field are derived lazily from the time elapsed since
    reconnection. ``radiative_q`` keeps no state between calls and may be
    used concurrently from several threads as long as nobody mutates the
    plasmoid meanwhile.

    Parameters
    ----------
    state : PlasmoidState, optional
        Physical state at reconnection
    spectrum : SpectrumModel, optional
        Emission model of the thermal electrons (ThermalSynchrotron by default)
    trajectory : TrajectoryProvider, optional
        Provider of the plasmoid position; needed by ``is_inside`` only
    radius : float
        Plasmoid radius, geometrical units
    central_mass_msun : float
        Central mass in solar masses, sets the geometrical units
    temperature_floor : float
        Lowest evolved temperature in K
    density_floor : float
        Densities at or below this value emit nothing, cm^-3
    secondary_spectrum : SpectrumModel, optional
        Slot for a non-thermal population (index ``state.pl_index``).
        Stored but not evaluated by ``radiative_q``.
    """

    def __init__(
        self,
        state: Optional[PlasmoidState] = None,
        spectrum: Optional[SpectrumModel] = None,
        trajectory: Optional[TrajectoryProvider] = None,
        radius: float = 1.0,
        central_mass_msun: float = SGRA_MASS_MSUN,
        temperature_floor: float = TEMPERATURE_FLOOR_K,
        density_floor: float = DENSITY_FLOOR_CGS,
        secondary_spectrum: Optional[SpectrumModel] = None,
    ):
        if radius <= 0:
            raise ValueError(f"Plasmoid radius must be positive, got {radius}")
        if temperature_floor <= 0:
            raise ValueError(f"Temperature floor must be positive, got {temperature_floor}")
        if trajectory is not None and not isinstance(trajectory, TrajectoryProvider):
            raise TypeError("trajectory must provide state_at(time)")

        self.state = state if state is not None else PlasmoidState()
        self.spectrum = spectrum if spectrum is not None else ThermalSynchrotron()
        self.secondary_spectrum = secondary_spectrum
        self.trajectory = trajectory
        self.radius = radius
        self.central_mass_msun = central_mass_msun
        self.unit_length_cm, self.unit_time_s = units.geometric_units(central_mass_msun)
        self.temperature_floor = temperature_floor
        self.density_floor = density_floor

        logger.info(
            f"Created Plasmoid: n_e={self.state.number_density:.2e} cm^-3, "
            f"T_rec={self.state.temperature_reconnection:.2e} K, "
            f"sigma={self.state.magnetization:.3g}, t_ref={self.state.time_ref:.2f}"
        )

    @classmethod
    def from_config(cls, config: "PlasmoidConfig", spectrum: Optional[SpectrumModel] = None) -> "Plasmoid":
        """
        Build a plasmoid from a validated configuration record.

        A circular orbit is attached when ``config.orbit_radius`` is set.
        """
        from plasmoidrt.orbit.trajectory import CircularOrbit

        config.validate()
        state = PlasmoidState(
            number_density=config.number_density,
            temperature_reconnection=config.temperature_reconnection,
            magnetization=config.magnetization,
            time_ref=config.time_ref,
            pl_index=config.pl_index,
        )
        trajectory = None
        if config.orbit_radius is not None:
            trajectory = CircularOrbit(config.orbit_radius, phi0=config.orbit_phi0, spin=config.spin)

        return cls(
            state=state,
            spectrum=spectrum,
            trajectory=trajectory,
            radius=config.radius,
            central_mass_msun=config.central_mass_msun,
            temperature_floor=config.temperature_floor,
            density_floor=config.density_floor,
        )

    # ------------------------------------------------------------------
    # Unit-aware access to the reconnection time and the radius
    # ------------------------------------------------------------------

    def get_time_ref(self, unit: str = "geometrical_time") -> float:
        """Reconnection time in ``unit`` (geometrical or 's', 'min', 'h', 'd', 'yr')."""
        return self.state.get_time_ref(unit, unit_time_s=self.unit_time_s)

    def set_time_ref(self, value: float, unit: str = "geometrical_time") -> None:
        """Set the reconnection time from a value in ``unit``."""
        self.state.set_time_ref(value, unit, unit_time_s=self.unit_time_s)

    def get_radius(self, unit: str = "geometrical") -> float:
        """Plasmoid radius in ``unit`` (geometrical or 'cm', 'm', 'km', 'au', 'pc', 'kpc')."""
        return units.convert_length(self.radius, "geometrical", unit, unit_length_cm=self.unit_length_cm)

    def set_radius(self, value: float, unit: str = "geometrical") -> None:
        """Set the plasmoid radius from a value in ``unit``."""
        radius = float(units.convert_length(value, unit, "geometrical", unit_length_cm=self.unit_length_cm))
        if radius <= 0:
            raise ValueError(f"Plasmoid radius must be positive, got {radius}")
        self.radius = radius

    @property
    def cooling_time(self) -> float:
        """Synchrotron cooling time of the reconnection population, geometrical units."""
        return cooling_time(self.state, self.unit_time_s)

    # ------------------------------------------------------------------
    # Physics
    # ------------------------------------------------------------------

    def local_plasma(self, time: float) -> LocalPlasma:
        """Evolved plasma parameters at coordinate time ``time``."""
        return evolve(
            self.state,
            time - self.state.time_ref,
            self.unit_time_s,
            temperature_floor=self.temperature_floor,
        )

    def radiative_q(
        self,
        intensity: np.ndarray,
        optical_depth: np.ndarray,
        nu_em: np.ndarray,
        dsem: float,
        coord_ph: Sequence[float],
        coord_obj: Optional[Sequence[float]] = None,
    ) -> None:
        """
        Add the contribution of one integration step to the accumulated
        intensity and optical depth.

        Parameters
        ----------
        intensity : array of float
            Specific intensity accumulated so far along the ray, per
            frequency, in erg s^-1 cm^-2 sr^-1 Hz^-1; updated in place
        optical_depth : array of float
            Optical depth accumulated so far, per frequency; updated in place
        nu_em : array
            Frequencies in the emitter rest frame, Hz
        dsem : float
            Proper length of the step in the emitter frame, geometrical units
        coord_ph : sequence
            Photon phase-space coordinates; ``coord_ph[0]`` is the coordinate
            time
        coord_obj : sequence of 8 floats, optional
            Emitter phase-space coordinates at this step. Doppler and
            gravitational shifts are applied by the caller, so the rest-frame
            evaluation does not use them.

        Raises
        ------
        ValueError
            If the array lengths do not match
        """
        nu_em = np.atleast_1d(np.asarray(nu_em, dtype=float))
        if intensity.shape != nu_em.shape or optical_depth.shape != nu_em.shape:
            raise ValueError(
                f"intensity {intensity.shape}, optical_depth {optical_depth.shape} and "
                f"nu_em {nu_em.shape} must have the same shape"
            )
        if coord_obj is not None and len(coord_obj) != 8:
            raise ValueError(f"coord_obj must have 8 components, got {len(coord_obj)}")

        if not (dsem > 0 and math.isfinite(dsem)):
            return

        time = float(coord_ph[0])
        if not math.isfinite(time):
            logger.debug(f"Non-finite photon time {time}, step skipped")
            return

        plasma = self.local_plasma(time)
        if plasma.number_density <= self.density_floor:
            return

        with np.errstate(all="ignore"):
            jnu, anu = self.spectrum.coefficients(
                plasma.number_density, plasma.temperature, plasma.magnetic_field, nu_em
            )

        exact_transfer_step(intensity, optical_depth, jnu, anu, dsem * self.unit_length_cm)

    def emission(
        self,
        nu_em: np.ndarray,
        dsem: float,
        coord_ph: Sequence[float],
        coord_obj: Optional[Sequence[float]] = None,
    ) -> Tuple[np.ndarray, np.ndarray]:
        """
        Intensity and optical depth of a single step starting from zero.

        Returns
        -------
        intensity : array
        optical_depth : array
        """
        nu_em = np.atleast_1d(np.asarray(nu_em, dtype=float))
        intensity = np.zeros_like(nu_em)
        optical_depth = np.zeros_like(nu_em)
        self.radiative_q(intensity, optical_depth, nu_em, dsem, coord_ph, coord_obj)
        return intensity, optical_depth

    def tabulate(self, frequencies: np.ndarray, elapsed: float = 0.0) -> Tuple[np.ndarray, np.ndarray]:
        """
        Emission and absorption coefficients ``elapsed`` after reconnection.

        Returns
        -------
        jnu : array
            erg s^-1 cm^-3 sr^-1 Hz^-1
        anu : array
            cm^-1
        """
        plasma = self.local_plasma(self.state.time_ref + elapsed)
        frequencies = np.atleast_1d(np.asarray(frequencies, dtype=float))
        if plasma.number_density <= self.density_floor:
            return np.zeros_like(frequencies), np.zeros_like(frequencies)
        return self.spectrum.coefficients(
            plasma.number_density, plasma.temperature, plasma.magnetic_field, frequencies
        )

    # ------------------------------------------------------------------
    # Geometry
    # ------------------------------------------------------------------

    def is_inside(self, coord_ph: Sequence[float]) -> bool:
        """
        Whether the photon lies within ``radius`` of the plasmoid centre.

        Raises
        ------
        RuntimeError
            If no trajectory provider is attached
        """
        if self.trajectory is None:
            raise RuntimeError("Plasmoid has no trajectory provider")
        centre = self.trajectory.state_at(coord_ph[0]).as_array()
        distance = np.linalg.norm(cartesian_position(coord_ph) - cartesian_position(centre))
        return bool(distance < self.radius)
