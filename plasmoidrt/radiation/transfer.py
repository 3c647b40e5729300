"""
Radiative transfer through one integration step.

For a segment of uniform emission j and absorption alpha the transfer
equation dI/ds = j - alpha I has the exact solution

    I_out = I_in exp(-dtau) + (j / alpha) (1 - exp(-dtau)),    dtau = alpha ds.

The ray tracer integrates backward from the observer, so the intensity
accumulated so far lies in front of the new segment: the new emission is
attenuated by exp(-tau) of the material already crossed and added.
"""

import numpy as np

from plasmoidrt.core.logging_config import get_logger

logger = get_logger("radiation.transfer")


def sanitize_coefficients(jnu: np.ndarray, anu: np.ndarray) -> np.ndarray:
    """
    Mask of frequencies whose coefficients are usable.

    A coefficient pair is rejected when either value is non-finite or
    negative; rejected frequencies get no contribution.

    Returns
    -------
    array of bool
        True where both coefficients are finite and non-negative
    """
    with np.errstate(invalid="ignore"):
        good = np.isfinite(jnu) & np.isfinite(anu) & (jnu >= 0) & (anu >= 0)
    if not good.all():
        logger.debug(f"Dropping {np.count_nonzero(~good)} degenerate coefficient(s)")
    return good


def exact_transfer_step(
    intensity: np.ndarray,
    optical_depth: np.ndarray,
    jnu: np.ndarray,
    anu: np.ndarray,
    ds: float,
) -> None:
    """
    Update intensity and optical depth in place for one uniform segment.

    Parameters
    ----------
    intensity : array
        Specific intensity accumulated so far, updated in place
    optical_depth : array
        Optical depth accumulated so far, updated in place
    jnu : array
        Emission coefficient (per unit length of ``ds``)
    anu : array
        Absorption coefficient (per unit length of ``ds``)
    ds : float
        Segment length
    """
    if not ds > 0:
        return

    jnu = np.asarray(jnu, dtype=float)
    anu = np.asarray(anu, dtype=float)
    good = sanitize_coefficients(jnu, anu)

    with np.errstate(over="ignore", under="ignore", invalid="ignore", divide="ignore"):
        dtau = np.where(good, anu * ds, 0.0)
        # (1 - exp(-dtau)) / alpha, with its ds limit where alpha vanishes
        absorbed = -np.expm1(-dtau)
        path = np.where(anu > 0, absorbed / np.where(anu > 0, anu, 1.0), ds)
        contribution = np.where(good, np.exp(-optical_depth) * jnu * path, 0.0)

        new_intensity = intensity + contribution
        new_depth = optical_depth + dtau

    update = good & np.isfinite(new_intensity) & np.isfinite(new_depth)
    intensity[update] = new_intensity[update]
    optical_depth[update] = new_depth[update]


def euler_transfer_step(
    intensity: np.ndarray,
    optical_depth: np.ndarray,
    jnu: np.ndarray,
    anu: np.ndarray,
    ds: float,
) -> None:
    """
    First-order counterpart of :func:`exact_transfer_step`.

    Adds exp(-tau) j ds and alpha ds. Only accurate for dtau << 1; kept as
    the reference the exact update must converge to.
    """
    if not ds > 0:
        return

    jnu = np.asarray(jnu, dtype=float)
    anu = np.asarray(anu, dtype=float)
    good = sanitize_coefficients(jnu, anu)
    with np.errstate(over="ignore", invalid="ignore"):
        intensity[good] += np.exp(-optical_depth[good]) * jnu[good] * ds
        optical_depth[good] += anu[good] * ds
