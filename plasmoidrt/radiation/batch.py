"""
Batch evaluation of the plasmoid along many independent rays.
"""

from typing import List, Tuple, Optional, Sequence
import numpy as np
from concurrent.futures import ThreadPoolExecutor, ProcessPoolExecutor, as_completed

from plasmoidrt.astrobj.plasmoid import Plasmoid
from plasmoidrt.core.logging_config import get_logger

logger = get_logger("radiation.batch")

# One ray: a sequence of (coord_ph, dsem) integration steps
RaySteps = Sequence[Tuple[Sequence[float], float]]


def integrate_trajectory(
    plasmoid: Plasmoid, nu_em: np.ndarray, steps: RaySteps
) -> Tuple[np.ndarray, np.ndarray]:
    """
    Accumulate the plasmoid emission along one ray.

    Parameters
    ----------
    plasmoid : Plasmoid
        Emitting object
    nu_em : array
        Rest-frame frequencies in Hz
    steps : sequence of (coord_ph, dsem)
        Integration steps inside the plasmoid, ordered from the observer
        backward

    Returns
    -------
    intensity : array
        Specific intensity per frequency
    optical_depth : array
        Optical depth per frequency
    """
    nu_em = np.atleast_1d(np.asarray(nu_em, dtype=float))
    intensity = np.zeros_like(nu_em)
    optical_depth = np.zeros_like(nu_em)
    for coord_ph, dsem in steps:
        plasmoid.radiative_q(intensity, optical_depth, nu_em, dsem, coord_ph)
    return intensity, optical_depth


def integrate_batch(
    plasmoid: Plasmoid,
    nu_em: np.ndarray,
    rays: List[RaySteps],
    n_workers: Optional[int] = None,
    use_processes: bool = False,
) -> List[Tuple[Optional[np.ndarray], Optional[np.ndarray]]]:
    """
    Integrate many independent rays in parallel.

    The plasmoid is shared read-only between the workers; it must not be
    modified while the batch runs.

    Parameters
    ----------
    plasmoid : Plasmoid
        Emitting object
    nu_em : array
        Rest-frame frequencies in Hz
    rays : List[RaySteps]
        One step sequence per ray
    n_workers : int, optional
        Number of worker threads/processes. If None, uses CPU count.
    use_processes : bool
        If True, use processes instead of threads

    Returns
    -------
    List[Tuple[np.ndarray, np.ndarray]]
        (intensity, optical_depth) per ray, in input order; (None, None)
        for a ray whose integration failed
    """
    if not rays:
        return []

    if n_workers is None:
        import os

        n_workers = os.cpu_count() or 1

    logger.info(f"Integrating {len(rays)} rays with {n_workers} workers")

    executor_class = ProcessPoolExecutor if use_processes else ThreadPoolExecutor

    with executor_class(max_workers=n_workers) as executor:
        futures = {
            executor.submit(integrate_trajectory, plasmoid, nu_em, ray): i
            for i, ray in enumerate(rays)
        }

        completed = {}
        for future in as_completed(futures):
            idx = futures[future]
            try:
                completed[idx] = future.result()
            except Exception as e:
                logger.error(f"Error integrating ray {idx}: {e}")
                completed[idx] = (None, None)

        results = [completed[i] for i in range(len(rays))]

    logger.info(f"Completed batch integration of {len(results)} rays")
    return results
