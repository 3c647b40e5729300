"""
Unit conversion utilities for plasmoidrt.

Provides functions to convert between the internal unit system (cgs, Kelvin,
geometrical units of the central mass) and the unit strings accepted by the
public accessors.
"""

import numpy as np
from typing import Optional, Tuple, Union

from plasmoidrt.core.constants import (
    AU_CGS,
    C_CGS,
    EV_TO_K,
    G_CGS,
    K_TO_EV,
    M_SUN_CGS,
    PC_CGS,
    YEAR_S,
)

_GEOMETRICAL = ["geometrical", "geometrical_time", "geometrical_length", "m_unit"]

_SECONDS_PER = {
    "s": 1.0,
    "sec": 1.0,
    "min": 60.0,
    "h": 3600.0,
    "hr": 3600.0,
    "d": 86400.0,
    "day": 86400.0,
    "yr": YEAR_S,
    "year": YEAR_S,
}

_CM_PER = {
    "cm": 1.0,
    "m": 1e2,
    "km": 1e5,
    "au": AU_CGS,
    "pc": PC_CGS,
    "kpc": 1e3 * PC_CGS,
}


def geometric_units(mass_msun: float) -> Tuple[float, float]:
    """
    Geometrical length and time units for a central mass.

    Parameters
    ----------
    mass_msun : float
        Central mass in solar masses

    Returns
    -------
    unit_length_cm : float
        GM/c^2 in cm
    unit_time_s : float
        GM/c^3 in s
    """
    if mass_msun <= 0:
        raise ValueError("Central mass must be positive")
    unit_length_cm = G_CGS * mass_msun * M_SUN_CGS / C_CGS**2
    return unit_length_cm, unit_length_cm / C_CGS


# ============================================================================
# Temperature Conversions
# ============================================================================


def convert_temperature(
    value: Union[float, np.ndarray], from_unit: str, to_unit: str
) -> Union[float, np.ndarray]:
    """
    Convert temperature between units.

    Parameters
    ----------
    value : float or array
        Temperature value(s) to convert
    from_unit : str
        Source unit: 'K', 'eV', 'keV'
    to_unit : str
        Target unit: 'K', 'eV', 'keV'

    Returns
    -------
    float or array
        Converted temperature value(s)

    Examples
    --------
    >>> convert_temperature(1.0, 'keV', 'K')
    11604518.12...
    """
    # Normalize to Kelvin
    if from_unit.upper() == "K":
        kelvin = value
    elif from_unit.upper() == "EV":
        kelvin = value * EV_TO_K
    elif from_unit.upper() == "KEV":
        kelvin = value * 1e3 * EV_TO_K
    else:
        raise ValueError(f"Unknown source unit: {from_unit}")

    # Convert from Kelvin
    if to_unit.upper() == "K":
        return kelvin
    elif to_unit.upper() == "EV":
        return kelvin * K_TO_EV
    elif to_unit.upper() == "KEV":
        return kelvin * K_TO_EV * 1e-3
    else:
        raise ValueError(f"Unknown target unit: {to_unit}")


# ============================================================================
# Density Conversions
# ============================================================================


def convert_density(
    value: Union[float, np.ndarray], from_unit: str, to_unit: str
) -> Union[float, np.ndarray]:
    """
    Convert number density between units.

    Parameters
    ----------
    value : float or array
        Number density value(s) to convert
    from_unit : str
        Source unit: 'cm^-3', 'm^-3'
    to_unit : str
        Target unit: 'cm^-3', 'm^-3'

    Returns
    -------
    float or array
        Converted density value(s)

    Examples
    --------
    >>> convert_density(1e6, 'cm^-3', 'm^-3')
    1000000000000.0
    """
    # Normalize to cm^-3
    if from_unit.lower() in ["cm^-3", "cm-3", "cm**-3"]:
        per_cm3 = value
    elif from_unit.lower() in ["m^-3", "m-3", "m**-3"]:
        per_cm3 = value * 1e-6
    else:
        raise ValueError(f"Unknown source unit: {from_unit}")

    if to_unit.lower() in ["cm^-3", "cm-3", "cm**-3"]:
        return per_cm3
    elif to_unit.lower() in ["m^-3", "m-3", "m**-3"]:
        return per_cm3 * 1e6
    else:
        raise ValueError(f"Unknown target unit: {to_unit}")


# ============================================================================
# Time and Length Conversions
# ============================================================================


def convert_time(
    value: Union[float, np.ndarray],
    from_unit: str,
    to_unit: str,
    unit_time_s: Optional[float] = None,
) -> Union[float, np.ndarray]:
    """
    Convert time between geometrical and physical units.

    Parameters
    ----------
    value : float or array
        Time value(s) to convert
    from_unit : str
        Source unit: 'geometrical_time', 's', 'min', 'h', 'd', 'yr'
    to_unit : str
        Target unit (same choices)
    unit_time_s : float, optional
        GM/c^3 in seconds; required whenever one side is geometrical and
        the other physical

    Returns
    -------
    float or array
        Converted time value(s)
    """
    src = from_unit.lower()
    dst = to_unit.lower()
    if src in _GEOMETRICAL and dst in _GEOMETRICAL:
        return value

    def _need_scale():
        if unit_time_s is None:
            raise ValueError("Conversion to or from geometrical time needs unit_time_s")
        return unit_time_s

    # Normalize to seconds
    if src in _GEOMETRICAL:
        seconds = value * _need_scale()
    elif src in _SECONDS_PER:
        seconds = value * _SECONDS_PER[src]
    else:
        raise ValueError(f"Unknown source unit: {from_unit}")

    if dst in _GEOMETRICAL:
        return seconds / _need_scale()
    elif dst in _SECONDS_PER:
        return seconds / _SECONDS_PER[dst]
    else:
        raise ValueError(f"Unknown target unit: {to_unit}")


def convert_length(
    value: Union[float, np.ndarray],
    from_unit: str,
    to_unit: str,
    unit_length_cm: Optional[float] = None,
) -> Union[float, np.ndarray]:
    """
    Convert length between geometrical and physical units.

    Parameters
    ----------
    value : float or array
        Length value(s) to convert
    from_unit : str
        Source unit: 'geometrical', 'cm', 'm', 'km', 'au', 'pc', 'kpc'
    to_unit : str
        Target unit (same choices)
    unit_length_cm : float, optional
        GM/c^2 in cm; required whenever one side is geometrical and the
        other physical

    Returns
    -------
    float or array
        Converted length value(s)
    """
    src = from_unit.lower()
    dst = to_unit.lower()
    if src in _GEOMETRICAL and dst in _GEOMETRICAL:
        return value

    if (src in _GEOMETRICAL or dst in _GEOMETRICAL) and unit_length_cm is None:
        raise ValueError("Conversion to or from geometrical length needs unit_length_cm")

    if src in _GEOMETRICAL:
        cm = value * unit_length_cm
    elif src in _CM_PER:
        cm = value * _CM_PER[src]
    else:
        raise ValueError(f"Unknown source unit: {from_unit}")

    if dst in _GEOMETRICAL:
        return cm / unit_length_cm
    elif dst in _CM_PER:
        return cm / _CM_PER[dst]
    else:
        raise ValueError(f"Unknown target unit: {to_unit}")
