"""
Physical constants for plasmoid emission calculations.

All constants are in cgs units unless otherwise specified. The ray tracer
works in geometrical units (G = c = 1, lengths and times in units of the
central mass); the conversion factors for a given mass are built in
``plasmoidrt.core.units``.
"""

# ============================================================================
# Fundamental Constants
# ============================================================================

# Speed of light
C_CGS = 2.99792458e10  # cm/s

# Gravitational constant
G_CGS = 6.67430e-8  # cm^3 g^-1 s^-2

# Planck constant
H_PLANCK_CGS = 6.62607015e-27  # erg s

# Boltzmann constant
KB_CGS = 1.380649e-16  # erg/K

# Elementary charge
E_CHARGE_CGS = 4.80320471e-10  # statC

# Particle masses
M_E_CGS = 9.1093837015e-28  # g (electron mass)
M_P_CGS = 1.67262192369e-24  # g (proton mass)

# Thomson cross section
SIGMA_T_CGS = 6.6524587321e-25  # cm^2

# ============================================================================
# Astronomical Constants
# ============================================================================

M_SUN_CGS = 1.98841e33  # g
AU_CGS = 1.495978707e13  # cm
PC_CGS = 3.0856775814913673e18  # cm

# Mass of Sgr A* (GRAVITY Collaboration 2022), default central object
SGRA_MASS_MSUN = 4.297e6

# ============================================================================
# Conversion Factors
# ============================================================================

EV_TO_ERG = 1.602176634e-12
K_TO_EV = KB_CGS / EV_TO_ERG  # eV per K
EV_TO_K = 1.0 / K_TO_EV

YEAR_S = 365.25 * 86400.0  # Julian year

# Electron rest-mass energy
ME_C2_CGS = M_E_CGS * C_CGS**2  # erg

# ============================================================================
# Numerical Constants
# ============================================================================

# Default validity floors for the evolved plasma
TEMPERATURE_FLOOR_K = 1e7
DENSITY_FLOOR_CGS = 0.0
