"""
Physical constants for pyfloccus formulas.

All values are stored in the configured precision (:data:`pyfloccus.config.Float`),
so derived constants are computed with the same arithmetic the formulas use.
Values follow the ECMWF IFS documentation (2020) where applicable.
"""

from .config import Float

# ============================================================================
# Fundamental Physical Constants
# ============================================================================

R = Float(8.31446261815324)     # Universal gas constant [J mol^-1 K^-1]

# Molar masses
M_d = Float(0.0289644)          # Molar mass of dry air [kg mol^-1]
M_v = Float(0.0180152833)       # Molar mass of water vapour [kg mol^-1]

# Gas constants
R_d = R / M_d                   # Specific gas constant for dry air ≈ 287.06 [J kg^-1 K^-1]
R_v = R / M_v                   # Specific gas constant for water vapour ≈ 461.52 [J kg^-1 K^-1]
epsilon = M_v / M_d             # Ratio of molar masses ≈ 0.622 [dimensionless]

# Specific heats (at constant pressure)
Cp_d = Float(1004.709)          # Specific heat of dry air [J kg^-1 K^-1]
Cp_v = Float(1846.1)            # Specific heat of water vapour [J kg^-1 K^-1]
Cp_l = Float(4218.0)            # Specific heat of liquid water [J kg^-1 K^-1]
Cp_i = Float(2106.0)            # Specific heat of ice [J kg^-1 K^-1]

# Specific heats (at constant volume)
Cv_d = Float(717.6493)          # Specific heat of dry air at constant volume [J kg^-1 K^-1]
Cv_v = Float(1384.575)          # Specific heat of water vapour at constant volume [J kg^-1 K^-1]

# Ratio of gas constant to specific heat
kappa = R_d / Cp_d              # ≈ 0.286 [dimensionless]

# Latent heats
Lv = Float(2500800.0)           # Latent heat of vaporization [J kg^-1]

# ============================================================================
# Reference Values
# ============================================================================

T0 = Float(273.15)              # Melting point of water, 0 °C [K]
p0 = Float(100000.0)            # Reference pressure for potential temperature [Pa]
g = Float(9.80665)              # Gravitational acceleration [m s^-2]
