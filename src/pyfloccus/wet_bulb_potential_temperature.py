"""
Formulas for wet bulb potential temperature.
"""

from .config import as_float
from .constants import Cp_d, R_d, T0
from .diagnostics import logerr
from .validation import check_range

__all__ = [
    'davies_jones1',
]


@logerr
def davies_jones1_validate(equivalent_potential_temperature):
    check_range(equivalent_potential_temperature, 'equivalent_potential_temperature', 257.0, 377.0)


def davies_jones1_unchecked(equivalent_potential_temperature):
    theta_e = as_float(equivalent_potential_temperature)
    return 45.114 - 51.489 * (T0 / theta_e) ** (Cp_d / R_d) + T0


def davies_jones1(equivalent_potential_temperature):
    """
    Compute wet bulb potential temperature from equivalent potential temperature.

    Approximation by Davies-Jones (2008), https://doi.org/10.1175/2007MWR2224.1.

    Parameters
    ----------
    equivalent_potential_temperature : array_like
        Equivalent potential temperature [K], valid range 257 - 377

    Returns
    -------
    array_like
        Wet bulb potential temperature [K]
    """
    davies_jones1_validate(equivalent_potential_temperature)
    theta_e = as_float(equivalent_potential_temperature)
    return davies_jones1_unchecked(theta_e)
