"""
Formulas for wet bulb temperature.

The temperature an air parcel would reach if cooled adiabatically to
saturation at constant pressure by evaporating water into it. Results are
in K.
"""

import numpy as np

from .config import as_float
from .constants import T0
from .diagnostics import logerr
from .validation import check_range

__all__ = [
    'stull1',
]


@logerr
def stull1_validate(temperature, relative_humidity):
    check_range(temperature, 'temperature', 253.0, 324.0)
    check_range(relative_humidity, 'relative_humidity', 0.05, 0.99)


def stull1_unchecked(temperature, relative_humidity):
    tc = as_float(temperature) - T0
    rh_pct = as_float(relative_humidity) * 100.0

    result = (
        tc * np.arctan(0.151977 * np.sqrt(rh_pct + 8.313659))
        + np.arctan(tc + rh_pct)
        - np.arctan(rh_pct - 1.676331)
        + 0.00391838 * rh_pct ** 1.5 * np.arctan(0.023101 * rh_pct)
        - 4.686035
    )

    return result + T0


def stull1(temperature, relative_humidity):
    """
    Compute wet bulb temperature from temperature and relative humidity.

    Empirical fit by Stull (2011), https://doi.org/10.1175/JAMC-D-11-0143.1,
    valid at standard sea-level pressure.

    Parameters
    ----------
    temperature : array_like
        Air temperature [K], valid range 253 - 324
    relative_humidity : array_like
        Relative humidity [ratio], valid range 0.05 - 0.99

    Returns
    -------
    array_like
        Wet bulb temperature [K]
    """
    stull1_validate(temperature, relative_humidity)
    temperature, relative_humidity = as_float(temperature), as_float(relative_humidity)
    return stull1_unchecked(temperature, relative_humidity)
