"""
Formulas for potential temperature.

The temperature a parcel of dry air would have if brought adiabatically to
the standard reference pressure of 1000 hPa. Results are in K.
"""

from .config import as_float
from .constants import kappa, p0
from .diagnostics import logerr
from .validation import check_less_than, check_range

__all__ = [
    'definition1',
]


@logerr
def definition1_validate(temperature, pressure, vapour_pressure):
    check_range(temperature, 'temperature', 253.0, 324.0)
    check_range(pressure, 'pressure', 100.0, 150_000.0)
    check_range(vapour_pressure, 'vapour_pressure', 0.0, 10_000.0)
    # partial pressure of dry air must stay positive
    check_less_than(vapour_pressure, 'vapour_pressure', pressure, 'pressure')


def definition1_unchecked(temperature, pressure, vapour_pressure):
    temperature = as_float(temperature)
    pressure, vapour_pressure = as_float(pressure), as_float(vapour_pressure)
    return temperature * (p0 / (pressure - vapour_pressure)) ** kappa


def definition1(temperature, pressure, vapour_pressure):
    """
    Compute potential temperature of dry air from temperature, pressure and vapour pressure.

    Provided by Davies-Jones (2009), https://doi.org/10.1175/2009MWR2774.1.

    Parameters
    ----------
    temperature : array_like
        Air temperature [K], valid range 253 - 324
    pressure : array_like
        Air pressure [Pa], valid range 100 - 150000
    vapour_pressure : array_like
        Vapour pressure [Pa], valid range 0 - 10000, lower than ``pressure``

    Returns
    -------
    array_like
        Potential temperature [K]

    Raises
    ------
    OutOfRangeError
        If an input is out of its valid range, or ``vapour_pressure`` is not
        lower than ``pressure``.
    """
    definition1_validate(temperature, pressure, vapour_pressure)
    temperature, pressure, vapour_pressure = (
        as_float(temperature), as_float(pressure), as_float(vapour_pressure)
    )
    return definition1_unchecked(temperature, pressure, vapour_pressure)
