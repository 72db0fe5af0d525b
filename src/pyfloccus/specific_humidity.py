"""
Formulas for specific humidity.

The ratio of the mass of water vapour to the total mass of the system
(AMS Glossary of Meteorology). Results are in kg/kg.
"""

from .config import as_float
from .constants import epsilon
from .diagnostics import logerr
from .validation import check_less_than, check_range

__all__ = [
    'definition1',
]


@logerr
def definition1_validate(vapour_pressure, pressure):
    check_range(vapour_pressure, 'vapour_pressure', 0.0, 50_000.0)
    check_range(pressure, 'pressure', 100.0, 150_000.0)
    check_less_than(vapour_pressure, 'vapour_pressure', pressure, 'pressure')


def definition1_unchecked(vapour_pressure, pressure):
    vapour_pressure, pressure = as_float(vapour_pressure), as_float(pressure)
    return epsilon * (vapour_pressure / (pressure - (vapour_pressure * (1.0 - epsilon))))


def definition1(vapour_pressure, pressure):
    """
    Compute specific humidity from vapour pressure and air pressure.

    Theoretical formula, from Rogers & Yau (1989).

    Parameters
    ----------
    vapour_pressure : array_like
        Vapour pressure [Pa], valid range 0 - 50000, lower than ``pressure``
    pressure : array_like
        Air pressure [Pa], valid range 100 - 150000

    Returns
    -------
    array_like
        Specific humidity [kg/kg]

    Raises
    ------
    OutOfRangeError
        If an input is out of its valid range, or ``vapour_pressure`` is not
        lower than ``pressure``.
    """
    definition1_validate(vapour_pressure, pressure)
    vapour_pressure, pressure = as_float(vapour_pressure), as_float(pressure)
    return definition1_unchecked(vapour_pressure, pressure)
