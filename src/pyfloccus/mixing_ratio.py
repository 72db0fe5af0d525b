"""
Formulas for mixing ratio of water vapour.

The value of the ratio of the mass of water vapour to the mass of dry air
(AMS Glossary of Meteorology). Results are in kg/kg.
"""

from . import vapour_pressure as vp
from .config import as_float
from .constants import epsilon
from .diagnostics import logerr
from .validation import check_greater_than, check_less_than, check_range

__all__ = [
    'definition1',
    'performance1',
    'accuracy1',
]


@logerr
def definition1_validate(pressure, vapour_pressure):
    check_range(pressure, 'pressure', 100.0, 150_000.0)
    check_range(vapour_pressure, 'vapour_pressure', 0.0, 50_000.0)
    check_less_than(vapour_pressure, 'vapour_pressure', pressure, 'pressure')


def definition1_unchecked(pressure, vapour_pressure):
    pressure, vapour_pressure = as_float(pressure), as_float(vapour_pressure)
    return epsilon * (vapour_pressure / (pressure - vapour_pressure))


def definition1(pressure, vapour_pressure):
    """
    Compute mixing ratio from air pressure and vapour pressure.

    Theoretical formula, from Rogers & Yau (1989).

    Parameters
    ----------
    pressure : array_like
        Air pressure [Pa], valid range 100 - 150000
    vapour_pressure : array_like
        Vapour pressure [Pa], valid range 0 - 50000, lower than ``pressure``

    Returns
    -------
    array_like
        Mixing ratio [kg/kg]

    Raises
    ------
    OutOfRangeError
        If an input is out of its valid range, or ``vapour_pressure`` is not
        lower than ``pressure``.
    """
    definition1_validate(pressure, vapour_pressure)
    pressure, vapour_pressure = as_float(pressure), as_float(vapour_pressure)
    return definition1_unchecked(pressure, vapour_pressure)


@logerr
def performance1_validate(dewpoint, pressure):
    check_range(dewpoint, 'dewpoint', 273.0, 353.0)
    check_range(pressure, 'pressure', 100.0, 150_000.0)
    check_greater_than(
        pressure, 'pressure', vp.tetens1_unchecked(dewpoint), 'vapour_pressure'
    )


def performance1_unchecked(dewpoint, pressure):
    vapour_pressure = vp.tetens1_unchecked(dewpoint)
    return definition1_unchecked(pressure, vapour_pressure)


def performance1(dewpoint, pressure):
    """
    Compute mixing ratio from dewpoint and pressure, favouring speed.

    Uses :func:`pyfloccus.vapour_pressure.tetens1` for vapour pressure.

    Parameters
    ----------
    dewpoint : array_like
        Dewpoint temperature [K], valid range 273 - 353
    pressure : array_like
        Air pressure [Pa], valid range 100 - 150000

    Returns
    -------
    array_like
        Mixing ratio [kg/kg]

    Raises
    ------
    OutOfRangeError
        If an input is out of its valid range, or ``pressure`` does not exceed
        the vapour pressure at ``dewpoint``.
    """
    performance1_validate(dewpoint, pressure)
    dewpoint, pressure = as_float(dewpoint), as_float(pressure)
    return performance1_unchecked(dewpoint, pressure)


@logerr
def accuracy1_validate(dewpoint, pressure):
    check_range(dewpoint, 'dewpoint', 232.0, 324.0)
    check_range(pressure, 'pressure', 100.0, 150_000.0)
    check_greater_than(
        pressure, 'pressure', vp.buck1_unchecked(dewpoint, pressure), 'vapour_pressure'
    )


def accuracy1_unchecked(dewpoint, pressure):
    vapour_pressure = vp.buck1_unchecked(dewpoint, pressure)
    return definition1_unchecked(pressure, vapour_pressure)


def accuracy1(dewpoint, pressure):
    """
    Compute mixing ratio from dewpoint and pressure, favouring accuracy.

    Uses :func:`pyfloccus.vapour_pressure.buck1` for vapour pressure.

    Parameters
    ----------
    dewpoint : array_like
        Dewpoint temperature [K], valid range 232 - 324
    pressure : array_like
        Air pressure [Pa], valid range 100 - 150000

    Returns
    -------
    array_like
        Mixing ratio [kg/kg]

    Raises
    ------
    OutOfRangeError
        If an input is out of its valid range, or ``pressure`` does not exceed
        the vapour pressure at ``dewpoint``.
    """
    accuracy1_validate(dewpoint, pressure)
    dewpoint, pressure = as_float(dewpoint), as_float(pressure)
    return accuracy1_unchecked(dewpoint, pressure)
