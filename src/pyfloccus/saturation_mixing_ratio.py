"""
Formulas for saturation mixing ratio of water vapour.

The value of the mixing ratio of saturated air at the given temperature and
pressure (AMS Glossary of Meteorology). Results are in kg/kg.
"""

from . import mixing_ratio
from .config import as_float
from .diagnostics import logerr
from .validation import check_less_than, check_range

__all__ = [
    'definition1',
    'definition2',
]


@logerr
def definition1_validate(pressure, saturation_vapour_pressure):
    check_range(pressure, 'pressure', 100.0, 150_000.0)
    check_range(saturation_vapour_pressure, 'saturation_vapour_pressure', 0.0, 50_000.0)
    check_less_than(
        saturation_vapour_pressure, 'saturation_vapour_pressure', pressure, 'pressure'
    )


def definition1_unchecked(pressure, saturation_vapour_pressure):
    return mixing_ratio.definition1_unchecked(pressure, saturation_vapour_pressure)


def definition1(pressure, saturation_vapour_pressure):
    """
    Compute saturation mixing ratio from air pressure and saturation vapour pressure.

    Parameters
    ----------
    pressure : array_like
        Air pressure [Pa], valid range 100 - 150000
    saturation_vapour_pressure : array_like
        Saturation vapour pressure [Pa], valid range 0 - 50000, lower than
        ``pressure``

    Returns
    -------
    array_like
        Saturation mixing ratio [kg/kg]
    """
    definition1_validate(pressure, saturation_vapour_pressure)
    pressure = as_float(pressure)
    saturation_vapour_pressure = as_float(saturation_vapour_pressure)
    return definition1_unchecked(pressure, saturation_vapour_pressure)


@logerr
def definition2_validate(mixing_ratio, relative_humidity):
    check_range(mixing_ratio, 'mixing_ratio', 0.0000000001, 1.0)
    check_range(relative_humidity, 'relative_humidity', 0.0000000001, 2.0)


def definition2_unchecked(mixing_ratio, relative_humidity):
    return as_float(mixing_ratio) / as_float(relative_humidity)


def definition2(mixing_ratio, relative_humidity):
    """
    Compute saturation mixing ratio from mixing ratio and relative humidity.

    Parameters
    ----------
    mixing_ratio : array_like
        Mixing ratio [kg/kg], valid range 1e-10 - 1.0
    relative_humidity : array_like
        Relative humidity [ratio], valid range 1e-10 - 2.0

    Returns
    -------
    array_like
        Saturation mixing ratio [kg/kg]
    """
    definition2_validate(mixing_ratio, relative_humidity)
    mixing_ratio, relative_humidity = as_float(mixing_ratio), as_float(relative_humidity)
    return definition2_unchecked(mixing_ratio, relative_humidity)
