"""
Formulas for virtual temperature.

The temperature at which a sample of dry air at the same pressure would have
the same density as the given moist air (AMS Glossary of Meteorology).
Results are in K.

References
----------
Rogers, R. R., and M. K. Yau, 1989: A Short Course in Cloud Physics.
    3rd ed. Pergamon Press.
"""

from .config import as_float
from .constants import epsilon
from .diagnostics import logerr
from .validation import check_less_than, check_range

__all__ = [
    'definition1',
    'definition2',
    'definition3',
]


@logerr
def definition1_validate(temperature, mixing_ratio):
    check_range(temperature, 'temperature', 173.0, 354.0)
    check_range(mixing_ratio, 'mixing_ratio', 0.0000000001, 0.5)


def definition1_unchecked(temperature, mixing_ratio):
    temperature, mixing_ratio = as_float(temperature), as_float(mixing_ratio)
    return temperature * ((mixing_ratio + epsilon) / (epsilon * (1.0 + mixing_ratio)))


def definition1(temperature, mixing_ratio):
    """
    Compute virtual temperature from temperature and mixing ratio.

    Parameters
    ----------
    temperature : array_like
        Air temperature [K], valid range 173 - 354
    mixing_ratio : array_like
        Mixing ratio [kg/kg], valid range 1e-10 - 0.5

    Returns
    -------
    array_like
        Virtual temperature [K]
    """
    definition1_validate(temperature, mixing_ratio)
    temperature, mixing_ratio = as_float(temperature), as_float(mixing_ratio)
    return definition1_unchecked(temperature, mixing_ratio)


@logerr
def definition2_validate(temperature, pressure, vapour_pressure):
    check_range(temperature, 'temperature', 173.0, 354.0)
    check_range(pressure, 'pressure', 100.0, 150_000.0)
    check_range(vapour_pressure, 'vapour_pressure', 0.0, 10_000.0)
    check_less_than(vapour_pressure, 'vapour_pressure', pressure, 'pressure')


def definition2_unchecked(temperature, pressure, vapour_pressure):
    temperature = as_float(temperature)
    pressure, vapour_pressure = as_float(pressure), as_float(vapour_pressure)
    return temperature / (1.0 - ((vapour_pressure / pressure) * (1.0 - epsilon)))


def definition2(temperature, pressure, vapour_pressure):
    """
    Compute virtual temperature from temperature, pressure and vapour pressure.

    Parameters
    ----------
    temperature : array_like
        Air temperature [K], valid range 173 - 354
    pressure : array_like
        Air pressure [Pa], valid range 100 - 150000
    vapour_pressure : array_like
        Vapour pressure [Pa], valid range 0 - 10000, lower than ``pressure``

    Returns
    -------
    array_like
        Virtual temperature [K]

    Raises
    ------
    OutOfRangeError
        If an input is out of its valid range, or ``vapour_pressure`` is not
        lower than ``pressure``.
    """
    definition2_validate(temperature, pressure, vapour_pressure)
    temperature, pressure, vapour_pressure = (
        as_float(temperature), as_float(pressure), as_float(vapour_pressure)
    )
    return definition2_unchecked(temperature, pressure, vapour_pressure)


@logerr
def definition3_validate(temperature, specific_humidity):
    check_range(temperature, 'temperature', 173.0, 354.0)
    check_range(specific_humidity, 'specific_humidity', 0.000000001, 2.0)


def definition3_unchecked(temperature, specific_humidity):
    temperature, specific_humidity = as_float(temperature), as_float(specific_humidity)
    return temperature * (1.0 + (specific_humidity * ((1.0 / epsilon) - 1.0)))


def definition3(temperature, specific_humidity):
    """
    Compute virtual temperature from temperature and specific humidity.

    Parameters
    ----------
    temperature : array_like
        Air temperature [K], valid range 173 - 354
    specific_humidity : array_like
        Specific humidity [kg/kg], valid range 1e-9 - 2.0

    Returns
    -------
    array_like
        Virtual temperature [K]
    """
    definition3_validate(temperature, specific_humidity)
    temperature, specific_humidity = as_float(temperature), as_float(specific_humidity)
    return definition3_unchecked(temperature, specific_humidity)
