"""
Formulas for vapour pressure deficit.

The difference between the saturation vapour pressure and the actual vapour
pressure of the air. Results are in Pa.
"""

from . import vapour_pressure as vp
from .config import as_float
from .diagnostics import logerr
from .validation import check_range

__all__ = [
    'definition1',
    'definition2',
    'definition3',
]


@logerr
def definition1_validate(vapour_pressure, saturation_vapour_pressure):
    check_range(vapour_pressure, 'vapour_pressure', 0.0, 50_000.0)
    check_range(saturation_vapour_pressure, 'saturation_vapour_pressure', 0.0, 50_000.0)


def definition1_unchecked(vapour_pressure, saturation_vapour_pressure):
    return as_float(saturation_vapour_pressure) - as_float(vapour_pressure)


def definition1(vapour_pressure, saturation_vapour_pressure):
    """
    Compute vapour pressure deficit from vapour pressure and saturation vapour pressure.

    Parameters
    ----------
    vapour_pressure : array_like
        Vapour pressure [Pa], valid range 0 - 50000
    saturation_vapour_pressure : array_like
        Saturation vapour pressure [Pa], valid range 0 - 50000

    Returns
    -------
    array_like
        Vapour pressure deficit [Pa]
    """
    definition1_validate(vapour_pressure, saturation_vapour_pressure)
    vapour_pressure = as_float(vapour_pressure)
    saturation_vapour_pressure = as_float(saturation_vapour_pressure)
    return definition1_unchecked(vapour_pressure, saturation_vapour_pressure)


@logerr
def definition2_validate(temperature, dewpoint, pressure):
    check_range(temperature, 'temperature', 253.0, 324.0)
    check_range(dewpoint, 'dewpoint', 253.0, 324.0)
    check_range(pressure, 'pressure', 100.0, 150_000.0)


def definition2_unchecked(temperature, dewpoint, pressure):
    vapour_pressure = vp.buck3_unchecked(dewpoint, pressure)
    saturation_vapour_pressure = vp.buck3_unchecked(temperature, pressure)
    return definition1_unchecked(vapour_pressure, saturation_vapour_pressure)


def definition2(temperature, dewpoint, pressure):
    """
    Compute vapour pressure deficit from temperature, dewpoint and pressure.

    Both pressures come from :func:`pyfloccus.vapour_pressure.buck3`.

    Parameters
    ----------
    temperature : array_like
        Air temperature [K], valid range 253 - 324
    dewpoint : array_like
        Dewpoint temperature [K], valid range 253 - 324
    pressure : array_like
        Air pressure [Pa], valid range 100 - 150000

    Returns
    -------
    array_like
        Vapour pressure deficit [Pa]
    """
    definition2_validate(temperature, dewpoint, pressure)
    temperature, dewpoint, pressure = (
        as_float(temperature), as_float(dewpoint), as_float(pressure)
    )
    return definition2_unchecked(temperature, dewpoint, pressure)


@logerr
def definition3_validate(temperature, relative_humidity, pressure):
    check_range(temperature, 'temperature', 253.0, 324.0)
    check_range(relative_humidity, 'relative_humidity', 0.0, 2.0)
    check_range(pressure, 'pressure', 100.0, 150_000.0)


def definition3_unchecked(temperature, relative_humidity, pressure):
    saturation_vapour_pressure = vp.buck3_unchecked(temperature, pressure)
    vapour_pressure = vp.definition2_unchecked(saturation_vapour_pressure, relative_humidity)
    return definition1_unchecked(vapour_pressure, saturation_vapour_pressure)


def definition3(temperature, relative_humidity, pressure):
    """
    Compute vapour pressure deficit from temperature, relative humidity and pressure.

    Parameters
    ----------
    temperature : array_like
        Air temperature [K], valid range 253 - 324
    relative_humidity : array_like
        Relative humidity [ratio], valid range 0.0 - 2.0
    pressure : array_like
        Air pressure [Pa], valid range 100 - 150000

    Returns
    -------
    array_like
        Vapour pressure deficit [Pa]
    """
    definition3_validate(temperature, relative_humidity, pressure)
    temperature, relative_humidity, pressure = (
        as_float(temperature), as_float(relative_humidity), as_float(pressure)
    )
    return definition3_unchecked(temperature, relative_humidity, pressure)
