"""
Formulas for relative humidity.

The ratio of the vapour pressure to the saturation vapour pressure with
respect to water (AMS Glossary of Meteorology). Results are a ratio, not a
percentage; supersaturated air gives values above 1.
"""

from . import mixing_ratio as mr
from . import vapour_pressure as vp
from .config import as_float
from .diagnostics import logerr
from .validation import check_range

__all__ = [
    'definition1',
    'definition2',
    'tetens1',
    'buck3',
    'accuracy1',
]


@logerr
def definition1_validate(mixing_ratio, saturation_mixing_ratio):
    check_range(mixing_ratio, 'mixing_ratio', 0.00001, 10.0)
    check_range(saturation_mixing_ratio, 'saturation_mixing_ratio', 0.00001, 10.0)


def definition1_unchecked(mixing_ratio, saturation_mixing_ratio):
    return as_float(mixing_ratio) / as_float(saturation_mixing_ratio)


def definition1(mixing_ratio, saturation_mixing_ratio):
    """
    Compute relative humidity from mixing ratio and saturation mixing ratio.

    Parameters
    ----------
    mixing_ratio : array_like
        Mixing ratio [kg/kg], valid range 0.00001 - 10.0
    saturation_mixing_ratio : array_like
        Saturation mixing ratio [kg/kg], valid range 0.00001 - 10.0

    Returns
    -------
    array_like
        Relative humidity [ratio]
    """
    definition1_validate(mixing_ratio, saturation_mixing_ratio)
    mixing_ratio = as_float(mixing_ratio)
    saturation_mixing_ratio = as_float(saturation_mixing_ratio)
    return definition1_unchecked(mixing_ratio, saturation_mixing_ratio)


@logerr
def definition2_validate(vapour_pressure, saturation_vapour_pressure):
    check_range(vapour_pressure, 'vapour_pressure', 0.0, 50_000.0)
    check_range(saturation_vapour_pressure, 'saturation_vapour_pressure', 0.1, 50_000.0)


def definition2_unchecked(vapour_pressure, saturation_vapour_pressure):
    return as_float(vapour_pressure) / as_float(saturation_vapour_pressure)


def definition2(vapour_pressure, saturation_vapour_pressure):
    """
    Compute relative humidity from vapour pressure and saturation vapour pressure.

    Parameters
    ----------
    vapour_pressure : array_like
        Vapour pressure [Pa], valid range 0 - 50000
    saturation_vapour_pressure : array_like
        Saturation vapour pressure [Pa], valid range 0.1 - 50000

    Returns
    -------
    array_like
        Relative humidity [ratio]
    """
    definition2_validate(vapour_pressure, saturation_vapour_pressure)
    vapour_pressure = as_float(vapour_pressure)
    saturation_vapour_pressure = as_float(saturation_vapour_pressure)
    return definition2_unchecked(vapour_pressure, saturation_vapour_pressure)


# ============================================================================
# From temperature and dewpoint
# ============================================================================

@logerr
def tetens1_validate(temperature, dewpoint):
    check_range(temperature, 'temperature', 273.0, 353.0)
    check_range(dewpoint, 'dewpoint', 273.0, 353.0)


def tetens1_unchecked(temperature, dewpoint):
    vapour_pressure = vp.tetens1_unchecked(dewpoint)
    saturation_vapour_pressure = vp.tetens1_unchecked(temperature)
    return definition2_unchecked(vapour_pressure, saturation_vapour_pressure)


def tetens1(temperature, dewpoint):
    """
    Compute relative humidity from temperature and dewpoint using Tetens (1930).

    Parameters
    ----------
    temperature : array_like
        Air temperature [K], valid range 273 - 353
    dewpoint : array_like
        Dewpoint temperature [K], valid range 273 - 353

    Returns
    -------
    array_like
        Relative humidity [ratio]
    """
    tetens1_validate(temperature, dewpoint)
    temperature, dewpoint = as_float(temperature), as_float(dewpoint)
    return tetens1_unchecked(temperature, dewpoint)


@logerr
def buck3_validate(temperature, dewpoint, pressure):
    check_range(temperature, 'temperature', 253.0, 324.0)
    check_range(dewpoint, 'dewpoint', 253.0, 324.0)
    check_range(pressure, 'pressure', 100.0, 150_000.0)


def buck3_unchecked(temperature, dewpoint, pressure):
    vapour_pressure = vp.buck3_unchecked(dewpoint, pressure)
    saturation_vapour_pressure = vp.buck3_unchecked(temperature, pressure)
    return definition2_unchecked(vapour_pressure, saturation_vapour_pressure)


def buck3(temperature, dewpoint, pressure):
    """
    Compute relative humidity from temperature, dewpoint and pressure using Buck (1981).

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
        Relative humidity [ratio]
    """
    buck3_validate(temperature, dewpoint, pressure)
    temperature, dewpoint, pressure = (
        as_float(temperature), as_float(dewpoint), as_float(pressure)
    )
    return buck3_unchecked(temperature, dewpoint, pressure)


@logerr
def accuracy1_validate(temperature, dewpoint, pressure):
    check_range(temperature, 'temperature', 232.0, 314.0)
    check_range(dewpoint, 'dewpoint', 232.0, 314.0)
    check_range(pressure, 'pressure', 10_000.0, 150_000.0)


def accuracy1_unchecked(temperature, dewpoint, pressure):
    mixing_ratio = mr.accuracy1_unchecked(dewpoint, pressure)
    saturation_mixing_ratio = mr.accuracy1_unchecked(temperature, pressure)
    return definition1_unchecked(mixing_ratio, saturation_mixing_ratio)


def accuracy1(temperature, dewpoint, pressure):
    """
    Compute relative humidity from temperature, dewpoint and pressure, favouring accuracy.

    Ratio of the mixing ratios from :func:`pyfloccus.mixing_ratio.accuracy1`
    at dewpoint and at air temperature.

    Parameters
    ----------
    temperature : array_like
        Air temperature [K], valid range 232 - 314
    dewpoint : array_like
        Dewpoint temperature [K], valid range 232 - 314
    pressure : array_like
        Air pressure [Pa], valid range 10000 - 150000

    Returns
    -------
    array_like
        Relative humidity [ratio]
    """
    accuracy1_validate(temperature, dewpoint, pressure)
    temperature, dewpoint, pressure = (
        as_float(temperature), as_float(dewpoint), as_float(pressure)
    )
    return accuracy1_unchecked(temperature, dewpoint, pressure)
