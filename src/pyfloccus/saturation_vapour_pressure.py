"""
Formulas for saturation vapour pressure.

The vapour pressure of a system, at a given temperature, for which the
vapour is in equilibrium with a plane surface of pure liquid water or ice
(AMS Glossary of Meteorology).

The empirical formulas are the ones in :mod:`pyfloccus.vapour_pressure`
evaluated at air temperature instead of dewpoint; see that module for
references and units.
"""

from . import vapour_pressure as vp
from .config import as_float
from .diagnostics import logerr
from .validation import check_range

__all__ = [
    'definition1',
    'buck1',
    'buck2',
    'buck3',
    'buck3_simplified',
    'buck4',
    'buck4_simplified',
    'tetens1',
    'wexler1',
    'wexler2',
]


@logerr
def definition1_validate(vapour_pressure, relative_humidity):
    check_range(vapour_pressure, 'vapour_pressure', 0.0, 50_000.0)
    check_range(relative_humidity, 'relative_humidity', 0.00001, 2.0)


def definition1_unchecked(vapour_pressure, relative_humidity):
    return as_float(vapour_pressure) / as_float(relative_humidity)


def definition1(vapour_pressure, relative_humidity):
    """
    Compute saturation vapour pressure from vapour pressure and relative humidity.

    Parameters
    ----------
    vapour_pressure : array_like
        Vapour pressure [Pa], valid range 0 - 50000
    relative_humidity : array_like
        Relative humidity [ratio], valid range 0.00001 - 2.0

    Returns
    -------
    array_like
        Saturation vapour pressure [Pa]
    """
    definition1_validate(vapour_pressure, relative_humidity)
    vapour_pressure, relative_humidity = as_float(vapour_pressure), as_float(relative_humidity)
    return definition1_unchecked(vapour_pressure, relative_humidity)


# ============================================================================
# Buck (1981)
# ============================================================================

@logerr
def buck1_validate(temperature, pressure):
    check_range(temperature, 'temperature', 232.0, 324.0)
    check_range(pressure, 'pressure', 100.0, 150_000.0)


def buck1_unchecked(temperature, pressure):
    return vp.buck1_unchecked(temperature, pressure)


def buck1(temperature, pressure):
    """
    Saturation vapour pressure over water, most accurate Buck (1981) formula.

    Parameters
    ----------
    temperature : array_like
        Air temperature [K], valid range 232 - 324
    pressure : array_like
        Air pressure [Pa], valid range 100 - 150000

    Returns
    -------
    array_like
        Saturation vapour pressure [Pa]
    """
    buck1_validate(temperature, pressure)
    temperature, pressure = as_float(temperature), as_float(pressure)
    return buck1_unchecked(temperature, pressure)


@logerr
def buck2_validate(temperature, pressure):
    check_range(temperature, 'temperature', 193.0, 274.0)
    check_range(pressure, 'pressure', 100.0, 150_000.0)


def buck2_unchecked(temperature, pressure):
    return vp.buck2_unchecked(temperature, pressure)


def buck2(temperature, pressure):
    """
    Saturation vapour pressure over ice, most accurate Buck (1981) formula.

    Valid ``temperature`` range: 193 K - 274 K.
    Valid ``pressure`` range: 100 Pa - 150000 Pa.
    """
    buck2_validate(temperature, pressure)
    temperature, pressure = as_float(temperature), as_float(pressure)
    return buck2_unchecked(temperature, pressure)


@logerr
def buck3_validate(temperature, pressure):
    check_range(temperature, 'temperature', 253.0, 324.0)
    check_range(pressure, 'pressure', 100.0, 150_000.0)


def buck3_unchecked(temperature, pressure):
    return vp.buck3_unchecked(temperature, pressure)


def buck3(temperature, pressure):
    """
    Saturation vapour pressure over water, general-purpose Buck (1981) formula.

    Valid ``temperature`` range: 253 K - 324 K.
    Valid ``pressure`` range: 100 Pa - 150000 Pa.
    """
    buck3_validate(temperature, pressure)
    temperature, pressure = as_float(temperature), as_float(pressure)
    return buck3_unchecked(temperature, pressure)


@logerr
def buck3_simplified_validate(temperature):
    check_range(temperature, 'temperature', 253.0, 324.0)


def buck3_simplified_unchecked(temperature):
    return vp.buck3_simplified_unchecked(temperature)


def buck3_simplified(temperature):
    """
    Saturation vapour pressure over water, :func:`buck3` without pressure dependence.

    Valid ``temperature`` range: 253 K - 324 K.
    """
    buck3_simplified_validate(temperature)
    temperature = as_float(temperature)
    return buck3_simplified_unchecked(temperature)


@logerr
def buck4_validate(temperature, pressure):
    check_range(temperature, 'temperature', 223.0, 274.0)
    check_range(pressure, 'pressure', 100.0, 150_000.0)


def buck4_unchecked(temperature, pressure):
    return vp.buck4_unchecked(temperature, pressure)


def buck4(temperature, pressure):
    """
    Saturation vapour pressure over ice, general-purpose Buck (1981) formula.

    Valid ``temperature`` range: 223 K - 274 K.
    Valid ``pressure`` range: 100 Pa - 150000 Pa.
    """
    buck4_validate(temperature, pressure)
    temperature, pressure = as_float(temperature), as_float(pressure)
    return buck4_unchecked(temperature, pressure)


@logerr
def buck4_simplified_validate(temperature):
    check_range(temperature, 'temperature', 223.0, 274.0)


def buck4_simplified_unchecked(temperature):
    return vp.buck4_simplified_unchecked(temperature)


def buck4_simplified(temperature):
    """
    Saturation vapour pressure over ice, :func:`buck4` without pressure dependence.

    Valid ``temperature`` range: 223 K - 274 K.
    """
    buck4_simplified_validate(temperature)
    temperature = as_float(temperature)
    return buck4_simplified_unchecked(temperature)


# ============================================================================
# Tetens (1930) and Wexler (1976, 1977)
# ============================================================================

@logerr
def tetens1_validate(temperature):
    check_range(temperature, 'temperature', 273.0, 353.0)


def tetens1_unchecked(temperature):
    return vp.tetens1_unchecked(temperature)


def tetens1(temperature):
    """
    Saturation vapour pressure over water (Tetens, 1930).

    Valid ``temperature`` range: 273 K - 353 K.
    """
    tetens1_validate(temperature)
    temperature = as_float(temperature)
    return tetens1_unchecked(temperature)


@logerr
def wexler1_validate(temperature):
    check_range(temperature, 'temperature', 273.0, 374.0)


def wexler1_unchecked(temperature):
    return vp.wexler1_unchecked(temperature)


def wexler1(temperature):
    """
    Saturation vapour pressure over water (Wexler, 1976).

    Valid ``temperature`` range: 273 K - 374 K.
    """
    wexler1_validate(temperature)
    temperature = as_float(temperature)
    return wexler1_unchecked(temperature)


@logerr
def wexler2_validate(temperature):
    check_range(temperature, 'temperature', 173.0, 274.0)


def wexler2_unchecked(temperature):
    return vp.wexler2_unchecked(temperature)


def wexler2(temperature):
    """
    Saturation vapour pressure over ice (Wexler, 1977).

    Valid ``temperature`` range: 173 K - 274 K.
    """
    wexler2_validate(temperature)
    temperature = as_float(temperature)
    return wexler2_unchecked(temperature)
