"""
Formulas for partial vapour pressure of unsaturated air.

Every formula is available in three flavours:

- ``name(...)`` validates the inputs and computes the result,
- ``name_validate(...)`` only checks the inputs against the documented range,
- ``name_unchecked(...)`` only computes, without any input checking.

Inputs and results are in SI units (K, Pa, kg/kg, ratio); empirical
formulas convert internally to the units of the source paper.

References
----------
Buck, A. L., 1981: New Equations for Computing Vapor Pressure and Enhancement
    Factor. J. Appl. Meteor., 20, 1527–1532,
    https://doi.org/10.1175/1520-0450(1981)020<1527:NEFCVP>2.0.CO;2.
Rogers, R. R., and M. K. Yau, 1989: A Short Course in Cloud Physics.
    3rd ed. Pergamon Press.
Tetens, O., 1930: Über einige meteorologische Begriffe.
    Z. Geophys., 6, 297–309.
Wexler, A., 1976: Vapor Pressure Formulation for Water in Range 0 to 100 °C.
    J. Res. Natl. Bur. Stand., 80A, 775–785, https://doi.org/10.6028/jres.080A.071.
Wexler, A., 1977: Vapor Pressure Formulation for Ice.
    J. Res. Natl. Bur. Stand., 81A, 5–20, https://doi.org/10.6028/jres.081A.003.
"""

import numpy as np

from .config import as_float
from .constants import T0, epsilon
from .diagnostics import logerr
from .validation import check_range

__all__ = [
    'definition1',
    'definition2',
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

# Coefficients g_0..g_6 and g_7 (log term) of Wexler (1976), Eq. (15)
_WEXLER1_G = (
    -2991.2729,
    -6017.0128,
    18.87643854,
    -0.028354721,
    0.0000178383,
    -0.00000000084150417,
    0.00000000000044412543,
    2.858487,
)

# Coefficients k_0..k_4 and k_5 (log term) of Wexler (1977), Eq. (2)
_WEXLER2_K = (
    -5865.3696,
    22.241033,
    0.013749042,
    -0.00003403177,
    0.000000026967687,
    0.6918651,
)


# ============================================================================
# Definitions
# ============================================================================

@logerr
def definition1_validate(specific_humidity, pressure):
    check_range(specific_humidity, 'specific_humidity', 0.00001, 2.0)
    check_range(pressure, 'pressure', 100.0, 150_000.0)


def definition1_unchecked(specific_humidity, pressure):
    specific_humidity, pressure = as_float(specific_humidity), as_float(pressure)
    return -((pressure * specific_humidity)
             / ((specific_humidity * (epsilon - 1.0)) - epsilon))


def definition1(specific_humidity, pressure):
    """
    Compute vapour pressure from specific humidity and pressure.

    Theoretical formula, from Rogers & Yau (1989).

    Parameters
    ----------
    specific_humidity : array_like
        Specific humidity [kg/kg], valid range 0.00001 - 2.0
    pressure : array_like
        Air pressure [Pa], valid range 100 - 150000

    Returns
    -------
    array_like
        Vapour pressure [Pa]

    Raises
    ------
    OutOfRangeError
        If an input is out of its valid range.
    """
    definition1_validate(specific_humidity, pressure)
    specific_humidity, pressure = as_float(specific_humidity), as_float(pressure)
    return definition1_unchecked(specific_humidity, pressure)


@logerr
def definition2_validate(saturation_vapour_pressure, relative_humidity):
    check_range(saturation_vapour_pressure, 'saturation_vapour_pressure', 0.0, 50_000.0)
    check_range(relative_humidity, 'relative_humidity', 0.0, 2.0)


def definition2_unchecked(saturation_vapour_pressure, relative_humidity):
    return as_float(saturation_vapour_pressure) * as_float(relative_humidity)


def definition2(saturation_vapour_pressure, relative_humidity):
    """
    Compute vapour pressure from saturation vapour pressure and relative humidity.

    Parameters
    ----------
    saturation_vapour_pressure : array_like
        Saturation vapour pressure [Pa], valid range 0 - 50000
    relative_humidity : array_like
        Relative humidity [ratio], valid range 0.0 - 2.0

    Returns
    -------
    array_like
        Vapour pressure [Pa]
    """
    definition2_validate(saturation_vapour_pressure, relative_humidity)
    saturation_vapour_pressure = as_float(saturation_vapour_pressure)
    relative_humidity = as_float(relative_humidity)
    return definition2_unchecked(saturation_vapour_pressure, relative_humidity)


# ============================================================================
# Buck (1981)
# ============================================================================

@logerr
def buck1_validate(dewpoint, pressure):
    check_range(dewpoint, 'dewpoint', 232.0, 324.0)
    check_range(pressure, 'pressure', 100.0, 150_000.0)


def buck1_unchecked(dewpoint, pressure):
    tc = as_float(dewpoint) - T0        # °C
    p_hpa = as_float(pressure) / 100.0  # hPa

    ew = 6.1121 * np.exp(((18.729 - (tc / 227.3)) * tc) / (tc + 257.87))
    fw = 1.0 + 0.00072 + (p_hpa * (0.0000032 + (0.00000000059 * tc * tc)))

    return ew * fw * 100.0


def buck1(dewpoint, pressure):
    """
    Compute vapour pressure over water from dewpoint and pressure.

    Most accurate of the Buck (1981) formulas for air over water.

    Parameters
    ----------
    dewpoint : array_like
        Dewpoint temperature [K], valid range 232 - 324
    pressure : array_like
        Air pressure [Pa], valid range 100 - 150000

    Returns
    -------
    array_like
        Vapour pressure [Pa]

    Raises
    ------
    OutOfRangeError
        If an input is out of its valid range.

    Examples
    --------
    >>> buck1(300.0, 101325.0)  # 3550.662 (float32) or 3550.6603579471303 (float64)
    """
    buck1_validate(dewpoint, pressure)
    dewpoint, pressure = as_float(dewpoint), as_float(pressure)
    return buck1_unchecked(dewpoint, pressure)


@logerr
def buck2_validate(dewpoint, pressure):
    check_range(dewpoint, 'dewpoint', 193.0, 274.0)
    check_range(pressure, 'pressure', 100.0, 150_000.0)


def buck2_unchecked(dewpoint, pressure):
    tc = as_float(dewpoint) - T0
    p_hpa = as_float(pressure) / 100.0

    ei = 6.1115 * np.exp(((23.036 - (tc / 333.7)) * tc) / (tc + 279.82))
    fi = 1.0 + 0.00022 + (p_hpa * (0.00000383 + (0.00000000064 * tc * tc)))

    return ei * fi * 100.0


def buck2(dewpoint, pressure):
    """
    Compute vapour pressure over ice from dewpoint and pressure.

    Most accurate of the Buck (1981) formulas for air over ice.

    Parameters
    ----------
    dewpoint : array_like
        Dewpoint temperature [K], valid range 193 - 274
    pressure : array_like
        Air pressure [Pa], valid range 100 - 150000

    Returns
    -------
    array_like
        Vapour pressure [Pa]
    """
    buck2_validate(dewpoint, pressure)
    dewpoint, pressure = as_float(dewpoint), as_float(pressure)
    return buck2_unchecked(dewpoint, pressure)


@logerr
def buck3_validate(dewpoint, pressure):
    check_range(dewpoint, 'dewpoint', 253.0, 324.0)
    check_range(pressure, 'pressure', 100.0, 150_000.0)


def buck3_unchecked(dewpoint, pressure):
    p_hpa = as_float(pressure) / 100.0
    fw = 1.0 + 0.0007 + (p_hpa * 0.00000346)
    return buck3_simplified_unchecked(dewpoint) * fw


def buck3(dewpoint, pressure):
    """
    Compute vapour pressure over water from dewpoint and pressure.

    General-purpose Buck (1981) formula for air over water.

    Parameters
    ----------
    dewpoint : array_like
        Dewpoint temperature [K], valid range 253 - 324
    pressure : array_like
        Air pressure [Pa], valid range 100 - 150000

    Returns
    -------
    array_like
        Vapour pressure [Pa]
    """
    buck3_validate(dewpoint, pressure)
    dewpoint, pressure = as_float(dewpoint), as_float(pressure)
    return buck3_unchecked(dewpoint, pressure)


@logerr
def buck3_simplified_validate(dewpoint):
    check_range(dewpoint, 'dewpoint', 253.0, 324.0)


def buck3_simplified_unchecked(dewpoint):
    tc = as_float(dewpoint) - T0
    return 6.1121 * np.exp((17.502 * tc) / (tc + 240.97)) * 100.0


def buck3_simplified(dewpoint):
    """
    Compute vapour pressure over water from dewpoint only.

    :func:`buck3` without the pressure enhancement factor. Very popular
    in meteorological sources.

    Parameters
    ----------
    dewpoint : array_like
        Dewpoint temperature [K], valid range 253 - 324

    Returns
    -------
    array_like
        Vapour pressure [Pa]
    """
    buck3_simplified_validate(dewpoint)
    dewpoint = as_float(dewpoint)
    return buck3_simplified_unchecked(dewpoint)


@logerr
def buck4_validate(dewpoint, pressure):
    check_range(dewpoint, 'dewpoint', 223.0, 274.0)
    check_range(pressure, 'pressure', 100.0, 150_000.0)


def buck4_unchecked(dewpoint, pressure):
    p_hpa = as_float(pressure) / 100.0
    fi = 1.0 + 0.0003 + (p_hpa * 0.00000418)
    return buck4_simplified_unchecked(dewpoint) * fi


def buck4(dewpoint, pressure):
    """
    Compute vapour pressure over ice from dewpoint and pressure.

    General-purpose Buck (1981) formula for air over ice.

    Parameters
    ----------
    dewpoint : array_like
        Dewpoint temperature [K], valid range 223 - 274
    pressure : array_like
        Air pressure [Pa], valid range 100 - 150000

    Returns
    -------
    array_like
        Vapour pressure [Pa]
    """
    buck4_validate(dewpoint, pressure)
    dewpoint, pressure = as_float(dewpoint), as_float(pressure)
    return buck4_unchecked(dewpoint, pressure)


@logerr
def buck4_simplified_validate(dewpoint):
    check_range(dewpoint, 'dewpoint', 223.0, 274.0)


def buck4_simplified_unchecked(dewpoint):
    tc = as_float(dewpoint) - T0
    return 6.1115 * np.exp((22.452 * tc) / (tc + 272.55)) * 100.0


def buck4_simplified(dewpoint):
    """
    Compute vapour pressure over ice from dewpoint only.

    :func:`buck4` without the pressure enhancement factor.

    Parameters
    ----------
    dewpoint : array_like
        Dewpoint temperature [K], valid range 223 - 274

    Returns
    -------
    array_like
        Vapour pressure [Pa]
    """
    buck4_simplified_validate(dewpoint)
    dewpoint = as_float(dewpoint)
    return buck4_simplified_unchecked(dewpoint)


# ============================================================================
# Tetens (1930) and Wexler (1976, 1977)
# ============================================================================

@logerr
def tetens1_validate(dewpoint):
    check_range(dewpoint, 'dewpoint', 273.0, 353.0)


def tetens1_unchecked(dewpoint):
    tc = as_float(dewpoint) - T0
    return 0.61078 * np.exp((17.27 * tc) / (tc + 237.3)) * 1000.0


def tetens1(dewpoint):
    """
    Compute vapour pressure over water from dewpoint (Tetens, 1930).

    Should be used for temperatures above freezing.

    Parameters
    ----------
    dewpoint : array_like
        Dewpoint temperature [K], valid range 273 - 353

    Returns
    -------
    array_like
        Vapour pressure [Pa]
    """
    tetens1_validate(dewpoint)
    dewpoint = as_float(dewpoint)
    return tetens1_unchecked(dewpoint)


@logerr
def wexler1_validate(dewpoint):
    check_range(dewpoint, 'dewpoint', 273.0, 374.0)


def wexler1_unchecked(dewpoint):
    dewpoint = as_float(dewpoint)

    ln_p = _WEXLER1_G[7] * np.log(dewpoint)
    for i in range(7):
        ln_p = ln_p + _WEXLER1_G[i] * dewpoint ** (i - 2)

    return np.exp(ln_p)


def wexler1(dewpoint):
    """
    Compute vapour pressure over water from dewpoint (Wexler, 1976).

    Accurate but computationally expensive.

    Parameters
    ----------
    dewpoint : array_like
        Dewpoint temperature [K], valid range 273 - 374

    Returns
    -------
    array_like
        Vapour pressure [Pa]
    """
    wexler1_validate(dewpoint)
    dewpoint = as_float(dewpoint)
    return wexler1_unchecked(dewpoint)


@logerr
def wexler2_validate(dewpoint):
    check_range(dewpoint, 'dewpoint', 173.0, 274.0)


def wexler2_unchecked(dewpoint):
    dewpoint = as_float(dewpoint)

    ln_p = _WEXLER2_K[5] * np.log(dewpoint)
    for j in range(5):
        ln_p = ln_p + _WEXLER2_K[j] * dewpoint ** (j - 1)

    return np.exp(ln_p)


def wexler2(dewpoint):
    """
    Compute vapour pressure over ice from dewpoint (Wexler, 1977).

    Accurate but computationally expensive.

    Parameters
    ----------
    dewpoint : array_like
        Dewpoint temperature [K], valid range 173 - 274

    Returns
    -------
    array_like
        Vapour pressure [Pa]
    """
    wexler2_validate(dewpoint)
    dewpoint = as_float(dewpoint)
    return wexler2_unchecked(dewpoint)
