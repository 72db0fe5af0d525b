"""
Formulas for equivalent potential temperature.

The temperature a parcel would have if all its water vapour were condensed,
the released latent heat used to warm it, and the parcel then brought
adiabatically to 1000 hPa. Results are in K.

References
----------
Bolton, D., 1980: The Computation of Equivalent Potential Temperature.
    Mon. Wea. Rev., 108, 1046–1053,
    https://doi.org/10.1175/1520-0493(1980)108<1046:TCOEPT>2.0.CO;2.
Bryan, G. H., 2008: On the Computation of Pseudoadiabatic Entropy and
    Equivalent Potential Temperature. Mon. Wea. Rev., 136, 5239–5245,
    https://doi.org/10.1175/2008MWR2593.1.
Paluch, I. R., 1979: The Entrainment Mechanism in Colorado Cumuli.
    J. Atmos. Sci., 36, 2467–2478,
    https://doi.org/10.1175/1520-0469(1979)036<2467:TEMICC>2.0.CO;2.
"""

import numpy as np

from . import mixing_ratio as mr
from . import potential_temperature as pt
from . import relative_humidity as rh
from . import vapour_pressure as vp
from .config import as_float
from .constants import Cp_d, Cp_l, Lv, R_d, R_v, epsilon, kappa, p0
from .diagnostics import logerr
from .validation import check_range

__all__ = [
    'paluch1',
    'bryan1',
    'bolton1',
]


@logerr
def paluch1_validate(temperature, pressure, vapour_pressure):
    check_range(temperature, 'temperature', 253.0, 324.0)
    check_range(pressure, 'pressure', 20_000.0, 150_000.0)
    check_range(vapour_pressure, 'vapour_pressure', 0.0, 10_000.0)


def paluch1_unchecked(temperature, pressure, vapour_pressure):
    temperature = as_float(temperature)
    pressure, vapour_pressure = as_float(pressure), as_float(vapour_pressure)

    mixing_ratio = mr.definition1_unchecked(pressure, vapour_pressure)
    saturation_vapour_pressure = vp.buck1_unchecked(temperature, pressure)
    relative_humidity = rh.definition2_unchecked(vapour_pressure, saturation_vapour_pressure)

    cp_moist = Cp_d + mixing_ratio * Cp_l

    return (
        temperature
        * (p0 / pressure) ** (R_d / cp_moist)
        * relative_humidity ** ((-mixing_ratio * R_v) / cp_moist)
        * np.exp((Lv * mixing_ratio) / (temperature * cp_moist))
    )


def paluch1(temperature, pressure, vapour_pressure):
    """
    Compute equivalent potential temperature following Paluch (1979).

    Saturation vapour pressure comes from
    :func:`pyfloccus.vapour_pressure.buck1`.

    Parameters
    ----------
    temperature : array_like
        Air temperature [K], valid range 253 - 324
    pressure : array_like
        Air pressure [Pa], valid range 20000 - 150000
    vapour_pressure : array_like
        Vapour pressure [Pa], valid range 0 - 10000

    Returns
    -------
    array_like
        Equivalent potential temperature [K]
    """
    paluch1_validate(temperature, pressure, vapour_pressure)
    temperature, pressure, vapour_pressure = (
        as_float(temperature), as_float(pressure), as_float(vapour_pressure)
    )
    return paluch1_unchecked(temperature, pressure, vapour_pressure)


@logerr
def bryan1_validate(temperature, pressure, vapour_pressure):
    check_range(temperature, 'temperature', 253.0, 324.0)
    check_range(pressure, 'pressure', 20_000.0, 150_000.0)
    check_range(vapour_pressure, 'vapour_pressure', 0.0, 10_000.0)


def bryan1_unchecked(temperature, pressure, vapour_pressure):
    temperature = as_float(temperature)
    pressure, vapour_pressure = as_float(pressure), as_float(vapour_pressure)

    potential_temperature = pt.definition1_unchecked(temperature, pressure, vapour_pressure)
    saturation_vapour_pressure = vp.buck3_unchecked(temperature, pressure)
    relative_humidity = rh.definition2_unchecked(vapour_pressure, saturation_vapour_pressure)
    mixing_ratio = mr.definition1_unchecked(pressure, vapour_pressure)

    return (
        potential_temperature
        * relative_humidity ** ((-kappa) * (mixing_ratio / epsilon))
        * np.exp((Lv * mixing_ratio) / (Cp_d * temperature))
    )


def bryan1(temperature, pressure, vapour_pressure):
    """
    Compute equivalent potential temperature following Bryan (2008).

    Saturation vapour pressure comes from
    :func:`pyfloccus.vapour_pressure.buck3`.

    Parameters
    ----------
    temperature : array_like
        Air temperature [K], valid range 253 - 324
    pressure : array_like
        Air pressure [Pa], valid range 20000 - 150000
    vapour_pressure : array_like
        Vapour pressure [Pa], valid range 0 - 10000

    Returns
    -------
    array_like
        Equivalent potential temperature [K]
    """
    bryan1_validate(temperature, pressure, vapour_pressure)
    temperature, pressure, vapour_pressure = (
        as_float(temperature), as_float(pressure), as_float(vapour_pressure)
    )
    return bryan1_unchecked(temperature, pressure, vapour_pressure)


@logerr
def bolton1_validate(pressure, temperature, dewpoint):
    check_range(pressure, 'pressure', 20_000.0, 150_000.0)
    check_range(temperature, 'temperature', 253.0, 324.0)
    check_range(dewpoint, 'dewpoint', 253.0, 324.0)


def bolton1_unchecked(pressure, temperature, dewpoint):
    pressure = as_float(pressure)
    temperature, dewpoint = as_float(temperature), as_float(dewpoint)

    vapour_pressure = vp.buck3_unchecked(dewpoint, pressure)
    mixing_ratio = mr.definition1_unchecked(pressure, vapour_pressure)

    # temperature at the lifting condensation level, Bolton (1980) Eq. (15)
    lcl_temperature = (
        1.0 / ((1.0 / (dewpoint - 56.0)) + (np.log(temperature / dewpoint) / 800.0))
    ) + 56.0

    # Eq. (24)
    theta_dl = (
        temperature
        * (p0 / (pressure - vapour_pressure)) ** kappa
        * (temperature / lcl_temperature) ** (0.28 * mixing_ratio)
    )

    # Eq. (39)
    return theta_dl * np.exp(
        ((3036.0 / lcl_temperature) - 1.78) * mixing_ratio * (1.0 + 0.448 * mixing_ratio)
    )


def bolton1(pressure, temperature, dewpoint):
    """
    Compute equivalent potential temperature following Bolton (1980).

    The most accurate of the Bolton (1980) formulas. Vapour pressure comes
    from :func:`pyfloccus.vapour_pressure.buck3` at dewpoint.

    Parameters
    ----------
    pressure : array_like
        Air pressure [Pa], valid range 20000 - 150000
    temperature : array_like
        Air temperature [K], valid range 253 - 324
    dewpoint : array_like
        Dewpoint temperature [K], valid range 253 - 324

    Returns
    -------
    array_like
        Equivalent potential temperature [K]
    """
    bolton1_validate(pressure, temperature, dewpoint)
    pressure, temperature, dewpoint = (
        as_float(pressure), as_float(temperature), as_float(dewpoint)
    )
    return bolton1_unchecked(pressure, temperature, dewpoint)
