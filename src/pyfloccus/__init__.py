"""
pyfloccus - Formulae for air thermodynamic calculations

A collection of formulas for humidity, vapour pressure and temperature
quantities of moist air. Each quantity has its own module, and each formula
is exposed as a checked function plus its ``_validate`` and ``_unchecked``
parts.

Example
-------
>>> import pyfloccus
>>> pyfloccus.vapour_pressure.buck3(300.0, 101325.0)    # dewpoint [K], pressure [Pa]
>>> pyfloccus.relative_humidity.buck3(300.0, 290.0, 101325.0)
>>> pyfloccus.Float                                     # numpy.float32 unless
...                                                     # PYFLOCCUS_DOUBLE_PRECISION=1
"""

from . import (
    array_compute,
    equivalent_potential_temperature,
    mixing_ratio,
    potential_temperature,
    relative_humidity,
    saturation_mixing_ratio,
    saturation_vapour_pressure,
    specific_humidity,
    vapour_pressure,
    vapour_pressure_deficit,
    virtual_temperature,
    wet_bulb_potential_temperature,
    wet_bulb_temperature,
)
from .array_compute import compute_dataarray, compute_ndarray
from .config import DEBUG, DOUBLE_PRECISION, Float
from .errors import InputError, OutOfRangeError

__version__ = '0.1.0'

__all__ = [
    'Float',
    'DOUBLE_PRECISION',
    'DEBUG',
    'InputError',
    'OutOfRangeError',
    'compute_ndarray',
    'compute_dataarray',
    'array_compute',
    'equivalent_potential_temperature',
    'mixing_ratio',
    'potential_temperature',
    'relative_humidity',
    'saturation_mixing_ratio',
    'saturation_vapour_pressure',
    'specific_humidity',
    'vapour_pressure',
    'vapour_pressure_deficit',
    'virtual_temperature',
    'wet_bulb_potential_temperature',
    'wet_bulb_temperature',
]
