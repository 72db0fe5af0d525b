"""
Helpers for applying formulas to whole arrays.

Every checked formula already accepts numpy arrays. The helpers here add
the shape handling around it: :func:`compute_ndarray` for plain numpy
inputs and :func:`compute_dataarray` for labelled ``xarray.DataArray``
inputs, which keeps coordinates and works lazily on dask-backed arrays.
"""

from __future__ import annotations

import logging
from typing import Any, Callable

import numpy as np
import xarray as xr
from numpy.typing import ArrayLike

from .config import Float

logger = logging.getLogger(__name__)

__all__ = [
    'compute_ndarray',
    'compute_dataarray',
]

# CF-style metadata per computed quantity, keyed by formula module
QUANTITY_ATTRS: dict[str, dict[str, str]] = {
    'vapour_pressure': {
        'standard_name': 'water_vapor_partial_pressure_in_air',
        'long_name': 'vapour pressure',
        'units': 'Pa',
    },
    'saturation_vapour_pressure': {
        'long_name': 'saturation vapour pressure',
        'units': 'Pa',
    },
    'vapour_pressure_deficit': {
        'standard_name': 'water_vapor_saturation_deficit_in_air',
        'long_name': 'vapour pressure deficit',
        'units': 'Pa',
    },
    'mixing_ratio': {
        'standard_name': 'humidity_mixing_ratio',
        'long_name': 'water vapour mixing ratio',
        'units': 'kg kg-1',
    },
    'saturation_mixing_ratio': {
        'long_name': 'saturation mixing ratio',
        'units': 'kg kg-1',
    },
    'specific_humidity': {
        'standard_name': 'specific_humidity',
        'long_name': 'specific humidity',
        'units': 'kg kg-1',
    },
    'relative_humidity': {
        'standard_name': 'relative_humidity',
        'long_name': 'relative humidity',
        'units': '1',
    },
    'virtual_temperature': {
        'standard_name': 'virtual_temperature',
        'long_name': 'virtual temperature',
        'units': 'K',
    },
    'potential_temperature': {
        'standard_name': 'air_potential_temperature',
        'long_name': 'potential temperature',
        'units': 'K',
    },
    'equivalent_potential_temperature': {
        'standard_name': 'air_equivalent_potential_temperature',
        'long_name': 'equivalent potential temperature',
        'units': 'K',
    },
    'wet_bulb_temperature': {
        'standard_name': 'wet_bulb_temperature',
        'long_name': 'wet bulb temperature',
        'units': 'K',
    },
    'wet_bulb_potential_temperature': {
        'standard_name': 'wet_bulb_potential_temperature',
        'long_name': 'wet bulb potential temperature',
        'units': 'K',
    },
}


def _quantity_of(formula: Callable) -> str:
    return formula.__module__.rsplit('.', 1)[-1]


def compute_ndarray(formula: Callable[..., Any], *arrays: ArrayLike) -> np.ndarray:
    """
    Apply a checked formula element-wise to numpy arrays.

    Inputs are broadcast against each other first. The whole input is
    validated before any result is computed, so either every element is
    returned or the first offending element is reported.

    Parameters
    ----------
    formula : callable
        A checked formula, e.g. ``pyfloccus.vapour_pressure.buck3``.
    *arrays : array_like
        One array per formula argument, in signature order.

    Returns
    -------
    np.ndarray
        Result of dtype :data:`pyfloccus.config.Float`, with the broadcast shape.

    Raises
    ------
    ValueError
        If the input shapes cannot be broadcast together.
    OutOfRangeError
        If any element is out of the formula's valid range.

    Examples
    --------
    >>> from pyfloccus import vapour_pressure
    >>> t = np.full((4, 3), 300.0)
    >>> compute_ndarray(vapour_pressure.buck3, t, 101325.0).shape
    (4, 3)
    """
    if not arrays:
        raise ValueError("At least one input array is required")

    converted = [np.asarray(a) for a in arrays]
    try:
        broadcast = np.broadcast_arrays(*converted)
    except ValueError as err:
        shapes = ', '.join(str(a.shape) for a in converted)
        raise ValueError(
            f"Input shapes {shapes} are not compatible for {formula.__name__}"
        ) from err

    result = formula(*broadcast)
    return np.asarray(result, dtype=Float)


def compute_dataarray(
    formula: Callable[..., Any],
    *arrays: xr.DataArray | ArrayLike,
    name: str | None = None,
    attrs: dict[str, Any] | None = None,
) -> xr.DataArray:
    """
    Apply a checked formula to xarray DataArrays.

    Dimensions are broadcast by name and index coordinates must match
    exactly; plain scalars are accepted alongside DataArrays. Dask-backed
    inputs stay lazy and each chunk is validated when it is computed.

    Parameters
    ----------
    formula : callable
        A checked formula, e.g. ``pyfloccus.relative_humidity.buck3``.
    *arrays : xr.DataArray or array_like
        One input per formula argument, in signature order.
    name : str, optional
        Name of the result. Defaults to the computed quantity, e.g.
        ``'vapour_pressure'``.
    attrs : dict, optional
        Extra attributes, applied on top of the quantity's CF metadata.

    Returns
    -------
    xr.DataArray
        Result of dtype :data:`pyfloccus.config.Float`.

    Raises
    ------
    TypeError
        If none of the inputs is a DataArray.
    ValueError
        If the inputs share a dimension with different sizes or
        different coordinate labels.
    OutOfRangeError
        If any element is out of the formula's valid range.
    """
    if not any(isinstance(a, xr.DataArray) for a in arrays):
        raise TypeError("At least one input must be an xarray.DataArray")

    quantity = _quantity_of(formula)

    result = xr.apply_ufunc(
        formula,
        *arrays,
        dask='parallelized',
        output_dtypes=[Float],
        keep_attrs=False,
    )

    result = result.astype(Float, copy=False)
    result.name = name if name is not None else quantity

    result.attrs.update(QUANTITY_ATTRS.get(quantity, {}))
    result.attrs['formula'] = f"{quantity}.{formula.__name__}"
    if attrs:
        result.attrs.update(attrs)

    logger.debug(f"Computed {result.attrs['formula']} on shape {result.shape}")
    return result
