"""
Input checks shared by all formulas.

Each formula encodes its own bounds in a ``*_validate`` function built from
these helpers. The helpers accept scalars and numpy arrays alike: an array
passes only when every element is valid, and the raised error reports the
first offending element.

Checks run on 64-bit copies of the inputs, before they are narrowed to the
configured precision, so the reported value is the one the caller passed.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike

from .errors import OutOfRangeError

__all__ = [
    'check_range',
    'check_less_than',
    'check_greater_than',
]


def _wide(value: ArrayLike) -> np.ndarray:
    return np.asarray(value, dtype=np.float64)


def _first_offending(arr: np.ndarray, valid: np.ndarray) -> float:
    return float(np.broadcast_to(arr, valid.shape)[~valid].flat[0])


def check_range(value: ArrayLike, name: str, lower: float, upper: float) -> None:
    """
    Check that ``lower <= value <= upper`` holds for every element.

    Parameters
    ----------
    value : array_like
        Argument value(s) as passed by the caller.
    name : str
        Argument name reported in the error.
    lower, upper : float
        Inclusive bounds. NaN never satisfies them.

    Raises
    ------
    OutOfRangeError
        If any element is outside the bounds.
    """
    arr = _wide(value)
    valid = (arr >= lower) & (arr <= upper)
    if not np.all(valid):
        raise OutOfRangeError(
            name,
            value=_first_offending(arr, np.asarray(valid)),
            lower=lower,
            upper=upper,
        )


def check_less_than(
    value: ArrayLike,
    name: str,
    limit: ArrayLike,
    limit_name: str,
) -> None:
    """
    Check that ``value < limit`` holds element-wise.

    Used for rules that tie two arguments together, e.g. vapour pressure
    must stay below total pressure. The error names ``value``'s argument.
    """
    arr = _wide(value)
    valid = np.asarray(arr < _wide(limit))
    if not np.all(valid):
        raise OutOfRangeError(
            name,
            value=_first_offending(arr, valid),
            message=f"{name} must be lower than {limit_name}",
        )


def check_greater_than(
    value: ArrayLike,
    name: str,
    limit: ArrayLike,
    limit_name: str,
) -> None:
    """
    Check that ``value > limit`` holds element-wise.

    ``limit`` is usually derived from the other arguments, e.g. the vapour
    pressure at the given dewpoint, which air pressure must exceed.
    """
    arr = _wide(value)
    valid = np.asarray(arr > _wide(limit))
    if not np.all(valid):
        raise OutOfRangeError(
            name,
            value=_first_offending(arr, valid),
            message=f"{name} must be greater than {limit_name}",
        )
