"""
Import-time configuration for pyfloccus.

This module resolves the two package-wide switches once, when pyfloccus is
first imported, and exposes the floating-point type every formula and
constant is expressed in.

Switches
--------
PYFLOCCUS_DOUBLE_PRECISION
    Truthy value selects 64-bit floats (``numpy.float64``). Default is
    single precision (``numpy.float32``).
PYFLOCCUS_DEBUG
    Truthy value enables the diagnostic hook in :mod:`pyfloccus.diagnostics`,
    which logs every input error raised by a formula.

Changing the environment after import has no effect: restart the
interpreter to switch precision.
"""

from __future__ import annotations

import os
import logging
import numpy as np
from typing import Any

logger = logging.getLogger(__name__)

__all__ = [
    'DOUBLE_PRECISION',
    'DEBUG',
    'Float',
    'as_float',
    'parse_flag',
]

PRECISION_ENV = 'PYFLOCCUS_DOUBLE_PRECISION'
DEBUG_ENV = 'PYFLOCCUS_DEBUG'

_TRUTHY = {'1', 'true', 'yes', 'on'}
_FALSY = {'0', 'false', 'no', 'off', ''}


def parse_flag(name: str, raw: str | None, default: bool = False) -> bool:
    """
    Interpret the value of an on/off environment switch.

    Parameters
    ----------
    name : str
        Name of the environment variable, used in the warning message.
    raw : str or None
        Raw value read from the environment (None when unset).
    default : bool, optional
        Value used when the switch is unset or unrecognised.

    Returns
    -------
    bool
        Resolved switch state.
    """
    if raw is None:
        return default

    value = raw.strip().lower()
    if value in _TRUTHY:
        return True
    if value in _FALSY:
        return False

    logger.warning(
        f"Unrecognised value {raw!r} for {name}; using default ({default})"
    )
    return default


def _read_flag(name: str) -> bool:
    return parse_flag(name, os.environ.get(name))


DOUBLE_PRECISION: bool = _read_flag(PRECISION_ENV)
DEBUG: bool = _read_flag(DEBUG_ENV)

# Single resolution point for the whole package
Float: type[np.floating] = np.float64 if DOUBLE_PRECISION else np.float32

logger.debug(
    "pyfloccus configured: Float=%s, diagnostics=%s",
    np.dtype(Float).name, DEBUG,
)


def as_float(value: Any) -> Any:
    """
    Convert a scalar or array-like to the configured precision.

    Scalars come back as ``Float`` scalars, everything else as an
    ndarray of dtype ``Float``.
    """
    arr = np.asarray(value, dtype=Float)
    if arr.ndim == 0:
        return arr[()]
    return arr
