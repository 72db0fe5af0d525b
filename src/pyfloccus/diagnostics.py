"""
Optional error logging for formula validators.

When ``PYFLOCCUS_DEBUG`` is enabled at import, every ``*_validate`` function
decorated with :func:`logerr` logs the input error it raises, together with
the formula name and its arguments, before the error reaches the caller.
When disabled, :func:`logerr` returns the function untouched, so the checked
code path is exactly the undecorated one.

Records are emitted at ERROR level on the ``pyfloccus.diagnostics`` logger.
pyfloccus never configures handlers; use ``logging.basicConfig()`` or your
application's logging setup to see them.
"""

from __future__ import annotations

import inspect
import logging
import functools
from typing import Callable, TypeVar

from .config import DEBUG
from .errors import InputError

logger = logging.getLogger(__name__)

__all__ = [
    'logerr',
    'log_errors',
]

F = TypeVar('F', bound=Callable)

_REPORTED_ATTR = '_pyfloccus_reported'


def log_errors(func: F) -> F:
    """
    Wrap ``func`` so that any :class:`InputError` it raises is logged once.

    The error instance is re-raised unchanged. An error that was already
    logged by an inner wrapped validator is not logged again.
    """
    signature = inspect.signature(func)
    formula = f"{func.__module__}.{func.__qualname__}"

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except InputError as err:
            if not getattr(err, _REPORTED_ATTR, False):
                setattr(err, _REPORTED_ATTR, True)
                bound = signature.bind(*args, **kwargs)
                inputs = ', '.join(
                    f"{name}: {value}" for name, value in bound.arguments.items()
                )
                logger.error(
                    "%s(%s) => %r", formula, inputs, err,
                    extra={
                        'formula': formula,
                        'argument': getattr(err, 'name', None),
                        'error_message': str(err),
                    },
                )
            raise

    return wrapper  # type: ignore[return-value]


def _passthrough(func: F) -> F:
    return func


# Resolved once; no per-call switch
logerr: Callable[[F], F] = log_errors if DEBUG else _passthrough
