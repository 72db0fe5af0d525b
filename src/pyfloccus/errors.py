"""
Exceptions raised by pyfloccus formulas.

Every formula reports invalid input with a single exception kind,
:class:`OutOfRangeError`, carrying the name of the offending argument.
"""

from __future__ import annotations

__all__ = [
    'InputError',
    'OutOfRangeError',
]


class InputError(ValueError):
    """Base class for errors caused by formula inputs."""


class OutOfRangeError(InputError):
    """
    An argument fell outside the documented valid range of a formula.

    Parameters
    ----------
    name : str
        Name of the offending argument, as it appears in the formula signature.
    value : float, optional
        The offending value (first offending element for array inputs).
    lower, upper : float, optional
        Documented bounds of the argument.
    message : str, optional
        Human-readable explanation. Generated from the other fields when omitted.

    Notes
    -----
    Instances are read-only. Equality compares ``name`` and ``value`` only,
    since the error is a reporting artifact rather than control data.
    """

    def __init__(
        self,
        name: str,
        value: float | None = None,
        lower: float | None = None,
        upper: float | None = None,
        message: str | None = None,
    ) -> None:
        if message is None:
            message = _default_message(name, value, lower, upper)
        super().__init__(message)
        self._name = name
        self._value = None if value is None else float(value)
        self._lower = None if lower is None else float(lower)
        self._upper = None if upper is None else float(upper)
        self._message = message

    @property
    def name(self) -> str:
        """Name of the argument that was out of range."""
        return self._name

    @property
    def value(self) -> float | None:
        return self._value

    @property
    def lower(self) -> float | None:
        return self._lower

    @property
    def upper(self) -> float | None:
        return self._upper

    @property
    def message(self) -> str:
        return self._message

    def __str__(self) -> str:
        return self._message

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._name!r}, value={self._value!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, OutOfRangeError):
            return NotImplemented
        return (self._name, self._value) == (other._name, other._value)

    def __hash__(self) -> int:
        return hash((type(self).__name__, self._name, self._value))

    def __reduce__(self):
        return (
            type(self),
            (self._name, self._value, self._lower, self._upper, self._message),
        )


def _default_message(
    name: str,
    value: float | None,
    lower: float | None,
    upper: float | None,
) -> str:
    if value is None:
        return f"Value of {name} out of a reasonable range."
    if lower is None or upper is None:
        return f"Value of {name} ({value!r}) out of a reasonable range."
    return (
        f"Value of {name} ({value!r}) out of a reasonable range "
        f"[{lower!r}, {upper!r}]."
    )
