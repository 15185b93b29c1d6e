"""Role-tagged scalar parameters for the weight functions.

:func:`sgolaykit.weights.weight` takes five integer parameters that are
easy to transpose. Each role gets its own value type so that, e.g., a
:class:`PolyOrder` passed where a :class:`HalfWidth` is expected is
rejected instead of producing plausible but wrong coefficients.

Examples:
=========

>>> from sgolaykit.params import HalfWidth, PolyOrder
>>> HalfWidth(2)
HalfWidth(value=2)
>>> HalfWidth(2) == PolyOrder(2)
False
>>> int(HalfWidth(2.0))
2
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar, TypeVar

from sgolaykit.utils.validate import SavGolDomainError, as_integer

__all__ = [
    "HalfWidth",
    "PolyOrder",
    "DerivOrder",
    "SampleOffset",
    "EvalOffset",
    "coerce_param",
    "require_param",
]

P = TypeVar("P", bound="_ScalarParam")


@dataclass(frozen=True)
class _ScalarParam:
    """Immutable integer value tagged with the role it plays in the formula."""

    value: int

    #: Whether the role forbids negative values on its own.
    non_negative: ClassVar[bool] = True

    def __post_init__(self) -> None:
        name = type(self).__name__
        value = as_integer(self.value, name)
        if self.non_negative and value < 0:
            raise SavGolDomainError(f"{name} must be >= 0; got {value}.")
        object.__setattr__(self, "value", value)

    def __int__(self) -> int:
        return self.value


class HalfWidth(_ScalarParam):
    """Half-width ``m`` of the window; the window holds ``2m + 1`` samples."""


class PolyOrder(_ScalarParam):
    """Order ``n`` of the least-squares polynomial."""


class DerivOrder(_ScalarParam):
    """Derivative order ``s``; ``0`` selects the smoothed value."""


class SampleOffset(_ScalarParam):
    """Offset ``i`` of a sample inside the window."""

    non_negative = False


class EvalOffset(_ScalarParam):
    """Offset ``t`` at which the fitted polynomial is evaluated."""

    non_negative = False


def coerce_param(cls: type[P], value: Any) -> P:
    """Wraps ``value`` in ``cls`` unless it already is one.

    Plain numbers are wrapped. Instances of another role type are rejected
    so that a transposed argument surfaces as an error.

    Args:
        cls: The expected role type.
        value: A plain integer-valued number or an instance of ``cls``.

    Returns:
        An instance of ``cls``.

    Raises:
        TypeError: If ``value`` is a role type other than ``cls``.
    """
    if isinstance(value, cls):
        return value
    if isinstance(value, _ScalarParam):
        raise TypeError(
            f"expected {cls.__name__} or a plain integer; got {value!r}."
        )
    return cls(value)


def require_param(cls: type[P], value: Any, position: str) -> P:
    """Returns ``value`` if it is an instance of ``cls``.

    Raises:
        TypeError: If ``value`` is not an instance of ``cls``.
    """
    if not isinstance(value, cls):
        raise TypeError(
            f"{position} must be a {cls.__name__}; got {value!r}. "
            f"Wrap plain numbers as {cls.__name__}(...)."
        )
    return value
