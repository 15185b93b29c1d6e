"""Validation utilities for SgolayKit."""

from __future__ import annotations

import math
from numbers import Integral, Real
from typing import Any

__all__ = [
    "SavGolDomainError",
    "as_integer",
    "validate_window_params",
    "validate_offset",
    "validate_gram_args",
    "MAX_POLY_ORDER",
]

#: Highest polynomial order whose weights stay within about 1e-5 in float64.
MAX_POLY_ORDER = 80


class SavGolDomainError(ValueError):
    """Raises when a filter parameter lies outside the domain of the weight formula."""


def as_integer(value: Any, name: str) -> int:
    """Converts an integer-valued number to ``int``.

    Integral floats such as ``2.0`` are accepted. Booleans are rejected even
    though they are ``int`` subclasses.

    Args:
        value: The number to convert.
        name: Parameter name used in error messages.

    Returns:
        The value as a Python ``int``.

    Raises:
        TypeError: If ``value`` is not a real number, or is a ``bool``.
        SavGolDomainError: If ``value`` is a non-integral or non-finite real.
    """
    if isinstance(value, bool) or not isinstance(value, Real):
        raise TypeError(
            f"{name} must be an integer-valued number; got {type(value).__name__}."
        )
    if isinstance(value, Integral):
        return int(value)
    fvalue = float(value)
    if not math.isfinite(fvalue) or not fvalue.is_integer():
        raise SavGolDomainError(f"{name} must be integer-valued; got {value!r}.")
    return int(fvalue)


def validate_window_params(half_width: int, poly_order: int, deriv_order: int) -> None:
    """Checks the cross-parameter constraints of a filter configuration.

    Policy:
      - ``half_width >= 0``
      - ``0 <= poly_order <= 2 * half_width``
      - ``poly_order <= MAX_POLY_ORDER``; the Gram recurrence loses
        float64 precision quickly past it
      - ``0 <= deriv_order <= poly_order``

    Args:
        half_width: Half-width ``m`` of the window.
        poly_order: Order ``n`` of the fitted polynomial.
        deriv_order: Derivative order ``s``.

    Raises:
        SavGolDomainError: If any constraint is violated.
    """
    if half_width < 0:
        raise SavGolDomainError(f"half_width must be >= 0; got {half_width}.")
    if poly_order < 0:
        raise SavGolDomainError(f"poly_order must be >= 0; got {poly_order}.")
    if poly_order > 2 * half_width:
        raise SavGolDomainError(
            f"poly_order must be <= 2 * half_width = {2 * half_width}; got {poly_order}. "
            f"A window of {2 * half_width + 1} samples cannot determine a "
            f"polynomial of order {poly_order}."
        )
    if deriv_order < 0:
        raise SavGolDomainError(f"deriv_order must be >= 0; got {deriv_order}.")
    if deriv_order > poly_order:
        raise SavGolDomainError(
            f"deriv_order must be <= poly_order = {poly_order}; got {deriv_order}."
        )
    if poly_order > MAX_POLY_ORDER:
        raise SavGolDomainError(
            f"poly_order must be <= {MAX_POLY_ORDER}; got {poly_order}. "
            f"Higher orders lose float64 precision in the Gram recurrence."
        )


def validate_offset(name: str, offset: int, half_width: int) -> None:
    """Checks that an offset lies inside the window ``[-half_width, half_width]``.

    Raises:
        SavGolDomainError: If ``|offset| > half_width``.
    """
    if abs(offset) > half_width:
        raise SavGolDomainError(
            f"{name} must lie in [-{half_width}, {half_width}]; got {offset}."
        )


def validate_gram_args(half_width: int, k: int, s: int) -> None:
    """Checks the preconditions of the Gram polynomial recurrence.

    The recurrence divides by ``k * (2m - k + 1)``, which vanishes at
    ``k = 2m + 1``; orders above ``2m`` are rejected outright.

    Raises:
        SavGolDomainError: If ``half_width < 0``, ``k > 2 * half_width`` or ``s < 0``.
    """
    if half_width < 0:
        raise SavGolDomainError(f"half_width must be >= 0; got {half_width}.")
    if k > 2 * half_width:
        raise SavGolDomainError(
            f"Gram polynomial order must be <= 2 * half_width = {2 * half_width}; got {k}."
        )
    if s < 0:
        raise SavGolDomainError(f"derivative order must be >= 0; got {s}.")
