"""Gram polynomials and the generalized factorial.

The Gram polynomials are the discrete orthogonal polynomials over the
``2m + 1`` equally spaced points ``-m, ..., m``. Their derivatives are
generated by the three-term recurrence published by Gorry in:
Peter A. Gorry, *General Least-Squares Smoothing and Differentiation by
the Convolution (Savitzky-Golay) Method*, Anal. Chem. 62, 570-573, 1990

Examples:
=========

The first-order Gram polynomial is ``i / m``::
>>> from sgolaykit.gram import gram_polynomial
>>> gram_polynomial(1, 2, 1, 0)
0.5

Its first derivative is the constant ``1 / m``::
>>> gram_polynomial(-2, 2, 1, 1)
0.5

Orders below zero contribute nothing::
>>> gram_polynomial(1, 2, -1, 0)
0.0
"""

from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike

from sgolaykit.utils.types import FloatArray
from sgolaykit.utils.validate import SavGolDomainError, validate_gram_args

__all__ = [
    "generalized_factorial",
    "gram_polynomial",
    "gram_table",
    "normalization_factors",
]


def generalized_factorial(a: float, b: int) -> float:
    """Computes the falling factorial ``a * (a - 1) * ... * (a - b + 1)``.

    Args:
        a: The leading factor.
        b: The number of factors. ``b == 0`` gives the empty product ``1``.

    Returns:
        The product as a float. Factors that reach zero or below are kept,
        so ``b > a`` yields ``0`` for non-negative integer ``a``.

    Raises:
        SavGolDomainError: If ``b`` is negative.
    """
    if b < 0:
        raise SavGolDomainError(f"number of factors must be >= 0; got {b}.")
    gf = 1.0
    for j in range(b):
        gf *= a - j
    return gf


def gram_table(
    i: ArrayLike,
    half_width: int,
    k_max: int,
    s_max: int,
) -> FloatArray:
    """Tabulates Gram polynomial derivatives for all orders up to ``k_max``.

    The recurrence

    .. math::

        G_k^{(s)}(i) = A_k \\left(i\\,G_{k-1}^{(s)}(i) + s\\,G_{k-1}^{(s-1)}(i)\\right)
            - B_k\\,G_{k-2}^{(s)}(i)

    with ``A_k = (4k - 2) / (k (2m - k + 1))`` and
    ``B_k = (k - 1)(2m + k) / (k (2m - k + 1))`` is filled bottom-up in
    ``k``. The table carries one extra leading row (``k = -1``) and one
    extra leading column (``s = -1``), both zero, so the ``k - 2`` and
    ``s - 1`` terms need no special cases. The recursion depth of the
    naive formulation is therefore replaced by ``O(k_max * s_max)`` work.

    Args:
        i: Offset(s) at which to evaluate. A scalar or an array of any shape.
        half_width: Half-width ``m`` of the window.
        k_max: Highest polynomial order to tabulate. Must satisfy
            ``k_max <= 2 * half_width``.
        s_max: Highest derivative order to tabulate.

    Returns:
        An array of shape ``(k_max + 1, s_max + 1, *np.shape(i))`` whose
        entry ``[k, s]`` is the ``s``-th derivative of the order-``k`` Gram
        polynomial at ``i``.

    Raises:
        SavGolDomainError: If ``k_max > 2 * half_width``, ``k_max < 0``
            or ``s_max < 0``.
    """
    validate_gram_args(half_width, k_max, s_max)
    if k_max < 0:
        raise SavGolDomainError(f"k_max must be >= 0; got {k_max}.")

    x = np.asarray(i, dtype=np.float64)
    m = float(half_width)

    # row r holds order k = r - 1, column c holds derivative s = c - 1
    table = np.zeros((k_max + 2, s_max + 2, *x.shape), dtype=np.float64)
    table[1, 1] = 1.0

    s_factor = np.arange(s_max + 1, dtype=np.float64).reshape(
        (s_max + 1,) + (1,) * x.ndim
    )
    for k in range(1, k_max + 1):
        denom = k * (2.0 * m - k + 1.0)
        a = (4.0 * k - 2.0) / denom
        b = ((k - 1.0) * (2.0 * m + k)) / denom
        table[k + 1, 1:] = (
            a * (x * table[k, 1:] + s_factor * table[k, :-1])
            - b * table[k - 1, 1:]
        )

    return table[1:, 1:]


def gram_polynomial(i: float, half_width: int, k: int, s: int) -> float:
    """Evaluates the ``s``-th derivative of the order-``k`` Gram polynomial.

    Args:
        i: Offset inside the window.
        half_width: Half-width ``m`` of the window.
        k: Polynomial order. Negative orders evaluate to ``0``.
        s: Derivative order.

    Returns:
        The derivative at ``i``, with respect to ``i``.

    Raises:
        SavGolDomainError: If ``k > 2 * half_width`` or ``s < 0``.
    """
    validate_gram_args(half_width, k, s)
    if k < 0:
        return 0.0
    return float(gram_table(i, half_width, k, s)[k, s])


def normalization_factors(half_width: int, poly_order: int) -> FloatArray:
    """Computes the per-order weight factors ``(2k+1) GF(2m, k) / GF(2m+k+1, k+1)``.

    ``GF`` is :func:`generalized_factorial`. The two factorials overflow
    float64 long before their ratio does, so the ratio ``r_k`` is built as
    a running product from ``r_0 = 1 / (2m + 1)`` with

    .. math::

        r_k = r_{k-1} \\frac{2m - k + 1}{2m + k + 1}.

    Args:
        half_width: Half-width ``m`` of the window.
        poly_order: Highest order ``n``; factors for ``k = 0..n`` are returned.

    Returns:
        A float64 array of length ``poly_order + 1``.

    Raises:
        SavGolDomainError: If ``poly_order`` is negative or exceeds ``2 * half_width``.
    """
    validate_gram_args(half_width, poly_order, 0)
    if poly_order < 0:
        raise SavGolDomainError(f"poly_order must be >= 0; got {poly_order}.")

    m2 = 2.0 * half_width
    ratios = np.empty(poly_order + 1, dtype=np.float64)
    ratios[0] = 1.0 / (m2 + 1.0)
    for k in range(1, poly_order + 1):
        ratios[k] = ratios[k - 1] * (m2 - k + 1.0) / (m2 + k + 1.0)
    return (2.0 * np.arange(poly_order + 1) + 1.0) * ratios
