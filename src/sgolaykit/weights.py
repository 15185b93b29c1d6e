"""Savitzky-Golay convolution weights from Gram polynomials.

The weight applied to the sample at offset ``i`` when estimating the
``s``-th derivative at offset ``t`` of a degree-``n`` least-squares fit
over ``2m + 1`` samples is

.. math::

    h_{t}^{n,s}(i) = \\sum_{k=0}^{n} (2k + 1)
        \\frac{(2m)^{(k)}}{(2m + k + 1)^{(k + 1)}}
        G_k^{(0)}(i)\\, G_k^{(s)}(t),

where :math:`a^{(b)}` is the generalized factorial and :math:`G_k^{(s)}`
the ``s``-th derivative of the order-``k`` Gram polynomial. Derivatives
are taken with respect to the sample index; divide by ``h**s`` for a
sample spacing ``h``.

Examples:
=========

Centred 5-point quadratic smoothing::
>>> import numpy as np
>>> from sgolaykit.weights import weight_vector
>>> np.round(35 * weight_vector(2, 2), 10)
array([-3., 12., 17., 12., -3.])

A single coefficient through the strongly typed entry point::
>>> from sgolaykit.params import DerivOrder, EvalOffset, HalfWidth, PolyOrder, SampleOffset
>>> w = weight(SampleOffset(-2), EvalOffset(0), HalfWidth(2), PolyOrder(2), DerivOrder(1))
>>> round(10 * w, 10)
-2.0
"""

from __future__ import annotations

import numpy as np

from sgolaykit.gram import gram_table, normalization_factors
from sgolaykit.logger import sgolaykit_logger
from sgolaykit.params import (
    DerivOrder,
    EvalOffset,
    HalfWidth,
    PolyOrder,
    SampleOffset,
    coerce_param,
    require_param,
)
from sgolaykit.utils.concurrency import parallel_execute, resolve_workers
from sgolaykit.utils.types import FloatArray
from sgolaykit.utils.validate import validate_offset, validate_window_params

__all__ = [
    "ACCURATE_POLY_ORDER",
    "WEIGHT_SUM_TOLERANCE",
    "window_size",
    "weight",
    "weight_vector",
    "weight_matrix",
]


#: Polynomial orders above this log a precision warning.
ACCURATE_POLY_ORDER = 60

#: Largest tolerated miss of the weight sum (1 for smoothing, 0 for derivatives).
WEIGHT_SUM_TOLERANCE = 1e-8


def window_size(half_width: HalfWidth | int) -> int:
    """Returns the number of samples ``2m + 1`` in a window of half-width ``m``.

    Args:
        half_width: Half-width ``m`` as a :class:`HalfWidth` or plain integer.

    Returns:
        The window length.

    Raises:
        TypeError: If another role type is passed.
        SavGolDomainError: If ``half_width`` is negative or non-integral.
    """
    m = coerce_param(HalfWidth, half_width)
    return 2 * m.value + 1


def _check_window(half_width: int, poly_order: int, deriv_order: int) -> None:
    """Validates a window configuration and warns about high polynomial orders."""
    validate_window_params(half_width, poly_order, deriv_order)
    if poly_order > ACCURATE_POLY_ORDER:
        sgolaykit_logger.warning(
            "poly_order=%d exceeds %d; the Gram recurrence loses float64 "
            "precision and weights may be off by 1e-8 or more.",
            poly_order,
            ACCURATE_POLY_ORDER,
        )


def _check_weight_sum(
    weights: FloatArray,
    half_width: int,
    poly_order: int,
    deriv_order: int,
) -> None:
    """Warns when weights miss the sum a constant signal requires.

    A constant maps to itself (sum 1) under smoothing and to zero under
    any derivative. The check runs along the last axis, so it covers a
    single weight vector or every row of a weight matrix.
    """
    expected = 1.0 if deriv_order == 0 else 0.0
    sums = np.sum(weights, axis=-1)
    scale = max(1.0, float(np.max(np.sum(np.abs(weights), axis=-1))))
    miss = float(np.max(np.abs(sums - expected))) / scale
    if miss > WEIGHT_SUM_TOLERANCE:
        sgolaykit_logger.warning(
            "Weights for half_width=%d, poly_order=%d, deriv_order=%d miss their "
            "sum by %.2e; float64 precision is exhausted at this order.",
            half_width,
            poly_order,
            deriv_order,
            miss,
        )


def _eval_terms(t: int, half_width: int, poly_order: int, deriv_order: int) -> FloatArray:
    """Returns the evaluation-side factors ``c_k G_k^{(s)}(t)`` for ``k = 0..n``."""
    factors = normalization_factors(half_width, poly_order)
    return factors * gram_table(t, half_width, poly_order, deriv_order)[:, deriv_order]


def _weight_at(i: int, half_width: int, poly_order: int, eval_terms: FloatArray) -> float:
    """Evaluates one weight against precomputed evaluation-side terms."""
    # sample side is the basis (s = 0); the evaluation side carries s
    basis = gram_table(i, half_width, poly_order, 0)[:, 0]
    return float(np.dot(eval_terms, basis))


def weight(
    sample_offset: SampleOffset,
    eval_offset: EvalOffset,
    half_width: HalfWidth,
    poly_order: PolyOrder,
    deriv_order: DerivOrder,
) -> float:
    """Computes a single Savitzky-Golay convolution weight.

    Every argument must be wrapped in its role type, so transposed
    arguments fail loudly instead of returning a plausible wrong number.

    Args:
        sample_offset: Offset ``i`` of the sample the weight multiplies.
        eval_offset: Offset ``t`` at which the fit is evaluated.
        half_width: Half-width ``m`` of the window.
        poly_order: Order ``n`` of the least-squares polynomial.
        deriv_order: Derivative order ``s``; ``0`` smooths.

    Returns:
        The weight. It may be positive, negative or zero.

    Raises:
        TypeError: If an argument is not of its role type.
        SavGolDomainError: If ``n > 2m``, ``n > MAX_POLY_ORDER``, ``s > n``,
            ``|i| > m`` or ``|t| > m``.
    """
    i = require_param(SampleOffset, sample_offset, "sample_offset").value
    t = require_param(EvalOffset, eval_offset, "eval_offset").value
    m = require_param(HalfWidth, half_width, "half_width").value
    n = require_param(PolyOrder, poly_order, "poly_order").value
    s = require_param(DerivOrder, deriv_order, "deriv_order").value

    _check_window(m, n, s)
    validate_offset("sample_offset", i, m)
    validate_offset("eval_offset", t, m)
    return _weight_at(i, m, n, _eval_terms(t, m, n, s))


def weight_vector(
    half_width: HalfWidth | int,
    poly_order: PolyOrder | int,
    deriv_order: DerivOrder | int = 0,
    eval_offset: EvalOffset | int = 0,
    *,
    n_workers: int | None = None,
) -> FloatArray:
    """Builds the full coefficient array for one evaluation offset.

    Entry ``i + m`` holds the weight of the sample at offset ``i``, so the
    estimate is ``np.dot(weights, window)`` for a window ordered from
    offset ``-m`` to ``m``. The evaluation-side terms are computed once and
    shared by every offset.

    Args:
        half_width: Half-width ``m`` of the window.
        poly_order: Order ``n`` of the least-squares polynomial.
        deriv_order: Derivative order ``s``. Defaults to ``0``.
        eval_offset: Offset ``t`` at which the fit is evaluated. Defaults
            to the window centre.
        n_workers: Number of threads computing the weights. ``None`` defers
            to :func:`sgolaykit.utils.concurrency.set_workers` and
            :func:`sgolaykit.utils.concurrency.set_default_workers`.

    Returns:
        A float64 array of length ``2m + 1``.

    Raises:
        TypeError: If a role type is passed in the wrong position.
        SavGolDomainError: If the parameters are outside the formula's domain.
    """
    m = coerce_param(HalfWidth, half_width).value
    n = coerce_param(PolyOrder, poly_order).value
    s = coerce_param(DerivOrder, deriv_order).value
    t = coerce_param(EvalOffset, eval_offset).value

    _check_window(m, n, s)
    validate_offset("eval_offset", t, m)

    size = 2 * m + 1
    workers = resolve_workers(n_workers, size)
    sgolaykit_logger.debug(
        "Building weights m=%d n=%d s=%d t=%d with %d worker(s).", m, n, s, t, workers
    )
    terms = _eval_terms(t, m, n, s)
    values = parallel_execute(
        _weight_at,
        [(i, m, n, terms) for i in range(-m, m + 1)],
        n_workers=workers,
    )
    weights = np.asarray(values, dtype=np.float64)
    _check_weight_sum(weights, m, n, s)
    return weights


def weight_matrix(
    half_width: HalfWidth | int,
    poly_order: PolyOrder | int,
    deriv_order: DerivOrder | int = 0,
) -> FloatArray:
    """Builds the weights for every evaluation offset in the window.

    Row ``t + m`` equals :func:`weight_vector` for ``eval_offset=t``. The
    centre row is the ordinary convolution filter; the remaining rows are
    the off-centre fits used near the ends of a signal.

    Args:
        half_width: Half-width ``m`` of the window.
        poly_order: Order ``n`` of the least-squares polynomial.
        deriv_order: Derivative order ``s``. Defaults to ``0``.

    Returns:
        A float64 array of shape ``(2m + 1, 2m + 1)`` indexed ``[t + m, i + m]``.

    Raises:
        TypeError: If a role type is passed in the wrong position.
        SavGolDomainError: If the parameters are outside the formula's domain.
    """
    m = coerce_param(HalfWidth, half_width).value
    n = coerce_param(PolyOrder, poly_order).value
    s = coerce_param(DerivOrder, deriv_order).value
    _check_window(m, n, s)

    factors = normalization_factors(m, n)
    offsets = np.arange(-m, m + 1, dtype=np.float64)
    table = gram_table(offsets, m, n, s)
    basis = table[:, 0, :]
    deriv = table[:, s, :]
    matrix = (deriv.T * factors) @ basis
    _check_weight_sum(matrix, m, n, s)
    return matrix
