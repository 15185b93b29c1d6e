"""Provides :func:`cached_weight_table`."""
from __future__ import annotations

from functools import lru_cache

from sgolaykit.logger import sgolaykit_logger
from sgolaykit.params import DerivOrder, HalfWidth, PolyOrder, coerce_param
from sgolaykit.utils.types import FloatArray
from sgolaykit.weights import weight_matrix

__all__ = ["cached_weight_table"]


@lru_cache(maxsize=256)
def _cached_matrix(half_width: int, poly_order: int, deriv_order: int) -> FloatArray:
    sgolaykit_logger.debug(
        "Weight table cache miss for m=%d n=%d s=%d.",
        half_width,
        poly_order,
        deriv_order,
    )
    table = weight_matrix(half_width, poly_order, deriv_order)
    table.setflags(write=False)
    return table


def cached_weight_table(
    half_width: HalfWidth | int,
    poly_order: PolyOrder | int,
    deriv_order: DerivOrder | int = 0,
) -> FloatArray:
    """Returns a shared, read-only copy of :func:`weight_matrix`.

    Parameters are reduced to plain integers before the lookup, so
    ``HalfWidth(2)`` and ``2`` hit the same entry.

    Args:
        half_width: Half-width ``m`` of the window.
        poly_order: Order ``n`` of the least-squares polynomial.
        deriv_order: Derivative order ``s``. Defaults to ``0``.

    Returns:
        The ``(2m + 1, 2m + 1)`` weight table. The array is not writeable;
        use ``np.array(table)`` for a mutable copy.
    """
    return _cached_matrix(
        coerce_param(HalfWidth, half_width).value,
        coerce_param(PolyOrder, poly_order).value,
        coerce_param(DerivOrder, deriv_order).value,
    )


# Ensure that the lru_cache attributes are preserved.
cached_weight_table.cache_info = _cached_matrix.cache_info
cached_weight_table.cache_clear = _cached_matrix.cache_clear
