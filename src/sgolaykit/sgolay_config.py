"""Configuration for a Savitzky-Golay filter.

This config fixes the window, fit order, derivative order and evaluation
offset once, validates them together, and hands out the matching
convolution weights.
"""

from __future__ import annotations

import numpy as np

from sgolaykit.params import (
    DerivOrder,
    EvalOffset,
    HalfWidth,
    PolyOrder,
    SampleOffset,
    coerce_param,
)
from sgolaykit.utils.caching import cached_weight_table
from sgolaykit.utils.types import FloatArray
from sgolaykit.utils.validate import validate_offset, validate_window_params
from sgolaykit.weights import weight, weight_vector, window_size


class SavGolConfig:
    """Configuration for a Savitzky-Golay filter.

    This config fixes the window, fit order, derivative order and
    evaluation offset once, validates them together, and hands out the
    matching convolution weights.
    """

    def __init__(
        self,
        half_width: HalfWidth | int,
        poly_order: PolyOrder | int,
        deriv_order: DerivOrder | int = 0,
        eval_offset: EvalOffset | int = 0,
    ):
        """Initialize configuration.

        Args:
            half_width:
                Number of samples on each side of the window centre. The
                window holds ``2 * half_width + 1`` samples.

            poly_order:
                Order of the polynomial fitted to the window. Must not
                exceed ``2 * half_width``; at that bound the fit passes
                through every sample and smoothing does nothing.

            deriv_order:
                Derivative of the fitted polynomial to return. ``0``
                smooths, ``1`` estimates the slope, and so on. Must not
                exceed ``poly_order``. Derivatives are per sample; divide
                the filtered output by ``spacing ** deriv_order`` for
                physical units.

            eval_offset:
                Offset from the window centre at which the fit is
                evaluated. ``0`` gives the usual centred filter; non-zero
                offsets serve the first and last ``half_width`` samples of
                a signal.

        Raises:
            TypeError: If a role type is passed for the wrong parameter.
            SavGolDomainError: If the parameters are inconsistent.
        """
        self.half_width = coerce_param(HalfWidth, half_width)
        self.poly_order = coerce_param(PolyOrder, poly_order)
        self.deriv_order = coerce_param(DerivOrder, deriv_order)
        self.eval_offset = coerce_param(EvalOffset, eval_offset)

        validate_window_params(
            self.half_width.value, self.poly_order.value, self.deriv_order.value
        )
        validate_offset("eval_offset", self.eval_offset.value, self.half_width.value)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(half_width={self.half_width.value}, "
            f"poly_order={self.poly_order.value}, "
            f"deriv_order={self.deriv_order.value}, "
            f"eval_offset={self.eval_offset.value})"
        )

    @property
    def window_size(self) -> int:
        """Number of samples in the window."""
        return window_size(self.half_width)

    def offsets(self) -> np.ndarray:
        """Returns the sample offsets ``-m, ..., m`` in weight order."""
        m = self.half_width.value
        return np.arange(-m, m + 1)

    def weight_at(self, sample_offset: SampleOffset | int) -> float:
        """Returns the weight of the sample at ``sample_offset``."""
        return weight(
            coerce_param(SampleOffset, sample_offset),
            self.eval_offset,
            self.half_width,
            self.poly_order,
            self.deriv_order,
        )

    def weights(self, n_workers: int | None = None) -> FloatArray:
        """Returns the coefficient array, one weight per offset in :meth:`offsets`."""
        return weight_vector(
            self.half_width,
            self.poly_order,
            self.deriv_order,
            self.eval_offset,
            n_workers=n_workers,
        )

    def table(self) -> FloatArray:
        """Returns the cached, read-only weights for every evaluation offset."""
        return cached_weight_table(self.half_width, self.poly_order, self.deriv_order)
