"""Provides all sgolaykit functions."""

from importlib.metadata import PackageNotFoundError, version

from sgolaykit.gram import (
    generalized_factorial,
    gram_polynomial,
    gram_table,
    normalization_factors,
)
from sgolaykit.params import DerivOrder, EvalOffset, HalfWidth, PolyOrder, SampleOffset
from sgolaykit.sgolay_config import SavGolConfig
from sgolaykit.utils.caching import cached_weight_table
from sgolaykit.utils.validate import SavGolDomainError
from sgolaykit.weights import weight, weight_matrix, weight_vector, window_size

try:
    __version__ = version("sgolaykit")
except PackageNotFoundError:
    pass

__all__ = [
    "DerivOrder",
    "EvalOffset",
    "HalfWidth",
    "PolyOrder",
    "SampleOffset",
    "SavGolConfig",
    "SavGolDomainError",
    "cached_weight_table",
    "generalized_factorial",
    "gram_polynomial",
    "gram_table",
    "normalization_factors",
    "weight",
    "weight_matrix",
    "weight_vector",
    "window_size",
]
