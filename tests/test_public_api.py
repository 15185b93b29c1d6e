"""Unit tests for public API."""

from __future__ import annotations

import sgolaykit
from sgolaykit import (
    DerivOrder,
    EvalOffset,
    HalfWidth,
    PolyOrder,
    SampleOffset,
    SavGolConfig,
    weight,
    window_size,
)


def test_public_all_contains_entry_points():
    """Test that __all__ contains the expected public names."""
    expected = {
        "weight",
        "window_size",
        "weight_vector",
        "weight_matrix",
        "cached_weight_table",
        "SavGolConfig",
        "SavGolDomainError",
    }
    assert expected.issubset(set(sgolaykit.__all__))
    for name in sgolaykit.__all__:
        assert hasattr(sgolaykit, name)


def test_top_level_weight_call():
    """Test that the typed entry point works from the top-level package."""
    w = weight(SampleOffset(0), EvalOffset(0), HalfWidth(2), PolyOrder(2), DerivOrder(0))
    assert abs(35 * w - 17) < 1e-10
    assert window_size(HalfWidth(2)) == 5
    assert SavGolConfig(2, 2).window_size == 5
