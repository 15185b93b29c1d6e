"""Tests for SavGolConfig."""

from __future__ import annotations

import numpy as np
import pytest
from numpy.testing import assert_allclose

from sgolaykit.params import DerivOrder, EvalOffset, HalfWidth, PolyOrder, SampleOffset
from sgolaykit.sgolay_config import SavGolConfig
from sgolaykit.utils.validate import SavGolDomainError
from sgolaykit.weights import weight_vector


def test_defaults_and_wrapping():
    """Tests that plain numbers are wrapped in their role types."""
    cfg = SavGolConfig(3, 2)
    assert cfg.half_width == HalfWidth(3)
    assert cfg.poly_order == PolyOrder(2)
    assert cfg.deriv_order == DerivOrder(0)
    assert cfg.eval_offset == EvalOffset(0)
    assert cfg.window_size == 7
    assert repr(cfg) == "SavGolConfig(half_width=3, poly_order=2, deriv_order=0, eval_offset=0)"


def test_offsets_follow_weight_order():
    """Tests that offsets run from -m to m."""
    assert np.array_equal(SavGolConfig(2, 1).offsets(), [-2, -1, 0, 1, 2])


def test_weights_match_array_layer():
    """Tests that the config hands out the same weights as weight_vector."""
    cfg = SavGolConfig(4, 3, deriv_order=1, eval_offset=-2)
    assert_allclose(cfg.weights(), weight_vector(4, 3, 1, -2), rtol=0, atol=0)
    for idx, i in enumerate(cfg.offsets()):
        assert cfg.weight_at(int(i)) == pytest.approx(cfg.weights()[idx])
    assert cfg.weight_at(SampleOffset(0)) == pytest.approx(cfg.weights()[4])


def test_table_row_matches_weights():
    """Tests that the cached table row at the evaluation offset equals the weights."""
    cfg = SavGolConfig(3, 3, deriv_order=2, eval_offset=1)
    assert_allclose(cfg.table()[1 + 3], cfg.weights(), rtol=1e-12, atol=1e-13)


@pytest.mark.parametrize(
    "kwargs",
    [
        {"half_width": 2, "poly_order": 5},
        {"half_width": 60, "poly_order": 90},
        {"half_width": 2, "poly_order": 2, "deriv_order": 3},
        {"half_width": 2, "poly_order": 2, "eval_offset": 3},
        {"half_width": -1, "poly_order": 0},
    ],
)
def test_invalid_config_raises(kwargs):
    """Tests that inconsistent parameters are rejected at construction."""
    with pytest.raises(SavGolDomainError):
        SavGolConfig(**kwargs)


def test_transposed_role_raises():
    """Tests that a role type in the wrong slot is rejected."""
    with pytest.raises(TypeError):
        SavGolConfig(PolyOrder(2), HalfWidth(2))


def test_weight_at_rejects_out_of_window_offset():
    """Tests that samples outside the window are rejected."""
    with pytest.raises(SavGolDomainError):
        SavGolConfig(2, 2).weight_at(3)
