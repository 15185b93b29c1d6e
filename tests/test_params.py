"""Tests for sgolaykit.params."""

from __future__ import annotations

import dataclasses

import numpy as np
import pytest

from sgolaykit.params import (
    DerivOrder,
    EvalOffset,
    HalfWidth,
    PolyOrder,
    SampleOffset,
    coerce_param,
    require_param,
)
from sgolaykit.utils.validate import SavGolDomainError


def test_roles_with_equal_values_are_distinct():
    """Tests that values of different roles never compare equal."""
    assert HalfWidth(2) == HalfWidth(2)
    assert HalfWidth(2) != PolyOrder(2)
    assert SampleOffset(1) != EvalOffset(1)
    assert len({HalfWidth(2), PolyOrder(2), DerivOrder(2)}) == 3


def test_params_are_immutable():
    """Tests that a role value cannot be reassigned."""
    m = HalfWidth(3)
    with pytest.raises(dataclasses.FrozenInstanceError):
        m.value = 4


def test_integral_inputs_are_normalized():
    """Tests that integral floats and NumPy integers become Python ints."""
    assert HalfWidth(2.0).value == 2
    assert isinstance(HalfWidth(np.int64(5)).value, int)
    assert int(PolyOrder(np.float64(3.0))) == 3
    assert repr(DerivOrder(1)) == "DerivOrder(value=1)"


@pytest.mark.parametrize("cls", [HalfWidth, PolyOrder, DerivOrder])
def test_non_negative_roles_reject_negatives(cls):
    """Tests that sizes and orders cannot be negative."""
    with pytest.raises(SavGolDomainError):
        cls(-1)


@pytest.mark.parametrize("cls", [SampleOffset, EvalOffset])
def test_offsets_accept_negatives(cls):
    """Tests that offsets left of the centre are valid on their own."""
    assert cls(-3).value == -3


@pytest.mark.parametrize("bad", [2.5, float("nan"), float("inf")])
def test_non_integral_values_raise_domain_error(bad):
    """Tests that non-integral numbers are rejected."""
    with pytest.raises(SavGolDomainError):
        HalfWidth(bad)


@pytest.mark.parametrize("bad", [True, "2", None, [2]])
def test_non_numbers_raise_type_error(bad):
    """Tests that booleans and non-numbers are rejected."""
    with pytest.raises(TypeError):
        PolyOrder(bad)


def test_coerce_param_wraps_and_passes_through():
    """Tests that coerce_param wraps plain numbers and keeps matching roles."""
    m = HalfWidth(4)
    assert coerce_param(HalfWidth, m) is m
    assert coerce_param(HalfWidth, 4) == m


def test_coerce_param_rejects_other_roles():
    """Tests that coerce_param refuses a value tagged with another role."""
    with pytest.raises(TypeError):
        coerce_param(HalfWidth, PolyOrder(4))


def test_require_param_is_strict():
    """Tests that require_param accepts only the exact role."""
    assert require_param(DerivOrder, DerivOrder(1), "deriv_order") == DerivOrder(1)
    with pytest.raises(TypeError, match="deriv_order must be a DerivOrder"):
        require_param(DerivOrder, 1, "deriv_order")
