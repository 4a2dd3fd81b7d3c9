"""
Tests for decimal parsing and half-up rounding.
"""

from decimal import Decimal

import numpy as np
import pytest

from shotstats.utils.rounding import round_half_up, round_to_int, to_decimal


class TestToDecimal:
    """Tests for to_decimal()."""

    def test_float_uses_shortest_repr(self):
        assert to_decimal(94.7) == Decimal("94.7")

    def test_numpy_scalars(self):
        assert to_decimal(np.float64(9.5)) == Decimal("9.5")
        assert to_decimal(np.int64(7)) == Decimal(7)

    @pytest.mark.parametrize("value", [None, False, "", "x", float("nan"), [1]])
    def test_unusable(self, value):
        assert to_decimal(value) is None


class TestRounding:
    """Tests for round_half_up() and round_to_int()."""

    @pytest.mark.parametrize("value,digits,expected", [
        (96.65, 1, 96.7),
        (0.125, 2, 0.13),
        (2.5, 0, 3.0),
        (9.44, 1, 9.4),
        (Decimal("94.15"), 1, 94.2),
    ])
    def test_half_up(self, value, digits, expected):
        assert round_half_up(value, digits) == expected

    def test_int(self):
        assert round_to_int(360.5) == 361
        assert round_to_int(Decimal("554.49")) == 554

    @pytest.mark.parametrize("value,digits,expected", [
        (Decimal("1e30"), 1, 1e30),
        (Decimal("9e99"), 1, 9e99),
        (1e27, 3, 1e27),
        (Decimal("123456789012345678901234567890.05"), 1,
         123456789012345678901234567890.1),
    ])
    def test_beyond_default_precision(self, value, digits, expected):
        assert round_half_up(value, digits) == expected

    def test_int_beyond_default_precision(self):
        assert round_to_int(Decimal("1e30")) == 10 ** 30

    @pytest.mark.parametrize("value", ["1e400", Decimal("-1e999"), "9" * 400])
    def test_beyond_float_range_is_absent(self, value):
        assert to_decimal(value) is None
