"""Tests for the shared money helpers."""

from decimal import Decimal

import pytest
from shared.money import format_price, line_amount, round_cents, to_cents, total_amount, total_quantity


class TestRounding:
    @pytest.mark.parametrize(
        "amount, expected",
        [(0.125, "0.13"), (0.124, "0.12"), (2.675, "2.68"), (-0.125, "-0.13"), (10, "10.00")],
    )
    def test_half_away_from_zero(self, amount, expected):
        assert round_cents(amount) == Decimal(expected)

    def test_to_cents(self):
        assert to_cents(35.5) == 3550


class TestTotals:
    def test_example_cart(self):
        assert total_amount([(10.0, 2), (15.5, 1)]) == 35.5

    def test_empty(self):
        assert total_amount([]) == 0.0
        assert total_quantity([]) == 0

    def test_exact_sum(self):
        # 0.1 * 3 is 0.30000000000000004 in binary floating point
        assert total_amount([(0.1, 3)]) == 0.3

    def test_line_amount_unrounded(self):
        assert line_amount(0.125, 2) == Decimal("0.250")

    def test_total_quantity(self):
        assert total_quantity([2, 1, 4]) == 7


def test_format_price():
    assert format_price(25.99) == "$25.99"
    assert format_price(5) == "$5.00"
