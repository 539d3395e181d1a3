"""Tests for unit price comparison."""
import pytest

from promo_decoder import compare_unit_prices, unit_price


class TestUnitPrice:

    def test_numbers(self):
        assert unit_price(100, 4) == 25.0

    def test_form_strings(self):
        assert unit_price("59.9", "2") == pytest.approx(29.95)

    @pytest.mark.parametrize("price,quantity", [
        (0, 4), (100, 0), (-5, 2), ("", "2"), (None, 3), ("abc", "1"),
    ])
    def test_incomplete_is_none(self, price, quantity):
        assert unit_price(price, quantity) is None


class TestCompare:

    def test_a_cheaper(self):
        result = compare_unit_prices((100, 4), (60, 2))
        assert result.winner == "A"
        assert result.ratio == pytest.approx(1.2)

    def test_b_cheaper(self):
        result = compare_unit_prices((90, 3), (100, 5))
        assert result.winner == "B"
        assert result.ratio == pytest.approx(1.5)

    def test_equal(self):
        result = compare_unit_prices((50, 2), (100, 4))
        assert result.winner == "Equal"
        assert result.ratio == 1.0

    def test_incomplete(self):
        result = compare_unit_prices((50, 2), ("", ""))
        assert result.winner is None
        assert result.unit_b is None
