"""Tests for display formatting helpers."""

import math

import pytest

from tradelog.analytics import format_currency, format_percent


class TestFormatCurrency:
    """Currency strings use a leading sign, thousands separators and 2 decimals."""

    @pytest.mark.parametrize(
        "value,expected",
        [
            (1234.5, "$1,234.50"),
            (-50, "-$50.00"),
            (0, "$0.00"),
            (-0.0, "$0.00"),
            (0.004, "$0.00"),
            (1234567.891, "$1,234,567.89"),
        ],
    )
    def test_format(self, value: float, expected: str):
        assert format_currency(value) == expected

    def test_infinity(self):
        assert format_currency(math.inf) == "$∞"
        assert format_currency(-math.inf) == "-$∞"

    def test_custom_symbol(self):
        assert format_currency(12.3, symbol="€") == "€12.30"


class TestFormatPercent:
    """Percent strings use 2 decimals."""

    @pytest.mark.parametrize(
        "value,expected",
        [(12.5, "12.50%"), (0, "0.00%"), (-0.0, "0.00%"), (-3.456, "-3.46%"), (100, "100.00%")],
    )
    def test_format(self, value: float, expected: str):
        assert format_percent(value) == expected

    def test_infinity(self):
        assert format_percent(math.inf) == "∞%"
