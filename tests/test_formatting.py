"""
Tests for currency, number and percentage formatting.

Run with: pytest tests/test_formatting.py -v
"""

import math

from place_analysis.ui.components.formatting import (
    format_currency,
    format_fixed,
    format_grouped,
    format_number,
    format_percentage,
)

NBSP = "\u00a0"


class TestFormatCurrency:
    def test_billions_one_decimal(self):
        assert format_currency(1_500_000_000) == "1.5B kr"
        assert format_currency(3_250_000_000) == "3.3B kr"

    def test_millions_no_decimals(self):
        assert format_currency(250_000_000) == "250M kr"
        assert format_currency(1_000_000) == "1M kr"

    def test_millions_round_half_away_from_zero(self):
        assert format_currency(2_500_000) == "3M kr"

    def test_small_amounts_use_norwegian_grouping(self):
        assert format_currency(950_000) == f"950{NBSP}000 kr"
        assert format_currency(1234.5) == f"1{NBSP}234,5 kr"
        assert format_currency(42) == "42 kr"

    def test_custom_currency_label(self):
        assert format_currency(2_000_000, currency="NOK") == "2M NOK"

    def test_missing_values(self):
        assert format_currency(None) == "–"
        assert format_currency(math.nan) == "–"


class TestFormatPercentage:
    def test_positive_has_sign(self):
        assert format_percentage(50.0) == "+50.0%"

    def test_zero_counts_as_growth(self):
        assert format_percentage(0) == "+0.0%"

    def test_negative(self):
        assert format_percentage(-3.25) == "-3.3%"
        assert format_percentage(-12.0) == "-12.0%"

    def test_negative_zero_shows_as_zero(self):
        assert format_percentage(-0.0) == "+0.0%"

    def test_null_is_not_applicable(self):
        assert format_percentage(None) == "N/A"
        assert format_percentage(math.nan) == "N/A"


class TestFormatNumber:
    def test_grouping(self):
        assert format_number(62423) == f"62{NBSP}423"
        assert format_number(1234.56, decimals=1) == f"1{NBSP}234,6"

    def test_fixed_has_no_grouping(self):
        assert format_fixed(3250.0) == "3250"
        assert format_fixed(1.25, decimals=1) == "1.3"
        assert format_fixed(None) == "–"

    def test_grouped_strips_trailing_zeros(self):
        assert format_grouped(1000.5) == f"1{NBSP}000,5"
        assert format_grouped(10.0) == "10"

    def test_missing(self):
        assert format_number(None) == "–"
