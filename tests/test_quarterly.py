"""
Tests for the quarterly trend transform.

Run with: pytest tests/test_quarterly.py -v
"""

import math

import pandas as pd
import pytest

from place_analysis.data.quarterly import (
    EmptySeriesError,
    build_trend,
    distinct_years,
    quarter_comparison,
    quarter_comparison_rows,
    records,
    series_to_frame,
    summary_statistics,
    valid_data,
    with_yoy,
)

from conftest import make_series


def _valid(points):
    return valid_data(series_to_frame(make_series(points)))


class TestValidData:
    """Placeholder quarters are dropped, order is kept."""

    def test_drops_zero_amounts(self, example_series):
        valid = valid_data(series_to_frame(example_series))
        assert list(valid["quarter_label"]) == ["2023 Q1", "2024 Q1"]
        assert list(valid["amount"]) == [100.0, 150.0]

    def test_preserves_input_order(self):
        valid = _valid([(2024, 3, 30), (2023, 1, 10), (2024, 1, 0), (2023, 4, 40)])
        assert list(valid["quarter_label"]) == ["2024 Q3", "2023 Q1", "2023 Q4"]

    def test_empty_input(self):
        valid = _valid([])
        assert valid.empty

    def test_all_placeholders(self):
        assert _valid([(2024, 1, 0), (2024, 2, 0)]).empty


class TestYearOverYear:
    """YoY growth against the same quarter one year earlier."""

    def test_example_growth(self, example_series):
        valid = valid_data(series_to_frame(example_series))
        rows = records(with_yoy(valid))
        assert rows[0]["yoy_growth"] is None
        assert rows[1]["yoy_growth"] == pytest.approx(50.0)

    def test_decline_is_negative(self):
        rows = records(with_yoy(_valid([(2023, 2, 200), (2024, 2, 150)])))
        assert rows[1]["yoy_growth"] == pytest.approx(-25.0)

    def test_no_change_is_zero_not_null(self):
        rows = records(with_yoy(_valid([(2023, 2, 200), (2024, 2, 200)])))
        assert rows[1]["yoy_growth"] == 0.0
        assert rows[1]["yoy_growth"] is not None

    def test_gap_year_has_no_baseline(self):
        rows = records(with_yoy(_valid([(2021, 1, 100), (2023, 1, 150)])))
        assert rows[1]["yoy_growth"] is None

    def test_placeholder_is_not_a_baseline(self):
        rows = records(with_yoy(_valid([(2023, 1, 0), (2024, 1, 150)])))
        assert rows[0]["yoy_growth"] is None

    def test_duplicate_baseline_uses_first_match(self):
        rows = records(with_yoy(_valid([(2023, 1, 100), (2023, 1, 200), (2024, 1, 150)])))
        assert len(rows) == 3
        assert rows[2]["yoy_growth"] == pytest.approx(50.0)

    def test_order_matches_input(self):
        valid = _valid([(2024, 1, 120), (2023, 1, 100), (2024, 2, 90)])
        annotated = with_yoy(valid)
        assert list(annotated["quarter_label"]) == ["2024 Q1", "2023 Q1", "2024 Q2"]
        assert annotated["yoy_growth"].iloc[0] == pytest.approx(20.0)
        assert math.isnan(annotated["yoy_growth"].iloc[1])

    def test_empty_frame_gets_column(self):
        annotated = with_yoy(_valid([]))
        assert "yoy_growth" in annotated.columns
        assert annotated.empty


class TestQuarterComparison:
    """Pivot into Q1..Q4 rows with one column per year."""

    def test_example_pivot(self, example_series):
        valid = valid_data(series_to_frame(example_series))
        rows = quarter_comparison_rows(valid)
        assert rows == [
            {"quarter": "Q1", "2023": 100.0, "2024": 150.0},
            {"quarter": "Q2"},
            {"quarter": "Q3"},
            {"quarter": "Q4"},
        ]

    def test_duplicate_pair_keeps_last(self):
        rows = quarter_comparison_rows(_valid([(2023, 1, 100), (2023, 1, 200), (2024, 1, 150)]))
        assert rows[0] == {"quarter": "Q1", "2023": 200.0, "2024": 150.0}

    def test_always_four_rows(self):
        pivot = quarter_comparison(_valid([]))
        assert list(pivot.index) == ["Q1", "Q2", "Q3", "Q4"]
        assert list(pivot.columns) == []

    def test_columns_sorted_ascending(self):
        pivot = quarter_comparison(_valid([(2024, 1, 1), (2019, 2, 2), (2021, 3, 3)]))
        assert list(pivot.columns) == ["2019", "2021", "2024"]

    def test_missing_pairs_are_absent_not_zero(self):
        pivot = quarter_comparison(_valid([(2023, 1, 100), (2024, 2, 50)]))
        assert pd.isna(pivot.loc["Q1", "2024"])
        assert pd.isna(pivot.loc["Q2", "2023"])
        rows = quarter_comparison_rows(_valid([(2023, 1, 100), (2024, 2, 50)]))
        assert "2024" not in rows[0]

    def test_year_sums_match_valid_data(self):
        points = [
            (2022, 1, 10), (2022, 2, 20), (2022, 4, 5),
            (2023, 1, 12), (2023, 3, 0), (2023, 3, 7),
            (2024, 2, 30),
        ]
        valid = _valid(points)
        pivot = quarter_comparison(valid)
        for year in distinct_years(valid):
            expected = valid.loc[valid["year"] == year, "amount"].sum()
            assert pivot[str(year)].sum() == pytest.approx(expected)

    def test_distinct_years(self):
        assert distinct_years(_valid([(2024, 1, 1), (2023, 1, 1), (2024, 2, 1)])) == [2023, 2024]
        assert distinct_years(_valid([])) == []


class TestSummaryStatistics:
    """Total, average and extremes of the valid quarters."""

    def test_example_summary(self, example_series):
        summary = summary_statistics(valid_data(series_to_frame(example_series)))
        assert summary.total == 250.0
        assert summary.average == 125.0
        assert summary.count == 2
        assert (summary.best.amount, summary.best.label) == (150.0, "2024 Q1")
        assert (summary.worst.amount, summary.worst.label) == (100.0, "2023 Q1")

    def test_ties_take_first(self):
        summary = summary_statistics(_valid([(2023, 1, 100), (2023, 2, 300), (2023, 3, 300), (2023, 4, 100)]))
        assert summary.best.label == "2023 Q2"
        assert summary.worst.label == "2023 Q1"

    def test_bounds(self):
        valid = _valid([(2022, 1, 7.5), (2022, 2, 3.25), (2022, 3, 11), (2022, 4, 9)])
        summary = summary_statistics(valid)
        assert all(summary.best.amount >= a for a in valid["amount"])
        assert all(summary.worst.amount <= a for a in valid["amount"])
        assert summary.average == summary.total / summary.count

    def test_empty_raises(self):
        with pytest.raises(EmptySeriesError):
            summary_statistics(_valid([(2024, 1, 0)]))


class TestBuildTrend:
    def test_bundle(self, example_series):
        trend = build_trend(example_series)
        assert not trend.is_empty
        assert trend.years == [2023, 2024]
        assert len(trend.comparison) == 4
        assert trend.summary.total == 250.0

    def test_empty_series_has_no_summary(self):
        trend = build_trend(make_series([]))
        assert trend.is_empty
        assert trend.summary is None
        assert list(trend.comparison.index) == ["Q1", "Q2", "Q3", "Q4"]
