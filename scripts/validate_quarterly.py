"""Quick validation script for quarterly series files.

Run with `python scripts/validate_quarterly.py [series-name]` to make sure a
series parses, has valid quarters and produces the derived views.
"""

from __future__ import annotations

import sys

from place_analysis.config import DEFAULT_QUARTERLY_SERIES
from place_analysis.data.loader import load_quarterly_series
from place_analysis.data.quarterly import build_trend, records
from place_analysis.ui.components.formatting import format_currency, format_percentage


def main() -> None:
    name = sys.argv[1] if len(sys.argv) > 1 else DEFAULT_QUARTERLY_SERIES
    series = load_quarterly_series(name)
    trend = build_trend(series)

    seen = set()
    duplicates = []
    for point in series.data:
        key = (point.year, point.quarter)
        if key in seen:
            duplicates.append(point.quarter_label)
        seen.add(key)
    if duplicates:
        raise SystemExit(f"Duplicate (year, quarter) entries: {duplicates}")

    if trend.summary is None:
        raise SystemExit(f"No quarters with data in {name} ({len(series.data)} placeholder rows)")

    assert len(trend.comparison) == 4, "Comparison must hold Q1..Q4"

    for row in records(trend.with_yoy):
        print(f"{row['quarter_label']:>8}  {format_currency(row['amount']):>12}  {format_percentage(row['yoy_growth'])}")

    summary = trend.summary
    print(
        "Quarterly validation passed.",
        f"Quarters: {summary.count},",
        f"total {format_currency(summary.total)},",
        f"best {summary.best.label}, worst {summary.worst.label}",
    )


if __name__ == "__main__":
    main()
