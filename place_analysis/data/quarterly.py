"""
Quarterly trend helpers: placeholder filtering, year-over-year growth, the
per-quarter comparison pivot and headline statistics.

All functions are pure and take / return pandas frames built by
``series_to_frame``. Amounts are float64; a zero amount marks a quarter that
has not been collected yet and is dropped before any computation.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Optional

import numpy as np
import pandas as pd

from place_analysis.types import QuarterlySeries

QUARTERS = [1, 2, 3, 4]
FRAME_COLUMNS = [
    "year",
    "quarter",
    "quarter_label",
    "amount",
    "transaction_count",
    "average_transaction",
    "note",
]


class EmptySeriesError(ValueError):
    """Raised when statistics are requested for a series without valid quarters."""


@dataclass(frozen=True)
class QuarterExtreme:
    amount: float
    label: str


@dataclass(frozen=True)
class QuarterSummary:
    total: float
    average: float
    best: QuarterExtreme
    worst: QuarterExtreme
    count: int


@dataclass
class QuarterlyTrend:
    valid: pd.DataFrame
    with_yoy: pd.DataFrame
    comparison: pd.DataFrame
    years: List[int]
    summary: Optional[QuarterSummary]

    @property
    def is_empty(self) -> bool:
        return self.valid.empty


def series_to_frame(series: QuarterlySeries) -> pd.DataFrame:
    rows = [
        {
            "year": point.year,
            "quarter": point.quarter,
            "quarter_label": point.quarter_label,
            "amount": point.amount,
            "transaction_count": point.transaction_count,
            "average_transaction": point.average_transaction,
            "note": point.note,
        }
        for point in series.data
    ]
    frame = pd.DataFrame(rows, columns=FRAME_COLUMNS)
    frame["year"] = frame["year"].astype("int64")
    frame["quarter"] = frame["quarter"].astype("int64")
    frame["amount"] = pd.to_numeric(frame["amount"], errors="coerce").astype("float64")
    return frame


def valid_data(frame: pd.DataFrame) -> pd.DataFrame:
    """Drop placeholder quarters (amount <= 0 or missing), keeping input order."""
    if frame.empty:
        return frame.reset_index(drop=True)
    amounts = pd.to_numeric(frame["amount"], errors="coerce")
    return frame[amounts > 0].reset_index(drop=True)


def with_yoy(valid: pd.DataFrame) -> pd.DataFrame:
    """
    Annotate each quarter with ``yoy_growth``: percent change against the same
    quarter one year earlier. Quarters without a prior-year baseline get NaN,
    which is not the same as 0% change. When the prior year holds duplicate
    rows for a quarter, the first one in input order is the baseline.
    """
    result = valid.copy()
    if result.empty:
        result["yoy_growth"] = pd.Series(dtype="float64")
        return result

    baseline = (
        result[["year", "quarter", "amount"]]
        .drop_duplicates(subset=["year", "quarter"], keep="first")
        .rename(columns={"amount": "_prev_amount"})
    )
    baseline["year"] = baseline["year"] + 1

    # left merge on unique right keys keeps row count and order
    merged = result.merge(baseline, on=["year", "quarter"], how="left")
    prev = merged["_prev_amount"]
    result["yoy_growth"] = ((merged["amount"] - prev) / prev * 100).to_numpy()
    return result


def distinct_years(valid: pd.DataFrame) -> List[int]:
    if valid.empty:
        return []
    return sorted(int(year) for year in valid["year"].unique())


def quarter_comparison(valid: pd.DataFrame) -> pd.DataFrame:
    """
    Pivot into one row per quarter (Q1..Q4, always all four) and one column per
    year label. Missing (year, quarter) pairs stay NaN. Duplicate pairs keep the
    last value in input order.
    """
    years = [str(year) for year in distinct_years(valid)]
    labels = [f"Q{q}" for q in QUARTERS]
    if valid.empty:
        return pd.DataFrame(index=pd.Index(labels, name="quarter"), columns=years, dtype="float64")

    working = valid[["year", "quarter", "amount"]].drop_duplicates(
        subset=["year", "quarter"], keep="last"
    )
    pivot = working.pivot(index="quarter", columns="year", values="amount")
    pivot = pivot.reindex(index=QUARTERS)
    pivot.columns = [str(col) for col in pivot.columns]
    pivot = pivot.reindex(columns=years)
    pivot.index = pd.Index(labels, name="quarter")
    return pivot.astype("float64")


def quarter_comparison_rows(valid: pd.DataFrame) -> List[Dict[str, Any]]:
    """Comparison rows as dicts; years without data for a quarter are left out."""
    pivot = quarter_comparison(valid)
    rows: List[Dict[str, Any]] = []
    for label, row in pivot.iterrows():
        entry: Dict[str, Any] = {"quarter": label}
        for year, amount in row.items():
            if pd.notna(amount):
                entry[year] = float(amount)
        rows.append(entry)
    return rows


def summary_statistics(valid: pd.DataFrame) -> QuarterSummary:
    if valid.empty:
        raise EmptySeriesError("summary statistics need at least one quarter with data")

    amounts = valid["amount"].astype("float64")
    total = float(amounts.sum())
    count = int(len(amounts))
    # argmax/argmin return the first position on ties
    best_pos = int(np.argmax(amounts.to_numpy()))
    worst_pos = int(np.argmin(amounts.to_numpy()))
    return QuarterSummary(
        total=total,
        average=total / count,
        best=QuarterExtreme(float(amounts.iloc[best_pos]), str(valid["quarter_label"].iloc[best_pos])),
        worst=QuarterExtreme(float(amounts.iloc[worst_pos]), str(valid["quarter_label"].iloc[worst_pos])),
        count=count,
    )


def build_trend(series: QuarterlySeries) -> QuarterlyTrend:
    valid = valid_data(series_to_frame(series))
    return QuarterlyTrend(
        valid=valid,
        with_yoy=with_yoy(valid),
        comparison=quarter_comparison(valid),
        years=distinct_years(valid),
        summary=None if valid.empty else summary_statistics(valid),
    )


def records(frame: pd.DataFrame) -> List[Dict[str, Any]]:
    """Frame rows as plain dicts with NaN replaced by None."""
    cleaned = frame.astype(object).where(frame.notna(), None)
    return cleaned.to_dict(orient="records")
