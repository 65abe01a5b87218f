"""
Utility helpers for formatting numeric values, currency strings, and percentages.

Numbers use Norwegian grouping (non-breaking space between thousands, comma as
decimal mark). Rounding is half away from zero on the exact stored value.
"""

from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Decimal
from typing import Optional

SCALE_FACTORS = [
    (1_000_000_000, "B", 1),
    (1_000_000, "M", 0),
]
GROUP_SEPARATOR = "\u00a0"
DECIMAL_MARK = ","
NOT_AVAILABLE = "N/A"
MISSING = "–"


def _is_missing(value: Optional[float]) -> bool:
    if value is None:
        return True
    try:
        return math.isnan(float(value))
    except (TypeError, ValueError):
        return True


def _round(value: float, decimals: int) -> Decimal:
    quantum = Decimal(1).scaleb(-decimals)
    return Decimal(float(value)).quantize(quantum, rounding=ROUND_HALF_UP)


def _localize(text: str) -> str:
    return text.replace(",", GROUP_SEPARATOR).replace(".", DECIMAL_MARK)


def format_number(value: Optional[float], decimals: int = 0) -> str:
    if _is_missing(value):
        return MISSING
    return _localize(f"{_round(value, decimals):,.{decimals}f}")


def format_grouped(value: Optional[float], max_decimals: int = 3) -> str:
    """Grouped number with up to ``max_decimals`` fraction digits, trailing zeros dropped."""
    if _is_missing(value):
        return MISSING
    text = f"{_round(value, max_decimals):,.{max_decimals}f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return _localize(text)


def format_fixed(value: Optional[float], decimals: int = 0) -> str:
    """Fixed decimals without grouping, e.g. ``3250`` or ``1.5``."""
    if _is_missing(value):
        return MISSING
    return f"{_round(value, decimals):.{decimals}f}"


def format_currency(value: Optional[float], currency: str = "kr") -> str:
    if _is_missing(value):
        return MISSING
    numeric = float(value)
    for factor, suffix, decimals in SCALE_FACTORS:
        if numeric >= factor:
            return f"{format_fixed(numeric / factor, decimals)}{suffix} {currency}"
    return f"{format_grouped(numeric)} {currency}"


def format_percentage(value: Optional[float], decimals: int = 1) -> str:
    if _is_missing(value):
        return NOT_AVAILABLE
    # adding 0.0 turns -0.0 into 0.0
    numeric = float(value) + 0.0
    sign = "+" if numeric >= 0 else ""
    return f"{sign}{_round(numeric, decimals):.{decimals}f}%"
