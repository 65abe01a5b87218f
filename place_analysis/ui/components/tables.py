"""
Reusable helpers for rendering data tables with consistent configuration.
"""

from __future__ import annotations

from typing import Dict, List, Optional

import pandas as pd
import streamlit as st

from place_analysis.ui.components.formatting import (
    NOT_AVAILABLE,
    format_currency,
    format_number,
    format_percentage,
)

POSITIVE_COLOR = "#16a34a"
NEGATIVE_COLOR = "#dc2626"
NULL_COLOR = "#9ca3af"


def growth_style(val) -> str:
    """CSS colour for a formatted growth cell: green >= 0, red < 0, grey when N/A."""
    if not isinstance(val, str) or val == NOT_AVAILABLE:
        return f"color: {NULL_COLOR};"
    if val.startswith("-"):
        return f"color: {NEGATIVE_COLOR}; font-weight: 600;"
    return f"color: {POSITIVE_COLOR}; font-weight: 600;"


def format_columns(df: pd.DataFrame, column_config: Dict[str, Dict[str, str]]) -> pd.DataFrame:
    formatted_df = df.copy()
    for column, config in column_config.items():
        if column not in formatted_df.columns:
            continue
        fmt_type = config.get("type")
        if fmt_type == "currency":
            currency = config.get("currency", "kr")
            formatted_df[column] = formatted_df[column].apply(
                lambda v: format_currency(v, currency=currency)
            )
        elif fmt_type == "percent":
            formatted_df[column] = formatted_df[column].apply(format_percentage)
        elif fmt_type == "number":
            decimals = int(config.get("decimals", 0))
            formatted_df[column] = formatted_df[column].apply(
                lambda v: format_number(v, decimals=decimals)
            )
    return formatted_df


def render_table(
    df: pd.DataFrame,
    column_config: Optional[Dict[str, Dict[str, str]]] = None,
    height: Optional[int] = None,
    show_index: bool = False,
    export_file_name: Optional[str] = None,
    highlight_cols: Optional[List[str]] = None,
) -> None:
    if df.empty:
        st.info("Ingen data å vise.")
        return

    formatted_df = format_columns(df, column_config) if column_config else df.copy()

    dataframe_obj = formatted_df
    if highlight_cols:
        highlight_cols = [col for col in highlight_cols if col in formatted_df.columns]
        if highlight_cols:
            dataframe_obj = formatted_df.style.map(growth_style, subset=highlight_cols)

    kwargs = {"height": height} if height else {}
    st.dataframe(
        dataframe_obj,
        use_container_width=True,
        hide_index=not show_index,
        **kwargs,
    )

    if export_file_name:
        csv_bytes = df.to_csv(index=show_index).encode("utf-8")
        st.download_button(
            "Last ned CSV",
            data=csv_bytes,
            file_name=export_file_name,
            mime="text/csv",
        )
