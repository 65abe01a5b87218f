"""
Plotly chart factory functions with consistent styling for the report pages.
"""

from __future__ import annotations

from typing import List, Optional

import pandas as pd
import plotly.graph_objects as go
import streamlit as st

from place_analysis.config import DEFAULT_YEAR_COLOR, SERIES_COLOR, YEAR_COLORS
from place_analysis.ui.components.formatting import format_currency


DEFAULT_TEMPLATE = "plotly_white"
CHART_HEIGHT = 400


def _configure_layout(
    fig: go.Figure,
    title: Optional[str] = None,
    legend_title: Optional[str] = None,
) -> go.Figure:
    fig.update_layout(
        template=DEFAULT_TEMPLATE,
        title=title,
        legend_title=legend_title,
        height=CHART_HEIGHT,
        margin=dict(l=40, r=20, t=60, b=80),
        hoverlabel=dict(bgcolor="rgba(255, 255, 255, 0.95)"),
    )
    fig.update_xaxes(showgrid=False)
    fig.update_yaxes(showgrid=True, gridcolor="#e0e0e0", griddash="dash", zeroline=True)
    return fig


def _currency_ticks(fig: go.Figure, values: pd.Series, currency: str, count: int = 5) -> go.Figure:
    """Replace y tick labels with the compact currency format used in tables."""
    numeric = pd.to_numeric(values, errors="coerce").dropna()
    if numeric.empty:
        return fig
    top = float(numeric.max())
    if top <= 0:
        return fig
    step = top / (count - 1)
    ticks = [step * i for i in range(count)]
    fig.update_yaxes(tickvals=ticks, ticktext=[format_currency(v, currency) for v in ticks])
    return fig


def year_color(year: int) -> str:
    return YEAR_COLORS.get(int(year), DEFAULT_YEAR_COLOR)


def render_plotly(fig: go.Figure) -> None:
    st.plotly_chart(fig, use_container_width=True, config={"displayModeBar": False})


def quarterly_line_chart(
    df: pd.DataFrame,
    currency: str = "kr",
    series_name: str = "Banktransaksjoner",
    title: Optional[str] = None,
) -> go.Figure:
    """Amount per quarter over time, one point per valid quarter in input order."""
    hover = [format_currency(v, currency) for v in df["amount"]]
    fig = go.Figure(
        go.Scatter(
            x=df["quarter_label"],
            y=df["amount"],
            mode="lines+markers",
            name=series_name,
            line=dict(color=SERIES_COLOR, width=3, shape="spline"),
            marker=dict(color=SERIES_COLOR, size=8),
            customdata=hover,
            hovertemplate="%{x}: %{customdata}<extra></extra>",
        )
    )
    fig = _configure_layout(fig, title)
    fig.update_xaxes(tickangle=-45, type="category")
    fig.update_layout(showlegend=True)
    return _currency_ticks(fig, df["amount"], currency)


def quarter_comparison_chart(
    comparison: pd.DataFrame,
    years: List[int],
    currency: str = "kr",
    title: Optional[str] = None,
) -> go.Figure:
    """Grouped bars per quarter with one bar per year (Q1 vs Q1 across years, etc.)."""
    fig = go.Figure()
    for year in years:
        column = str(year)
        values = comparison[column] if column in comparison.columns else pd.Series(dtype="float64")
        fig.add_trace(
            go.Bar(
                x=list(comparison.index),
                y=values,
                name=column,
                marker_color=year_color(year),
                customdata=[format_currency(v, currency) for v in values],
                hovertemplate=f"{column}: %{{customdata}}<extra></extra>",
            )
        )
    fig = _configure_layout(fig, title, legend_title="År")
    fig.update_layout(barmode="group")
    return _currency_ticks(fig, pd.Series(comparison.to_numpy().ravel()), currency)
