from __future__ import annotations

import pandas as pd
import streamlit as st

from place_analysis.config import CURRENCY_LABEL, DEFAULT_QUARTERLY_SERIES
from place_analysis.data.quarterly import QuarterlyTrend, build_trend
from place_analysis.types import QuarterlySeries
from place_analysis.ui.components.charts import (
    quarter_comparison_chart,
    quarterly_line_chart,
    render_plotly,
)
from place_analysis.ui.components.kpi import KpiCard, render_kpi_cards
from place_analysis.ui.components.tables import render_table
from place_analysis.ui.pages.context import PageContext


def summary_cards(trend: QuarterlyTrend) -> list[KpiCard]:
    summary = trend.summary
    if summary is None:
        return []
    return [
        KpiCard(
            "Total Omsetning",
            summary.total,
            currency=CURRENCY_LABEL,
            caption=f"{summary.count} kvartaler",
        ),
        KpiCard("Gjennomsnitt per Kvartal", summary.average, currency=CURRENCY_LABEL, caption="Snitt"),
        KpiCard("Beste Kvartal", summary.best.amount, currency=CURRENCY_LABEL, caption=summary.best.label),
        KpiCard("Laveste Kvartal", summary.worst.amount, currency=CURRENCY_LABEL, caption=summary.worst.label),
    ]


def yoy_table(trend: QuarterlyTrend) -> pd.DataFrame:
    table = trend.with_yoy[["quarter_label", "amount", "yoy_growth"]].rename(
        columns={"quarter_label": "Kvartal", "amount": "Beløp", "yoy_growth": "YoY Vekst"}
    )
    return table


def _render_empty_state() -> None:
    st.warning(
        "**Ingen data tilgjengelig ennå**\n\n"
        "Vennligst legg til dine kvartalsvise banktransaksjonsdata i "
        f"`data/quarterly/{DEFAULT_QUARTERLY_SERIES}.json`"
    )


def render_series(series: QuarterlySeries) -> None:
    trend = build_trend(series)
    if trend.is_empty:
        _render_empty_state()
        return

    meta = series.metadata
    first, last = trend.years[0], trend.years[-1]

    st.markdown(f"### Utvikling Over Tid ({first}-{last})")
    st.caption("Totale banktransaksjoner per kvartal - tidslinje")
    render_plotly(quarterly_line_chart(trend.with_yoy, currency=CURRENCY_LABEL))

    st.markdown("### Sammenligning av Tilsvarende Kvartaler")
    st.caption("Hvordan presterer Q1 sammenlignet med Q1 tidligere år? Samme for Q2, Q3, Q4")
    render_plotly(quarter_comparison_chart(trend.comparison, trend.years, currency=CURRENCY_LABEL))

    st.markdown("### År-over-År Vekst (YoY %)")
    st.caption("Prosentvis endring sammenlignet med samme kvartal foregående år")
    render_table(
        yoy_table(trend),
        column_config={
            "Beløp": {"type": "currency", "currency": CURRENCY_LABEL},
            "YoY Vekst": {"type": "percent"},
        },
        highlight_cols=["YoY Vekst"],
        export_file_name="kvartalstall.csv",
    )

    st.markdown("### Nøkkelstatistikk")
    render_kpi_cards(summary_cards(trend), columns=4)

    source = f"Kilde: {meta.data_source}" if meta.data_source else ""
    updated = f"Oppdatert: {meta.last_updated}" if meta.last_updated else ""
    footer = " | ".join(part for part in (source, updated) if part)
    if footer:
        st.caption(footer)
    for note in meta.notes:
        st.caption(f"- {note}")


def render(context: PageContext) -> None:
    st.subheader("Kvartalstall")
    if context.quarterly is None:
        _render_empty_state()
        return
    meta = context.quarterly.metadata
    if meta.title:
        st.markdown(f"**{meta.title}** · {meta.area} · {meta.period}")
    render_series(context.quarterly)
