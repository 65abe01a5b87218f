from __future__ import annotations

import pandas as pd
import streamlit as st

from place_analysis.config import CURRENCY_LABEL
from place_analysis.types import ActorOverview
from place_analysis.ui.components.tables import render_table
from place_analysis.ui.pages.context import PageContext

ACTOR_COLUMNS = {
    "rank": "#",
    "navn": "Aktør",
    "kategori": "Kategori",
    "adresse": "Adresse",
    "omsetning": "Omsetning",
    "markedsandel": "Markedsandel %",
}


def actors_frame(overview: ActorOverview) -> pd.DataFrame:
    if not overview.actors:
        return pd.DataFrame(columns=list(ACTOR_COLUMNS.values()))
    df = pd.DataFrame(overview.actors)
    if "omsetning" in df.columns:
        df["omsetning"] = pd.to_numeric(df["omsetning"], errors="coerce")
        df = df.sort_values("omsetning", ascending=False, na_position="last", kind="stable")
        df.insert(0, "rank", range(1, len(df) + 1))
    keep = [col for col in ACTOR_COLUMNS if col in df.columns]
    return df[keep].rename(columns=ACTOR_COLUMNS).reset_index(drop=True)


def category_summary(overview: ActorOverview) -> pd.DataFrame:
    """Per-category counts and turnover; precomputed stats win over derived ones."""
    if overview.category_stats:
        return pd.DataFrame(overview.category_stats)
    df = pd.DataFrame(overview.actors)
    if df.empty or "kategori" not in df.columns:
        return pd.DataFrame(columns=["kategori", "antall"])
    grouped = df.groupby("kategori", sort=False)
    summary = grouped.size().reset_index(name="antall")
    if "omsetning" in df.columns:
        turnover = grouped["omsetning"].apply(lambda s: pd.to_numeric(s, errors="coerce").sum())
        summary["omsetning"] = summary["kategori"].map(turnover)
    return summary.sort_values("antall", ascending=False, kind="stable").reset_index(drop=True)


def render_overview(overview: ActorOverview) -> None:
    title = overview.metadata.get("title", "Aktøroversikt")
    st.markdown(f"### {title}")
    if overview.metadata.get("description"):
        st.caption(overview.metadata["description"])

    summary = category_summary(overview)
    render_table(
        summary,
        column_config={"omsetning": {"type": "currency", "currency": CURRENCY_LABEL}},
    )
    render_table(
        actors_frame(overview),
        column_config={
            "Omsetning": {"type": "currency", "currency": CURRENCY_LABEL},
            "Markedsandel %": {"type": "number", "decimals": 1},
        },
        height=420,
        export_file_name="aktorer.csv",
    )


def render(context: PageContext) -> None:
    st.subheader("Aktører")
    if context.actors is None:
        st.info("Ingen aktørdata tilgjengelig for denne analysen.")
        return
    render_overview(context.actors)
