"""
Layout helpers for the Streamlit application (sidebar, hero header, footer).
"""

from __future__ import annotations

from typing import List, Optional

import pandas as pd
import streamlit as st

from place_analysis.types import PlaceAnalysis
from place_analysis.ui.components.gallery import resolve_image

ANALYSIS_TYPE_BADGES = {
    "monthly": "Månedsrapport",
    "comparative": "Sammenligning",
    "event-impact": "Hendelsesanalyse",
    "timeline": "Årsrapport",
    "media": "Medieanalyse",
}


def setup_page() -> None:
    """Set Streamlit page configuration and top-level styling."""
    st.set_page_config(
        page_title="Stedsanalyse",
        layout="wide",
        page_icon=":cityscape:",
    )


def format_date(value: str) -> str:
    """ISO date to the Norwegian dd.mm.yyyy form; unparsable input is returned as-is."""
    parsed = pd.to_datetime(value, errors="coerce")
    if pd.isna(parsed):
        return value
    return parsed.strftime("%d.%m.%Y")


def sidebar_analysis_picker(analysis_ids: List[str], default_id: str) -> Optional[str]:
    st.sidebar.header("Analyser")
    if not analysis_ids:
        st.sidebar.info("Ingen analyser funnet.")
        return None
    index = analysis_ids.index(default_id) if default_id in analysis_ids else 0
    return st.sidebar.selectbox("Velg analyse", analysis_ids, index=index, key="pa_analysis_id")


def render_hero(analysis: PlaceAnalysis) -> None:
    hero = analysis.metadata.hero_image
    source = resolve_image(hero) if hero else None
    if source:
        st.image(source, use_container_width=True)
    badge = ANALYSIS_TYPE_BADGES.get(analysis.analysis_type, analysis.period.label)
    st.caption(badge)
    st.title(analysis.title)
    st.markdown(f"**{analysis.area.display_name}**")


def render_notes(notes: List[str]) -> None:
    if not notes:
        return
    st.markdown("#### Viktige notater")
    st.markdown("\n".join(f"- {note}" for note in notes))


def render_footer(analysis: PlaceAnalysis) -> None:
    sources = ", ".join(analysis.plaace_data.datakilder)
    updated = format_date(analysis.metadata.sist_oppdatert)
    st.divider()
    st.caption(f"Datakilder: {sources} | Oppdatert: {updated}")
