import place_analysis.bootstrap_env  # must be first to set env/secrets
import os

import streamlit as st

from place_analysis.config import DEFAULT_ANALYSIS_ID, DEFAULT_QUARTERLY_SERIES, TABS
from place_analysis.data.loader import (
    clear_cache,
    find_quarterly_series,
    list_analyses,
    load_actor_overview,
    load_analysis,
)
from place_analysis.ui.layout import setup_page, sidebar_analysis_picker
from place_analysis.ui.pages import actors, quarterly, report
from place_analysis.ui.pages.context import PageContext

PAGE_RENDERERS = {
    "report": report.render,
    "quarterly": quarterly.render,
    "actors": actors.render,
}


def main() -> None:
    setup_page()

    if st.sidebar.button("🔄 Oppdater data"):
        clear_cache()

    default_id = os.getenv("DEFAULT_ANALYSIS_ID", DEFAULT_ANALYSIS_ID)
    analysis_id = sidebar_analysis_picker(list_analyses(), default_id)
    if analysis_id is None:
        st.warning("Ingen analyser tilgjengelig. Legg JSON-filer i data/analyses/.")
        return

    analysis = load_analysis(analysis_id)
    if analysis is None:
        st.error(f"Fant ikke analysen «{analysis_id}».")
        return

    context = PageContext(
        analysis=analysis,
        quarterly=find_quarterly_series(os.getenv("QUARTERLY_SERIES", DEFAULT_QUARTERLY_SERIES)),
        actors=load_actor_overview(analysis_id),
    )

    tab_labels = [tab.label for tab in TABS]
    streamlit_tabs = st.tabs(tab_labels)

    for streamlit_tab, tab_config in zip(streamlit_tabs, TABS):
        renderer = PAGE_RENDERERS.get(tab_config.key)
        if renderer is None:
            continue
        with streamlit_tab:
            renderer(context)


if __name__ == "__main__":
    main()
