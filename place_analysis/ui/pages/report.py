from __future__ import annotations

from typing import List, Optional

import pandas as pd
import streamlit as st

from place_analysis.config import CURRENCY_LABEL, REPORT_SECTIONS
from place_analysis.data.screenshots import group_by_category, split_feature_image
from place_analysis.types import KeyMetrics, PlaceAnalysis
from place_analysis.ui.components.formatting import format_fixed
from place_analysis.ui.components.gallery import render_image, render_tabbed_images
from place_analysis.ui.components.kpi import KpiCard, render_kpi_cards
from place_analysis.ui.components.tables import render_table
from place_analysis.ui.layout import format_date, render_footer, render_hero, render_notes
from place_analysis.ui.pages import actors as actors_page
from place_analysis.ui.pages.context import PageContext


def key_metric_cards(metrics: Optional[KeyMetrics], year: int) -> List[KpiCard]:
    """Headline cards; a metric that is missing or zero gets no card."""
    if metrics is None:
        return []
    cards: List[KpiCard] = []
    if metrics.befolkning:
        cards.append(KpiCard("Befolkning", metrics.befolkning, icon="👥", caption="Innbyggere"))
    if metrics.daglig_trafikk:
        cards.append(KpiCard("Daglig trafikk", metrics.daglig_trafikk, icon="🚶", caption="Gjennomsnitt"))
    if metrics.besokende:
        cards.append(KpiCard("Besøkende", metrics.besokende, icon="🌍", caption=f"Totalt {year}"))
    if metrics.handelsomsetning:
        millions = format_fixed(metrics.handelsomsetning / 1_000_000)
        cards.append(
            KpiCard(
                "Handelsomsetning",
                metrics.handelsomsetning,
                value_display=f"{millions} M {CURRENCY_LABEL}",
                icon="💰",
                caption=f"Totalt {year}",
            )
        )
    return cards


def _comparisons_frame(analysis: PlaceAnalysis) -> pd.DataFrame:
    rows = [
        {
            "Sammenlignet med": comp.compare_with.get("name", comp.compare_with.get("id", "")),
            "Nøkkeltall": metric.metric,
            "Grunnlag": metric.baseline,
            "Sammenligning": metric.comparison,
            "Differanse": metric.difference,
            "Differanse %": metric.percentage_difference,
        }
        for comp in analysis.comparisons
        for metric in comp.metrics
    ]
    return pd.DataFrame(rows)


def _render_context_sections(analysis: PlaceAnalysis) -> None:
    if analysis.comparisons:
        st.markdown("### Sammenligninger")
        for comp in analysis.comparisons:
            if comp.summary:
                st.write(comp.summary)
        render_table(
            _comparisons_frame(analysis),
            column_config={
                "Grunnlag": {"type": "number"},
                "Sammenligning": {"type": "number"},
                "Differanse": {"type": "number"},
                "Differanse %": {"type": "percent"},
            },
            highlight_cols=["Differanse %"],
        )

    if analysis.events:
        st.markdown("### Hendelser")
        events = pd.DataFrame(
            [
                {
                    "Dato": format_date(e.date),
                    "Hendelse": e.title,
                    "Type": e.type,
                    "Påvirkning": e.impact_level or "",
                    "Beskrivelse": e.description or "",
                }
                for e in analysis.events
            ]
        )
        render_table(events)

    if analysis.media:
        st.markdown("### Medieomtale")
        for item in analysis.media:
            heading = f"[{item.title}]({item.url})" if item.url else item.title
            st.markdown(f"**{heading}** · {item.source}, {format_date(item.publish_date)}")
            if item.excerpt:
                st.caption(item.excerpt)


def render(context: PageContext) -> None:
    analysis = context.analysis
    render_hero(analysis)

    cards = key_metric_cards(analysis.plaace_data.nokkeldata, analysis.period.year)
    if cards:
        st.markdown("## Nøkkeltall")
        st.caption(f"Viktigste data for {analysis.area.name} i {analysis.period.year}")
        render_kpi_cards(cards, columns=4)

    groups = group_by_category(analysis.plaace_data.screenshots)
    for section in REPORT_SECTIONS:
        shots = groups.get(section.kategori, [])
        feature = None
        if section.feature_image_id:
            feature, shots = split_feature_image(shots, section.feature_image_id)
        if not shots and feature is None:
            continue

        st.markdown(f"## {section.title}")
        if feature is not None:
            render_image(feature)
        render_tabbed_images(shots)
        if section.show_actors and context.actors is not None:
            actors_page.render_overview(context.actors)

    _render_context_sections(analysis)
    render_notes(analysis.metadata.notater)
    render_footer(analysis)
