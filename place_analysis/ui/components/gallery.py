"""
Tabbed screenshot viewer: one tab per screenshot, image plus description.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Sequence

import streamlit as st

from place_analysis.config import PROJECT_ROOT
from place_analysis.types import ScreenshotData

logger = logging.getLogger(__name__)

PUBLIC_DIR = PROJECT_ROOT / "public"


def resolve_image(path: str) -> Optional[str]:
    """Map a site-relative image path (``/images/...``) to a local file or keep URLs."""
    if path.startswith(("http://", "https://")):
        return path
    local = PUBLIC_DIR / path.lstrip("/")
    if local.is_file():
        return str(local)
    fallback = Path(path)
    if fallback.is_file():
        return str(fallback)
    logger.warning("Image not found: %s", path)
    return None


def render_image(shot: ScreenshotData) -> None:
    source = resolve_image(shot.path)
    if source is None:
        st.info(f"Bilde mangler: {shot.filnavn or shot.path}")
    else:
        st.image(source, use_container_width=True)
    if shot.beskrivelse:
        st.caption(shot.beskrivelse)


def render_tabbed_images(screenshots: Sequence[ScreenshotData], title: str = "") -> None:
    if not screenshots:
        return
    if title:
        st.subheader(title)
    tab_labels = [s.beskrivelse or s.filnavn or s.id for s in screenshots]
    for tab, shot in zip(st.tabs(tab_labels), screenshots):
        with tab:
            render_image(shot)
