import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, List, Optional

import streamlit as st
from streamlit.errors import StreamlitAPIException

from place_analysis.config import DEFAULT_DATA_DIR
from place_analysis.types import ActorOverview, PlaceAnalysis, QuarterlySeries

logger = logging.getLogger(__name__)

ANALYSES_DIR = "analyses"
ACTORS_DIR = "aktorer"
QUARTERLY_DIR = "quarterly"


def _get_secret(name: str, default: Optional[str] = None) -> Optional[str]:
    """Try env first, then st.secrets (if available)."""
    val = os.getenv(name)
    if val:
        return val
    try:
        sec = getattr(st, "secrets", None)
        if sec and name in sec:
            return str(sec[name])
    except (FileNotFoundError, StreamlitAPIException):
        pass
    return default


def data_dir() -> Path:
    configured = _get_secret("PLACE_DATA_DIR")
    root = Path(configured) if configured else DEFAULT_DATA_DIR
    if not root.is_dir():
        raise RuntimeError(
            f"Data directory not found: {root}. Set PLACE_DATA_DIR (env or secrets) "
            "to the folder holding analyses/, aktorer/ and quarterly/."
        )
    return root


@st.cache_data(show_spinner=False)
def _read_json_impl(path: str, mtime: float) -> Dict[str, Any]:
    """Parse a JSON document. Cached by path and modification time."""
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


def _read_json(path: Path) -> Dict[str, Any]:
    return _read_json_impl(str(path), path.stat().st_mtime)


def clear_cache() -> None:
    _read_json_impl.clear()  # type: ignore[attr-defined]


def list_analyses() -> List[str]:
    folder = data_dir() / ANALYSES_DIR
    if not folder.is_dir():
        return []
    return sorted(p.stem for p in folder.glob("*.json"))


def load_analysis(analysis_id: str) -> Optional[PlaceAnalysis]:
    """Load one analysis document. Returns None when no such analysis exists."""
    path = data_dir() / ANALYSES_DIR / f"{analysis_id}.json"
    if not path.is_file():
        logger.info("Analysis %s not found at %s", analysis_id, path)
        return None
    return PlaceAnalysis.from_dict(_read_json(path))


def load_quarterly_series(name: str) -> QuarterlySeries:
    path = data_dir() / QUARTERLY_DIR / f"{name}.json"
    if not path.is_file():
        raise FileNotFoundError(f"Quarterly series file not found: {path}")
    series = QuarterlySeries.from_dict(_read_json(path))
    logger.debug("Loaded quarterly series %s with %d points", name, len(series.data))
    return series


def load_actor_overview(analysis_id: str) -> Optional[ActorOverview]:
    """Actor listings are supplementary: failures are logged and the section is hidden."""
    path = data_dir() / ACTORS_DIR / f"{analysis_id}.json"
    try:
        return ActorOverview.from_dict(_read_json(path))
    except (OSError, ValueError) as exc:
        logger.warning("Could not load actor data from %s: %s", path, exc)
        return None


def find_quarterly_series(name: str) -> Optional[QuarterlySeries]:
    """Like ``load_quarterly_series``, but a missing or malformed file is logged and gives None."""
    try:
        return load_quarterly_series(name)
    except (OSError, ValueError) as exc:
        logger.warning("Could not load quarterly series %s: %s", name, exc)
        return None
