"""
Application-wide configuration constants and helper utilities.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Optional


@dataclass(frozen=True)
class TabConfig:
    key: str
    label: str


@dataclass(frozen=True)
class ReportSection:
    kategori: str
    title: str
    feature_image_id: Optional[str] = None
    show_actors: bool = False


# Ordered tab definitions for the report app
TABS: List[TabConfig] = [
    TabConfig("report", "Rapport"),
    TabConfig("quarterly", "Kvartalstall"),
    TabConfig("actors", "Aktører"),
]

# Gallery sections in the order they appear on the report page
REPORT_SECTIONS: List[ReportSection] = [
    ReportSection("konkurranse", "Konkurransebildet", feature_image_id="konkurranse-aktorer-kart"),
    ReportSection("korthandel", "Korthandel", show_actors=True),
    ReportSection("bevegelse", "Bevegelse"),
    ReportSection("besokende", "Besøkende"),
    ReportSection("internasjonal", "Internasjonalt Besøkende"),
    ReportSection("utvikling", "Utvikling & Trender"),
]

YEAR_COLORS: Dict[int, str] = {
    2019: "#8B4513",
    2020: "#DC143C",
    2021: "#FF8C00",
    2022: "#32CD32",
    2023: "#4169E1",
    2024: "#9370DB",
    2025: "#FF1493",
}
DEFAULT_YEAR_COLOR = "#999999"
SERIES_COLOR = "#2D5F3F"

CURRENCY_LABEL = "kr"

PROJECT_ROOT = Path(__file__).resolve().parent.parent
DEFAULT_DATA_DIR = PROJECT_ROOT / "data"
DEFAULT_ANALYSIS_ID = "2024-arsrapport"
DEFAULT_QUARTERLY_SERIES = "banktransaksjoner-2019-2025"
