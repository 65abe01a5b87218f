from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from place_analysis.types import ActorOverview, PlaceAnalysis, QuarterlySeries


@dataclass
class PageContext:
    analysis: PlaceAnalysis
    quarterly: Optional[QuarterlySeries]
    actors: Optional[ActorOverview]
