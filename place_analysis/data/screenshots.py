"""
Grouping helpers for the screenshot galleries of a report.
"""

from __future__ import annotations

from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from place_analysis.types import ScreenshotData


def group_by_category(screenshots: Iterable[ScreenshotData]) -> Dict[str, List[ScreenshotData]]:
    """Partition screenshots by ``kategori``. Input order is kept inside each group."""
    groups: Dict[str, List[ScreenshotData]] = {}
    for shot in screenshots:
        groups.setdefault(shot.kategori, []).append(shot)
    return groups


def screenshots_for(
    screenshots: Iterable[ScreenshotData],
    kategori: str,
    exclude_ids: Sequence[str] = (),
) -> List[ScreenshotData]:
    return [s for s in screenshots if s.kategori == kategori and s.id not in exclude_ids]


def split_feature_image(
    screenshots: Sequence[ScreenshotData],
    image_id: str,
) -> Tuple[Optional[ScreenshotData], List[ScreenshotData]]:
    feature = next((s for s in screenshots if s.id == image_id), None)
    remaining = [s for s in screenshots if s.id != image_id]
    return feature, remaining
