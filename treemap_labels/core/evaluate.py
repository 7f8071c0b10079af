# treemap_labels/core/evaluate.py
"""
Quality summary of a placement pass: how many labels are shown or hidden,
how many visible labels still overlap and by how much.
"""

from __future__ import annotations

from typing import Sequence

from shapely.ops import unary_union

from treemap_labels.core.label_area import LabelArea
from treemap_labels.core.positions import is_visible


def count_overlapping_pairs(areas: Sequence[LabelArea]) -> int:
    """Unordered pairs of areas that overlap (hidden areas never do)."""
    count = 0
    for i, a in enumerate(areas):
        for b in areas[i + 1:]:
            if a.overlaps(b):
                count += 1
    return count


def total_overlap_area(areas: Sequence[LabelArea]) -> float:
    """Sum of pairwise overlap areas over unordered pairs."""
    total = 0.0
    for i, a in enumerate(areas):
        for b in areas[i + 1:]:
            total += a.overlap_area(b)
    return total


def summarize_placement(areas: Sequence[LabelArea]) -> dict:
    """
    Metrics for chosen areas: counts, overlapping pairs, summed pairwise overlap
    area and the area covered by visible labels (NDC units).
    """
    visible = [a for a in areas if is_visible(a.position)]
    polygons = [a.to_polygon() for a in visible]
    polygons = [p for p in polygons if not p.is_empty]
    covered = unary_union(polygons).area if polygons else 0.0
    label_area_sum = sum(p.area for p in polygons)
    return {
        "n_labels": len(areas),
        "visible_count": len(visible),
        "hidden_count": len(areas) - len(visible),
        "unmeasured_count": sum(1 for a in areas if not a.is_measured()),
        "overlapping_pairs": count_overlapping_pairs(visible),
        "overlap_area": total_overlap_area(visible),
        "covered_area": float(covered),
        "overlap_ratio": float(1.0 - covered / label_area_sum) if label_area_sum > 0 else 0.0,
    }
