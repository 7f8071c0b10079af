# treemap_labels/core/greedy.py
"""
Greedy label placement: first come, first served. Each label takes its
cheapest candidate against the labels placed before it; callers sort by
descending priority beforehand. Deterministic.
"""

from __future__ import annotations

from typing import Sequence

from treemap_labels.core.camera import Camera
from treemap_labels.core.collision import ndc_extent
from treemap_labels.core.label_area import LabelArea, placement_for
from treemap_labels.core.penalty import PenaltyFunction
from treemap_labels.core.positions import CANDIDATE_POSITIONS, label_origin
from treemap_labels.core.types import LeafLabel, Vec2


def greedy(
    labels: Sequence[LeafLabel],
    penalty_function: PenaltyFunction,
    relative_padding: Vec2,
    camera: Camera,
) -> list[LabelArea]:
    """
    Place labels in the given order and store each placement in label.placement.
    Ties keep the first candidate in CANDIDATE_POSITIONS order. Returns the
    chosen areas in label order.
    """
    placed: list[LabelArea] = []

    for leaf_label in labels:
        extent = ndc_extent(leaf_label, camera)
        best_penalty = float("inf")
        best_area: LabelArea | None = None

        for position in CANDIDATE_POSITIONS:
            origin = label_origin(position, leaf_label.point_location, extent)
            candidate = LabelArea(origin, extent, position)

            if candidate.is_measured():
                overlap_area = 0.0
                overlap_count = 0
                for other in placed:
                    overlap_area += candidate.padded_overlap_area(other, relative_padding)
                    overlap_count += 1 if candidate.padded_overlaps(other, relative_padding) else 0
                overlap_area /= candidate.area()
                penalty = penalty_function(overlap_count, overlap_area, position, leaf_label.priority)
            else:
                # not typeset yet
                penalty = 0.0

            if penalty < best_penalty:
                best_penalty = penalty
                best_area = candidate

        assert best_area is not None, "no candidate position evaluated"
        leaf_label.placement = placement_for(best_area, leaf_label.point_location)
        placed.append(best_area)

    return placed
