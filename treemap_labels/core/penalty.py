# treemap_labels/core/penalty.py
"""
Penalty functions score a candidate placement from its overlap count, its
overlap area normalized by its own area, its relative position and the
label's priority. Lower is better. Penalty functions are plain callables;
pass any function with the same signature to the optimizers.
"""

from __future__ import annotations

from typing import Callable, Sequence

from treemap_labels.core.config import (
    PENALTY_POSITION_HIDDEN,
    PENALTY_POSITION_LOWER_LEFT,
    PENALTY_POSITION_LOWER_RIGHT,
    PENALTY_POSITION_UPPER_LEFT,
    PENALTY_POSITION_UPPER_RIGHT,
    PENALTY_WEIGHT_OVERLAP,
    PENALTY_WEIGHT_POSITION,
)
from treemap_labels.core.label_area import LabelArea
from treemap_labels.core.positions import RelativeLabelPosition
from treemap_labels.core.types import LabelCollision

PenaltyFunction = Callable[[int, float, RelativeLabelPosition, float], float]
"""(overlap_count, normalized_overlap_area, position, priority) -> cost."""


_LEAF_POSITION_PENALTY: dict[RelativeLabelPosition, float] = {
    RelativeLabelPosition.UPPER_RIGHT: PENALTY_POSITION_UPPER_RIGHT,
    RelativeLabelPosition.LOWER_RIGHT: PENALTY_POSITION_LOWER_RIGHT,
    RelativeLabelPosition.UPPER_LEFT: PENALTY_POSITION_UPPER_LEFT,
    RelativeLabelPosition.LOWER_LEFT: PENALTY_POSITION_LOWER_LEFT,
    RelativeLabelPosition.HIDDEN: PENALTY_POSITION_HIDDEN,
}


def leaf_labels_treemap(
    overlap_count: int,
    overlap_area: float,
    position: RelativeLabelPosition,
    priority: float,
) -> float:
    """
    Penalty for leaf labels on a treemap. overlap_count is ignored; overlap area
    dominates, then upper-right is preferred over the other corners, and hiding
    is penalized hardest, scaled by priority.
    """
    multiplier = _LEAF_POSITION_PENALTY.get(position)
    assert multiplier is not None, f"No valid relative label position, given {position!r}"
    return PENALTY_WEIGHT_OVERLAP * overlap_area + PENALTY_WEIGHT_POSITION * multiplier * priority


PENALTY_FUNCTIONS: dict[str, PenaltyFunction] = {
    "leaf_labels_treemap": leaf_labels_treemap,
}


def compute_penalty(
    label_area: LabelArea,
    collisions: Sequence[LabelCollision],
    priority: float,
    penalty_function: PenaltyFunction,
    chosen_positions: Sequence[int],
) -> float:
    """
    Penalty of one candidate area given the currently chosen position of every
    other label. Unmeasured areas (zero extent) score 0.
    """
    if not label_area.is_measured():
        return 0.0

    overlap_area = 0.0
    overlap_count = 0
    for collision in collisions:
        if chosen_positions[collision.index] != collision.position:
            continue
        overlap_area += collision.overlap_area
        overlap_count += 1
    overlap_area /= label_area.area()
    return penalty_function(overlap_count, overlap_area, label_area.position, priority)
