# treemap_labels/core/positions.py
"""
Relative label positions: four corner alignments around a point anchor plus
hidden, and the origin of a label rectangle for each of them.
"""

from __future__ import annotations

from enum import Enum

from treemap_labels.core.types import Vec2


class RelativeLabelPosition(str, Enum):
    """Where a label sits relative to its anchor point."""
    UPPER_RIGHT = "upper-right"
    UPPER_LEFT = "upper-left"
    LOWER_RIGHT = "lower-right"
    LOWER_LEFT = "lower-left"
    HIDDEN = "hidden"


CANDIDATE_POSITIONS: tuple[RelativeLabelPosition, ...] = (
    RelativeLabelPosition.UPPER_RIGHT,
    RelativeLabelPosition.UPPER_LEFT,
    RelativeLabelPosition.LOWER_LEFT,
    RelativeLabelPosition.LOWER_RIGHT,
    RelativeLabelPosition.HIDDEN,
)
"""Evaluation order for both optimizers; greedy ties keep the first in this order."""


def label_origin(position: RelativeLabelPosition, anchor: Vec2, extent: Vec2) -> Vec2:
    """
    Lower-left corner of a label rectangle of the given extent, placed at
    the given position relative to anchor.
    """
    x, y = anchor
    if position is RelativeLabelPosition.UPPER_RIGHT:
        return (x, y)
    if position is RelativeLabelPosition.UPPER_LEFT:
        return (x - extent[0], y)
    if position is RelativeLabelPosition.LOWER_LEFT:
        return (x - extent[0], y - extent[1])
    if position is RelativeLabelPosition.LOWER_RIGHT:
        return (x, y - extent[1])
    if position is RelativeLabelPosition.HIDDEN:
        return (x, y)
    raise AssertionError(f"No valid relative label position, given {position!r}")


def is_visible(position: RelativeLabelPosition) -> bool:
    return position is not RelativeLabelPosition.HIDDEN


def relative_label_position(offset: Vec2, extent: Vec2) -> RelativeLabelPosition:
    """
    Classify a label by the quadrant its midpoint (offset + extent / 2) falls in,
    with offset measured from the anchor to the rectangle origin.
    """
    mx = offset[0] + extent[0] / 2.0
    my = offset[1] + extent[1] / 2.0
    if mx > 0 and my > 0:
        return RelativeLabelPosition.UPPER_RIGHT
    if mx < 0 and my > 0:
        return RelativeLabelPosition.UPPER_LEFT
    if mx < 0 and my < 0:
        return RelativeLabelPosition.LOWER_LEFT
    if mx > 0 and my < 0:
        return RelativeLabelPosition.LOWER_RIGHT
    raise AssertionError(
        f"Midpoint offset ({mx}, {my}) lies on an axis, given offset {offset} and extent {extent}"
    )
