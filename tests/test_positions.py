# tests/test_positions.py
"""
Relative label positions: rectangle origins, visibility, quadrant
classification, and that each corner placement touches its anchor.
"""

from __future__ import annotations

import pytest

from treemap_labels.core.label_area import LabelArea, placement_for
from treemap_labels.core.positions import (
    CANDIDATE_POSITIONS,
    RelativeLabelPosition,
    is_visible,
    label_origin,
    relative_label_position,
)
from treemap_labels.core.types import Alignment, LineAnchor

P = RelativeLabelPosition


def test_label_origin_per_position() -> None:
    anchor = (1.0, 2.0)
    extent = (4.0, 3.0)
    assert label_origin(P.UPPER_RIGHT, anchor, extent) == (1.0, 2.0)
    assert label_origin(P.UPPER_LEFT, anchor, extent) == (-3.0, 2.0)
    assert label_origin(P.LOWER_LEFT, anchor, extent) == (-3.0, -1.0)
    assert label_origin(P.LOWER_RIGHT, anchor, extent) == (1.0, -1.0)
    assert label_origin(P.HIDDEN, anchor, extent) == (1.0, 2.0)


def test_label_origin_rejects_unknown_position() -> None:
    with pytest.raises(AssertionError):
        label_origin("sideways", (0.0, 0.0), (1.0, 1.0))  # type: ignore[arg-type]


def test_candidate_order() -> None:
    assert CANDIDATE_POSITIONS == (P.UPPER_RIGHT, P.UPPER_LEFT, P.LOWER_LEFT, P.LOWER_RIGHT, P.HIDDEN)


def test_is_visible() -> None:
    assert all(is_visible(p) for p in CANDIDATE_POSITIONS[:4])
    assert not is_visible(P.HIDDEN)


@pytest.mark.parametrize("position", [P.UPPER_RIGHT, P.UPPER_LEFT, P.LOWER_LEFT, P.LOWER_RIGHT])
def test_relative_label_position_inverts_origin(position: RelativeLabelPosition) -> None:
    anchor = (0.3, -0.2)
    extent = (0.25, 0.5)
    origin = label_origin(position, anchor, extent)
    offset = (origin[0] - anchor[0], origin[1] - anchor[1])
    assert relative_label_position(offset, extent) is position


def test_relative_label_position_on_axis_fails() -> None:
    with pytest.raises(AssertionError):
        relative_label_position((-1.0, 0.0), (2.0, 2.0))


@pytest.mark.parametrize("position", [P.UPPER_RIGHT, P.UPPER_LEFT, P.LOWER_LEFT, P.LOWER_RIGHT])
def test_anchor_touches_designated_corner(position: RelativeLabelPosition) -> None:
    anchor = (0.3, -0.2)
    extent = (0.25, 0.5)
    area = LabelArea(label_origin(position, anchor, extent), extent, position)
    placement = placement_for(area, anchor)
    assert placement.display is True

    ox = anchor[0] + placement.offset[0]
    oy = anchor[1] + placement.offset[1]
    # left-aligned text starts at the anchor, right-aligned text ends there
    corner_x = ox if placement.alignment is Alignment.LEFT else ox + extent[0]
    # bottom-anchored lines sit on the anchor, top-anchored lines hang from it
    corner_y = oy if placement.line_anchor is LineAnchor.BOTTOM else oy + extent[1]
    assert corner_x == pytest.approx(anchor[0])
    assert corner_y == pytest.approx(anchor[1])


def test_placement_for_hidden() -> None:
    area = LabelArea((0.5, 0.5), (0.1, 0.1), P.HIDDEN)
    placement = placement_for(area, (0.5, 0.5))
    assert placement.display is False
    assert placement.alignment is Alignment.LEFT
    assert placement.line_anchor is LineAnchor.BOTTOM
    assert placement.offset == (0.0, 0.0)


def test_placement_for_mapping() -> None:
    anchor = (0.0, 0.0)
    extent = (1.0, 1.0)
    expected = {
        P.UPPER_RIGHT: (Alignment.LEFT, LineAnchor.BOTTOM),
        P.LOWER_RIGHT: (Alignment.LEFT, LineAnchor.TOP),
        P.UPPER_LEFT: (Alignment.RIGHT, LineAnchor.BOTTOM),
        P.LOWER_LEFT: (Alignment.RIGHT, LineAnchor.TOP),
    }
    for position, (alignment, line_anchor) in expected.items():
        area = LabelArea(label_origin(position, anchor, extent), extent, position)
        placement = placement_for(area, anchor)
        assert placement.alignment is alignment
        assert placement.line_anchor is line_anchor
