# tests/test_placement.py
"""
Preparation (projection, priority, sparse input), application (write-back and
change report) and the two public adaptive placement entry points.
"""

from __future__ import annotations

import numpy as np
import pytest

from treemap_labels.core.camera import Camera
from treemap_labels.core.placement import (
    adapt_labels,
    adapt_position_to_prevent_overlap_greedy,
    adapt_position_to_prevent_overlap_simulated_annealing,
    apply_new_placements,
    label_priority,
    prepare_leaf_labels,
)
from treemap_labels.core.positions import RelativeLabelPosition
from treemap_labels.core.types import (
    Alignment,
    LabelPlacement,
    LineAnchor,
    PlacementChanged,
    ProjectedLabel,
)

from tests.helpers import square_camera


def _far_apart_labels() -> list[ProjectedLabel]:
    return [
        ProjectedLabel("a", (-0.8, 0.1, 0.0), (10.0, 5.0)),
        ProjectedLabel("b", (0.6, 0.7, 0.0), (10.0, 5.0)),
        ProjectedLabel("c", (-0.1, 0.9, 0.0), (10.0, 5.0)),
    ]


def test_label_priority() -> None:
    assert label_priority(0.0, 0, 1) == pytest.approx(11.0)
    assert label_priority(1.0, 0, 2) == pytest.approx(15.0)
    assert label_priority(0.5, 1, 2) == pytest.approx(15.5)
    # equal heights are not tied
    assert label_priority(0.5, 2, 4) > label_priority(0.5, 1, 4)


def test_prepare_skips_absent_labels() -> None:
    labels = [
        ProjectedLabel("a", (0.1, 0.2, 0.0), (10.0, 5.0)),
        None,
        ProjectedLabel("c", (-0.3, 0.4, 0.0), (10.0, 5.0), alignment=Alignment.RIGHT),
    ]
    leaf_labels = prepare_leaf_labels(labels, square_camera())
    assert [l.index for l in leaf_labels] == [0, 2]
    assert leaf_labels[0].point_location == pytest.approx((0.1, 0.2))
    assert leaf_labels[1].point_location == pytest.approx((-0.3, 0.4))
    assert leaf_labels[0].priority == pytest.approx(label_priority(0.2, 0, 3))
    assert leaf_labels[1].priority == pytest.approx(label_priority(0.4, 2, 3))
    assert leaf_labels[1].placement.alignment is Alignment.RIGHT
    assert leaf_labels[1].label is labels[2]


def test_prepare_divides_by_w() -> None:
    vp = np.eye(4)
    vp[3, 3] = 2.0
    leaf_labels = prepare_leaf_labels(
        [ProjectedLabel("a", (0.4, 0.6, 0.0), (10.0, 5.0))],
        Camera(width=100, height=100, view_projection=vp),
    )
    assert leaf_labels[0].point_location == pytest.approx((0.2, 0.3))


def test_apply_reports_changes() -> None:
    leaf_labels = prepare_leaf_labels(_far_apart_labels(), square_camera())
    for l in leaf_labels:
        l.placement = LabelPlacement((0.0, 0.0), Alignment.LEFT, LineAnchor.BOTTOM, True)
    assert apply_new_placements(leaf_labels) == PlacementChanged(False, False)

    leaf_labels[0].placement = LabelPlacement((0.0, 0.0), Alignment.RIGHT, LineAnchor.TOP, True)
    assert apply_new_placements(leaf_labels) == PlacementChanged(False, True)
    assert leaf_labels[0].label.alignment is Alignment.RIGHT
    assert leaf_labels[0].label.line_anchor is LineAnchor.TOP

    leaf_labels[1].placement = LabelPlacement((0.0, 0.0), Alignment.LEFT, LineAnchor.BOTTOM, False)
    changed = apply_new_placements(leaf_labels)
    assert changed == PlacementChanged(True, False)
    assert leaf_labels[1].label.color.a == 0.0

    leaf_labels[1].placement = LabelPlacement((0.0, 0.0), Alignment.LEFT, LineAnchor.BOTTOM, True)
    assert apply_new_placements(leaf_labels, visible_alpha=0.8).visibility is True
    assert leaf_labels[1].label.color.a == pytest.approx(0.8)


def test_offset_is_not_applied() -> None:
    labels = _far_apart_labels()
    leaf_labels = prepare_leaf_labels(labels, square_camera())
    leaf_labels[0].placement = LabelPlacement((-0.5, -0.5), Alignment.RIGHT, LineAnchor.TOP, True)
    apply_new_placements(leaf_labels)
    assert labels[0].position == (-0.8, 0.1, 0.0)


def test_greedy_entry_point_pass_through() -> None:
    labels = _far_apart_labels()
    labels[1].alignment = Alignment.RIGHT
    first = adapt_position_to_prevent_overlap_greedy(labels, square_camera())
    assert first == PlacementChanged(visibility=False, positioning=True)
    assert all(l.alignment is Alignment.LEFT and l.line_anchor is LineAnchor.BOTTOM for l in labels)
    second = adapt_position_to_prevent_overlap_greedy(labels, square_camera())
    assert second == PlacementChanged(False, False)


def test_annealing_entry_point_pass_through() -> None:
    labels = _far_apart_labels()
    adapt_position_to_prevent_overlap_simulated_annealing(labels, square_camera(), rng=1)
    assert all(l.alignment is Alignment.LEFT and l.line_anchor is LineAnchor.BOTTOM for l in labels)
    second = adapt_position_to_prevent_overlap_simulated_annealing(labels, square_camera(), rng=2)
    assert second.positioning is False


def _prefer_lower_left(overlap_count, overlap_area, position, priority) -> float:
    return 0.0 if position is RelativeLabelPosition.LOWER_LEFT else 10.0 + overlap_area


def test_entry_points_accept_custom_penalty() -> None:
    labels = _far_apart_labels()
    changed = adapt_position_to_prevent_overlap_greedy(
        labels, square_camera(), penalty_function=_prefer_lower_left, relative_padding=(0.0, 0.0)
    )
    assert changed == PlacementChanged(visibility=False, positioning=True)
    assert all(l.alignment is Alignment.RIGHT and l.line_anchor is LineAnchor.TOP for l in labels)

    labels = _far_apart_labels()
    adapt_position_to_prevent_overlap_simulated_annealing(
        labels, square_camera(), rng=4, penalty_function=_prefer_lower_left
    )
    assert all(l.alignment is Alignment.RIGHT and l.line_anchor is LineAnchor.TOP for l in labels)
    assert all(l.color.a > 0.0 for l in labels)


def test_greedy_hides_stacked_low_priority_label() -> None:
    # projection keeps x and z, so all anchors coincide while heights differ
    vp = np.array([
        [1.0, 0.0, 0.0, 0.0],
        [0.0, 0.0, 1.0, 0.0],
        [0.0, 0.0, 0.0, 0.0],
        [0.0, 0.0, 0.0, 1.0],
    ])
    camera = Camera(width=100, height=100, view_projection=vp)
    labels = [ProjectedLabel(f"l{i}", (0.0, 0.0, 0.0), (20.0, 5.0)) for i in range(6)]
    run = adapt_labels(labels, camera, strategy="greedy")
    assert run.changed.visibility is True
    # the highest-priority label (last index) is placed first and stays visible
    assert run.leaf_labels[0].index == 5
    assert labels[5].color.a > 0.0
    assert any(l.color.a == 0.0 for l in labels[:5])


def test_empty_input() -> None:
    assert adapt_position_to_prevent_overlap_greedy([], square_camera()) == PlacementChanged(False, False)
    assert adapt_position_to_prevent_overlap_simulated_annealing([], square_camera()) == PlacementChanged(False, False)
    run = adapt_labels([None, None], square_camera(), strategy="annealing")
    assert run.leaf_labels == []
    assert run.changed.any is False


def test_unknown_strategy() -> None:
    with pytest.raises(ValueError):
        adapt_labels(_far_apart_labels(), square_camera(), strategy="random")  # type: ignore[arg-type]
