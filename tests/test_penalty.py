# tests/test_penalty.py
"""
Leaf-label penalty policy and penalty evaluation against the current choice
of every other label.
"""

from __future__ import annotations

import pytest

from treemap_labels.core.label_area import LabelArea
from treemap_labels.core.penalty import PENALTY_FUNCTIONS, compute_penalty, leaf_labels_treemap
from treemap_labels.core.positions import RelativeLabelPosition
from treemap_labels.core.types import LabelCollision

P = RelativeLabelPosition


def test_leaf_labels_treemap_position_penalties() -> None:
    assert leaf_labels_treemap(0, 0.0, P.UPPER_RIGHT, 5.0) == 0.0
    assert leaf_labels_treemap(0, 0.0, P.LOWER_RIGHT, 2.0) == pytest.approx(0.6)
    assert leaf_labels_treemap(0, 0.0, P.UPPER_LEFT, 2.0) == pytest.approx(0.6)
    assert leaf_labels_treemap(0, 0.0, P.LOWER_LEFT, 2.0) == pytest.approx(1.8)
    assert leaf_labels_treemap(0, 0.0, P.HIDDEN, 2.0) == pytest.approx(36.0)


def test_leaf_labels_treemap_overlap_dominates() -> None:
    assert leaf_labels_treemap(0, 0.5, P.UPPER_RIGHT, 1.0) == pytest.approx(7.5)
    # overlap count is ignored by this policy
    assert leaf_labels_treemap(7, 0.5, P.UPPER_RIGHT, 1.0) == pytest.approx(7.5)


def test_hiding_ordered_by_priority() -> None:
    low = leaf_labels_treemap(0, 0.0, P.HIDDEN, 1.0)
    high = leaf_labels_treemap(0, 0.0, P.HIDDEN, 10.0)
    assert low < high


def test_leaf_labels_treemap_rejects_unknown_position() -> None:
    with pytest.raises(AssertionError):
        leaf_labels_treemap(0, 0.0, "sideways", 1.0)  # type: ignore[arg-type]


def test_registry() -> None:
    assert PENALTY_FUNCTIONS["leaf_labels_treemap"] is leaf_labels_treemap


def test_compute_penalty_counts_only_chosen_collisions() -> None:
    area = LabelArea((0.0, 0.0), (2.0, 1.0), P.UPPER_LEFT)
    collisions = [
        LabelCollision(index=1, position=0, overlap_area=1.0),
        LabelCollision(index=1, position=2, overlap_area=3.0),
        LabelCollision(index=2, position=0, overlap_area=0.5),
    ]
    calls: list[tuple] = []

    def recording(count: int, overlap: float, position: P, priority: float) -> float:
        calls.append((count, overlap, position, priority))
        return 42.0

    result = compute_penalty(area, collisions, 3.0, recording, [0, 0, 0])
    assert result == 42.0
    count, overlap, position, priority = calls[0]
    assert count == 2
    assert overlap == pytest.approx(0.75)
    assert position is P.UPPER_LEFT
    assert priority == 3.0


def test_compute_penalty_unmeasured_is_zero() -> None:
    area = LabelArea((0.0, 0.0), (0.0, 1.0), P.HIDDEN)
    collisions = [LabelCollision(index=1, position=0, overlap_area=1.0)]
    assert compute_penalty(area, collisions, 10.0, leaf_labels_treemap, [0, 0]) == 0.0


def test_compute_penalty_without_collisions() -> None:
    area = LabelArea((0.0, 0.0), (1.0, 1.0), P.LOWER_LEFT)
    assert compute_penalty(area, [], 2.0, leaf_labels_treemap, [0]) == pytest.approx(1.8)
