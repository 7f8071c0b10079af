# treemap_labels/core/placement.py
"""
Adaptive leaf-label placement: wrap renderer-owned labels, choose a relative
position for each (greedy or simulated annealing) and write alignment, line
anchor and visibility back. Returns what changed so the rendering loop can
decide whether to redraw.

Placement offsets are computed but not applied to label geometry.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Literal, Sequence

import numpy as np

from treemap_labels.core.annealing import AnnealingSchedule, simulated_annealing
from treemap_labels.core.camera import Camera, project_to_ndc
from treemap_labels.core.config import (
    LEAF_LABEL_COLOR,
    PRIORITY_HEIGHT_OFFSET,
    PRIORITY_HEIGHT_SCALE,
    PRIORITY_INDEX_TIE_BREAK,
    RELATIVE_PADDING,
    SEED,
)
from treemap_labels.core.greedy import greedy
from treemap_labels.core.label_area import LabelArea
from treemap_labels.core.penalty import PenaltyFunction, leaf_labels_treemap
from treemap_labels.core.types import (
    LabelPlacement,
    LeafLabel,
    PlacementChanged,
    ProjectedLabel,
    Vec2,
)

logger = logging.getLogger(__name__)

Strategy = Literal["greedy", "annealing"]
STRATEGIES: tuple[str, ...] = ("greedy", "annealing")


@dataclass
class PlacementRun:
    """Outcome of one placement pass: wrapped labels (in optimization order), chosen areas, change report."""
    leaf_labels: list[LeafLabel] = field(default_factory=list)
    chosen_areas: list[LabelArea] = field(default_factory=list)
    changed: PlacementChanged = field(default_factory=PlacementChanged)
    strategy: str = "greedy"


def label_priority(height: float, index: int, label_count: int) -> float:
    """
    Priority in roughly [1, 20]: the anchor height (expected in [0, 1]) scaled
    to [1, 10] plus an index-based tie-breaker.
    """
    return (
        height * PRIORITY_HEIGHT_SCALE + PRIORITY_HEIGHT_OFFSET
        + PRIORITY_INDEX_TIE_BREAK * (index + 1) / label_count
    )


def prepare_leaf_labels(labels: Sequence[ProjectedLabel | None], camera: Camera) -> list[LeafLabel]:
    """
    Wrap labels for optimization: anchor projected to NDC, priority from anchor
    height and index. None entries (absent labels) are skipped.
    """
    leaf_labels: list[LeafLabel] = []
    label_count = len(labels)
    for index, label in enumerate(labels):
        if label is None:
            logger.debug("Skipping absent label at index %d", index)
            continue
        leaf_labels.append(LeafLabel(
            label=label,
            point_location=project_to_ndc(camera, label.position),
            priority=label_priority(label.position[1], index, label_count),
            placement=LabelPlacement(
                offset=(0.0, 0.0),
                alignment=label.alignment,
                line_anchor=label.line_anchor,
                display=True,
            ),
            index=index,
        ))
    return leaf_labels


def apply_new_placements(
    leaf_labels: Sequence[LeafLabel],
    visible_alpha: float = LEAF_LABEL_COLOR[3],
) -> PlacementChanged:
    """
    Write alignment, line anchor and alpha of every placement to its label.
    Reports whether any visibility (alpha) or positioning (alignment, line
    anchor) actually changed.
    """
    visibility_changed = False
    positioning_changed = False
    for leaf_label in leaf_labels:
        label = leaf_label.label
        placement = leaf_label.placement

        alignment_changed = label.alignment != placement.alignment
        line_anchor_changed = label.line_anchor != placement.line_anchor
        label.alignment = placement.alignment
        label.line_anchor = placement.line_anchor

        alpha = visible_alpha if placement.display else 0.0
        alpha_changed = label.color.a != alpha
        label.color.a = alpha

        visibility_changed = visibility_changed or alpha_changed
        positioning_changed = positioning_changed or alignment_changed or line_anchor_changed

    changed = PlacementChanged(visibility=visibility_changed, positioning=positioning_changed)
    logger.debug(
        "Applied %d placements: visibility_changed=%s positioning_changed=%s",
        len(leaf_labels), changed.visibility, changed.positioning,
    )
    return changed


def adapt_labels(
    labels: Sequence[ProjectedLabel | None],
    camera: Camera,
    strategy: Strategy = "greedy",
    penalty_function: PenaltyFunction = leaf_labels_treemap,
    relative_padding: Vec2 = RELATIVE_PADDING,
    rng: np.random.Generator | int | None = SEED,
    schedule: AnnealingSchedule | None = None,
    visible_alpha: float = LEAF_LABEL_COLOR[3],
) -> PlacementRun:
    """
    Prepare, optimize and apply in one pass. Greedy processes labels by
    descending priority; annealing uses input order and the given rng or seed.
    """
    if strategy not in STRATEGIES:
        raise ValueError(f"Unknown placement strategy {strategy!r}; expected one of {STRATEGIES}")

    leaf_labels = prepare_leaf_labels(labels, camera)
    if not leaf_labels:
        return PlacementRun(strategy=strategy)

    if strategy == "greedy":
        # first come, first served
        leaf_labels.sort(key=lambda leaf_label: leaf_label.priority, reverse=True)
        chosen_areas = greedy(leaf_labels, penalty_function, relative_padding, camera)
    else:
        chosen_areas = simulated_annealing(
            leaf_labels, penalty_function, relative_padding, camera, rng=rng, schedule=schedule,
        )

    changed = apply_new_placements(leaf_labels, visible_alpha=visible_alpha)
    return PlacementRun(
        leaf_labels=leaf_labels,
        chosen_areas=chosen_areas,
        changed=changed,
        strategy=strategy,
    )


def adapt_position_to_prevent_overlap_greedy(
    labels: Sequence[ProjectedLabel | None],
    camera: Camera,
    penalty_function: PenaltyFunction = leaf_labels_treemap,
    relative_padding: Vec2 = RELATIVE_PADDING,
) -> PlacementChanged:
    """Greedy adaptive placement; defaults to the treemap leaf-label penalty and padding (1, 1)."""
    return adapt_labels(
        labels,
        camera,
        strategy="greedy",
        penalty_function=penalty_function,
        relative_padding=relative_padding,
    ).changed


def adapt_position_to_prevent_overlap_simulated_annealing(
    labels: Sequence[ProjectedLabel | None],
    camera: Camera,
    rng: np.random.Generator | int | None = SEED,
    penalty_function: PenaltyFunction = leaf_labels_treemap,
    relative_padding: Vec2 = RELATIVE_PADDING,
) -> PlacementChanged:
    """
    Adapt alignment and line anchor of leaf labels to avoid overlaps, hiding a
    label (alpha 0) when nothing else works. Assumes horizontal label direction.
    """
    return adapt_labels(
        labels,
        camera,
        strategy="annealing",
        penalty_function=penalty_function,
        relative_padding=relative_padding,
        rng=rng,
    ).changed
