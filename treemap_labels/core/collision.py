# treemap_labels/core/collision.py
"""
Candidate label areas and the collision graph over them.

The graph stores, for every (label, candidate position), the padded overlaps
with every candidate position of every other label. Optimizers then only
sum the entries whose other candidate is currently chosen. Construction is
O(L^2 * P^2) for L labels and P positions; L is tens, not thousands.
"""

from __future__ import annotations

from typing import Sequence

from treemap_labels.core.camera import Camera
from treemap_labels.core.config import RELATIVE_PADDING
from treemap_labels.core.label_area import LabelArea
from treemap_labels.core.positions import RelativeLabelPosition, label_origin
from treemap_labels.core.types import CollisionGraph, LabelCollision, LeafLabel, Vec2


def ndc_extent(leaf_label: LeafLabel, camera: Camera) -> Vec2:
    """Label extent in normalized screen space (px / viewport size)."""
    assert camera.valid, (
        f"camera viewport is invalid: {camera.width} {camera.height}"
    )
    width_px, height_px = leaf_label.label.extent
    return (width_px / camera.width, height_px / camera.height)


def compute_label_areas(
    labels: Sequence[LeafLabel],
    positions: Sequence[RelativeLabelPosition],
    camera: Camera,
) -> list[list[LabelArea]]:
    """One LabelArea per (label, position); inner order follows positions."""
    result: list[list[LabelArea]] = []
    for leaf_label in labels:
        extent = ndc_extent(leaf_label, camera)
        result.append([
            LabelArea(label_origin(position, leaf_label.point_location, extent), extent, position)
            for position in positions
        ])
    return result


def create_collision_graph(
    label_areas: Sequence[Sequence[LabelArea]],
    relative_padding: Vec2 | None = None,
) -> CollisionGraph:
    """
    Adjacency lists of padded overlaps between candidates of distinct labels.
    Both directions are recorded independently.
    """
    if relative_padding is None:
        relative_padding = RELATIVE_PADDING

    graph: CollisionGraph = [[[] for _ in areas] for areas in label_areas]

    for i, areas in enumerate(label_areas):
        for p, area in enumerate(areas):
            collisions = graph[i][p]
            for j, other_areas in enumerate(label_areas):
                if i == j:
                    continue
                for q, other in enumerate(other_areas):
                    if not area.padded_overlaps(other, relative_padding):
                        continue
                    collisions.append(LabelCollision(
                        index=j,
                        position=q,
                        overlap_area=area.padded_overlap_area(other, relative_padding),
                    ))
    return graph
