# tests/helpers.py
"""Small builders shared by the placement tests."""

from __future__ import annotations

from treemap_labels.core.camera import Camera
from treemap_labels.core.types import LabelPlacement, LeafLabel, ProjectedLabel, Alignment, LineAnchor


def square_camera(size: int = 100) -> Camera:
    """Identity view-projection: NDC anchor = (x, y) of the label position."""
    return Camera(width=size, height=size)


def leaf(
    anchor: tuple[float, float],
    extent_px: tuple[float, float],
    priority: float = 1.0,
    index: int = 0,
    text: str = "label",
) -> LeafLabel:
    label = ProjectedLabel(text=text, position=(anchor[0], anchor[1], 0.0), extent=extent_px)
    return LeafLabel(
        label=label,
        point_location=anchor,
        priority=priority,
        placement=LabelPlacement((0.0, 0.0), Alignment.LEFT, LineAnchor.BOTTOM, True),
        index=index,
    )
