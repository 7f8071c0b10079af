# treemap_labels/core/label_area.py
"""
Axis-aligned label rectangle in normalized screen space, tagged with its
relative position. Overlap tests and overlap area, with and without padding.
Hidden areas never overlap anything. Also maps a chosen area to its LabelPlacement.
"""

from __future__ import annotations

from dataclasses import dataclass

from shapely.geometry import Polygon, box

from treemap_labels.core.config import RELATIVE_PADDING
from treemap_labels.core.positions import RelativeLabelPosition
from treemap_labels.core.types import Alignment, LabelPlacement, LineAnchor, Vec2


@dataclass(frozen=True)
class LabelArea:
    """Rectangle [origin, origin + extent] for one candidate placement of a label."""
    origin: Vec2
    extent: Vec2
    position: RelativeLabelPosition

    def _either_hidden(self, other: LabelArea) -> bool:
        return (
            self.position is RelativeLabelPosition.HIDDEN
            or other.position is RelativeLabelPosition.HIDDEN
        )

    def bounds(self, relative_padding: Vec2 | None = None) -> tuple[float, float, float, float]:
        """
        Return (minx, miny, maxx, maxy). With relative_padding, the lower-left
        corner moves out by extent * padding and the upper-right corner by
        extent * (padding + 1).
        """
        ox, oy = self.origin
        ex, ey = self.extent
        if relative_padding is None:
            return (ox, oy, ox + ex, oy + ey)
        px, py = relative_padding
        return (
            ox - ex * px,
            oy - ey * py,
            ox + ex * (px + 1.0),
            oy + ey * (py + 1.0),
        )

    def overlaps(self, other: LabelArea) -> bool:
        """True if both rectangles intersect; touching edges do not count."""
        if self._either_hidden(other):
            return False
        return _intersects(self.bounds(), other.bounds())

    def padded_overlaps(self, other: LabelArea, relative_padding: Vec2 = RELATIVE_PADDING) -> bool:
        if self._either_hidden(other):
            return False
        return _intersects(self.bounds(relative_padding), other.bounds(relative_padding))

    def overlap_area(self, other: LabelArea) -> float:
        if self._either_hidden(other):
            return 0.0
        return _intersection_area(self.bounds(), other.bounds())

    def padded_overlap_area(self, other: LabelArea, relative_padding: Vec2 = RELATIVE_PADDING) -> float:
        if self._either_hidden(other):
            return 0.0
        return _intersection_area(self.bounds(relative_padding), other.bounds(relative_padding))

    def area(self) -> float:
        return self.extent[0] * self.extent[1]

    def is_measured(self) -> bool:
        """False while either extent component is zero (label not typeset yet)."""
        return self.extent[0] != 0 and self.extent[1] != 0

    def to_polygon(self, relative_padding: Vec2 | None = None) -> Polygon:
        """Shapely box of this area (optionally padded); empty for hidden or unmeasured areas."""
        if self.position is RelativeLabelPosition.HIDDEN or not self.is_measured():
            return Polygon()
        return box(*self.bounds(relative_padding))


def _intersects(
    a: tuple[float, float, float, float],
    b: tuple[float, float, float, float],
) -> bool:
    return a[0] < b[2] and a[2] > b[0] and a[1] < b[3] and a[3] > b[1]


def _intersection_area(
    a: tuple[float, float, float, float],
    b: tuple[float, float, float, float],
) -> float:
    dx = min(a[2], b[2]) - max(a[0], b[0])
    dy = min(a[3], b[3]) - max(a[1], b[1])
    return max(0.0, dx) * max(0.0, dy)


_PLACEMENT_ATTRIBUTES: dict[RelativeLabelPosition, tuple[Alignment, LineAnchor, bool]] = {
    RelativeLabelPosition.UPPER_RIGHT: (Alignment.LEFT, LineAnchor.BOTTOM, True),
    RelativeLabelPosition.LOWER_RIGHT: (Alignment.LEFT, LineAnchor.TOP, True),
    RelativeLabelPosition.UPPER_LEFT: (Alignment.RIGHT, LineAnchor.BOTTOM, True),
    RelativeLabelPosition.LOWER_LEFT: (Alignment.RIGHT, LineAnchor.TOP, True),
    RelativeLabelPosition.HIDDEN: (Alignment.LEFT, LineAnchor.BOTTOM, False),
}


def placement_for(label_area: LabelArea, point_location: Vec2) -> LabelPlacement:
    """LabelPlacement (offset, alignment, line anchor, display) for a chosen area."""
    attributes = _PLACEMENT_ATTRIBUTES.get(label_area.position)
    assert attributes is not None, f"No valid relative label position, given {label_area.position!r}"
    alignment, line_anchor, display = attributes
    offset = (
        label_area.origin[0] - point_location[0],
        label_area.origin[1] - point_location[1],
    )
    return LabelPlacement(offset=offset, alignment=alignment, line_anchor=line_anchor, display=display)
