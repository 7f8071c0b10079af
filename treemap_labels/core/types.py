# treemap_labels/core/types.py
"""
Dataclasses and enums shared by the placement pipeline: renderer-owned label
handles, the optimizer's leaf-label view, placements, collisions and the
change report returned to the rendering loop.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from treemap_labels.core.config import LEAF_LABEL_COLOR


Vec2 = tuple[float, float]
Vec3 = tuple[float, float, float]


class Alignment(str, Enum):
    """Horizontal text alignment relative to the label's anchor."""
    LEFT = "left"
    RIGHT = "right"
    CENTER = "center"


class LineAnchor(str, Enum):
    """Vertical anchoring of the text line relative to the label's anchor."""
    TOP = "top"
    BOTTOM = "bottom"


@dataclass
class LabelColor:
    """RGBA colour in [0, 1]. Alpha drives label visibility."""
    r: float
    g: float
    b: float
    a: float

    @classmethod
    def from_tuple(cls, rgba: tuple[float, float, float, float]) -> LabelColor:
        return cls(float(rgba[0]), float(rgba[1]), float(rgba[2]), float(rgba[3]))


@dataclass
class ProjectedLabel:
    """
    Renderer-owned label anchored at a 3D point and drawn at a fixed screen size.
    The placement pipeline holds non-owning references and writes alignment,
    line_anchor and color.a only.
    """
    text: str
    position: Vec3
    extent: Vec2 = (0.0, 0.0)  # on-screen size in px; zero until typeset
    alignment: Alignment = Alignment.LEFT
    line_anchor: LineAnchor = LineAnchor.BOTTOM
    color: LabelColor = field(default_factory=lambda: LabelColor.from_tuple(LEAF_LABEL_COLOR))


@dataclass(frozen=True)
class LabelPlacement:
    """Placement chosen for one label. offset is computed but not applied to geometry."""
    offset: Vec2
    alignment: Alignment
    line_anchor: LineAnchor
    display: bool


@dataclass
class LeafLabel:
    """Optimizer view of a ProjectedLabel: anchor in NDC, priority, current placement."""
    label: ProjectedLabel
    point_location: Vec2
    priority: float
    placement: LabelPlacement
    index: int = -1  # index in the caller's (sparse) label sequence


@dataclass(frozen=True)
class LabelCollision:
    """Padded overlap of one candidate area with another label's candidate area."""
    index: int
    position: int
    overlap_area: float


CollisionGraph = list[list[list[LabelCollision]]]
"""collision_graph[label][position] -> collisions with all candidates of other labels."""


@dataclass(frozen=True)
class PlacementChanged:
    """Whether an adaptive placement pass changed visibility and/or positioning."""
    visibility: bool = False
    positioning: bool = False

    @property
    def any(self) -> bool:
        return self.visibility or self.positioning
