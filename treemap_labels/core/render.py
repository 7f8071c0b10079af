# treemap_labels/core/render.py
"""
Matplotlib PNG rendering of a placement pass in normalized device
coordinates: anchors as points, visible labels as rectangles with their
text, hidden labels as crosses. Optionally the padded areas used for
collision detection.
"""

from __future__ import annotations

import warnings
from pathlib import Path
from typing import Sequence

import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
import numpy as np
from shapely.geometry import Polygon

from treemap_labels.core.config import RENDER_HEIGHT_PX, RENDER_WIDTH_PX
from treemap_labels.core.label_area import LabelArea
from treemap_labels.core.positions import is_visible
from treemap_labels.core.types import Alignment, LeafLabel, LineAnchor, Vec2


def _new_fig(width_px: int, height_px: int) -> tuple[plt.Figure, plt.Axes]:
    fig = plt.figure(
        figsize=(width_px / 100.0, height_px / 100.0),
        dpi=100,
        constrained_layout=False,
    )
    ax = fig.add_axes([0, 0, 1, 1])  # full-canvas axes
    ax.set_xlim(-1.0, 1.0)
    ax.set_ylim(-1.0, 1.0)
    ax.axis("off")
    return fig, ax


def _draw_box(ax: plt.Axes, polygon: Polygon, **kwargs) -> None:
    if polygon.is_empty:
        return
    xy = np.array(polygon.exterior.coords)
    ax.fill(xy[:, 0], xy[:, 1], **kwargs)


def _text_anchor(leaf_label: LeafLabel) -> tuple[str, str]:
    ha = "left" if leaf_label.placement.alignment is Alignment.LEFT else "right"
    va = "bottom" if leaf_label.placement.line_anchor is LineAnchor.BOTTOM else "top"
    return ha, va


def render_placement(
    leaf_labels: Sequence[LeafLabel],
    chosen_areas: Sequence[LabelArea],
    output_path: str | Path,
    width_px: int = RENDER_WIDTH_PX,
    height_px: int = RENDER_HEIGHT_PX,
    relative_padding: Vec2 | None = None,
    scale: int = 1,
) -> None:
    """Render chosen label areas. scale multiplies output resolution (1x, 2x, 4x)."""
    w, h = width_px * scale, height_px * scale
    fig, ax = _new_fig(w, h)

    for leaf_label, area in zip(leaf_labels, chosen_areas):
        x, y = leaf_label.point_location
        if not is_visible(area.position):
            ax.scatter([x], [y], s=20, marker="x", color="grey", zorder=4)
            continue
        if relative_padding is not None:
            _draw_box(ax, area.to_polygon(relative_padding), facecolor="none",
                      edgecolor="orange", linewidth=0.5, linestyle="--")
        _draw_box(ax, area.to_polygon(), facecolor="lightblue", edgecolor="navy",
                  linewidth=1, alpha=0.6)
        ha, va = _text_anchor(leaf_label)
        ax.text(x, y, leaf_label.label.text, fontsize=8 * scale, ha=ha, va=va,
                color="black", zorder=6)
        ax.scatter([x], [y], s=12, color="black", zorder=5)

    with warnings.catch_warnings():
        warnings.filterwarnings("ignore", message=".*constrained_layout.*", category=UserWarning)
        fig.savefig(output_path, dpi=100, facecolor="white")
    plt.close(fig)
