# treemap_labels/core/io.py
"""
Load a label scene from JSON: a camera and a sparse list of leaf labels.

    {
      "camera": {"width": 800, "height": 600,
                 "view_projection": [[...], [...], [...], [...]]},
      "font_size_px": 14,
      "labels": [
        {"text": "main.py", "position": [0.1, 0.4, 0.2], "extent": [64, 16]},
        null,
        {"text": "util.py", "position": [0.3, 0.2, 0.5]}
      ]
    }

Instead of view_projection the camera may give eye, center, up, fovy_deg,
near and far. null entries are absent labels. Labels without extent are
measured with Pillow unless measuring is disabled, in which case they stay
unmeasured (zero extent).
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from treemap_labels.core.camera import Camera
from treemap_labels.core.config import DEFAULT_FONT_FAMILY, DEFAULT_FONT_SIZE_PX
from treemap_labels.core.text_metrics import measure_label_extent_px
from treemap_labels.core.types import Alignment, LineAnchor, ProjectedLabel


@dataclass
class Scene:
    """Camera plus labels; labels[i] is None where no label exists."""
    camera: Camera
    labels: list[ProjectedLabel | None]
    source: str = ""


def _resolve_path(path: str | Path, repo_root: Path | None) -> Path:
    """Resolve path; if relative, against repo_root (or cwd if repo_root is None)."""
    p = Path(path)
    if not p.is_absolute() and repo_root is not None:
        p = repo_root / p
    return p.resolve()


def _vector(value: Any, length: int, what: str) -> tuple[float, ...]:
    if not isinstance(value, (list, tuple)) or len(value) != length:
        raise ValueError(f"{what} must be a list of {length} numbers, got {value!r}")
    try:
        return tuple(float(v) for v in value)
    except (TypeError, ValueError) as e:
        raise ValueError(f"{what} must be numeric, got {value!r}") from e


def parse_camera(data: dict) -> Camera:
    """Build a Camera from a scene's camera object."""
    if not isinstance(data, dict):
        raise ValueError("Scene camera must be an object")
    try:
        width = int(data["width"])
        height = int(data["height"])
    except (KeyError, TypeError, ValueError) as e:
        raise ValueError("Scene camera needs integer width and height") from e

    if width <= 0 or height <= 0:
        raise ValueError(f"Scene camera viewport must be positive, got {width}x{height}")

    if "view_projection" in data:
        rows = data["view_projection"]
        if not isinstance(rows, list) or len(rows) != 4:
            raise ValueError("view_projection must be a 4x4 matrix")
        matrix = [_vector(row, 4, "view_projection row") for row in rows]
        return Camera(width=width, height=height, view_projection=matrix)

    if "eye" in data and "center" in data:
        return Camera.from_look_at(
            width,
            height,
            eye=_vector(data["eye"], 3, "camera eye"),
            center=_vector(data["center"], 3, "camera center"),
            up=_vector(data.get("up", [0.0, 1.0, 0.0]), 3, "camera up"),
            fovy_deg=float(data.get("fovy_deg", 45.0)),
            near=float(data.get("near", 0.1)),
            far=float(data.get("far", 10.0)),
        )
    raise ValueError("Scene camera needs view_projection or eye and center")


def parse_label(
    data: dict | None,
    font_size_px: float = DEFAULT_FONT_SIZE_PX,
    font_family: str = DEFAULT_FONT_FAMILY,
    measure: bool = True,
) -> ProjectedLabel | None:
    """One label entry; None stays None."""
    if data is None:
        return None
    if not isinstance(data, dict):
        raise ValueError(f"Label entry must be an object or null, got {data!r}")
    text = str(data.get("text", ""))
    if "position" not in data:
        raise ValueError(f"Label {text!r} has no position")
    position = _vector(data["position"], 3, f"position of label {text!r}")

    if "extent" in data:
        extent = _vector(data["extent"], 2, f"extent of label {text!r}")
        if extent[0] < 0 or extent[1] < 0:
            raise ValueError(f"extent of label {text!r} must be non-negative, got {extent}")
    elif measure:
        extent = measure_label_extent_px(text, font_size_px, font_family)
    else:
        extent = (0.0, 0.0)

    label = ProjectedLabel(text=text, position=position, extent=extent)  # type: ignore[arg-type]
    if "alignment" in data:
        label.alignment = Alignment(data["alignment"])
    if "line_anchor" in data:
        label.line_anchor = LineAnchor(data["line_anchor"])
    return label


def parse_scene(data: dict, source: str = "", measure: bool = True) -> Scene:
    if not isinstance(data, dict):
        raise ValueError("Scene must be a JSON object")
    if "camera" not in data:
        raise ValueError("Scene has no camera")
    camera = parse_camera(data["camera"])
    font_size_px = float(data.get("font_size_px", DEFAULT_FONT_SIZE_PX))
    font_family = str(data.get("font_family", DEFAULT_FONT_FAMILY))
    entries = data.get("labels", [])
    if not isinstance(entries, list):
        raise ValueError("Scene labels must be a list")
    labels = [parse_label(e, font_size_px, font_family, measure=measure) for e in entries]
    return Scene(camera=camera, labels=labels, source=source)


def load_scene(path: str | Path, repo_root: Path | None = None, measure: bool = True) -> Scene:
    """
    Load a scene JSON file.
    Raises FileNotFoundError if path is missing, ValueError if content is malformed.
    """
    resolved = _resolve_path(path, repo_root)
    if not resolved.exists():
        raise FileNotFoundError(f"Scene file not found: {resolved}")
    try:
        data = json.loads(resolved.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise ValueError(f"Scene file is not valid JSON: {resolved}: {e}") from e
    return parse_scene(data, source=str(path), measure=measure)
