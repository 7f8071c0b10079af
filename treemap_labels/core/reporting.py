# treemap_labels/core/reporting.py
"""
Create reports/<run_name>/ and write placements.json and run_metadata.json.
"""

from __future__ import annotations

import json
from datetime import datetime, timezone
from pathlib import Path

from treemap_labels.core.config import (
    ANNEALING_CHANGES_PER_LABEL,
    ANNEALING_MAX_TEMPERATURE_CHANGES,
    ANNEALING_STARTING_TEMPERATURE,
    ANNEALING_STEPS_PER_LABEL,
    ANNEALING_TEMPERATURE_DECREASE_FACTOR,
    LEAF_LABEL_COLOR,
    PENALTY_WEIGHT_OVERLAP,
    PENALTY_WEIGHT_POSITION,
    RELATIVE_PADDING,
    REPORTS_DIR,
    SEED,
)
from treemap_labels.core.label_area import LabelArea
from treemap_labels.core.placement import PlacementRun
from treemap_labels.core.types import LeafLabel


def label_to_dict(leaf_label: LeafLabel, area: LabelArea) -> dict:
    """One entry of placements.json."""
    placement = leaf_label.placement
    return {
        "index": leaf_label.index,
        "text": leaf_label.label.text,
        "anchor_ndc": {"x": leaf_label.point_location[0], "y": leaf_label.point_location[1]},
        "priority": leaf_label.priority,
        "position": area.position.value,
        "origin_ndc": {"x": area.origin[0], "y": area.origin[1]},
        "extent_ndc": {"x": area.extent[0], "y": area.extent[1]},
        "offset": {"x": placement.offset[0], "y": placement.offset[1]},
        "alignment": placement.alignment.value,
        "line_anchor": placement.line_anchor.value,
        "display": placement.display,
        "alpha": leaf_label.label.color.a,
    }


def placement_run_to_dict(run: PlacementRun, summary: dict | None = None) -> dict:
    """Structure for placements.json; labels sorted by their input index."""
    entries = [label_to_dict(l, a) for l, a in zip(run.leaf_labels, run.chosen_areas)]
    entries.sort(key=lambda e: e["index"])
    return {
        "strategy": run.strategy,
        "changed": {
            "visibility": run.changed.visibility,
            "positioning": run.changed.positioning,
        },
        "labels": entries,
        "summary": summary or {},
    }


def run_metadata_dict(
    run_name: str,
    scene_path: str,
    strategy: str,
    seed: int | None,
    relative_padding: tuple[float, float],
) -> dict:
    """Timestamp and config snapshot for run_metadata.json."""
    return {
        "run_name": run_name,
        "timestamp_utc": datetime.now(timezone.utc).isoformat(),
        "scene_path": scene_path,
        "strategy": strategy,
        "seed": seed,
        "relative_padding": list(relative_padding),
        "config": {
            "RELATIVE_PADDING": list(RELATIVE_PADDING),
            "ANNEALING_STARTING_TEMPERATURE": ANNEALING_STARTING_TEMPERATURE,
            "ANNEALING_TEMPERATURE_DECREASE_FACTOR": ANNEALING_TEMPERATURE_DECREASE_FACTOR,
            "ANNEALING_MAX_TEMPERATURE_CHANGES": ANNEALING_MAX_TEMPERATURE_CHANGES,
            "ANNEALING_CHANGES_PER_LABEL": ANNEALING_CHANGES_PER_LABEL,
            "ANNEALING_STEPS_PER_LABEL": ANNEALING_STEPS_PER_LABEL,
            "PENALTY_WEIGHT_OVERLAP": PENALTY_WEIGHT_OVERLAP,
            "PENALTY_WEIGHT_POSITION": PENALTY_WEIGHT_POSITION,
            "LEAF_LABEL_COLOR": list(LEAF_LABEL_COLOR),
            "SEED": SEED,
        },
    }


def ensure_report_dir(
    repo_root: Path,
    run_name: str,
    output_dir: str | None = None,
) -> Path:
    """Create output_dir/<run_name>/ under repo_root; return path. Default output_dir from config."""
    base = output_dir if output_dir is not None else REPORTS_DIR
    out = (repo_root / base).resolve() / run_name
    out.mkdir(parents=True, exist_ok=True)
    return out


def write_placements_json(report_dir: Path, run: PlacementRun, summary: dict | None = None) -> Path:
    """Write placements.json to report_dir. Returns path to file."""
    path = report_dir / "placements.json"
    path.write_text(json.dumps(placement_run_to_dict(run, summary), indent=2), encoding="utf-8")
    return path


def write_run_metadata_json(
    report_dir: Path,
    run_name: str,
    scene_path: str,
    strategy: str,
    seed: int | None,
    relative_padding: tuple[float, float],
) -> Path:
    """Write run_metadata.json to report_dir."""
    path = report_dir / "run_metadata.json"
    data = run_metadata_dict(run_name, scene_path, strategy, seed, relative_padding)
    path.write_text(json.dumps(data, indent=2), encoding="utf-8")
    return path
