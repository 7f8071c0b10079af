# treemap_labels/core/runner.py
"""
CLI entrypoint: load a label scene, run adaptive placement (greedy or
simulated annealing), write placements.json, run_metadata.json and a PNG.
"""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

from treemap_labels.core.config import LOG_LEVEL, RELATIVE_PADDING, REPORTS_DIR, SEED
from treemap_labels.core.evaluate import summarize_placement
from treemap_labels.core.io import load_scene
from treemap_labels.core.penalty import PENALTY_FUNCTIONS
from treemap_labels.core.placement import STRATEGIES, adapt_labels
from treemap_labels.core.reporting import (
    ensure_report_dir,
    write_placements_json,
    write_run_metadata_json,
)

logger = logging.getLogger(__name__)


def parse_padding(s: str) -> tuple[float, float]:
    """Parse 'x,y' or a single number used for both axes."""
    parts = [p.strip() for p in (s or "").split(",") if p.strip()]
    if len(parts) == 1:
        v = float(parts[0])
        return (v, v)
    if len(parts) == 2:
        return (float(parts[0]), float(parts[1]))
    raise ValueError(f"Padding must be 'x,y' or a single number, got {s!r}")


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Adaptive leaf-label placement for 3D treemaps.")
    p.add_argument("--scene", type=str, required=True, help="Scene JSON path (repo-relative)")
    p.add_argument("--strategy", type=str, choices=STRATEGIES, default="greedy", help="Optimizer")
    p.add_argument("--penalty", type=str, choices=sorted(PENALTY_FUNCTIONS), default="leaf_labels_treemap",
                   help="Penalty function")
    p.add_argument("--seed", type=int, default=SEED, help="Random seed for annealing")
    p.add_argument("--padding", type=str, default=",".join(str(v) for v in RELATIVE_PADDING),
                   help="Relative padding 'x,y'")
    p.add_argument("--run-name", type=str, default="run", dest="run_name", help="Reports subdir name")
    p.add_argument("--output-dir", type=str, default=REPORTS_DIR, dest="output_dir", help="Output directory (repo-relative)")
    p.add_argument("--repo-root", type=str, default=None, dest="repo_root", help="Repo root (default: cwd)")
    p.add_argument("--no-measure", action="store_true", dest="no_measure",
                   help="Do not measure labels without extent (keep them unmeasured)")
    p.add_argument("--no-render", action="store_true", dest="no_render", help="Skip PNG output")
    return p.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    args = _parse_args(argv)
    logging.basicConfig(level=getattr(logging, LOG_LEVEL, logging.INFO))
    repo_root = Path(args.repo_root).resolve() if args.repo_root else Path.cwd().resolve()
    relative_padding = parse_padding(args.padding)

    scene = load_scene(args.scene, repo_root=repo_root, measure=not args.no_measure)
    logger.info("Loaded %d label slots from %s", len(scene.labels), args.scene)

    run = adapt_labels(
        scene.labels,
        scene.camera,
        strategy=args.strategy,
        penalty_function=PENALTY_FUNCTIONS[args.penalty],
        relative_padding=relative_padding,
        rng=args.seed,
    )
    summary = summarize_placement(run.chosen_areas)

    report_dir = ensure_report_dir(repo_root, args.run_name, output_dir=args.output_dir)
    paths = [
        write_placements_json(report_dir, run, summary),
        write_run_metadata_json(report_dir, args.run_name, args.scene, args.strategy, args.seed, relative_padding),
    ]
    if not args.no_render:
        from treemap_labels.core.render import render_placement
        png_path = report_dir / "placement.png"
        render_placement(run.leaf_labels, run.chosen_areas, png_path, relative_padding=relative_padding)
        paths.append(png_path)

    for p in paths:
        print(p)
    print("Visibility changed:", run.changed.visibility)
    print("Positioning changed:", run.changed.positioning)


if __name__ == "__main__":
    main()
