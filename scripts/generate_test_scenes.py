#!/usr/bin/env python3
"""
Generate label scenes (JSON) for trying the placement CLI.

Categories:
sparse_*:    few labels spread over the treemap, little or no overlap
clustered_*: labels packed around a few hot spots
stacked_*:   several labels sharing one anchor (forced hiding)
holes_*:     sparse label lists with absent (null) entries
"""

from __future__ import annotations

import json
from pathlib import Path

import numpy as np

OUTPUT_DIR = Path(__file__).parent.parent / "docs" / "scenes"

CAMERA = {
    "width": 800,
    "height": 600,
    "eye": [0.0, 1.6, 1.6],
    "center": [0.0, 0.0, 0.0],
    "up": [0.0, 1.0, 0.0],
    "fovy_deg": 45.0,
    "near": 0.1,
    "far": 10.0,
}


def _label(rng: np.random.Generator, i: int, x: float, z: float) -> dict:
    height = float(rng.uniform(0.0, 1.0))
    width_px = float(rng.integers(40, 140))
    return {
        "text": f"node_{i:03d}",
        "position": [x, height, z],
        "extent": [width_px, 18.0],
    }


def sparse_scene(seed: int, n: int) -> dict:
    rng = np.random.default_rng(seed)
    xs = np.linspace(-0.45, 0.45, n)
    labels = [_label(rng, i, float(x), float(rng.uniform(-0.45, 0.45))) for i, x in enumerate(xs)]
    return {"camera": CAMERA, "labels": labels}


def clustered_scene(seed: int, n: int, n_clusters: int = 3) -> dict:
    rng = np.random.default_rng(seed)
    centers = rng.uniform(-0.4, 0.4, size=(n_clusters, 2))
    labels = []
    for i in range(n):
        cx, cz = centers[i % n_clusters]
        x, z = rng.normal((cx, cz), 0.04)
        labels.append(_label(rng, i, float(x), float(z)))
    return {"camera": CAMERA, "labels": labels}


def stacked_scene(seed: int, n: int) -> dict:
    rng = np.random.default_rng(seed)
    labels = [_label(rng, i, 0.0, 0.0) for i in range(n)]
    for label in labels:
        label["position"][1] = 0.5
    return {"camera": CAMERA, "labels": labels}


def holes_scene(seed: int, n: int, absent_ratio: float = 0.3) -> dict:
    scene = clustered_scene(seed, n)
    rng = np.random.default_rng(seed + 1)
    scene["labels"] = [None if rng.random() < absent_ratio else l for l in scene["labels"]]
    return scene


def save_scene(filename: str, scene: dict) -> None:
    path = OUTPUT_DIR / filename
    path.write_text(json.dumps(scene, indent=2), encoding="utf-8")
    print(f"Created: {path.name}")


def main() -> None:
    OUTPUT_DIR.mkdir(parents=True, exist_ok=True)
    for i, n in enumerate((4, 8)):
        save_scene(f"sparse_{i:02d}.json", sparse_scene(100 + i, n))
    for i, n in enumerate((9, 16, 30)):
        save_scene(f"clustered_{i:02d}.json", clustered_scene(200 + i, n))
    for i, n in enumerate((3, 5)):
        save_scene(f"stacked_{i:02d}.json", stacked_scene(300 + i, n))
    save_scene("holes_00.json", holes_scene(400, 12))


if __name__ == "__main__":
    main()
