# treemap_labels/core/config.py
"""
Central configuration for adaptive leaf-label placement.
All tunable values live here; no magic numbers in other modules.
"""

from __future__ import annotations
import os

# ----- Paths (repo-relative) -----
REPORTS_DIR: str = "reports"

# ----- Padding -----
RELATIVE_PADDING: tuple[float, float] = (1.0, 1.0)
"""Padding relative to label extent, per axis. Lower-left grows by extent * padding,
upper-right by extent * (padding + 1)."""

# ----- Simulated annealing schedule -----
ANNEALING_STARTING_TEMPERATURE: float = 0.91023922662
"""Initial temperature, from the annealing schedule of Christensen, Marks and Shieber."""

ANNEALING_TEMPERATURE_DECREASE_FACTOR: float = 0.9
"""Temperature is multiplied by this factor at every level transition."""

ANNEALING_MAX_TEMPERATURE_CHANGES: int = 50
"""Hard limit on the number of level transitions."""

ANNEALING_CHANGES_PER_LABEL: int = 5
"""Accepted changes per level = this * label count."""

ANNEALING_STEPS_PER_LABEL: int = 20
"""Attempted steps per level = this * label count."""

# ----- Penalty (leaf labels on a treemap) -----
PENALTY_WEIGHT_OVERLAP: float = 15.0
PENALTY_WEIGHT_POSITION: float = 0.3

PENALTY_POSITION_UPPER_RIGHT: float = 0.0
PENALTY_POSITION_LOWER_RIGHT: float = 1.0
PENALTY_POSITION_UPPER_LEFT: float = 1.0
PENALTY_POSITION_LOWER_LEFT: float = 3.0
PENALTY_POSITION_HIDDEN: float = 60.0
"""Hiding is the last resort; scaled by priority so low-priority labels go first."""

# ----- Priority -----
PRIORITY_HEIGHT_SCALE: float = 9.0
PRIORITY_HEIGHT_OFFSET: float = 1.0
"""Label height in [0, 1] maps to priority in [1, 10]."""

PRIORITY_INDEX_TIE_BREAK: float = 10.0
"""Index-based tie-breaker: + PRIORITY_INDEX_TIE_BREAK * (index + 1) / label_count."""

# ----- Label colours (RGBA, float) -----
LEAF_LABEL_COLOR: tuple[float, float, float, float] = (0.0, 0.0, 0.0, 0.80)
"""Alpha of this colour is written back for visible leaf labels."""

# ----- Typesetting (collaborator stand-in) -----
DEFAULT_FONT_FAMILY: str = "DejaVu Sans"
DEFAULT_FONT_SIZE_PX: float = 14.0
LABEL_TEXT_MARGIN: str = "  "
"""Whitespace added before and after leaf label text when measuring extents."""

# ----- Rendering -----
RENDER_WIDTH_PX: int = 800
RENDER_HEIGHT_PX: int = 800

# ----- Determinism -----
SEED: int | None = 42
"""Random seed for simulated annealing; None for non-deterministic."""

# ----- Logging -----
LOG_LEVEL: str = os.environ.get("LOG_LEVEL", "INFO").upper()
"""Level used by the CLI. Set env LOG_LEVEL=DEBUG for optimizer summaries."""
