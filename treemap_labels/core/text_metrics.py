# treemap_labels/core/text_metrics.py
"""
Measure on-screen label extents in px using Pillow. Stands in for the
renderer's typesetting when a scene gives label text but no extent.
"""

from __future__ import annotations

import warnings
from functools import lru_cache

from treemap_labels.core.config import DEFAULT_FONT_FAMILY, LABEL_TEXT_MARGIN


def _font_files(font_family: str) -> list[str]:
    """File names tried for a family: "DejaVu Sans" -> DejaVu Sans.ttf, DejaVuSans.ttf."""
    names: list[str] = []
    for family in (font_family, DEFAULT_FONT_FAMILY):
        for name in (family + ".ttf", family.replace(" ", "") + ".ttf"):
            if name not in names:
                names.append(name)
    return names


@lru_cache(maxsize=None)
def _load_font(font_family: str, size: int):
    """Requested family, then DEFAULT_FONT_FAMILY, then Pillow's built-in font with a warning."""
    from PIL import ImageFont

    for name in _font_files(font_family):
        try:
            return ImageFont.truetype(name, size=size)
        except OSError:
            continue
    warnings.warn(f"No TrueType font for {font_family!r}; label extents use Pillow's default font.", UserWarning)
    return ImageFont.load_default()


def measure_text_px(text: str, font_size_px: float, font_family: str = DEFAULT_FONT_FAMILY) -> tuple[float, float]:
    """Return (width_px, height_px) of text rendered at font_size_px."""
    from PIL import Image, ImageDraw

    if not text:
        return (0.0, 0.0)
    font = _load_font(font_family, max(1, int(round(font_size_px))))
    img = Image.new("RGB", (1, 1))
    draw = ImageDraw.Draw(img)
    bbox = draw.textbbox((0, 0), text, font=font)
    w = float(bbox[2] - bbox[0])
    h = float(bbox[3] - bbox[1])
    size_used = getattr(font, "size", font_size_px)
    scale = font_size_px / max(1.0, float(size_used))
    return (w * scale, h * scale)


def measure_label_extent_px(text: str, font_size_px: float, font_family: str = DEFAULT_FONT_FAMILY) -> tuple[float, float]:
    """Extent of a leaf label, including the whitespace margin on both sides."""
    if not text:
        return (0.0, 0.0)
    return measure_text_px(LABEL_TEXT_MARGIN + text + LABEL_TEXT_MARGIN, font_size_px, font_family)
