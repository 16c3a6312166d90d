"""Render configuration for outline stroking and fill-region flattening."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class RenderConfig:
    """Knobs shared by the outline renderer and the fill-region test."""

    # Template logical canvas (square)
    canvas_size: float = 400.0

    # Points sampled per Bezier segment when flattening
    curve_samples: int = 16

    # Thinnest stroke drawn on screen, in pixels
    min_stroke_px: float = 1.0

    # Outline ink
    ink_color: tuple[int, int, int] = (34, 34, 34)
    ink_opacity: float = 0.9
    background: tuple[int, int, int, int] = (255, 255, 255, 0)

    # "nonzero" or "evenodd"
    fill_rule: str = "nonzero"
