"""littleartist outline engine: fill-region containment and preview rendering."""

from littleartist.engine.config import RenderConfig
from littleartist.engine.fill_region import FillRegion
from littleartist.engine.renderer import render_outline, render_png

__all__ = [
    "RenderConfig",
    "FillRegion",
    "render_outline",
    "render_png",
]
