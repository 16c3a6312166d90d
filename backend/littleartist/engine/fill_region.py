"""Fill region — point-in-template containment for constraining freehand strokes.

Wraps the compound path from `combined_fill_region`. Every contour is
flattened and implicitly closed; the fill rule decides how overlapping
contours combine.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray

from littleartist.engine.config import RenderConfig
from littleartist.models.geometry import VectorPath
from littleartist.svg.parser import combined_fill_region
from littleartist.utils.geometry import CanvasTransform, close_ring, flatten_path, winding_number

_FILL_RULES = ("nonzero", "evenodd")


class FillRegion:
    """Containment predicate over a compound VectorPath in logical coordinates."""

    def __init__(self, path: VectorPath, config: RenderConfig | None = None) -> None:
        self.config = config or RenderConfig()
        if self.config.fill_rule not in _FILL_RULES:
            raise ValueError(f"Unknown fill rule: {self.config.fill_rule}")
        self.path = path
        self._rings: list[NDArray[np.float64]] = [
            close_ring(sp.points)
            for sp in flatten_path(path, self.config.curve_samples)
            if len(sp.points) >= 3
        ]

    @classmethod
    def from_markup(cls, markup: str, config: RenderConfig | None = None) -> FillRegion:
        return cls(combined_fill_region(markup), config)

    @property
    def is_empty(self) -> bool:
        return not self._rings

    def contains(self, point: tuple[float, float]) -> bool:
        """Test a point in logical canvas coordinates."""
        if not self._rings:
            return False
        windings = [winding_number(point, ring) for ring in self._rings]
        if self.config.fill_rule == "evenodd":
            return sum(windings) % 2 == 1
        return sum(windings) != 0

    def contains_display(self, point: tuple[float, float], display_size: tuple[float, float]) -> bool:
        """Test a display-space point, inverse-mapped through the fit transform."""
        transform = CanvasTransform.fit(display_size[0], display_size[1], self.config.canvas_size)
        return self.contains(transform.to_logical(point))
