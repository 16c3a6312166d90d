"""Leaf-node geometry helpers over VectorPath. No engine imports."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

import numpy as np
from numpy.typing import NDArray
from svgpathtools import CubicBezier, Line, QuadraticBezier

from littleartist.models.geometry import (
    ClosePath,
    CubicCurveTo,
    LineTo,
    MoveTo,
    Point,
    QuadCurveTo,
    VectorPath,
)

LOGICAL_CANVAS = 400.0

Segment = Line | CubicBezier | QuadraticBezier


@dataclass
class Subpath:
    """One flattened contour: Nx2 points and whether it was explicitly closed."""

    points: NDArray[np.float64]
    closed: bool = False


def _c(p: Point) -> complex:
    return complex(p[0], p[1])


def path_segments(path: VectorPath) -> Iterator[Segment]:
    """Yield svgpathtools segments for every drawing operation, including closing lines."""
    current: complex | None = None
    start: complex | None = None
    for op in path:
        if isinstance(op, MoveTo):
            current = start = _c(op.point)
            continue
        if current is None:
            continue
        if isinstance(op, LineTo):
            end = _c(op.point)
            yield Line(current, end)
        elif isinstance(op, CubicCurveTo):
            end = _c(op.point)
            yield CubicBezier(current, _c(op.control1), _c(op.control2), end)
        elif isinstance(op, QuadCurveTo):
            end = _c(op.point)
            yield QuadraticBezier(current, _c(op.control), end)
        elif isinstance(op, ClosePath):
            end = start
            if end != current:
                yield Line(current, end)
        current = end


def path_bbox(path: VectorPath) -> tuple[float, float, float, float]:
    """Compute (xmin, ymin, xmax, ymax) from exact segment extrema and move points."""
    xs: list[float] = []
    ys: list[float] = []
    for op in path:
        if isinstance(op, MoveTo):
            xs.append(op.point[0])
            ys.append(op.point[1])
    for seg in path_segments(path):
        xmin, xmax, ymin, ymax = seg.bbox()
        xs.extend((xmin, xmax))
        ys.extend((ymin, ymax))
    if not xs:
        return (0.0, 0.0, 0.0, 0.0)
    return (float(min(xs)), float(min(ys)), float(max(xs)), float(max(ys)))


def _sample(seg: Segment, samples: int) -> list[tuple[float, float]]:
    pts = []
    for t in np.linspace(0, 1, samples + 1)[1:]:
        p = seg.point(t)
        pts.append((p.real, p.imag))
    return pts


def flatten_path(path: VectorPath, samples: int = 16) -> list[Subpath]:
    """Flatten a path into polylines, one per contour. Curves get `samples` points each."""
    subpaths: list[Subpath] = []
    pts: list[tuple[float, float]] = []
    closed = False
    current: Point | None = None
    start: Point | None = None

    def finish() -> None:
        nonlocal pts, closed
        if pts:
            subpaths.append(Subpath(np.array(pts, dtype=np.float64), closed))
        pts = []
        closed = False

    for op in path:
        if isinstance(op, MoveTo):
            finish()
            current = start = op.point
            pts = [current]
            continue
        if current is None or start is None:
            continue
        if not pts:
            # Drawing after a close continues from the subpath start
            pts = [current]
        if isinstance(op, LineTo):
            pts.append(op.point)
        elif isinstance(op, CubicCurveTo):
            seg = CubicBezier(_c(current), _c(op.control1), _c(op.control2), _c(op.point))
            pts.extend(_sample(seg, samples))
        elif isinstance(op, QuadCurveTo):
            seg = QuadraticBezier(_c(current), _c(op.control), _c(op.point))
            pts.extend(_sample(seg, samples))
        elif isinstance(op, ClosePath):
            if pts[-1] != start:
                pts.append(start)
            closed = True
            finish()
            current = start
            continue
        current = op.point
    finish()
    return subpaths


def winding_number(point: tuple[float, float], polygon_points: NDArray[np.float64]) -> int:
    """Compute winding number of point w.r.t. a closed ring (first point == last point).

    Non-zero → point is inside.
    """
    px, py = point
    x = polygon_points[:, 0]
    y = polygon_points[:, 1]
    n = len(x)

    wn = 0
    for i in range(n - 1):
        if y[i] <= py:
            if y[i + 1] > py:
                # Upward crossing
                cross = (x[i + 1] - x[i]) * (py - y[i]) - (px - x[i]) * (y[i + 1] - y[i])
                if cross > 0:
                    wn += 1
        else:
            if y[i + 1] <= py:
                # Downward crossing
                cross = (x[i + 1] - x[i]) * (py - y[i]) - (px - x[i]) * (y[i + 1] - y[i])
                if cross < 0:
                    wn -= 1
    return wn


def close_ring(points: NDArray[np.float64]) -> NDArray[np.float64]:
    """Return the points with the first point appended if the ring is open."""
    if len(points) and not np.array_equal(points[0], points[-1]):
        return np.vstack([points, points[:1]])
    return points


@dataclass(frozen=True)
class CanvasTransform:
    """Uniform scale + centring of the logical canvas into a display area."""

    scale: float = 1.0
    offset_x: float = 0.0
    offset_y: float = 0.0

    @classmethod
    def fit(cls, width: float, height: float, canvas: float = LOGICAL_CANVAS) -> CanvasTransform:
        scale = min(width, height) / canvas
        return cls(
            scale=scale,
            offset_x=(width - canvas * scale) / 2,
            offset_y=(height - canvas * scale) / 2,
        )

    def to_display(self, point: tuple[float, float]) -> tuple[float, float]:
        return (point[0] * self.scale + self.offset_x, point[1] * self.scale + self.offset_y)

    def to_logical(self, point: tuple[float, float]) -> tuple[float, float]:
        if self.scale == 0:
            return (0.0, 0.0)
        return ((point[0] - self.offset_x) / self.scale, (point[1] - self.offset_y) / self.scale)

    def apply(self, points: NDArray[np.float64]) -> NDArray[np.float64]:
        return points * self.scale + np.array([self.offset_x, self.offset_y])
