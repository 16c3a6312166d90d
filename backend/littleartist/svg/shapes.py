"""Shape-tag adapter — primitive tag + attributes → GeometryElement.

A missing or unparsable required attribute drops that one element (returns
None); it never affects sibling tags.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Callable, Mapping

from littleartist.models.geometry import (
    ClosePath,
    CubicCurveTo,
    GeometryElement,
    LineTo,
    MoveTo,
    PathOperation,
    Point,
    VectorPath,
)
from littleartist.svg.path_parser import parse_path
from littleartist.svg.tokenizer import parse_number

logger = logging.getLogger(__name__)

DEFAULT_STROKE_WIDTH = 3.0

# Control-point distance for a quarter-circle cubic: 4/3 * (sqrt(2) - 1).
_KAPPA = 4.0 * (math.sqrt(2.0) - 1.0) / 3.0

SUPPORTED_TAGS = ("circle", "rect", "ellipse", "line", "polygon", "path")


def _numbers(attrs: Mapping[str, str], *names: str) -> list[float] | None:
    values: list[float] = []
    for name in names:
        v = parse_number(attrs.get(name))
        if v is None:
            logger.debug("Missing or invalid attribute %r", name)
            return None
        values.append(v)
    return values


def ellipse_path(cx: float, cy: float, rx: float, ry: float) -> VectorPath:
    """Ellipse inscribed in [cx-rx, cy-ry, 2rx, 2ry] as four cubic quarter arcs."""
    kx, ky = rx * _KAPPA, ry * _KAPPA
    return VectorPath(
        (
            MoveTo((cx + rx, cy)),
            CubicCurveTo((cx, cy + ry), (cx + rx, cy + ky), (cx + kx, cy + ry)),
            CubicCurveTo((cx - rx, cy), (cx - kx, cy + ry), (cx - rx, cy + ky)),
            CubicCurveTo((cx, cy - ry), (cx - rx, cy - ky), (cx - kx, cy - ry)),
            CubicCurveTo((cx + rx, cy), (cx + kx, cy - ry), (cx + rx, cy - ky)),
            ClosePath(),
        )
    )


def rect_path(x: float, y: float, width: float, height: float) -> VectorPath:
    return VectorPath(
        (
            MoveTo((x, y)),
            LineTo((x + width, y)),
            LineTo((x + width, y + height)),
            LineTo((x, y + height)),
            ClosePath(),
        )
    )


def parse_points(text: str) -> list[Point]:
    """Parse "x,y x,y ...". Groups without exactly two numbers are skipped."""
    points: list[Point] = []
    for group in text.split():
        parts = [p for p in group.split(",") if p]
        if len(parts) != 2:
            continue
        x, y = parse_number(parts[0]), parse_number(parts[1])
        if x is None or y is None:
            continue
        points.append((x, y))
    return points


def _circle(attrs: Mapping[str, str]) -> VectorPath | None:
    values = _numbers(attrs, "cx", "cy", "r")
    if values is None:
        return None
    cx, cy, r = values
    return ellipse_path(cx, cy, r, r)


def _ellipse(attrs: Mapping[str, str]) -> VectorPath | None:
    values = _numbers(attrs, "cx", "cy", "rx", "ry")
    if values is None:
        return None
    return ellipse_path(*values)


def _rect(attrs: Mapping[str, str]) -> VectorPath | None:
    values = _numbers(attrs, "x", "y", "width", "height")
    if values is None:
        return None
    return rect_path(*values)


def _line(attrs: Mapping[str, str]) -> VectorPath | None:
    values = _numbers(attrs, "x1", "y1", "x2", "y2")
    if values is None:
        return None
    x1, y1, x2, y2 = values
    return VectorPath((MoveTo((x1, y1)), LineTo((x2, y2))))


def _polygon(attrs: Mapping[str, str]) -> VectorPath | None:
    text = attrs.get("points")
    if text is None:
        return None
    points = parse_points(text)
    if not points:
        return None
    ops: list[PathOperation] = [MoveTo(points[0])]
    ops.extend(LineTo(p) for p in points[1:])
    ops.append(ClosePath())
    return VectorPath(tuple(ops))


def _path(attrs: Mapping[str, str]) -> VectorPath | None:
    d = attrs.get("d")
    if d is None:
        return None
    return parse_path(d)


_BUILDERS: dict[str, Callable[[Mapping[str, str]], VectorPath | None]] = {
    "circle": _circle,
    "ellipse": _ellipse,
    "rect": _rect,
    "line": _line,
    "polygon": _polygon,
    "path": _path,
}


def stroke_width_of(attrs: Mapping[str, str]) -> float:
    width = parse_number(attrs.get("stroke-width"))
    return DEFAULT_STROKE_WIDTH if width is None else width


def adapt(tag: str, attrs: Mapping[str, str]) -> GeometryElement | None:
    """Build the GeometryElement for one tag, or None if it must be dropped."""
    builder = _BUILDERS.get(tag)
    if builder is None:
        return None
    path = builder(attrs)
    if path is None:
        logger.debug("Dropped <%s> element with attributes %s", tag, dict(attrs))
        return None
    return GeometryElement(path=path, stroke_width=stroke_width_of(attrs), tag=tag)
