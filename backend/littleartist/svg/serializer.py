"""Write path data and template markup."""

from __future__ import annotations

import html
import math

from littleartist.models.geometry import (
    ClosePath,
    CubicCurveTo,
    GeometryElement,
    LineTo,
    MoveTo,
    Point,
    QuadCurveTo,
    VectorPath,
)
from littleartist.models.plan import PlanElement, TemplatePlan


def _num(v: float) -> str:
    """At most 3 decimals, no exponent (the tokenizer would read 'e' as a command)."""
    text = f"{v:.3f}".rstrip("0").rstrip(".")
    return "0" if text in ("-0", "") else text


def _pt(p: Point) -> str:
    return f"{_num(p[0])} {_num(p[1])}"


def to_path_data(path: VectorPath) -> str:
    """Serialize a VectorPath as absolute M/L/C/Q/Z path data."""
    parts: list[str] = []
    for op in path:
        if isinstance(op, MoveTo):
            parts.append(f"M{_pt(op.point)}")
        elif isinstance(op, LineTo):
            parts.append(f"L{_pt(op.point)}")
        elif isinstance(op, CubicCurveTo):
            parts.append(f"C{_pt(op.control1)} {_pt(op.control2)} {_pt(op.point)}")
        elif isinstance(op, QuadCurveTo):
            parts.append(f"Q{_pt(op.control)} {_pt(op.point)}")
        elif isinstance(op, ClosePath):
            parts.append("Z")
    return " ".join(parts)


def _round(v: float) -> int:
    """Round half away from zero."""
    return int(math.copysign(math.floor(abs(v) + 0.5), v))


def _element_markup(el: PlanElement) -> str | None:
    sw = _round(el.stroke_width)
    if el.type == "circle":
        cx, cy = _round(el.cx if el.cx is not None else 200), _round(el.cy if el.cy is not None else 200)
        r = _round(el.r if el.r is not None else 40)
        return f'<circle cx="{cx}" cy="{cy}" r="{r}" stroke-width="{sw}"/>'
    if el.type == "rect":
        x, y = _round(el.x if el.x is not None else 100), _round(el.y if el.y is not None else 100)
        w = _round(el.width if el.width is not None else 200)
        h = _round(el.height if el.height is not None else 160)
        return f'<rect x="{x}" y="{y}" width="{w}" height="{h}" stroke-width="{sw}"/>'
    if el.type == "line":
        x1, y1 = _round(el.x1 if el.x1 is not None else 100), _round(el.y1 if el.y1 is not None else 100)
        x2, y2 = _round(el.x2 if el.x2 is not None else 300), _round(el.y2 if el.y2 is not None else 300)
        return f'<line x1="{x1}" y1="{y1}" x2="{x2}" y2="{y2}" stroke-width="{sw}"/>'
    if el.type == "polygon":
        pts = " ".join(f"{_num(p[0])},{_num(p[1])}" for p in el.points or [] if len(p) >= 2)
        return f'<polygon points="{pts}" stroke-width="{sw}"/>'
    if el.type == "ellipse":
        # Plans carry ellipse radii in width/height
        cx, cy = _round(el.cx if el.cx is not None else 200), _round(el.cy if el.cy is not None else 200)
        rx = _round(el.width if el.width is not None else 60)
        ry = _round(el.height if el.height is not None else 40)
        return f'<ellipse cx="{cx}" cy="{cy}" rx="{rx}" ry="{ry}" stroke-width="{sw}"/>'
    return None


def plan_to_markup(plan: TemplatePlan) -> str:
    """Emit template markup, one tag per plan element."""
    lines = [m for m in (_element_markup(el) for el in plan.elements) if m is not None]
    return "\n".join(lines)


def serialize_svg(
    elements: list[GeometryElement],
    canvas_size: float = 400.0,
    title: str = "",
    stroke: str = "currentColor",
) -> str:
    """Standalone SVG document drawing each element as a stroked outline path."""
    size = _num(canvas_size)
    lines = [
        '<?xml version="1.0" encoding="UTF-8"?>',
        f'<svg viewBox="0 0 {size} {size}" xmlns="http://www.w3.org/2000/svg"'
        f' fill="none" stroke="{stroke}" stroke-linecap="round" stroke-linejoin="round">',
    ]

    if title:
        lines.append(f"  <title>{html.escape(title)}</title>")

    for elem in elements:
        lines.append(f'  <path d="{to_path_data(elem.path)}" stroke-width="{_num(elem.stroke_width)}" />')

    lines.append("</svg>")
    return "\n".join(lines)
