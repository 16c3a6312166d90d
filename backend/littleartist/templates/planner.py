"""Plan validation — clamp a structured template plan into the logical canvas."""

from __future__ import annotations

import logging

from littleartist.models.plan import PlanElement, TemplatePlan

logger = logging.getLogger(__name__)

MAX_ELEMENTS = 30
STROKE_MIN = 1.0
STROKE_MAX = 12.0

_X_FIELDS = ("cx", "x", "width", "x1", "x2")
_Y_FIELDS = ("cy", "y", "height", "y1", "y2")


def _clamp(v: float, lo: float, hi: float) -> float:
    return float(min(hi, max(lo, v)))


def _clamp_element(el: PlanElement, max_w: float, max_h: float) -> PlanElement:
    updates: dict[str, object] = {
        "stroke_width": _clamp(el.stroke_width, STROKE_MIN, STROKE_MAX),
    }
    for name in _X_FIELDS:
        value = getattr(el, name)
        if value is not None:
            updates[name] = _clamp(value, 0, max_w)
    for name in _Y_FIELDS:
        value = getattr(el, name)
        if value is not None:
            updates[name] = _clamp(value, 0, max_h)
    if el.r is not None:
        updates["r"] = _clamp(el.r, 0, min(max_w, max_h))
    if el.points is not None:
        points = []
        for p in el.points:
            if len(p) >= 2:
                p = [_clamp(p[0], 0, max_w), _clamp(p[1], 0, max_h), *p[2:]]
            points.append(p)
        updates["points"] = points
    return el.model_copy(update=updates)


def validate_and_clamp(
    plan: TemplatePlan,
    bounds: tuple[float, float] = (400.0, 400.0),
    max_elements: int = MAX_ELEMENTS,
) -> TemplatePlan:
    """Return a copy of the plan truncated to `max_elements` with every value clamped."""
    max_w, max_h = bounds
    elements = plan.elements
    if len(elements) > max_elements:
        logger.info("Plan %r truncated from %d to %d elements", plan.name, len(elements), max_elements)
        elements = elements[:max_elements]
    return plan.model_copy(update={"elements": [_clamp_element(el, max_w, max_h) for el in elements]})
