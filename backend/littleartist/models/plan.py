"""Template plan models — structured primitive lists that become template markup."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field


class PlanElement(BaseModel):
    """One primitive in a plan. Only the fields relevant to `type` are used."""

    type: Literal["circle", "rect", "line", "polygon", "ellipse"]
    stroke_width: float = Field(default=3.0, alias="strokeWidth")
    cx: float | None = None
    cy: float | None = None
    r: float | None = None
    x: float | None = None
    y: float | None = None
    width: float | None = None
    height: float | None = None
    x1: float | None = None
    y1: float | None = None
    x2: float | None = None
    y2: float | None = None
    points: list[list[float]] | None = None

    model_config = {"populate_by_name": True}


class TemplatePlan(BaseModel):
    name: str
    elements: list[PlanElement] = Field(default_factory=list)
