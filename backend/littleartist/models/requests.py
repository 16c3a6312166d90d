"""API request models."""

from __future__ import annotations

from pydantic import BaseModel, Field

from littleartist.models.plan import TemplatePlan


class ParseRequest(BaseModel):
    markup: str = Field(..., description="Template markup (circle/rect/ellipse/line/polygon/path tags)")


class ContainsRequest(BaseModel):
    x: float = Field(..., description="Touch x coordinate in display space")
    y: float = Field(..., description="Touch y coordinate in display space")
    width: float = Field(default=400.0, gt=0, description="Display area width")
    height: float = Field(default=400.0, gt=0, description="Display area height")


class PlanMarkupRequest(BaseModel):
    plan: TemplatePlan
    width: float = Field(default=400.0, gt=0, description="Canvas width the plan is clamped to")
    height: float = Field(default=400.0, gt=0, description="Canvas height the plan is clamped to")
