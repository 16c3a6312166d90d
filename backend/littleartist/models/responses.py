"""API response models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"
    templates_loaded: int = 0


class TemplateSummary(BaseModel):
    id: str
    name: str
    category: str
    age_min: int
    age_max: int


class ElementOut(BaseModel):
    tag: str
    path_data: str
    stroke_width: float
    bbox: tuple[float, float, float, float]


class GeometryResponse(BaseModel):
    elements: list[ElementOut] = Field(default_factory=list)
    fill_path_data: str = ""
    canvas_size: float = 400.0


class ContainsResponse(BaseModel):
    inside: bool
    # False when the template has no fillable area (no containment restriction)
    restricted: bool = True
    logical_point: tuple[float, float] = (0.0, 0.0)


class PlanMarkupResponse(BaseModel):
    markup: str
    element_count: int = 0
