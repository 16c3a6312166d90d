"""Template catalogue endpoints: listing, geometry, previews and tracing masks."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Query
from fastapi.responses import Response

from littleartist.api.geometry import build_geometry_response
from littleartist.config import settings
from littleartist.dependencies import get_template_store
from littleartist.engine.renderer import render_png
from littleartist.models.requests import ContainsRequest
from littleartist.models.responses import ContainsResponse, GeometryResponse, TemplateSummary
from littleartist.models.template import Template, TemplateCategory
from littleartist.svg.serializer import serialize_svg
from littleartist.templates.store import TemplateStore
from littleartist.utils.geometry import CanvasTransform

router = APIRouter(prefix="/templates")


def _get_or_404(store: TemplateStore, template_id: str) -> Template:
    template = store.get(template_id)
    if template is None:
        raise HTTPException(status_code=404, detail=f"Unknown template: {template_id}")
    return template


@router.get("", response_model=list[TemplateSummary])
def list_templates(
    age: int | None = Query(default=None, ge=0),
    category: TemplateCategory = TemplateCategory.ALL,
    q: str = "",
    store: TemplateStore = Depends(get_template_store),
) -> list[TemplateSummary]:
    return [
        TemplateSummary(
            id=t.id,
            name=t.name,
            category=t.category,
            age_min=t.age_min,
            age_max=t.age_max,
        )
        for t in store.filtered(age=age, category=category, query=q)
    ]


@router.get("/{template_id}", response_model=Template, response_model_by_alias=False)
def get_template(template_id: str, store: TemplateStore = Depends(get_template_store)) -> Template:
    return _get_or_404(store, template_id)


@router.get("/{template_id}/geometry", response_model=GeometryResponse)
def template_geometry(template_id: str, store: TemplateStore = Depends(get_template_store)) -> GeometryResponse:
    template = _get_or_404(store, template_id)
    return build_geometry_response(store.geometry(template), store.fill_region(template).path)


@router.get("/{template_id}/outline.svg")
def template_outline_svg(template_id: str, store: TemplateStore = Depends(get_template_store)) -> Response:
    template = _get_or_404(store, template_id)
    svg = serialize_svg(store.geometry(template), store.config.canvas_size, title=template.name)
    return Response(content=svg, media_type="image/svg+xml")


@router.get("/{template_id}/preview.png")
def template_preview(
    template_id: str,
    size: int | None = Query(default=None, ge=16, le=2048),
    store: TemplateStore = Depends(get_template_store),
) -> Response:
    template = _get_or_404(store, template_id)
    edge = size or settings.preview_size
    png = render_png(store.geometry(template), (edge, edge), store.config)
    return Response(content=png, media_type="image/png")


@router.post("/{template_id}/contains", response_model=ContainsResponse)
def template_contains(
    template_id: str,
    req: ContainsRequest,
    store: TemplateStore = Depends(get_template_store),
) -> ContainsResponse:
    template = _get_or_404(store, template_id)
    region = store.fill_region(template)
    display_size = (req.width, req.height)
    logical = CanvasTransform.fit(req.width, req.height, region.config.canvas_size).to_logical((req.x, req.y))
    return ContainsResponse(
        inside=region.contains_display((req.x, req.y), display_size),
        restricted=not region.is_empty,
        logical_point=logical,
    )
