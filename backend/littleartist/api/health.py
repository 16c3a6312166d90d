"""Health check."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from littleartist.dependencies import get_template_store
from littleartist.models.responses import HealthResponse
from littleartist.templates.store import TemplateStore

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
def health(store: TemplateStore = Depends(get_template_store)) -> HealthResponse:
    return HealthResponse(status="ok", version="0.1.0", templates_loaded=len(store))
