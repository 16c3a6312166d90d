"""Master API router — mounts all endpoint routers."""

from __future__ import annotations

from fastapi import APIRouter

from littleartist.api import geometry, health, plans, templates

api_router = APIRouter(prefix="/api")

api_router.include_router(health.router)
api_router.include_router(templates.router)
api_router.include_router(geometry.router)
api_router.include_router(plans.router)
