"""POST /api/plans/markup — clamp a template plan and emit its markup."""

from __future__ import annotations

from fastapi import APIRouter

from littleartist.models.requests import PlanMarkupRequest
from littleartist.models.responses import PlanMarkupResponse
from littleartist.svg.parser import scan
from littleartist.svg.serializer import plan_to_markup
from littleartist.templates.planner import validate_and_clamp

router = APIRouter(prefix="/plans")


@router.post("/markup", response_model=PlanMarkupResponse)
def plan_markup(req: PlanMarkupRequest) -> PlanMarkupResponse:
    plan = validate_and_clamp(req.plan, bounds=(req.width, req.height))
    markup = plan_to_markup(plan)
    return PlanMarkupResponse(markup=markup, element_count=len(scan(markup)))
