"""POST /api/geometry/parse — template markup → outline geometry."""

from __future__ import annotations

from fastapi import APIRouter

from littleartist.models.geometry import GeometryElement, VectorPath
from littleartist.models.requests import ParseRequest
from littleartist.models.responses import ElementOut, GeometryResponse
from littleartist.svg.parser import combined_fill_region, scan
from littleartist.svg.serializer import to_path_data
from littleartist.utils.geometry import path_bbox

router = APIRouter(prefix="/geometry")


def build_geometry_response(elements: list[GeometryElement], fill_path: VectorPath) -> GeometryResponse:
    return GeometryResponse(
        elements=[
            ElementOut(
                tag=el.tag,
                path_data=to_path_data(el.path),
                stroke_width=el.stroke_width,
                bbox=path_bbox(el.path),
            )
            for el in elements
        ],
        fill_path_data=to_path_data(fill_path),
    )


@router.post("/parse", response_model=GeometryResponse)
def parse_markup(req: ParseRequest) -> GeometryResponse:
    return build_geometry_response(scan(req.markup), combined_fill_region(req.markup))
