"""Outline renderer — GeometryElements → stroked template preview.

Each element is stroked independently with round caps and joins, then all
strokes are composited as one ink layer. Strokes are built by buffering the
flattened polylines with Shapely and filling the result with Pillow.
"""

from __future__ import annotations

import io
import logging

from PIL import Image, ImageChops, ImageDraw
from shapely.geometry import LineString, Point
from shapely.ops import unary_union

from littleartist.engine.config import RenderConfig
from littleartist.models.geometry import GeometryElement
from littleartist.utils.geometry import CanvasTransform, flatten_path

logger = logging.getLogger(__name__)


def _stroke_shape(element: GeometryElement, transform: CanvasTransform, config: RenderConfig):
    """Display-space polygon(s) covered by the element's stroke."""
    width = max(config.min_stroke_px, element.stroke_width * transform.scale)
    pieces = []
    for sp in flatten_path(element.path, config.curve_samples):
        pts = transform.apply(sp.points)
        if len(pts) == 1:
            pieces.append(Point(pts[0]).buffer(width / 2))
        else:
            pieces.append(
                LineString(pts).buffer(width / 2, cap_style="round", join_style="round")
            )
    if not pieces:
        return None
    return unary_union(pieces)


def _draw_geometry(draw: ImageDraw.ImageDraw, geom) -> None:
    """Fill polygon exteriors and punch out their holes."""
    for poly in getattr(geom, "geoms", [geom]):
        if poly.is_empty or poly.geom_type != "Polygon":
            continue
        draw.polygon(list(poly.exterior.coords), fill=255)
        for interior in poly.interiors:
            draw.polygon(list(interior.coords), fill=0)


def render_outline(
    elements: list[GeometryElement],
    size: tuple[int, int],
    config: RenderConfig | None = None,
) -> Image.Image:
    """Render template outlines into an RGBA image of the given pixel size."""
    config = config or RenderConfig()
    width, height = size
    transform = CanvasTransform.fit(width, height, config.canvas_size)

    layer = Image.new("L", (width, height), 0)
    for element in elements:
        geom = _stroke_shape(element, transform, config)
        if geom is None or geom.is_empty:
            continue
        mask = Image.new("L", (width, height), 0)
        _draw_geometry(ImageDraw.Draw(mask), geom)
        layer = ImageChops.lighter(layer, mask)

    alpha = layer.point(lambda v: round(v * config.ink_opacity))
    canvas = Image.new("RGBA", (width, height), config.background)
    canvas.paste(config.ink_color + (255,), (0, 0, width, height), alpha)

    logger.debug("Rendered %d elements at %dx%d (scale %.3f)", len(elements), width, height, transform.scale)
    return canvas


def render_png(
    elements: list[GeometryElement],
    size: tuple[int, int],
    config: RenderConfig | None = None,
) -> bytes:
    """Render template outlines and encode them as PNG."""
    buf = io.BytesIO()
    render_outline(elements, size, config).save(buf, format="PNG")
    return buf.getvalue()
