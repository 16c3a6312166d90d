"""Tests for geometry helpers over VectorPath."""

from __future__ import annotations

import numpy as np
import pytest

from littleartist.models.geometry import VectorPath
from littleartist.svg.parser import scan
from littleartist.svg.path_parser import parse_path
from littleartist.utils.geometry import (
    CanvasTransform,
    close_ring,
    flatten_path,
    path_bbox,
    path_segments,
    winding_number,
)
from tests.conftest import CIRCLE_MARKUP


def test_path_segments_include_closing_line():
    segs = list(path_segments(parse_path("M0 0 L10 0 L10 10 Z")))
    assert len(segs) == 3
    assert segs[-1].start == complex(10, 10)
    assert segs[-1].end == 0j


def test_path_bbox_line():
    assert path_bbox(parse_path("M10 20 L30 5")) == pytest.approx((10.0, 5.0, 30.0, 20.0))


def test_path_bbox_quadratic_uses_curve_extrema():
    # Apex of this quadratic is at y=50, not at the control point y=100
    xmin, ymin, xmax, ymax = path_bbox(parse_path("M0 0 Q50 100 100 0"))
    assert ymax == pytest.approx(50.0)
    assert (xmin, ymin, xmax) == pytest.approx((0.0, 0.0, 100.0))


def test_path_bbox_empty_and_single_point():
    assert path_bbox(VectorPath()) == (0.0, 0.0, 0.0, 0.0)
    assert path_bbox(parse_path("M7 8")) == (7.0, 8.0, 7.0, 8.0)


def test_flatten_rect():
    (sp,) = flatten_path(parse_path("M0 0 L10 0 L10 10 L0 10 Z"))
    assert sp.closed
    assert sp.points.shape == (5, 2)
    assert np.array_equal(sp.points[0], sp.points[-1])


def test_flatten_circle_samples_curves():
    (el,) = scan(CIRCLE_MARKUP)
    (sp,) = flatten_path(el.path, samples=8)
    assert sp.closed
    assert len(sp.points) >= 33
    radii = np.hypot(sp.points[:, 0] - 200, sp.points[:, 1] - 200)
    assert radii == pytest.approx(np.full(len(radii), 50.0), abs=0.1)


def test_flatten_open_and_multiple_subpaths():
    subpaths = flatten_path(parse_path("M0 0 L5 5 M10 10 L20 10 L20 20 Z"))
    assert len(subpaths) == 2
    assert not subpaths[0].closed
    assert subpaths[1].closed


def test_flatten_continues_after_close():
    subpaths = flatten_path(parse_path("M0 0 L10 0 L10 10 Z L0 10"))
    assert len(subpaths) == 2
    assert subpaths[1].points.tolist() == [[0.0, 0.0], [0.0, 10.0]]


def test_flatten_move_only():
    (sp,) = flatten_path(parse_path("M3 4"))
    assert sp.points.tolist() == [[3.0, 4.0]]


def test_winding_number_square():
    ring = close_ring(np.array([[0, 0], [10, 0], [10, 10], [0, 10]], dtype=float))
    assert len(ring) == 5
    assert winding_number((5, 5), ring) != 0
    assert winding_number((15, 5), ring) == 0


def test_canvas_transform_fit_square():
    t = CanvasTransform.fit(800, 800)
    assert t.scale == 2.0
    assert (t.offset_x, t.offset_y) == (0.0, 0.0)


def test_canvas_transform_fit_centres_wide_display():
    t = CanvasTransform.fit(800, 400)
    assert t.scale == 1.0
    assert t.offset_x == 200.0
    assert t.to_display((200, 200)) == (400.0, 200.0)
    assert t.to_logical((400, 200)) == (200.0, 200.0)


def test_canvas_transform_apply_matches_to_display():
    t = CanvasTransform.fit(300, 100)
    pts = np.array([[0.0, 0.0], [400.0, 400.0]])
    out = t.apply(pts)
    assert tuple(out[0]) == pytest.approx(t.to_display((0, 0)))
    assert tuple(out[1]) == pytest.approx(t.to_display((400, 400)))
