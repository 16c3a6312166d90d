"""Tests for the shape-tag adapter."""

from __future__ import annotations

import pytest

from littleartist.models.geometry import ClosePath, CubicCurveTo, LineTo, MoveTo
from littleartist.svg.shapes import DEFAULT_STROKE_WIDTH, adapt, parse_points
from littleartist.utils.geometry import path_bbox


def test_circle_is_closed_ellipse():
    el = adapt("circle", {"cx": "200", "cy": "200", "r": "50"})
    assert el is not None
    ops = el.path.operations
    assert ops[0] == MoveTo((250.0, 200.0))
    assert sum(isinstance(op, CubicCurveTo) for op in ops) == 4
    assert ops[-1] == ClosePath()
    assert el.stroke_width == DEFAULT_STROKE_WIDTH
    assert el.tag == "circle"


def test_ellipse_bbox():
    el = adapt("ellipse", {"cx": "200", "cy": "200", "rx": "100", "ry": "50"})
    assert path_bbox(el.path) == pytest.approx((100.0, 150.0, 300.0, 250.0))


def test_rect_path():
    el = adapt("rect", {"x": "10", "y": "20", "width": "30", "height": "40"})
    assert el.path.operations == (
        MoveTo((10.0, 20.0)),
        LineTo((40.0, 20.0)),
        LineTo((40.0, 60.0)),
        LineTo((10.0, 60.0)),
        ClosePath(),
    )


def test_line_is_open():
    el = adapt("line", {"x1": "0", "y1": "0", "x2": "10", "y2": "5"})
    assert el.path.operations == (MoveTo((0.0, 0.0)), LineTo((10.0, 5.0)))


def test_polygon_skips_malformed_point_groups():
    el = adapt("polygon", {"points": "1,2 3 4,5"})
    assert el.path.operations == (MoveTo((1.0, 2.0)), LineTo((4.0, 5.0)), ClosePath())


def test_polygon_without_valid_points_is_dropped():
    assert adapt("polygon", {"points": "a,b 3"}) is None
    assert adapt("polygon", {}) is None


def test_path_delegates_to_interpreter():
    el = adapt("path", {"d": "M0 0 L5 5", "stroke-width": "2"})
    assert el.path.operations == (MoveTo((0.0, 0.0)), LineTo((5.0, 5.0)))
    assert el.stroke_width == 2.0


def test_path_without_d_is_dropped():
    assert adapt("path", {"stroke-width": "2"}) is None


@pytest.mark.parametrize(
    "tag, attrs",
    [
        ("circle", {"cx": "1", "cy": "1"}),
        ("circle", {"cx": "1", "cy": "1", "r": "big"}),
        ("ellipse", {"cx": "1", "cy": "1", "rx": "2"}),
        ("rect", {"x": "0", "y": "0", "width": "10"}),
        ("line", {"x1": "0", "y1": "0", "x2": "", "y2": "1"}),
    ],
)
def test_missing_or_invalid_required_attribute_drops_element(tag, attrs):
    assert adapt(tag, attrs) is None


def test_unknown_tag():
    assert adapt("text", {"x": "1"}) is None


@pytest.mark.parametrize("value, expected", [("7.5", 7.5), ("abc", 3.0), ("", 3.0), ("-2", -2.0)])
def test_stroke_width_parsing(value, expected):
    el = adapt("line", {"x1": "0", "y1": "0", "x2": "1", "y2": "1", "stroke-width": value})
    assert el.stroke_width == expected


def test_parse_points_whitespace_variants():
    assert parse_points("0,0\n10,0\t10,10") == [(0.0, 0.0), (10.0, 0.0), (10.0, 10.0)]
    assert parse_points("1,2,3 4,5") == [(4.0, 5.0)]
