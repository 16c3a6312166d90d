"""Tests for fill-region containment."""

from __future__ import annotations

import pytest

from littleartist.engine.config import RenderConfig
from littleartist.engine.fill_region import FillRegion
from tests.conftest import CIRCLE_MARKUP, FRAME_MARKUP, LINES_ONLY_MARKUP

OVERLAPPING_CIRCLES = '<circle cx="150" cy="200" r="100"/><circle cx="250" cy="200" r="100"/>'


def test_circle_containment():
    region = FillRegion.from_markup(CIRCLE_MARKUP)
    assert not region.is_empty
    assert region.contains((200, 200))
    assert region.contains((230, 210))
    assert not region.contains((260, 200))
    assert not region.contains((10, 10))


def test_overlap_nonzero_vs_evenodd():
    nonzero = FillRegion.from_markup(OVERLAPPING_CIRCLES)
    evenodd = FillRegion.from_markup(OVERLAPPING_CIRCLES, RenderConfig(fill_rule="evenodd"))
    assert nonzero.contains((200, 201))
    assert not evenodd.contains((200, 201))
    # Covered by one circle only
    assert evenodd.contains((90, 201))


def test_nested_rects_hole_under_evenodd():
    nonzero = FillRegion.from_markup(FRAME_MARKUP)
    evenodd = FillRegion.from_markup(FRAME_MARKUP, RenderConfig(fill_rule="evenodd"))
    assert nonzero.contains((200, 201))
    assert not evenodd.contains((200, 201))
    assert evenodd.contains((50, 51))


def test_open_path_is_implicitly_closed():
    region = FillRegion.from_markup('<path d="M100 100 L300 100 L300 300"/>')
    assert region.contains((250, 150))
    assert not region.contains((150, 250))


def test_lines_only_region_is_empty():
    region = FillRegion.from_markup(LINES_ONLY_MARKUP)
    assert region.is_empty
    assert not region.contains((50, 51))


def test_contains_display_inverse_maps_point():
    region = FillRegion.from_markup(CIRCLE_MARKUP)
    # 800x400 display: scale 1, logical canvas starts at x=200
    assert region.contains_display((400, 200), (800, 400))
    assert not region.contains_display((200, 200), (800, 400))
    # 200x200 display: scale 0.5
    assert region.contains_display((100, 100), (200, 200))
    assert not region.contains_display((140, 100), (200, 200))


def test_unknown_fill_rule():
    with pytest.raises(ValueError):
        FillRegion.from_markup(CIRCLE_MARKUP, RenderConfig(fill_rule="winding"))


def test_engine_package_exports():
    from littleartist import engine

    region = engine.FillRegion.from_markup(CIRCLE_MARKUP, engine.RenderConfig())
    assert region.contains((200.0, 200.0))
    assert engine.render_outline is not None and engine.render_png is not None
