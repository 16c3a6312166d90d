"""Shared test fixtures."""

from __future__ import annotations

import pytest

# Template markup in the 400x400 logical canvas

CIRCLE_MARKUP = '<circle cx="200" cy="200" r="50"/>'

HOUSE_MARKUP = '''<rect x="90" y="180" width="220" height="180" stroke-width="5"/>
<polygon points="70,190 200,70 330,190" stroke-width="5"/>
<rect x="175" y="270" width="50" height="90" stroke-width="4"/>'''

MIXED_MARKUP = '''<circle cx="100" cy="100" r="40" stroke-width="4"/>
<rect x="200" y="200" width="100" height="50"/>
<polygon points="10,10 50,10 30,40"/>
<line x1="0" y1="0" x2="400" y2="400" stroke-width="2"/>
<ellipse cx="300" cy="100" rx="60" ry="30"/>
<path d="M10 300 L60 300 Q80 350 60 380 Z" stroke-width="6"/>'''

ISOLATION_MARKUP = '<circle cx="1" cy="1"/><rect x="0" y="0" width="10" height="10"/>'

LINES_ONLY_MARKUP = '<line x1="0" y1="0" x2="100" y2="100"/><line x1="0" y1="100" x2="100" y2="0"/>'

FRAME_MARKUP = '<rect x="0" y="0" width="400" height="400"/><rect x="100" y="100" width="200" height="200"/>'


@pytest.fixture
def circle_markup() -> str:
    return CIRCLE_MARKUP


@pytest.fixture
def house_markup() -> str:
    return HOUSE_MARKUP


@pytest.fixture
def mixed_markup() -> str:
    return MIXED_MARKUP
