"""Template markup parser — flat regex scan over the supported shape tags.

Converts a template's markup string → ordered GeometryElement list, and
derives the compound fill region used for masking freehand strokes.
Not an XML parser: no nesting, namespaces or entity decoding.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterator

from littleartist.models.geometry import GeometryElement, VectorPath
from littleartist.svg.shapes import SUPPORTED_TAGS, adapt

logger = logging.getLogger(__name__)

_TAG_RE = re.compile(r"<(" + "|".join(SUPPORTED_TAGS) + r")\b[^>]*/?>")
_ATTR_RE = re.compile(r'([\w:-]+)\s*=\s*"([^"]+)"')

# Tags with no interior, excluded from the fill region
_UNFILLED_TAGS = frozenset({"line"})


def extract_attrs(tag_text: str) -> dict[str, str]:
    """Extract name → value for every non-empty quoted attribute in one tag.

    First occurrence wins; `name=""` is treated as absent.
    """
    attrs: dict[str, str] = {}
    for m in _ATTR_RE.finditer(tag_text):
        attrs.setdefault(m.group(1), m.group(2))
    return attrs


def iter_tags(document: str) -> Iterator[tuple[str, dict[str, str]]]:
    """Yield (tag name, attribute map) for each supported tag in source order."""
    for match in _TAG_RE.finditer(document):
        tag = match.group(1)
        # Skip "<tag" so the tag name itself is never read as an attribute
        body = match.group(0)[len(tag) + 1 :]
        yield tag, extract_attrs(body)


def scan(document: str) -> list[GeometryElement]:
    """Parse template markup into GeometryElements in document order."""
    elements: list[GeometryElement] = []
    for tag, attrs in iter_tags(document):
        element = adapt(tag, attrs)
        if element is not None:
            elements.append(element)

    logger.info("Parsed template markup: %d elements", len(elements))
    return elements


def combined_fill_region(document: str) -> VectorPath:
    """Concatenate every fillable element path into one compound path.

    No boolean union: the fill rule applied downstream produces the combined
    interior. Lines contribute no area and are skipped.
    """
    paths: list[VectorPath] = []
    for tag, attrs in iter_tags(document):
        if tag in _UNFILLED_TAGS:
            continue
        element = adapt(tag, attrs)
        if element is not None:
            paths.append(element.path)
    return VectorPath.concat(paths)
