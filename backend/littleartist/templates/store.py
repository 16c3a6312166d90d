"""Template catalogue — load, normalise, filter and look up drawing templates.

Geometry parsed from a template's markup is cached per markup string; the
parser itself stays stateless.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable
from pathlib import Path

from pydantic import ValidationError

from littleartist.engine.config import RenderConfig
from littleartist.engine.fill_region import FillRegion
from littleartist.models.geometry import GeometryElement
from littleartist.models.template import Template, TemplateCategory, TemplateRecord
from littleartist.svg.parser import scan

logger = logging.getLogger(__name__)

DEFAULT_TEMPLATES_FILE = Path(__file__).resolve().parent.parent / "data" / "drawing_templates.json"

AGE_LOWER = 3
AGE_UPPER = 12
DEFAULT_AGE = 6


def _clamp_age(age: int) -> int:
    return max(AGE_LOWER, min(AGE_UPPER, age))


def normalize_record(record: TemplateRecord) -> Template:
    """Catalogue entry → Template: default/clamp ages, unknown categories become shapes."""
    try:
        category = TemplateCategory(record.category)
    except ValueError:
        category = TemplateCategory.SHAPES
    age_min = _clamp_age(record.age_min if record.age_min is not None else DEFAULT_AGE)
    age_max = _clamp_age(record.age_max if record.age_max is not None else age_min)
    return Template(
        id=record.id,
        name=record.name,
        path_data=record.svg_path,
        age_min=age_min,
        age_max=age_max,
        category=category.value,
    )


class TemplateStore:
    """In-memory catalogue of drawing templates."""

    def __init__(self, templates: Iterable[Template] = (), config: RenderConfig | None = None) -> None:
        self.config = config or RenderConfig()
        self._templates: list[Template] = list(templates)
        self._geometry_cache: dict[str, tuple[GeometryElement, ...]] = {}
        self._fill_cache: dict[str, FillRegion] = {}

    @classmethod
    def load(cls, path: Path | None = None, config: RenderConfig | None = None) -> TemplateStore:
        """Load a JSON list of catalogue records. A missing file yields an empty store."""
        path = path or DEFAULT_TEMPLATES_FILE
        if not path.exists():
            logger.warning("Templates file not found: %s", path)
            return cls(config=config)

        data = json.loads(path.read_text(encoding="utf-8"))
        if not isinstance(data, list):
            raise ValueError(f"Templates file must contain a JSON list: {path}")

        templates: list[Template] = []
        for i, item in enumerate(data):
            try:
                record = TemplateRecord.model_validate(item)
            except ValidationError as e:
                logger.warning("Skipping template record %d: %s", i, e)
                continue
            templates.append(normalize_record(record))

        logger.info("Loaded %d templates from %s", len(templates), path)
        return cls(templates, config=config)

    def __len__(self) -> int:
        return len(self._templates)

    @property
    def all(self) -> list[Template]:
        return list(self._templates)

    def add(self, template: Template) -> None:
        self._templates.append(template)

    def get(self, template_id: str) -> Template | None:
        for t in self._templates:
            if t.id == template_id:
                return t
        return None

    def filtered(
        self,
        age: int | None = None,
        category: TemplateCategory = TemplateCategory.ALL,
        query: str = "",
    ) -> list[Template]:
        """Templates for the given age, category and search text, sorted by name."""
        q = query.strip().lower()
        result = []
        for t in self._templates:
            if age is not None and not (t.age_min <= age <= t.age_max):
                continue
            if category != TemplateCategory.ALL and t.category.lower() != category.value:
                continue
            if q and q not in t.name.lower() and q not in t.category.lower():
                continue
            result.append(t)
        return sorted(result, key=lambda t: t.name)

    def geometry(self, template: Template) -> list[GeometryElement]:
        markup = template.path_data
        if markup not in self._geometry_cache:
            self._geometry_cache[markup] = tuple(scan(markup))
        return list(self._geometry_cache[markup])

    def fill_region(self, template: Template) -> FillRegion:
        markup = template.path_data
        if markup not in self._fill_cache:
            self._fill_cache[markup] = FillRegion.from_markup(markup, self.config)
        return self._fill_cache[markup]
