"""FastAPI dependency injection."""

from __future__ import annotations

from functools import lru_cache

from littleartist.config import settings
from littleartist.engine.config import RenderConfig
from littleartist.templates.store import TemplateStore


def get_render_config() -> RenderConfig:
    return RenderConfig(fill_rule=settings.fill_rule)


@lru_cache(maxsize=1)
def get_template_store() -> TemplateStore:
    return TemplateStore.load(settings.templates_file, config=get_render_config())
