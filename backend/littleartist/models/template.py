"""Drawing template model."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field


class TemplateCategory(str, Enum):
    ALL = "all"
    SHAPES = "shapes"
    ANIMALS = "animals"
    NATURE = "nature"
    BUILDINGS = "buildings"
    VEHICLES = "vehicles"
    FANTASY = "fantasy"

    @property
    def label(self) -> str:
        return self.value.capitalize()


class Template(BaseModel):
    """A named outline the user draws over. `path_data` is the template markup."""

    id: str
    name: str
    path_data: str = Field(alias="svgPath")
    age_min: int = Field(default=6, alias="ageMin")
    age_max: int = Field(default=6, alias="ageMax")
    category: str = TemplateCategory.SHAPES.value

    model_config = {"populate_by_name": True}


class TemplateRecord(BaseModel):
    """Raw catalogue entry as stored in the templates JSON file."""

    id: str
    name: str
    category: str = ""
    age_min: int | None = Field(default=None, alias="ageMin")
    age_max: int | None = Field(default=None, alias="ageMax")
    svg_path: str = Field(alias="svgPath")
