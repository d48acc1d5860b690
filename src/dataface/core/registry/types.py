"""Registry index models.

The registry index is a JSON document published with the component sources:

  {
    "schema": "https://dataface.dev/schema/registry.json",
    "version": "1.0.0",
    "components": [{"name": "button", "registryDependencies": [], ...}],
    "categories": [{"name": "inputs", "display": "Inputs", "description": "..."}]
  }
"""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from dataface.core.registry.constants import MISC_CATEGORY


class Category(BaseModel):
    """Presentation grouping for components."""

    model_config = ConfigDict(frozen=True)

    name: str
    display: str
    description: str = ""


class ComponentMeta(BaseModel):
    """Registry entry describing one installable component."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str = Field(..., min_length=1)
    display: str = ""
    category: str | None = MISC_CATEGORY
    description: str = ""
    dependencies: list[str] = Field(default_factory=list)
    registry_dependencies: list[str] = Field(
        default_factory=list, alias="registryDependencies"
    )
    type: Literal["component", "utility"] = "component"
    files: list[str] = Field(default_factory=list)
    version: str = "1.0.0"

    @property
    def category_name(self) -> str:
        """Category key, with a missing category treated as "misc"."""
        return self.category or MISC_CATEGORY

    @property
    def has_styles(self) -> bool:
        """Only `component` entries ship per-style source directories."""
        return self.type == "component"


class Registry(BaseModel):
    """Root registry document. Loaded once per invocation, never mutated."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    schema_url: str = Field(..., alias="schema")
    version: str
    components: list[ComponentMeta]
    categories: list[Category] = Field(default_factory=list)

    def find_component(self, name: str) -> ComponentMeta | None:
        for component in self.components:
            if component.name == name:
                return component
        return None

    def find_category(self, name: str) -> Category | None:
        for category in self.categories:
            if category.name == name:
                return category
        return None

    def components_by_category(self) -> dict[str, list[ComponentMeta]]:
        """Group components by category key, in first-seen registry order."""
        groups: dict[str, list[ComponentMeta]] = {}
        for component in self.components:
            groups.setdefault(component.category_name, []).append(component)
        return groups
