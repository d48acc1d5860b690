"""Project configuration stored in components.json.

components.json is created by `dataface init` and read by every other
command. It is never migrated: a missing file or a file that fails validation
stops the command with an error naming the offending field. Unknown keys such
as "$schema" are ignored.

Example components.json:
  {
    "style": "default",
    "rsc": true,
    "tsx": true,
    "tailwind": {
      "config": "tailwind.config.js",
      "css": "app/globals.css",
      "baseColor": "slate",
      "cssVariables": true
    },
    "aliases": {
      "components": "@/components",
      "utils": "@/lib/utils"
    }
  }
"""

import json
from pathlib import Path
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, StrictBool, ValidationError

from dataface.core.errors import ConfigInvalidError, ConfigMissingError

CONFIG_FILENAME = "components.json"

Style = Literal["default", "minimal", "linear"]
STYLES: tuple[Style, ...] = ("default", "minimal", "linear")


class TailwindConfig(BaseModel):
    """Tailwind settings used by init and by style-aware components."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    config: str
    css: str
    base_color: str = Field(..., alias="baseColor")
    css_variables: StrictBool = Field(..., alias="cssVariables")


class Aliases(BaseModel):
    """Import-path prefixes keyed by logical name.

    `components` and `utils` are required; any further keys (e.g. `hooks`)
    are kept and take part in import rewriting.
    """

    model_config = ConfigDict(frozen=True, extra="allow")
    __pydantic_extra__: dict[str, str] = Field(init=False)

    components: str
    utils: str

    def as_mapping(self) -> dict[str, str]:
        """Return every alias as a plain dict, required keys first."""
        return self.model_dump()


class ProjectConfig(BaseModel):
    """Validated contents of components.json."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    style: Style
    rsc: StrictBool
    tsx: StrictBool
    tailwind: TailwindConfig
    aliases: Aliases


_TYPE_REASONS = {
    "missing": "is a required field",
    "literal_error": "must be one of: " + ", ".join(STYLES),
    "bool_type": "must be a boolean",
    "string_type": "must be a string",
    "model_type": "must be an object",
    "model_attributes_type": "must be an object",
    "dict_type": "must be an object",
}


def _describe_validation_error(error: ValidationError) -> ConfigInvalidError:
    """Convert the first pydantic error into a ConfigInvalidError with a dotted path."""
    first = error.errors()[0]
    loc = first.get("loc", ())
    field = ".".join(str(part) for part in loc) if loc else CONFIG_FILENAME
    reason = _TYPE_REASONS.get(first["type"], first["msg"])
    return ConfigInvalidError(field, reason)


def validate_config(data: Any) -> ProjectConfig:
    """Validate raw JSON data as a ProjectConfig.

    Raises:
        ConfigInvalidError: Naming the first invalid field and why
    """
    try:
        return ProjectConfig.model_validate(data)
    except ValidationError as e:
        raise _describe_validation_error(e) from e


def config_path(project_root: Path) -> Path:
    return project_root / CONFIG_FILENAME


def config_exists(project_root: Path) -> bool:
    return config_path(project_root).exists()


def load_config(project_root: Path) -> ProjectConfig:
    """Load and validate components.json from project_root.

    Raises:
        ConfigMissingError: If components.json does not exist
        ConfigInvalidError: If it is not valid JSON or fails validation
    """
    path = config_path(project_root)
    if not path.exists():
        raise ConfigMissingError()

    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise ConfigInvalidError(CONFIG_FILENAME, f"is not valid JSON ({e.msg})") from e

    return validate_config(data)


def config_to_json(config: ProjectConfig) -> str:
    return json.dumps(config.model_dump(by_alias=True), indent=2) + "\n"


def write_config(project_root: Path, config: ProjectConfig) -> Path:
    """Write components.json with 2-space indentation and return its path."""
    path = config_path(project_root)
    path.write_text(config_to_json(config), encoding="utf-8")
    return path


def create_config(
    *,
    style: Style = "default",
    rsc: bool = True,
    tsx: bool = True,
    tailwind_config: str = "tailwind.config.js",
    tailwind_css: str = "app/globals.css",
    base_color: str = "slate",
    css_variables: bool = True,
    components_alias: str = "@/components",
    utils_alias: str = "@/lib/utils",
) -> ProjectConfig:
    """Build a ProjectConfig from init answers, filling defaults."""
    return ProjectConfig(
        style=style,
        rsc=rsc,
        tsx=tsx,
        tailwind=TailwindConfig(
            config=tailwind_config,
            css=tailwind_css,
            base_color=base_color,
            css_variables=css_variables,
        ),
        aliases=Aliases(components=components_alias, utils=utils_alias),
    )
