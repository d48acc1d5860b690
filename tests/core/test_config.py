"""Tests for components.json loading, validation and writing."""

import json
from pathlib import Path

import pytest

from dataface.core.config import (
    config_exists,
    create_config,
    load_config,
    validate_config,
    write_config,
)
from dataface.core.errors import ConfigInvalidError, ConfigMissingError


def _valid_data() -> dict:
    return {
        "style": "default",
        "rsc": True,
        "tsx": True,
        "tailwind": {
            "config": "tailwind.config.js",
            "css": "app/globals.css",
            "baseColor": "slate",
            "cssVariables": True,
        },
        "aliases": {"components": "@/components", "utils": "@/lib/utils"},
    }


def test_write_then_load_round_trips(tmp_path: Path) -> None:
    """Test that a written config loads back equal."""
    config = create_config(style="minimal", rsc=False, tsx=False, base_color="zinc")

    write_config(tmp_path, config)

    assert load_config(tmp_path) == config


def test_round_trip_keeps_extra_aliases(tmp_path: Path) -> None:
    data = _valid_data()
    data["aliases"]["hooks"] = "@/hooks"
    config = validate_config(data)

    write_config(tmp_path, config)
    loaded = load_config(tmp_path)

    assert loaded == config
    assert loaded.aliases.as_mapping()["hooks"] == "@/hooks"


def test_write_config_uses_two_space_indent_and_json_keys(tmp_path: Path) -> None:
    path = write_config(tmp_path, create_config())

    text = path.read_text(encoding="utf-8")
    assert text.endswith("}\n")
    assert '\n  "style": "default"' in text
    assert '"baseColor": "slate"' in text
    assert '"cssVariables": true' in text
    assert json.loads(text) == _valid_data()


def test_create_config_defaults() -> None:
    config = create_config()

    assert config.style == "default"
    assert config.rsc is True
    assert config.tsx is True
    assert config.tailwind.config == "tailwind.config.js"
    assert config.tailwind.css == "app/globals.css"
    assert config.aliases.components == "@/components"
    assert config.aliases.utils == "@/lib/utils"


def test_load_config_missing_file(tmp_path: Path) -> None:
    assert not config_exists(tmp_path)

    with pytest.raises(ConfigMissingError, match="dataface init"):
        load_config(tmp_path)


def test_load_config_rejects_malformed_json(tmp_path: Path) -> None:
    (tmp_path / "components.json").write_text("{not json", encoding="utf-8")

    with pytest.raises(ConfigInvalidError) as exc_info:
        load_config(tmp_path)

    assert exc_info.value.field == "components.json"


def test_invalid_style_names_style_field() -> None:
    data = _valid_data()
    data["style"] = "fancy"

    with pytest.raises(ConfigInvalidError) as exc_info:
        validate_config(data)

    assert exc_info.value.field == "style"
    assert "default, minimal, linear" in exc_info.value.reason


def test_missing_utils_alias_names_nested_field() -> None:
    data = _valid_data()
    del data["aliases"]["utils"]

    with pytest.raises(ConfigInvalidError) as exc_info:
        validate_config(data)

    assert exc_info.value.field == "aliases.utils"
    assert exc_info.value.reason == "is a required field"


def test_missing_base_color_uses_json_key_in_field_path() -> None:
    data = _valid_data()
    del data["tailwind"]["baseColor"]

    with pytest.raises(ConfigInvalidError) as exc_info:
        validate_config(data)

    assert exc_info.value.field == "tailwind.baseColor"
    assert 'Invalid configuration: "tailwind.baseColor"' in str(exc_info.value)


def test_non_boolean_rsc_is_rejected() -> None:
    data = _valid_data()
    data["rsc"] = "yes"

    with pytest.raises(ConfigInvalidError) as exc_info:
        validate_config(data)

    assert exc_info.value.field == "rsc"
    assert exc_info.value.reason == "must be a boolean"


def test_unknown_keys_are_ignored(tmp_path: Path) -> None:
    data = _valid_data()
    data["$schema"] = "https://dataface.dev/schema.json"
    data["tailwind"]["prefix"] = "tw-"
    (tmp_path / "components.json").write_text(json.dumps(data), encoding="utf-8")

    config = load_config(tmp_path)

    assert config == create_config()
