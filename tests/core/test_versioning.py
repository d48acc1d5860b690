"""Tests for installed version detection and component backups."""

from pathlib import Path

import pytest

from dataface.core.errors import BackupFailedError
from dataface.core.versioning import backup_component, get_installed_component_version
from tests.fakes.time import FakeTime


def test_version_is_read_from_marker(tmp_path: Path) -> None:
    (tmp_path / "button.tsx").write_text(
        "// @dataface-version button v1.2.0\nexport function Button() {}\n", encoding="utf-8"
    )

    assert get_installed_component_version("button", tmp_path) == "1.2.0"


def test_marker_match_is_case_insensitive_and_searches_nested_files(tmp_path: Path) -> None:
    (tmp_path / "parts").mkdir()
    (tmp_path / "parts" / "icon.js").write_text("/* @Dataface-Version BUTTON v2.0 */", encoding="utf-8")

    assert get_installed_component_version("button", tmp_path) == "2.0"


def test_marker_for_another_component_is_ignored(tmp_path: Path) -> None:
    (tmp_path / "dialog.tsx").write_text("// @dataface-version overlay v1.0.0\n", encoding="utf-8")

    assert get_installed_component_version("dialog", tmp_path) is None


def test_missing_marker_is_none(tmp_path: Path) -> None:
    (tmp_path / "button.tsx").write_text("export function Button() {}\n", encoding="utf-8")
    (tmp_path / "notes.md").write_text("@dataface-version button v9.9.9", encoding="utf-8")

    assert get_installed_component_version("button", tmp_path) is None


def test_missing_directory_is_none(tmp_path: Path) -> None:
    assert get_installed_component_version("button", tmp_path / "absent") is None


def test_backup_copies_component_to_timestamped_dir(tmp_path: Path) -> None:
    component_dir = tmp_path / "components" / "button"
    component_dir.mkdir(parents=True)
    (component_dir / "button.tsx").write_text("original", encoding="utf-8")

    backup_dir = backup_component(tmp_path, "button", component_dir, FakeTime(epoch_millis=99))

    assert backup_dir == tmp_path / ".dataface" / "backups" / "button-99"
    assert (backup_dir / "button.tsx").read_text(encoding="utf-8") == "original"


def test_backup_of_missing_directory_fails(tmp_path: Path) -> None:
    with pytest.raises(BackupFailedError, match="Failed to back up button"):
        backup_component(tmp_path, "button", tmp_path / "absent", FakeTime())
