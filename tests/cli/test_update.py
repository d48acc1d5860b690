"""Tests for the update command."""

from pathlib import Path

from click.testing import CliRunner

from dataface.cli.cli import cli
from tests.fakes.user_feedback import FakeUserFeedback
from tests.test_utils.cli import registry_context
from tests.test_utils.registry import init_project

INSTALLED_V1 = "// @dataface-version button v1.0.0\nexport function Button() {}\n"


def _install_button(project_root: Path, content: str = INSTALLED_V1) -> Path:
    component_dir = project_root / "components" / "button"
    component_dir.mkdir(parents=True)
    (component_dir / "button.tsx").write_text(content, encoding="utf-8")
    return component_dir


def test_update_backs_up_and_reinstalls(tmp_path: Path) -> None:
    init_project(tmp_path)
    component_dir = _install_button(tmp_path)
    feedback = FakeUserFeedback()
    ctx = registry_context(tmp_path, feedback=feedback)

    result = CliRunner().invoke(cli, ["update", "button", "--force"], obj=ctx)

    assert result.exit_code == 0, result.output
    assert "Updating button from v1.0.0 to v1.2.0" in result.output
    backup = tmp_path / ".dataface" / "backups" / "button-1700000000000"
    assert (backup / "button.tsx").read_text(encoding="utf-8") == INSTALLED_V1
    assert (component_dir / "button.tsx").read_text(encoding="utf-8") != INSTALLED_V1
    assert feedback.contains("✓ Updated button to v1.2.0")


def test_update_confirms_before_overwriting(tmp_path: Path) -> None:
    init_project(tmp_path)
    component_dir = _install_button(tmp_path)
    ctx = registry_context(tmp_path)

    result = CliRunner().invoke(cli, ["update", "button"], obj=ctx, input="n\n")

    assert result.exit_code == 0, result.output
    assert (component_dir / "button.tsx").read_text(encoding="utf-8") == INSTALLED_V1
    assert not (tmp_path / ".dataface").exists()


def test_update_already_current_does_nothing(tmp_path: Path) -> None:
    init_project(tmp_path)
    current = "// @dataface-version button v1.2.0\nexport function Button() {}\n"
    component_dir = _install_button(tmp_path, current)
    feedback = FakeUserFeedback()
    ctx = registry_context(tmp_path, feedback=feedback)

    result = CliRunner().invoke(cli, ["update", "button"], obj=ctx)

    assert result.exit_code == 0, result.output
    assert feedback.contains("already up to date (v1.2.0)")
    assert (component_dir / "button.tsx").read_text(encoding="utf-8") == current


def test_update_without_marker_asks_first(tmp_path: Path) -> None:
    init_project(tmp_path)
    component_dir = _install_button(tmp_path, "export function Button() {}\n")
    feedback = FakeUserFeedback()
    ctx = registry_context(tmp_path, feedback=feedback)

    result = CliRunner().invoke(cli, ["update", "button"], obj=ctx, input="n\n")

    assert result.exit_code == 0, result.output
    assert feedback.contains("Could not determine the current version of button")
    assert (component_dir / "button.tsx").read_text(encoding="utf-8") == (
        "export function Button() {}\n"
    )


def test_update_continues_after_failed_backup_when_forced(tmp_path: Path) -> None:
    init_project(tmp_path)
    component_dir = _install_button(tmp_path)
    # A file where the backups directory should go makes the copy fail
    (tmp_path / ".dataface").write_text("", encoding="utf-8")
    feedback = FakeUserFeedback()
    ctx = registry_context(tmp_path, feedback=feedback)

    result = CliRunner().invoke(cli, ["update", "button", "--force"], obj=ctx)

    assert result.exit_code == 0, result.output
    assert feedback.contains("Failed to back up button")
    assert (component_dir / "button.tsx").read_text(encoding="utf-8") != INSTALLED_V1


def test_update_stops_after_failed_backup_when_declined(tmp_path: Path) -> None:
    init_project(tmp_path)
    component_dir = _install_button(tmp_path)
    (tmp_path / ".dataface").write_text("", encoding="utf-8")
    ctx = registry_context(tmp_path)

    # Confirm the overwrite, then decline continuing without a backup
    result = CliRunner().invoke(cli, ["update", "button"], obj=ctx, input="y\nn\n")

    assert result.exit_code == 0, result.output
    assert (component_dir / "button.tsx").read_text(encoding="utf-8") == INSTALLED_V1


def test_update_component_not_installed(tmp_path: Path) -> None:
    init_project(tmp_path)
    ctx = registry_context(tmp_path)

    result = CliRunner().invoke(cli, ["update", "button"], obj=ctx)

    assert result.exit_code == 1
    assert "Component 'button' not found in your project" in result.output
    assert "dataface add button" in result.output


def test_update_unknown_component(tmp_path: Path) -> None:
    init_project(tmp_path)
    ctx = registry_context(tmp_path)

    result = CliRunner().invoke(cli, ["update", "carousel"], obj=ctx)

    assert result.exit_code == 1
    assert "not found in registry" in result.output
