"""Tests for writing component files and installing their packages."""

from pathlib import Path

from dataface.core.config import create_config
from dataface.core.installer import (
    install_dependencies,
    resolve_component_dir,
    write_component_files,
)
from tests.fakes.package_manager import FakePackageManager
from tests.fakes.user_feedback import FakeUserFeedback


def test_component_dir_defaults_to_components_alias(tmp_path: Path) -> None:
    config = create_config(components_alias="@/src/components")

    assert resolve_component_dir(tmp_path, "button", config) == tmp_path / "src/components/button"


def test_component_dir_uses_explicit_target(tmp_path: Path) -> None:
    config = create_config()

    assert resolve_component_dir(tmp_path, "button", config, "ui") == tmp_path / "ui" / "button"


def test_write_creates_nested_files(tmp_path: Path) -> None:
    feedback = FakeUserFeedback()
    files = {"dialog.tsx": "dialog", "overlay/overlay.ts": "overlay"}

    report = write_component_files(
        "dialog", files, create_config(), project_root=tmp_path, feedback=feedback
    )

    component_dir = tmp_path / "components" / "dialog"
    assert (component_dir / "dialog.tsx").read_text(encoding="utf-8") == "dialog"
    assert (component_dir / "overlay" / "overlay.ts").read_text(encoding="utf-8") == "overlay"
    assert report.written == [component_dir / "dialog.tsx", component_dir / "overlay" / "overlay.ts"]
    assert report.skipped == []
    assert feedback.contains(f"Created {component_dir / 'dialog.tsx'}")


def test_second_write_without_overwrite_skips_everything(tmp_path: Path) -> None:
    """Test that writing twice leaves the first write's content in place."""
    config = create_config()
    files = {"button.tsx": "v1"}
    write_component_files(
        "button", files, config, project_root=tmp_path, feedback=FakeUserFeedback()
    )
    feedback = FakeUserFeedback()

    report = write_component_files(
        "button", {"button.tsx": "v2"}, config, project_root=tmp_path, feedback=feedback
    )

    destination = tmp_path / "components" / "button" / "button.tsx"
    assert destination.read_text(encoding="utf-8") == "v1"
    assert report.written == []
    assert report.skipped == [destination]
    assert feedback.messages == [f"INFO: Skipping {destination} (already exists)"]


def test_overwrite_replaces_existing_files(tmp_path: Path) -> None:
    config = create_config()
    write_component_files(
        "button", {"button.tsx": "v1"}, config, project_root=tmp_path, feedback=FakeUserFeedback()
    )

    report = write_component_files(
        "button",
        {"button.tsx": "v2"},
        config,
        project_root=tmp_path,
        feedback=FakeUserFeedback(),
        overwrite=True,
    )

    destination = tmp_path / "components" / "button" / "button.tsx"
    assert destination.read_text(encoding="utf-8") == "v2"
    assert report.written == [destination]


def test_install_dependencies_uses_detected_manager(tmp_path: Path) -> None:
    (tmp_path / "pnpm-lock.yaml").write_text("", encoding="utf-8")
    package_manager = FakePackageManager()

    ok = install_dependencies(
        ["clsx"],
        project_root=tmp_path,
        package_manager=package_manager,
        feedback=FakeUserFeedback(),
    )

    assert ok is True
    assert package_manager.install_calls == [("pnpm", ["clsx"], tmp_path, False)]


def test_install_dependencies_with_nothing_to_install(tmp_path: Path) -> None:
    package_manager = FakePackageManager()

    ok = install_dependencies(
        [], project_root=tmp_path, package_manager=package_manager, feedback=FakeUserFeedback()
    )

    assert ok is True
    assert package_manager.install_calls == []


def test_install_failure_reports_manual_command(tmp_path: Path) -> None:
    feedback = FakeUserFeedback()

    ok = install_dependencies(
        ["focus-trap", "portal-utils"],
        project_root=tmp_path,
        package_manager=FakePackageManager(fail_installs=True),
        feedback=feedback,
        dev=True,
    )

    assert ok is False
    assert "WARNING: Run `npm install --save-dev focus-trap portal-utils` manually." in (
        feedback.messages
    )
