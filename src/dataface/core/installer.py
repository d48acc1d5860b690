"""Write transformed component files into the project and add their packages.

Writes are not transactional: if a write fails midway, the files already
written stay on disk. Existing files are skipped unless overwrite is set, so
running `add` twice never clobbers local edits.
"""

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from dataface.core.config import ProjectConfig
from dataface.core.package_manager.abc import (
    PackageManager,
    detect_package_manager,
    install_command,
)
from dataface.core.user_feedback import UserFeedback

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class InstallReport:
    """Files written and skipped by one write_component_files() call."""

    written: list[Path]
    skipped: list[Path]


def alias_to_directory(alias: str) -> str:
    """Strip the `@/` import prefix: "@/components" -> "components"."""
    return alias.removeprefix("@/")


def resolve_component_dir(
    project_root: Path,
    component: str,
    config: ProjectConfig,
    target_dir: str | None = None,
) -> Path:
    """Directory a component is installed into.

    An explicit target_dir (relative to the project root) replaces the
    components alias; the component name is always the last path segment.
    """
    base = target_dir if target_dir else alias_to_directory(config.aliases.components)
    return project_root / base / component


def write_component_files(
    component: str,
    files: Mapping[str, str],
    config: ProjectConfig,
    *,
    project_root: Path,
    feedback: UserFeedback,
    target_dir: str | None = None,
    overwrite: bool = False,
) -> InstallReport:
    """Write files below the component directory.

    Args:
        component: Component name (last segment of the install directory)
        files: Relative path -> content, typically transform_files() output
        config: Project configuration supplying the components alias
        project_root: Project root all paths are relative to
        feedback: Receives one line per written or skipped file
        target_dir: Optional directory replacing the components alias
        overwrite: Replace files that already exist

    Returns:
        InstallReport listing written and skipped destinations
    """
    component_dir = resolve_component_dir(project_root, component, config, target_dir)
    component_dir.mkdir(parents=True, exist_ok=True)

    written: list[Path] = []
    skipped: list[Path] = []
    for relative, content in files.items():
        destination = component_dir / relative
        destination.parent.mkdir(parents=True, exist_ok=True)

        if destination.exists() and not overwrite:
            feedback.info(f"Skipping {destination} (already exists)")
            skipped.append(destination)
            continue

        destination.write_text(content, encoding="utf-8")
        feedback.info(f"Created {destination}")
        written.append(destination)

    logger.debug(
        "Wrote %d file(s), skipped %d for %s", len(written), len(skipped), component
    )
    return InstallReport(written=written, skipped=skipped)


def install_dependencies(
    packages: list[str],
    *,
    project_root: Path,
    package_manager: PackageManager,
    feedback: UserFeedback,
    dev: bool = False,
) -> bool:
    """Add packages to the project with its detected package manager.

    A failure is reported together with the command to run by hand; files
    written earlier are left in place.

    Returns:
        True if the packages were installed (or there was nothing to install)
    """
    if not packages:
        return True

    manager = detect_package_manager(project_root)
    feedback.info(f"Installing dependencies with {manager}: {', '.join(packages)}")
    try:
        package_manager.install(manager, packages, project_root, dev=dev)
    except RuntimeError as e:
        logger.debug("Package installation failed: %s", e)
        manual = " ".join(install_command(manager, packages, dev=dev))
        feedback.error("Failed to install dependencies")
        feedback.warning(f"Run `{manual}` manually.")
        return False

    feedback.success("Dependencies installed")
    return True
