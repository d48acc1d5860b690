"""Installed component versions and pre-update backups.

A component's installed version is read from a marker comment such as
`// @dataface-version button v1.2.0` in any of its script files. Registry
sources may carry the marker; nothing in the install pipeline adds it, so a
missing marker is an expected state rather than corruption.
"""

import logging
import re
import shutil
from pathlib import Path

from dataface.core.errors import BackupFailedError
from dataface.core.time.abc import Time

logger = logging.getLogger(__name__)

_SCRIPT_SUFFIXES = {".ts", ".tsx", ".js", ".jsx"}

BACKUPS_DIR = Path(".dataface") / "backups"


def _version_marker(component: str) -> re.Pattern[str]:
    return re.compile(rf"@dataface-version\s+{re.escape(component)}\s+v([\d.]+)", re.IGNORECASE)


def get_installed_component_version(component: str, component_dir: Path) -> str | None:
    """Return the version recorded in the component's files, or None if unknown."""
    if not component_dir.is_dir():
        return None

    marker = _version_marker(component)
    for path in sorted(component_dir.rglob("*")):
        if not path.is_file() or path.suffix not in _SCRIPT_SUFFIXES:
            continue
        try:
            content = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            logger.debug("Skipping unreadable %s: %s", path, e)
            continue
        match = marker.search(content)
        if match:
            return match.group(1)
    return None


def backup_component(project_root: Path, component: str, component_dir: Path, time: Time) -> Path:
    """Copy component_dir to .dataface/backups/<component>-<epoch-millis>.

    Raises:
        BackupFailedError: If the copy fails
    """
    backup_dir = project_root / BACKUPS_DIR / f"{component}-{time.epoch_millis()}"
    try:
        backup_dir.parent.mkdir(parents=True, exist_ok=True)
        shutil.copytree(component_dir, backup_dir)
    except OSError as e:
        raise BackupFailedError(component, str(e)) from e
    logger.debug("Backed up %s to %s", component_dir, backup_dir)
    return backup_dir
