"""Production PackageManager implementation using subprocess."""

import logging
from pathlib import Path

from dataface.core.package_manager.abc import (
    PackageManager,
    PackageManagerName,
    install_command,
)
from dataface.core.subprocess import run_subprocess_with_context

logger = logging.getLogger(__name__)


class RealPackageManager(PackageManager):
    """Runs npm, yarn, pnpm and npx as subprocesses."""

    def install(
        self,
        manager: PackageManagerName,
        packages: list[str],
        cwd: Path,
        *,
        dev: bool = False,
    ) -> None:
        cmd = install_command(manager, packages, dev=dev)
        logger.debug("Running %s in %s", " ".join(cmd), cwd)
        run_subprocess_with_context(
            cmd,
            operation_context=f"install {' '.join(packages)} with {manager}",
            cwd=cwd,
        )

    def run_npx(self, args: list[str], cwd: Path) -> None:
        logger.debug("Running npx %s in %s", " ".join(args), cwd)
        run_subprocess_with_context(
            ["npx", *args],
            operation_context=f"run npx {' '.join(args)}",
            cwd=cwd,
        )
