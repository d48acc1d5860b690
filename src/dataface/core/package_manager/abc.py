"""Package manager operations interface.

The consumer project's package manager (npm, yarn or pnpm) is used for two
things: adding a component's external dependencies to the project, and
installing the published registry package into a throwaway scope.

Architecture:
- PackageManager: Abstract base class defining the interface
- RealPackageManager: Production implementation using subprocess
- Standalone functions: lockfile detection and command construction
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Literal

PackageManagerName = Literal["npm", "yarn", "pnpm"]

_LOCKFILES: list[tuple[str, PackageManagerName]] = [
    ("yarn.lock", "yarn"),
    ("pnpm-lock.yaml", "pnpm"),
]


def detect_package_manager(project_root: Path) -> PackageManagerName:
    """Detect the project's package manager from lockfile presence.

    yarn.lock wins over pnpm-lock.yaml; npm is the default.
    """
    for lockfile, manager in _LOCKFILES:
        if (project_root / lockfile).exists():
            return manager
    return "npm"


def install_command(
    manager: PackageManagerName, packages: list[str], *, dev: bool = False
) -> list[str]:
    """Build the argv that adds packages with the given manager.

    Example:
        >>> install_command("npm", ["clsx"], dev=True)
        ['npm', 'install', '--save-dev', 'clsx']
        >>> install_command("pnpm", ["clsx"])
        ['pnpm', 'add', 'clsx']
    """
    args: list[str] = [manager, "install" if manager == "npm" else "add"]
    if dev:
        args.append("--save-dev" if manager == "npm" else "--dev")
    args.extend(packages)
    return args


class PackageManager(ABC):
    """Abstract interface for package manager invocations."""

    @abstractmethod
    def install(
        self,
        manager: PackageManagerName,
        packages: list[str],
        cwd: Path,
        *,
        dev: bool = False,
    ) -> None:
        """Add packages to the package scope rooted at cwd.

        Raises:
            RuntimeError: If the package manager exits non-zero or is missing
        """
        ...

    @abstractmethod
    def run_npx(self, args: list[str], cwd: Path) -> None:
        """Run `npx <args>` in cwd.

        Raises:
            RuntimeError: If the command fails
        """
        ...
