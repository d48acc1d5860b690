"""Fake PackageManager implementation for testing."""

from pathlib import Path

from dataface.core.package_manager.abc import PackageManager, PackageManagerName
from dataface.core.registry.constants import REGISTRY_PACKAGE_SPEC
from dataface.core.registry.sources import installed_package_root


class FakePackageManager(PackageManager):
    """In-memory fake implementation of package manager invocations.

    Constructor Injection:
    - registry_package_files: contents of the published registry package,
      package-relative path -> content. None means the package cannot be
      installed (install raises RuntimeError).
    - fail_installs: make every non-registry install raise RuntimeError
    - npx_files: project-relative path -> content written by run_npx()

    Examples:
        >>> pm = FakePackageManager(registry_package_files={"registry.json": "{}"})
        >>> pm.install("npm", ["@dataface/registry@latest"], scope)
        >>> (scope / "node_modules/@dataface/registry/registry.json").exists()
        True
    """

    def __init__(
        self,
        *,
        registry_package_files: dict[str, str] | None = None,
        fail_installs: bool = False,
        npx_files: dict[str, str] | None = None,
    ) -> None:
        self._registry_package_files = registry_package_files
        self._fail_installs = fail_installs
        self._npx_files = npx_files or {}
        self._install_calls: list[tuple[PackageManagerName, list[str], Path, bool]] = []
        self._npx_calls: list[tuple[list[str], Path]] = []

    @property
    def install_calls(self) -> list[tuple[PackageManagerName, list[str], Path, bool]]:
        """Read-only access to (manager, packages, cwd, dev) for each install."""
        return self._install_calls

    @property
    def project_install_calls(self) -> list[tuple[PackageManagerName, list[str], Path, bool]]:
        """Install calls other than registry package downloads."""
        return [call for call in self._install_calls if REGISTRY_PACKAGE_SPEC not in call[1]]

    @property
    def npx_calls(self) -> list[tuple[list[str], Path]]:
        """Read-only access to (args, cwd) for each run_npx() call."""
        return self._npx_calls

    def install(
        self,
        manager: PackageManagerName,
        packages: list[str],
        cwd: Path,
        *,
        dev: bool = False,
    ) -> None:
        self._install_calls.append((manager, list(packages), cwd, dev))

        if REGISTRY_PACKAGE_SPEC in packages:
            if self._registry_package_files is None:
                raise RuntimeError(
                    f"Failed to install {REGISTRY_PACKAGE_SPEC}\nCommand: npm install\nExit code: 1"
                )
            root = installed_package_root(cwd)
            for relative, content in self._registry_package_files.items():
                path = root / relative
                path.parent.mkdir(parents=True, exist_ok=True)
                path.write_text(content, encoding="utf-8")
            return

        if self._fail_installs:
            raise RuntimeError(f"Failed to install {' '.join(packages)}\nExit code: 1")

    def run_npx(self, args: list[str], cwd: Path) -> None:
        self._npx_calls.append((list(args), cwd))
        for relative, content in self._npx_files.items():
            path = cwd / relative
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(content, encoding="utf-8")
