"""Component source retrieval.

A component's files are fetched by the first retrieval strategy that
succeeds:

1. GitFetchStrategy: sparse, shallow clone of the registry repository
2. PackageFetchStrategy: install of the published registry npm package

Strategies report expected failures as a failed FetchResult rather than
raising, which keeps the fallback policy a plain loop in ComponentFetcher.
Registry dependencies are fetched with the same strategy as their parent and
merged under a `<dependency>/` key prefix. A dependency that cannot be
fetched is logged and skipped; it never fails its parent.
"""

import json
import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path

from dataface.core.config import ProjectConfig
from dataface.core.errors import ComponentNotFoundError, ComponentUnavailableError
from dataface.core.git.abc import Git
from dataface.core.package_manager.abc import PackageManager
from dataface.core.registry.client import RegistryClient
from dataface.core.registry.constants import (
    DEFAULT_STYLE,
    PACKAGE_SOURCE_ROOT,
    REGISTRY_PACKAGE_SPEC,
    REGISTRY_REPO_URL,
    REGISTRY_SOURCE_ROOT,
)
from dataface.core.registry.sources import installed_package_root
from dataface.core.registry.types import ComponentMeta
from dataface.core.tempdir import temporary_package_scope, temporary_scope
from dataface.core.time.abc import Time

logger = logging.getLogger(__name__)

# Relative path -> text content
FetchedFileSet = dict[str, str]

METADATA_FILENAME = "metadata.json"


class SourceMissingError(Exception):
    """Raised inside a strategy when the component directory is absent."""


@dataclass(frozen=True)
class FetchResult:
    """Outcome of one strategy attempt."""

    strategy: str
    files: FetchedFileSet | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.files is not None

    @staticmethod
    def success(strategy: str, files: FetchedFileSet) -> "FetchResult":
        return FetchResult(strategy=strategy, files=files)

    @staticmethod
    def failure(strategy: str, error: str) -> "FetchResult":
        return FetchResult(strategy=strategy, error=error)


def resolve_style(meta: ComponentMeta, requested: str, declared: list[str]) -> str:
    """Pick the style directory to fetch.

    The requested style is honoured only when the component declares it;
    everything else falls back to the default style.
    """
    if meta.has_styles and requested in declared:
        return requested
    return DEFAULT_STYLE


def component_path(source_root: str, meta: ComponentMeta, style: str) -> str:
    """Path of a component's sources below source_root.

    Example:
        >>> component_path("packages/registry/src", button_meta, "minimal")
        'packages/registry/src/button/styles/minimal'
    """
    path = f"{source_root}/{meta.name}"
    if meta.has_styles:
        path += f"/styles/{style}"
    return path


def read_declared_styles(metadata_path: Path) -> list[str]:
    """Read the `styles` list from a component's metadata.json; [] if unavailable."""
    if not metadata_path.exists():
        return []
    try:
        metadata = json.loads(metadata_path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        logger.debug("Ignoring unreadable %s: %s", metadata_path, e)
        return []
    styles = metadata.get("styles") if isinstance(metadata, dict) else None
    if not isinstance(styles, list):
        return []
    return [str(style) for style in styles]


def read_component_dir(directory: Path, meta: ComponentMeta) -> FetchedFileSet:
    """Read every file below directory, keyed by POSIX path relative to it.

    For components without style directories the directory is the component
    root, whose metadata.json describes the component and is not installed.

    Raises:
        SourceMissingError: If directory does not exist
    """
    if not directory.is_dir():
        raise SourceMissingError(f"Component '{meta.name}' not found in registry sources")

    files: FetchedFileSet = {}
    for path in sorted(directory.rglob("*")):
        if not path.is_file():
            continue
        relative = path.relative_to(directory).as_posix()
        if not meta.has_styles and relative == METADATA_FILENAME:
            continue
        files[relative] = path.read_text(encoding="utf-8")
    return files


class FetchStrategy(ABC):
    """One way of retrieving component sources.

    Subclasses implement _fetch_own_files(); attempt() adds registry
    dependency handling and converts expected failures into FetchResult.
    """

    name: str

    def __init__(self, registry: RegistryClient) -> None:
        self._registry = registry

    @abstractmethod
    def _fetch_own_files(self, meta: ComponentMeta, style: str) -> FetchedFileSet:
        """Fetch the files of meta alone (no registry dependencies).

        Raises:
            SourceMissingError, RuntimeError, OSError: On retrieval failure
        """
        ...

    def attempt(self, meta: ComponentMeta, style: str) -> FetchResult:
        """Fetch meta and, recursively, its registry dependencies."""
        try:
            files = self._fetch_own_files(meta, style)
        except (SourceMissingError, RuntimeError, OSError, UnicodeDecodeError) as e:
            return FetchResult.failure(self.name, str(e))

        for dep_name in meta.registry_dependencies:
            dep_files = self._fetch_dependency(dep_name, style)
            if dep_files is None:
                continue
            for relative, content in dep_files.items():
                files[f"{dep_name}/{relative}"] = content

        return FetchResult.success(self.name, files)

    def _fetch_dependency(self, dep_name: str, style: str) -> FetchedFileSet | None:
        try:
            dep_meta = self._registry.get_component_info(dep_name)
        except ComponentNotFoundError:
            logger.warning("Failed to fetch dependency %s: not in registry", dep_name)
            return None

        result = self.attempt(dep_meta, style)
        if not result.ok:
            logger.warning("Failed to fetch dependency %s: %s", dep_name, result.error)
            return None
        return result.files


class GitFetchStrategy(FetchStrategy):
    """Fetch sources with a sparse, shallow clone of the registry repository."""

    name = "git"

    def __init__(
        self,
        git: Git,
        registry: RegistryClient,
        time: Time,
        repo_url: str = REGISTRY_REPO_URL,
    ) -> None:
        super().__init__(registry)
        self._git = git
        self._time = time
        self._repo_url = repo_url

    def _declared_styles(self, meta: ComponentMeta) -> list[str]:
        if not meta.has_styles:
            return []
        metadata_rel = f"{REGISTRY_SOURCE_ROOT}/{meta.name}/{METADATA_FILENAME}"
        with temporary_scope("dataface-meta", self._time) as scope:
            try:
                self._git.sparse_clone(self._repo_url, scope, [metadata_rel])
            except RuntimeError as e:
                logger.warning(
                    "Could not fetch metadata for %s, using default style: %s", meta.name, e
                )
                return []
            return read_declared_styles(scope / metadata_rel)

    def _fetch_own_files(self, meta: ComponentMeta, style: str) -> FetchedFileSet:
        resolved = resolve_style(meta, style, self._declared_styles(meta))
        relative = component_path(REGISTRY_SOURCE_ROOT, meta, resolved)
        logger.debug("Sparse-cloning %s for %s", relative, meta.name)
        with temporary_scope("dataface", self._time) as scope:
            self._git.sparse_clone(self._repo_url, scope, [relative])
            return read_component_dir(scope / relative, meta)


class PackageFetchStrategy(FetchStrategy):
    """Fetch sources from the published registry npm package."""

    name = "package"

    def __init__(
        self,
        package_manager: PackageManager,
        registry: RegistryClient,
        time: Time,
    ) -> None:
        super().__init__(registry)
        self._package_manager = package_manager
        self._time = time

    def _fetch_own_files(self, meta: ComponentMeta, style: str) -> FetchedFileSet:
        with temporary_package_scope("dataface-npm", self._time) as scope:
            self._package_manager.install("npm", [REGISTRY_PACKAGE_SPEC], scope)
            package_root = installed_package_root(scope)

            declared: list[str] = []
            if meta.has_styles:
                declared = read_declared_styles(
                    package_root / PACKAGE_SOURCE_ROOT / meta.name / METADATA_FILENAME
                )
            resolved = resolve_style(meta, style, declared)
            relative = component_path(PACKAGE_SOURCE_ROOT, meta, resolved)
            return read_component_dir(package_root / relative, meta)


class ComponentFetcher:
    """Fetch a component's files using the first strategy that succeeds."""

    def __init__(self, registry: RegistryClient, strategies: list[FetchStrategy]) -> None:
        self._registry = registry
        self._strategies = strategies

    def fetch_component_files(self, name: str, config: ProjectConfig) -> FetchedFileSet:
        """Return the files of name and its registry dependencies.

        Raises:
            ComponentNotFoundError: If name is not in the registry
            ComponentUnavailableError: If every strategy failed
        """
        meta = self._registry.get_component_info(name)

        attempts: list[tuple[str, str]] = []
        for strategy in self._strategies:
            logger.debug("Fetching %s via %s", name, strategy.name)
            result = strategy.attempt(meta, config.style)
            if result.files is not None:
                return result.files
            error = result.error or "unknown error"
            logger.warning("Failed to fetch %s via %s: %s", name, strategy.name, error)
            attempts.append((strategy.name, error))

        raise ComponentUnavailableError(name, attempts)
