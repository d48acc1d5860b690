"""Registry index sources, tried in priority order by RegistryClient.

Each source returns a fully validated Registry or None. Expected failures
(network errors, missing packages, malformed documents) are logged and turned
into None so the client can move on to the next source.
"""

import json
import logging
from abc import ABC, abstractmethod
from pathlib import Path

from pydantic import ValidationError

from dataface.core.http.abc import HttpError, RegistryHttp
from dataface.core.package_manager.abc import PackageManager
from dataface.core.registry.constants import (
    REGISTRY_PACKAGE,
    REGISTRY_PACKAGE_SPEC,
    REGISTRY_URL,
)
from dataface.core.registry.types import Registry
from dataface.core.tempdir import temporary_package_scope
from dataface.core.time.abc import Time

logger = logging.getLogger(__name__)


def installed_package_root(scope: Path) -> Path:
    """Location of the registry package inside an npm package scope."""
    return scope / "node_modules" / REGISTRY_PACKAGE


class RegistrySource(ABC):
    """A place the registry index can be loaded from."""

    name: str

    @abstractmethod
    def load(self) -> Registry | None:
        """Return the registry, or None if this source cannot provide it."""
        ...


class RemoteRegistrySource(RegistrySource):
    """Registry JSON downloaded from the repository's raw URL."""

    name = "remote"

    def __init__(self, http: RegistryHttp, url: str = REGISTRY_URL) -> None:
        self._http = http
        self._url = url

    def load(self) -> Registry | None:
        try:
            data = self._http.get_json(self._url)
        except HttpError as e:
            logger.warning("Unable to fetch registry from %s: %s", self._url, e)
            return None

        try:
            return Registry.model_validate(data)
        except ValidationError as e:
            logger.warning("Registry at %s is malformed: %s", self._url, e)
            return None


class PackageRegistrySource(RegistrySource):
    """Registry JSON bundled in the published npm package."""

    name = "package"

    def __init__(self, package_manager: PackageManager, time: Time) -> None:
        self._package_manager = package_manager
        self._time = time

    def load(self) -> Registry | None:
        try:
            with temporary_package_scope("dataface-registry", self._time) as scope:
                return self._load_from_scope(scope)
        except (OSError, UnicodeDecodeError) as e:
            logger.warning("Unable to read registry from %s: %s", REGISTRY_PACKAGE, e)
            return None

    def _load_from_scope(self, scope: Path) -> Registry | None:
        try:
            self._package_manager.install("npm", [REGISTRY_PACKAGE_SPEC], scope)
        except RuntimeError as e:
            logger.warning("Unable to install %s: %s", REGISTRY_PACKAGE_SPEC, e)
            return None

        registry_path = installed_package_root(scope) / "registry.json"
        if not registry_path.exists():
            logger.warning("%s does not ship registry.json", REGISTRY_PACKAGE)
            return None

        try:
            data = json.loads(registry_path.read_text(encoding="utf-8"))
            return Registry.model_validate(data)
        except (json.JSONDecodeError, ValidationError) as e:
            logger.warning("Bundled registry.json is malformed: %s", e)
            return None
