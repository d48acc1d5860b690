"""Registry client: load the index once and answer component queries."""

import logging

from dataface.core.errors import ComponentNotFoundError, RegistryUnavailableError
from dataface.core.registry.sources import RegistrySource
from dataface.core.registry.types import ComponentMeta, Registry

logger = logging.getLogger(__name__)


class RegistryCache:
    """Holds the registry for the lifetime of one invocation.

    Starts empty and is populated exactly once.
    """

    def __init__(self) -> None:
        self._registry: Registry | None = None

    def get(self) -> Registry | None:
        return self._registry

    def populate(self, registry: Registry) -> None:
        if self._registry is not None:
            raise RuntimeError("Registry cache is already populated")
        self._registry = registry


class RegistryClient:
    """Resolve component names against the registry index.

    Sources are tried in order until one yields a valid registry; the result
    is memoized in the cache so later lookups never hit the network.
    """

    def __init__(self, sources: list[RegistrySource], cache: RegistryCache) -> None:
        self._sources = sources
        self._cache = cache

    def get_registry(self) -> Registry:
        """Return the registry, loading it on first use.

        Raises:
            RegistryUnavailableError: If every source failed
        """
        cached = self._cache.get()
        if cached is not None:
            return cached

        for source in self._sources:
            logger.debug("Loading registry from %s source", source.name)
            registry = source.load()
            if registry is not None:
                self._cache.populate(registry)
                return registry
            logger.debug("Registry source %s unavailable, trying next", source.name)

        raise RegistryUnavailableError()

    def get_component_info(self, name: str) -> ComponentMeta:
        """Return metadata for a component.

        Raises:
            ComponentNotFoundError: If name is not in the registry
        """
        component = self.get_registry().find_component(name)
        if component is None:
            raise ComponentNotFoundError(name)
        return component

    def check_component_exists(self, name: str) -> bool:
        return self.get_registry().find_component(name) is not None

    def resolve_component_dependencies(self, name: str) -> list[str]:
        """Collect external packages needed by a component.

        Includes the component's own dependencies plus those of each direct
        registry dependency. Registry dependencies of registry dependencies
        are not expanded.

        Raises:
            ComponentNotFoundError: If name or a direct registry dependency is unknown
        """
        component = self.get_component_info(name)
        dependencies = list(component.dependencies)
        for dep_name in component.registry_dependencies:
            dependencies.extend(self.get_component_info(dep_name).dependencies)
        return list(dict.fromkeys(dependencies))
