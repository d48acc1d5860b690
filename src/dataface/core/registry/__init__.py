from dataface.core.registry.client import RegistryCache, RegistryClient
from dataface.core.registry.sources import (
    PackageRegistrySource,
    RegistrySource,
    RemoteRegistrySource,
)
from dataface.core.registry.types import Category, ComponentMeta, Registry

__all__ = [
    "Category",
    "ComponentMeta",
    "PackageRegistrySource",
    "Registry",
    "RegistryCache",
    "RegistryClient",
    "RegistrySource",
    "RemoteRegistrySource",
]
