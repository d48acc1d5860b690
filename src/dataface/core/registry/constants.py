"""Locations of the published Dataface registry."""

REGISTRY_URL = (
    "https://raw.githubusercontent.com/dataface/dataface/main/packages/registry/registry.json"
)
REGISTRY_REPO_URL = "https://github.com/dataface/dataface.git"
REGISTRY_PACKAGE = "@dataface/registry"
REGISTRY_PACKAGE_SPEC = f"{REGISTRY_PACKAGE}@latest"

# Component sources inside the repository; the npm package ships them under src/
REGISTRY_SOURCE_ROOT = "packages/registry/src"
PACKAGE_SOURCE_ROOT = "src"

DEFAULT_STYLE = "default"
MISC_CATEGORY = "misc"
