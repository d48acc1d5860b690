"""Detect the consumer project's framework and language settings."""

import json
import re
from pathlib import Path
from typing import Literal

ProjectType = Literal["next", "react", "vite", "remix", "astro", "unknown"]

# Checked in order; the first dependency present decides the project type
_FRAMEWORK_MARKERS: list[tuple[str, ProjectType]] = [
    ("next", "next"),
    ("@remix-run/react", "remix"),
    ("astro", "astro"),
    ("vite", "vite"),
    ("react", "react"),
]

_CSS_PATHS: dict[ProjectType, str] = {
    "next": "app/globals.css",
    "remix": "app/styles/globals.css",
}
DEFAULT_CSS_PATH = "src/styles/globals.css"

# Server Components ship with Next.js 13
_RSC_MIN_NEXT_MAJOR = 13


def _read_dependencies(project_root: Path) -> dict[str, str] | None:
    package_json = project_root / "package.json"
    if not package_json.exists():
        return None
    data = json.loads(package_json.read_text(encoding="utf-8"))
    dependencies: dict[str, str] = {}
    dependencies.update(data.get("dependencies") or {})
    dependencies.update(data.get("devDependencies") or {})
    return dependencies


def detect_project_type(project_root: Path) -> ProjectType:
    dependencies = _read_dependencies(project_root)
    if dependencies is None:
        return "unknown"
    for package, project_type in _FRAMEWORK_MARKERS:
        if package in dependencies:
            return project_type
    return "unknown"


def detect_typescript(project_root: Path) -> bool:
    return (project_root / "tsconfig.json").exists()


def detect_rsc(project_root: Path) -> bool:
    """Whether the project is a Next.js app recent enough for Server Components."""
    if detect_project_type(project_root) != "next":
        return False
    dependencies = _read_dependencies(project_root) or {}
    match = re.match(r"^[~^]?(\d+)", dependencies.get("next", ""))
    if match is None:
        return False
    return int(match.group(1)) >= _RSC_MIN_NEXT_MAJOR


def default_css_path(project_type: ProjectType) -> str:
    return _CSS_PATHS.get(project_type, DEFAULT_CSS_PATH)
