"""Scoped temporary directories for registry downloads.

Each retrieval attempt works in its own directory named
`<prefix>-<epoch-millis>` under the system temp dir. The directory is removed
when the scope exits, whether the body succeeded or raised.
"""

import json
import logging
import shutil
import tempfile
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

from dataface.core.time.abc import Time

logger = logging.getLogger(__name__)

TEMP_PACKAGE_JSON = {"name": "temp-install", "version": "1.0.0", "private": True}


def _unique_scope_path(base: Path, prefix: str, time: Time) -> Path:
    stamp = time.epoch_millis()
    path = base / f"{prefix}-{stamp}"
    suffix = 1
    # Two attempts inside the same millisecond must not share a directory
    while path.exists():
        path = base / f"{prefix}-{stamp}-{suffix}"
        suffix += 1
    return path


@contextmanager
def temporary_scope(prefix: str, time: Time, base: Path | None = None) -> Iterator[Path]:
    """Yield a path reserved for one operation and remove it afterwards.

    The path itself is not created, so callers such as `git clone` can create
    it. Anything present at the path when the scope exits is deleted.

    Args:
        prefix: Directory name prefix (e.g. "dataface-meta")
        time: Clock used to build the unique name
        base: Parent directory; defaults to the system temp dir
    """
    parent = base if base is not None else Path(tempfile.gettempdir())
    path = _unique_scope_path(parent, prefix, time)
    try:
        yield path
    finally:
        if path.exists():
            shutil.rmtree(path, ignore_errors=True)
            logger.debug("Removed temporary scope %s", path)


@contextmanager
def temporary_package_scope(prefix: str, time: Time, base: Path | None = None) -> Iterator[Path]:
    """Yield an isolated package scope: a temp dir holding a private package.json."""
    with temporary_scope(prefix, time, base) as path:
        path.mkdir(parents=True)
        (path / "package.json").write_text(
            json.dumps(TEMP_PACKAGE_JSON, indent=2), encoding="utf-8"
        )
        yield path
