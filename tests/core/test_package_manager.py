"""Tests for package manager detection and command construction."""

from pathlib import Path

import pytest

from dataface.core.package_manager.abc import detect_package_manager, install_command


@pytest.mark.parametrize(
    ("lockfiles", "expected"),
    [
        ([], "npm"),
        (["package-lock.json"], "npm"),
        (["yarn.lock"], "yarn"),
        (["pnpm-lock.yaml"], "pnpm"),
        (["yarn.lock", "pnpm-lock.yaml"], "yarn"),
    ],
)
def test_detect_package_manager(tmp_path: Path, lockfiles: list[str], expected: str) -> None:
    for lockfile in lockfiles:
        (tmp_path / lockfile).write_text("", encoding="utf-8")

    assert detect_package_manager(tmp_path) == expected


def test_install_command_per_manager() -> None:
    assert install_command("npm", ["a", "b"]) == ["npm", "install", "a", "b"]
    assert install_command("yarn", ["a"]) == ["yarn", "add", "a"]
    assert install_command("pnpm", ["a"]) == ["pnpm", "add", "a"]


def test_install_command_dev_flags() -> None:
    assert install_command("npm", ["a"], dev=True) == ["npm", "install", "--save-dev", "a"]
    assert install_command("yarn", ["a"], dev=True) == ["yarn", "add", "--dev", "a"]
    assert install_command("pnpm", ["a"], dev=True) == ["pnpm", "add", "--dev", "a"]
