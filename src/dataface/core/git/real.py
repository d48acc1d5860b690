"""Production Git implementation using subprocess."""

from pathlib import Path

from dataface.core.git.abc import Git
from dataface.core.subprocess import run_subprocess_with_context


class RealGit(Git):
    """Production implementation using subprocess.

    All git operations execute actual git commands via subprocess.
    """

    def sparse_clone(self, repo_url: str, dest: Path, sparse_paths: list[str]) -> None:
        """Clone with --depth=1 --filter=blob:none --sparse, then set sparse paths."""
        run_subprocess_with_context(
            [
                "git",
                "clone",
                "--depth=1",
                "--filter=blob:none",
                "--sparse",
                repo_url,
                str(dest),
            ],
            operation_context=f"clone {repo_url}",
        )
        run_subprocess_with_context(
            ["git", "sparse-checkout", "set", "--no-cone", *sparse_paths],
            operation_context="set sparse-checkout paths",
            cwd=dest,
        )
