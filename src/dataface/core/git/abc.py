"""High-level git operations interface.

This module provides a clean abstraction over git subprocess calls, making the
fetch strategies testable without network access.

Architecture:
- Git: Abstract base class defining the interface
- RealGit: Production implementation using subprocess
"""

from abc import ABC, abstractmethod
from pathlib import Path


class Git(ABC):
    """Abstract interface for git operations.

    All implementations (real and fake) must implement this interface.
    This interface contains ONLY runtime operations - no test setup methods.
    """

    @abstractmethod
    def sparse_clone(self, repo_url: str, dest: Path, sparse_paths: list[str]) -> None:
        """Shallow, blob-filtered clone of repo_url restricted to sparse_paths.

        After the call, files under each sparse path exist below dest at the
        same relative location they have in the repository.

        Args:
            repo_url: Remote repository URL
            dest: Directory to clone into (must not exist or be empty)
            sparse_paths: Repository-relative paths to check out

        Raises:
            RuntimeError: If the clone or sparse-checkout fails
        """
        ...
