"""Clock abstraction for testing.

Temporary scopes and backups are named after the current time; injecting the
clock keeps those names deterministic in tests.
"""

from abc import ABC, abstractmethod


class Time(ABC):
    """Abstract clock operations for dependency injection."""

    @abstractmethod
    def epoch_millis(self) -> int:
        """Return milliseconds since the Unix epoch."""
        ...
