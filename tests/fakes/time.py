"""Fake Time implementation for testing.

FakeTime returns a fixed clock value so temporary scope and backup names are
deterministic.
"""

from dataface.core.time.abc import Time


class FakeTime(Time):
    """Fake clock frozen at a constructor-provided instant.

    This class has NO public setup methods. All state is provided via constructor
    or captured during execution.
    """

    def __init__(self, epoch_millis: int = 1_700_000_000_000) -> None:
        """Create FakeTime frozen at epoch_millis."""
        self._epoch_millis = epoch_millis
        self._calls = 0

    @property
    def call_count(self) -> int:
        """Read-only access to the number of epoch_millis() calls."""
        return self._calls

    def epoch_millis(self) -> int:
        self._calls += 1
        return self._epoch_millis
