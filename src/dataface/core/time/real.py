"""Real clock implementation using time.time()."""

import time

from dataface.core.time.abc import Time


class RealTime(Time):
    """Production implementation reading the system clock."""

    def epoch_millis(self) -> int:
        """Return milliseconds since the Unix epoch using time.time()."""
        return int(time.time() * 1000)
