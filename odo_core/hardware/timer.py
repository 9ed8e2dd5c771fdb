"""
Monotonic nanosecond timer.

Reports nanoseconds elapsed since the last reset. The clock is injectable
so tests can drive time explicitly.
"""

import time
from typing import Callable

NANOS_PER_SECOND = 1_000_000_000


class NanoTimer:
    """Elapsed-time tracker over a monotonic nanosecond clock."""

    def __init__(self, clock: Callable[[], int] = time.monotonic_ns):
        self.clock = clock
        self.start_time = clock()

    def reset_timer(self):
        self.start_time = self.clock()

    def get_elapsed_time(self) -> int:
        """Nanoseconds since the last reset."""
        return self.clock() - self.start_time

    def get_elapsed_time_seconds(self) -> float:
        return self.get_elapsed_time() / NANOS_PER_SECOND
