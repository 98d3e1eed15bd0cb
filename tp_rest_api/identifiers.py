"""
Record identifiers derived from wall-clock time.

Identifiers are milliseconds since the Unix epoch. Within one process they are
strictly increasing: a call landing in the same millisecond as the previous
one (or after the clock stepped back) gets ``last + 1``. Identifiers issued by
separate processes can still collide.
"""

import threading
import time
from typing import Callable, Optional


def _wall_clock_ms() -> int:
    return time.time_ns() // 1_000_000


class IdGenerator:
    """Thread-safe, strictly increasing millisecond identifiers."""

    def __init__(self, clock: Optional[Callable[[], int]] = None) -> None:
        """
        Args:
            clock: Returns the current time in milliseconds. Defaults to the
                system wall clock.
        """
        self._clock = clock or _wall_clock_ms
        self._lock = threading.Lock()
        self._last = 0

    def next_id(self) -> int:
        with self._lock:
            candidate = int(self._clock())
            if candidate <= self._last:
                candidate = self._last + 1
            self._last = candidate
            return candidate


_default_generator = IdGenerator()


def next_id() -> int:
    """Next identifier from the process-wide generator."""
    return _default_generator.next_id()
