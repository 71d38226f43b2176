# eventflow/lib/ids.py
import time
from typing import Callable, Iterable


class MonotonicIdGenerator:
    """
    Millisecond-timestamp ids that never repeat within a process.
    Two calls in the same millisecond (or a clock step backwards) bump to last + 1.
    """

    def __init__(self, clock: Callable[[], float] = time.time):
        self._clock = clock
        self._last = 0

    def seed(self, existing: Iterable[int]) -> None:
        """Make sure future ids sort after ids that were already handed out."""
        for i in existing:
            if i > self._last:
                self._last = i

    def __call__(self) -> int:
        now = int(self._clock() * 1000)
        if now <= self._last:
            now = self._last + 1
        self._last = now
        return now
