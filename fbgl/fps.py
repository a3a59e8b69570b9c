"""Frame-rate measurement."""

from __future__ import annotations

import time
from typing import Callable

__all__ = ["FpsCounter"]


class FpsCounter:
    """Reports frames per second from the time between successive ticks."""

    def __init__(self, clock: Callable[[], float] = time.monotonic) -> None:
        self._clock = clock
        self._previous: float | None = None

    def tick(self) -> float:
        """Mark a frame and return the rate since the previous one.

        The first tick, and any tick that follows with no elapsed time,
        returns 0.0.
        """
        now = self._clock()
        previous, self._previous = self._previous, now
        if previous is None:
            return 0.0
        elapsed = now - previous
        return 1.0 / elapsed if elapsed > 0.0 else 0.0