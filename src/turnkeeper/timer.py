"""Stopwatch for the current speech."""

from __future__ import annotations

import time
from typing import Callable, Optional


class Timer:
    """Accumulates elapsed seconds across start/stop cycles."""

    def __init__(
        self,
        accumulated: float = 0.0,
        running: bool = False,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._clock = clock
        self.accumulated = max(0.0, float(accumulated))
        self._started_at: Optional[float] = clock() if running else None

    @property
    def is_running(self) -> bool:
        return self._started_at is not None

    def elapsed(self) -> float:
        if self._started_at is None:
            return self.accumulated
        return self.accumulated + max(0.0, self._clock() - self._started_at)

    def start_or_stop(self) -> None:
        if self.is_running:
            self.stop()
        else:
            self._started_at = self._clock()

    def stop(self) -> None:
        if self._started_at is not None:
            self.accumulated = self.elapsed()
            self._started_at = None

    def reset(self) -> None:
        self.accumulated = 0.0
        self._started_at = None
