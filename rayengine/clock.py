"""Frame timing and elapsed-time measurement."""

from __future__ import annotations

import time


class Timer:
    """Monotonic timer for per-frame delta time and total elapsed time."""

    def __init__(self) -> None:
        self._start = 0.0
        self._last = 0.0
        self._delta_seconds = 0.0
        self._elapsed_seconds = 0.0
        self.reset()

    def reset(self) -> None:
        """Restart the timer from now and clear delta and elapsed time."""
        self._start = time.perf_counter()
        self._last = self._start
        self._delta_seconds = 0.0
        self._elapsed_seconds = 0.0

    def tick(self) -> None:
        """Advance by one frame; call once per frame."""
        now = time.perf_counter()
        self._delta_seconds = now - self._last
        self._last = now
        self._elapsed_seconds = now - self._start

    @property
    def delta_seconds(self) -> float:
        """Seconds between the last two ticks (or since reset)."""
        return self._delta_seconds

    @property
    def elapsed_seconds(self) -> float:
        """Seconds from reset to the last tick."""
        return self._elapsed_seconds

    def elapsed_milliseconds(self) -> float:
        """Milliseconds from reset until now, independent of ticks."""
        return (time.perf_counter() - self._start) * 1000.0