"""Scoped timing that reports to the engine logger."""

from __future__ import annotations

import functools
from typing import Any, Callable, TypeVar

from .clock import Timer
from .log import core_logger

F = TypeVar("F", bound=Callable[..., Any])


class Profiler:
    """Context manager that logs how long its block took, in milliseconds."""

    def __init__(self, name: str) -> None:
        self.name = name
        self._timer = Timer()

    def __enter__(self) -> "Profiler":
        self._timer.reset()
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        try:
            elapsed = self._timer.elapsed_milliseconds()
            core_logger().info(f"[PROFILER] {self.name}: {elapsed:.3f} ms")
        except Exception:
            core_logger().error(f"Logging failed for '{self.name}'")
        return False

    def elapsed_milliseconds(self) -> float:
        """Milliseconds since the profiled scope started, without logging."""
        return self._timer.elapsed_milliseconds()


def profile_function(func: F) -> F:
    """Profile every call of ``func``; a no-op when running optimised."""
    if not __debug__:
        return func

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        with Profiler(func.__qualname__):
            return func(*args, **kwargs)

    return wrapper  # type: ignore[return-value]