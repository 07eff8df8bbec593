"""
Timing utilities for processor instrumentation.
"""

from __future__ import annotations

import time


class Timer:
    """
    Wall-clock timer started on creation.

    Usage:
        timer = Timer()
        # do work
        print(format_duration(timer.elapsed))
    """

    def __init__(self):
        self._start = time.perf_counter()

    @property
    def elapsed(self) -> float:
        """Seconds since creation."""
        return time.perf_counter() - self._start


def format_duration(seconds: float) -> str:
    """
    Format duration in human-readable form.

    Args:
        seconds: Duration in seconds

    Returns:
        Formatted string
    """
    if seconds < 1:
        return f"{seconds * 1000:.1f}ms"
    elif seconds < 60:
        return f"{seconds:.2f}s"
    minutes = int(seconds // 60)
    return f"{minutes}m {seconds % 60:.1f}s"
