"""Millisecond clock helpers with 32-bit wrap-around arithmetic."""

import time
from typing import Callable

#: A clock is any zero-argument callable that returns milliseconds.
Clock = Callable[[], int]

_WRAP = 1 << 32


def monotonic_ms() -> int:
    """Return a monotonic timestamp in whole milliseconds, wrapped to 32 bits."""
    return (time.monotonic_ns() // 1_000_000) % _WRAP


def elapsed_ms(now: int, since: int) -> int:
    """Return milliseconds from ``since`` to ``now``, tolerant of counter wrap-around."""
    return (now - since) % _WRAP