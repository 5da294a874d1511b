# src/rpc_kit/core/clock.py

import time
from typing import Protocol


class Clock(Protocol):
    """Time source for retry and backoff logic."""

    def nano_time(self) -> int:
        """Monotonic time in nanoseconds. Only meaningful as a difference."""
        ...

    def millis_time(self) -> int:
        """Wall clock time in milliseconds since the epoch."""
        ...


class NanoClock:
    """System clock backed by `time.monotonic_ns` and `time.time_ns`."""

    @classmethod
    def default_clock(cls) -> "NanoClock":
        return _DEFAULT_CLOCK

    def nano_time(self) -> int:
        return time.monotonic_ns()

    def millis_time(self) -> int:
        return time.time_ns() // 1_000_000

    def __repr__(self) -> str:
        return "NanoClock()"


_DEFAULT_CLOCK = NanoClock()
