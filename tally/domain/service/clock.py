"""Time source for vote timestamps and cooldown checks."""

import time
from abc import ABC, abstractmethod


class Clock(ABC):
    """Source of the current time in epoch milliseconds."""

    @abstractmethod
    def now_ms(self) -> int:
        pass


class SystemClock(Clock):
    """Wall clock."""

    def now_ms(self) -> int:
        return time.time_ns() // 1_000_000


class FrozenClock(Clock):
    """Manually driven clock for tests.

    Time only moves when ``advance`` or ``set`` is called.
    """

    def __init__(self, start_ms: int = 1_700_000_000_000) -> None:
        self._now = start_ms

    def now_ms(self) -> int:
        return self._now

    def advance(self, ms: int) -> None:
        self._now += ms

    def set(self, now_ms: int) -> None:
        self._now = now_ms
