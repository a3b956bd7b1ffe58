from __future__ import annotations

"""Tick timers. Both serialize ticks: a callback always returns before the next one fires."""

import time
from typing import Callable


class ManualTimer:
    """Fires ticks only when asked. Used by headless runs and tests."""

    def __init__(self) -> None:
        self.running = False
        self.fired = 0
        self._callback: Callable[[], None] | None = None

    def start(self, callback: Callable[[], None]) -> None:
        self._callback = callback
        self.running = True

    def stop(self) -> None:
        self.running = False

    def fire(self, n: int = 1) -> int:
        """Run up to `n` ticks, stopping early if the timer is stopped. Returns ticks run."""
        ran = 0
        while ran < n and self.running and self._callback is not None:
            self._callback()
            ran += 1
            self.fired += 1
        return ran


class FixedStepTimer:
    """Fixed-period timer pumped by the host loop.

    Each `pump` runs every tick that came due since the last one, one after
    another. At most `max_catchup` ticks run per pump; any older backlog is
    dropped so a stalled host does not replay a burst of stale ticks.
    """

    def __init__(self, period: float, *, max_catchup: int = 5, clock: Callable[[], float] = time.perf_counter) -> None:
        if period <= 0:
            raise ValueError(f"period must be > 0, got {period}")
        if max_catchup < 1:
            raise ValueError(f"max_catchup must be >= 1, got {max_catchup}")
        self.period = period
        self.max_catchup = max_catchup
        self.clock = clock
        self.running = False
        self.dropped = 0
        self._callback: Callable[[], None] | None = None
        self._next_due = 0.0

    def start(self, callback: Callable[[], None]) -> None:
        self._callback = callback
        self._next_due = self.clock() + self.period
        self.running = True

    def stop(self) -> None:
        self.running = False

    def pump(self, now: float | None = None) -> int:
        if not self.running or self._callback is None:
            return 0
        now = self.clock() if now is None else now
        if now < self._next_due:
            return 0

        periods = int((now - self._next_due) // self.period) + 1
        self._next_due += periods * self.period
        due = min(periods, self.max_catchup)
        self.dropped += periods - due

        ran = 0
        while ran < due and self.running:
            self._callback()
            ran += 1
        return ran

    def time_until_next(self, now: float | None = None) -> float:
        now = self.clock() if now is None else now
        return max(0.0, self._next_due - now)
