import asyncio
import heapq
import itertools
import logging
from typing import Callable, Protocol

logger = logging.getLogger(__name__)


class TimerHandle(Protocol):
    def cancel(self) -> None: ...

    def cancelled(self) -> bool: ...


class Scheduler(Protocol):
    def call_later(self, delay_ms: float, callback: Callable[[], None]) -> TimerHandle: ...


def _check_delay(delay_ms: float) -> None:
    if delay_ms < 0:
        raise ValueError(f"delay must be >= 0 ms, got {delay_ms}")


class AsyncioScheduler:
    """Schedules callbacks on the running asyncio event loop.

    Must be used from inside a running loop; handles are plain
    `asyncio.TimerHandle` objects.
    """

    def call_later(self, delay_ms: float, callback: Callable[[], None]) -> asyncio.TimerHandle:
        _check_delay(delay_ms)
        loop = asyncio.get_running_loop()
        return loop.call_later(delay_ms / 1000, callback)


class ManualTimer:
    def __init__(self, when: float, callback: Callable[[], None]):
        self.when = when
        self.callback = callback
        self._cancelled = False

    def cancel(self) -> None:
        self._cancelled = True

    def cancelled(self) -> bool:
        return self._cancelled


class ManualScheduler:
    """Virtual-clock scheduler; time only moves when `advance` is called."""

    def __init__(self):
        self.now = 0.0
        self._queue: list[tuple[float, int, ManualTimer]] = []
        self._seq = itertools.count()

    def call_later(self, delay_ms: float, callback: Callable[[], None]) -> ManualTimer:
        _check_delay(delay_ms)
        timer = ManualTimer(self.now + delay_ms, callback)
        heapq.heappush(self._queue, (timer.when, next(self._seq), timer))
        return timer

    @property
    def pending(self) -> int:
        return sum(1 for _, _, t in self._queue if not t.cancelled())

    def advance(self, delay_ms: float) -> int:
        """Move the clock forward and fire every timer that falls due.

        Timers scheduled by a firing callback run in the same call when
        they are due before the new time. Returns the number fired.
        """
        _check_delay(delay_ms)
        deadline = self.now + delay_ms
        fired = 0
        while self._queue and self._queue[0][0] <= deadline:
            when, _, timer = heapq.heappop(self._queue)
            if timer.cancelled():
                continue
            self.now = when
            timer.callback()
            fired += 1
        self.now = deadline
        return fired

    def run_until_idle(self) -> int:
        fired = 0
        while self.pending:
            live = [t.when for _, _, t in self._queue if not t.cancelled()]
            fired += self.advance(min(live) - self.now)
        logger.debug("manual scheduler idle at t=%s after %d callbacks", self.now, fired)
        return fired
