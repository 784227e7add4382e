"""Schedulers consumed by :func:`underbar.functional.decorators.delay`.

``delay`` never runs timers itself. It hands a zero-argument callback and a
delay in milliseconds to a :class:`Scheduler` and returns whatever handle the
scheduler produced. Two implementations are provided:

    - :class:`TimerScheduler`: real wall-clock timers on ``threading.Timer``.
    - :class:`VirtualScheduler`: a manually advanced clock that runs due
      callbacks FIFO-by-deadline, for deterministic code and tests.
"""

import heapq
import itertools
import threading
from abc import ABC, abstractmethod
from typing import Any, Callable, List, Optional, Protocol, Tuple, runtime_checkable

from underbar.core.config import settings
from underbar.logger.logger import logger

__all__ = [
    "Handle",
    "SchedulerLike",
    "Scheduler",
    "TimerScheduler",
    "ScheduledCall",
    "VirtualScheduler",
    "default_scheduler",
]

Callback = Callable[[], Any]


@runtime_checkable
class Handle(Protocol):
    def cancel(self) -> None: ...


@runtime_checkable
class SchedulerLike(Protocol):
    """Anything with a ``schedule(callback, delay_ms) -> handle`` method."""

    def schedule(self, callback: Callback, delay_ms: float) -> Any: ...


class Scheduler(ABC):
    """Abstract base class for deferred-callback schedulers."""

    @abstractmethod
    def schedule(self, callback: Callback, delay_ms: float) -> Any:
        """Run ``callback`` no earlier than ``delay_ms`` milliseconds from now.

        Returns:
            A handle for the scheduled call. Cancellation is available only if
            the handle supports it.
        """
        pass


class TimerScheduler(Scheduler):
    """Schedule callbacks on background ``threading.Timer`` threads.

    Args:
        daemon: Whether timer threads are daemonic. Defaults to
            ``settings.TIMER_DAEMON``.
    """

    def __init__(self, daemon: Optional[bool] = None):
        self.daemon = settings.TIMER_DAEMON if daemon is None else daemon

    def schedule(self, callback: Callback, delay_ms: float) -> threading.Timer:
        def fire():
            logger.debug(f"Timer fired after {delay_ms}ms: {callback!r}")
            callback()

        timer = threading.Timer(delay_ms / 1000.0, fire)
        timer.daemon = self.daemon
        timer.start()
        logger.debug(f"Scheduled {callback!r} in {delay_ms}ms on {timer.name}")
        return timer


class ScheduledCall:
    """Handle returned by :class:`VirtualScheduler`."""

    def __init__(self, callback: Callback, deadline: float):
        self.callback = callback
        self.deadline = deadline
        self.cancelled = False
        self.done = False

    def cancel(self) -> None:
        if not self.done:
            self.cancelled = True
            logger.debug(f"Cancelled call due at {self.deadline}ms")

    def __repr__(self) -> str:
        state = "cancelled" if self.cancelled else "done" if self.done else "pending"
        return f"ScheduledCall(deadline={self.deadline}, {state})"


class VirtualScheduler(Scheduler):
    """Deterministic scheduler driven by :meth:`advance`.

    Calls are ordered by deadline; calls sharing a deadline run in the order
    they were scheduled. A callback scheduling further work during
    :meth:`advance` has it run in the same pass when it falls due.
    """

    def __init__(self, now: float = 0.0):
        self.now = now
        # heap item: (deadline, seq, call)
        self._queue: List[Tuple[float, int, ScheduledCall]] = []
        self._seq = itertools.count()

    @property
    def pending(self) -> int:
        """Number of scheduled calls that have neither run nor been cancelled."""
        return sum(1 for _, _, call in self._queue if not call.cancelled)

    def schedule(self, callback: Callback, delay_ms: float) -> ScheduledCall:
        call = ScheduledCall(callback, self.now + delay_ms)
        heapq.heappush(self._queue, (call.deadline, next(self._seq), call))
        logger.debug(f"Scheduled {callback!r} at {call.deadline}ms")
        return call

    def advance(self, ms: float) -> int:
        """Move the clock forward ``ms`` milliseconds and run everything due.

        Returns:
            Number of callbacks run.
        """
        if ms < 0:
            raise ValueError("VirtualScheduler cannot move backwards in time")
        return self._run_until(self.now + ms)

    def run_all(self) -> int:
        """Run every pending call, moving the clock to the last deadline."""
        ran = 0
        while self._queue:
            ran += self._run_until(self._queue[0][0])
        return ran

    def _run_until(self, target: float) -> int:
        ran = 0
        while self._queue and self._queue[0][0] <= target:
            deadline, _, call = heapq.heappop(self._queue)
            if call.cancelled:
                continue
            self.now = deadline
            call.done = True
            call.callback()
            ran += 1
        self.now = max(self.now, target)
        return ran


_default_scheduler: Optional[TimerScheduler] = None


def default_scheduler() -> TimerScheduler:
    """Return the process-wide :class:`TimerScheduler`."""
    global _default_scheduler
    if _default_scheduler is None:
        _default_scheduler = TimerScheduler()
    return _default_scheduler
