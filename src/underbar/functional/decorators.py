"""Function decorators: run-once, memoization and deferred invocation.

``once`` and ``memoize`` return small callable objects instead of bare
closures. Each object owns its state (the run-once flag and result, or the
results cache) for exactly as long as the wrapper itself lives, and exposes it
read-only for inspection.

``delay`` does not own a timer. It hands the call to a
:class:`~underbar.scheduling.scheduler.Scheduler` and returns the scheduler's
handle unchanged.
"""

import functools
import types
import typing as tp

from pydantic import ConfigDict, SkipValidation, validate_call

from underbar.core.types import WaitMillis
from underbar.logger.logger import logger
from underbar.scheduling.scheduler import SchedulerLike, default_scheduler

__all__ = ["Once", "Memoized", "once", "memoize", "delay"]


class Once:
    """Callable that runs the wrapped function on its first call only.

    Every call, the first included, returns the first call's result. When
    stored as a class attribute it binds like a method, passing the instance
    as the first argument; the run-once state is still shared by all
    instances.
    """

    def __init__(self, fn: tp.Callable[..., tp.Any]):
        functools.update_wrapper(self, fn)
        self.fn = fn
        self.called = False
        self.result: tp.Any = None

    def __call__(self, *args, **kwargs):
        if not self.called:
            self.result = self.fn(*args, **kwargs)
            self.called = True
        return self.result

    def __get__(self, instance, owner=None):
        if instance is None:
            return self
        return functools.partial(self, instance)

    def __repr__(self) -> str:
        return f"Once({self.fn!r}, called={self.called})"


class Memoized:
    """Callable caching results of a single-argument function.

    Results are keyed by ``str(argument)``, so the argument is expected to be a
    primitive (number, string, bool, ``None``). The cache is never evicted and
    grows for as long as the wrapper is alive.
    """

    def __init__(self, fn: tp.Callable[[tp.Any], tp.Any]):
        functools.update_wrapper(self, fn)
        self.fn = fn
        self._cache: tp.Dict[str, tp.Any] = {}

    @property
    def cache(self) -> tp.Mapping[str, tp.Any]:
        """Read-only view of the stored results."""
        return types.MappingProxyType(self._cache)

    def __call__(self, arg: tp.Any = None) -> tp.Any:
        key = str(arg)
        if key not in self._cache:
            logger.debug(f"memoize miss for {self.fn!r}({key})")
            self._cache[key] = self.fn(arg)
        return self._cache[key]

    def __repr__(self) -> str:
        return f"Memoized({self.fn!r}, entries={len(self._cache)})"


def once(fn: tp.Callable[..., tp.Any]) -> Once:
    """Wrap ``fn`` so it runs at most once.

    Example:
        >>> init = once(lambda: object())
        >>> init() is init()
        True
    """
    return Once(fn)


def memoize(fn: tp.Callable[[tp.Any], tp.Any]) -> Memoized:
    """Wrap a single-argument ``fn`` so repeated arguments reuse the result."""
    return Memoized(fn)


@validate_call(config=ConfigDict(arbitrary_types_allowed=True))
def delay(
    fn: tp.Callable[..., tp.Any],
    wait: WaitMillis,
    *args: tp.Any,
    scheduler: SkipValidation[tp.Optional[SchedulerLike]] = None,
) -> tp.Any:
    """Call ``fn(*args)`` once, no earlier than ``wait`` milliseconds from now.

    Args:
        fn: Function to call.
        wait: Non-negative delay in milliseconds.
        *args: Positional arguments passed to ``fn``.
        scheduler: Any object with a ``schedule(callback, delay_ms)`` method.
            Only the method is required, not a subclass of
            :class:`~underbar.scheduling.scheduler.Scheduler`. Defaults to the
            process-wide :class:`~underbar.scheduling.scheduler.TimerScheduler`.

    Returns:
        The scheduler's handle for the pending call (a ``threading.Timer`` with
        the default scheduler, which can be cancelled).

    Raises:
        pydantic.ValidationError: If ``wait`` is negative or not a number.

    Example:
        >>> timer = delay(print, 500, "a", "b")  # prints "a b" after half a second
        >>> timer.cancel()
    """
    if scheduler is None:
        scheduler = default_scheduler()
    logger.debug(f"Delaying {fn!r} by {wait}ms")
    return scheduler.schedule(lambda: fn(*args), wait)
