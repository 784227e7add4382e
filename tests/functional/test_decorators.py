import threading

import pytest
from pydantic import ValidationError
from unittest.mock import MagicMock, patch
from underbar.functional.decorators import Memoized, Once, delay, memoize, once
from underbar.scheduling.scheduler import Scheduler, TimerScheduler, VirtualScheduler


class TestOnce:
    def test_calls_wrapped_function_once(self):
        fn = MagicMock(return_value=42)
        wrapped = once(fn)
        results = [wrapped() for _ in range(5)]
        assert results == [42] * 5
        fn.assert_called_once_with()

    def test_first_call_arguments_are_used(self):
        add = once(lambda a, b: a + b)
        assert add(1, 2) == 3
        assert add(10, 20) == 3

    def test_exposes_state(self):
        wrapped = once(lambda: "done")
        assert isinstance(wrapped, Once)
        assert wrapped.called is False
        wrapped()
        assert wrapped.called is True
        assert wrapped.result == "done"

    def test_exception_leaves_wrapper_uncalled(self):
        fn = MagicMock(side_effect=[ValueError("boom"), "ok"])
        wrapped = once(fn)
        with pytest.raises(ValueError):
            wrapped()
        assert wrapped() == "ok"
        assert wrapped() == "ok"
        assert fn.call_count == 2

    def test_binds_receiver_as_method(self):
        class Counter:
            def __init__(self):
                self.hits = 0

            @once
            def start(self):
                self.hits += 1
                return self

        counter = Counter()
        assert counter.start() is counter
        assert counter.start() is counter
        assert counter.hits == 1

    def test_keeps_wrapped_metadata(self):
        def compute():
            """Compute something."""

        wrapped = once(compute)
        assert wrapped.__name__ == "compute"
        assert wrapped.__doc__ == "Compute something."


class TestMemoize:
    def test_same_argument_computes_once(self):
        fn = MagicMock(side_effect=lambda n: n * 2)
        doubled = memoize(fn)
        assert doubled(4) == 8
        assert doubled(4) == 8
        fn.assert_called_once_with(4)

    def test_distinct_arguments_are_cached_separately(self):
        fn = MagicMock(side_effect=lambda n: n + 1)
        inc = memoize(fn)
        assert [inc(1), inc(2), inc(1), inc(2)] == [2, 3, 2, 3]
        assert fn.call_count == 2

    def test_cache_is_keyed_by_string_form(self):
        fn = MagicMock(side_effect=lambda x: type(x).__name__)
        wrapped = memoize(fn)
        assert wrapped(1) == "int"
        assert wrapped("1") == "int"
        assert fn.call_count == 1

    def test_cache_view_is_read_only(self):
        wrapped = memoize(lambda x: x)
        assert isinstance(wrapped, Memoized)
        wrapped("a")
        assert dict(wrapped.cache) == {"a": "a"}
        with pytest.raises(TypeError):
            wrapped.cache["b"] = "b"  # type: ignore[index]

    def test_fibonacci(self):
        calls = []

        @memoize
        def fib(n):
            calls.append(n)
            return n if n < 2 else fib(n - 1) + fib(n - 2)

        assert fib(30) == 832040
        assert len(calls) == 31


class TestDelay:
    def test_schedules_through_given_scheduler(self):
        scheduler = VirtualScheduler()
        fn = MagicMock()
        delay(fn, 100, "a", "b", scheduler=scheduler)

        scheduler.advance(99)
        fn.assert_not_called()

        scheduler.advance(1)
        fn.assert_called_once_with("a", "b")

    def test_returns_scheduler_handle(self):
        scheduler = MagicMock(spec=Scheduler)
        handle = delay(lambda: None, 50, scheduler=scheduler)
        assert handle is scheduler.schedule.return_value
        callback, wait = scheduler.schedule.call_args.args
        assert wait == 50
        assert callable(callback)

    def test_callback_runs_function_with_arguments(self):
        scheduler = MagicMock(spec=Scheduler)
        fn = MagicMock(return_value="result")
        delay(fn, 10, 1, 2, scheduler=scheduler)
        callback = scheduler.schedule.call_args.args[0]
        assert callback() == "result"
        fn.assert_called_once_with(1, 2)

    def test_accepts_any_object_with_schedule_method(self):
        class ImmediateScheduler:
            def schedule(self, callback, delay_ms):
                callback()
                return "handle"

        out = []
        assert delay(out.append, 0, 1, scheduler=ImmediateScheduler()) == "handle"
        assert out == [1]

    def test_handle_can_cancel(self):
        scheduler = VirtualScheduler()
        fn = MagicMock()
        handle = delay(fn, 10, scheduler=scheduler)
        handle.cancel()
        scheduler.advance(20)
        fn.assert_not_called()

    @pytest.mark.parametrize("wait", [-1, "soon"])
    def test_invalid_wait_is_rejected(self, wait):
        with pytest.raises(ValidationError):
            delay(lambda: None, wait, scheduler=VirtualScheduler())

    def test_default_scheduler_is_timer_based(self):
        with patch("underbar.functional.decorators.default_scheduler") as factory:
            factory.return_value = MagicMock(spec=TimerScheduler)
            delay(lambda: None, 5)
            factory.return_value.schedule.assert_called_once()

    def test_default_scheduler_fires(self):
        fired = threading.Event()
        timer = delay(fired.set, 1)
        assert fired.wait(timeout=5)
        timer.join(timeout=5)
