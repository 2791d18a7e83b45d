"""Tests for the background event source in carbook/tui/events.py."""

from __future__ import annotations

import threading

import pytest

from carbook.tui.events import EventSource, Input, KeyQueue, Tick


class FakeClock:
    """Manually advanced monotonic clock."""

    def __init__(self) -> None:
        self.now = 0.0

    def __call__(self) -> float:
        return self.now


class ScriptedInput:
    """Input device that returns queued keys and otherwise waits out the window."""

    def __init__(self, clock: FakeClock, keys: list[str] | None = None) -> None:
        self.clock = clock
        self.keys = list(keys or [])
        self.timeouts: list[float] = []

    def poll(self, timeout: float) -> str | None:
        self.timeouts.append(timeout)
        if self.keys:
            self.clock.now += 0.05
            return self.keys.pop(0)
        # overshoot slightly so float rounding never delays a due tick
        self.clock.now += timeout + 0.001
        return None


def make_source(keys: list[str] | None = None, tick_rate: float = 0.2):
    clock = FakeClock()
    device = ScriptedInput(clock, keys)
    events: list = []
    source = EventSource(device.poll, events.append, tick_rate=tick_rate, clock=clock)
    return source, device, events, clock


class TestEventSourceStep:
    """Tests for a single poll window."""

    def test_idle_window_emits_tick(self):
        source, device, events, _ = make_source()
        source.step()
        assert events == [Tick()]
        assert device.timeouts == [pytest.approx(0.2)]

    def test_key_emitted_before_tick_is_due(self):
        source, _, events, _ = make_source(["a"])
        source.step()
        assert events == [Input("a")]

    def test_timeout_shrinks_with_elapsed_time(self):
        """After a key, the next poll only waits for the rest of the interval."""
        source, device, events, _ = make_source(["a"])
        source.step()
        source.step()
        assert device.timeouts[1] == pytest.approx(0.15)
        assert events == [Input("a"), Tick()]

    def test_tick_resets_interval(self):
        source, _, _, _ = make_source()
        source.step()
        assert source.remaining() == pytest.approx(0.2)

    def test_remaining_never_negative(self):
        source, _, _, clock = make_source()
        clock.now = 5.0
        assert source.remaining() == 0.0

    def test_input_and_tick_interleave_in_arrival_order(self):
        source, _, events, _ = make_source(["a", "b", "c", "d", "e"])
        for _ in range(6):
            source.step()
        keys = [e.key for e in events if isinstance(e, Input)]
        assert keys == ["a", "b", "c", "d", "e"]
        assert Tick() in events

    def test_invalid_tick_rate(self):
        with pytest.raises(ValueError):
            EventSource(lambda timeout: None, lambda event: None, tick_rate=0)


class TestEventSourceRun:
    """Tests for the poll loop and its shutdown signal."""

    def test_run_stops_when_signalled(self):
        stop = threading.Event()
        clock = FakeClock()
        device = ScriptedInput(clock)
        events: list = []

        def emit(event):
            events.append(event)
            if len(events) == 3:
                stop.set()

        EventSource(device.poll, emit, clock=clock).run(stop)
        assert events == [Tick(), Tick(), Tick()]

    def test_run_returns_immediately_when_already_stopped(self):
        stop = threading.Event()
        stop.set()
        events: list = []
        EventSource(lambda timeout: None, events.append).run(stop)
        assert events == []

    def test_run_honours_cancel_callback(self):
        clock = FakeClock()
        device = ScriptedInput(clock)
        events: list = []
        EventSource(device.poll, events.append, clock=clock).run(
            threading.Event(), cancelled=lambda: len(events) >= 2
        )
        assert len(events) == 2

    def test_runs_in_background_thread(self):
        """Keys fed from another thread arrive in order and shutdown is prompt."""
        keys = KeyQueue()
        stop = threading.Event()
        received: list = []
        seen_all = threading.Event()

        def emit(event):
            received.append(event)
            inputs = [e for e in received if isinstance(e, Input)]
            if len(inputs) == 3:
                seen_all.set()

        source = EventSource(keys.poll, emit, tick_rate=0.02)
        thread = threading.Thread(target=source.run, args=(stop,), daemon=True)
        thread.start()
        for key in ("x", "y", "z"):
            keys.feed(key)
        assert seen_all.wait(timeout=5)
        stop.set()
        thread.join(timeout=5)
        assert not thread.is_alive()
        assert [e.key for e in received if isinstance(e, Input)] == ["x", "y", "z"]


class TestKeyQueue:
    """Tests for the KeyQueue input device."""

    def test_poll_times_out(self):
        assert KeyQueue().poll(0.01) is None

    def test_poll_zero_timeout_does_not_block(self):
        assert KeyQueue().poll(0) is None

    def test_poll_returns_fed_keys_in_order(self):
        keys = KeyQueue()
        keys.feed("a")
        keys.feed("down")
        assert keys.poll(0) == "a"
        assert keys.poll(0.1) == "down"
