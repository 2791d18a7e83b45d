"""
Background event source for the record manager.

The EventSource runs in its own thread, polls an input device with a
bounded timeout and emits ``Input`` and ``Tick`` events in arrival order.
Rendering happens elsewhere, so the UI redraws at a steady cadence even
when no key is pressed.

Usage:
    keys = KeyQueue()
    stop = threading.Event()
    source = EventSource(poll=keys.poll, emit=channel.put)
    threading.Thread(target=source.run, args=(stop,)).start()
    keys.feed("a")
    ...
    stop.set()
"""

from __future__ import annotations

import queue
import threading
import time
from dataclasses import dataclass
from typing import Callable, Union

DEFAULT_TICK_RATE: float = 0.2


@dataclass(frozen=True)
class Input:
    """A key press forwarded from the input device."""

    key: str


@dataclass(frozen=True)
class Tick:
    """Periodic event that forces a redraw when no input arrives."""


Event = Union[Input, Tick]


class KeyQueue:
    """Thread-safe key buffer used as the input device.

    The UI thread feeds key presses; the event source polls them with a
    timeout.
    """

    def __init__(self) -> None:
        self._queue: queue.Queue[str] = queue.Queue()

    def feed(self, key: str) -> None:
        """Queue a key press."""
        self._queue.put(key)

    def poll(self, timeout: float) -> str | None:
        """Wait up to ``timeout`` seconds for a key press.

        Returns:
            The key, or None if the window elapsed without input.
        """
        try:
            if timeout <= 0:
                return self._queue.get_nowait()
            return self._queue.get(timeout=timeout)
        except queue.Empty:
            return None


class EventSource:
    """Polls an input device and emits Input/Tick events.

    Args:
        poll: Callable that waits up to the given number of seconds for a key
            and returns it, or None on timeout.
        emit: Callable receiving each event in order. It must be safe to call
            from the source's thread.
        tick_rate: Seconds between Tick events.
        clock: Monotonic clock, injectable for tests.
    """

    def __init__(
        self,
        poll: Callable[[float], str | None],
        emit: Callable[[Event], object],
        tick_rate: float = DEFAULT_TICK_RATE,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        if tick_rate <= 0:
            raise ValueError(f"tick_rate must be positive (got {tick_rate})")
        self._poll = poll
        self._emit = emit
        self.tick_rate = tick_rate
        self._clock = clock
        self._last_tick = clock()

    def remaining(self) -> float:
        """Return how long to wait for input before the next tick is due."""
        return max(0.0, self.tick_rate - (self._clock() - self._last_tick))

    def step(self) -> None:
        """Run one poll window and emit whatever it produced."""
        key = self._poll(self.remaining())
        if key is not None:
            self._emit(Input(key))

        if self._clock() - self._last_tick >= self.tick_rate:
            self._emit(Tick())
            self._last_tick = self._clock()

    def run(
        self,
        stop: threading.Event,
        cancelled: Callable[[], bool] | None = None,
    ) -> None:
        """Poll until ``stop`` is set or ``cancelled`` returns True.

        Both are checked once per poll window, so shutdown takes at most one
        tick interval.
        """
        self._last_tick = self._clock()
        while not stop.is_set():
            if cancelled is not None and cancelled():
                break
            self.step()
