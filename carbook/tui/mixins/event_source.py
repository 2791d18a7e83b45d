"""
Event Source Mixin for running the input poller in a background thread.

Provides a reusable pattern for:
- Starting the EventSource in a Textual thread worker
- Forwarding its Input/Tick events through the app's message queue
- Feeding key presses to the poller from key bindings
- Stopping the poller with an explicit shutdown signal
"""

from __future__ import annotations

import threading

from textual import work
from textual.message import Message
from textual.worker import get_current_worker

from carbook.tui.events import DEFAULT_TICK_RATE, Event, EventSource, KeyQueue


class SourceEvent(Message):
    """Message carrying one Input or Tick event from the poller thread."""

    def __init__(self, event: Event) -> None:
        self.event = event
        super().__init__()


class EventSourceMixin:
    """Mixin wiring an EventSource into a Textual app.

    The message queue is the ordered channel between the poller thread and
    the UI: ``post_message`` is thread-safe and preserves order.

    Usage:
        class MyApp(EventSourceMixin, App):
            BINDINGS = [Binding("a", "feed('a')", "Add")]

            def on_mount(self):
                self._start_event_source(tick_rate=0.2)

            def on_source_event(self, message: SourceEvent):
                ...
    """

    def _init_event_source(self) -> None:
        self._keys = KeyQueue()
        self._stop_source = threading.Event()

    def _start_event_source(self, tick_rate: float = DEFAULT_TICK_RATE) -> None:
        """Start polling in a background thread."""
        source = EventSource(
            poll=self._keys.poll,
            emit=lambda event: self.post_message(SourceEvent(event)),
            tick_rate=tick_rate,
        )
        self._run_event_source(source)

    @work(thread=True, exclusive=True, group="event_source")
    def _run_event_source(self, source: EventSource) -> None:
        """Background worker running the poll loop until stopped."""
        worker = get_current_worker()
        source.run(self._stop_source, cancelled=lambda: worker.is_cancelled)

    def _stop_event_source(self) -> None:
        self._stop_source.set()

    def action_feed(self, key: str) -> None:
        """Hand a bound key press to the poller."""
        self._keys.feed(key)
