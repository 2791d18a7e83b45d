"""Mixins for the TUI application."""

from carbook.tui.mixins.event_source import EventSourceMixin, SourceEvent
from carbook.tui.mixins.record_table import RecordTableMixin

__all__ = [
    "EventSourceMixin",
    "RecordTableMixin",
    "SourceEvent",
]
