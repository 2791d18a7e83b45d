"""
Main Textual application for the record manager.

This is the entry point for the TUI that browses, adds and deletes vehicle
records kept in a flat JSON file.

Keys:
    q       quit
    h/c/i   show the Home, Cars or Info tab
    a       add a randomly generated car
    d       delete the selected car
    up/down move the selection (wraps around)
"""

from __future__ import annotations

import argparse
import os
import random
import sys

from textual.app import App
from textual.binding import Binding

from carbook.logger import DEFAULT_LEVEL, get_logger, setup_logging
from carbook.storage import JSONRecordStore, RecordStore, StoreError
from carbook.tui.controller import Command, Tab, ViewController
from carbook.tui.events import DEFAULT_TICK_RATE
from carbook.tui.mixins import EventSourceMixin, SourceEvent
from carbook.tui.views.main_view import MainScreen

logger = get_logger(__name__)

DEFAULT_DB_PATH = os.path.join(".", "data", "db.json")
DEFAULT_TICK_RATE_MS = int(DEFAULT_TICK_RATE * 1000)


class CarBookApp(EventSourceMixin, App):
    """A Textual app for managing vehicle records."""

    TITLE = "car-CLI"

    CSS = """
    Screen {
        background: $surface;
    }

    DataTable > .datatable--header {
        background: $primary-darken-1;
        color: $text;
        text-style: bold;
    }

    DataTable > .datatable--cursor {
        background: $secondary;
        color: $text;
    }
    """

    BINDINGS = [
        Binding("q", "feed('q')", "Quit", show=True),
        Binding("h", "feed('h')", "Home", show=True),
        Binding("c", "feed('c')", "Cars", show=True),
        Binding("i", "feed('i')", "Info", show=True),
        Binding("a", "feed('a')", "Add", show=True),
        Binding("d", "feed('d')", "Delete", show=True),
        Binding("down", "feed('down')", "Down", show=False, priority=True),
        Binding("up", "feed('up')", "Up", show=False, priority=True),
    ]

    def __init__(
        self,
        store: RecordStore,
        rng: random.Random | None = None,
        tick_rate: float = DEFAULT_TICK_RATE,
        initial_tab: Tab = Tab.HOME,
    ):
        """Initialize the app with a record store.

        Args:
            store: Where records are read from and written to.
            rng: Random source for generated records.
            tick_rate: Seconds between redraws when no key is pressed.
            initial_tab: Tab shown at startup.
        """
        super().__init__()
        self._init_event_source()
        self.controller = ViewController(store, rng=rng, tab=initial_tab)
        self._tick_rate = tick_rate
        self._main_screen: MainScreen | None = None

    def on_mount(self) -> None:
        """Show the main screen and start polling for input."""
        self.sub_title = self.controller.store.location
        self._main_screen = MainScreen()
        self.push_screen(self._main_screen)
        self.call_after_refresh(self._redraw)
        self._start_event_source(self._tick_rate)
        logger.info("Started with database %s", self.controller.store.location)

    def on_unmount(self) -> None:
        """Stop the poller on every exit path."""
        self._stop_event_source()

    def on_source_event(self, message: SourceEvent) -> None:
        """Apply an Input or Tick event and redraw the frame."""
        command = self.controller.handle(message.event)

        if not self.controller.running:
            self._stop_event_source()
            self.exit()
            return

        if command is Command.ADD:
            record = self.controller.records[-1]
            self.notify(f"Added {record.name} ({record.category})")
        elif command is Command.DELETE:
            self.notify("Deleted selected car", severity="warning")

        self._redraw()

    def _redraw(self) -> None:
        if self._main_screen is not None and self._main_screen.is_mounted:
            self._main_screen.render_frame(self.controller)


def main() -> None:
    """Parse arguments and run the application."""
    parser = argparse.ArgumentParser(
        description="Browse, add and delete vehicle records stored in a JSON file."
    )
    parser.add_argument(
        "--db",
        default=os.environ.get("CARBOOK_DB", DEFAULT_DB_PATH),
        help=f"Path to the JSON database file (default: {DEFAULT_DB_PATH})",
    )
    parser.add_argument(
        "--tick-rate",
        type=int,
        default=DEFAULT_TICK_RATE_MS,
        help=f"Milliseconds between redraws without input (default: {DEFAULT_TICK_RATE_MS})",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for the random record generator",
    )
    parser.add_argument(
        "--log-level",
        default=DEFAULT_LEVEL,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        type=str.upper,
        help="Logging level (default: INFO, or CARBOOK_LOG_LEVEL)",
    )
    parser.add_argument(
        "--log-file",
        default=None,
        help="Write logs to this file instead of the Textual console",
    )
    parser.add_argument(
        "--init",
        action="store_true",
        help="Create the database with an empty array if it does not exist",
    )
    args = parser.parse_args()

    if args.tick_rate <= 0:
        parser.error("--tick-rate must be positive")

    setup_logging(args.log_level, args.log_file)
    store = JSONRecordStore(args.db)

    if args.init:
        try:
            store.create()
        except (OSError, StoreError) as e:
            print(f"Error: Cannot create database {args.db}: {e}", file=sys.stderr)
            sys.exit(1)

    # Verify the database exists
    if not os.path.exists(args.db):
        print(f"Error: Database file not found: {args.db}", file=sys.stderr)
        sys.exit(1)

    if not os.access(args.db, os.R_OK):
        print(f"Error: Permission denied: {args.db}", file=sys.stderr)
        sys.exit(1)

    app = CarBookApp(
        store=store,
        rng=random.Random(args.seed),
        tick_rate=args.tick_rate / 1000,
    )
    app.run()


if __name__ == "__main__":
    main()
