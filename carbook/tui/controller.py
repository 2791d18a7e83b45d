"""
View controller for the record manager.

Owns the UI state (active tab, selection cursor, last loaded records and a
transient error line) and turns each event from the EventSource into store
operations and cursor moves. It knows nothing about Textual; the app renders
a frame from this state after every event.
"""

from __future__ import annotations

import random
from dataclasses import dataclass
from enum import Enum

from carbook.logger import get_logger
from carbook.storage import Record, RecordStore, StoreError
from carbook.tui.cursor import SelectionCursor
from carbook.tui.events import Event, Input, Tick

logger = get_logger(__name__)

# Ticks an error line stays visible unless a later command succeeds
ERROR_TICKS: int = 10


class Tab(Enum):
    """Views reachable from the menu bar."""

    HOME = "home"
    RECORDS = "records"
    INFO = "info"


@dataclass(frozen=True)
class TabSpec:
    """Menu bar entry for a tab."""

    index: int
    label: str
    key: str


TAB_TABLE: dict[Tab, TabSpec] = {
    Tab.HOME: TabSpec(index=0, label="Home", key="h"),
    Tab.RECORDS: TabSpec(index=1, label="Cars", key="c"),
    Tab.INFO: TabSpec(index=2, label="Info", key="i"),
}


class Command(Enum):
    """Commands the controller understands."""

    QUIT = "quit"
    SELECT_HOME = "select_home"
    SELECT_RECORDS = "select_records"
    SELECT_INFO = "select_info"
    ADD = "add"
    DELETE = "delete"
    DOWN = "down"
    UP = "up"


KEYMAP: dict[str, Command] = {
    "q": Command.QUIT,
    TAB_TABLE[Tab.HOME].key: Command.SELECT_HOME,
    TAB_TABLE[Tab.RECORDS].key: Command.SELECT_RECORDS,
    TAB_TABLE[Tab.INFO].key: Command.SELECT_INFO,
    "a": Command.ADD,
    "d": Command.DELETE,
    "down": Command.DOWN,
    "up": Command.UP,
}

SELECT_COMMANDS: dict[Command, Tab] = {
    Command.SELECT_HOME: Tab.HOME,
    Command.SELECT_RECORDS: Tab.RECORDS,
    Command.SELECT_INFO: Tab.INFO,
}

# Commands that only act while the records tab is showing
RECORDS_COMMANDS = frozenset({Command.DOWN, Command.UP})


class ViewController:
    """Foreground state machine driven by Input and Tick events.

    Attributes:
        tab: The active tab.
        cursor: Selection cursor over ``records``.
        records: Records as most recently loaded without error.
        error: Transient error message, or None.
        running: False once the quit command has been handled.
    """

    def __init__(
        self,
        store: RecordStore,
        rng: random.Random | None = None,
        tab: Tab = Tab.HOME,
    ) -> None:
        self.store = store
        self.rng = rng if rng is not None else random.Random()
        self.tab = tab
        self.cursor = SelectionCursor()
        self.records: list[Record] = []
        self.error: str | None = None
        self.running = True
        self._error_ttl = 0

    def handle(self, event: Event) -> Command | None:
        """Apply one event and refresh the frame state.

        Returns:
            The command applied for an Input event, otherwise None.
        """
        command = None
        if isinstance(event, Input):
            command = self.dispatch(event.key)
        elif isinstance(event, Tick):
            self._age_error()

        if self.running:
            self.refresh()
        return command

    def dispatch(self, key: str) -> Command | None:
        """Run the command bound to ``key``.

        Returns:
            The command that was applied, or None for unbound keys and
            commands that do not apply to the active tab.
        """
        command = KEYMAP.get(key)
        if command is None:
            return None

        if command is Command.QUIT:
            self.running = False
            return command

        if command in SELECT_COMMANDS:
            self.tab = SELECT_COMMANDS[command]
            return command

        if command in RECORDS_COMMANDS and self.tab is not Tab.RECORDS:
            return None

        try:
            if command is Command.ADD:
                self.add()
            elif command is Command.DELETE:
                if not self.delete():
                    return None
            elif command is Command.DOWN:
                self.cursor.down(len(self.store.load()))
            elif command is Command.UP:
                self.cursor.up(len(self.store.load()))
        except StoreError as e:
            self._set_error(f"{command.value} failed: {e}")
            return None

        self.clear_error()
        return command

    def add(self) -> Record:
        """Append a generated record and keep the cursor in bounds."""
        records = self.store.append_generated(self.rng)
        self.records = records
        self.cursor.clamp(len(records))
        return records[-1]

    def delete(self) -> bool:
        """Delete the selected record, then re-clamp the cursor.

        Off the records tab the snapshot is not refreshed, so the store is
        reloaded and the cursor clamped against it first.

        Returns:
            False when no record was selected.
        """
        if self.tab is not Tab.RECORDS:
            self.records = self.store.load()
            self.cursor.clamp(len(self.records))
        index = self.cursor.index
        if index is None:
            return False
        self.records = self.store.remove_at(index)
        self.cursor.clamp(len(self.records))
        return True

    def refresh(self) -> None:
        """Reload records for the records tab.

        On failure the previous records stay visible and the error line is
        re-armed, keeping the message of a command that just failed.
        """
        if self.tab is not Tab.RECORDS:
            return
        try:
            records = self.store.load()
        except StoreError as e:
            if self.error is None:
                self._set_error(str(e))
            else:
                self._error_ttl = ERROR_TICKS
            return
        self.records = records
        self.cursor.clamp(len(records))

    @property
    def selected(self) -> Record | None:
        """Return the record under the cursor, if any."""
        index = self.cursor.index
        if index is None or index >= len(self.records):
            return None
        return self.records[index]

    @property
    def tab_index(self) -> int:
        """Return the menu bar position of the active tab."""
        return TAB_TABLE[self.tab].index

    @property
    def status(self) -> str:
        """Return the text for the status line."""
        if self.error:
            return f"Error: {self.error}"
        if self.tab is not Tab.RECORDS:
            return f"Database: {self.store.location}"
        count = len(self.records)
        return f"{count} record{'' if count == 1 else 's'} in {self.store.location}"

    def clear_error(self) -> None:
        self.error = None
        self._error_ttl = 0

    def _set_error(self, message: str) -> None:
        if message != self.error:
            logger.warning("%s", message)
        self.error = message
        self._error_ttl = ERROR_TICKS

    def _age_error(self) -> None:
        if self.error is None:
            return
        self._error_ttl -= 1
        if self._error_ttl <= 0:
            self.clear_error()
