"""
Main Screen for the record manager.

Lays out the full frame: menu bar, the active panel, a status line and a
static footer. ``render_frame`` redraws everything from a ViewController
after each event; the screen only remembers what it last drew.
"""

from __future__ import annotations

from textual.app import ComposeResult
from textual.containers import Horizontal
from textual.screen import Screen
from textual.widgets import ContentSwitcher, DataTable, Footer, Header, Static, Tab, Tabs

from carbook.storage import Record
from carbook.tui.controller import KEYMAP, TAB_TABLE, ViewController
from carbook.tui.mixins.record_table import RecordTableMixin

HOME_TEXT = """\
Welcome

to

car-CLI

Press 'c' to access cars, 'a' to add random new cars and 'd' to delete the currently selected car.
"""

COPYRIGHT = "car-CLI 2020 - all rights reserved"


def build_info_text() -> str:
    """List every key binding for the info panel."""
    lines = ["Key bindings", ""]
    for key, command in KEYMAP.items():
        lines.append(f"  {key:<6} {command.value.replace('_', ' ')}")
    return "\n".join(lines)


class MainScreen(RecordTableMixin, Screen):
    """Screen that renders the menu bar, active panel and footer."""

    CSS = """
    MainScreen {
        layout: vertical;
    }

    #panels {
        height: 1fr;
        border: round $primary;
    }

    .text-panel {
        content-align: center middle;
        text-align: center;
        height: 1fr;
    }

    #names-table {
        width: 20%;
        height: 1fr;
        border-right: solid $primary;
    }

    #detail-table {
        width: 80%;
        height: 1fr;
    }

    #status {
        height: 1;
        padding: 0 1;
        color: $text-muted;
    }

    #status.error {
        color: $error;
        text-style: bold;
    }

    #copyright {
        height: 3;
        border: round $primary;
        text-align: center;
        color: $accent;
    }
    """

    def __init__(
        self,
        name: str | None = None,
        id: str | None = None,
        classes: str | None = None,
    ) -> None:
        super().__init__(name=name, id=id, classes=classes)
        self._shown_records: list[Record] | None = None
        self._shown_index: int | None = None

    def compose(self) -> ComposeResult:
        """Compose the screen layout."""
        yield Header()
        ordered = sorted(TAB_TABLE.items(), key=lambda item: item[1].index)
        tabs = Tabs(*(Tab(spec.label, id=tab.value) for tab, spec in ordered))
        tabs.can_focus = False
        yield tabs
        with ContentSwitcher(initial="home-panel", id="panels"):
            yield Static(HOME_TEXT, id="home-panel", classes="text-panel")
            with Horizontal(id="records-panel"):
                yield DataTable(id="names-table")
                yield DataTable(id="detail-table", show_cursor=False)
            yield Static(build_info_text(), id="info-panel", classes="text-panel")
        yield Static("", id="status", markup=False)
        yield Static(COPYRIGHT, id="copyright")
        yield Footer()

    def on_mount(self) -> None:
        """Configure the record tables."""
        self._configure_table(self.query_one("#names-table", DataTable), self.NAME_COLUMNS)
        self._configure_table(
            self.query_one("#detail-table", DataTable), self.DETAIL_COLUMNS
        )

    def render_frame(self, controller: ViewController) -> None:
        """Redraw the frame from the controller's current state."""
        tab_id = controller.tab.value
        tabs = self.query_one(Tabs)
        if tabs.active != tab_id:
            tabs.active = tab_id
        switcher = self.query_one(ContentSwitcher)
        if switcher.current != f"{tab_id}-panel":
            switcher.current = f"{tab_id}-panel"

        if controller.records != self._shown_records or (
            controller.cursor.index != self._shown_index
        ):
            self._populate_names_table(
                self.query_one("#names-table", DataTable),
                controller.records,
                controller.cursor.index,
            )
            self._populate_detail_table(
                self.query_one("#detail-table", DataTable), controller.selected
            )
            self._shown_records = list(controller.records)
            self._shown_index = controller.cursor.index

        status = self.query_one("#status", Static)
        status.update(controller.status)
        status.set_class(controller.error is not None, "error")
