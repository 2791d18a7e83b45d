"""
RecordTable Mixin for consistent record table setup and population.

Provides reusable methods for:
- _configure_table(): Apply columns and common settings to a DataTable
- _populate_names_table(): Fill the selection list with one row per record
- _populate_detail_table(): Show every field of the selected record
- _format_timestamp(): Render a record's creation time for display

Usage:
    class MyScreen(RecordTableMixin, Screen):
        def compose(self):
            yield DataTable(id="names")

        def on_mount(self):
            table = self.query_one("#names", DataTable)
            self._configure_table(table, self.NAME_COLUMNS)
"""

from __future__ import annotations

from datetime import datetime, timezone

from rich.text import Text
from textual.widgets import DataTable

from carbook.storage import Record


class RecordTableMixin:
    """Mixin providing DataTable helpers for vehicle records."""

    NAME_COLUMNS: list[tuple[str, int | None]] = [
        ("ID", 5),
        ("NAME", None),
    ]

    DETAIL_COLUMNS: list[tuple[str, int | None]] = [
        ("ID", 5),
        ("NAME", 8),
        ("MODEL", 8),
        ("ENGINE", 10),
        ("CATEGORY", 10),
        ("AGE", 5),
        ("CREATED AT", None),
    ]

    def _configure_table(
        self,
        table: DataTable,
        columns: list[tuple[str, int | None]],
        *,
        cursor_type: str = "row",
        zebra_stripes: bool = True,
    ) -> None:
        """Apply configuration to a DataTable.

        The table never takes focus; navigation keys belong to the app.

        Args:
            table: The DataTable instance to configure.
            columns: List of (column_name, width) tuples. Width can be None.
            cursor_type: Cursor type ('row', 'cell', or 'none').
            zebra_stripes: Whether to enable zebra striping.
        """
        table.cursor_type = cursor_type
        table.zebra_stripes = zebra_stripes
        table.can_focus = False
        for name, width in columns:
            table.add_column(name, width=width)

    def _populate_names_table(
        self, table: DataTable, records: list[Record], selected: int | None
    ) -> None:
        """Fill the selection list and move its cursor to ``selected``."""
        table.clear()
        for idx, record in enumerate(records):
            table.add_row(str(record.id), Text(record.name), key=str(idx))
        if selected is not None and selected < table.row_count:
            table.move_cursor(row=selected)

    def _populate_detail_table(self, table: DataTable, record: Record | None) -> None:
        """Show the fields of ``record``, or an empty table when None."""
        table.clear()
        if record is None:
            return
        table.add_row(
            str(record.id),
            Text(record.name),
            Text(record.model),
            Text(record.engine),
            Text(record.category),
            str(record.age),
            self._format_timestamp(record.created_at),
        )

    @staticmethod
    def _format_timestamp(stamp: datetime) -> str:
        """Render a timestamp in UTC, to the second."""
        return stamp.astimezone(timezone.utc).strftime("%Y-%m-%d %H:%M:%S UTC")
