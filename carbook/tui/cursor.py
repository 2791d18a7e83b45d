"""
Selection cursor over the record list.

The cursor never caches the list length: every transition takes the
current length ``n`` as read from the store, so it is always validated
against the latest persisted state.
"""

from __future__ import annotations


class SelectionCursor:
    """Index of the highlighted record, or None when the store is empty.

    Usage:
        cursor = SelectionCursor()
        cursor.clamp(len(records))   # select the first record, if any
        cursor.down(len(records))    # wraps from the last row to the first
    """

    def __init__(self, index: int | None = None) -> None:
        self.index = index

    def __repr__(self) -> str:
        return f"SelectionCursor(index={self.index!r})"

    def clamp(self, n: int) -> int | None:
        """Bring the cursor back into ``[0, n - 1]``.

        An absent cursor selects the first row once records exist, a cursor
        past the end moves to the last row, and an empty list clears it.
        """
        if n <= 0:
            self.index = None
        elif self.index is None or self.index < 0:
            self.index = 0
        elif self.index >= n:
            self.index = n - 1
        return self.index

    def down(self, n: int) -> int | None:
        """Advance by one row, wrapping from the last row to the first."""
        if self.index is None or n <= 0:
            return self.clamp(n)
        self.clamp(n)
        self.index = 0 if self.index >= n - 1 else self.index + 1
        return self.index

    def up(self, n: int) -> int | None:
        """Retreat by one row, wrapping from the first row to the last."""
        if self.index is None or n <= 0:
            return self.clamp(n)
        self.clamp(n)
        self.index = n - 1 if self.index <= 0 else self.index - 1
        return self.index
