"""In-memory record store used in tests and as a scratch backend."""

from __future__ import annotations

from carbook.storage.base import RecordStore
from carbook.storage.errors import ReadFailure
from carbook.storage.record import Record, decode_records, encode_records


class MemoryRecordStore(RecordStore):
    """Record store that keeps the encoded JSON text in memory.

    Records go through the same encode/decode path as the file store, so a
    malformed ``text`` fails ``load`` exactly like a malformed file would.
    Setting ``text`` to None simulates a missing file.
    """

    def __init__(self, records: list[Record] | None = None) -> None:
        self.text: str | None = encode_records(records or [])
        self.writes = 0

    @property
    def location(self) -> str:
        return "<memory>"

    def load(self) -> list[Record]:
        if self.text is None:
            raise ReadFailure("Error reading the DB: no data")
        return decode_records(self.text)

    def save(self, records: list[Record]) -> None:
        self.text = encode_records(records)
        self.writes += 1
