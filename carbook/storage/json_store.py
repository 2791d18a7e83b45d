"""
JSON file record store.

This module provides the JSONRecordStore class, which keeps the collection
as a single JSON array in one file.
"""

from __future__ import annotations

import os

from carbook.logger import get_logger
from carbook.storage.base import RecordStore
from carbook.storage.errors import ReadFailure
from carbook.storage.record import Record, decode_records, encode_records

logger = get_logger(__name__)


class JSONRecordStore(RecordStore):
    """Record store backed by a JSON array file.

    The file must exist before the first ``load``; it is never created
    implicitly. Writes replace the whole file and are not crash-safe.

    Attributes:
        path: Path to the backing file.
    """

    def __init__(self, path: str | os.PathLike[str]) -> None:
        self.path = os.fspath(path)

    @property
    def location(self) -> str:
        """Return the backing file path."""
        return self.path

    def load(self) -> list[Record]:
        """Read and decode the backing file.

        Raises:
            ReadFailure: If the file is missing or unreadable.
            ParseFailure: If the content is not a JSON array of records.

        Examples:
            >>> store = JSONRecordStore("data/db.json")
            >>> for record in store.load():
            ...     print(record.name)
        """
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                text = f.read()
        except (OSError, UnicodeDecodeError) as e:
            raise ReadFailure(f"Error reading the DB file {self.path}: {e}") from e
        return decode_records(text)

    def save(self, records: list[Record]) -> None:
        """Overwrite the backing file with ``records``."""
        try:
            with open(self.path, "w", encoding="utf-8") as f:
                f.write(encode_records(records))
                f.write("\n")
        except OSError as e:
            raise ReadFailure(f"Error writing the DB file {self.path}: {e}") from e
        logger.debug("Wrote %d records to %s", len(records), self.path)

    def create(self) -> bool:
        """Create the backing file with an empty array if it is absent.

        Returns:
            True if a new file was written, False if one already existed.
        """
        if os.path.exists(self.path):
            return False
        directory = os.path.dirname(self.path)
        if directory:
            os.makedirs(directory, exist_ok=True)
        self.save([])
        logger.info("Created empty database at %s", self.path)
        return True
