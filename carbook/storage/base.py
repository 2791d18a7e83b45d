"""
Abstract base class for record stores.

A store persists the whole collection in one place. Every operation reads
the full collection, changes an in-memory copy and writes the full
collection back; nothing is cached between operations.
"""

from __future__ import annotations

import random
from abc import ABC, abstractmethod
from datetime import datetime

from carbook.logger import get_logger
from carbook.storage.errors import IndexOutOfRange
from carbook.storage.record import Record, generate_record

logger = get_logger(__name__)


class RecordStore(ABC):
    """Interface shared by the file-backed store and the in-memory fake.

    Subclasses implement ``load`` and ``save``; the mutating operations are
    expressed in terms of those two so each one is a single full
    read-modify-write.
    """

    @property
    @abstractmethod
    def location(self) -> str:
        """Return a human-readable description of where records live."""
        pass

    @abstractmethod
    def load(self) -> list[Record]:
        """Load every record.

        Returns:
            The records in stored order.

        Raises:
            ReadFailure: If the backing data cannot be read.
            ParseFailure: If the backing data is not a JSON array of records.
        """
        pass

    @abstractmethod
    def save(self, records: list[Record]) -> None:
        """Overwrite the backing data with ``records``.

        Raises:
            ReadFailure: If the backing data cannot be written.
        """
        pass

    def append(self, record: Record) -> list[Record]:
        """Append one record and return the updated collection."""
        records = self.load()
        records.append(record)
        self.save(records)
        logger.info("Added record id=%s name=%s", record.id, record.name)
        return records

    def append_generated(
        self, rng: random.Random, now: datetime | None = None
    ) -> list[Record]:
        """Append a randomly generated record.

        Args:
            rng: Random source used to synthesize the record.
            now: Creation time override; defaults to the current UTC time.

        Returns:
            The updated collection, with the new record last.
        """
        return self.append(generate_record(rng, now))

    def remove_at(self, index: int) -> list[Record]:
        """Remove the record at ``index``.

        The backing data is left untouched when the index is invalid.

        Returns:
            The remaining records, in their stored order.

        Raises:
            IndexOutOfRange: If ``index`` does not address a record.
        """
        records = self.load()
        if index < 0 or index >= len(records):
            raise IndexOutOfRange(
                f"Record index {index} out of range ({len(records)} records)"
            )
        removed = records.pop(index)
        self.save(records)
        logger.info("Removed record id=%s at index %d", removed.id, index)
        return records
