"""
Record storage for Car Book.

This module provides the record model, the store interface and its
implementations.

Usage:
    from carbook.storage import JSONRecordStore

    store = JSONRecordStore("data/db.json")
    records = store.append_generated(random.Random())
    store.remove_at(0)
"""

from carbook.storage.base import RecordStore
from carbook.storage.errors import (
    IndexOutOfRange,
    ParseFailure,
    ReadFailure,
    StoreError,
)
from carbook.storage.json_store import JSONRecordStore
from carbook.storage.memory_store import MemoryRecordStore
from carbook.storage.record import (
    CATEGORIES,
    ENGINES,
    RECORD_FIELDS,
    Record,
    decode_records,
    encode_records,
    generate_record,
)

__all__ = [
    # Base class
    "RecordStore",
    # Stores
    "JSONRecordStore",
    "MemoryRecordStore",
    # Errors
    "StoreError",
    "ReadFailure",
    "ParseFailure",
    "IndexOutOfRange",
    # Records
    "Record",
    "RECORD_FIELDS",
    "CATEGORIES",
    "ENGINES",
    "decode_records",
    "encode_records",
    "generate_record",
]
