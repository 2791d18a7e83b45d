"""Pytest configuration and shared fixtures for carbook tests."""

from __future__ import annotations

import json
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

import pytest

from carbook.storage import Record, encode_records


def make_record(idx: int, **overrides: Any) -> Record:
    """Create a deterministic test record."""
    fields: dict[str, Any] = {
        "id": idx,
        "name": f"car{idx:02d}",
        "model": f"m{idx:03d}",
        "engine": "2.0L I4",
        "category": "sedan" if idx % 2 == 0 else "suv",
        "age": idx % 16,
        "created_at": datetime(2020, 10, 10, 10, idx % 60, tzinfo=timezone.utc),
    }
    fields.update(overrides)
    return Record(**fields)


def write_db(path: Path, records: list[Record]) -> None:
    """Helper to write records to a JSON database file."""
    path.write_text(encode_records(records), encoding="utf-8")


def read_db(path: Path) -> list[dict[str, Any]]:
    """Helper to read the raw JSON array from a database file."""
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


@pytest.fixture
def sample_records() -> list[Record]:
    """Return three distinct records."""
    return [make_record(i) for i in range(3)]


@pytest.fixture
def db_file(tmp_path: Path, sample_records: list[Record]) -> Path:
    """Create a database file holding the sample records."""
    path = tmp_path / "db.json"
    write_db(path, sample_records)
    return path


@pytest.fixture
def record_dict() -> dict[str, Any]:
    """Return one record as it appears in the JSON file."""
    return {
        "id": 7,
        "name": "Sprite",
        "model": "MK2",
        "engine": "1.6L I4",
        "category": "sedan",
        "age": 12,
        "created_at": "2020-06-10T10:10:10.123456+00:00",
    }
