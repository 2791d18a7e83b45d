"""
Vehicle record model and synthetic record generation.

A Record is serialized as a JSON object with exactly these keys:
    id, name, model, engine, category, age, created_at

``created_at`` is written as an ISO-8601 string with a UTC offset.
"""

from __future__ import annotations

import json
import random
import re
import string
from dataclasses import asdict, dataclass, fields
from datetime import datetime, timezone
from typing import Any

from carbook.storage.errors import ParseFailure

CATEGORIES: tuple[str, str] = ("sedan", "suv")

ENGINES: tuple[str, ...] = (
    "1.2L I3",
    "1.6L I4",
    "2.0L I4",
    "3.0L V6",
    "5.0L V8",
    "electric",
)

ID_RANGE: tuple[int, int] = (0, 999)
AGE_RANGE: tuple[int, int] = (0, 15)
NAME_LENGTH: int = 5

# Fractional seconds; datetime keeps at most microseconds
_FRACTION = re.compile(r"\.(\d+)")

_ALPHANUMERIC = string.ascii_letters + string.digits


@dataclass(frozen=True)
class Record:
    """One vehicle entry in the store."""

    id: int
    name: str
    model: str
    engine: str
    category: str
    age: int
    created_at: datetime

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON-ready representation of this record."""
        data = asdict(self)
        data["created_at"] = self.created_at.isoformat()
        return data

    @classmethod
    def from_dict(cls, data: Any, position: int = 0) -> "Record":
        """Build a Record from a decoded JSON object.

        Integer ``engine`` values from older files are accepted and kept as
        their decimal string.

        Args:
            data: The decoded JSON value.
            position: Index of the value in the array, used in error messages.

        Raises:
            ParseFailure: If the value is not a valid record object.
        """
        if not isinstance(data, dict):
            raise ParseFailure(
                f"Record at index {position} is not an object (got {type(data).__name__})"
            )

        expected = set(RECORD_FIELDS)
        keys = set(data)
        if keys != expected:
            missing = sorted(expected - keys)
            extra = sorted(keys - expected)
            detail = []
            if missing:
                detail.append(f"missing {', '.join(missing)}")
            if extra:
                detail.append(f"unexpected {', '.join(extra)}")
            raise ParseFailure(f"Record at index {position}: {'; '.join(detail)}")

        for key in ("id", "age"):
            value = data[key]
            if not _is_int(value) or value < 0:
                raise ParseFailure(
                    f"Record at index {position}: '{key}' must be a non-negative integer"
                )

        for key in ("name", "model", "category"):
            if not isinstance(data[key], str):
                raise ParseFailure(
                    f"Record at index {position}: '{key}' must be a string"
                )

        engine = data["engine"]
        if _is_int(engine):
            engine = str(engine)
        elif not isinstance(engine, str):
            raise ParseFailure(
                f"Record at index {position}: 'engine' must be a string"
            )

        return cls(
            id=data["id"],
            name=data["name"],
            model=data["model"],
            engine=engine,
            category=data["category"],
            age=data["age"],
            created_at=parse_timestamp(data["created_at"], position),
        )


RECORD_FIELDS: tuple[str, ...] = tuple(f.name for f in fields(Record))


def _is_int(value: Any) -> bool:
    # bool is a subclass of int and must not pass as one
    return isinstance(value, int) and not isinstance(value, bool)


def parse_timestamp(value: Any, position: int = 0) -> datetime:
    """Parse an ISO-8601 timestamp, reading naive values as UTC.

    Fractional seconds are cut or padded to microseconds, so nanosecond
    values load.

    Raises:
        ParseFailure: If the value is not a valid ISO-8601 string, or names
            an instant that cannot be expressed in UTC.
    """
    if not isinstance(value, str):
        raise ParseFailure(
            f"Record at index {position}: 'created_at' must be an ISO-8601 string"
        )
    text = value[:-1] + "+00:00" if value.endswith(("Z", "z")) else value
    text = _FRACTION.sub(
        lambda m: "." + m.group(1)[:6].ljust(6, "0"), text, count=1
    )
    try:
        stamp = datetime.fromisoformat(text)
        if stamp.tzinfo is None:
            stamp = stamp.replace(tzinfo=timezone.utc)
        stamp.astimezone(timezone.utc)
    except (ValueError, OverflowError) as e:
        raise ParseFailure(
            f"Record at index {position}: invalid timestamp {value!r}"
        ) from e
    return stamp


def decode_records(text: str) -> list[Record]:
    """Decode a JSON array of record objects.

    Raises:
        ParseFailure: If the text is not valid JSON or not an array of records.
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise ParseFailure(f"Invalid JSON: {e}") from e
    except RecursionError as e:
        raise ParseFailure("Invalid JSON: nesting too deep") from e

    if not isinstance(data, list):
        raise ParseFailure(
            f"Expected a JSON array of records (got {type(data).__name__})"
        )

    return [Record.from_dict(item, i) for i, item in enumerate(data)]


def encode_records(records: list[Record]) -> str:
    """Encode records as a pretty-printed JSON array."""
    return json.dumps([r.to_dict() for r in records], indent=2, ensure_ascii=False)


def random_token(rng: random.Random, length: int = NAME_LENGTH) -> str:
    """Return a random ASCII alphanumeric string."""
    return "".join(rng.choice(_ALPHANUMERIC) for _ in range(length))


def generate_record(rng: random.Random, now: datetime | None = None) -> Record:
    """Synthesize a random record.

    Args:
        rng: Random source; pass a seeded ``random.Random`` for repeatable output.
        now: Creation time. Defaults to the current UTC time.

    Returns:
        A new Record. The id is not checked for uniqueness.
    """
    return Record(
        id=rng.randint(*ID_RANGE),
        name=random_token(rng),
        model=random_token(rng),
        engine=rng.choice(ENGINES),
        category=rng.choice(CATEGORIES),
        age=rng.randint(*AGE_RANGE),
        created_at=now if now is not None else datetime.now(timezone.utc),
    )
