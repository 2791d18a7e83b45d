"""Errors raised by record stores."""


class StoreError(Exception):
    """Base class for every record store failure."""


class ReadFailure(StoreError):
    """The backing file is missing or cannot be read."""


class ParseFailure(StoreError, ValueError):
    """The backing content is not a well-formed JSON array of records."""


class IndexOutOfRange(StoreError, IndexError):
    """A record index does not address an element of the store."""
