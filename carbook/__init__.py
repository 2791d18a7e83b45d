"""
Car Book - a terminal record manager for vehicle entries.

Records live in a flat JSON file and are browsed, added and deleted from a
Textual UI driven by a background event source.

Usage:
    carbook --db data/db.json
    python -m carbook --db data/db.json
"""

__version__ = "0.1.0"
