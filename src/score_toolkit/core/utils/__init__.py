"""
Utils Package

Serialization utilities for entry files.
"""

from .serialization import (
    serialize_entries,
    deserialize_entries,
    load_entries_json,
    save_entries_json,
    load_entries_jsonl,
    save_entries_jsonl,
)

__all__ = [
    "serialize_entries",
    "deserialize_entries",
    "load_entries_json",
    "save_entries_json",
    "load_entries_jsonl",
    "save_entries_jsonl",
]
