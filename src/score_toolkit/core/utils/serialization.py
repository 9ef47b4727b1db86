"""
Serialization Utilities

To/from JSON utilities for entry sequences.

Supported files:
- JSON document: {"schema_version": 1, "entries": [...]}
- JSONL: one {"name": ..., "score": ...} object per line

Loaders validate before building Entry instances and preserve file order,
which is the arrival order ingest() relies on.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Iterable

from ..models.entry import Entry
from ..schemas.validator import (
    ENTRIES_SCHEMA_VERSION,
    ValidationError,
    validate_entries_document,
    validate_entry,
)


# ─────────────────────────────────────────────────────────────────────────────
# Entry Serialization
# ─────────────────────────────────────────────────────────────────────────────

def serialize_entries(entries: Iterable[Entry]) -> dict[str, Any]:
    """
    Serialize entries to an entries document.

    Args:
        entries: Entries in arrival order

    Returns:
        Dictionary suitable for JSON serialization
    """
    return {
        "schema_version": ENTRIES_SCHEMA_VERSION,
        "entries": [entry.to_dict() for entry in entries],
    }


def deserialize_entries(
    data: dict[str, Any],
    *,
    validate: bool = True,
    strict: bool = False,
) -> list[Entry]:
    """
    Deserialize entries from an entries document.

    Args:
        data: Dictionary from JSON
        validate: Whether to validate the document first
        strict: Passed to validate_entries_document (jsonschema check)

    Returns:
        Entries in document order

    Raises:
        ValidationError: If validate=True and data is invalid
    """
    if validate:
        validate_entries_document(data, strict=strict)
    return [Entry.from_dict(item) for item in data["entries"]]


# ─────────────────────────────────────────────────────────────────────────────
# File I/O
# ─────────────────────────────────────────────────────────────────────────────

def load_entries_json(path: Path, *, strict: bool = False) -> list[Entry]:
    """
    Load entries from a JSON document.

    Raises:
        FileNotFoundError: If file doesn't exist
        ValidationError: If the file is not valid JSON or fails validation
    """
    if not path.exists():
        raise FileNotFoundError(f"Entries file not found: {path}")

    with open(path, "r", encoding="utf-8") as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as e:
            raise ValidationError(
                f"Invalid JSON in {path.name}: {e.msg} (line {e.lineno})",
                path=f"line {e.lineno}",
            ) from e
        except UnicodeDecodeError as e:
            raise ValidationError(
                f"{path.name} is not valid UTF-8 (byte offset {e.start})",
            ) from e

    return deserialize_entries(data, strict=strict)


def save_entries_json(entries: Iterable[Entry], path: Path) -> None:
    """Save entries as a JSON document."""
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(serialize_entries(entries), f, indent=2)
        f.write("\n")


def load_entries_jsonl(path: Path) -> list[Entry]:
    """
    Load entries from a JSONL file.

    Blank lines are skipped.

    Args:
        path: Path to the .jsonl file

    Returns:
        Entries in line order

    Raises:
        FileNotFoundError: If file doesn't exist
        ValidationError: If any line is invalid (message names the line)
    """
    if not path.exists():
        raise FileNotFoundError(f"Entries file not found: {path}")

    entries = []
    # Decode per line so an encoding error can be reported with its line number
    with open(path, "rb") as f:
        for line_no, raw in enumerate(f, 1):
            try:
                line = raw.decode("utf-8").strip()
            except UnicodeDecodeError as e:
                raise ValidationError(
                    f"Line {line_no} is not valid UTF-8",
                    path=f"line {line_no}",
                ) from e
            if not line:
                continue

            try:
                data = json.loads(line)
                validate_entry(data, f"line {line_no}")
            except json.JSONDecodeError as e:
                raise ValidationError(
                    f"Error parsing line {line_no}: {e.msg}",
                    path=f"line {line_no}",
                ) from e
            entries.append(Entry.from_dict(data))

    return entries


def save_entries_jsonl(entries: Iterable[Entry], path: Path) -> None:
    """Save entries to a JSONL file, one entry per line."""
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        for entry in entries:
            f.write(json.dumps(entry.to_dict()) + "\n")
