"""
Schema Validation Utilities

Validates entry data read from JSON / JSONL files before it becomes
Entry instances. The registry core never validates: by the time entries
reach ingest() they are well-formed.

Two levels:
- Basic checks (always): required fields, name/score types, schema version
- Strict mode: full JSON Schema validation via jsonschema
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import jsonschema


# Schema version constants
ENTRIES_SCHEMA_VERSION = 1


# Load schemas lazily
_SCHEMAS: dict[str, dict] = {}


def _load_schema(name: str) -> dict:
    """Load a schema from the schemas directory."""
    if name not in _SCHEMAS:
        schema_path = Path(__file__).parent / f"{name}.schema.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")
        with open(schema_path, "r", encoding="utf-8") as f:
            _SCHEMAS[name] = json.load(f)
    return _SCHEMAS[name]


class ValidationError(Exception):
    """Raised when entry data fails validation."""

    def __init__(self, message: str, path: str = "", errors: list[str] | None = None):
        super().__init__(message)
        self.path = path
        self.errors = errors or []


def validate_entry(data: Any, path: str = "") -> None:
    """
    Validate a single entry object.

    Args:
        data: Decoded JSON value expected to be {"name": str, "score": int}
        path: Location of the entry, used in error messages

    Raises:
        ValidationError: If data is not a valid entry
    """
    if not isinstance(data, dict):
        raise ValidationError(
            f"Entry must be an object, got {type(data).__name__}",
            path=path,
        )

    missing = [f for f in ("name", "score") if f not in data]
    if missing:
        raise ValidationError(
            f"Entry missing required fields: {missing}",
            path=path,
            errors=[f"Missing field: {f}" for f in missing],
        )

    name = data["name"]
    if not isinstance(name, str) or not name:
        raise ValidationError(
            f"Invalid name: {name!r} (must be a non-empty string)",
            path=_join(path, "name"),
        )

    score = data["score"]
    # JSON true/false decode to bool, which is an int subclass
    if isinstance(score, bool) or not isinstance(score, int):
        raise ValidationError(
            f"Invalid score: {score!r} (must be an integer)",
            path=_join(path, "score"),
        )


def validate_entries_document(data: Any, *, strict: bool = False) -> None:
    """
    Validate an entries document.

    Expected shape:
        {"schema_version": 1, "entries": [{"name": ..., "score": ...}, ...]}

    Args:
        data: Decoded JSON document
        strict: If True, also validate against entries.schema.json

    Raises:
        ValidationError: If data is invalid
    """
    if not isinstance(data, dict):
        raise ValidationError(
            f"Entries document must be an object, got {type(data).__name__}"
        )

    missing = [f for f in ("schema_version", "entries") if f not in data]
    if missing:
        raise ValidationError(
            f"Missing required fields: {missing}",
            errors=[f"Missing field: {f}" for f in missing],
        )

    version = data.get("schema_version")
    # true and 1.0 compare equal to 1 but are not a schema version
    if isinstance(version, bool) or not isinstance(version, int) or version != ENTRIES_SCHEMA_VERSION:
        raise ValidationError(
            f"Unsupported entries schema version: {version} (expected {ENTRIES_SCHEMA_VERSION})",
            path="schema_version",
        )

    entries = data["entries"]
    if not isinstance(entries, list):
        raise ValidationError("entries must be a list", path="entries")
    for i, entry in enumerate(entries):
        validate_entry(entry, f"entries[{i}]")

    if strict:
        schema = _load_schema("entries")
        try:
            jsonschema.validate(data, schema)
        except jsonschema.ValidationError as e:
            raise ValidationError(
                f"Schema validation failed: {e.message}",
                path=".".join(str(p) for p in e.absolute_path),
                errors=[e.message],
            ) from e


def _join(path: str, key: str) -> str:
    return f"{path}.{key}" if path else key
