"""
Module: entry

Purpose:
    Provides the Entry dataclass - one (name, score) registration record.
    Entries are constructed once, before ingestion, and never change.

Key Functions:
    - Entry.from_pair(pair): Build from a (name, score) tuple
    - Entry.from_dict(data): Build from a JSON object
    - Entry.to_dict(): JSON-compatible representation

Dependencies:
    - dataclasses (std)

Used By:
    - registry.processor.ingest
    - registry.config.DEFAULT_ENTRIES
    - core.utils.serialization
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Tuple


@dataclass(frozen=True, slots=True)
class Entry:
    """
    A single registration record.

    Attributes:
        name: Participant name (non-empty string)
        score: Integer score, no range constraint

    Invariants:
        - name is a non-empty str
        - score is an int (bool is rejected)

    Example:
        >>> e = Entry("Alice", 95)
        >>> e.name, e.score
        ('Alice', 95)
    """

    name: str
    score: int

    def __post_init__(self) -> None:
        """Validate entry on construction."""
        if not isinstance(self.name, str):
            raise TypeError(f"Entry name must be a string: {self.name!r}")
        if not self.name:
            raise ValueError("Entry name cannot be empty")
        # bool is an int subclass; True is not a score
        if isinstance(self.score, bool) or not isinstance(self.score, int):
            raise TypeError(f"Entry score must be an integer: {self.score!r}")

    # ─────────────────────────────────────────────────────────────────────────
    # Factory Methods
    # ─────────────────────────────────────────────────────────────────────────

    @classmethod
    def from_pair(cls, pair: Tuple[str, int]) -> Entry:
        """Create an entry from a (name, score) tuple."""
        name, score = pair
        return cls(name=name, score=score)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Entry:
        """
        Create an entry from a JSON object.

        Args:
            data: Mapping with "name" and "score" keys

        Returns:
            Entry instance

        Raises:
            KeyError: If a required key is missing
            TypeError/ValueError: If a value fails entry validation
        """
        return cls(name=data["name"], score=data["score"])

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-compatible dictionary."""
        return {"name": self.name, "score": self.score}

    def __repr__(self) -> str:
        return f"Entry({self.name!r}, {self.score})"
