"""
Module: registry.config

Purpose:
    Configuration dataclass for a registration run, plus the built-in
    entry sequence used when no input file is given.

Key Classes:
    - RegistryConfig: Where entries come from and how strictly to check them

Dependencies:
    - dataclasses (std)
    - pathlib (std)

Used By:
    - registry.controller: Run orchestration
    - cli: Argument mapping
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Literal, Optional, Tuple

from score_toolkit.core.models import Entry

InputFormat = Literal["auto", "json", "jsonl"]

# Alice appears twice; her second score replaces the first
DEFAULT_ENTRIES: Tuple[Entry, ...] = (
    Entry("Alice", 95),
    Entry("Bob", 80),
    Entry("Alice", 97),
    Entry("Charlie", 100),
    Entry("Diana", 75),
)


@dataclass(frozen=True)
class RegistryConfig:
    """
    Configuration for a registration run (immutable).

    Attributes:
        input_path: Entries file; None uses DEFAULT_ENTRIES
        input_format: "json", "jsonl", or "auto" (by file suffix)
        strict: Validate JSON documents against the bundled JSON Schema

    Example:
        >>> RegistryConfig().input_path is None
        True
        >>> RegistryConfig(input_path=Path("scores.jsonl")).resolved_format
        'jsonl'
    """

    input_path: Optional[Path] = None
    input_format: InputFormat = "auto"
    strict: bool = False

    def __post_init__(self) -> None:
        """Validate configuration on construction."""
        if self.input_format not in ("auto", "json", "jsonl"):
            raise ValueError(f"Invalid input_format: {self.input_format!r}")
        if self.input_path is not None and not isinstance(self.input_path, Path):
            object.__setattr__(self, "input_path", Path(self.input_path))

    @property
    def uses_defaults(self) -> bool:
        return self.input_path is None

    @property
    def resolved_format(self) -> Optional[str]:
        """Concrete input format, or None when using the built-in entries."""
        if self.input_path is None:
            return None
        if self.input_format != "auto":
            return self.input_format
        return "jsonl" if self.input_path.suffix.lower() == ".jsonl" else "json"
