"""
Module: views

Purpose:
    Provides RegistrationViews - the three derived views produced by
    ingesting an entry sequence:

    - history: every name in arrival order, duplicates retained
    - unique_names: the distinct names (set semantics)
    - latest_scores: name -> score of the last entry with that name

Key Functions:
    - RegistrationViews.empty(): Views for an empty entry sequence
    - RegistrationViews.sorted_unique_names(): Names in ascending order
    - RegistrationViews.sorted_scores(): (name, score) pairs by name

Dependencies:
    - dataclasses (std)
    - types (std)

Used By:
    - registry.processor.ingest
    - registry.renderer.render
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import FrozenSet, List, Mapping, Tuple


@dataclass(frozen=True, eq=True)
class RegistrationViews:
    """
    History, unique names and latest scores for one ingestion run (immutable).

    Attributes:
        history: Names in arrival order, duplicates included
        unique_names: Distinct names seen
        latest_scores: Read-only mapping of name to most recent score

    Invariants:
        - unique_names == set(history)
        - latest_scores has exactly the keys in unique_names

    Views compare by value but are not hashable (latest_scores is a mapping).

    Example:
        >>> views = RegistrationViews(
        ...     history=("X", "X"),
        ...     unique_names=frozenset({"X"}),
        ...     latest_scores={"X": 2},
        ... )
        >>> views.sorted_scores()
        [('X', 2)]
    """

    history: Tuple[str, ...] = ()
    unique_names: FrozenSet[str] = frozenset()
    latest_scores: Mapping[str, int] = field(default_factory=dict)

    __hash__ = None  # type: ignore[assignment]

    def __post_init__(self) -> None:
        """Freeze containers and check the cross-view invariants."""
        object.__setattr__(self, "history", tuple(self.history))
        object.__setattr__(self, "unique_names", frozenset(self.unique_names))
        object.__setattr__(
            self, "latest_scores", MappingProxyType(dict(self.latest_scores))
        )

        if self.unique_names != set(self.history):
            raise ValueError(
                f"unique_names {sorted(self.unique_names)} do not match "
                f"names in history {sorted(set(self.history))}"
            )
        if set(self.latest_scores) != self.unique_names:
            raise ValueError(
                f"latest_scores keys {sorted(self.latest_scores)} do not match "
                f"unique_names {sorted(self.unique_names)}"
            )

    @classmethod
    def empty(cls) -> RegistrationViews:
        """Views for an empty entry sequence."""
        return cls()

    # ─────────────────────────────────────────────────────────────────────────
    # Calculated Properties
    # ─────────────────────────────────────────────────────────────────────────

    @property
    def entry_count(self) -> int:
        """Number of entries ingested (one history slot per entry)."""
        return len(self.history)

    @property
    def is_empty(self) -> bool:
        return not self.history

    def sorted_unique_names(self) -> List[str]:
        """Distinct names in ascending lexicographic order."""
        return sorted(self.unique_names)

    def sorted_scores(self) -> List[Tuple[str, int]]:
        """(name, score) pairs in ascending order of name."""
        return sorted(self.latest_scores.items())

