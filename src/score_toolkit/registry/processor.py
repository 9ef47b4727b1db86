"""
Module: registry.processor

Purpose:
    Build the three registration views from an ordered entry sequence in a
    single pass. Pure: no I/O, no shared state. Containers live only for the
    duration of the call.

Key Functions:
    - ingest(): Entries -> RegistrationViews
    - upsert_score(): Insert-or-replace a name's score

Dependencies:
    - score_toolkit.core.models

Used By:
    - registry.controller.run_registration
"""

from __future__ import annotations

import logging
from typing import Dict, Iterable, Optional

from score_toolkit.core.models import Entry, RegistrationViews

logger = logging.getLogger(__name__)


def upsert_score(scores: Dict[str, int], name: str, score: int) -> Optional[int]:
    """
    Set scores[name] = score, replacing any existing value.

    Args:
        scores: Mapping being built
        name: Participant name (key)
        score: New score

    Returns:
        The replaced score, or None if name was not present
    """
    previous = scores.get(name)
    scores[name] = score
    return previous


def ingest(entries: Iterable[Entry]) -> RegistrationViews:
    """
    Ingest entries in arrival order.

    For each entry:
    1. Append name to history (duplicates kept)
    2. Add name to the unique-name set
    3. Upsert the name's score (last entry wins)

    Args:
        entries: Entries in arrival order. An empty sequence yields empty views.

    Returns:
        RegistrationViews for the sequence

    Example:
        >>> views = ingest([Entry("X", 1), Entry("X", 2), Entry("X", 3)])
        >>> views.history
        ('X', 'X', 'X')
        >>> dict(views.latest_scores)
        {'X': 3}
    """
    history: list[str] = []
    unique_names: set[str] = set()
    scores: Dict[str, int] = {}

    for entry in entries:
        history.append(entry.name)
        unique_names.add(entry.name)
        previous = upsert_score(scores, entry.name, entry.score)
        if previous is not None:
            logger.debug(f"Score for {entry.name!r} updated: {previous} -> {entry.score}")

    return RegistrationViews(
        history=tuple(history),
        unique_names=frozenset(unique_names),
        latest_scores=scores,
    )
