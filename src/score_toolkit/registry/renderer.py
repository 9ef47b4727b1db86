"""
Module: registry.renderer

Purpose:
    Format RegistrationViews as the plain-text report:

        All participants (in order of registration):
        Alice Bob Alice Charlie Diana

        Unique participants:
        Alice Bob Charlie Diana

        Final scores:
        Alice : 97
        Bob : 80
        ...

    Section headers are always present; an empty section leaves its
    item line blank. Output is deterministic for a given input.

Key Functions:
    - render(): RegistrationViews -> report text

Used By:
    - registry.controller.run_registration
"""

from __future__ import annotations

from typing import List

from score_toolkit.core.models import RegistrationViews

HISTORY_HEADER = "All participants (in order of registration):"
UNIQUE_HEADER = "Unique participants:"
SCORES_HEADER = "Final scores:"


def render(views: RegistrationViews) -> str:
    """
    Render the three report sections in fixed order.

    Args:
        views: Views produced by ingest()

    Returns:
        Report text ending with a newline
    """
    lines: List[str] = [
        HISTORY_HEADER,
        " ".join(views.history),
        "",
        UNIQUE_HEADER,
        " ".join(views.sorted_unique_names()),
        "",
        SCORES_HEADER,
    ]
    lines.extend(f"{name} : {score}" for name, score in views.sorted_scores())
    return "\n".join(lines) + "\n"
