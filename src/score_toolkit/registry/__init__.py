"""
Module: registry

Purpose:
    Registration processing: ingest an ordered (name, score) sequence into
    history / unique-name / latest-score views and render them as text.

Key Functions:
    - ingest(): Build RegistrationViews from entries
    - render(): Format views as the report
    - run_registration(): Load, ingest, render and write

Key Classes:
    - RegistryConfig: Run configuration
    - RegistrationResult / RegistrationError

Used By:
    - score_toolkit.cli
"""

from .config import DEFAULT_ENTRIES, RegistryConfig
from .processor import ingest, upsert_score
from .renderer import render
from .controller import (
    RegistrationError,
    RegistrationResult,
    load_entries,
    run_registration,
)

__all__ = [
    # Config
    "DEFAULT_ENTRIES",
    "RegistryConfig",
    # Processing
    "ingest",
    "upsert_score",
    "render",
    # Orchestration
    "load_entries",
    "run_registration",
    "RegistrationResult",
    "RegistrationError",
]
