"""
Score Toolkit Core Package

Shared data models and utilities used by the registry pipeline and the CLI.

All models are frozen dataclasses: ingestion builds new views from an
entry sequence and nothing downstream mutates them.
"""

from .models import Entry, RegistrationViews

__all__ = [
    "Entry",
    "RegistrationViews",
]
