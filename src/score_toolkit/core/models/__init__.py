"""
Core Models Package

Immutable, validated data models.

| Model | Holds |
|-------|-------|
| `Entry` | One (name, score) registration record |
| `RegistrationViews` | History, unique names and latest scores |
"""

from .entry import Entry
from .views import RegistrationViews

__all__ = [
    "Entry",
    "RegistrationViews",
]
