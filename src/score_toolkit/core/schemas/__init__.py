"""
Schemas Package

Validation for externally supplied entry data.
"""

from .validator import (
    ENTRIES_SCHEMA_VERSION,
    ValidationError,
    validate_entries_document,
    validate_entry,
)

__all__ = [
    "ENTRIES_SCHEMA_VERSION",
    "ValidationError",
    "validate_entries_document",
    "validate_entry",
]
