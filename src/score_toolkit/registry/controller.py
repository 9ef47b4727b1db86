"""
Module: registry.controller

Purpose:
    Orchestrate a registration run.
    Load → Ingest → Render → Write

Key Functions:
    - load_entries(): Resolve the entry sequence for a config
    - run_registration(): Main entry point

Key Classes:
    - RegistrationResult: Views plus rendered report
    - RegistrationError: Exception for load failures

Dependencies:
    - registry.processor: Ingestion
    - registry.renderer: Report formatting
    - core.utils.serialization: Entry files

Used By:
    - score_toolkit.cli
"""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass
from typing import Iterable, List, Optional, TextIO

from score_toolkit.core.models import Entry, RegistrationViews
from score_toolkit.core.schemas.validator import ValidationError
from score_toolkit.core.utils.serialization import load_entries_json, load_entries_jsonl

from .config import DEFAULT_ENTRIES, RegistryConfig
from .processor import ingest
from .renderer import render

logger = logging.getLogger(__name__)


class RegistrationError(Exception):
    """Error loading entries for a registration run."""
    pass


@dataclass(frozen=True)
class RegistrationResult:
    """
    Result of a registration run (immutable).

    Attributes:
        views: History, unique names and latest scores
        report: Rendered report text
        source: "built-in", "injected", or the input file path
    """
    views: RegistrationViews
    report: str
    source: str


def load_entries(config: RegistryConfig) -> List[Entry]:
    """
    Load the entry sequence described by config.

    Args:
        config: Run configuration

    Returns:
        Entries in arrival order

    Raises:
        RegistrationError: If the input file is missing, unreadable or invalid
    """
    if config.uses_defaults:
        return list(DEFAULT_ENTRIES)

    path = config.input_path
    fmt = config.resolved_format
    logger.debug(f"Loading entries from {path} as {fmt}")
    try:
        if fmt == "jsonl":
            return load_entries_jsonl(path)
        return load_entries_json(path, strict=config.strict)
    except FileNotFoundError as e:
        raise RegistrationError(str(e)) from e
    except OSError as e:
        raise RegistrationError(f"Cannot read entries from {path}: {e.strerror or e}") from e
    except ValidationError as e:
        where = f" at {e.path}" if e.path else ""
        raise RegistrationError(f"Invalid entries in {path}{where}: {e}") from e


def run_registration(
    config: Optional[RegistryConfig] = None,
    *,
    entries: Optional[Iterable[Entry]] = None,
    stream: Optional[TextIO] = None,
) -> RegistrationResult:
    """
    Run ingestion and write the report.

    Args:
        config: Run configuration (defaults to built-in entries)
        entries: Injected entry sequence; overrides config input
        stream: Destination for the report (defaults to sys.stdout)

    Returns:
        RegistrationResult with views and report text

    Raises:
        RegistrationError: If entries cannot be loaded

    Example:
        >>> result = run_registration(stream=io.StringIO())
        >>> result.views.latest_scores["Alice"]
        97
    """
    config = config or RegistryConfig()

    if entries is not None:
        source = "injected"
        entry_list = list(entries)
    else:
        source = "built-in" if config.uses_defaults else str(config.input_path)
        entry_list = load_entries(config)

    logger.info(f"Ingesting {len(entry_list)} entries from {source}")
    views = ingest(entry_list)
    logger.info(
        f"Recorded {views.entry_count} registrations, "
        f"{len(views.unique_names)} unique participants"
    )

    report = render(views)
    out = stream if stream is not None else sys.stdout
    out.write(report)
    out.flush()

    return RegistrationResult(views=views, report=report, source=source)
