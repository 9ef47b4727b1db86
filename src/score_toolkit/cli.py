"""
Command-line entry point.

Without arguments, prints the report for the built-in entries. Logs go to
stderr so stdout carries only the report.

Exit codes:
    0 - report written
    1 - entries file missing or invalid
    2 - usage error (argparse)
"""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Optional, Sequence

from score_toolkit import __version__
from score_toolkit.registry import RegistrationError, RegistryConfig, run_registration

logger = logging.getLogger("score_toolkit")

LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="score-toolkit",
        description="Record (name, score) registrations and print history, unique names and final scores",
    )
    parser.add_argument("--input", "-i", type=Path, help="JSON or JSONL entries file (default: built-in entries)")
    parser.add_argument(
        "--format", "-f",
        choices=("auto", "json", "jsonl"),
        default="auto",
        help="Input format; auto picks jsonl for .jsonl files",
    )
    parser.add_argument("--strict", action="store_true", help="Validate JSON input against the bundled JSON Schema")
    parser.add_argument("--verbose", "-v", action="count", default=0, help="-v for INFO, -vv for DEBUG logging")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def _configure_logging(verbosity: int) -> None:
    if verbosity >= 2:
        level = logging.DEBUG
    elif verbosity == 1:
        level = logging.INFO
    else:
        level = logging.WARNING
    logging.basicConfig(level=level, format=LOG_FORMAT)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    _configure_logging(args.verbose)

    config = RegistryConfig(
        input_path=args.input,
        input_format=args.format,
        strict=args.strict,
    )

    try:
        run_registration(config)
    except RegistrationError as e:
        logger.error(str(e))
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
