"""
Argument parsing for the gradle_home_cleanup CLI.

Handles command-line argument definition, parsing, and validation.
"""

from __future__ import annotations

import argparse
from pathlib import Path

from .config import (
    CURRENT_VERSION_ENV_KEY,
    MAX_UNUSED_DAYS_FOR_RELEASES,
    MAX_UNUSED_DAYS_FOR_SNAPSHOTS,
    USER_HOME_ENV_KEY,
)


def add_location_arguments(parser: argparse.ArgumentParser) -> None:
    """Add user-home and version arguments."""
    parser.add_argument(
        "--gradle-user-home",
        type=Path,
        help=f"User home to clean (default: ${USER_HOME_ENV_KEY} or ~/.gradle).",
    )
    parser.add_argument(
        "--current-version",
        help=f"Version considered to be running (default: ${CURRENT_VERSION_ENV_KEY}).",
    )


def add_retention_arguments(parser: argparse.ArgumentParser) -> None:
    """Add retention window arguments."""
    parser.add_argument(
        "--release-days",
        type=int,
        default=MAX_UNUSED_DAYS_FOR_RELEASES,
        metavar="DAYS",
        help=f"Delete release caches unused for DAYS (default: {MAX_UNUSED_DAYS_FOR_RELEASES}).",
    )
    parser.add_argument(
        "--snapshot-days",
        type=int,
        default=MAX_UNUSED_DAYS_FOR_SNAPSHOTS,
        metavar="DAYS",
        help=f"Delete snapshot caches unused for DAYS (default: {MAX_UNUSED_DAYS_FOR_SNAPSHOTS}).",
    )


def add_output_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Report what would be deleted without deleting anything.",
    )
    parser.add_argument("--verbose", action="store_true", help="Enable verbose logging.")


def _validate_args(args: argparse.Namespace, parser: argparse.ArgumentParser) -> None:
    if args.release_days < 0 or args.snapshot_days < 0:
        parser.error("--release-days and --snapshot-days must not be negative.")
    if args.release_days < args.snapshot_days:
        parser.error("--release-days must be greater than or equal to --snapshot-days.")


def parse_args(argv: list[str]) -> argparse.Namespace:
    """Parse and validate command-line arguments."""
    parser = argparse.ArgumentParser(
        description="Delete version-specific caches that have not been used recently."
    )
    add_location_arguments(parser)
    add_retention_arguments(parser)
    add_output_arguments(parser)
    args = parser.parse_args(argv)
    _validate_args(args, parser)
    return args
