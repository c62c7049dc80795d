"""
Command-line interface and main entry point for gradle_home_cleanup.

Runs the same shutdown cleanup a build tool would run, on demand.
"""

from __future__ import annotations

import logging
import sys

from .args_parser import parse_args
from .config import (
    USER_HOME_PROPERTY_KEY,
    ConfigurationError,
    caches_dir,
    determine_current_version,
    lookup_user_home,
)
from .deletion import Deleter, DryRunDeleter
from .progress import ProgressReporter
from .service import HomeCleanupService
from .version import Version, VersionParseError
from .version_cleanup import VersionSpecificCacheCleanupAction


def build_service(args) -> HomeCleanupService:
    """Wire the service from parsed arguments.

    Raises:
        ConfigurationError: If the current version is missing or malformed.
    """
    properties = {}
    if args.gradle_user_home:
        properties[USER_HOME_PROPERTY_KEY] = str(args.gradle_user_home)
    user_home = lookup_user_home(properties)
    try:
        current_version = Version.parse(determine_current_version(args.current_version))
    except VersionParseError as exc:
        raise ConfigurationError(str(exc)) from exc

    deleter_cls = DryRunDeleter if args.dry_run else Deleter
    deleter = deleter_cls(root=user_home)
    cache_cleanup = VersionSpecificCacheCleanupAction(
        caches_dir(user_home),
        current_version,
        deleter,
        release_days=args.release_days,
        snapshot_days=args.snapshot_days,
        update_marker=not args.dry_run,
    )
    return HomeCleanupService(
        user_home,
        current_version,
        deleter,
        ProgressReporter(),
        cache_cleanup=cache_cleanup,
    )


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the gradle_home_cleanup CLI."""
    args = parse_args(sys.argv[1:] if argv is None else argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(message)s",
    )
    try:
        service = build_service(args)
    except ConfigurationError as exc:
        logging.error("%s", exc)
        return 1
    if args.dry_run:
        print("Dry run: no directories will be deleted.\n")
    service.stop()
    return 0
