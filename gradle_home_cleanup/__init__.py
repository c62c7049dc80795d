"""
Gradle user home cleanup package.

Delete version-specific caches (and the distributions that go with them)
that the running tool version no longer needs.
"""

from . import (
    args_parser,
    config,
    deletion,
    distributions,
    policy,
    progress,
    scanner,
    service,
    version,
    version_cleanup,
)
from .deletion import Deleter, DryRunDeleter
from .policy import RetentionWindow, should_delete
from .scanner import VersionedCacheDirectory, VersionSpecificCacheDirectoryScanner
from .service import HomeCleanupService
from .version import Version, VersionParseError
from .version_cleanup import CleanupOutcome, CleanupReport, VersionSpecificCacheCleanupAction

__all__ = [
    "CleanupOutcome",
    "CleanupReport",
    "Deleter",
    "DryRunDeleter",
    "HomeCleanupService",
    "RetentionWindow",
    "Version",
    "VersionParseError",
    "VersionSpecificCacheCleanupAction",
    "VersionSpecificCacheDirectoryScanner",
    "VersionedCacheDirectory",
    "args_parser",
    "config",
    "deletion",
    "distributions",
    "policy",
    "progress",
    "scanner",
    "service",
    "should_delete",
    "version",
    "version_cleanup",
]
