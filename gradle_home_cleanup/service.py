"""
Shutdown-time cleanup of the user home.

Runs the version-specific cache cleanup and, only when that pass actually
ran, the cleanup of downloaded distributions. Nothing raised by either
action escapes ``stop()``.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Protocol

from .config import caches_dir, cleanup_disabled
from .deletion import Deleter
from .distributions import UsedVersionsFromCaches, WrapperDistributionCleanupAction
from .progress import ProgressHandle, ProgressReporter
from .scanner import VersionSpecificCacheDirectoryScanner
from .version import Version
from .version_cleanup import VersionSpecificCacheCleanupAction


class DirectoryCleanupAction(Protocol):
    @property
    def display_name(self) -> str:
        ...

    def execute(self, progress: ProgressHandle) -> bool:
        ...


class HomeCleanupService:
    """Clean up the user home once the host process is done with it."""

    def __init__(
        self,
        user_home: Path,
        current_version: Version,
        deleter: Deleter,
        progress_reporter: ProgressReporter,
        *,
        cache_cleanup: DirectoryCleanupAction | None = None,
        distribution_cleanup: DirectoryCleanupAction | None = None,
    ):
        self.user_home = Path(user_home)
        self.progress_reporter = progress_reporter
        cache_base_dir = caches_dir(self.user_home)
        if cache_cleanup is None:
            cache_cleanup = VersionSpecificCacheCleanupAction(
                cache_base_dir, current_version, deleter
            )
        if distribution_cleanup is None:
            used_versions = UsedVersionsFromCaches(
                VersionSpecificCacheDirectoryScanner(cache_base_dir)
            )
            distribution_cleanup = WrapperDistributionCleanupAction(
                self.user_home, used_versions, current_version, deleter
            )
        self.cache_cleanup = cache_cleanup
        self.distribution_cleanup = distribution_cleanup

    def stop(self) -> None:
        try:
            disabled = cleanup_disabled(self.user_home)
        except Exception:
            logging.exception("Could not read cleanup settings in %s; skipping", self.user_home)
            return
        if disabled:
            logging.debug("Cache cleanup disabled in %s", self.user_home)
            return
        if self._execute(self.cache_cleanup):
            self._execute(self.distribution_cleanup)

    def _execute(self, action: DirectoryCleanupAction) -> bool:
        progress = self.progress_reporter.start(action.display_name)
        try:
            return action.execute(progress)
        except Exception:
            logging.exception("%s failed", action.display_name)
            return False
        finally:
            progress.complete()
