"""
Cleanup of unused version-specific caches.

Runs at most once per cleanup interval. A pass scans the cache base
directory, groups versioned directories by base version, applies the
retention policy to every group and deletes what it selects. The pass ends
by touching ``gc.properties`` in the running version's own directory.
"""

from __future__ import annotations

import logging
import os
import time
from collections import defaultdict
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Callable

from .config import (
    CLEANUP_INTERVAL_HOURS,
    GC_FILENAME,
    MAX_UNUSED_DAYS_FOR_RELEASES,
    MAX_UNUSED_DAYS_FOR_SNAPSHOTS,
    SECONDS_PER_HOUR,
)
from .deletion import Deleter
from .policy import CleanupCondition, RetentionWindow
from .progress import ProgressHandle
from .scanner import VersionedCacheDirectory, VersionSpecificCacheDirectoryScanner
from .version import Version


class CleanupOutcome(Enum):
    DELETED = "deleted"
    RETAINED = "retained"
    FAILED = "failed"


@dataclass
class CleanupReport:
    """Result of one cleanup pass."""

    deleted: list[Path] = field(default_factory=list)
    retained: list[Path] = field(default_factory=list)
    failed: list[tuple[Path, Exception | None]] = field(default_factory=list)

    def record(
        self, outcome: CleanupOutcome, path: Path, error: Exception | None = None
    ) -> None:
        if outcome is CleanupOutcome.DELETED:
            self.deleted.append(path)
        elif outcome is CleanupOutcome.RETAINED:
            self.retained.append(path)
        else:
            self.failed.append((path, error))

    @property
    def counts(self) -> dict[str, int]:
        return {
            CleanupOutcome.DELETED.value: len(self.deleted),
            CleanupOutcome.RETAINED.value: len(self.retained),
            CleanupOutcome.FAILED.value: len(self.failed),
        }


class VersionSpecificCacheCleanupAction:
    """Delete version-specific cache directories that have not been used recently."""

    def __init__(
        self,
        cache_base_dir: Path,
        current_version: Version,
        deleter: Deleter,
        *,
        release_days: int = MAX_UNUSED_DAYS_FOR_RELEASES,
        snapshot_days: int = MAX_UNUSED_DAYS_FOR_SNAPSHOTS,
        clock: Callable[[], float] = time.time,
        update_marker: bool = True,
    ):
        self.window = RetentionWindow(release_days=release_days, snapshot_days=snapshot_days)
        self.scanner = VersionSpecificCacheDirectoryScanner(cache_base_dir)
        self.current_version = current_version
        self.deleter = deleter
        self.clock = clock
        self.update_marker = update_marker

    @property
    def display_name(self) -> str:
        return f"Deleting unused version-specific caches in {self.scanner.base_dir}"

    @property
    def gc_file(self) -> Path:
        return self.scanner.directory_for(self.current_version) / GC_FILENAME

    def requires_cleanup(self) -> bool:
        """Return True when the last pass is at least one cleanup interval old.

        Without a gc file a pass is due only if the running version's
        directory exists.
        """
        gc_file = self.gc_file
        try:
            last_run = gc_file.stat().st_mtime
        except FileNotFoundError:
            return gc_file.parent.is_dir()
        elapsed = self.clock() - last_run
        logging.debug("Last version-specific cache cleanup ran %.0fs ago", elapsed)
        return elapsed >= CLEANUP_INTERVAL_HOURS * SECONDS_PER_HOUR

    def execute(self, progress: ProgressHandle) -> bool:
        """Run a pass if one is due. Returns whether a pass ran."""
        if not self.requires_cleanup():
            return False
        started = time.monotonic()
        report = self.perform_cleanup(progress)
        logging.debug(
            "Processed version-specific caches at %s for cleanup in %.2fs: %s",
            self.scanner.base_dir,
            time.monotonic() - started,
            report.counts,
        )
        return True

    def perform_cleanup(self, progress: ProgressHandle) -> CleanupReport:
        """Scan, delete and mark, regardless of the cleanup interval."""
        now = self.clock()
        thresholds = self.window.minimum_timestamps(now)
        report = CleanupReport()
        for base_version, group in self.group_by_base_version().items():
            logging.debug("Checking %d cache dir(s) for base version %s", len(group), base_version)
            condition = CleanupCondition(group, self.current_version, thresholds)
            for cache_dir in group:
                if condition.is_satisfied_by(cache_dir):
                    outcome, error = self._delete(cache_dir)
                else:
                    outcome, error = CleanupOutcome.RETAINED, None
                report.record(outcome, cache_dir.path, error)
                if outcome is CleanupOutcome.DELETED:
                    progress.increment_deleted()
                else:
                    progress.increment_skipped()
        if self.update_marker:
            self.mark_cleaned_up(now)
        return report

    def group_by_base_version(self) -> dict[Version, list[VersionedCacheDirectory]]:
        groups: dict[Version, list[VersionedCacheDirectory]] = defaultdict(list)
        for cache_dir in self.scanner.list_versioned():
            groups[cache_dir.version.base_version].append(cache_dir)
        return {base: sorted(groups[base]) for base in sorted(groups)}

    def _delete(
        self, cache_dir: VersionedCacheDirectory
    ) -> tuple[CleanupOutcome, Exception | None]:
        logging.debug("Deleting version-specific cache directory at %s", cache_dir.path)
        try:
            deleted = self.deleter.delete_recursively(cache_dir.path)
        except Exception as exc:
            logging.exception(
                "Failed to process/clean up version-specific cache directory: %s", cache_dir.path
            )
            return CleanupOutcome.FAILED, exc
        if not deleted:
            logging.warning("Could not delete version-specific cache directory %s", cache_dir.path)
            return CleanupOutcome.FAILED, None
        return CleanupOutcome.DELETED, None

    def mark_cleaned_up(self, now: float) -> None:
        """Touch the gc file and stamp it with the time the pass started."""
        gc_file = self.gc_file
        gc_file.parent.mkdir(parents=True, exist_ok=True)
        gc_file.touch()
        os.utime(gc_file, (now, now))
