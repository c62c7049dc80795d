"""
Retention policy for version-specific cache directories.

Releases get a long grace period and snapshots a short one. The newest
directory of each base version is kept even when its snapshot window has
expired, and nothing at or above the running version is ever eligible.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Sequence

from .config import MARKER_FILE_PATH, SECONDS_PER_DAY
from .scanner import VersionedCacheDirectory
from .version import Version


@dataclass(frozen=True)
class RetentionWindow:
    """Maximum unused days for releases and snapshots."""

    release_days: int
    snapshot_days: int

    def __post_init__(self):
        if self.release_days < self.snapshot_days:
            raise ValueError(
                f"release_days ({self.release_days}) must be greater than or equal to "
                f"snapshot_days ({self.snapshot_days})"
            )

    def minimum_timestamps(self, now: float) -> MinimumTimestamps:
        return MinimumTimestamps(
            for_releases=max(0.0, now - self.release_days * SECONDS_PER_DAY),
            for_snapshots=max(0.0, now - self.snapshot_days * SECONDS_PER_DAY),
        )


@dataclass(frozen=True)
class MinimumTimestamps:
    """Marker mtimes older than these are considered unused."""

    for_releases: float
    for_snapshots: float


def marker_file(cache_dir: VersionedCacheDirectory) -> Path:
    return cache_dir.path / MARKER_FILE_PATH


def _marker_mtime(cache_dir: VersionedCacheDirectory) -> float | None:
    try:
        return marker_file(cache_dir).stat().st_mtime
    except (FileNotFoundError, NotADirectoryError):
        return None
    except OSError as exc:
        logging.debug("Treating unreadable marker in %s as absent: %s", cache_dir.path, exc)
        return None


def _is_newest_in_group(
    cache_dir: VersionedCacheDirectory, group: Sequence[VersionedCacheDirectory]
) -> bool:
    return not any(other > cache_dir for other in group)


def should_delete(
    cache_dir: VersionedCacheDirectory,
    group: Sequence[VersionedCacheDirectory],
    *,
    current_version: Version,
    thresholds: MinimumTimestamps,
) -> bool:
    """Decide whether ``cache_dir`` may be deleted.

    ``group`` holds every scanned directory sharing the base version of
    ``cache_dir``, including ``cache_dir`` itself. A directory without a
    marker file is always retained.
    """
    if cache_dir.version >= current_version:
        return False
    mtime = _marker_mtime(cache_dir)
    if mtime is None:
        return False
    if mtime < thresholds.for_releases:
        return True
    if cache_dir.version.is_snapshot and mtime < thresholds.for_snapshots:
        return not _is_newest_in_group(cache_dir, group)
    return False


class CleanupCondition:
    """``should_delete`` bound to one base-version group."""

    def __init__(
        self,
        group: Sequence[VersionedCacheDirectory],
        current_version: Version,
        thresholds: MinimumTimestamps,
    ):
        self.group = sorted(group)
        self.current_version = current_version
        self.thresholds = thresholds

    def is_satisfied_by(self, cache_dir: VersionedCacheDirectory) -> bool:
        return should_delete(
            cache_dir,
            self.group,
            current_version=self.current_version,
            thresholds=self.thresholds,
        )
