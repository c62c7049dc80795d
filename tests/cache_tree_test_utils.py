"""Helpers for building user-home trees in tests."""

from __future__ import annotations

import os
from pathlib import Path

from gradle_home_cleanup.config import GC_FILENAME, MARKER_FILE_PATH, SECONDS_PER_DAY

NOW = 1_700_000_000.0
HOUR = 3600
DAY = SECONDS_PER_DAY


def set_mtime(path: Path, timestamp: float) -> None:
    os.utime(path, (timestamp, timestamp))


def make_version_dir(
    base: Path, name: str, marker_age_days: float | None = None, *, now: float = NOW
) -> Path:
    """Create ``base/name``, with a marker aged ``marker_age_days`` when given."""
    cache_dir = base / name
    cache_dir.mkdir(parents=True, exist_ok=True)
    (cache_dir / "modules-2").mkdir(exist_ok=True)
    (cache_dir / "modules-2" / "payload.bin").write_bytes(b"x" * 16)
    if marker_age_days is not None:
        marker = cache_dir / MARKER_FILE_PATH
        marker.parent.mkdir(parents=True, exist_ok=True)
        marker.touch()
        set_mtime(marker, now - marker_age_days * DAY)
    return cache_dir


def write_gc_file(version_dir: Path, timestamp: float) -> Path:
    gc_file = version_dir / GC_FILENAME
    version_dir.mkdir(parents=True, exist_ok=True)
    gc_file.touch()
    set_mtime(gc_file, timestamp)
    return gc_file


def make_distribution(home: Path, version: str, kind: str = "bin") -> Path:
    dist = home / "wrapper" / "dists" / f"gradle-{version}-{kind}"
    dist.mkdir(parents=True, exist_ok=True)
    (dist / "gradle.zip").write_bytes(b"zip")
    return dist
