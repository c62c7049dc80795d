"""
Cleanup of downloaded wrapper distributions.

A distribution such as ``wrapper/dists/gradle-5.6.4-bin`` is removed once no
version-specific cache for 5.6.4 remains and 5.6.4 is older than the running
version.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol

from .config import DISTRIBUTION_NAME_PREFIX, DISTRIBUTION_TYPES, DISTRIBUTIONS_PATH
from .deletion import Deleter
from .progress import ProgressHandle
from .scanner import VersionSpecificCacheDirectoryScanner
from .version import Version, try_parse_version


class UsedVersionsProvider(Protocol):
    def used_versions(self) -> set[Version]:
        ...


class UsedVersionsFromCaches:
    """Treat every version that still has a version-specific cache as in use."""

    def __init__(self, scanner: VersionSpecificCacheDirectoryScanner):
        self.scanner = scanner

    def used_versions(self) -> set[Version]:
        return {cache_dir.version for cache_dir in self.scanner.list_versioned()}


@dataclass(frozen=True)
class Distribution:
    path: Path
    version: Version
    kind: str


def parse_distribution_name(name: str) -> tuple[Version, str] | None:
    """Split ``gradle-<version>-<bin|all>`` into its version and kind."""
    if not name.startswith(DISTRIBUTION_NAME_PREFIX):
        return None
    stem, _, kind = name[len(DISTRIBUTION_NAME_PREFIX):].rpartition("-")
    if kind not in DISTRIBUTION_TYPES or not stem:
        return None
    version = try_parse_version(stem)
    if version is None:
        return None
    return version, kind


def find_distributions(dists_dir: Path) -> list[Distribution]:
    try:
        children = list(dists_dir.iterdir())
    except (FileNotFoundError, NotADirectoryError):
        return []
    found = []
    for child in children:
        if not child.is_dir():
            continue
        parsed = parse_distribution_name(child.name)
        if parsed is None:
            continue
        found.append(Distribution(path=child, version=parsed[0], kind=parsed[1]))
    return sorted(found, key=lambda dist: (dist.version, dist.kind))


class WrapperDistributionCleanupAction:
    """Delete downloaded distributions whose version is no longer in use."""

    def __init__(
        self,
        user_home: Path,
        used_versions_provider: UsedVersionsProvider,
        current_version: Version,
        deleter: Deleter,
    ):
        self.dists_dir = Path(user_home) / DISTRIBUTIONS_PATH
        self.used_versions_provider = used_versions_provider
        self.current_version = current_version
        self.deleter = deleter

    @property
    def display_name(self) -> str:
        return f"Deleting unused distributions in {self.dists_dir}"

    def execute(self, progress: ProgressHandle) -> bool:
        used = self.used_versions_provider.used_versions()
        for dist in find_distributions(self.dists_dir):
            if dist.version >= self.current_version or dist.version in used:
                progress.increment_skipped()
                continue
            try:
                deleted = self.deleter.delete_recursively(dist.path)
            except Exception:
                logging.exception("Failed to clean up distribution %s", dist.path)
                deleted = False
            if deleted:
                progress.increment_deleted()
            else:
                progress.increment_skipped()
        return True
