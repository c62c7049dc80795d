"""
Discovery of version-specific cache directories.

Lists the immediate subdirectories of a cache base directory (e.g.
``~/.gradle/caches``) whose names parse as versions.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from .version import Version, try_parse_version


@dataclass(frozen=True, order=True)
class VersionedCacheDirectory:
    """A cache directory dedicated to a single tool version."""

    version: Version
    path: Path

    @property
    def name(self) -> str:
        return self.path.name


class VersionSpecificCacheDirectoryScanner:
    """Find the version-specific directories below ``base_dir``."""

    def __init__(self, base_dir: Path):
        self.base_dir = Path(base_dir)

    def directory_for(self, version: Version) -> Path:
        """Return the directory that holds caches for ``version``. No filesystem access."""
        return self.base_dir / version.text

    def list_versioned(self) -> list[VersionedCacheDirectory]:
        """Return existing versioned directories ordered by version ascending.

        A missing base directory yields an empty list. Subdirectories whose
        names are not versions are skipped.
        """
        try:
            children = list(self.base_dir.iterdir())
        except (FileNotFoundError, NotADirectoryError):
            logging.debug("Cache base directory %s does not exist", self.base_dir)
            return []
        found: list[VersionedCacheDirectory] = []
        for child in children:
            if not child.is_dir():
                continue
            version = try_parse_version(child.name)
            if version is None:
                continue
            found.append(VersionedCacheDirectory(version=version, path=child))
        return sorted(found)
