"""
Delete capability used by the cleanup actions.

Deleters report success or failure instead of raising, so a failed directory
never aborts the rest of a cleanup pass.
"""

from __future__ import annotations

import logging
import shutil
from pathlib import Path


class Deleter:
    """Recursively delete directories below an optional root."""

    def __init__(self, root: Path | None = None):
        self.root = Path(root).resolve() if root is not None else None

    def delete_recursively(self, path: Path) -> bool:
        """Delete ``path`` and everything below it. Returns False on failure."""
        resolved = Path(path).resolve()
        if self.root is not None:
            try:
                resolved.relative_to(self.root)
            except ValueError:
                logging.error("Refusing to delete %s: escapes root %s", resolved, self.root)
                return False
        try:
            if resolved.is_dir():
                shutil.rmtree(resolved)
            else:
                resolved.unlink()
        except (OSError, shutil.Error):
            logging.exception("Failed to delete %s", resolved)
            return False
        logging.info("Deleted %s", resolved)
        return True


class DryRunDeleter(Deleter):
    """Log what would be deleted without touching the filesystem."""

    def __init__(self, root: Path | None = None):
        super().__init__(root)
        self.would_delete: list[Path] = []

    def delete_recursively(self, path: Path) -> bool:
        self.would_delete.append(Path(path))
        logging.info("Would delete %s", path)
        return True
