"""
Progress reporting for cleanup actions.

A reporter hands out one handle per operation; the handle counts deleted and
skipped entries and prints a throttled status line.
"""

from __future__ import annotations

import logging
import time

PROGRESS_UPDATE_INTERVAL_SECONDS = 0.5


class ProgressHandle:
    """Tracks one running operation.

    The status line is only redrawn when ``update_interval`` has elapsed, so
    callers may increment as often as they like.
    """

    def __init__(
        self,
        label: str,
        update_interval: float = PROGRESS_UPDATE_INTERVAL_SECONDS,
        quiet: bool = False,
    ):
        self.label = label
        self.update_interval = update_interval
        self.quiet = quiet
        self.deleted = 0
        self.skipped = 0
        self.completed = False
        self.start = time.time()
        self.last_update = self.start

    def increment_deleted(self) -> None:
        self.deleted += 1
        self._maybe_display()

    def increment_skipped(self) -> None:
        self.skipped += 1
        self._maybe_display()

    def should_update(self, force: bool = False) -> bool:
        """Check if enough time has elapsed to update progress"""
        current_time = time.time()
        if force or current_time - self.last_update >= self.update_interval:
            self.last_update = current_time
            return True
        return False

    def _status(self) -> str:
        return f"deleted={self.deleted:,} skipped={self.skipped:,}"

    def _maybe_display(self, force: bool = False) -> None:
        if self.quiet or not self.should_update(force):
            return
        print(f"\r{self.label}: {self._status()}", end="", flush=True)

    def complete(self) -> None:
        """Finish the operation. Safe to call more than once."""
        if self.completed:
            return
        self.completed = True
        self._maybe_display(force=True)
        if not self.quiet:
            print()
        elapsed = time.time() - self.start
        logging.debug("%s finished in %.2fs (%s)", self.label, elapsed, self._status())


class ProgressReporter:
    """Factory for progress handles."""

    def __init__(
        self, update_interval: float = PROGRESS_UPDATE_INTERVAL_SECONDS, quiet: bool = False
    ):
        self.update_interval = update_interval
        self.quiet = quiet

    def start(self, description: str) -> ProgressHandle:
        logging.debug("Starting: %s", description)
        return ProgressHandle(description, update_interval=self.update_interval, quiet=self.quiet)
