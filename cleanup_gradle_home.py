#!/usr/bin/env python3
"""
Delete version-specific caches from a Gradle user home that have not been
used recently, along with the wrapper distributions nothing uses anymore.

This is a thin wrapper around the gradle_home_cleanup package.
"""
from __future__ import annotations

from gradle_home_cleanup.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
