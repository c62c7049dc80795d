"""Shared pytest fixtures for test files."""

from __future__ import annotations

import logging

import pytest


@pytest.fixture(autouse=True)
def isolate_user_home(tmp_path, monkeypatch):
    """Keep tests away from the real ~/.gradle and ambient version settings."""
    monkeypatch.setenv("GRADLE_USER_HOME", str(tmp_path / "ambient-gradle-home"))
    monkeypatch.delenv("GRADLE_VERSION", raising=False)


@pytest.fixture(autouse=True)
def reset_root_logging():
    """Undo logging.basicConfig calls made by CLI tests."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    for handler in root.handlers[:]:
        if handler not in handlers:
            root.removeHandler(handler)
    root.setLevel(level)
