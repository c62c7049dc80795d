"""Tests for gradle_home_cleanup/deletion.py."""

from __future__ import annotations

import shutil
from unittest.mock import patch

from gradle_home_cleanup.deletion import Deleter, DryRunDeleter
from tests.assertions import assert_equal
from tests.cache_tree_test_utils import make_version_dir


def test_deletes_directory_tree(tmp_path):
    target = make_version_dir(tmp_path, "5.0", marker_age_days=40)

    assert Deleter(root=tmp_path).delete_recursively(target)
    assert not target.exists()


def test_refuses_paths_outside_root(tmp_path):
    root = tmp_path / "caches"
    root.mkdir()
    outside = make_version_dir(tmp_path, "5.0")

    assert not Deleter(root=root).delete_recursively(outside)
    assert outside.exists()


def test_missing_path_reports_failure(tmp_path):
    assert not Deleter(root=tmp_path).delete_recursively(tmp_path / "gone")


def test_rmtree_errors_report_failure(tmp_path):
    target = make_version_dir(tmp_path, "5.0")
    with patch.object(shutil, "rmtree", side_effect=PermissionError("denied")):
        assert not Deleter().delete_recursively(target)
    assert target.exists()


def test_dry_run_touches_nothing(tmp_path):
    target = make_version_dir(tmp_path, "5.0")
    deleter = DryRunDeleter(root=tmp_path)

    assert deleter.delete_recursively(target)
    assert target.exists()
    assert_equal(deleter.would_delete, [target])
