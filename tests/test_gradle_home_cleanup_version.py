"""Tests for gradle_home_cleanup/version.py."""

from __future__ import annotations

import pytest

from gradle_home_cleanup.version import Version, VersionParseError, try_parse_version
from tests.assertions import assert_equal


def v(text: str) -> Version:
    return Version.parse(text)


class TestParsing:
    """Accepted and rejected version strings."""

    def test_parses_components(self):
        version = v("5.6.4")
        assert_equal((version.major, version.minor, version.patch), (5, 6, 4))
        assert version.qualifier is None
        assert_equal(str(version), "5.6.4")

    def test_parses_qualifier(self):
        version = v("5.6-rc-1")
        assert_equal(version.patch, None)
        assert_equal(version.qualifier, "rc-1")

    @pytest.mark.parametrize("text", ["", "5", "foo", "5.x", "v5.6", "5.6.", "modules-2", "-5.6"])
    def test_rejects_non_versions(self, text):
        with pytest.raises(VersionParseError):
            Version.parse(text)
        assert try_parse_version(text) is None

    def test_non_ascii_digits_in_qualifier_compare_as_text(self):
        version = v("5.6-²")
        assert_equal(version.qualifier, "²")
        assert v("5.6-2") < version < v("5.6")

    def test_parse_error_is_value_error(self):
        with pytest.raises(ValueError):
            Version.parse("jars-9")


class TestOrdering:
    """Numeric components first, then qualifier."""

    def test_numeric_components_compare_numerically(self):
        assert v("5.9") < v("5.10")
        assert v("5.6") < v("5.6.1")
        assert v("4.10.3") < v("5.0")

    def test_missing_patch_equals_zero_patch(self):
        assert_equal(v("5.0"), v("5.0.0"))
        assert_equal(hash(v("5.0")), hash(v("5.0.0")))

    def test_release_sorts_after_qualified_builds(self):
        assert v("5.6-rc-1") < v("5.6")
        assert v("5.6-20190801000000+0000") < v("5.6")
        assert v("5.6") < v("5.6.1-rc-1")

    def test_qualifiers_compare_piecewise(self):
        assert v("5.6-rc-1") < v("5.6-rc-2")
        assert v("5.6-rc-2") < v("5.6-rc-10")
        assert v("5.6-milestone-1") < v("5.6-rc-1")
        assert v("5.6-20190801000000+0000") < v("5.6-20190802000000+0000")

    def test_sorting(self):
        names = ["6.0", "5.6.4", "5.6-rc-1", "5.0", "5.6"]
        assert_equal(
            [str(x) for x in sorted(map(v, names))], ["5.0", "5.6-rc-1", "5.6", "5.6.4", "6.0"]
        )


class TestClassification:
    """Snapshot detection and base versions."""

    @pytest.mark.parametrize(
        "text",
        ["5.6.4-snapshot-1", "5.6-SNAPSHOT", "5.6-20190801000000+0000", "6.0-20191016123456+0000"],
    )
    def test_snapshots(self, text):
        assert v(text).is_snapshot

    @pytest.mark.parametrize("text", ["5.6", "5.6.4", "5.6-rc-1", "5.6-milestone-2"])
    def test_not_snapshots(self, text):
        assert not v(text).is_snapshot

    def test_base_version_strips_patch_and_qualifier(self):
        assert_equal(v("5.6.4-snapshot-1").base_version, v("5.6"))
        assert_equal(v("5.6.5").base_version, v("5.6"))
        assert_equal(v("5.6-rc-1").base_version, v("5.6"))
        assert_equal(str(v("10.2.1").base_version), "10.2")

    def test_is_immutable(self):
        version = v("5.6")
        with pytest.raises(AttributeError):
            version.major = 6  # type: ignore[misc]
