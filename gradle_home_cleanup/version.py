"""
Version parsing and ordering for version-specific cache directories.

Directory names such as ``5.6.4``, ``5.6-rc-1`` or ``5.6-20190801000000+0000``
are parsed into comparable ``Version`` values.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field

_VERSION_PATTERN = re.compile(r"^(\d+)\.(\d+)(?:\.(\d+))?(?:-(.+))?$")
_QUALIFIER_SEPARATORS = re.compile(r"[-.+]")
_SNAPSHOT_TIMESTAMP = re.compile(r"\d{14}")


class VersionParseError(ValueError):
    """Raised when a string is not a recognisable version."""


def _qualifier_key(qualifier: str | None) -> tuple:
    # A release sorts after every qualified build with the same numbers.
    if qualifier is None:
        return (1,)
    parts = []
    for piece in _QUALIFIER_SEPARATORS.split(qualifier):
        if not piece:
            continue
        if piece.isdecimal():
            parts.append((0, int(piece), ""))
        else:
            parts.append((1, 0, piece.lower()))
    return (0, tuple(parts))


@dataclass(frozen=True, order=True)
class Version:
    """Parsed version with a total order of numeric components, then qualifier."""

    sort_key: tuple = field(repr=False)
    text: str = field(compare=False)
    major: int = field(compare=False)
    minor: int = field(compare=False)
    patch: int | None = field(compare=False, default=None)
    qualifier: str | None = field(compare=False, default=None)

    @classmethod
    def parse(cls, text: str) -> Version:
        """Parse ``text`` into a Version.

        Raises:
            VersionParseError: If ``text`` does not match MAJOR.MINOR[.PATCH][-QUALIFIER].
        """
        match = _VERSION_PATTERN.match(text.strip()) if text else None
        if match is None:
            raise VersionParseError(f"'{text}' is not a valid version")
        major, minor = int(match.group(1)), int(match.group(2))
        patch = int(match.group(3)) if match.group(3) is not None else None
        qualifier = match.group(4)
        sort_key = ((major, minor, patch or 0), _qualifier_key(qualifier))
        return cls(
            sort_key=sort_key,
            text=text.strip(),
            major=major,
            minor=minor,
            patch=patch,
            qualifier=qualifier,
        )

    @property
    def is_snapshot(self) -> bool:
        """Return True for nightly/snapshot builds."""
        if self.qualifier is None:
            return False
        return "snapshot" in self.qualifier.lower() or bool(
            _SNAPSHOT_TIMESTAMP.search(self.qualifier)
        )

    @property
    def base_version(self) -> Version:
        """Return MAJOR.MINOR with any patch level and qualifier stripped."""
        return Version.parse(f"{self.major}.{self.minor}")

    def __str__(self) -> str:
        return self.text


def try_parse_version(text: str) -> Version | None:
    """Parse ``text`` or return None when it is not a version."""
    try:
        return Version.parse(text)
    except VersionParseError:
        return None
