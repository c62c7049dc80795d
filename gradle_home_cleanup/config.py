"""
Configuration and path resolution for gradle_home_cleanup.

Holds the retention defaults, the file-layout constants of the user home,
and the lookups that turn properties/environment into concrete paths.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Mapping

from dotenv import dotenv_values

MAX_UNUSED_DAYS_FOR_RELEASES = 30
MAX_UNUSED_DAYS_FOR_SNAPSHOTS = 7
CLEANUP_INTERVAL_HOURS = 24
SECONDS_PER_DAY = 86400
SECONDS_PER_HOUR = 3600

USER_HOME_PROPERTY_KEY = "gradle.user.home"
USER_HOME_ENV_KEY = "GRADLE_USER_HOME"
CURRENT_VERSION_ENV_KEY = "GRADLE_VERSION"
DEFAULT_USER_HOME_DIRNAME = ".gradle"

CACHES_DIRNAME = "caches"
PROPERTIES_FILENAME = "gradle.properties"
CACHE_CLEANUP_PROPERTY = "org.gradle.cache.cleanup"
CACHE_CLEANUP_DISABLED = "false"
GC_FILENAME = "gc.properties"

FILE_HASHES_CACHE_KEY = "fileHashes"
# eg: fileHashes/fileHashes.lock
MARKER_FILE_PATH = f"{FILE_HASHES_CACHE_KEY}/{FILE_HASHES_CACHE_KEY}.lock"

DISTRIBUTIONS_PATH = Path("wrapper") / "dists"
DISTRIBUTION_NAME_PREFIX = "gradle-"
DISTRIBUTION_TYPES = ("bin", "all")


class ConfigurationError(RuntimeError):
    """Raised when required configuration is missing."""


def default_user_home() -> Path:
    return Path.home() / DEFAULT_USER_HOME_DIRNAME


def lookup_user_home(
    properties: Mapping[str, str] | None = None,
    environ: Mapping[str, str] | None = None,
) -> Path:
    """Return the user home directory.

    Priority order:
      1. ``gradle.user.home`` in the explicitly requested properties
      2. ``GRADLE_USER_HOME`` in the environment
      3. ~/.gradle
    """
    properties = properties or {}
    environ = os.environ if environ is None else environ
    explicit = properties.get(USER_HOME_PROPERTY_KEY)
    if explicit:
        return Path(explicit).expanduser()
    from_env = environ.get(USER_HOME_ENV_KEY)
    if from_env:
        return Path(from_env).expanduser()
    return default_user_home()


def caches_dir(user_home: Path) -> Path:
    return Path(user_home) / CACHES_DIRNAME


def read_properties(path: Path) -> dict[str, str]:
    """Parse a key=value properties file. Missing files yield an empty dict."""
    path = Path(path)
    if not path.is_file():
        return {}
    values = dotenv_values(path, interpolate=False)
    return {key: value for key, value in values.items() if value is not None}


def cleanup_disabled(user_home: Path) -> bool:
    """Return True when the home's properties file opts out of cache cleanup.

    Only the exact value ``false`` disables cleanup.
    """
    properties = read_properties(Path(user_home) / PROPERTIES_FILENAME)
    return properties.get(CACHE_CLEANUP_PROPERTY) == CACHE_CLEANUP_DISABLED


def determine_current_version(
    explicit: str | None, environ: Mapping[str, str] | None = None
) -> str:
    """Return the running tool version from the CLI or ``GRADLE_VERSION``.

    Raises:
        ConfigurationError: If neither source provides a version.
    """
    environ = os.environ if environ is None else environ
    candidate = explicit or environ.get(CURRENT_VERSION_ENV_KEY)
    if not candidate:
        raise ConfigurationError(
            f"No current version given. Pass --current-version or set {CURRENT_VERSION_ENV_KEY}."
        )
    return candidate
