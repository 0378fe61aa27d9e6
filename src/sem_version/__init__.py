# SPDX-License-Identifier: MIT
"""Semantic version parsing and comparison.

Parses ``[v]MAJOR[.MINOR[.PATCH[-PRERELEASE[+BUILD]]]]`` into an immutable
Version and orders versions by number, then release before pre-release,
then pre-release text compared as plain strings. Build metadata never
affects ordering or equality.

Example:
    >>> from sem_version import parse_version, compare_versions
    >>>
    >>> version = parse_version("v2.93.144-beta")
    >>> str(version)
    '2.93.144-beta'
    >>>
    >>> compare_versions("1.0.1", "1.0.1-beta")
    1
"""

__version__ = "0.1.0"

from .semver import (
    Version,
    ParseError,
    VersionPanic,
    parse_version,
    must_parse_version,
    check_version,
    is_valid_semver,
    format_version,
)
from .compare import (
    compare,
    compare_versions,
    less,
    version_key,
    sort_versions,
    latest_version,
)

__all__ = [
    # Version parsing
    "Version",
    "ParseError",
    "VersionPanic",
    "parse_version",
    "must_parse_version",
    "check_version",
    "is_valid_semver",
    "format_version",
    # Version comparison
    "compare",
    "compare_versions",
    "less",
    "version_key",
    "sort_versions",
    "latest_version",
]
