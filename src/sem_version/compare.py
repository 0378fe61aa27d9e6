# SPDX-License-Identifier: MIT
"""Version comparison.

Precedence: major, minor, patch, then pre-release. A release outranks any
pre-release of the same number, and two pre-releases compare as plain
strings (ordinal, code point by code point), so "rc2" > "rc11".
Build metadata is ignored in comparisons.
"""

from __future__ import annotations

from typing import Iterable, Optional, TypeVar, Union

from .semver import Version, must_parse_version, parse_version

VersionLike = Union[str, Version]

T = TypeVar("T", str, Version)


def _compare_prerelease(pre1: Optional[str], pre2: Optional[str]) -> int:
    """Compare two pre-release strings.

    A version without pre-release has higher precedence than one with
    pre-release (1.0.0 > 1.0.0-alpha).
    """
    if pre1 == pre2:
        return 0
    if pre1 is None:
        return 1  # Release > pre-release
    if pre2 is None:
        return -1  # Pre-release < release
    return -1 if pre1 < pre2 else 1


def compare(v1: Version, v2: Version) -> int:
    """Compare two parsed versions.

    Returns:
        -1 if v1 < v2
        0 if v1 == v2
        1 if v1 > v2

    Raises:
        TypeError: If either argument is not a Version
    """
    if not isinstance(v1, Version) or not isinstance(v2, Version):
        raise TypeError(
            f"compare() expects Version objects, got {type(v1).__name__} and {type(v2).__name__}"
        )

    for attr in ("major", "minor", "patch"):
        val1 = getattr(v1, attr)
        val2 = getattr(v2, attr)
        if val1 != val2:
            return -1 if val1 < val2 else 1

    return _compare_prerelease(v1.prerelease, v2.prerelease)


def compare_versions(version1: VersionLike, version2: VersionLike) -> int:
    """Compare two versions given as strings or Version objects.

    Strings are parsed left to right; the first parse error is raised and
    the second operand is not parsed.

    Returns:
        -1 if version1 < version2
        0 if version1 == version2
        1 if version1 > version2

    Raises:
        ParseError: If either version string is invalid

    Examples:
        >>> compare_versions("1.0.1", "1.0.1-beta")
        1
        >>> compare_versions("1.0.1-beta", "1.0.1-alpha")
        1
        >>> compare_versions("1.0.0-dev+A", "1.0.0-dev+B")
        0
    """
    v1 = parse_version(version1) if isinstance(version1, str) else version1
    v2 = parse_version(version2) if isinstance(version2, str) else version2
    return compare(v1, v2)


def less(version1: VersionLike, version2: VersionLike) -> bool:
    """Return True if version1 sorts before version2.

    Intended for versions that are known to be valid.

    Raises:
        VersionPanic: If either version string is invalid
    """
    v1 = must_parse_version(version1) if isinstance(version1, str) else version1
    v2 = must_parse_version(version2) if isinstance(version2, str) else version2
    return compare(v1, v2) < 0


def version_key(version: VersionLike) -> tuple:
    """Return a sort key for a version, consistent with compare().

    Examples:
        >>> sorted(["1.0.0", "2.0.0", "1.0.0-alpha"], key=version_key)
        ['1.0.0-alpha', '1.0.0', '2.0.0']
    """
    v = parse_version(version) if isinstance(version, str) else version

    # Releases sort after every pre-release of the same number
    if v.prerelease is None:
        return (v.major, v.minor, v.patch, 1, "")
    return (v.major, v.minor, v.patch, 0, v.prerelease)


def sort_versions(versions: Iterable[T], reverse: bool = False) -> list[T]:
    """Return the versions in ascending order (descending with ``reverse``).

    Items are returned as given; strings are not normalised. The sort is
    stable, so versions that compare equal keep their input order.

    Raises:
        ParseError: If any version string is invalid
    """
    return sorted(versions, key=version_key, reverse=reverse)


def latest_version(versions: Iterable[T]) -> T:
    """Return the greatest version.

    Raises:
        ValueError: If ``versions`` is empty
        ParseError: If any version string is invalid
    """
    items = list(versions)
    if not items:
        raise ValueError("Empty version list")
    return max(items, key=version_key)
