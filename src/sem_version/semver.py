# SPDX-License-Identifier: MIT
"""Semantic version parsing.

Accepts ``[v]MAJOR[.MINOR[.PATCH[-PRERELEASE[+BUILD]]]]``:
- A single leading ``v`` is dropped: ``v1.2.3``
- Minor and patch default to 0: ``1`` and ``1.4`` are valid
- Pre-release only after the patch number: ``1.0.0-beta``, ``1.0.0-rc.1``
- Build metadata only after a pre-release: ``1.0.0-dev+sha.5114f85``
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from functools import total_ordering
from typing import Any, Optional, Union

logger = logging.getLogger(__name__)

_DIGITS = re.compile(r"[0-9]+")

_NUMERIC_FIELDS = ("major", "minor", "patch")

# Longest accepted numeric segment; int/str conversion of longer values is
# capped by the interpreter (sys.set_int_max_str_digits)
MAX_NUMBER_DIGITS = 1000

_NUMBER_LIMIT = 10**MAX_NUMBER_DIGITS


class ParseError(ValueError):
    """Raised when a string is not a valid version.

    Attributes:
        input: The value handed to the parser, unmodified
        segment: Which part of the version failed (one of the class constants)
        message: Human readable description of the failure
    """

    EMPTY = "empty"
    MAJOR = "major"
    MINOR = "minor"
    PATCH = "patch"
    PRERELEASE = "prerelease"
    BUILD = "build"

    _MESSAGES = {
        EMPTY: "empty",
        MAJOR: "major invalid",
        MINOR: "minor invalid",
        PATCH: "patch invalid",
        PRERELEASE: "pre-release missing",
        BUILD: "build missing",
    }

    def __init__(self, input: str, segment: str, message: str = ""):
        self.input = input
        self.segment = segment
        self.message = message or self._MESSAGES.get(segment, f"{segment} invalid")
        super().__init__(f"invalid version {input!r}: {self.message}")


class VersionPanic(RuntimeError):
    """Raised by the fail-loudly helpers when their input does not parse.

    The originating :class:`ParseError` is available as ``__cause__``.
    """

    def __init__(self, input: str, message: str):
        self.input = input
        super().__init__(message)


@total_ordering
@dataclass(frozen=True, slots=True)
class Version:
    """A parsed semantic version.

    Attributes:
        major: Major version number
        minor: Minor version number
        patch: Patch version number
        prerelease: Optional pre-release text (e.g. "beta", "rc1"), None when absent
        build: Optional build metadata, ignored by equality and ordering
    """

    major: int
    minor: int = 0
    patch: int = 0
    prerelease: Optional[str] = None
    build: Optional[str] = field(default=None, compare=False)

    def __post_init__(self) -> None:
        for name in _NUMERIC_FIELDS:
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int) or value < 0:
                raise ValueError(f"{name} must be a non-negative integer, got {value!r}")
            if value >= _NUMBER_LIMIT:
                raise ValueError(f"{name} must have at most {MAX_NUMBER_DIGITS} digits")
        for name in ("prerelease", "build"):
            value = getattr(self, name)
            if value is not None and not isinstance(value, str):
                raise ValueError(f"{name} must be a string or None, got {value!r}")
            # Empty text means absent
            if value == "":
                object.__setattr__(self, name, None)

    def __str__(self) -> str:
        """Return the canonical string representation of the version."""
        version = f"{self.major}.{self.minor}.{self.patch}"
        if self.prerelease:
            version += f"-{self.prerelease}"
        if self.build:
            version += f"+{self.build}"
        return version

    def __lt__(self, other: Any) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        from .compare import compare

        return compare(self, other) < 0

    @property
    def is_prerelease(self) -> bool:
        """Return True if this is a pre-release version."""
        return self.prerelease is not None

    @property
    def base_version(self) -> str:
        """Return the base version without pre-release or build metadata."""
        return f"{self.major}.{self.minor}.{self.patch}"


def _parse(value: Any) -> Union[Version, ParseError]:
    """Parse ``value``, returning the Version or the error describing the failure."""
    result = _parse_segments(value)
    if isinstance(result, ParseError):
        logger.debug("Rejected version %r: %s", result.input, result.message)
    return result


def _parse_segments(value: Any) -> Union[Version, ParseError]:
    if not isinstance(value, str):
        return ParseError(
            str(value), ParseError.EMPTY, f"version must be a string, got {type(value).__name__}"
        )

    text = value.strip()
    if not text:
        return ParseError(value, ParseError.EMPTY)
    if text.startswith("v"):
        text = text[1:]

    core, dash, suffix = text.partition("-")
    core, plus, _ = core.partition("+")

    numbers = core.split(".")
    if len(numbers) > 3:
        # "1.2.3.4": the patch segment would read "3.4"
        return ParseError(value, ParseError.PATCH)
    for name, number in zip(_NUMERIC_FIELDS, numbers):
        if not _DIGITS.fullmatch(number):
            return ParseError(value, name)
        if len(number) > MAX_NUMBER_DIGITS:
            return ParseError(value, name, f"{name} exceeds {MAX_NUMBER_DIGITS} digits")

    if plus:
        return ParseError(value, ParseError.PRERELEASE, "build metadata requires a pre-release")

    prerelease: Optional[str] = None
    build: Optional[str] = None
    if dash:
        if len(numbers) < 3:
            # "1.0-beta": the text after the dash belongs to the last number present
            return ParseError(value, _NUMERIC_FIELDS[len(numbers) - 1])
        prerelease, plus, build = suffix.partition("+")
        if not prerelease:
            return ParseError(value, ParseError.PRERELEASE)
        if plus and not build:
            return ParseError(value, ParseError.BUILD)

    major, minor, patch = (int(n) for n in numbers + ["0"] * (3 - len(numbers)))
    return Version(major, minor, patch, prerelease, build or None)


def check_version(version_string: str) -> Optional[ParseError]:
    """Return the error that parsing ``version_string`` would raise, or None.

    Examples:
        >>> check_version("1.0.0") is None
        True
        >>> check_version("1.0.1-").segment
        'prerelease'
    """
    result = _parse(version_string)
    return result if isinstance(result, ParseError) else None


def parse_version(version_string: str) -> Version:
    """Parse a version string into a Version object.

    Args:
        version_string: A string of the form [v]MAJOR[.MINOR[.PATCH[-PRERELEASE[+BUILD]]]]

    Returns:
        A Version object with parsed components

    Raises:
        ParseError: If the string is not a valid version. The error names the
            failing segment and carries the original input.

    Examples:
        >>> parse_version("1.2.3")
        Version(major=1, minor=2, patch=3, prerelease=None, build=None)

        >>> parse_version("v1")
        Version(major=1, minor=0, patch=0, prerelease=None, build=None)

        >>> parse_version("1.0.0-dev+A")
        Version(major=1, minor=0, patch=0, prerelease='dev', build='A')
    """
    result = _parse(version_string)
    if isinstance(result, ParseError):
        raise result
    return result


def must_parse_version(version_string: str) -> Version:
    """Parse a version that the caller has already validated.

    Raises:
        VersionPanic: If the string does not parse. Unlike ParseError this is
            not a ValueError, so it is not absorbed by input validation handlers.
    """
    try:
        return parse_version(version_string)
    except ParseError as e:
        raise VersionPanic(e.input, str(e)) from e


def is_valid_semver(version_string: str) -> bool:
    """Check if a string is a valid version.

    Examples:
        >>> is_valid_semver("1.0.0")
        True
        >>> is_valid_semver("1.x")
        False
    """
    return not isinstance(_parse(version_string), ParseError)


def format_version(version: Version) -> str:
    """Render ``version`` as MAJOR.MINOR.PATCH[-PRERELEASE][+BUILD].

    A leading ``v`` from the original input is never reproduced.
    """
    return str(version)
