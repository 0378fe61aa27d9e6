# SPDX-License-Identifier: MIT
"""Unit tests for version comparison."""

import pytest

from sem_version import (
    Version,
    ParseError,
    VersionPanic,
    parse_version,
    compare,
    compare_versions,
    less,
    version_key,
    sort_versions,
    latest_version,
)


class TestCompare:
    """Tests for compare function."""

    def test_equal_versions(self):
        """Test that equal versions compare as equal."""
        assert compare(parse_version("1.0.0"), parse_version("1.0.0")) == 0

    def test_major_difference(self):
        """Test comparison with different major versions."""
        assert compare(Version(1), Version(2)) == -1
        assert compare(Version(2), Version(1)) == 1

    def test_minor_difference(self):
        """Test comparison with different minor versions."""
        assert compare(Version(1, 0), Version(1, 1)) == -1
        assert compare(Version(1, 1), Version(1, 0)) == 1

    def test_patch_difference(self):
        """Test comparison with different patch versions."""
        assert compare(Version(1, 0, 0), Version(1, 0, 1)) == -1
        assert compare(Version(1, 0, 1), Version(1, 0, 0)) == 1

    def test_numeric_not_lexical(self):
        """Test that numbers compare as integers."""
        assert compare(Version(1, 10, 0), Version(1, 9, 0)) == 1

    def test_rejects_strings(self):
        """Test that compare() only accepts Version objects."""
        with pytest.raises(TypeError):
            compare("1.0.0", Version(1))  # type: ignore


class TestCompareVersions:
    """Tests for compare_versions function."""

    @pytest.mark.parametrize(
        "a, b, expected",
        [
            ("1.0.0", "1.0.0", 0),
            ("1.0", "0.0", 1),
            ("1.1", "1.0", 1),
            ("1.0.1", "1.0", 1),
            ("v1", "1.0.0", 0),
            ("1.0.1", "1.0.1-beta", 1),
            ("1.0.1-beta", "1.0.1-alpha", 1),
            ("1.0.1-rc2", "1.0.1-rc1", 1),
        ],
    )
    def test_ordering(self, a, b, expected):
        """Test ordering of version strings."""
        assert compare_versions(a, b) == expected

    def test_prerelease_vs_release(self):
        """Test that pre-release is less than release."""
        assert compare_versions("1.0.0-alpha", "1.0.0") == -1
        assert compare_versions("1.0.0", "1.0.0-alpha") == 1

    def test_prerelease_is_ordinal(self):
        """Test that pre-releases compare as plain strings."""
        assert compare_versions("1.0.1-rc1", "1.0.1-rc11") == -1
        # Digits are not compared numerically
        assert compare_versions("1.0.1-rc2", "1.0.1-rc11") == 1
        assert compare_versions("1.0.0-alpha.10", "1.0.0-alpha.9") == -1
        # Code point order: uppercase before lowercase
        assert compare_versions("1.0.0-RC", "1.0.0-beta") == -1

    def test_build_metadata_ignored(self):
        """Test that build metadata is ignored in comparison."""
        assert compare_versions("1.0.0-dev+A", "1.0.0-dev+B") == 0
        assert compare_versions("1.0.0-dev+A", "1.0.0-dev") == 0

    def test_version_objects(self):
        """Test comparison with Version objects."""
        assert compare_versions(Version(1), Version(2)) == -1

    def test_mixed_string_and_version(self):
        """Test comparison with mixed string and Version."""
        v = parse_version("1.0.0")
        assert compare_versions(v, "2.0.0") == -1
        assert compare_versions("1.0.0", v) == 0

    def test_invalid_first_operand(self):
        """Test that the first operand's error is reported."""
        with pytest.raises(ParseError) as exc_info:
            compare_versions("x.0.0", "1.0.1-")
        assert exc_info.value.input == "x.0.0"

    def test_invalid_second_operand(self):
        """Test that the second operand's error is reported."""
        with pytest.raises(ParseError) as exc_info:
            compare_versions("1.0.0", "1.0.1-")
        assert exc_info.value.segment == ParseError.PRERELEASE


class TestLess:
    """Tests for less function."""

    def test_less(self):
        """Test the less-than predicate."""
        assert less("0.3.5", "1.0.0") is True
        assert less("0.3.5-dev", "0.3.5") is True
        assert less("1.0.0", "1.0.0") is False
        assert less(Version(2), "1.0.0") is False

    def test_panics_on_invalid(self):
        """Test that invalid input raises VersionPanic."""
        with pytest.raises(VersionPanic):
            less("abc", "1.0.0")


class TestVersionKey:
    """Tests for version_key function."""

    def test_sorting_basic(self):
        """Test sorting basic versions."""
        versions = ["2.0.0", "1.0.0", "1.1.0", "1.0.1"]
        assert sorted(versions, key=version_key) == ["1.0.0", "1.0.1", "1.1.0", "2.0.0"]

    def test_sorting_with_prerelease(self):
        """Test sorting versions with pre-releases."""
        versions = ["1.0.0", "1.0.0-rc", "1.0.0-beta", "1.0.0-alpha"]
        assert sorted(versions, key=version_key) == [
            "1.0.0-alpha",
            "1.0.0-beta",
            "1.0.0-rc",
            "1.0.0",
        ]

    def test_build_ignored(self):
        """Test that build metadata does not change the key."""
        assert version_key("1.0.0-dev+A") == version_key("1.0.0-dev+B")


class TestSortVersions:
    """Tests for sort_versions and latest_version."""

    def test_sort(self):
        """Test sorting mixed versions."""
        versions = ["2.0.0", "1.0.0-alpha", "v1", "1.1.0-beta", "1.0.0-rc"]
        assert sort_versions(versions) == ["1.0.0-alpha", "1.0.0-rc", "v1", "1.1.0-beta", "2.0.0"]

    def test_sort_reverse(self):
        """Test sorting highest first."""
        assert sort_versions(["1.9", "2.0", "1.10"], reverse=True) == ["2.0", "1.10", "1.9"]

    def test_sort_is_stable(self):
        """Test that equal versions keep their input order."""
        assert sort_versions(["1.0.0-dev+B", "1.0.0-dev+A"]) == ["1.0.0-dev+B", "1.0.0-dev+A"]

    def test_sort_invalid(self):
        """Test that an invalid version raises ParseError."""
        with pytest.raises(ParseError):
            sort_versions(["1.0.0", "1.x"])

    def test_latest(self):
        """Test picking the greatest version."""
        assert latest_version(["1.0.0-rc1", "1.0.0", "0.9"]) == "1.0.0"
        assert latest_version([Version(1), Version(1, 0, 0, "rc1")]) == Version(1)

    def test_latest_empty(self):
        """Test that an empty list raises ValueError."""
        with pytest.raises(ValueError):
            latest_version([])


class TestOrderingProperties:
    """Tests for ordering consistency."""

    def test_transitivity(self):
        """Test that comparison is transitive: if a < b and b < c, then a < c."""
        a, b, c = "1.0.0-alpha", "1.0.0-beta", "1.0.0"

        assert compare_versions(a, b) == -1
        assert compare_versions(b, c) == -1
        assert compare_versions(a, c) == -1

    def test_antisymmetry(self):
        """Test that comparison is antisymmetric: if a < b, then b > a."""
        assert compare_versions("1.0.0", "2.0.0") == -1
        assert compare_versions("2.0.0", "1.0.0") == 1

    def test_reflexivity(self):
        """Test that comparison is reflexive: a == a."""
        for v in ["1.0.0", "1.0.0-alpha", "1.0.0-alpha+build"]:
            assert compare_versions(v, v) == 0
