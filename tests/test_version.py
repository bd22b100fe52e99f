# SPDX-License-Identifier: MIT
"""Unit tests for PEP 440 version parsing and display."""

import pytest

from pep440_version import (
    Version,
    VersionParseError,
    is_valid_version,
    normalize_pre_label,
    parse_version,
)


class TestParseVersion:
    """Tests for Version.parse."""

    def test_basic_version(self):
        """Test parsing a plain release."""
        v = Version.parse("1.2.3")
        assert v.epoch == 0
        assert v.release == (1, 2, 3)
        assert v.pre is None
        assert v.post is None
        assert v.dev is None
        assert v.local is None
        assert v.to_string() == "1.2.3"

    def test_single_segment(self):
        v = Version.parse("7")
        assert v.release == (7,)

    def test_many_segments(self):
        """Test parsing more than three release segments."""
        v = Version.parse("1.2.3.4.5")
        assert v.release == (1, 2, 3, 4, 5)
        assert v.to_string() == "1.2.3.4.5"

    def test_epoch(self):
        v = Version.parse("2!1.0")
        assert v.epoch == 2
        assert v.release == (1, 0)
        assert v.to_string() == "2!1.0"

    def test_zero_epoch_not_displayed(self):
        assert Version.parse("0!1.0").to_string() == "1.0"

    def test_leading_v(self):
        """Test that a leading "v" is accepted and dropped."""
        assert Version.parse("v1.0").to_string() == "1.0"
        assert Version.parse("V1.0").to_string() == "1.0"

    def test_pre_release(self):
        v = Version.parse("1.0a1")
        assert v.pre == ("a", 1)
        assert v.to_string() == "1.0a1"

    def test_post_release(self):
        v = Version.parse("1.0.post5")
        assert v.post == 5
        assert v.to_string() == "1.0.post5"

    def test_dev_release(self):
        v = Version.parse("1.0.dev3")
        assert v.dev == 3
        assert v.to_string() == "1.0.dev3"

    def test_local_segment(self):
        v = Version.parse("1.0+abc.def")
        assert v.local == "abc.def"
        assert v.to_string() == "1.0+abc.def"

    def test_local_with_mixed_separators(self):
        v = Version.parse("1.0+ubuntu-1_2.3")
        assert v.local == "ubuntu-1_2.3"

    def test_full_complex_version(self):
        """Test parsing every component at once."""
        v = Version.parse("1!2.3.4rc5.post6.dev7+build.meta")
        assert v.epoch == 1
        assert v.release == (2, 3, 4)
        assert v.pre == ("rc", 5)
        assert v.post == 6
        assert v.dev == 7
        assert v.local == "build.meta"
        assert v.to_string() == "1!2.3.4rc5.post6.dev7+build.meta"

    def test_trailing_zeros_preserved(self):
        """Test that release trailing zeros are kept for display."""
        v = Version.parse("1.0.0.0")
        assert v.release == (1, 0, 0, 0)
        assert v.to_string() == "1.0.0.0"

    def test_leading_zeros_normalized(self):
        assert Version.parse("01.002").to_string() == "1.2"

    def test_surrounding_whitespace_trimmed(self):
        assert Version.parse("  1.0  ").to_string() == "1.0"

    def test_case_insensitive(self):
        v = Version.parse("1.0RC1.POST2.DEV3")
        assert v.pre == ("rc", 1)
        assert v.post == 2
        assert v.dev == 3

    def test_parse_version_function(self):
        assert parse_version("1.0") == Version.parse("1.0")


class TestPreReleaseAliases:
    """Tests for pre-release label normalization."""

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("1.0alpha2", ("a", 2)),
            ("1.0beta3", ("b", 3)),
            ("1.0c4", ("rc", 4)),
            ("1.0pre5", ("rc", 5)),
            ("1.0preview6", ("rc", 6)),
            ("1.0RC7", ("rc", 7)),
        ],
    )
    def test_alias(self, text, expected):
        assert Version.parse(text).pre == expected

    def test_alias_display(self):
        assert Version.parse("1.0alpha1").to_string() == "1.0a1"
        assert Version.parse("1.0beta2").to_string() == "1.0b2"
        assert Version.parse("1.0preview3").to_string() == "1.0rc3"

    @pytest.mark.parametrize("text", ["1.0-a1", "1.0_a1", "1.0.a1", "1.0a.1", "1.0a-1"])
    def test_separators(self, text):
        assert Version.parse(text).pre == ("a", 1)

    def test_unknown_label_passes_through(self):
        assert normalize_pre_label("Zeta") == "zeta"


class TestImplicitNumbers:
    """Tests for components written without a number."""

    def test_implicit_dev(self):
        assert Version.parse("1.0.dev").dev == 0

    def test_implicit_post(self):
        assert Version.parse("1.0.post").post == 0

    def test_implicit_pre(self):
        assert Version.parse("1.0a").pre == ("a", 0)

    def test_implicit_numbers_display(self):
        assert Version.parse("1.0b.post.dev").to_string() == "1.0b0.post0.dev0"


class TestLegacyPostRelease:
    """Tests for alternate post-release spellings."""

    def test_bare_dash_number(self):
        v = Version.parse("1.0-1")
        assert v.post == 1
        assert v.to_string() == "1.0.post1"

    @pytest.mark.parametrize("text", ["1.0-r2", "1.0rev2", "1.0_post2", "1.0.r.2", "1.0post-2"])
    def test_labels(self, text):
        assert Version.parse(text).post == 2

    def test_label_without_number(self):
        assert Version.parse("1.0-rev").post == 0

    def test_post_and_dev(self):
        v = Version.parse("1.0-3.dev1")
        assert v.post == 3
        assert v.dev == 1


class TestInvalidVersions:
    """Tests for strings outside the version grammar."""

    @pytest.mark.parametrize(
        "text",
        [
            "not.a.version",
            "1..0",
            "1.0-foo",
            "1.0++abc",
            "!1.0",
            "1.0.",
            ".1.0",
            "1.0+",
            "1.0+abc..def",
            "1.0a1b1",
            "a.b.c",
            "-1.0",
            "1.0 .dev1",
            "1.0+\u212a",
            "1.0.po\u017ft1",
        ],
    )
    def test_rejected(self, text):
        with pytest.raises(VersionParseError):
            Version.parse(text)

    def test_empty_string(self):
        with pytest.raises(VersionParseError, match="cannot be empty"):
            Version.parse("")

    def test_whitespace_only(self):
        with pytest.raises(VersionParseError):
            Version.parse("   ")

    def test_non_string_input(self):
        with pytest.raises(VersionParseError, match="must be a string"):
            Version.parse(123)  # type: ignore

    def test_none_input(self):
        with pytest.raises(VersionParseError):
            Version.parse(None)  # type: ignore

    def test_error_carries_input(self):
        with pytest.raises(VersionParseError) as excinfo:
            Version.parse("1.0-foo")
        assert excinfo.value.input == "1.0-foo"
        assert "1.0-foo" in str(excinfo.value)

    def test_error_is_value_error(self):
        with pytest.raises(ValueError):
            Version.parse("1..0")


class TestTryParse:
    """Tests for Version.try_parse."""

    def test_success(self):
        assert Version.try_parse("1.0") == Version.parse("1.0")

    def test_failure_returns_error(self):
        result = Version.try_parse("1..0")
        assert isinstance(result, VersionParseError)
        assert result.input == "1..0"


class TestIsValidVersion:
    """Tests for is_valid_version."""

    def test_valid(self):
        assert is_valid_version("1!2.0rc1.post2.dev3+local") is True

    def test_invalid(self):
        assert is_valid_version("1.0-foo") is False

    def test_empty(self):
        assert is_valid_version("") is False

    def test_non_string(self):
        assert is_valid_version(123) is False  # type: ignore

    def test_whitespace_trimmed(self):
        assert is_valid_version("  1.0  ") is True


class TestVersionProperties:
    """Tests for derived Version properties."""

    def test_public(self):
        assert Version.parse("1.0rc1+local.7").public == "1.0rc1"

    def test_base_version(self):
        assert Version.parse("1!2.0.1rc1.post2+abc").base_version == "1!2.0.1"
        assert Version.parse("2.0.1.dev4").base_version == "2.0.1"

    def test_is_prerelease(self):
        assert Version.parse("1.0a1").is_prerelease is True
        assert Version.parse("1.0.dev0").is_prerelease is True
        assert Version.parse("1.0.post1").is_prerelease is False

    def test_is_postrelease(self):
        assert Version.parse("1.0.post0").is_postrelease is True
        assert Version.parse("1.0").is_postrelease is False

    def test_is_devrelease(self):
        assert Version.parse("1.0.dev0").is_devrelease is True
        assert Version.parse("1.0").is_devrelease is False

    def test_major_minor_micro(self):
        v = Version.parse("4.5.6.7")
        assert (v.major, v.minor, v.micro) == (4, 5, 6)

    def test_missing_minor_micro_default_zero(self):
        v = Version.parse("4")
        assert (v.major, v.minor, v.micro) == (4, 0, 0)


class TestVersionValue:
    """Tests for Version construction, hashing and immutability."""

    def test_frozen(self):
        v = Version.parse("1.0")
        with pytest.raises(AttributeError):
            v.epoch = 2  # type: ignore

    def test_hashable(self):
        v = Version.parse("1.0")
        assert v in {v}

    def test_hash_ignores_trailing_zeros_and_local(self):
        assert hash(Version.parse("1.0+abc")) == hash(Version.parse("1"))
        assert len({Version.parse("1.0"), Version.parse("1.0.0"), Version.parse("1+x")}) == 1

    def test_direct_construction(self):
        v = Version(release=[1, 2], pre=["b", 3])  # type: ignore
        assert v.release == (1, 2)
        assert v.pre == ("b", 3)
        assert v == Version.parse("1.2b3")

    def test_empty_release_rejected(self):
        with pytest.raises(ValueError):
            Version(release=())

    def test_str(self):
        assert str(Version.parse("1.0-beta")) == "1.0b0"
