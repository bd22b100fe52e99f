# SPDX-License-Identifier: MIT
"""PEP 440 version parsing.

Accepts the full PEP 440 spelling, including the alternate forms, and
normalizes while parsing:
- Pre-release: 1.0a1, 1.0-alpha.1, 1.0beta2, 1.0c3, 1.0preview3 (alpha -> a,
  beta -> b, c/pre/preview -> rc)
- Post-release: 1.0.post1, 1.0-1, 1.0-r1, 1.0rev1
- Dev-release: 1.0.dev1, 1.0dev
- Epoch and local: 2!1.0, 1.0+ubuntu.1

Missing numbers on pre, post and dev components default to 0.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union

from .compare import comparison_key
from .errors import VersionParseError
from .grammar import VERSION_PATTERN

_PRE_LABEL_ALIASES = {
    "alpha": "a",
    "beta": "b",
    "c": "rc",
    "pre": "rc",
    "preview": "rc",
}


def normalize_pre_label(label: str) -> str:
    """Map a pre-release label to its canonical spelling.

    Examples:
        >>> normalize_pre_label("Alpha")
        'a'
        >>> normalize_pre_label("preview")
        'rc'
    """
    label = label.lower()
    return _PRE_LABEL_ALIASES.get(label, label)


def _optional_number(text: Optional[str]) -> int:
    return int(text) if text else 0


@dataclass(frozen=True, slots=True, eq=False)
class Version:
    """Represents a parsed PEP 440 version.

    Equality and ordering ignore ``local`` and trailing zeros in ``release``;
    use ``strict_eq`` to also compare the local segment.

    Attributes:
        release: Release segments exactly as written (e.g., (1, 2, 0))
        epoch: Version epoch, 0 when not given
        pre: Normalized pre-release label and number (e.g., ("rc", 1))
        post: Post-release number
        dev: Dev-release number
        local: Local version label (e.g., "ubuntu.1")
    """

    release: tuple[int, ...]
    epoch: int = 0
    pre: Optional[tuple[str, int]] = None
    post: Optional[int] = None
    dev: Optional[int] = None
    local: Optional[str] = None

    def __post_init__(self) -> None:
        release = tuple(self.release)
        if not release:
            raise ValueError("Version release must have at least one segment")
        object.__setattr__(self, "release", release)
        if self.pre is not None:
            object.__setattr__(self, "pre", tuple(self.pre))

    @classmethod
    def parse(cls, version_string: str) -> Version:
        """Parse a PEP 440 version string into a Version object.

        Args:
            version_string: Version text, e.g. "1!2.0rc1.post2.dev3+local"

        Returns:
            A Version object with normalized components

        Raises:
            VersionParseError: If the string does not match the version grammar

        Examples:
            >>> Version.parse("1.0")
            Version(release=(1, 0), epoch=0, pre=None, post=None, dev=None, local=None)

            >>> Version.parse("v2.1-beta.3").pre
            ('b', 3)

            >>> Version.parse("1.0-4").post
            4
        """
        if not isinstance(version_string, str):
            raise VersionParseError(
                version_string,
                f"Version must be a string, got {type(version_string).__name__}",
            )

        text = version_string.strip()
        if not text:
            raise VersionParseError(version_string, "Version string cannot be empty")

        match = VERSION_PATTERN.fullmatch(text)
        if not match:
            raise VersionParseError(version_string)

        pre = None
        if match.group("pre_label"):
            pre = (
                normalize_pre_label(match.group("pre_label")),
                _optional_number(match.group("pre_number")),
            )

        post = None
        if match.group("post_implicit"):
            post = int(match.group("post_implicit"))
        elif match.group("post_label"):
            post = _optional_number(match.group("post_number"))

        dev = None
        if match.group("dev_label"):
            dev = _optional_number(match.group("dev_number"))

        return cls(
            release=tuple(int(part) for part in match.group("release").split(".")),
            epoch=_optional_number(match.group("epoch")),
            pre=pre,
            post=post,
            dev=dev,
            local=match.group("local"),
        )

    @classmethod
    def try_parse(cls, version_string: str) -> Union[Version, VersionParseError]:
        """Parse a version string, returning the error instead of raising it.

        Examples:
            >>> isinstance(Version.try_parse("1..0"), VersionParseError)
            True
        """
        try:
            return cls.parse(version_string)
        except VersionParseError as exc:
            return exc

    def to_string(self) -> str:
        """Return the canonical string form of the version.

        Examples:
            >>> Version.parse("1.0-Preview-3.r2").to_string()
            '1.0rc3.post2'
        """
        parts = []
        if self.epoch != 0:
            parts.append(f"{self.epoch}!")
        parts.append(".".join(str(segment) for segment in self.release))
        if self.pre is not None:
            parts.append(f"{self.pre[0]}{self.pre[1]}")
        if self.post is not None:
            parts.append(f".post{self.post}")
        if self.dev is not None:
            parts.append(f".dev{self.dev}")
        if self.local is not None:
            parts.append(f"+{self.local}")
        return "".join(parts)

    def __str__(self) -> str:
        return self.to_string()

    def strict_eq(self, other: Version) -> bool:
        """Return True if versions are equal and have the same local segment."""
        return self == other and self.local == other.local

    def _key(self) -> tuple:
        return comparison_key(self)

    def __hash__(self) -> int:
        return hash(self._key())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self._key() == other._key()

    def __ne__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self._key() != other._key()

    def __lt__(self, other: Version) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self._key() < other._key()

    def __le__(self, other: Version) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self._key() <= other._key()

    def __gt__(self, other: Version) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self._key() > other._key()

    def __ge__(self, other: Version) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self._key() >= other._key()

    @property
    def public(self) -> str:
        """Return the canonical string without the local segment."""
        return self.to_string().split("+", 1)[0]

    @property
    def base_version(self) -> str:
        """Return the epoch and release without any qualifiers."""
        release = ".".join(str(segment) for segment in self.release)
        return f"{self.epoch}!{release}" if self.epoch else release

    @property
    def is_prerelease(self) -> bool:
        """Return True for pre-releases and dev releases."""
        return self.pre is not None or self.dev is not None

    @property
    def is_postrelease(self) -> bool:
        return self.post is not None

    @property
    def is_devrelease(self) -> bool:
        return self.dev is not None

    @property
    def major(self) -> int:
        return self.release[0]

    @property
    def minor(self) -> int:
        return self.release[1] if len(self.release) > 1 else 0

    @property
    def micro(self) -> int:
        return self.release[2] if len(self.release) > 2 else 0


def parse_version(version_string: str) -> Version:
    """Parse a PEP 440 version string. See ``Version.parse``."""
    return Version.parse(version_string)


def is_valid_version(version_string: str) -> bool:
    """Check if a string is a valid PEP 440 version.

    Examples:
        >>> is_valid_version("1.0.post1")
        True
        >>> is_valid_version("1.0-foo")
        False
        >>> is_valid_version("  1.0  ")
        True
    """
    if not isinstance(version_string, str):
        return False
    return VERSION_PATTERN.fullmatch(version_string.strip()) is not None
