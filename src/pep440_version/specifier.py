# SPDX-License-Identifier: MIT
"""Version ranges: a single "operator + version" constraint and
comma-separated sets of them.

Supported operators: ==, !=, <, <=, >, >= and ~= (compatible release).

A RangeSet is the logical AND of its ranges, so ">=1.0, <2.0, !=1.5" matches
1.4 but not 1.5 or 2.0. An empty RangeSet matches every version.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Iterator, Union

from .compare import coerce_version
from .errors import VersionParseError
from .version import Version


class Operator(str, Enum):
    """Comparison operators allowed in a range."""

    COMPATIBLE = "~="
    GREATER_EQUAL = ">="
    LESS_EQUAL = "<="
    NOT_EQUAL = "!="
    EQUAL = "=="
    GREATER = ">"
    LESS = "<"

    def __str__(self) -> str:
        return self.value


# Two-character operators must be tried before their one-character prefixes
_OPERATOR_PRIORITY = (
    Operator.COMPATIBLE,
    Operator.GREATER_EQUAL,
    Operator.LESS_EQUAL,
    Operator.NOT_EQUAL,
    Operator.EQUAL,
    Operator.GREATER,
    Operator.LESS,
)


def compatible_upper_bound(version: Version) -> Version:
    """Return the exclusive upper bound of a ``~=`` range.

    The last release segment is dropped and the new last segment is
    incremented; a single-segment release is incremented directly. The epoch
    is kept. Pre, post, dev and local qualifiers of the bound are dropped,
    so "~=2.2rc1" and "~=2.2" share the upper bound 3.

    Examples:
        >>> str(compatible_upper_bound(Version.parse("2.2")))
        '3'
        >>> str(compatible_upper_bound(Version.parse("1!2.2.1rc1")))
        '1!2.3'
        >>> str(compatible_upper_bound(Version.parse("4")))
        '5'
    """
    release = version.release
    if len(release) > 1:
        release = release[:-1]
    return Version(release=release[:-1] + (release[-1] + 1,), epoch=version.epoch)


@dataclass(frozen=True, slots=True)
class Range:
    """A single version constraint such as ">=1.0" or "~=2.2".

    Attributes:
        operator: Comparison operator
        version: Version the operator compares against
    """

    operator: Operator
    version: Version

    @classmethod
    def parse(cls, range_string: str) -> Range:
        """Parse an "operator + version" string into a Range.

        Args:
            range_string: Constraint text, e.g. ">=1.0" or "~= 2.2"

        Returns:
            A Range object

        Raises:
            VersionParseError: If the operator is not recognized or the
                remainder is not a valid version

        Examples:
            >>> Range.parse(">=1.0").operator
            <Operator.GREATER_EQUAL: '>='>
            >>> str(Range.parse(" ~= 2.2.0 "))
            '~=2.2.0'
        """
        if not isinstance(range_string, str):
            raise VersionParseError(
                range_string,
                f"Range must be a string, got {type(range_string).__name__}",
            )

        text = range_string.strip()
        for operator in _OPERATOR_PRIORITY:
            if text.startswith(operator.value):
                remainder = text[len(operator.value):].strip()
                return cls(operator=operator, version=Version.parse(remainder))

        raise VersionParseError(range_string, f"Invalid range: {range_string!r}")

    @classmethod
    def try_parse(cls, range_string: str) -> Union[Range, VersionParseError]:
        """Parse a range string, returning the error instead of raising it."""
        try:
            return cls.parse(range_string)
        except VersionParseError as exc:
            return exc

    def matches(self, version: Version) -> bool:
        """Return True if ``version`` satisfies this range.

        Examples:
            >>> Range.parse("~=2.2").matches(Version.parse("2.9"))
            True
            >>> Range.parse("~=2.2.1").matches(Version.parse("2.3.0"))
            False
        """
        bound = self.version
        op = self.operator
        if op is Operator.EQUAL:
            return version == bound
        if op is Operator.NOT_EQUAL:
            return version != bound
        if op is Operator.LESS:
            return version < bound
        if op is Operator.LESS_EQUAL:
            return version <= bound
        if op is Operator.GREATER:
            return version > bound
        if op is Operator.GREATER_EQUAL:
            return version >= bound
        # Operator.COMPATIBLE
        return bound <= version < compatible_upper_bound(bound)

    def filter(self, versions: Iterable[Union[str, Version]]) -> Iterator[Version]:
        """Yield the versions that satisfy this range, in input order."""
        for version in versions:
            version = coerce_version(version)
            if self.matches(version):
                yield version

    def __contains__(self, version: Union[str, Version]) -> bool:
        return self.matches(coerce_version(version))

    def to_string(self) -> str:
        return f"{self.operator.value}{self.version.to_string()}"

    def __str__(self) -> str:
        return self.to_string()


@dataclass(frozen=True, slots=True)
class RangeSet:
    """A conjunction of ranges, e.g. ">=1.0,<2.0,!=1.5".

    Attributes:
        ranges: Ranges in the order they were written
    """

    ranges: tuple[Range, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "ranges", tuple(self.ranges))

    @classmethod
    def parse(cls, range_set_string: str) -> RangeSet:
        """Parse a comma-separated list of ranges.

        Empty segments, such as those left by a trailing comma, are skipped.
        An empty or whitespace-only string gives an empty RangeSet.

        Raises:
            VersionParseError: If any segment is not a valid range

        Examples:
            >>> str(RangeSet.parse(">= 1.0 , <2.0,"))
            '>=1.0,<2.0'
            >>> len(RangeSet.parse(""))
            0
        """
        if not isinstance(range_set_string, str):
            raise VersionParseError(
                range_set_string,
                f"Range set must be a string, got {type(range_set_string).__name__}",
            )

        ranges = [
            Range.parse(segment)
            for segment in (part.strip() for part in range_set_string.split(","))
            if segment
        ]
        return cls(ranges=tuple(ranges))

    @classmethod
    def try_parse(cls, range_set_string: str) -> Union[RangeSet, VersionParseError]:
        """Parse a range set, returning the error instead of raising it."""
        try:
            return cls.parse(range_set_string)
        except VersionParseError as exc:
            return exc

    def matches(self, version: Version) -> bool:
        """Return True if ``version`` satisfies every range in the set."""
        return all(spec.matches(version) for spec in self.ranges)

    def filter(self, versions: Iterable[Union[str, Version]]) -> Iterator[Version]:
        """Yield the versions that satisfy every range, in input order."""
        for version in versions:
            version = coerce_version(version)
            if self.matches(version):
                yield version

    def __contains__(self, version: Union[str, Version]) -> bool:
        return self.matches(coerce_version(version))

    def __iter__(self) -> Iterator[Range]:
        return iter(self.ranges)

    def __len__(self) -> int:
        return len(self.ranges)

    def to_string(self) -> str:
        return ",".join(spec.to_string() for spec in self.ranges)

    def __str__(self) -> str:
        return self.to_string()


def satisfies(version: Union[str, Version], constraint: Union[str, RangeSet]) -> bool:
    """Check whether a version satisfies a comma-separated constraint.

    Args:
        version: Version string or Version object
        constraint: Constraint string (e.g. ">=1.0,<2.0") or RangeSet

    Returns:
        True if the version matches every range in the constraint

    Raises:
        VersionParseError: If the version or constraint is malformed

    Examples:
        >>> satisfies("1.4.0", ">=1.0, <2.0, !=1.5")
        True
        >>> satisfies("1.5.0", ">=1.0, <2.0, !=1.5")
        False
        >>> satisfies("999.999.999", "")
        True
    """
    range_set = RangeSet.parse(constraint) if isinstance(constraint, str) else constraint
    return range_set.matches(coerce_version(version))
