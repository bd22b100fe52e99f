# SPDX-License-Identifier: MIT
"""Version comparison following PEP 440 ordering semantics.

Keys are compared in order, stopping at the first difference:

1. epoch
2. release, with trailing zeros stripped (so 1.0 == 1.0.0)
3. dev: a dev release sorts before the same version without one
4. pre: a pre-release sorts before the same version without one,
   then a < b < rc, then by number
5. post: a post release sorts after the same version without one

which gives dev0 < a0 < b0 < rc0 < release < post0 for a fixed release.
The local segment never takes part in ordering.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Union

if TYPE_CHECKING:
    from .version import Version

# Pre-release label ordering (lower = earlier in release cycle)
_PRERELEASE_RANK = {
    "a": 0,
    "alpha": 0,
    "b": 1,
    "beta": 1,
    "rc": 2,
    "c": 2,
    "pre": 2,
    "preview": 2,
}

# Rank for labels outside the grammar, e.g. on hand-built Version objects
_UNKNOWN_PRERELEASE_RANK = 3

# Marker tuples: (0, ...) sorts before (1, ...) whatever follows
_BEFORE = 0
_AFTER = 1


def pre_release_rank(label: str) -> int:
    """Return the sort rank of a pre-release label.

    Examples:
        >>> pre_release_rank("a"), pre_release_rank("b"), pre_release_rank("rc")
        (0, 1, 2)
        >>> pre_release_rank("zeta")
        3
    """
    return _PRERELEASE_RANK.get(label.lower(), _UNKNOWN_PRERELEASE_RANK)


def normalize_release(release: tuple[int, ...]) -> tuple[int, ...]:
    """Strip trailing zeros from a release sequence.

    Examples:
        >>> normalize_release((1, 0, 0))
        (1,)
        >>> normalize_release((1, 0, 2, 0))
        (1, 0, 2)
    """
    end = len(release)
    while end and release[end - 1] == 0:
        end -= 1
    return tuple(release[:end])


def comparison_key(version: Version) -> tuple:
    """Build the tuple that orders and identifies a version.

    Two versions produce equal keys exactly when their epoch, stripped
    release, pre, post and dev components are equal. The pre-release label
    itself is the last element of the pre key, so hand-built versions with
    distinct labels of the same rank never compare equal.
    """
    if version.dev is None:
        dev_key: tuple = (_AFTER,)
    else:
        dev_key = (_BEFORE, version.dev)

    if version.pre is None:
        pre_key: tuple = (_AFTER,)
    else:
        label, number = version.pre
        pre_key = (_BEFORE, pre_release_rank(label), number, label)

    # Opposite polarity: no post release sorts first
    if version.post is None:
        post_key: tuple = (_BEFORE,)
    else:
        post_key = (_AFTER, version.post)

    return (
        version.epoch,
        normalize_release(version.release),
        dev_key,
        pre_key,
        post_key,
    )


def coerce_version(version: Union[str, Version]) -> Version:
    """Parse ``version`` if it is a string, otherwise return it unchanged."""
    from .version import Version

    return Version.parse(version) if isinstance(version, str) else version


def compare_versions(version1: Union[str, Version], version2: Union[str, Version]) -> int:
    """Compare two versions following PEP 440 ordering.

    Args:
        version1: First version (string or Version object)
        version2: Second version (string or Version object)

    Returns:
        -1 if version1 < version2
        0 if version1 == version2
        1 if version1 > version2

    Raises:
        VersionParseError: If either version string is invalid

    Note:
        The local segment is ignored, so "1.0+abc" compares equal to "1.0".

    Examples:
        >>> compare_versions("1.0", "2.0")
        -1
        >>> compare_versions("1.0", "1.0.0")
        0
        >>> compare_versions("1.0.post1", "1.0")
        1
        >>> compare_versions("1.0.dev0", "1.0a0")
        -1
    """
    key1 = comparison_key(coerce_version(version1))
    key2 = comparison_key(coerce_version(version2))
    if key1 == key2:
        return 0
    return -1 if key1 < key2 else 1


def version_key(version: Union[str, Version]) -> tuple:
    """Return a sort key for a version, suitable for sorting.

    Examples:
        >>> sorted(["1.0", "1.0.post1", "1.0rc1", "1.0.dev1"], key=version_key)
        ['1.0.dev1', '1.0rc1', '1.0', '1.0.post1']
    """
    return comparison_key(coerce_version(version))
