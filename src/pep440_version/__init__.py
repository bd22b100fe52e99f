# SPDX-License-Identifier: MIT
"""PEP 440 version parsing, comparison and range matching.

This package answers "does version V satisfy constraint C?" for Python
packaging tools. It is a pure library over strings: no I/O, no global
mutable state.

Example:
    >>> from pep440_version import Version, RangeSet, compare_versions
    >>>
    >>> version = Version.parse("1.0-alpha.1+build.456")
    >>> str(version)
    '1.0a1+build.456'
    >>> version == Version.parse("1.0.0a1")
    True
    >>>
    >>> RangeSet.parse(">=1.0, <2.0, !=1.5").matches(Version.parse("1.4.0"))
    True
    >>>
    >>> compare_versions("1.0.dev1", "1.0a1")
    -1
"""

__version__ = "0.1.0"

from .errors import VersionParseError
from .grammar import VERSION_PATTERN
from .version import (
    Version,
    parse_version,
    is_valid_version,
    normalize_pre_label,
)
from .compare import (
    compare_versions,
    version_key,
    pre_release_rank,
)
from .specifier import (
    Operator,
    Range,
    RangeSet,
    compatible_upper_bound,
    satisfies,
)

__all__ = [
    # Errors
    "VersionParseError",
    # Version parsing
    "Version",
    "parse_version",
    "is_valid_version",
    "normalize_pre_label",
    "VERSION_PATTERN",
    # Version comparison
    "compare_versions",
    "version_key",
    "pre_release_rank",
    # Ranges
    "Operator",
    "Range",
    "RangeSet",
    "compatible_upper_bound",
    "satisfies",
]
