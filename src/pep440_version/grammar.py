# SPDX-License-Identifier: MIT
"""PEP 440 version grammar.

The grammar is split into named rules, one per version component. Each rule
is a plain pattern string with named groups, so it can be compiled and
exercised on its own, and ``VERSION_PATTERN`` stitches them together into the
single anchored pattern used for parsing:

    ["v"] [EPOCH "!"] RELEASE [PRE] [POST] [DEV] ["+" LOCAL]

All rules are matched case-insensitively, against ASCII letters only.
"""

from __future__ import annotations

import re

# Separator allowed between a version component and its label or number
SEPARATOR = r"[-_.]?"

EPOCH_RULE = r"(?:(?P<epoch>[0-9]+)!)"

RELEASE_RULE = r"(?P<release>[0-9]+(?:\.[0-9]+)*)"

PRE_RULE = (
    r"(?:" + SEPARATOR
    + r"(?P<pre_label>alpha|beta|preview|pre|rc|a|b|c)"
    + SEPARATOR
    + r"(?P<pre_number>[0-9]*))"
)

# A bare "-N" is the legacy spelling of ".postN"
POST_RULE = (
    r"(?:-(?P<post_implicit>[0-9]+)"
    r"|" + SEPARATOR
    + r"(?P<post_label>post|rev|r)"
    + SEPARATOR
    + r"(?P<post_number>[0-9]*))"
)

DEV_RULE = (
    r"(?:" + SEPARATOR
    + r"(?P<dev_label>dev)"
    + SEPARATOR
    + r"(?P<dev_number>[0-9]*))"
)

LOCAL_RULE = r"(?P<local>[a-z0-9]+(?:[-_.][a-z0-9]+)*)"

RULES = {
    "epoch": EPOCH_RULE,
    "release": RELEASE_RULE,
    "pre": PRE_RULE,
    "post": POST_RULE,
    "dev": DEV_RULE,
    "local": LOCAL_RULE,
}

# Compiled once at import; re.Pattern objects are immutable and thread-safe.
VERSION_PATTERN = re.compile(
    r"^v?"
    + EPOCH_RULE + r"?"
    + RELEASE_RULE
    + PRE_RULE + r"?"
    + POST_RULE + r"?"
    + DEV_RULE + r"?"
    + r"(?:\+" + LOCAL_RULE + r")?$",
    re.IGNORECASE | re.ASCII,
)


def compile_rule(name: str) -> re.Pattern[str]:
    """Compile a single grammar rule as a standalone, anchored pattern.

    Args:
        name: One of the keys of ``RULES`` ("epoch", "release", "pre",
            "post", "dev", "local")

    Returns:
        A case-insensitive pattern matching exactly that component

    Raises:
        KeyError: If ``name`` is not a known rule

    Examples:
        >>> compile_rule("pre").fullmatch("-beta.2").group("pre_label")
        'beta'
    """
    return re.compile(r"^" + RULES[name] + r"$", re.IGNORECASE | re.ASCII)
