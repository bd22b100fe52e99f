# SPDX-License-Identifier: MIT
"""Errors raised while parsing versions and version ranges."""

from __future__ import annotations


class VersionParseError(ValueError):
    """Raised when text does not match the version or range grammar."""

    def __init__(self, value: object, message: str = ""):
        self.input = value
        self.message = message or f"Invalid version: {value!r}"
        super().__init__(self.message)
