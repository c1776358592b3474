"""Semantic version validation for device firmware metadata."""

from __future__ import annotations

import re

# ASCII classes only; ``\d`` would also accept non-ASCII digits.
_NUMERIC = r"0|[1-9][0-9]*"
_PRERELEASE_ID = rf"(?:{_NUMERIC}|[0-9]*[a-zA-Z-][0-9a-zA-Z-]*)"
_BUILD_ID = r"[0-9a-zA-Z-]+"

_SEMVER_PATTERN = re.compile(
    rf"(?:{_NUMERIC})\.(?:{_NUMERIC})\.(?:{_NUMERIC})"
    rf"(?:-{_PRERELEASE_ID}(?:\.{_PRERELEASE_ID})*)?"
    rf"(?:\+{_BUILD_ID}(?:\.{_BUILD_ID})*)?"
)


def is_valid_firmware_version(version: str) -> bool:
    """Return whether ``version`` is a complete MAJOR.MINOR.PATCH[-PRE][+BUILD] string."""
    return _SEMVER_PATTERN.fullmatch(version) is not None
