"""Parsing and comparison of release version strings such as ``v0.216``."""

from __future__ import annotations

import re
from dataclasses import dataclass

_VERSION_RE = re.compile(r"v(\d+)[.](\d+)", re.ASCII)


class VersionParseError(ValueError):
    """Raised when a version string cannot be parsed."""


@dataclass(frozen=True)
class ParsedVersion:
    major_version: int
    minor_version: int

    def greater_than(self, other: ParsedVersion) -> bool:
        if self == other:
            return False
        return not self.less_than(other)

    def less_than(self, other: ParsedVersion) -> bool:
        if self.major_version != other.major_version:
            return self.major_version < other.major_version
        return self.minor_version < other.minor_version

    def decrement(self) -> ParsedVersion:
        """Return the previous minor version."""
        if self.minor_version > 1:
            return ParsedVersion(self.major_version, self.minor_version - 1)
        raise ValueError("cannot decrement() when MinorVersion == 0")

    def __str__(self) -> str:
        return f"v{self.major_version}.{self.minor_version}"


def parse_version_string(version_string: str) -> ParsedVersion:
    """Parse a string containing exactly one ``vMAJOR.MINOR`` version."""
    matches = _VERSION_RE.findall(version_string)
    if len(matches) != 1:
        raise VersionParseError(f"failed to parse version={version_string!r} (matches={matches!r})")
    major, minor = matches[0]
    return ParsedVersion(int(major), int(minor))