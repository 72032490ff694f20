"""Semantic version grammar and increment rules.

Versions follow semver.org 2.0.0: ``MAJOR.MINOR.PATCH[-PRERELEASE][+BUILD]``.
Incrementing only touches the numeric core; any prerelease or build
suffix is carried over verbatim.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, replace
from enum import Enum
from functools import total_ordering

from release_bump.exceptions import InvalidSemVerError, UnsupportedChangeTypeError

logger = logging.getLogger(__name__)

_NUMERIC = r"0|[1-9]\d*"
_PRERELEASE_ID = r"(?:0|[1-9]\d*|\d*[a-zA-Z-][0-9a-zA-Z-]*)"

SEMVER_PATTERN = re.compile(
    rf"^(?P<major>{_NUMERIC})\.(?P<minor>{_NUMERIC})\.(?P<patch>{_NUMERIC})"
    rf"(?:-(?P<prerelease>{_PRERELEASE_ID}(?:\.{_PRERELEASE_ID})*))?"
    r"(?:\+(?P<build>[0-9a-zA-Z-]+(?:\.[0-9a-zA-Z-]+)*))?\Z"
)

CORE_TRIPLE_PATTERN = re.compile(r"^(\d+)\.(\d+)\.(\d+)")


class ChangeType(str, Enum):
    """Nature of a change, ordered by precedence."""

    MAJOR = "major"
    MINOR = "minor"
    PATCH = "patch"
    UNKNOWN = "unknown"

    def __str__(self) -> str:
        return self.value


def validate(text: object) -> bool:
    """Return True if text is a strictly valid semantic version."""
    if not isinstance(text, str):
        return False
    return SEMVER_PATTERN.match(text) is not None


def core_triple(text: str) -> tuple[str, str, str]:
    """Extract the leading MAJOR.MINOR.PATCH of text as strings.

    Anything after the triple (prerelease, build) is left out.

    Raises:
        InvalidSemVerError: If text does not start with a numeric triple
    """
    match = CORE_TRIPLE_PATTERN.match(text) if isinstance(text, str) else None
    if match is None:
        raise InvalidSemVerError(text)
    major, minor, patch = match.groups()
    return major, minor, patch


def _bump_triple(
    major: int, minor: int, patch: int, change_type: ChangeType
) -> tuple[int, int, int]:
    if change_type is ChangeType.MAJOR:
        return major + 1, 0, 0
    if change_type is ChangeType.MINOR:
        return major, minor + 1, 0
    if change_type is ChangeType.PATCH:
        return major, minor, patch + 1
    raise UnsupportedChangeTypeError(change_type)


def increment(version: str, change_type: ChangeType) -> str:
    """Compute the next version for a change.

    Args:
        version: Current version, must satisfy validate()
        change_type: MAJOR, MINOR or PATCH

    Returns:
        The new version text, suffixes preserved

    Raises:
        InvalidSemVerError: If version is not a valid semantic version
        UnsupportedChangeTypeError: If change_type is UNKNOWN or not a ChangeType
    """
    if not validate(version):
        raise InvalidSemVerError(version)

    major, minor, patch = (int(part) for part in core_triple(version))
    new_major, new_minor, new_patch = _bump_triple(major, minor, patch, change_type)

    old_core = f"{major}.{minor}.{patch}"
    new_version = f"{new_major}.{new_minor}.{new_patch}" + version[len(old_core) :]
    logger.debug("Incremented %s (%s) -> %s", version, change_type, new_version)
    return new_version


@total_ordering
@dataclass(frozen=True)
class Version:
    """Parsed semantic version.

    Build metadata is kept for rendering but ignored when comparing.
    """

    major: int
    minor: int
    patch: int
    prerelease: str | None = None
    build: str | None = None

    @classmethod
    def parse(cls, text: str) -> Version:
        """Parse version text.

        Raises:
            InvalidSemVerError: If text is not a valid semantic version
        """
        match = SEMVER_PATTERN.match(text) if isinstance(text, str) else None
        if match is None:
            raise InvalidSemVerError(text)
        return cls(
            major=int(match["major"]),
            minor=int(match["minor"]),
            patch=int(match["patch"]),
            prerelease=match["prerelease"],
            build=match["build"],
        )

    def __str__(self) -> str:
        text = f"{self.major}.{self.minor}.{self.patch}"
        if self.prerelease:
            text += f"-{self.prerelease}"
        if self.build:
            text += f"+{self.build}"
        return text

    @property
    def core(self) -> tuple[int, int, int]:
        return self.major, self.minor, self.patch

    def bump(self, change_type: ChangeType) -> Version:
        """Return a new Version incremented for change_type."""
        major, minor, patch = _bump_triple(self.major, self.minor, self.patch, change_type)
        return replace(self, major=major, minor=minor, patch=patch)

    def _sort_key(self) -> tuple:
        # A release sorts after any of its prereleases
        if self.prerelease is None:
            return (*self.core, 1, ())
        identifiers = tuple(
            (0, int(part), "") if part.isdigit() else (1, 0, part)
            for part in self.prerelease.split(".")
        )
        return (*self.core, 0, identifiers)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self._sort_key() < other._sort_key()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self._sort_key() == other._sort_key()

    def __hash__(self) -> int:
        return hash(self._sort_key())


def parse_version(text: str) -> Version:
    """Parse a version string. Alias for Version.parse."""
    return Version.parse(text)
