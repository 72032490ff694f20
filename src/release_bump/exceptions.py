"""Exception hierarchy for release-bump.

Every error raised by the package derives from ReleaseBumpError so the
CLI can catch a single type and turn it into an exit code.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable


class ReleaseBumpError(Exception):
    """Base class for all release-bump errors."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


# Version / classification errors


class InvalidSemVerError(ReleaseBumpError):
    """Version text does not match MAJOR.MINOR.PATCH[-PRERELEASE][+BUILD]."""

    def __init__(self, version: object) -> None:
        super().__init__(f"Invalid semantic version: {version!r}")
        self.version = version


class UnknownChangeTypeError(ReleaseBumpError):
    """Classification produced UNKNOWN where a concrete category was needed."""

    def __init__(self, triggers: Iterable[str]) -> None:
        self.triggers = tuple(triggers)
        super().__init__(
            "Could not determine the change type. Use one of: " + ", ".join(self.triggers)
        )


class UnsupportedChangeTypeError(ReleaseBumpError):
    """Increment was called with a change type it cannot apply."""

    def __init__(self, change_type: object) -> None:
        super().__init__(f"Cannot increment a version with change type {change_type!r}")
        self.change_type = change_type


# Changelog errors


class MalformedDocumentError(ReleaseBumpError):
    """Changelog has no entry heading where one is required."""


# Configuration errors


class ConfigError(ReleaseBumpError):
    """Base class for configuration errors."""


class ConfigNotFoundError(ConfigError):
    """Configuration file could not be located."""


class ConfigValidationError(ConfigError):
    """Configuration values are invalid or inconsistent."""


# Project errors


class ProjectError(ReleaseBumpError):
    """Manifest could not be read or written."""


class VersionNotFoundError(ProjectError):
    """Manifest has no version field."""
