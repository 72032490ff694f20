"""Pydantic models for release-bump configuration.

All settings live under ``[tool.release-bump]`` in pyproject.toml and
can be overridden from the command line.
"""

from __future__ import annotations

import re
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator

from release_bump.core.classify import DEFAULT_TEXT_TRIGGERS, TriggerPatterns, tag_pattern


class LabelsConfig(BaseModel):
    """Repository labels mapped to change types."""

    model_config = ConfigDict(extra="forbid")

    major: str = "release:major"
    minor: str = "release:minor"
    patch: str = "release:patch"


class PatternsConfig(BaseModel):
    """Regex triggers searched for in titles (case-insensitive)."""

    model_config = ConfigDict(extra="forbid")

    major: str = tag_pattern("major")
    minor: str = tag_pattern("minor")
    patch: str = tag_pattern("patch")

    @field_validator("major", "minor", "patch")
    @classmethod
    def _must_compile(cls, value: str) -> str:
        try:
            re.compile(value)
        except re.error as e:
            raise ValueError(f"invalid regex {value!r}: {e}") from e
        return value

    @property
    def is_default(self) -> bool:
        return self == PatternsConfig()

    def to_triggers(self) -> TriggerPatterns:
        return TriggerPatterns(major=self.major, minor=self.minor, patch=self.patch)

    def describe(self) -> tuple[str, ...]:
        """Human readable list of triggers for error messages."""
        if self.is_default:
            return DEFAULT_TEXT_TRIGGERS
        return (self.major, self.minor, self.patch)


class ChangelogConfig(BaseModel):
    """Changelog entry settings."""

    model_config = ConfigDict(extra="forbid")

    enabled: bool = False
    path: Path = Path("CHANGELOG.md")
    conventional_only: bool = False
    require_existing: bool = False


class ReleaseBumpConfig(BaseModel):
    """Root configuration."""

    model_config = ConfigDict(extra="forbid")

    manifest: Path = Path("package.json")
    labels: LabelsConfig = Field(default_factory=LabelsConfig)
    patterns: PatternsConfig = Field(default_factory=PatternsConfig)
    changelog: ChangelogConfig = Field(default_factory=ChangelogConfig)

    @property
    def add_changelog_entry(self) -> bool:
        return self.changelog.enabled
