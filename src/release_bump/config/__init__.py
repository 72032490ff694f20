"""Configuration management for release-bump."""

from __future__ import annotations

from release_bump.config.loader import load_config, validate_changelog_request
from release_bump.config.models import (
    ChangelogConfig,
    LabelsConfig,
    PatternsConfig,
    ReleaseBumpConfig,
)

__all__ = [
    "ChangelogConfig",
    "LabelsConfig",
    "PatternsConfig",
    "ReleaseBumpConfig",
    "load_config",
    "validate_changelog_request",
]
