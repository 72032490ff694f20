"""Core business logic for release-bump.

This module contains the fundamental building blocks:
- Version validation and increment (semver.org 2.0.0)
- Change type classification from titles or labels
- Changelog entry formatting and insertion
"""

from __future__ import annotations

from release_bump.core.changelog import (
    format_date,
    format_entry,
    insert_entry,
    sanitize_message,
)
from release_bump.core.classify import (
    DEFAULT_PATTERNS,
    TriggerPatterns,
    classify,
    classify_from_labels,
    classify_from_text,
    require_change_type,
)
from release_bump.core.version import (
    ChangeType,
    Version,
    core_triple,
    increment,
    parse_version,
    validate,
)

__all__ = [
    # Classification
    "DEFAULT_PATTERNS",
    # Version
    "ChangeType",
    "TriggerPatterns",
    "Version",
    "classify",
    "classify_from_labels",
    "classify_from_text",
    "core_triple",
    # Changelog
    "format_date",
    "format_entry",
    "increment",
    "insert_entry",
    "parse_version",
    "require_change_type",
    "sanitize_message",
    "validate",
]
