"""release-bump: semantic version bumps and changelog entries from PR titles and labels."""

from __future__ import annotations

from release_bump.core import (
    ChangeType,
    Version,
    classify_from_labels,
    classify_from_text,
    increment,
    insert_entry,
    sanitize_message,
    validate,
)

__version__ = "0.1.0"

__all__ = [
    "ChangeType",
    "Version",
    "__version__",
    "classify_from_labels",
    "classify_from_text",
    "increment",
    "insert_entry",
    "sanitize_message",
    "validate",
]
