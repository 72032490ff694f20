"""Project manifest handling for release-bump."""

from __future__ import annotations

from release_bump.project.manifest import (
    find_manifest,
    get_manifest_version,
    update_manifest_version,
)

__all__ = [
    "find_manifest",
    "get_manifest_version",
    "update_manifest_version",
]
