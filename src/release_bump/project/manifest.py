"""Manifest version manipulation.

Reads and rewrites the ``version`` field of a package.json or
pyproject.toml. Only the value of the top-level field is rewritten (a
depth-aware scan for JSON, a section-scoped regex for TOML) so the rest
of the file (formatting, key order, comments) is left untouched.
"""

from __future__ import annotations

import json
import logging
import re
import tomllib
from pathlib import Path

from release_bump.exceptions import ProjectError, VersionNotFoundError

logger = logging.getLogger(__name__)

MANIFEST_NAMES = ("package.json", "pyproject.toml")

_TOML_SECTIONS = (r"\[project\]", r"\[tool\.poetry\]")


def find_manifest(path: Path) -> Path:
    """Resolve path to a manifest file.

    A directory is searched for package.json, then pyproject.toml.

    Raises:
        ProjectError: If no manifest exists
    """
    if path.is_dir():
        for name in MANIFEST_NAMES:
            candidate = path / name
            if candidate.is_file():
                return candidate
        raise ProjectError(f"No manifest ({', '.join(MANIFEST_NAMES)}) found in {path}")

    if not path.is_file():
        raise ProjectError(f"Manifest not found: {path}")
    return path


def get_manifest_version(path: Path) -> str:
    """Get the version declared in a manifest.

    Raises:
        ProjectError: If the manifest is missing or unreadable
        VersionNotFoundError: If the manifest declares no version
    """
    manifest = find_manifest(path)
    return _read_version(manifest, manifest.read_text(encoding="utf-8"))


def _get_json_version(manifest: Path, content: str) -> str:
    try:
        data = json.loads(content)
    except json.JSONDecodeError as e:
        raise ProjectError(f"Invalid JSON in {manifest}: {e}") from e

    version = data.get("version") if isinstance(data, dict) else None
    if not isinstance(version, str):
        raise VersionNotFoundError(f"Could not find a version field in {manifest}")
    return version


def _get_toml_version(manifest: Path, content: str) -> str:
    try:
        data = tomllib.loads(content)
    except tomllib.TOMLDecodeError as e:
        raise ProjectError(f"Invalid TOML in {manifest}: {e}") from e

    version = data.get("project", {}).get("version")
    if version is None:
        version = data.get("tool", {}).get("poetry", {}).get("version")
    if not isinstance(version, str):
        raise VersionNotFoundError(
            f"Could not find version in {manifest}. "
            "Expected [project].version or [tool.poetry].version."
        )
    return version


def update_manifest_version(path: Path, new_version: str) -> Path:
    """Write new_version into the manifest's version field.

    Returns:
        Path to the updated manifest

    Raises:
        VersionNotFoundError: If there is no version field to replace
        ProjectError: If the version is unchanged or the rewrite failed
    """
    manifest = find_manifest(path)
    content = manifest.read_text(encoding="utf-8")

    if _read_version(manifest, content) == new_version:
        raise ProjectError(f"Version in {manifest} is already {new_version}")

    if manifest.suffix == ".json":
        new_content = _replace_json_version(manifest, content, new_version)
    else:
        new_content = _replace_toml_version(manifest, content, new_version)

    if _read_version(manifest, new_content) != new_version:
        raise ProjectError(f"Version in {manifest} was not updated to {new_version}")

    manifest.write_text(new_content, encoding="utf-8")
    logger.info("Updated %s to version %s", manifest, new_version)
    return manifest


def _read_version(manifest: Path, content: str) -> str:
    if manifest.suffix == ".json":
        return _get_json_version(manifest, content)
    return _get_toml_version(manifest, content)


def _replace_json_version(manifest: Path, content: str, new_version: str) -> str:
    span = _find_top_level_value(content, "version")
    if span is None:
        raise VersionNotFoundError(f"Could not find a version field to update in {manifest}")
    start, end = span
    return content[:start] + json.dumps(new_version) + content[end:]


def _find_top_level_value(content: str, key: str) -> tuple[int, int] | None:
    """Return the span of the string value of a top-level JSON key.

    Nested objects are skipped by tracking bracket depth outside string
    literals, so a ``"version"`` inside e.g. ``"engines"`` is never matched.
    """
    depth = 0
    i = 0
    while i < len(content):
        char = content[i]
        if char == '"':
            end = _string_end(content, i)
            if depth == 1 and json.loads(content[i:end]) == key:
                colon = _skip_whitespace(content, end)
                if colon < len(content) and content[colon] == ":":
                    value = _skip_whitespace(content, colon + 1)
                    if value < len(content) and content[value] == '"':
                        return value, _string_end(content, value)
            i = end
            continue
        if char in "{[":
            depth += 1
        elif char in "}]":
            depth -= 1
        i += 1
    return None


def _string_end(content: str, start: int) -> int:
    """Index just past the closing quote of the string literal at start."""
    i = start + 1
    while i < len(content):
        if content[i] == "\\":
            i += 2
            continue
        if content[i] == '"':
            return i + 1
        i += 1
    raise ProjectError("Unterminated string in JSON manifest")


def _skip_whitespace(content: str, i: int) -> int:
    while i < len(content) and content[i] in " \t\r\n":
        i += 1
    return i


def _replace_toml_version(manifest: Path, content: str, new_version: str) -> str:
    def replace_in_section(match: re.Match[str]) -> str:
        return re.sub(
            r'^(version\s*=\s*)["\'][^"\']+["\']',
            lambda m: f'{m.group(1)}"{new_version}"',
            match.group(0),
            count=1,
            flags=re.MULTILINE,
        )

    for section in _TOML_SECTIONS:
        section_pattern = rf"^{section}.*?(?=^\[|\Z)"
        new_content = re.sub(
            section_pattern,
            replace_in_section,
            content,
            count=1,
            flags=re.MULTILINE | re.DOTALL,
        )
        if new_content != content:
            return new_content

    raise VersionNotFoundError(
        f"Could not find version to update in {manifest}. "
        "Expected [project].version or [tool.poetry].version."
    )
