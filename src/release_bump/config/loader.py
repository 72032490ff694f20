"""Configuration loading from pyproject.toml."""

from __future__ import annotations

import logging
import tomllib
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from release_bump.config.models import ReleaseBumpConfig
from release_bump.exceptions import ConfigNotFoundError, ConfigValidationError

logger = logging.getLogger(__name__)

TOOL_SECTION = "release-bump"


def find_pyproject_toml(start_path: Path | None = None) -> Path:
    """Find pyproject.toml by walking up from start_path.

    Raises:
        ConfigNotFoundError: If no pyproject.toml is found
    """
    current = (start_path or Path.cwd()).resolve()

    while True:
        candidate = current / "pyproject.toml"
        if candidate.is_file():
            return candidate
        if current.parent == current:
            break
        current = current.parent

    raise ConfigNotFoundError(f"No pyproject.toml found from {start_path or Path.cwd()}")


def load_pyproject_toml(path: Path) -> dict[str, Any]:
    """Parse a pyproject.toml file.

    Raises:
        ConfigNotFoundError: If the file does not exist
        ConfigValidationError: If the file is not valid TOML
    """
    if not path.is_file():
        raise ConfigNotFoundError(f"Config file not found: {path}")

    try:
        with path.open("rb") as f:
            return tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigValidationError(f"Invalid TOML in {path}: {e}") from e


def extract_release_bump_config(pyproject: dict[str, Any]) -> dict[str, Any]:
    """Return the [tool.release-bump] table, or an empty dict."""
    return pyproject.get("tool", {}).get(TOOL_SECTION, {})


def load_config(path: Path | None = None) -> ReleaseBumpConfig:
    """Load configuration for the project at path.

    Defaults are returned when there is no pyproject.toml or it has no
    [tool.release-bump] section.

    Raises:
        ConfigValidationError: If the section contains invalid values
    """
    try:
        pyproject_path = find_pyproject_toml(path)
    except ConfigNotFoundError:
        logger.info("No pyproject.toml found, using default configuration")
        return ReleaseBumpConfig()

    raw = extract_release_bump_config(load_pyproject_toml(pyproject_path))
    try:
        config = ReleaseBumpConfig.model_validate(raw)
    except ValidationError as e:
        raise ConfigValidationError(f"Invalid [tool.{TOOL_SECTION}] in {pyproject_path}:\n{e}") from e

    logger.info("Loaded configuration from %s", pyproject_path)
    return config


def validate_changelog_request(config: ReleaseBumpConfig, message: str | None) -> None:
    """Check the inputs needed to add a changelog entry are present.

    Raises:
        ConfigValidationError: If an entry is requested without a path or message
    """
    if not config.add_changelog_entry:
        return
    if not str(config.changelog.path).strip() or str(config.changelog.path) == ".":
        raise ConfigValidationError("A changelog path is required to add a changelog entry")
    if not message or not message.strip():
        raise ConfigValidationError("A changelog message is required to add a changelog entry")
