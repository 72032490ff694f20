"""Shared pytest fixtures."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

if TYPE_CHECKING:
    from pathlib import Path


PACKAGE_JSON = """\
{
  "name": "test-project",
  "version": "1.2.3",
  "scripts": {
    "build": "tsc"
  },
  "devDependencies": {
    "typescript": "^5.0.0"
  }
}
"""

PYPROJECT_TOML = """\
[project]
name = "test-project"
version = "1.0.0"
description = "A test project"

[tool.release-bump]
manifest = "pyproject.toml"
"""

SAMPLE_CHANGELOG = """\
# Changelog

All notable changes to this project are documented here.

## [1.2.3] - 01-03-2024

* fixed the widget

## [1.2.2] - 15-02-2024

* first fix
"""


@pytest.fixture
def node_project(tmp_path: Path) -> Path:
    """Project directory with a package.json manifest."""
    (tmp_path / "package.json").write_text(PACKAGE_JSON)
    return tmp_path


@pytest.fixture
def python_project(tmp_path: Path) -> Path:
    """Project directory with a pyproject.toml manifest."""
    (tmp_path / "pyproject.toml").write_text(PYPROJECT_TOML)
    return tmp_path


@pytest.fixture
def sample_changelog() -> str:
    """Changelog with a preamble and two entries."""
    return SAMPLE_CHANGELOG


@pytest.fixture(autouse=True)
def _no_github_output(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep tests from writing to a real GITHUB_OUTPUT file."""
    monkeypatch.delenv("GITHUB_OUTPUT", raising=False)
