"""Tests for reading and writing manifest versions."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from release_bump.exceptions import ProjectError, VersionNotFoundError
from release_bump.project.manifest import (
    find_manifest,
    get_manifest_version,
    update_manifest_version,
)

if TYPE_CHECKING:
    from pathlib import Path


class TestFindManifest:
    """Tests for find_manifest()."""

    def test_prefers_package_json(self, node_project: Path):
        (node_project / "pyproject.toml").write_text('[project]\nversion = "9.9.9"\n')
        assert find_manifest(node_project).name == "package.json"

    def test_falls_back_to_pyproject(self, python_project: Path):
        assert find_manifest(python_project).name == "pyproject.toml"

    def test_file_path_returned(self, node_project: Path):
        path = node_project / "package.json"
        assert find_manifest(path) == path

    def test_missing_raises(self, tmp_path: Path):
        with pytest.raises(ProjectError):
            find_manifest(tmp_path)

        with pytest.raises(ProjectError):
            find_manifest(tmp_path / "package.json")


class TestGetManifestVersion:
    """Tests for get_manifest_version()."""

    def test_package_json(self, node_project: Path):
        assert get_manifest_version(node_project) == "1.2.3"

    def test_pyproject(self, python_project: Path):
        assert get_manifest_version(python_project) == "1.0.0"

    def test_poetry(self, tmp_path: Path):
        (tmp_path / "pyproject.toml").write_text(
            '[tool.poetry]\nname = "test"\nversion = "0.3.0"\n'
        )
        assert get_manifest_version(tmp_path) == "0.3.0"

    def test_missing_version(self, tmp_path: Path):
        (tmp_path / "package.json").write_text('{"name": "x"}')

        with pytest.raises(VersionNotFoundError):
            get_manifest_version(tmp_path)

    def test_invalid_json(self, tmp_path: Path):
        (tmp_path / "package.json").write_text("{not json")

        with pytest.raises(ProjectError):
            get_manifest_version(tmp_path)


class TestUpdateManifestVersion:
    """Tests for update_manifest_version()."""

    def test_package_json_rest_unchanged(self, node_project: Path):
        """Only the version value changes; formatting is untouched."""
        path = node_project / "package.json"
        original = path.read_text()

        update_manifest_version(node_project, "1.3.0")

        updated = path.read_text()
        assert updated == original.replace('"version": "1.2.3"', '"version": "1.3.0"')
        assert get_manifest_version(node_project) == "1.3.0"

    def test_pyproject(self, python_project: Path):
        path = python_project / "pyproject.toml"
        original = path.read_text()

        update_manifest_version(path, "2.0.0")

        assert path.read_text() == original.replace('version = "1.0.0"', 'version = "2.0.0"')

    def test_pyproject_only_project_section(self, tmp_path: Path):
        """A version key in another table is not touched."""
        path = tmp_path / "pyproject.toml"
        path.write_text(
            '[tool.other]\nversion = "5.5.5"\n\n[project]\nname = "x"\nversion = "1.0.0"\n'
        )

        update_manifest_version(path, "1.0.1")

        content = path.read_text()
        assert 'version = "5.5.5"' in content
        assert 'version = "1.0.1"' in content

    def test_poetry(self, tmp_path: Path):
        path = tmp_path / "pyproject.toml"
        path.write_text('[tool.poetry]\nname = "test"\nversion = "0.3.0"\n')

        update_manifest_version(path, "0.4.0")
        assert get_manifest_version(path) == "0.4.0"

    def test_same_version_raises(self, node_project: Path):
        with pytest.raises(ProjectError, match="already"):
            update_manifest_version(node_project, "1.2.3")

    def test_missing_version_raises(self, tmp_path: Path):
        (tmp_path / "package.json").write_text('{"name": "x"}')

        with pytest.raises(VersionNotFoundError):
            update_manifest_version(tmp_path, "1.0.0")

    def test_prerelease_suffix(self, tmp_path: Path):
        (tmp_path / "package.json").write_text('{"version": "1.0.0-beta.1"}\n')

        update_manifest_version(tmp_path, "1.0.1-beta.1")
        assert get_manifest_version(tmp_path) == "1.0.1-beta.1"

    def test_nested_version_before_top_level(self, tmp_path: Path):
        """A nested "version" key earlier in the file is left alone."""
        path = tmp_path / "package.json"
        original = (
            '{"name": "x", "engines": {"node": ">=18"}, '
            '"contributes": {"configuration": {"title": "X", "version": "2"}}, '
            '"version": "1.2.3"}\n'
        )
        path.write_text(original)

        update_manifest_version(tmp_path, "1.2.4")

        assert path.read_text() == original.replace('"1.2.3"', '"1.2.4"')
        assert '"version": "2"' in path.read_text()

    def test_version_string_as_value_ignored(self, tmp_path: Path):
        """Strings containing braces or the word version do not confuse the scan."""
        path = tmp_path / "package.json"
        path.write_text(
            '{\n  "description": "version {1} [beta] \\"quoted\\"",\n'
            '  "keywords": ["version"],\n  "version": "0.1.0"\n}\n'
        )

        update_manifest_version(path, "0.2.0")

        assert get_manifest_version(path) == "0.2.0"
        assert '"keywords": ["version"]' in path.read_text()
