"""Tests for change type classification."""

from __future__ import annotations

import pytest

from release_bump.config.models import LabelsConfig, PatternsConfig, ReleaseBumpConfig
from release_bump.core.classify import (
    TriggerPatterns,
    classify,
    classify_from_labels,
    classify_from_text,
    recognized_triggers,
    require_change_type,
)
from release_bump.core.version import ChangeType
from release_bump.exceptions import UnknownChangeTypeError

LABELS = ("release:major", "release:minor", "release:patch")


class TestClassifyFromText:
    """Tests for classify_from_text()."""

    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("[MAJOR] fix crash", ChangeType.MAJOR),
            ("#minor tweak", ChangeType.MINOR),
            ("fix typo #patch", ChangeType.PATCH),
            ("[ minor ] spaced brackets", ChangeType.MINOR),
            ("[Patch] mixed case", ChangeType.PATCH),
            ("no tag here", ChangeType.UNKNOWN),
        ],
    )
    def test_default_patterns(self, text: str, expected: ChangeType):
        assert classify_from_text(text) == expected

    def test_major_wins_over_minor(self):
        """MAJOR is checked before MINOR regardless of position."""
        assert classify_from_text("[MAJOR][minor] x") == ChangeType.MAJOR
        assert classify_from_text("[minor] then [major]") == ChangeType.MAJOR

    def test_minor_wins_over_patch(self):
        assert classify_from_text("#patch and #minor") == ChangeType.MINOR

    @pytest.mark.parametrize("text", [None, "", 42])
    def test_unusable_input_is_unknown(self, text: object):
        """Missing or non-string input is UNKNOWN, not an error."""
        assert classify_from_text(text) == ChangeType.UNKNOWN

    def test_hash_tag_needs_word_boundary(self):
        assert classify_from_text("#majority rules") == ChangeType.UNKNOWN

    def test_repeated_calls_are_stable(self):
        """Matching keeps no state between calls."""
        results = [classify_from_text("#minor change") for _ in range(5)]
        assert results == [ChangeType.MINOR] * 5

    def test_custom_patterns(self):
        patterns = TriggerPatterns(major=r"BREAKING", minor=r"^feat", patch=r"^fix")

        assert classify_from_text("feat: add x", patterns) == ChangeType.MINOR
        assert classify_from_text("fix: y", patterns) == ChangeType.PATCH
        assert classify_from_text("feat: breaking z", patterns) == ChangeType.MAJOR
        assert classify_from_text("[major] ignored", patterns) == ChangeType.UNKNOWN


class TestClassifyFromLabels:
    """Tests for classify_from_labels()."""

    def test_patch_label(self):
        assert classify_from_labels({"release:patch"}, *LABELS) == ChangeType.PATCH

    def test_empty_is_unknown(self):
        assert classify_from_labels(set(), *LABELS) == ChangeType.UNKNOWN

    def test_unrelated_labels_are_unknown(self):
        assert classify_from_labels({"bug", "docs"}, *LABELS) == ChangeType.UNKNOWN

    def test_priority(self):
        """MAJOR beats MINOR beats PATCH."""
        labels = {"release:patch", "release:minor", "release:major"}
        assert classify_from_labels(labels, *LABELS) == ChangeType.MAJOR
        assert classify_from_labels(labels - {"release:major"}, *LABELS) == ChangeType.MINOR

    def test_case_sensitive(self):
        assert classify_from_labels({"Release:Patch"}, *LABELS) == ChangeType.UNKNOWN

    def test_accepts_list(self):
        assert classify_from_labels(["bug", "release:minor"], *LABELS) == ChangeType.MINOR


class TestClassify:
    """Tests for classify() dispatch."""

    def test_text_signal(self):
        assert classify("[major] rewrite", ReleaseBumpConfig()) == ChangeType.MAJOR

    def test_label_signal(self):
        config = ReleaseBumpConfig(labels=LabelsConfig(minor="enhancement"))
        assert classify(["enhancement"], config) == ChangeType.MINOR

    def test_none_signal(self):
        assert classify(None, ReleaseBumpConfig()) == ChangeType.UNKNOWN

    def test_configured_patterns(self):
        config = ReleaseBumpConfig(patterns=PatternsConfig(patch=r"\bhotfix\b"))
        assert classify("hotfix for login", config) == ChangeType.PATCH


class TestRequireChangeType:
    """Tests for require_change_type()."""

    def test_passes_through(self):
        assert require_change_type(ChangeType.MINOR, ["x"]) == ChangeType.MINOR

    def test_unknown_raises_with_triggers(self):
        with pytest.raises(UnknownChangeTypeError) as exc_info:
            require_change_type(ChangeType.UNKNOWN, recognized_triggers(ReleaseBumpConfig()))

        assert "[major]" in exc_info.value.triggers
        assert "#patch" in str(exc_info.value)

    def test_label_triggers(self):
        triggers = recognized_triggers(ReleaseBumpConfig(), labels=True)
        assert triggers == LABELS
