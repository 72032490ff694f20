"""Change type classification.

Two strategies share the same precedence rule (MAJOR, then MINOR, then
PATCH) and the same UNKNOWN fallback:

- inline tags in a commit or pull-request title (``#minor``, ``[MAJOR]``)
- repository labels compared by exact string equality
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from release_bump.core.version import ChangeType
from release_bump.exceptions import UnknownChangeTypeError

if TYPE_CHECKING:
    from release_bump.config.models import ReleaseBumpConfig

logger = logging.getLogger(__name__)

_PRECEDENCE = (ChangeType.MAJOR, ChangeType.MINOR, ChangeType.PATCH)


def tag_pattern(name: str) -> str:
    """Build the default trigger regex for a tag name.

    Matches ``#name`` and ``[name]``, with optional whitespace inside the
    brackets.
    """
    escaped = re.escape(name)
    return rf"(?:#{escaped}\b|\[\s*{escaped}\s*\])"


@dataclass(frozen=True)
class TriggerPatterns:
    """Text triggers, one regex per concrete change type.

    Patterns are compiled case-insensitive and only ever used through
    ``re.search``, so no match position is carried between calls.
    """

    major: str = tag_pattern("major")
    minor: str = tag_pattern("minor")
    patch: str = tag_pattern("patch")
    _compiled: dict[ChangeType, re.Pattern[str]] = field(
        init=False, repr=False, compare=False, hash=False
    )

    def __post_init__(self) -> None:
        compiled = {
            ChangeType.MAJOR: re.compile(self.major, re.IGNORECASE),
            ChangeType.MINOR: re.compile(self.minor, re.IGNORECASE),
            ChangeType.PATCH: re.compile(self.patch, re.IGNORECASE),
        }
        object.__setattr__(self, "_compiled", compiled)

    def matcher(self, change_type: ChangeType) -> re.Pattern[str]:
        return self._compiled[change_type]


DEFAULT_PATTERNS = TriggerPatterns()

DEFAULT_TEXT_TRIGGERS = ("[major]", "[minor]", "[patch]", "#major", "#minor", "#patch")


def classify_from_text(text: object, patterns: TriggerPatterns = DEFAULT_PATTERNS) -> ChangeType:
    """Classify a change from free text.

    Args:
        text: Commit or pull-request title. None, empty or non-string
            input yields UNKNOWN.
        patterns: Trigger patterns to evaluate

    Returns:
        The first matching change type in precedence order, or UNKNOWN
    """
    if not isinstance(text, str) or not text:
        return ChangeType.UNKNOWN

    for change_type in _PRECEDENCE:
        if patterns.matcher(change_type).search(text):
            logger.debug("Text %r classified as %s", text, change_type)
            return change_type

    logger.debug("No trigger found in %r", text)
    return ChangeType.UNKNOWN


def classify_from_labels(
    label_names: Iterable[str],
    major_label: str,
    minor_label: str,
    patch_label: str,
) -> ChangeType:
    """Classify a change from its label names.

    Labels are compared case-sensitively. Returns UNKNOWN when none of
    the configured labels are present.
    """
    present = set(label_names)
    candidates = (
        (ChangeType.MAJOR, major_label),
        (ChangeType.MINOR, minor_label),
        (ChangeType.PATCH, patch_label),
    )
    for change_type, label in candidates:
        if label in present:
            logger.debug("Label %r classified as %s", label, change_type)
            return change_type

    return ChangeType.UNKNOWN


def classify(signal: str | Iterable[str] | None, config: ReleaseBumpConfig) -> ChangeType:
    """Classify a change signal using the strategy that fits its shape.

    A string is treated as title text; any other iterable as label names.
    """
    if signal is None or isinstance(signal, str):
        return classify_from_text(signal, config.patterns.to_triggers())

    labels = config.labels
    return classify_from_labels(signal, labels.major, labels.minor, labels.patch)


def recognized_triggers(config: ReleaseBumpConfig, *, labels: bool = False) -> tuple[str, ...]:
    """List the triggers a user can apply to get a concrete classification."""
    if labels:
        return (config.labels.major, config.labels.minor, config.labels.patch)
    return config.patterns.describe()


def require_change_type(change_type: ChangeType, triggers: Iterable[str]) -> ChangeType:
    """Return change_type, raising if it is UNKNOWN.

    Raises:
        UnknownChangeTypeError: Carrying the recognised triggers
    """
    if change_type is ChangeType.UNKNOWN:
        raise UnknownChangeTypeError(triggers)
    return change_type
