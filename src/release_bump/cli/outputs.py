"""Step outputs for the embedding automation.

When ``GITHUB_OUTPUT`` names a file, each output is appended to it as a
``key=value`` line.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

logger = logging.getLogger(__name__)


def write_outputs(**outputs: str) -> Path | None:
    """Append outputs to the file named by GITHUB_OUTPUT, if set."""
    target = os.environ.get("GITHUB_OUTPUT")
    if not target:
        return None

    path = Path(target)
    with path.open("a", encoding="utf-8") as f:
        for key, value in outputs.items():
            f.write(f"{key}={value}\n")

    logger.debug("Wrote outputs %s to %s", sorted(outputs), path)
    return path
