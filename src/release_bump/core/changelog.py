"""Changelog entry formatting and insertion.

Entries look like::

    ## [1.2.0] - 05-03-2024

    * added the thing

New entries are spliced in front of the first existing entry heading so
the newest release is listed first and any preamble (title, intro text)
stays where it is. The writer never re-sorts existing entries.
"""

from __future__ import annotations

import logging
import re
from datetime import UTC, date, datetime

from release_bump.exceptions import MalformedDocumentError

logger = logging.getLogger(__name__)

ENTRY_HEADING_PATTERN = re.compile(r"^## \[\d+\.\d+\.\d+", re.MULTILINE)

CONVENTIONAL_PATTERN = re.compile(
    r"(feat|fix|docs|style|refactor|perf|test|build|ci|chore|revert)+(!|\(\w+\))?:\s?\w.+"
)

BULLET_MARKER = "*"


def format_date(value: date | datetime | None = None) -> str:
    """Format a date as DD-MM-YYYY.

    Defaults to today in UTC.
    """
    if value is None:
        value = datetime.now(UTC)
    return f"{value.day:02d}-{value.month:02d}-{value.year:04d}"


def format_entry(version: str, entry_date: str, body: str) -> str:
    """Render a single changelog entry block."""
    return f"## [{version}] - {entry_date}\n\n{body}\n"


def find_first_entry(document: str) -> int | None:
    """Return the offset of the first entry heading, or None."""
    match = ENTRY_HEADING_PATTERN.search(document)
    return match.start() if match else None


def insert_entry(
    document: str,
    version: str,
    entry_date: str,
    body: str,
    *,
    require_existing: bool = False,
) -> str:
    """Insert a new entry into a changelog document.

    Args:
        document: Current changelog text
        version: Version the entry is for
        entry_date: Already formatted date (see format_date)
        body: Entry body, usually the output of sanitize_message
        require_existing: Fail instead of appending when the document has
            no entry heading yet

    Returns:
        The updated document. Calling this twice with the same arguments
        adds the entry twice.

    Raises:
        MalformedDocumentError: If require_existing is set and no entry
            heading is found
    """
    block = format_entry(version, entry_date, body)
    offset = find_first_entry(document)

    if offset is not None:
        logger.debug("Inserting entry for %s at offset %d", version, offset)
        return document[:offset] + block + "\n" + document[offset:]

    if require_existing:
        raise MalformedDocumentError("Changelog has no existing entry to insert before")

    if not document.strip():
        logger.debug("Changelog is empty, writing first entry for %s", version)
        return block

    logger.debug("No entry heading found, appending entry for %s", version)
    return document.rstrip("\n") + "\n\n" + block


def sanitize_message(raw: str | None, *, conventional_only: bool = False) -> str:
    """Reduce a pull-request message to its bullet-point paragraphs.

    Paragraphs are separated by blank lines. Only paragraphs starting with
    ``*`` are kept. With conventional_only, a kept paragraph must also
    contain a Conventional Commits header such as ``feat(api): ...``.

    An empty string is returned when nothing qualifies.
    """
    if not raw:
        return ""

    paragraphs = raw.replace("\r\n", "\n").split("\n\n")
    kept = [p for p in paragraphs if p.startswith(BULLET_MARKER)]
    if conventional_only:
        kept = [p for p in kept if CONVENTIONAL_PATTERN.search(p)]

    return "\n\n".join(kept)
