"""Implementation of the 'classify', 'changelog' and 'check' commands."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from rich.markup import escape

from release_bump.config import load_config
from release_bump.core.changelog import format_date, insert_entry, sanitize_message
from release_bump.core.classify import classify
from release_bump.core.version import ChangeType, validate
from release_bump.exceptions import InvalidSemVerError, ReleaseBumpError

if TYPE_CHECKING:
    from rich.console import Console


def run_classify(
    path: str | None,
    title: str | None,
    labels: list[str] | None,
    console: Console,
    err_console: Console,
) -> ChangeType:
    """Print the change type for a title or a set of labels.

    UNKNOWN is printed, not treated as an error.
    """
    try:
        config = load_config(Path(path) if path else None)
    except ReleaseBumpError as e:
        err_console.print(f"[red]Error loading config:[/] {escape(str(e))}")
        raise SystemExit(1) from e

    change_type = classify(labels if labels else title, config)
    style = "yellow" if change_type is ChangeType.UNKNOWN else "green"
    console.print(f"[{style}]{change_type}[/]")
    return change_type


def run_changelog(
    file: str,
    version: str,
    message: str,
    entry_date: str | None,
    conventional_only: bool,
    require_existing: bool,
    console: Console,
    err_console: Console,
) -> None:
    """Insert a changelog entry for version into file."""
    if not validate(version):
        err_console.print(f"[red]Error:[/] {escape(str(InvalidSemVerError(version)))}")
        raise SystemExit(1)

    changelog_path = Path(file)
    body = sanitize_message(message, conventional_only=conventional_only)
    if not body:
        console.print("[yellow]Warning:[/] no bullet points found in the changelog message.")

    try:
        existing = changelog_path.read_text(encoding="utf-8") if changelog_path.exists() else ""
        updated = insert_entry(
            existing,
            version,
            entry_date or format_date(),
            body,
            require_existing=require_existing,
        )
        changelog_path.write_text(updated, encoding="utf-8")
    except (ReleaseBumpError, OSError) as e:
        err_console.print(f"[red]Error updating changelog:[/] {escape(str(e))}")
        raise SystemExit(1) from e

    console.print(f"  [green]✓[/] Added {version} to {changelog_path}")


def run_check(version: str, console: Console, err_console: Console) -> None:
    """Exit with status 1 unless version is a valid semantic version."""
    if not validate(version):
        err_console.print(f"[red]✗[/] {escape(version)} is not a valid semantic version")
        raise SystemExit(1)
    console.print(f"[green]✓[/] {version} is a valid semantic version")
