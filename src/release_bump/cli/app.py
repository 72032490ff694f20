"""Command-line interface for release-bump."""

from __future__ import annotations

import logging
from datetime import datetime
from enum import Enum
from typing import Annotated

import typer
from rich.console import Console
from rich.logging import RichHandler

from release_bump import __version__
from release_bump.core.version import ChangeType

app = typer.Typer(
    name="release-bump",
    help="Semantic version bumps and changelog entries from PR titles and labels.",
    no_args_is_help=True,
    rich_markup_mode="rich",
)

console = Console()
err_console = Console(stderr=True)

DATE_FORMAT = "%d-%m-%Y"


class BumpChoice(str, Enum):
    major = "major"
    minor = "minor"
    patch = "patch"


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"release-bump {__version__}")
        raise typer.Exit()


def _check_date(value: str | None) -> str | None:
    if value is None:
        return None
    try:
        parsed = datetime.strptime(value, DATE_FORMAT)
    except ValueError as e:
        raise typer.BadParameter("expected a real date as DD-MM-YYYY") from e
    return parsed.strftime(DATE_FORMAT)


def setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


@app.callback()
def main(
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Enable debug logging.")] = False,
    version: Annotated[
        bool,
        typer.Option("--version", callback=_version_callback, is_eager=True, help="Show version."),
    ] = False,
) -> None:
    """release-bump: bump versions and write changelog entries."""
    setup_logging(verbose)


@app.command()
def bump(
    path: Annotated[str | None, typer.Argument(help="Project directory.")] = None,
    title: Annotated[
        str | None, typer.Option("--title", "-t", help="Commit or PR title to classify.")
    ] = None,
    label: Annotated[
        list[str] | None, typer.Option("--label", "-l", help="PR label (repeatable).")
    ] = None,
    bump_type: Annotated[
        BumpChoice | None, typer.Option("--type", help="Skip classification.")
    ] = None,
    message: Annotated[
        str | None, typer.Option("--message", "-m", help="Changelog message.")
    ] = None,
    changelog: Annotated[
        bool | None,
        typer.Option(
            "--changelog/--no-changelog", help="Add a changelog entry (overrides config)."
        ),
    ] = None,
    entry_date: Annotated[
        str | None,
        typer.Option("--date", callback=_check_date, help="Changelog date (DD-MM-YYYY)."),
    ] = None,
    execute: Annotated[bool, typer.Option("--execute", help="Write the changes.")] = False,
) -> None:
    """Bump the manifest version and optionally add a changelog entry."""
    from release_bump.cli.commands.bump import run_bump

    run_bump(
        path=path,
        execute=execute,
        title=title,
        labels=label,
        change_type=ChangeType(bump_type.value) if bump_type else None,
        message=message,
        changelog=changelog,
        entry_date=entry_date,
        console=console,
        err_console=err_console,
    )


@app.command()
def classify(
    title: Annotated[str | None, typer.Option("--title", "-t", help="Title to classify.")] = None,
    label: Annotated[
        list[str] | None, typer.Option("--label", "-l", help="Label (repeatable).")
    ] = None,
    path: Annotated[str | None, typer.Option("--path", help="Project directory.")] = None,
) -> None:
    """Print the change type for a title or label set."""
    from release_bump.cli.commands.standalone import run_classify

    run_classify(path=path, title=title, labels=label, console=console, err_console=err_console)


@app.command()
def changelog(
    file: Annotated[str, typer.Argument(help="Changelog file.")],
    version: Annotated[str, typer.Option("--version", help="Version of the entry.")],
    message: Annotated[str, typer.Option("--message", "-m", help="Entry message.")],
    entry_date: Annotated[
        str | None,
        typer.Option("--date", callback=_check_date, help="Entry date (DD-MM-YYYY)."),
    ] = None,
    conventional_only: Annotated[
        bool, typer.Option("--conventional-only", help="Keep only conventional bullets.")
    ] = False,
    require_existing: Annotated[
        bool, typer.Option("--require-existing", help="Fail if the file has no entries.")
    ] = False,
) -> None:
    """Insert an entry into a changelog file."""
    from release_bump.cli.commands.standalone import run_changelog

    run_changelog(
        file=file,
        version=version,
        message=message,
        entry_date=entry_date,
        conventional_only=conventional_only,
        require_existing=require_existing,
        console=console,
        err_console=err_console,
    )


@app.command()
def check(version: Annotated[str, typer.Argument(help="Version to validate.")]) -> None:
    """Validate a semantic version."""
    from release_bump.cli.commands.standalone import run_check

    run_check(version, console=console, err_console=err_console)
