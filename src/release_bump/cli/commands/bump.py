"""Implementation of the 'bump' command.

The bump command classifies a change, increments the manifest version
and optionally adds a changelog entry.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from rich.markup import escape
from rich.panel import Panel

from release_bump.cli.outputs import write_outputs
from release_bump.config import load_config, validate_changelog_request
from release_bump.core.changelog import format_date, insert_entry, sanitize_message
from release_bump.core.classify import (
    classify_from_labels,
    classify_from_text,
    recognized_triggers,
    require_change_type,
)
from release_bump.core.version import ChangeType, increment, validate
from release_bump.exceptions import InvalidSemVerError, ReleaseBumpError
from release_bump.project.manifest import (
    find_manifest,
    get_manifest_version,
    update_manifest_version,
)

if TYPE_CHECKING:
    from rich.console import Console

    from release_bump.config.models import ReleaseBumpConfig


def run_bump(
    path: str | None,
    execute: bool,
    title: str | None,
    labels: list[str] | None,
    change_type: ChangeType | None,
    message: str | None,
    changelog: bool | None,
    entry_date: str | None,
    console: Console,
    err_console: Console,
) -> str:
    """Run the bump command.

    Args:
        path: Optional path to project directory
        execute: Whether to actually write the changes
        title: Commit or pull-request title to classify
        labels: Label names to classify
        change_type: Pre-declared change type, skips classification
        message: Pull-request message for the changelog entry
        changelog: Override for changelog.enabled
        entry_date: Changelog date (DD-MM-YYYY), defaults to today
        console: Console for standard output
        err_console: Console for error output

    Returns:
        The new version
    """
    project_path = Path(path) if path else Path.cwd()

    # Load configuration
    try:
        config = load_config(project_path)
    except ReleaseBumpError as e:
        err_console.print(f"[red]Error loading config:[/] {escape(str(e))}")
        raise SystemExit(1) from e

    if changelog is not None:
        config = config.model_copy(
            update={"changelog": config.changelog.model_copy(update={"enabled": changelog})}
        )

    try:
        validate_changelog_request(config, message)
    except ReleaseBumpError as e:
        err_console.print(f"[red]Configuration error:[/] {escape(str(e))}")
        raise SystemExit(1) from e

    # Get current version
    try:
        manifest_path = _resolve_manifest(project_path, config)
        current_version = get_manifest_version(manifest_path)
        if not validate(current_version):
            raise InvalidSemVerError(current_version)
    except ReleaseBumpError as e:
        err_console.print(f"[red]Error getting version:[/] {escape(str(e))}")
        raise SystemExit(1) from e

    # Determine change type and next version
    try:
        resolved = _resolve_change_type(config, title, labels, change_type)
        new_version = increment(current_version, resolved)
    except ReleaseBumpError as e:
        err_console.print(f"[red]Error:[/] {escape(str(e))}")
        raise SystemExit(1) from e

    mode_str = "[green]EXECUTING[/]" if execute else "[yellow]DRY-RUN[/]"
    console.print(
        f"\n{mode_str} - {resolved} bump from [cyan]{current_version}[/] "
        f"to [green]{new_version}[/]\n"
    )

    changelog_path = project_path / config.changelog.path
    body = ""
    if config.add_changelog_entry:
        body = sanitize_message(message, conventional_only=config.changelog.conventional_only)
        if not body:
            console.print("[yellow]Warning:[/] no bullet points found in the changelog message.")

    if not execute:
        changes = f"  • Update version in [cyan]{manifest_path.name}[/]"
        if config.add_changelog_entry:
            changes += f"\n  • Add entry to [cyan]{config.changelog.path}[/]"
        console.print(
            Panel(
                f"[bold]Would make the following changes:[/]\n\n{changes}",
                title="[yellow]Dry Run Preview[/]",
                border_style="yellow",
            )
        )
        console.print("\n[dim]Run with [cyan]--execute[/] to apply these changes.[/]")
        write_outputs(current_version=current_version, new_version=new_version)
        return new_version

    # Build the new changelog before touching any file
    updated_changelog = None
    previous_changelog = None
    if config.add_changelog_entry:
        try:
            if changelog_path.exists():
                previous_changelog = changelog_path.read_text(encoding="utf-8")
            updated_changelog = insert_entry(
                previous_changelog or "",
                new_version,
                entry_date or format_date(),
                body,
                require_existing=config.changelog.require_existing,
            )
        except (ReleaseBumpError, OSError) as e:
            err_console.print(f"[red]Error preparing changelog:[/] {escape(str(e))}")
            raise SystemExit(1) from e

    # Actually apply changes, changelog first so a failure leaves the manifest alone
    if updated_changelog is not None:
        try:
            changelog_path.write_text(updated_changelog, encoding="utf-8")
            console.print(f"  [green]✓[/] Updated {config.changelog.path}")
        except OSError as e:
            err_console.print(f"[red]Error updating changelog:[/] {escape(str(e))}")
            raise SystemExit(1) from e

    try:
        update_manifest_version(manifest_path, new_version)
        console.print(f"  [green]✓[/] Updated version in {manifest_path.name}")
    except (ReleaseBumpError, OSError) as e:
        err_console.print(f"[red]Error updating {manifest_path.name}:[/] {escape(str(e))}")
        if updated_changelog is not None:
            _restore_changelog(changelog_path, previous_changelog)
            err_console.print(f"  [yellow]Reverted {config.changelog.path}[/]")
        raise SystemExit(1) from e

    write_outputs(current_version=current_version, new_version=new_version)

    console.print(
        Panel(
            f"[green]Successfully bumped to version {new_version}![/]",
            title="[green]Bump Complete[/]",
            border_style="green",
        )
    )
    return new_version


def _restore_changelog(changelog_path: Path, previous: str | None) -> None:
    """Put the changelog back the way it was before this run."""
    if previous is None:
        changelog_path.unlink(missing_ok=True)
    else:
        changelog_path.write_text(previous, encoding="utf-8")


def _resolve_manifest(project_path: Path, config: ReleaseBumpConfig) -> Path:
    """Use the configured manifest if present, else search the project."""
    configured = project_path / config.manifest
    if configured.is_file():
        return configured
    return find_manifest(project_path)


def _resolve_change_type(
    config: ReleaseBumpConfig,
    title: str | None,
    labels: list[str] | None,
    change_type: ChangeType | None,
) -> ChangeType:
    """Pick the change type from the first signal supplied.

    Raises:
        UnknownChangeTypeError: If the signal does not classify
    """
    if change_type is not None:
        return change_type

    if labels:
        resolved = classify_from_labels(
            labels, config.labels.major, config.labels.minor, config.labels.patch
        )
        return require_change_type(resolved, recognized_triggers(config, labels=True))

    resolved = classify_from_text(title, config.patterns.to_triggers())
    return require_change_type(resolved, recognized_triggers(config))
