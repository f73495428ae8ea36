"""Prefix registry commands."""

from __future__ import annotations

from pathlib import Path

import click
from rich.table import Table

from ..console import console
from ..paths import ScopeNotAvailableError
from ..paths import create_settings_manager
from ..paths import get_effective_scope
from .common import loader_from_context


@click.group(invoke_without_command=True)
@click.pass_context
def prefix(ctx: click.Context):
    """Manage symbol prefix directories."""
    if ctx.invoked_subcommand is None:
        click.echo("\n" + ctx.get_help())
        ctx.exit()


@prefix.command("list")
@click.pass_context
def prefix_list(ctx: click.Context):
    """List prefixes from all settings scopes, in resolution order."""
    prefixes = loader_from_context(ctx).get_prefixes()

    if not prefixes:
        console.print("[yellow]No prefixes configured[/yellow]")
        console.print("\nAdd one with:")
        console.print("  [cyan]autoload prefix add <prefix> <dir>[/cyan]")
        return

    table = Table(title="Symbol Prefixes", show_header=True, header_style="bold cyan")
    table.add_column("#", style="dim", justify="right")
    table.add_column("Prefix", style="green")
    table.add_column("Directory", style="magenta", overflow="fold")

    for prefix_name, dirs in prefixes.items():
        for i, directory in enumerate(dirs):
            table.add_row(str(i), prefix_name, directory)

    console.print(table)


@prefix.command("add")
@click.argument("prefix_name", metavar="PREFIX")
@click.argument("directory", type=click.Path(file_okay=False))
@click.option("--local", "scope_flag", flag_value="local", help="Add locally (just you)")
@click.option("--project", "scope_flag", flag_value="project", help="Add for project (team)")
@click.option("--global", "scope_flag", flag_value="global", help="Add globally (all projects)")
def prefix_add(prefix_name: str, directory: str, scope_flag: str | None):
    """Append DIRECTORY to the directories searched for PREFIX."""
    try:
        scope = get_effective_scope(scope_flag)  # type: ignore[arg-type]
    except ScopeNotAvailableError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise click.Abort() from e

    resolved = str(Path(directory).expanduser().resolve())
    if not Path(resolved).is_dir():
        console.print(f"[yellow]Warning:[/yellow] {resolved} does not exist yet", soft_wrap=True)

    settings = create_settings_manager()
    settings.add_prefix(prefix_name, resolved, scope=scope)

    console.print(f"[green]✓ Added prefix {prefix_name}[/green]")
    console.print(f"  Directory: {resolved}", soft_wrap=True)
    console.print(f"  File: {settings.file_for_scope(scope)}", soft_wrap=True)
