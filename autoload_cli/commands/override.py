"""Exact symbol override commands."""

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
def override(ctx: click.Context):
    """Manage exact symbol -> file overrides."""
    if ctx.invoked_subcommand is None:
        click.echo("\n" + ctx.get_help())
        ctx.exit()


@override.command("list")
@click.pass_context
def override_list(ctx: click.Context):
    """List effective overrides (local beats project beats global)."""
    overrides = loader_from_context(ctx).get_overrides()

    if not overrides:
        console.print("[yellow]No overrides configured[/yellow]")
        return

    table = Table(title="Symbol Overrides", show_header=True, header_style="bold cyan")
    table.add_column("Symbol", style="green")
    table.add_column("File", style="magenta", overflow="fold")
    for name, path in overrides.items():
        table.add_row(name, path)
    console.print(table)


@override.command("set")
@click.argument("name")
@click.argument("path", type=click.Path(dir_okay=False))
@click.option("--local", "scope_flag", flag_value="local", help="Set locally (just you)")
@click.option("--project", "scope_flag", flag_value="project", help="Set for project (team)")
@click.option("--global", "scope_flag", flag_value="global", help="Set globally (all projects)")
def override_set(name: str, path: str, scope_flag: str | None):
    """Map symbol NAME directly to file PATH."""
    try:
        scope = get_effective_scope(scope_flag)  # type: ignore[arg-type]
    except ScopeNotAvailableError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise click.Abort() from e

    resolved = str(Path(path).expanduser().resolve())
    settings = create_settings_manager()
    settings.set_override(name, resolved, scope=scope)

    console.print(f"[green]✓ Override set for {name}[/green]")
    console.print(f"  File: {resolved}", soft_wrap=True)


@override.command("remove")
@click.argument("name")
@click.option("--local", "scope_flag", flag_value="local", help="Remove from local")
@click.option("--project", "scope_flag", flag_value="project", help="Remove from project")
@click.option("--global", "scope_flag", flag_value="global", help="Remove from global")
def override_remove(name: str, scope_flag: str | None):
    """Remove the override for symbol NAME."""
    try:
        scope = get_effective_scope(scope_flag)  # type: ignore[arg-type]
    except ScopeNotAvailableError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise click.Abort() from e

    if create_settings_manager().remove_override(name, scope=scope):
        console.print(f"[green]✓ Removed override for {name}[/green]")
    else:
        console.print(f"[yellow]No {scope} override for {name}[/yellow]")
