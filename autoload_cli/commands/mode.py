"""Operating mode commands."""

from __future__ import annotations

import click

from ..console import console
from ..loader import Mode
from ..paths import ScopeNotAvailableError
from ..paths import create_settings_manager
from ..paths import get_effective_scope
from .common import loader_from_context


@click.group(invoke_without_command=True)
@click.pass_context
def mode(ctx: click.Context):
    """Show or change the autoload operating mode."""
    if ctx.invoked_subcommand is None:
        ctx.invoke(mode_show)


@mode.command("show")
@click.pass_context
def mode_show(ctx: click.Context):
    """Show the effective operating mode."""
    loader = loader_from_context(ctx)
    click.echo(loader.get_mode().value)


@mode.command("set")
@click.argument("value", type=click.Choice([m.value for m in Mode]))
@click.option("--local", "scope_flag", flag_value="local", help="Set locally (just you)")
@click.option("--project", "scope_flag", flag_value="project", help="Set for project (team)")
@click.option("--global", "scope_flag", flag_value="global", help="Set globally (all projects)")
def mode_set(value: str, scope_flag: str | None):
    """Persist the operating mode in settings (default: local)."""
    try:
        scope = get_effective_scope(scope_flag, default="local")  # type: ignore[arg-type]
    except ScopeNotAvailableError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise click.Abort() from e

    create_settings_manager().set_mode(value, scope=scope)
    console.print(f"[green]✓ Mode set to {value} ({scope})[/green]")
