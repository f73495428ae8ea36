"""Resolution commands: path, find, dirs and load."""

from __future__ import annotations

import click
from rich.markup import escape
from rich.table import Table

from ..console import console
from ..errors import AutoloadError
from ..errors import SymbolNotDefined
from ..host import SymbolHost
from ..inflector import to_relative_path
from ..ui.error_display import display_autoload_error
from ..ui.error_display import trail_table
from .common import loader_from_context


@click.command("path")
@click.argument("name")
def path_cmd(name: str):
    """Show the relative file path for a symbol NAME."""
    click.echo(to_relative_path(name))


@click.command("find")
@click.argument("name")
@click.option("--trail", "show_trail", is_flag=True, help="Show every location probed")
@click.pass_context
def find_cmd(ctx: click.Context, name: str, show_trail: bool):
    """Resolve the file that defines symbol NAME."""
    loader = loader_from_context(ctx)
    resolution = loader.find(name)

    if not resolution.found:
        console.print(f"[red]No file found for {name}[/red]")
        if resolution.trail:
            console.print("[dim]Locations tried:[/dim]")
            console.print(trail_table(resolution.trail))
        ctx.exit(1)

    click.echo(resolution.path)
    console.print(f"[dim]source: {resolution.source}[/dim]")
    if show_trail and resolution.trail:
        console.print(trail_table(resolution.trail))


@click.command("dirs")
@click.argument("namespace")
@click.pass_context
def dirs_cmd(ctx: click.Context, namespace: str):
    """List the directories that hold NAMESPACE."""
    loader = loader_from_context(ctx)
    found = loader.find_dirs(namespace)

    if not found:
        console.print(f"[yellow]No directories found for {namespace}[/yellow]")
        return

    for directory in found:
        click.echo(directory)


@click.command("load")
@click.argument("names", nargs=-1, required=True)
@click.option("--verbose", "-v", is_flag=True, help="Show traceback on failure")
@click.pass_context
def load_cmd(ctx: click.Context, names: tuple[str, ...], verbose: bool):
    """Load one or more symbols and show what was loaded."""
    host = SymbolHost()
    loader = loader_from_context(ctx, host=host)
    loader.register()

    try:
        for name in names:
            try:
                host.lookup(name)
            except AutoloadError as e:
                display_autoload_error(console, e, verbose=verbose)
                ctx.exit(1)
            except SymbolNotDefined as e:
                if e.name != name:
                    # A use() inside the executed file found nothing
                    _display_load_failure(name, e, verbose)
                    ctx.exit(1)
                # Silent and normal modes skip undeclared symbols
                console.print(f"[yellow]Skipped {name} (mode {loader.get_mode().value})[/yellow]")
            except Exception as e:
                _display_load_failure(name, e, verbose)
                ctx.exit(1)
    finally:
        loader.unregister()

    loaded = loader.get_loaded()
    if not loaded:
        console.print("[dim]Nothing loaded[/dim]")
        return

    table = Table(title="Loaded Symbols", show_header=True, header_style="bold cyan")
    table.add_column("Symbol", style="green")
    table.add_column("File", style="magenta", overflow="fold")
    for name, path in loaded.items():
        table.add_row(name, path)
    console.print(table)


def _display_load_failure(name: str, error: Exception, verbose: bool) -> None:
    """Report an exception raised while executing the file for ``name``."""
    console.print(f"[red]Error loading {name}:[/red] {escape(f'{type(error).__name__}: {error}')}")
    if verbose:
        console.print_exception()
